import io
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError
from starlette.datastructures import Headers, UploadFile

from app.core.errors import ExternalServiceError
from app.models.alumni import AlumniProfile
from app.services import mail_service
from app.services.image_store import ImageStore
from app.services.mail_service import Mailer, render_welcome_email
from app.utils.api_features import parse_page


def make_upload(filename="avatar.jpg", content_type="image/jpeg"):
    return UploadFile(
        file=io.BytesIO(b"fake-image"),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


def test_image_store_upload_returns_key_and_url():
    s3 = MagicMock()
    store = ImageStore("alumni-bucket", "ap-northeast-2", prefix="alumni_image", client=s3)
    image = store.upload(make_upload())

    assert image.public_id.startswith("alumni_image/")
    assert image.public_id.endswith(".jpg")
    assert image.url == f"https://alumni-bucket.s3.ap-northeast-2.amazonaws.com/{image.public_id}"
    args, kwargs = s3.upload_fileobj.call_args
    assert args[1:] == ("alumni-bucket", image.public_id)
    assert kwargs["ExtraArgs"] == {"ContentType": "image/jpeg"}


def test_image_store_destroy_and_error_translation():
    s3 = MagicMock()
    store = ImageStore("alumni-bucket", "ap-northeast-2", client=s3)
    store.destroy("alumni_image/abc.png")
    s3.delete_object.assert_called_once_with(Bucket="alumni-bucket", Key="alumni_image/abc.png")

    s3.delete_object.side_effect = ClientError({"Error": {"Code": "500", "Message": "boom"}}, "DeleteObject")
    with pytest.raises(ExternalServiceError) as exc_info:
        store.destroy("alumni_image/abc.png")
    assert exc_info.value.status_code == 500


def test_mailer_skips_without_host():
    assert Mailer(host=None, port=587).send("a@university.edu", "Hi", None, "<p>hi</p>") is False


def test_mailer_sends_html_only_message(monkeypatch):
    smtp_instance = MagicMock()
    smtp_cls = MagicMock()
    smtp_cls.return_value.__enter__.return_value = smtp_instance
    monkeypatch.setattr(mail_service.smtplib, "SMTP", smtp_cls)

    mailer = Mailer(host="smtp.university.edu", port=587, username="bot", password="pw", sender="bot@university.edu")
    assert mailer.send("a@university.edu", "Welcome", None, "<p>hello</p>") is True

    smtp_cls.assert_called_once_with("smtp.university.edu", 587, timeout=15)
    smtp_instance.starttls.assert_called_once()
    smtp_instance.login.assert_called_once_with("bot", "pw")
    msg = smtp_instance.send_message.call_args[0][0]
    assert msg["To"] == "a@university.edu"
    parts = msg.get_payload()
    assert [p.get_content_subtype() for p in parts] == ["html"]


def test_welcome_email_escapes_profile_fields():
    alumni = AlumniProfile(
        first_name="<b>Jane</b>", last_name="Doe",
        graduation_year="2020", field_of_study="CS", profession="unknown",
    )
    html = render_welcome_email(alumni, login_url="https://alumni.example/login")
    assert "&lt;b&gt;Jane&lt;/b&gt;" in html
    assert "https://alumni.example/login" in html
    assert "2020" in html


@pytest.mark.parametrize("value,expected", [(None, 1), ("2", 2), ("abc", 1), ("0", 1), ("-3", 1)])
def test_parse_page(value, expected):
    assert parse_page(value) == expected
