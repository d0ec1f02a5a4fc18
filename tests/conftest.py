import smtplib

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.db.base import Base
from app.dependencies.db import get_db
from app.dependencies.services import get_image_store, get_mailer
from app.models.alumni import AlumniProfile
from app.services.image_store import RemoteImage
from app.services.token_service import create_access_token


class FakeImageStore:
    """ S3 대신 업로드/삭제 호출만 기록 """

    def __init__(self):
        self.uploaded = []
        self.destroyed = []

    def upload(self, file):
        key = f"alumni_image/fake-{len(self.uploaded) + 1}.png"
        self.uploaded.append(key)
        return RemoteImage(public_id=key, url=f"https://bucket.example/{key}")

    def destroy(self, public_id):
        self.destroyed.append(public_id)


class FakeMailer:
    def __init__(self):
        self.sent = []
        self.fail = False

    def send(self, to, subject, text, html):
        if self.fail:
            raise smtplib.SMTPException("smtp down")
        self.sent.append({"to": to, "subject": subject, "text": text, "html": html})
        return True


@pytest.fixture()
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def image_store():
    return FakeImageStore()


@pytest.fixture()
def mailer():
    return FakeMailer()


@pytest.fixture()
def client(db_session, image_store, mailer):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_image_store] = lambda: image_store
    app.dependency_overrides[get_mailer] = lambda: mailer
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def make_alumni(db_session):
    """ 비밀번호 해시 없이 프로필을 바로 생성 """
    counter = {"n": 0}

    def _make(**kwargs):
        counter["n"] += 1
        n = counter["n"]
        fields = {
            "first_name": f"Alumni{n}",
            "last_name": "Kim",
            "email": f"alumni{n}@university.edu",
            "password": "not-a-real-hash",
            "profile_pic_public_id": f"alumni_image/seed-{n}.png",
            "profile_pic_url": f"https://bucket.example/alumni_image/seed-{n}.png",
        }
        fields.update(kwargs)
        alumni = AlumniProfile(**fields)
        db_session.add(alumni)
        db_session.commit()
        db_session.refresh(alumni)
        return alumni

    return _make


@pytest.fixture()
def auth_headers():
    def _headers(alumni_id: int) -> dict:
        token = create_access_token({"sub": str(alumni_id), "role": "alumni"})
        return {"Authorization": f"Bearer {token}"}

    return _headers
