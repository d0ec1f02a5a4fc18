# /app/services/mail_service.py
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from html import escape
from typing import Optional

from app.core.config import settings
from app.models.alumni import AlumniProfile

logger = logging.getLogger(__name__)

WELCOME_SUBJECT = "Welcome to Alumni Network"


class Mailer:
    """설정된 SMTP 서버로 메일을 발송합니다."""

    def __init__(
        self,
        host: Optional[str],
        port: int,
        username: Optional[str] = None,
        password: Optional[str] = None,
        sender: str = "no-reply@alumni-network.local",
        use_tls: bool = True,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender = sender
        self.use_tls = use_tls

    def send(self, to: str, subject: str, text: Optional[str], html: Optional[str]) -> bool:
        """
        텍스트 본문(선택)과 HTML 본문(선택)을 담아 메일을 발송합니다.

        SMTP 호스트가 설정되지 않았으면 False 를 반환하고, SMTP 오류는 그대로 raise 합니다.
        """
        if not self.host:
            logger.warning(f"SMTP host not configured, skipping email to {to}: {subject}")
            return False

        msg = MIMEMultipart("alternative")
        msg["From"] = self.sender
        msg["To"] = to
        msg["Subject"] = subject
        if text is not None:
            msg.attach(MIMEText(text, "plain", "utf-8"))
        if html is not None:
            msg.attach(MIMEText(html, "html", "utf-8"))

        with smtplib.SMTP(self.host, self.port, timeout=15) as server:
            if self.use_tls:
                server.starttls()
            if self.username and self.password:
                server.login(self.username, self.password)
            server.send_message(msg, to_addrs=[to])

        logger.info(f"Email sent to {to}: {subject}")
        return True


def render_welcome_email(alumni: AlumniProfile, login_url: str = settings.LOGIN_URL) -> str:
    return f"""
      <div style="font-family: Arial, sans-serif; line-height: 1.6; color: #333;">
        <h1 style="text-align: center; color: #4CAF50;">Welcome to the Alumni Network!</h1>
        <p>Dear <strong>{escape(alumni.first_name)} {escape(alumni.last_name)}</strong>,</p>
        <p>We are thrilled to have you join our alumni community. As a valued member, you can connect, collaborate, and grow with fellow alumni. Stay updated on events, opportunities, and news from our network.</p>
        <p><strong>Your Profile Highlights:</strong></p>
        <ul>
          <li><strong>Graduation Year:</strong> {escape(alumni.graduation_year)}</li>
          <li><strong>Field of Study:</strong> {escape(alumni.field_of_study)}</li>
          <li><strong>Current Profession:</strong> {escape(alumni.profession)}</li>
        </ul>
        <p>You can now <a href="{login_url}" style="color: #4CAF50; text-decoration: none;">login</a> to your account and start connecting with other alumni.</p>
        <p style="text-align: center;">Best Regards,<br /><strong>Your Alumni Team</strong></p>
      </div>
    """
