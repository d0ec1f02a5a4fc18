# /app/models/alumni.py
from sqlalchemy import Column, Integer, String, ForeignKey, TIMESTAMP, func
from sqlalchemy.orm import relationship
from app.db.base import Base

UNKNOWN = "unknown"


class AlumniProfile(Base):
    __tablename__ = "alumni"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt 해시
    role = Column(String(50), nullable=False, default="alumni")
    date_of_birth = Column(String(50), nullable=False, default=UNKNOWN)

    graduation_year = Column(String(50), nullable=False, default=UNKNOWN)
    field_of_study = Column(String(255), nullable=False, default=UNKNOWN)
    profession = Column(String(255), nullable=False, default=UNKNOWN)
    industry = Column(String(255), nullable=False, default=UNKNOWN)
    job_location = Column(String(255), nullable=False, default=UNKNOWN)

    # 소셜 미디어 링크
    linkedin = Column(String(512), nullable=False, default=UNKNOWN)
    github = Column(String(512), nullable=False, default=UNKNOWN)
    twitter = Column(String(512), nullable=False, default=UNKNOWN)
    instagram = Column(String(512), nullable=False, default=UNKNOWN)
    portfolio = Column(String(512), nullable=False, default=UNKNOWN)

    profile_pic_public_id = Column(String(512), nullable=False, comment="S3 object key")
    profile_pic_url = Column(String(1023), nullable=False, comment="S3에 저장된 프로필 이미지 URL")

    # 연결된 기본 사용자 계정 (없을 수 있음)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    created_at = Column(TIMESTAMP, server_default=func.now())

    user = relationship("UserAccount", backref="alumni_profiles")
