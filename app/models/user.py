from sqlalchemy import Column, Integer, String
from app.db.base import Base

class UserAccount(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    profile_pic_public_id = Column(String(512), nullable=True)
    profile_pic_url = Column(String(1023), nullable=True)
