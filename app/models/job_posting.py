from sqlalchemy import Column, Integer, String, ForeignKey, TIMESTAMP, func
from app.db.base import Base

class JobPosting(Base):
    __tablename__ = "job_postings"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    company = Column(String(255), nullable=True)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)  # 작성한 사용자 id
    created_at = Column(TIMESTAMP, server_default=func.now())
