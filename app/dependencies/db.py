from typing import Generator

from sqlalchemy.orm import Session

from app.db.session import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """ 요청 단위 DB 세션 """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
