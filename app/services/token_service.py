import jwt
from datetime import datetime, timedelta
from fastapi import status
from fastapi.responses import JSONResponse

from app.models.alumni import AlumniProfile
from app.schemas.alumni import AlumniResponse
from app.core.config import settings


def create_access_token(data: dict) -> str:
    to_encode = data.copy()
    expire = datetime.utcnow() + timedelta(days=settings.SESSION_EXPIRE_DAYS)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def cookie_options() -> dict:
    return {
        "httponly": True,
        "secure": True,
        "samesite": "none",
    }


def send_token(alumni: AlumniProfile, message: str, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """
    세션 토큰을 발급하여 쿠키로 설정하고, 같은 응답 본문에 사용자 정보와 토큰을 담아 반환합니다.
    """
    token = create_access_token({"sub": str(alumni.id), "role": alumni.role})
    response = JSONResponse(
        status_code=status_code,
        content={
            "success": True,
            "message": message,
            "user": AlumniResponse.model_validate(alumni).model_dump(mode="json"),
            "token": token,
        },
    )
    response.set_cookie(
        settings.COOKIE_NAME,
        token,
        max_age=settings.SESSION_EXPIRE_DAYS * 24 * 60 * 60,
        **cookie_options(),
    )
    return response


def clear_token(response: JSONResponse) -> JSONResponse:
    response.delete_cookie(settings.COOKIE_NAME, **cookie_options())
    return response
