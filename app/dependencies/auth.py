from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from app.core.config import settings
from app.core.errors import UnauthorizedError

# 쿠키가 없을 때만 Authorization 헤더를 사용
security = HTTPBearer(auto_error=False)


def get_current_alumni_id(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> int:
    token = request.cookies.get(settings.COOKIE_NAME)
    if not token and credentials:
        token = credentials.credentials
    if not token:
        raise UnauthorizedError("Please login to access this resource")
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
        alumni_id: str = payload.get("sub")
        if alumni_id is None:
            raise UnauthorizedError("Invalid token payload")
        return int(alumni_id)
    except (JWTError, ValueError):
        raise UnauthorizedError("Could not validate credentials")
