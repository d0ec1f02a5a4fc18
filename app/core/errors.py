# /app/core/errors.py
from fastapi import HTTPException, status


class AppError(HTTPException):
    """
    서비스 계층에서 발생시키는 공통 예외.
    message 와 status_code 를 가지며, main.py 에 등록된 핸들러가
    {"success": false, "message": ...} 형태로 응답합니다.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(status_code=status_code or self.status_code, detail=message)
        self.message = message


class BadRequestError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT


class ConsistencyError(NotFoundError):
    # 레코드가 짝(counterpart) 없이 존재했던 경우. 404 로 응답하지만 원인은 다름
    pass


class ExternalServiceError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
