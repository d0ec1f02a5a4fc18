from typing import Optional

from fastapi import APIRouter, Body, Depends, File, Request, UploadFile
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.dependencies.auth import get_current_alumni_id
from app.dependencies.db import get_db
from app.dependencies.services import get_image_store, get_mailer
from app.schemas.alumni import (
    AlumniCreate, AlumniLoginRequest,
    AlumniDetailResponse, AlumniListResponse,
    AlumniMessageResponse, AlumniLogoutResponse,
)
from app.services.alumni_service import (
    register_alumni, authenticate_alumni,
    get_alumni_profile, get_alumni_by_id,
    list_alumni, delete_alumni,
)
from app.services.image_store import ImageStore
from app.services.mail_service import Mailer
from app.services.token_service import clear_token

router = APIRouter()


@router.post("/register", status_code=201, summary="동문 회원가입")
def alumni_register(
    alumni_in: AlumniCreate = Depends(AlumniCreate.as_form),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    image_store: ImageStore = Depends(get_image_store),
    mailer: Mailer = Depends(get_mailer),
):
    """
    동문 회원가입 (multipart/form-data)
    - 프로필 이미지(image) 필수
    - 성공 시 토큰 쿠키 설정 후 201 반환
    """
    return register_alumni(db, alumni_in, image, image_store, mailer)


@router.post("/login", summary="동문 로그인")
def alumni_login(
    login_req: AlumniLoginRequest = Body(...),
    db: Session = Depends(get_db)
):
    return authenticate_alumni(db, login_req.email, login_req.password)


@router.get("/logout", response_model=AlumniLogoutResponse, summary="동문 로그아웃")
def alumni_logout():
    """
    로그인 여부와 관계없이 토큰 쿠키를 삭제합니다.
    """
    response = JSONResponse(
        status_code=200,
        content=AlumniLogoutResponse(message="Logged Out Successfully").model_dump(),
    )
    return clear_token(response)


@router.get("/me", response_model=AlumniDetailResponse, summary="내 프로필 조회")
def load_alumni_details(
    db: Session = Depends(get_db),
    alumni_id: int = Depends(get_current_alumni_id)
):
    return AlumniDetailResponse(alumni=get_alumni_profile(db, alumni_id))


@router.get("", response_model=AlumniListResponse, summary="동문 목록 조회 (검색/필터/페이지)")
def get_alumni_list(request: Request, db: Session = Depends(get_db)):
    """
    - keyword: 이름 검색
    - page: 페이지 번호 (기본 1, 페이지당 10명)
    - 그 외 쿼리 파라미터: 동등 조건 필터 (예: graduation_year=2020)
    """
    return list_alumni(db, request.query_params)


@router.get("/{alumni_id}", response_model=AlumniDetailResponse, summary="동문 상세 조회")
def get_alumni_details(alumni_id: int, db: Session = Depends(get_db)):
    return AlumniDetailResponse(alumni=get_alumni_by_id(db, alumni_id))


# 역할(관리자) 검사는 의도적으로 하지 않음: 로그인한 사용자면 삭제 가능
@router.delete(
    "/{alumni_id}",
    response_model=AlumniMessageResponse,
    dependencies=[Depends(get_current_alumni_id)],
    summary="동문 삭제",
)
def remove_alumni(
    alumni_id: int,
    db: Session = Depends(get_db),
    image_store: ImageStore = Depends(get_image_store),
):
    """
    동문 프로필, 작성한 채용 공고, 연결된 사용자 계정, 프로필 이미지를 삭제합니다.
    """
    delete_alumni(db, alumni_id, image_store)
    return AlumniMessageResponse(message="Alumni Deleted Successfully")
