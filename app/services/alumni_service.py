# /app/services/alumni_service.py
import logging
import smtplib
from typing import Mapping, Optional

from fastapi import UploadFile, status
from fastapi.responses import JSONResponse
from passlib.hash import bcrypt
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.errors import (
    BadRequestError,
    ConflictError,
    ConsistencyError,
    NotFoundError,
    UnauthorizedError,
)
from app.models.alumni import AlumniProfile
from app.models.job_posting import JobPosting
from app.models.user import UserAccount
from app.schemas.alumni import AlumniCreate, AlumniListResponse, AlumniResponse
from app.services.image_store import ImageStore
from app.services.mail_service import Mailer, WELCOME_SUBJECT, render_welcome_email
from app.services.token_service import send_token
from app.utils.api_features import ApiFeatures, parse_page

logger = logging.getLogger(__name__)

RESULT_PER_PAGE = 10
SEARCH_FIELDS = ("first_name", "last_name")
FILTER_FIELDS = (
    "role",
    "graduation_year",
    "field_of_study",
    "profession",
    "industry",
    "job_location",
    "first_name",
    "last_name",
    "email",
)


def get_alumni_by_email(db: Session, email: str) -> Optional[AlumniProfile]:
    """ 대소문자 구분 없이 이메일로 조회 (가입 시 도메인이 소문자로 정규화됨) """
    return db.query(AlumniProfile).filter(func.lower(AlumniProfile.email) == email.lower()).first()


def get_user_by_email(db: Session, email: str) -> Optional[UserAccount]:
    return db.query(UserAccount).filter(func.lower(UserAccount.email) == email.lower()).first()


def register_alumni(
    db: Session,
    alumni_in: AlumniCreate,
    image: Optional[UploadFile],
    image_store: ImageStore,
    mailer: Mailer,
) -> JSONResponse:
    # 1. 이메일 중복 체크
    if get_alumni_by_email(db, alumni_in.email):
        raise ConflictError("You are already registered as an Alumni")

    # 2. 프로필 이미지 필수
    if image is None or not image.filename:
        raise BadRequestError("Please upload an image file")

    # 3. 이미지 업로드 후 레코드 생성
    remote_image = image_store.upload(image)

    user = get_user_by_email(db, alumni_in.email)
    alumni = AlumniProfile(
        **alumni_in.model_dump(exclude={"password"}),
        password=bcrypt.hash(alumni_in.password),
        profile_pic_public_id=remote_image.public_id,
        profile_pic_url=remote_image.url,
        user_id=user.id if user else None,
    )
    db.add(alumni)
    db.commit()
    db.refresh(alumni)
    logger.info(f"Alumni registered: id={alumni.id}, email={alumni.email}")

    # 4. 환영 메일 (실패해도 가입은 성공 처리)
    try:
        mailer.send(alumni.email, WELCOME_SUBJECT, None, render_welcome_email(alumni))
    except (smtplib.SMTPException, OSError) as e:
        logger.warning(f"Welcome email to {alumni.email} failed: {e}")

    # 5. 토큰 발급
    return send_token(alumni, "Alumni Registered Successfully", status.HTTP_201_CREATED)


def authenticate_alumni(db: Session, email: Optional[str], password: Optional[str]) -> JSONResponse:
    if not email or not password:
        raise BadRequestError("Please enter email & password")

    alumni = get_alumni_by_email(db, email)
    # 어느 쪽이 틀렸는지 노출하지 않도록 동일한 메시지 사용
    if not alumni or not bcrypt.verify(password, alumni.password):
        logger.info(f"Alumni login failed - email: {email}")
        raise UnauthorizedError("Invalid Email or Password")

    logger.info(f"Alumni login - id: {alumni.id}")
    return send_token(alumni, f"Welcome back, {alumni.first_name}", status.HTTP_200_OK)


def get_alumni_by_id(db: Session, alumni_id: int) -> AlumniProfile:
    alumni = db.query(AlumniProfile).filter(AlumniProfile.id == alumni_id).first()
    if not alumni:
        raise NotFoundError("Alumni not found")
    return alumni


def get_alumni_profile(db: Session, alumni_id: int) -> AlumniProfile:
    """ 로그인한 사용자 본인의 프로필 """
    return get_alumni_by_id(db, alumni_id)


def list_alumni(db: Session, query_params: Mapping[str, str]) -> AlumniListResponse:
    """
    검색/필터 후 최신 등록순으로 페이지네이션합니다.

    정렬(id 역순), offset/limit, count 는 모두 DB 에서 처리합니다.
    """
    alumni_count = db.query(AlumniProfile).count()

    features = ApiFeatures(
        db.query(AlumniProfile),
        query_params,
        AlumniProfile,
        search_fields=SEARCH_FIELDS,
        filter_fields=FILTER_FIELDS,
    ).search().filter()
    filtered_count = features.query.count()

    page = parse_page(query_params.get("page"))
    alumnis = (
        features.query
        .order_by(AlumniProfile.id.desc())
        .offset((page - 1) * RESULT_PER_PAGE)
        .limit(RESULT_PER_PAGE)
        .all()
    )

    return AlumniListResponse(
        alumnis=[AlumniResponse.model_validate(a) for a in alumnis],
        alumniCount=alumni_count,
        resultPerPage=RESULT_PER_PAGE,
        filteredAlumni=filtered_count,
        filteredAlumniCount=filtered_count,
    )


def delete_alumni(db: Session, alumni_id: int, image_store: ImageStore) -> None:
    """
    동문 프로필과 연관 데이터를 삭제합니다.

    1. 프로필 조회 (없으면 404, 아무것도 삭제하지 않음)
    2. 연결된 사용자가 작성한 채용 공고 삭제
    3. 이메일로 사용자 계정 조회
    4. 계정이 없으면 프로필 이미지와 프로필을 삭제한 뒤 ConsistencyError
    5. 계정이 있으면 두 이미지와 두 레코드를 모두 삭제

    DB 변경은 한 번에 commit 되며, 이미지 삭제가 실패하면 rollback 됩니다.
    """
    alumni = get_alumni_by_id(db, alumni_id)

    try:
        if alumni.user_id is not None:
            deleted_jobs = (
                db.query(JobPosting)
                .filter(JobPosting.created_by == alumni.user_id)
                .delete(synchronize_session=False)
            )
            logger.info(f"Deleted {deleted_jobs} job postings created by user {alumni.user_id}")

        user = get_user_by_email(db, alumni.email)

        if not user:
            image_store.destroy(alumni.profile_pic_public_id)
            db.delete(alumni)
            db.commit()
            logger.warning(f"Alumni {alumni_id} had no user account; deleted anyway")
            raise ConsistencyError("User is an Alumni but record does not exist in database, deleting completely")

        # 프로필에 연결 id 가 없던 경우 계정이 작성한 공고도 정리
        if user.id != alumni.user_id:
            db.query(JobPosting).filter(JobPosting.created_by == user.id).delete(synchronize_session=False)

        image_store.destroy(alumni.profile_pic_public_id)
        if user.profile_pic_public_id:
            image_store.destroy(user.profile_pic_public_id)

        user_id = user.id
        db.delete(alumni)
        db.delete(user)
        db.commit()
    except ConsistencyError:
        raise
    except Exception:
        db.rollback()
        raise

    logger.info(f"Alumni deleted: id={alumni_id}, user_id={user_id}")
