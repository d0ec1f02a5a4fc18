# /app/schemas/alumni.py
from datetime import datetime
from typing import List, Optional

from fastapi import Form
from pydantic import BaseModel, EmailStr

from app.models.alumni import UNKNOWN


class AlumniCreate(BaseModel):
    first_name: str
    last_name: str
    email: EmailStr
    password: str
    date_of_birth: str = UNKNOWN
    role: str = "alumni"
    graduation_year: str = UNKNOWN
    field_of_study: str = UNKNOWN
    profession: str = UNKNOWN
    industry: str = UNKNOWN
    job_location: str = UNKNOWN
    linkedin: str = UNKNOWN
    github: str = UNKNOWN
    twitter: str = UNKNOWN
    instagram: str = UNKNOWN
    portfolio: str = UNKNOWN

    @classmethod
    def as_form(
        cls,
        first_name: str = Form(...),
        last_name: str = Form(...),
        email: str = Form(...),
        password: str = Form(...),
        date_of_birth: str = Form(UNKNOWN),
        role: str = Form("alumni"),
        graduation_year: str = Form(UNKNOWN),
        field_of_study: str = Form(UNKNOWN),
        profession: str = Form(UNKNOWN),
        industry: str = Form(UNKNOWN),
        job_location: str = Form(UNKNOWN),
        linkedin: str = Form(UNKNOWN),
        github: str = Form(UNKNOWN),
        twitter: str = Form(UNKNOWN),
        instagram: str = Form(UNKNOWN),
        portfolio: str = Form(UNKNOWN),
    ):
        return cls(
            first_name=first_name,
            last_name=last_name,
            email=email,
            password=password,
            date_of_birth=date_of_birth,
            role=role,
            graduation_year=graduation_year,
            field_of_study=field_of_study,
            profession=profession,
            industry=industry,
            job_location=job_location,
            linkedin=linkedin,
            github=github,
            twitter=twitter,
            instagram=instagram,
            portfolio=portfolio,
        )


class AlumniLoginRequest(BaseModel):
    # 누락 시 서비스에서 400 으로 응답하기 위해 Optional
    email: Optional[str] = None
    password: Optional[str] = None


class AlumniResponse(BaseModel):
    """ password 는 포함하지 않음 """
    id: int
    first_name: str
    last_name: str
    email: str
    role: str
    date_of_birth: str
    graduation_year: str
    field_of_study: str
    profession: str
    industry: str
    job_location: str
    linkedin: str
    github: str
    twitter: str
    instagram: str
    portfolio: str
    profile_pic_public_id: str
    profile_pic_url: str
    user_id: Optional[int] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class AlumniDetailResponse(BaseModel):
    success: bool = True
    alumni: AlumniResponse


class AlumniListResponse(BaseModel):
    # 키 이름은 기존 클라이언트 호환을 위해 camelCase 유지
    success: bool = True
    alumnis: List[AlumniResponse]
    alumniCount: int
    resultPerPage: int
    filteredAlumni: int
    filteredAlumniCount: int


class AlumniMessageResponse(BaseModel):
    success: bool = True
    message: str


class AlumniLogoutResponse(AlumniMessageResponse):
    isAlumniAuthenticated: bool = False
