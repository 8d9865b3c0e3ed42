"""학생 및 강사 관련 Pydantic 요청/응답 스키마 정의.

Student and Instructor Pydantic request/response schema definitions.

Request schemas keep identifiers and required text as plain strings so the
manager, not the HTTP layer, decides whether they are empty or malformed.
Response schemas are built from ORM rows (from_attributes).
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


# === 학생 (Student) 스키마 ===

class StudentCreate(BaseModel):
    """학생 생성 요청 스키마.

    Student creation request schema.

    Attributes:
        name: 학생 이름 (Student name, non-blank)
        national_id: 식별 번호 (National id, digits only)
        birth_date: 생년월일 (Date of birth, not in the future)
    """

    name: str
    national_id: str
    birth_date: date


class StudentUpdate(StudentCreate):
    """학생 수정 요청 스키마 (전체 교체).

    Student update request schema — full replacement by id.
    """

    id: str  # 수정 대상 UUID 문자열 (Target UUID as string)


class StudentDelete(BaseModel):
    """학생 삭제 요청 스키마 (Student delete request schema)."""

    id: str


class StudentSummary(BaseModel):
    """학생 목록 응답 스키마 (Student list item)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str


class StudentResponse(BaseModel):
    """학생 단건 응답 스키마.

    Single student response schema.
    """

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    national_id: str
    birth_date: date
    created_at: datetime | None = None


# === 강사 (Instructor) 스키마 ===

class InstructorCreate(BaseModel):
    """강사 생성 요청 스키마.

    Instructor creation request schema.

    Attributes:
        name: 강사 이름 (Instructor name, non-blank)
        email: 이메일 (Contact email, optional)
    """

    name: str
    email: str | None = None


class InstructorUpdate(InstructorCreate):
    """강사 수정 요청 스키마 (Instructor update, full replacement)."""

    id: str


class InstructorDelete(BaseModel):
    """강사 삭제 요청 스키마 (Instructor delete request schema)."""

    id: str


class InstructorSummary(BaseModel):
    """강사 목록 응답 스키마 (Instructor list item)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str


class InstructorResponse(InstructorSummary):
    """강사 단건 응답 스키마 (Single instructor response)."""

    email: str | None = None
    created_at: datetime | None = None
