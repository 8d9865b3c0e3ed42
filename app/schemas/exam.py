"""시험 및 시험 결과 관련 Pydantic 요청/응답 스키마 정의.

Exam and ExamResult Pydantic request/response schema definitions.
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from app.schemas.people import StudentSummary


# === 시험 (Exam) 스키마 ===

class ExamCreate(BaseModel):
    """시험 생성 요청 스키마.

    Exam creation request schema.

    Attributes:
        name: 시험 이름 (Exam name, non-blank)
        exam_date: 시험 일자 (Exam date, optional)
    """

    name: str
    exam_date: date | None = None


class ExamUpdate(ExamCreate):
    """시험 수정 요청 스키마 (Exam update, full replacement)."""

    id: str


class ExamDelete(BaseModel):
    """시험 삭제 요청 스키마 (Exam delete request schema)."""

    id: str


class ExamSummary(BaseModel):
    """시험 목록 응답 스키마 (Exam list item)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    exam_date: date | None = None


class ExamResponse(ExamSummary):
    """시험 단건 응답 스키마 (Single exam response)."""

    created_at: datetime | None = None


# === 시험 결과 (ExamResult) 스키마 ===

class ExamResultCreate(BaseModel):
    """시험 결과 생성 요청 스키마.

    Exam result creation request schema.

    Attributes:
        grade: 점수 (Grade, 0 to 100)
        student_id: 학생 UUID 문자열 (Student UUID as string)
        exam_id: 시험 UUID 문자열 (Exam UUID as string)
    """

    grade: int
    student_id: str
    exam_id: str


class ExamResultUpdate(ExamResultCreate):
    """시험 결과 수정 요청 스키마 (Exam result update, full replacement)."""

    id: str


class ExamResultDelete(BaseModel):
    """시험 결과 삭제 요청 스키마 (Exam result delete request schema)."""

    id: str


class ExamResultSummary(BaseModel):
    """시험 결과 목록 응답 스키마 (Exam result list item)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    grade: int


class ExamResultResponse(ExamResultSummary):
    """시험 결과 단건 응답 스키마 (Single exam result response)."""

    student_id: UUID
    exam_id: UUID
    created_at: datetime | None = None


class ExamResultDetail(ExamResultResponse):
    """시험 결과 상세 응답 — 학생 및 시험 포함 (Exam result with student and exam)."""

    student: StudentSummary
    exam: ExamSummary
