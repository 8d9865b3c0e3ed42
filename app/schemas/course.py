"""과정, 수업, 수강 등록 관련 Pydantic 요청/응답 스키마 정의.

Course, Lesson and Registration Pydantic request/response schema definitions.
Detail responses nest the related aggregates loaded by the detail queries
(course + instructor + lessons, lesson + course, registration + student + course).
"""

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from app.schemas.people import InstructorSummary, StudentSummary


# === 과정 (Course) 스키마 ===

class CourseCreate(BaseModel):
    """과정 생성 요청 스키마.

    Course creation request schema.

    Attributes:
        name: 과정 이름 (Course name, non-blank)
        start_date: 시작일 (Start date, optional)
        end_date: 종료일 (End date, optional, not before start_date)
        is_active: 활성 상태 (Active flag)
        instructor_id: 담당 강사 UUID 문자열 (Instructor UUID as string, optional)
    """

    name: str
    start_date: date | None = None
    end_date: date | None = None
    is_active: bool = True
    instructor_id: str | None = None


class CourseUpdate(CourseCreate):
    """과정 수정 요청 스키마 (Course update, full replacement)."""

    id: str


class CourseDelete(BaseModel):
    """과정 삭제 요청 스키마 (Course delete request schema)."""

    id: str


class CourseSummary(BaseModel):
    """과정 목록 응답 스키마 (Course list item)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    is_active: bool


class CourseResponse(CourseSummary):
    """과정 단건 응답 스키마 (Single course response)."""

    start_date: date | None = None
    end_date: date | None = None
    instructor_id: UUID | None = None
    created_at: datetime | None = None


# === 수업 (Lesson) 스키마 ===

class LessonCreate(BaseModel):
    """수업 생성 요청 스키마.

    Lesson creation request schema.

    Attributes:
        title: 수업 제목 (Lesson title, non-blank)
        course_id: 소속 과정 UUID 문자열 (Parent course UUID as string)
        lesson_date: 수업 일자 (Lesson date, optional)
        duration_minutes: 수업 시간(분) (Duration in minutes, optional)
    """

    title: str
    course_id: str
    lesson_date: date | None = None
    duration_minutes: int | None = None


class LessonUpdate(LessonCreate):
    """수업 수정 요청 스키마 (Lesson update, full replacement)."""

    id: str


class LessonDelete(BaseModel):
    """수업 삭제 요청 스키마 (Lesson delete request schema)."""

    id: str


class LessonSummary(BaseModel):
    """수업 목록 응답 스키마 (Lesson list item)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    lesson_date: date | None = None


class LessonResponse(LessonSummary):
    """수업 단건 응답 스키마 (Single lesson response)."""

    course_id: UUID
    duration_minutes: int | None = None
    created_at: datetime | None = None


class LessonDetail(LessonResponse):
    """수업 상세 응답 — 소속 과정 포함 (Lesson with its course)."""

    course: CourseSummary


class CourseDetail(CourseResponse):
    """과정 상세 응답 — 강사 및 수업 목록 포함.

    Course detail with instructor and lessons, assembled from one detail query.
    """

    instructor: InstructorSummary | None = None
    lessons: list[LessonSummary] = []


# === 수강 등록 (Registration) 스키마 ===

class RegistrationCreate(BaseModel):
    """수강 등록 생성 요청 스키마.

    Registration creation request schema.

    Attributes:
        price: 등록 금액 (Price paid, must not be negative)
        student_id: 학생 UUID 문자열 (Student UUID as string)
        course_id: 과정 UUID 문자열 (Course UUID as string)
        registration_date: 등록 일자 (Registration date, defaults to today)
    """

    price: Decimal
    student_id: str
    course_id: str
    registration_date: date | None = None


class RegistrationUpdate(RegistrationCreate):
    """수강 등록 수정 요청 스키마 (Registration update, full replacement)."""

    id: str


class RegistrationDelete(BaseModel):
    """수강 등록 삭제 요청 스키마 (Registration delete request schema)."""

    id: str


class RegistrationSummary(BaseModel):
    """수강 등록 목록 응답 스키마 (Registration list item)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    price: Decimal
    registration_date: date


class RegistrationResponse(RegistrationSummary):
    """수강 등록 단건 응답 스키마 (Single registration response)."""

    student_id: UUID
    course_id: UUID
    created_at: datetime | None = None


class RegistrationDetail(RegistrationResponse):
    """수강 등록 상세 응답 — 학생 및 과정 포함 (Registration with student and course)."""

    student: StudentSummary
    course: CourseSummary
