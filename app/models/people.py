"""사람 관련 SQLAlchemy ORM 모델 정의.

People-related SQLAlchemy ORM model definitions.
Includes Student (enrolled learners) and Instructor (course teachers).

Tables:
    - students: 학생 (Students, referenced by registrations and exam results)
    - instructors: 강사 (Instructors, optionally referenced by courses)
"""

import uuid
from datetime import date, datetime, timezone
from sqlalchemy import String, Date, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Student(Base):
    """학생 모델 — 과정 등록 및 시험 응시 주체.

    Student model — The learner who registers for courses and sits exams.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        name: 학생 이름 (Student full name)
        national_id: 주민 식별 번호, 숫자 문자열 (National identity number, digits only)
        birth_date: 생년월일 (Date of birth)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)
    """

    __tablename__ = "students"

    # 학생 고유 식별자 — Student unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 학생 이름 — Student display name (required)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 식별 번호 — Numeric string; leading zeros are rejected by the manager
    national_id: Mapped[str] = mapped_column(String(20), nullable=False)
    # 생년월일 — Date of birth
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))


class Instructor(Base):
    """강사 모델 — 과정을 담당하는 교수자.

    Instructor model — Teaches courses. Courses reference an instructor
    optionally; deleting an instructor leaves its courses unassigned.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        name: 강사 이름 (Instructor full name)
        email: 이메일 (Contact email, optional)
    """

    __tablename__ = "instructors"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
