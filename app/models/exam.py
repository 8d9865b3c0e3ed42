"""시험 관련 SQLAlchemy ORM 모델 정의.

Exam-related SQLAlchemy ORM model definitions.

Tables:
    - exams: 시험 (Exams)
    - exam_results: 시험 결과 (Per-student grades, CASCADE on exam/student delete)
"""

import uuid
from datetime import date, datetime, timezone
from sqlalchemy import String, Date, DateTime, Integer, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Exam(Base):
    """시험 모델.

    Exam model — An assessment that students receive results for.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        name: 시험 이름 (Exam name)
        exam_date: 시험 일자 (Exam date, optional)
    """

    __tablename__ = "exams"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    exam_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))


class ExamResult(Base):
    """시험 결과 모델 — 학생별 시험 점수.

    Exam result model — A student's grade for one exam.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        grade: 점수 0~100 (Grade between 0 and 100)
        student_id: 학생 FK (Student foreign key)
        exam_id: 시험 FK (Exam foreign key)
    """

    __tablename__ = "exam_results"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    grade: Mapped[int] = mapped_column(Integer, nullable=False)
    student_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("students.id", ondelete="CASCADE"), nullable=False)
    exam_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("exams.id", ondelete="CASCADE"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    student = relationship("Student", lazy="raise")
    exam = relationship("Exam", lazy="raise")
