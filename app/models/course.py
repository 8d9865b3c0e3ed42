"""과정 관련 SQLAlchemy ORM 모델 정의.

Course-related SQLAlchemy ORM model definitions.
Includes Course, its Lessons, and student Registrations.

All relationships use lazy="raise": related rows are only available when a
detail query eager-loads them, so a per-row lazy load fails loudly instead of
issuing one extra query per row.

Tables:
    - courses: 과정 (Courses, optionally taught by an instructor)
    - lessons: 수업 (Lessons under a course, CASCADE on course delete)
    - registrations: 수강 등록 (Student-course registrations with price)
"""

import uuid
from datetime import date, datetime, timezone
from decimal import Decimal
from sqlalchemy import String, Boolean, Date, DateTime, Integer, Numeric, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Course(Base):
    """과정 모델 — 수업과 등록의 상위 엔티티.

    Course model — Parent of lessons and registrations.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        name: 과정 이름 (Course name)
        start_date: 시작일 (Start date, optional)
        end_date: 종료일 (End date, optional, not before start_date)
        is_active: 활성 상태 (Active status flag)
        instructor_id: 담당 강사 FK (Instructor foreign key, optional)

    Relationships:
        instructor: 담당 강사 (Assigned instructor)
        lessons: 수업 목록 (Lessons, deleted by the database on course delete)
    """

    __tablename__ = "courses"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    # 담당 강사 FK — SET NULL: 강사 삭제 시 과정은 유지 (Course survives instructor delete)
    instructor_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("instructors.id", ondelete="SET NULL"), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    instructor = relationship("Instructor", lazy="raise")
    # passive_deletes: 하위 수업 삭제는 DB의 ON DELETE CASCADE에 위임 (Children removed by the database)
    lessons = relationship(
        "Lesson",
        back_populates="course",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="raise",
        order_by="Lesson.lesson_date",
    )


class Lesson(Base):
    """수업 모델 — 과정 하위의 개별 수업.

    Lesson model — A single session belonging to a course.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        title: 수업 제목 (Lesson title)
        course_id: 소속 과정 FK (Parent course foreign key)
        lesson_date: 수업 일자 (Lesson date, optional)
        duration_minutes: 수업 시간(분) (Duration in minutes, optional, positive)
    """

    __tablename__ = "lessons"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    # 소속 과정 FK — CASCADE: 과정 삭제 시 수업도 삭제
    course_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("courses.id", ondelete="CASCADE"), nullable=False)
    lesson_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    duration_minutes: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    course = relationship("Course", back_populates="lessons", lazy="raise")


class Registration(Base):
    """수강 등록 모델 — 학생과 과정의 연결 및 결제 금액.

    Registration model — Links a student to a course with the price paid.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        price: 등록 금액 (Price, non-negative, two decimal places)
        registration_date: 등록 일자 (Registration date)
        student_id: 학생 FK (Student foreign key)
        course_id: 과정 FK (Course foreign key)
    """

    __tablename__ = "registrations"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    registration_date: Mapped[date] = mapped_column(Date, nullable=False, default=date.today)
    student_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("students.id", ondelete="CASCADE"), nullable=False)
    course_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("courses.id", ondelete="CASCADE"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    student = relationship("Student", lazy="raise")
    course = relationship("Course", lazy="raise")
