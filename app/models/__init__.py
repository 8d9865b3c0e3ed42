"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for create_all and
relationship resolution.

Modules:
    people: 학생, 강사 (Student, Instructor)
    course: 과정, 수업, 수강 등록 (Course, Lesson, Registration)
    exam: 시험, 시험 결과 (Exam, ExamResult)
"""

from app.models.people import Student, Instructor
from app.models.course import Course, Lesson, Registration
from app.models.exam import Exam, ExamResult

__all__ = [
    "Student", "Instructor",
    "Course", "Lesson", "Registration",
    "Exam", "ExamResult",
]
