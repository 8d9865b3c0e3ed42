"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
Contains one repository class per aggregate. Repositories are created by the
unit of work and share its session; nothing else constructs them.
"""

from app.repositories.course_repository import CourseRepository
from app.repositories.exam_repository import ExamRepository
from app.repositories.exam_result_repository import ExamResultRepository
from app.repositories.instructor_repository import InstructorRepository
from app.repositories.lesson_repository import LessonRepository
from app.repositories.registration_repository import RegistrationRepository
from app.repositories.student_repository import StudentRepository

__all__ = [
    "CourseRepository", "ExamRepository", "ExamResultRepository", "InstructorRepository",
    "LessonRepository", "RegistrationRepository", "StudentRepository",
]
