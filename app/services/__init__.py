"""서비스 패키지 — 엔티티 매니저 계층.

Service package — Entity manager layer.
Each manager validates a request DTO, maps it to an entity, stages the
repository call inside an explicit transaction, and reports the outcome as a
Result/DataResult. Managers only talk to the database through a UnitOfWork.
"""

from app.services.course_manager import CourseManager
from app.services.exam_manager import ExamManager
from app.services.exam_result_manager import ExamResultManager
from app.services.instructor_manager import InstructorManager
from app.services.lesson_manager import LessonManager
from app.services.registration_manager import RegistrationManager
from app.services.student_manager import StudentManager

__all__ = [
    "CourseManager",
    "ExamManager",
    "ExamResultManager",
    "InstructorManager",
    "LessonManager",
    "RegistrationManager",
    "StudentManager",
]
