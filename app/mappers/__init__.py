"""매퍼 패키지 — 엔티티별 DTO 변환기 싱글턴.

Mapper package — One EntityMapper singleton per entity type.
"""

from app.mappers.base import EntityMapper, parse_id
from app.models import Course, Exam, ExamResult, Instructor, Lesson, Registration, Student
from app.schemas.course import (
    CourseDetail,
    CourseResponse,
    CourseSummary,
    LessonDetail,
    LessonResponse,
    LessonSummary,
    RegistrationDetail,
    RegistrationResponse,
    RegistrationSummary,
)
from app.schemas.exam import (
    ExamResponse,
    ExamResultDetail,
    ExamResultResponse,
    ExamResultSummary,
    ExamSummary,
)
from app.schemas.people import (
    InstructorResponse,
    InstructorSummary,
    StudentResponse,
    StudentSummary,
)

student_mapper: EntityMapper[Student] = EntityMapper(Student, StudentSummary, StudentResponse)
instructor_mapper: EntityMapper[Instructor] = EntityMapper(Instructor, InstructorSummary, InstructorResponse)
course_mapper: EntityMapper[Course] = EntityMapper(Course, CourseSummary, CourseResponse, CourseDetail)
lesson_mapper: EntityMapper[Lesson] = EntityMapper(Lesson, LessonSummary, LessonResponse, LessonDetail)
exam_mapper: EntityMapper[Exam] = EntityMapper(Exam, ExamSummary, ExamResponse)
exam_result_mapper: EntityMapper[ExamResult] = EntityMapper(ExamResult, ExamResultSummary, ExamResultResponse, ExamResultDetail)
registration_mapper: EntityMapper[Registration] = EntityMapper(
    Registration, RegistrationSummary, RegistrationResponse, RegistrationDetail
)

__all__ = [
    "EntityMapper", "parse_id",
    "student_mapper", "instructor_mapper", "course_mapper", "lesson_mapper",
    "exam_mapper", "exam_result_mapper", "registration_mapper",
]
