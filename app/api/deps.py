"""FastAPI 의존성 주입 모듈 — 작업 단위와 엔티티 매니저.

FastAPI dependency injection module — Unit of work and entity managers.
Each request gets its own UnitOfWork; the dependency enters it before the
endpoint runs and exits it (rolling back anything unresolved and closing the
session) after the response is produced. Managers built for the same
request share that unit of work.

Tests replace get_unit_of_work through app.dependency_overrides.
"""

from typing import Annotated, AsyncIterator

from fastapi import Depends

from app.database import async_session
from app.services import (
    CourseManager,
    ExamManager,
    ExamResultManager,
    InstructorManager,
    LessonManager,
    RegistrationManager,
    StudentManager,
)
from app.unit_of_work import UnitOfWork


async def get_unit_of_work() -> AsyncIterator[UnitOfWork]:
    """요청 범위의 작업 단위를 제공합니다.

    Yield a request-scoped unit of work.

    Yields:
        UnitOfWork: 활성 상태의 작업 단위 (Entered unit of work)
    """
    async with UnitOfWork(async_session) as uow:
        yield uow


UnitOfWorkDep = Annotated[UnitOfWork, Depends(get_unit_of_work)]


def get_student_manager(uow: UnitOfWorkDep) -> StudentManager:
    return StudentManager(uow)


def get_instructor_manager(uow: UnitOfWorkDep) -> InstructorManager:
    return InstructorManager(uow)


def get_course_manager(uow: UnitOfWorkDep) -> CourseManager:
    return CourseManager(uow)


def get_lesson_manager(uow: UnitOfWorkDep) -> LessonManager:
    return LessonManager(uow)


def get_exam_manager(uow: UnitOfWorkDep) -> ExamManager:
    return ExamManager(uow)


def get_exam_result_manager(uow: UnitOfWorkDep) -> ExamResultManager:
    return ExamResultManager(uow)


def get_registration_manager(uow: UnitOfWorkDep) -> RegistrationManager:
    return RegistrationManager(uow)
