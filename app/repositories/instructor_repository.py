"""강사 레포지토리 — 강사 CRUD.

Instructor Repository — CRUD for instructors.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.people import Instructor
from app.repositories.base import BaseRepository


class InstructorRepository(BaseRepository[Instructor]):
    """강사 테이블 레포지토리 (Repository for the instructors table)."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Instructor, session)
