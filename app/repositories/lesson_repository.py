"""수업 레포지토리 — 수업 CRUD 및 상세 쿼리.

Lesson Repository — CRUD and detail queries for lessons.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload
from sqlalchemy.orm.interfaces import LoaderOption

from app.models.course import Lesson
from app.repositories.base import BaseRepository


class LessonRepository(BaseRepository[Lesson]):
    """수업 테이블 레포지토리 (Repository for the lessons table)."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Lesson, session)

    def detail_options(self) -> list[LoaderOption]:
        # 소속 과정 JOIN — Parent course in the same SELECT
        return [joinedload(Lesson.course)]
