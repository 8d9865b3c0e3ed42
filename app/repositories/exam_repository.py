"""시험 레포지토리 — 시험 CRUD.

Exam Repository — CRUD for exams.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.exam import Exam
from app.repositories.base import BaseRepository


class ExamRepository(BaseRepository[Exam]):
    """시험 테이블 레포지토리 (Repository for the exams table)."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Exam, session)
