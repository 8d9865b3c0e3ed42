"""시험 결과 레포지토리 — 시험 결과 CRUD 및 상세 쿼리.

Exam Result Repository — CRUD and detail queries for exam results.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload
from sqlalchemy.orm.interfaces import LoaderOption

from app.models.exam import ExamResult
from app.repositories.base import BaseRepository


class ExamResultRepository(BaseRepository[ExamResult]):
    """시험 결과 테이블 레포지토리 (Repository for the exam_results table)."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(ExamResult, session)

    def detail_options(self) -> list[LoaderOption]:
        # 학생 및 시험 JOIN — Student and exam in the same SELECT
        return [joinedload(ExamResult.student), joinedload(ExamResult.exam)]
