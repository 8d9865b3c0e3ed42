"""학생 레포지토리 — 학생 CRUD.

Student Repository — CRUD for students. Students have no detail projection.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.people import Student
from app.repositories.base import BaseRepository


class StudentRepository(BaseRepository[Student]):
    """학생 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the students table.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Student, session)
