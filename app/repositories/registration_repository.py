"""수강 등록 레포지토리 — 수강 등록 CRUD 및 상세 쿼리.

Registration Repository — CRUD and detail queries for registrations.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload
from sqlalchemy.orm.interfaces import LoaderOption

from app.models.course import Registration
from app.repositories.base import BaseRepository


class RegistrationRepository(BaseRepository[Registration]):
    """수강 등록 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the registrations table.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Registration, session)

    def detail_options(self) -> list[LoaderOption]:
        """학생 및 과정을 한 번의 JOIN 쿼리로 즉시 로딩합니다.

        Eager-load student and course with joins, one round trip in total.
        """
        return [joinedload(Registration.student), joinedload(Registration.course)]
