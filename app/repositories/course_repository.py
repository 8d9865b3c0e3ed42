"""과정 레포지토리 — 과정 CRUD 및 상세 쿼리.

Course Repository — CRUD and detail queries for courses.
The detail query loads the instructor in the same SELECT (JOIN) and the
lessons with one extra SELECT ... IN, two round trips for any number of courses.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload
from sqlalchemy.orm.interfaces import LoaderOption

from app.models.course import Course
from app.repositories.base import BaseRepository


class CourseRepository(BaseRepository[Course]):
    """과정 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the courses table.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Course, session)

    def detail_options(self) -> list[LoaderOption]:
        """강사(JOIN) 및 수업 목록(SELECT IN)을 즉시 로딩합니다.

        Eager-load the instructor (joined) and lessons (select-in).
        """
        return [joinedload(Course.instructor), selectinload(Course.lessons)]
