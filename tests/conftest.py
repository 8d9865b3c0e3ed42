"""테스트 인프라 — 임시 DB 엔진, 작업 단위, httpx 클라이언트 픽스처.

Test infrastructure — Temporary database engine, unit of work, and httpx client fixtures.
Defaults to a throwaway SQLite file through aiosqlite (foreign keys on, one
file per test); set TEST_DATABASE_URL to run against PostgreSQL.
Schema is created before each test and dropped after it.
"""

import os
from collections.abc import AsyncGenerator, Callable
from datetime import date
from decimal import Decimal
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.api.deps import get_unit_of_work
from app.database import Base, build_engine, create_all
from app.main import app
from app.models import Course, Exam, ExamResult, Instructor, Lesson, Registration, Student
from app.unit_of_work import UnitOfWork

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL: str | None = os.environ.get("TEST_DATABASE_URL")


class QueryCounter:
    """before_cursor_execute 리스너 — 실행된 SQL 문을 기록합니다.

    Records every statement sent to the database so tests can count round trips.
    """

    def __init__(self) -> None:
        self.statements: list[str] = []

    def __call__(self, conn: Any, cursor: Any, statement: str, parameters: Any, context: Any, executemany: bool) -> None:
        self.statements.append(statement)

    @property
    def selects(self) -> int:
        return sum(1 for s in self.statements if s.lstrip().upper().startswith("SELECT"))

    def reset(self) -> None:
        self.statements.clear()


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션 팩토리, 작업 단위, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 테스트마다 스키마를 생성/삭제합니다.

    Each unit of work gets its own connection, so uncommitted work in one
    is invisible to another, as with PostgreSQL.
    """
    url: str = TEST_DATABASE_URL or f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"
    eng = build_engine(url)

    await create_all(eng)
    yield eng

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def new_uow(session_factory: async_sessionmaker[AsyncSession]) -> Callable[[], UnitOfWork]:
    """새 작업 단위를 만드는 팩토리 (Factory for fresh, unentered units of work)."""
    return lambda: UnitOfWork(session_factory)


@pytest_asyncio.fixture
async def uow(new_uow: Callable[[], UnitOfWork]) -> AsyncGenerator[UnitOfWork, None]:
    """테스트 하나가 사용하는 활성 작업 단위."""
    async with new_uow() as unit:
        yield unit


@pytest.fixture
def query_counter(engine: AsyncEngine) -> Any:
    """엔진에 SQL 카운터를 연결합니다 (Attach a statement counter to the engine)."""
    counter = QueryCounter()
    event.listen(engine.sync_engine, "before_cursor_execute", counter)
    yield counter
    event.remove(engine.sync_engine, "before_cursor_execute", counter)


@pytest_asyncio.fixture
async def client(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — 작업 단위를 테스트 DB로 오버라이드합니다."""
    async def _override_get_unit_of_work() -> AsyncGenerator[UnitOfWork, None]:
        async with UnitOfWork(session_factory) as unit:
            yield unit

    app.dependency_overrides[get_unit_of_work] = _override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
async def _persist(session_factory: async_sessionmaker[AsyncSession], *rows: Base) -> None:
    async with session_factory() as session:
        session.add_all(rows)
        await session.commit()


@pytest_asyncio.fixture
async def student(session_factory):
    """테스트 학생을 생성합니다."""
    s = Student(name="Ada Kim", national_id="12345678901", birth_date=date(2000, 5, 17))
    await _persist(session_factory, s)
    return s


@pytest_asyncio.fixture
async def instructor(session_factory):
    """테스트 강사를 생성합니다."""
    i = Instructor(name="Grace Lee", email="grace@example.com")
    await _persist(session_factory, i)
    return i


@pytest_asyncio.fixture
async def course(session_factory, instructor):
    """강사가 배정된 테스트 과정을 생성합니다."""
    c = Course(
        name="Data Structures",
        start_date=date(2026, 3, 2),
        end_date=date(2026, 6, 19),
        is_active=True,
        instructor_id=instructor.id,
    )
    await _persist(session_factory, c)
    return c


@pytest_asyncio.fixture
async def lessons(session_factory, course):
    """과정에 수업 두 개를 생성합니다."""
    rows = [
        Lesson(title="Arrays", course_id=course.id, lesson_date=date(2026, 3, 3), duration_minutes=90),
        Lesson(title="Linked Lists", course_id=course.id, lesson_date=date(2026, 3, 10), duration_minutes=90),
    ]
    await _persist(session_factory, *rows)
    return rows


@pytest_asyncio.fixture
async def exam(session_factory):
    """테스트 시험을 생성합니다."""
    e = Exam(name="Midterm", exam_date=date(2026, 4, 20))
    await _persist(session_factory, e)
    return e


@pytest_asyncio.fixture
async def exam_result(session_factory, student, exam):
    """테스트 성적을 생성합니다."""
    r = ExamResult(grade=87, student_id=student.id, exam_id=exam.id)
    await _persist(session_factory, r)
    return r


@pytest_asyncio.fixture
async def registration(session_factory, student, course):
    """테스트 수강 등록을 생성합니다."""
    r = Registration(
        price=Decimal("250.00"),
        registration_date=date(2026, 2, 20),
        student_id=student.id,
        course_id=course.id,
    )
    await _persist(session_factory, r)
    return r
