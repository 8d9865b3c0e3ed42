"""작업 단위(Unit of Work) — 레포지토리와 트랜잭션 경계를 하나로 묶음.

Unit of Work — One session, every repository, one transactional boundary.
This is the only component that holds a database session. A unit of work
serves a single logical operation (one request) and cannot be reused after
it exits.

Usage:
    async with UnitOfWork(async_session) as uow:
        async with uow.begin_transaction() as transaction:
            await uow.students.update(student)
            if await uow.commit() > 0:
                await transaction.commit()
            else:
                await transaction.rollback()
"""

from types import TracebackType

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.repositories import (
    CourseRepository,
    ExamRepository,
    ExamResultRepository,
    InstructorRepository,
    LessonRepository,
    RegistrationRepository,
    StudentRepository,
)


class TransactionHandle:
    """명시적 트랜잭션 범위 — commit 또는 rollback 중 정확히 하나로 종료.

    Explicit atomic scope opened by UnitOfWork.begin_transaction().
    Resolved by exactly one of commit() or rollback(). Leaving the
    ``async with`` block unresolved, whether by return, exception, or
    cancellation, rolls back before the exit continues.
    """

    def __init__(self, uow: "UnitOfWork") -> None:
        self._uow: UnitOfWork = uow
        self._resolved: bool = False

    @property
    def is_resolved(self) -> bool:
        return self._resolved

    async def __aenter__(self) -> "TransactionHandle":
        self._uow._open_transaction(self)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            if not self._resolved:
                await self.rollback()
        finally:
            self._uow._release_transaction(self)

    async def commit(self) -> None:
        """트랜잭션을 커밋합니다 (Commit the scope's changes)."""
        self._ensure_unresolved()
        await self._uow.session.commit()
        self._resolved = True

    async def rollback(self) -> None:
        """트랜잭션을 롤백합니다 (Discard every change made in the scope)."""
        self._ensure_unresolved()
        self._resolved = True
        await self._uow.session.rollback()

    def _ensure_unresolved(self) -> None:
        if self._resolved:
            raise RuntimeError("Transaction already committed or rolled back")


class UnitOfWork:
    """레포지토리 집합과 커밋/트랜잭션을 제공하는 작업 단위.

    Aggregates all repositories behind one session.

    Attributes:
        students, instructors, courses, lessons, exams, exam_results, registrations:
            세션을 공유하는 레포지토리 (Repositories sharing this unit's session)
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory: async_sessionmaker[AsyncSession] = session_factory
        self._session: AsyncSession | None = None
        self._transaction: TransactionHandle | None = None
        self._closed: bool = False

    async def __aenter__(self) -> "UnitOfWork":
        if self._closed or self._session is not None:
            raise RuntimeError("UnitOfWork cannot be entered twice")
        self._session = self._session_factory()
        self._students = StudentRepository(self._session)
        self._instructors = InstructorRepository(self._session)
        self._courses = CourseRepository(self._session)
        self._lessons = LessonRepository(self._session)
        self._exams = ExamRepository(self._session)
        self._exam_results = ExamResultRepository(self._session)
        self._registrations = RegistrationRepository(self._session)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        session: AsyncSession = self.session
        try:
            # 커밋되지 않은 작업 폐기 — Discard anything left uncommitted
            if session.in_transaction():
                await session.rollback()
        finally:
            await session.close()
            self._session = None
            self._transaction = None
            self._closed = True

    @property
    def session(self) -> AsyncSession:
        return self._require_active()

    def _require_active(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork is not active; use it as 'async with UnitOfWork(...)'")
        return self._session

    # 레포지토리 접근자 — 활성 상태에서만 사용 가능 (Usable only while the unit is active)
    @property
    def students(self) -> StudentRepository:
        self._require_active()
        return self._students

    @property
    def instructors(self) -> InstructorRepository:
        self._require_active()
        return self._instructors

    @property
    def courses(self) -> CourseRepository:
        self._require_active()
        return self._courses

    @property
    def lessons(self) -> LessonRepository:
        self._require_active()
        return self._lessons

    @property
    def exams(self) -> ExamRepository:
        self._require_active()
        return self._exams

    @property
    def exam_results(self) -> ExamResultRepository:
        self._require_active()
        return self._exam_results

    @property
    def registrations(self) -> RegistrationRepository:
        self._require_active()
        return self._registrations

    @property
    def in_transaction(self) -> bool:
        """명시적 트랜잭션이 열려 있는지 여부 (Whether an explicit scope is open)."""
        return self._transaction is not None

    def begin_transaction(self) -> TransactionHandle:
        """명시적 트랜잭션 핸들을 반환합니다. ``async with``로 사용.

        Return a handle for an explicit atomic scope; enter it with ``async with``.
        """
        return TransactionHandle(self)

    async def commit(self) -> int:
        """스테이징된 변경을 반영하고 영향받은 행 수를 반환합니다.

        Flush every insert, update, and delete staged since the last commit
        and return how many rows they touch. Inside an explicit transaction
        the changes stay uncommitted until the handle commits; otherwise the
        session commits here.

        Returns:
            int: 영향받은 행 수, 0이면 변경 없음 (Affected row count, 0 = nothing changed)
        """
        session: AsyncSession = self.session
        affected: int = len(session.new) + len(session.dirty) + len(session.deleted)
        if self._transaction is not None:
            await session.flush()
        else:
            await session.commit()
        return affected

    def _open_transaction(self, handle: TransactionHandle) -> None:
        self._require_active()
        if self._transaction is not None:
            raise RuntimeError("An explicit transaction is already open on this UnitOfWork")
        self._transaction = handle

    def _release_transaction(self, handle: TransactionHandle) -> None:
        if self._transaction is handle:
            self._transaction = None
