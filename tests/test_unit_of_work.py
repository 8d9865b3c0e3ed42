"""작업 단위 테스트.

Unit of Work tests — Affected-row counting, explicit transactions,
rollback on failure/exception/cancellation, and misuse errors.
"""

import asyncio
import uuid
from datetime import date

import pytest

from app.models import Student
from app.unit_of_work import UnitOfWork


def _student(name: str = "Ada Kim") -> Student:
    return Student(name=name, national_id="12345678901", birth_date=date(2000, 5, 17))


async def _count_students(new_uow) -> int:
    async with new_uow() as check:
        return len(await check.students.get_all(track=False))


class TestCommit:
    """commit() 영향 행 수 테스트."""

    async def test_commit_counts_staged_inserts(self, uow: UnitOfWork, new_uow):
        await uow.students.create(_student("A"))
        await uow.students.create(_student("B"))
        assert await uow.commit() == 2
        assert await _count_students(new_uow) == 2

    async def test_commit_without_changes_returns_zero(self, uow: UnitOfWork):
        assert await uow.commit() == 0

    async def test_commit_counts_update_and_delete(self, uow: UnitOfWork, student):
        stored = await uow.students.get_by_id(student.id)
        stored.name = "Renamed"
        assert await uow.commit() == 1

        await uow.students.remove(Student(id=student.id))
        assert await uow.commit() == 1

    async def test_update_of_missing_row_stages_nothing(self, uow: UnitOfWork):
        await uow.students.update(Student(id=uuid.uuid4(), name="Nobody", national_id="1", birth_date=date(2000, 1, 1)))
        assert await uow.commit() == 0


class TestExplicitTransaction:
    """명시적 트랜잭션 테스트."""

    async def test_commit_inside_transaction_defers_until_handle_commits(self, uow: UnitOfWork, new_uow):
        async with uow.begin_transaction() as transaction:
            await uow.students.create(_student())
            assert await uow.commit() == 1
            # 아직 커밋 전 — other sessions must not see the row yet
            assert await _count_students(new_uow) == 0
            await transaction.commit()

        assert await _count_students(new_uow) == 1

    async def test_rollback_discards_flushed_changes(self, uow: UnitOfWork, new_uow):
        async with uow.begin_transaction() as transaction:
            await uow.students.create(_student())
            await uow.commit()
            await transaction.rollback()

        assert await _count_students(new_uow) == 0

    async def test_zero_row_commit_leaves_no_change(self, uow: UnitOfWork, student, new_uow):
        async with uow.begin_transaction() as transaction:
            await uow.students.remove(Student(id=uuid.uuid4()))
            assert await uow.commit() == 0
            await transaction.rollback()

        async with new_uow() as check:
            stored = await check.students.get_by_id(student.id, track=False)
        assert stored is not None and stored.name == student.name

    async def test_exception_rolls_back(self, uow: UnitOfWork, new_uow):
        with pytest.raises(ValueError):
            async with uow.begin_transaction():
                await uow.students.create(_student())
                await uow.commit()
                raise ValueError("boom")

        assert await _count_students(new_uow) == 0
        assert uow.in_transaction is False

    async def test_unresolved_exit_rolls_back(self, uow: UnitOfWork, new_uow):
        async with uow.begin_transaction() as transaction:
            await uow.students.create(_student())
            await uow.commit()

        assert transaction.is_resolved is True
        assert await _count_students(new_uow) == 0

    async def test_cancellation_rolls_back_and_propagates(self, uow: UnitOfWork, new_uow):
        staged = asyncio.Event()

        async def _work() -> None:
            async with uow.begin_transaction():
                await uow.students.create(_student())
                await uow.commit()
                staged.set()
                await asyncio.sleep(60)

        task = asyncio.create_task(_work())
        await staged.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert uow.in_transaction is False
        assert await _count_students(new_uow) == 0

    async def test_nested_transaction_raises(self, uow: UnitOfWork):
        async with uow.begin_transaction():
            with pytest.raises(RuntimeError):
                async with uow.begin_transaction():
                    pass

    async def test_handle_resolves_once(self, uow: UnitOfWork):
        async with uow.begin_transaction() as transaction:
            await transaction.commit()
            with pytest.raises(RuntimeError):
                await transaction.rollback()


class TestLifecycle:
    """작업 단위 수명 주기 테스트."""

    async def test_repositories_share_the_session(self, uow: UnitOfWork):
        assert uow.students.session is uow.session
        assert uow.registrations.session is uow.session

    async def test_repository_outside_context_raises(self, new_uow):
        unit = new_uow()
        with pytest.raises(RuntimeError):
            unit.students

    async def test_closed_unit_cannot_be_reentered(self, new_uow):
        unit = new_uow()
        async with unit:
            pass
        with pytest.raises(RuntimeError):
            async with unit:
                pass
        with pytest.raises(RuntimeError):
            unit.session

    async def test_exit_discards_uncommitted_work(self, new_uow):
        async with new_uow() as unit:
            await unit.students.create(_student())
            await unit.session.flush()

        assert await _count_students(new_uow) == 0
