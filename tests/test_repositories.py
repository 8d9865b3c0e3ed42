"""레포지토리 테스트.

Repository tests — Tracking, detail eager loading, and the constant number
of SELECT round trips a detail fetch needs regardless of row count.
"""

import uuid
from datetime import date, timedelta

import pytest
from sqlalchemy.exc import InvalidRequestError

from app.models import Course, Instructor, Lesson
from app.unit_of_work import UnitOfWork


async def _seed_courses(session_factory, count: int, lessons_per_course: int) -> None:
    async with session_factory() as session:
        for n in range(count):
            assigned = Instructor(name=f"Instructor {n}")
            session.add(assigned)
            await session.flush()
            course = Course(name=f"Course {n}", instructor_id=assigned.id)
            session.add(course)
            await session.flush()
            for k in range(lessons_per_course):
                session.add(Lesson(
                    title=f"Lesson {n}.{k}",
                    course_id=course.id,
                    lesson_date=date(2026, 3, 1) + timedelta(days=k),
                    duration_minutes=60,
                ))
        await session.commit()


class TestTracking:
    """track 옵션 테스트."""

    async def test_tracked_rows_stay_in_session(self, uow: UnitOfWork, student):
        rows = await uow.students.get_all(track=True)
        assert rows and all(r in uow.session for r in rows)

    async def test_untracked_rows_are_detached(self, uow: UnitOfWork, student):
        rows = await uow.students.get_all(track=False)
        assert rows and not any(r in uow.session for r in rows)

    async def test_get_by_id_missing_returns_none(self, uow: UnitOfWork, student):
        assert await uow.students.get_by_id(uuid.uuid4()) is None


class TestDetail:
    """상세 조회(즉시 로딩) 테스트."""

    async def test_plain_fetch_does_not_lazy_load(self, uow: UnitOfWork, course, lessons):
        fetched = await uow.courses.get_by_id(course.id)
        with pytest.raises(InvalidRequestError):
            fetched.lessons

    async def test_detail_fetch_loads_relations(self, uow: UnitOfWork, course, lessons):
        fetched = await uow.courses.get_by_id_detail(course.id, track=False)
        assert fetched.instructor.id == course.instructor_id
        assert [lesson.title for lesson in fetched.lessons] == ["Arrays", "Linked Lists"]

    async def test_detail_select_count_is_constant(self, session_factory, new_uow, query_counter):
        """1건과 여러 건에서 SELECT 횟수가 동일."""
        await _seed_courses(session_factory, count=1, lessons_per_course=1)
        query_counter.reset()
        async with new_uow() as unit:
            assert len(await unit.courses.get_all_detail(track=False)) == 1
        single = query_counter.selects

        await _seed_courses(session_factory, count=5, lessons_per_course=4)
        query_counter.reset()
        async with new_uow() as unit:
            assert len(await unit.courses.get_all_detail(track=False)) == 6
        assert query_counter.selects == single

    async def test_registration_detail_is_one_select(self, new_uow, registration, query_counter):
        query_counter.reset()
        async with new_uow() as unit:
            rows = await unit.registrations.get_all_detail(track=False)
        assert rows[0].student.name == "Ada Kim"
        assert rows[0].course.name == "Data Structures"
        assert query_counter.selects == 1

    async def test_untracked_detail_related_rows_are_detached(self, uow: UnitOfWork, registration):
        rows = await uow.registrations.get_all_detail(track=False)
        assert rows[0].student not in uow.session
        assert rows[0].course not in uow.session

    async def test_untracked_course_detail_readable_after_unit_exit(self, new_uow, course, lessons):
        """작업 단위 종료 후에도 강사와 수업을 읽을 수 있음."""
        async with new_uow() as unit:
            fetched = await unit.courses.get_by_id_detail(course.id, track=False)
        assert fetched.instructor.name == "Grace Lee"
        assert [lesson.title for lesson in fetched.lessons] == ["Arrays", "Linked Lists"]

    async def test_untracked_lesson_and_result_detail_readable_after_unit_exit(self, new_uow, lessons, exam_result):
        async with new_uow() as unit:
            lesson_rows = await unit.lessons.get_all_detail(track=False)
            result = await unit.exam_results.get_by_id_detail(exam_result.id, track=False)
        assert {row.course.name for row in lesson_rows} == {"Data Structures"}
        assert result.student.name == "Ada Kim"
        assert result.exam.name == "Midterm"


class TestReferentialActions:
    """DB 외래키 동작 테스트 (CASCADE / SET NULL)."""

    async def test_deleting_course_removes_lessons_and_registrations(self, uow, new_uow, course, lessons, registration):
        await uow.courses.remove(Course(id=course.id))
        assert await uow.commit() == 1

        async with new_uow() as check:
            assert await check.lessons.get_all() == []
            assert await check.registrations.get_all() == []

    async def test_deleting_instructor_unassigns_course(self, uow, new_uow, course, instructor):
        await uow.instructors.remove(Instructor(id=instructor.id))
        assert await uow.commit() == 1

        async with new_uow() as check:
            stored = await check.courses.get_by_id(course.id)
            assert stored.instructor_id is None
