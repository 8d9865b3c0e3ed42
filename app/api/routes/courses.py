"""강좌 라우터 — 강좌 CRUD 및 상세 조회 엔드포인트.

Course Router — CRUD and detail endpoints for courses.
The detail projection carries the instructor summary and the lesson list.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_course_manager
from app.api.responses import outcome_response
from app.schemas.course import CourseCreate, CourseDelete, CourseUpdate
from app.services import CourseManager

router: APIRouter = APIRouter()

ManagerDep = Annotated[CourseManager, Depends(get_course_manager)]


@router.get("")
async def list_courses(manager: ManagerDep) -> JSONResponse:
    """강좌 목록 조회 (List courses)."""
    return outcome_response(await manager.get_all(track=False))


# "/{course_id}" 보다 먼저 등록해야 함 (must be registered before "/{course_id}")
@router.get("/detail")
async def list_course_details(manager: ManagerDep) -> JSONResponse:
    """강사와 수업을 포함한 강좌 상세 목록을 조회합니다.

    List courses with their instructor and lessons.
    """
    return outcome_response(await manager.get_all_detail(track=False))


@router.get("/{course_id}")
async def get_course(course_id: str, manager: ManagerDep) -> JSONResponse:
    """강좌 단건 조회 (Retrieve one course)."""
    return outcome_response(await manager.get_by_id(course_id, track=False))


@router.get("/{course_id}/detail")
async def get_course_detail(course_id: str, manager: ManagerDep) -> JSONResponse:
    """강좌 상세 조회 (Retrieve one course with instructor and lessons)."""
    return outcome_response(await manager.get_by_id_detail(course_id, track=False))


@router.post("")
async def create_course(data: CourseCreate, manager: ManagerDep) -> JSONResponse:
    return outcome_response(await manager.create(data))


@router.put("")
async def update_course(data: CourseUpdate, manager: ManagerDep) -> JSONResponse:
    return outcome_response(await manager.update(data))


@router.delete("")
async def delete_course(data: CourseDelete, manager: ManagerDep) -> JSONResponse:
    """강좌를 삭제합니다. 수업과 등록은 DB에서 함께 삭제됩니다.

    Delete a course; its lessons and registrations cascade in the database.
    """
    return outcome_response(await manager.remove(data))
