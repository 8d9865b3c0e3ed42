"""수업 라우터 — 수업 CRUD 및 상세 조회 엔드포인트.

Lesson Router — CRUD and detail endpoints for lessons.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_lesson_manager
from app.api.responses import outcome_response
from app.schemas.course import LessonCreate, LessonDelete, LessonUpdate
from app.services import LessonManager

router: APIRouter = APIRouter()

ManagerDep = Annotated[LessonManager, Depends(get_lesson_manager)]


@router.get("")
async def list_lessons(manager: ManagerDep) -> JSONResponse:
    return outcome_response(await manager.get_all(track=False))


@router.get("/detail")
async def list_lesson_details(manager: ManagerDep) -> JSONResponse:
    """소속 강좌를 포함한 수업 상세 목록 (List lessons with their course)."""
    return outcome_response(await manager.get_all_detail(track=False))


@router.get("/{lesson_id}")
async def get_lesson(lesson_id: str, manager: ManagerDep) -> JSONResponse:
    return outcome_response(await manager.get_by_id(lesson_id, track=False))


@router.get("/{lesson_id}/detail")
async def get_lesson_detail(lesson_id: str, manager: ManagerDep) -> JSONResponse:
    return outcome_response(await manager.get_by_id_detail(lesson_id, track=False))


@router.post("")
async def create_lesson(data: LessonCreate, manager: ManagerDep) -> JSONResponse:
    return outcome_response(await manager.create(data))


@router.put("")
async def update_lesson(data: LessonUpdate, manager: ManagerDep) -> JSONResponse:
    return outcome_response(await manager.update(data))


@router.delete("")
async def delete_lesson(data: LessonDelete, manager: ManagerDep) -> JSONResponse:
    return outcome_response(await manager.remove(data))
