"""시험 라우터 — 시험 CRUD 엔드포인트.

Exam Router — CRUD endpoints for exams.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_exam_manager
from app.api.responses import outcome_response
from app.schemas.exam import ExamCreate, ExamDelete, ExamUpdate
from app.services import ExamManager

router: APIRouter = APIRouter()

ManagerDep = Annotated[ExamManager, Depends(get_exam_manager)]


@router.get("")
async def list_exams(manager: ManagerDep) -> JSONResponse:
    """시험 목록 조회 (List exams)."""
    return outcome_response(await manager.get_all(track=False))


@router.get("/{exam_id}")
async def get_exam(exam_id: str, manager: ManagerDep) -> JSONResponse:
    """시험 단건 조회 (Retrieve one exam)."""
    return outcome_response(await manager.get_by_id(exam_id, track=False))


@router.post("")
async def create_exam(data: ExamCreate, manager: ManagerDep) -> JSONResponse:
    return outcome_response(await manager.create(data))


@router.put("")
async def update_exam(data: ExamUpdate, manager: ManagerDep) -> JSONResponse:
    return outcome_response(await manager.update(data))


@router.delete("")
async def delete_exam(data: ExamDelete, manager: ManagerDep) -> JSONResponse:
    """시험을 삭제합니다. 성적은 DB에서 함께 삭제됩니다.

    Delete an exam; its results cascade in the database.
    """
    return outcome_response(await manager.remove(data))
