"""시험 결과 라우터 — 성적 CRUD 및 상세 조회 엔드포인트.

Exam Result Router — CRUD and detail endpoints for exam results.
The detail projection carries the student and exam summaries.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_exam_result_manager
from app.api.responses import outcome_response
from app.schemas.exam import ExamResultCreate, ExamResultDelete, ExamResultUpdate
from app.services import ExamResultManager

router: APIRouter = APIRouter()

ManagerDep = Annotated[ExamResultManager, Depends(get_exam_result_manager)]


@router.get("")
async def list_exam_results(manager: ManagerDep) -> JSONResponse:
    return outcome_response(await manager.get_all(track=False))


@router.get("/detail")
async def list_exam_result_details(manager: ManagerDep) -> JSONResponse:
    """학생/시험 정보를 포함한 성적 상세 목록 (List results with student and exam)."""
    return outcome_response(await manager.get_all_detail(track=False))


@router.get("/{result_id}")
async def get_exam_result(result_id: str, manager: ManagerDep) -> JSONResponse:
    return outcome_response(await manager.get_by_id(result_id, track=False))


@router.get("/{result_id}/detail")
async def get_exam_result_detail(result_id: str, manager: ManagerDep) -> JSONResponse:
    return outcome_response(await manager.get_by_id_detail(result_id, track=False))


@router.post("")
async def create_exam_result(data: ExamResultCreate, manager: ManagerDep) -> JSONResponse:
    """성적을 등록합니다. 점수는 0~100 (Record a grade between 0 and 100)."""
    return outcome_response(await manager.create(data))


@router.put("")
async def update_exam_result(data: ExamResultUpdate, manager: ManagerDep) -> JSONResponse:
    return outcome_response(await manager.update(data))


@router.delete("")
async def delete_exam_result(data: ExamResultDelete, manager: ManagerDep) -> JSONResponse:
    return outcome_response(await manager.remove(data))
