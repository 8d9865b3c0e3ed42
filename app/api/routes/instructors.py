"""강사 라우터 — 강사 CRUD 엔드포인트.

Instructor Router — CRUD endpoints for instructors.
Deleting an instructor leaves their courses in place with no instructor.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_instructor_manager
from app.api.responses import outcome_response
from app.schemas.people import InstructorCreate, InstructorDelete, InstructorUpdate
from app.services import InstructorManager

router: APIRouter = APIRouter()

ManagerDep = Annotated[InstructorManager, Depends(get_instructor_manager)]


@router.get("")
async def list_instructors(manager: ManagerDep) -> JSONResponse:
    """강사 목록 조회 (List instructors)."""
    return outcome_response(await manager.get_all(track=False))


@router.get("/{instructor_id}")
async def get_instructor(instructor_id: str, manager: ManagerDep) -> JSONResponse:
    """강사 단건 조회 (Retrieve one instructor)."""
    return outcome_response(await manager.get_by_id(instructor_id, track=False))


@router.post("")
async def create_instructor(data: InstructorCreate, manager: ManagerDep) -> JSONResponse:
    return outcome_response(await manager.create(data))


@router.put("")
async def update_instructor(data: InstructorUpdate, manager: ManagerDep) -> JSONResponse:
    return outcome_response(await manager.update(data))


@router.delete("")
async def delete_instructor(data: InstructorDelete, manager: ManagerDep) -> JSONResponse:
    return outcome_response(await manager.remove(data))
