"""수강 등록 라우터 — 등록 CRUD 및 상세 조회 엔드포인트.

Registration Router — CRUD and detail endpoints for registrations.
The detail projection carries the student and course summaries.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_registration_manager
from app.api.responses import outcome_response
from app.schemas.course import RegistrationCreate, RegistrationDelete, RegistrationUpdate
from app.services import RegistrationManager

router: APIRouter = APIRouter()

ManagerDep = Annotated[RegistrationManager, Depends(get_registration_manager)]


@router.get("")
async def list_registrations(manager: ManagerDep) -> JSONResponse:
    return outcome_response(await manager.get_all(track=False))


@router.get("/detail")
async def list_registration_details(manager: ManagerDep) -> JSONResponse:
    """학생/강좌 정보를 포함한 등록 상세 목록 (List registrations with student and course)."""
    return outcome_response(await manager.get_all_detail(track=False))


@router.get("/{registration_id}")
async def get_registration(registration_id: str, manager: ManagerDep) -> JSONResponse:
    return outcome_response(await manager.get_by_id(registration_id, track=False))


@router.get("/{registration_id}/detail")
async def get_registration_detail(registration_id: str, manager: ManagerDep) -> JSONResponse:
    return outcome_response(await manager.get_by_id_detail(registration_id, track=False))


@router.post("")
async def create_registration(data: RegistrationCreate, manager: ManagerDep) -> JSONResponse:
    """수강 등록을 생성합니다. 가격은 음수 불가.

    Create a registration. A negative price answers 400 without touching the database.
    """
    return outcome_response(await manager.create(data))


@router.put("")
async def update_registration(data: RegistrationUpdate, manager: ManagerDep) -> JSONResponse:
    return outcome_response(await manager.update(data))


@router.delete("")
async def delete_registration(data: RegistrationDelete, manager: ManagerDep) -> JSONResponse:
    return outcome_response(await manager.remove(data))
