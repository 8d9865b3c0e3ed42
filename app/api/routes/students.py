"""학생 라우터 — 학생 CRUD 엔드포인트.

Student Router — CRUD endpoints for students.
Every endpoint answers with the serialised outcome: 200 when the manager
reports success, 400 when it reports failure. Reads pass track=False since
nothing is modified afterwards.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_student_manager
from app.api.responses import outcome_response
from app.schemas.people import StudentCreate, StudentDelete, StudentUpdate
from app.services import StudentManager

router: APIRouter = APIRouter()

ManagerDep = Annotated[StudentManager, Depends(get_student_manager)]


@router.get("")
async def list_students(manager: ManagerDep) -> JSONResponse:
    """학생 목록을 조회합니다. 비어 있으면 400.

    List students. An empty list answers 400.
    """
    return outcome_response(await manager.get_all(track=False))


@router.get("/{student_id}")
async def get_student(student_id: str, manager: ManagerDep) -> JSONResponse:
    """학생 단건을 조회합니다.

    Retrieve one student. A malformed id or a missing row answers 400.
    """
    return outcome_response(await manager.get_by_id(student_id, track=False))


@router.post("")
async def create_student(data: StudentCreate, manager: ManagerDep) -> JSONResponse:
    """새 학생을 등록합니다.

    Create a student.
    """
    return outcome_response(await manager.create(data))


@router.put("")
async def update_student(data: StudentUpdate, manager: ManagerDep) -> JSONResponse:
    """학생 정보를 교체합니다 (본문의 id 기준).

    Replace the student identified by the body's id.
    """
    return outcome_response(await manager.update(data))


@router.delete("")
async def delete_student(data: StudentDelete, manager: ManagerDep) -> JSONResponse:
    """학생을 삭제합니다. 등록/성적은 DB에서 함께 삭제됩니다.

    Delete a student; registrations and exam results cascade in the database.
    """
    return outcome_response(await manager.remove(data))
