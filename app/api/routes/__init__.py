"""API 라우터 패키지 — 모든 엔티티 엔드포인트 통합.

API Router package — Aggregates every entity router into a single router
for inclusion in the FastAPI application under "/api".

Included routers:
    - students: 학생 (Students)
    - instructors: 강사 (Instructors)
    - courses: 강좌, 상세 포함 (Courses, with detail)
    - lessons: 수업, 상세 포함 (Lessons, with detail)
    - exams: 시험 (Exams)
    - exam_results: 시험 결과, 상세 포함 (Exam results, with detail)
    - registrations: 수강 등록, 상세 포함 (Registrations, with detail)
"""

from fastapi import APIRouter

from app.api.routes.courses import router as courses_router
from app.api.routes.exam_results import router as exam_results_router
from app.api.routes.exams import router as exams_router
from app.api.routes.instructors import router as instructors_router
from app.api.routes.lessons import router as lessons_router
from app.api.routes.registrations import router as registrations_router
from app.api.routes.students import router as students_router

api_router: APIRouter = APIRouter()

api_router.include_router(students_router, prefix="/students", tags=["Students"])
api_router.include_router(instructors_router, prefix="/instructors", tags=["Instructors"])
api_router.include_router(courses_router, prefix="/courses", tags=["Courses"])
api_router.include_router(lessons_router, prefix="/lessons", tags=["Lessons"])
api_router.include_router(exams_router, prefix="/exams", tags=["Exams"])
api_router.include_router(exam_results_router, prefix="/exam-results", tags=["Exam Results"])
api_router.include_router(registrations_router, prefix="/registrations", tags=["Registrations"])
