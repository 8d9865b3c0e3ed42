"""시험 결과 매니저 — 성적 CRUD 및 상세(학생, 시험 포함) 조회.

Exam Result Manager — CRUD orchestration for exam results and their
student/exam detail.
"""

from app.mappers import exam_result_mapper
from app.models.exam import ExamResult
from app.services.base import DetailManager
from app.utils.messages import EXAM_RESULT

MIN_GRADE: int = 0
MAX_GRADE: int = 100


class ExamResultManager(DetailManager[ExamResult]):
    repository_name = "exam_results"
    messages = EXAM_RESULT
    mapper = exam_result_mapper
    required_text_fields = ()

    def check_invariants(self, entity: ExamResult) -> str | None:
        if entity.grade is None or not MIN_GRADE <= entity.grade <= MAX_GRADE:
            return f"Grade must be between {MIN_GRADE} and {MAX_GRADE}."
        return None
