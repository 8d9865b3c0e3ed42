"""시험 매니저 — 시험 CRUD 오케스트레이션.

Exam Manager — CRUD orchestration for exams.
"""

from app.mappers import exam_mapper
from app.models.exam import Exam
from app.services.base import BaseManager
from app.utils.messages import EXAM


class ExamManager(BaseManager[Exam]):
    repository_name = "exams"
    messages = EXAM
    mapper = exam_mapper
