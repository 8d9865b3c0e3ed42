"""수업 매니저 — 수업 CRUD 및 상세(소속 강좌 포함) 조회.

Lesson Manager — CRUD orchestration for lessons and their course detail.
"""

from app.mappers import lesson_mapper
from app.models.course import Lesson
from app.services.base import DetailManager
from app.utils.messages import LESSON


class LessonManager(DetailManager[Lesson]):
    repository_name = "lessons"
    messages = LESSON
    mapper = lesson_mapper
    required_text_fields = ("title",)

    def check_invariants(self, entity: Lesson) -> str | None:
        if entity.duration_minutes is not None and entity.duration_minutes <= 0:
            return "Duration must be a positive number of minutes."
        return None
