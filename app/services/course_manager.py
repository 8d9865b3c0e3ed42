"""강좌 매니저 — 강좌 CRUD 및 상세(강사, 수업 포함) 조회.

Course Manager — CRUD orchestration for courses, plus the detail projection
with the instructor and the lesson list.
"""

from app.mappers import course_mapper
from app.models.course import Course
from app.services.base import DetailManager
from app.utils.messages import COURSE


class CourseManager(DetailManager[Course]):
    """강좌 매니저.

    When both dates are given the end date may not precede the start date.
    """

    repository_name = "courses"
    messages = COURSE
    mapper = course_mapper

    def check_invariants(self, entity: Course) -> str | None:
        if entity.start_date and entity.end_date and entity.end_date < entity.start_date:
            return "End date must not be before start date."
        return None
