"""강사 매니저 — 강사 CRUD 오케스트레이션.

Instructor Manager — CRUD orchestration for instructors.
"""

import re

from app.mappers import instructor_mapper
from app.models.people import Instructor
from app.services.base import BaseManager
from app.utils.messages import INSTRUCTOR

# local@domain.tld, 공백 및 추가 '@' 불가 (no whitespace, exactly one "@")
_EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s.]+(\.[^@\s.]+)+")


class InstructorManager(BaseManager[Instructor]):
    repository_name = "instructors"
    messages = INSTRUCTOR
    mapper = instructor_mapper

    def check_invariants(self, entity: Instructor) -> str | None:
        # 이메일은 선택 항목 (email is optional)
        if entity.email and not _EMAIL_PATTERN.fullmatch(entity.email):
            return "Email address is not valid."
        return None
