"""학생 매니저 — 학생 CRUD 오케스트레이션.

Student Manager — CRUD orchestration for students.
"""

from datetime import date

from app.mappers import student_mapper
from app.models.people import Student
from app.services.base import BaseManager
from app.utils.messages import STUDENT


class StudentManager(BaseManager[Student]):
    """학생 매니저.

    National id must be ASCII digits only without a leading zero, and the
    birth date may not lie in the future.
    """

    repository_name = "students"
    messages = STUDENT
    mapper = student_mapper
    required_text_fields = ("name", "national_id")

    def check_invariants(self, entity: Student) -> str | None:
        national_id: str = entity.national_id.strip()
        # isdigit()만으로는 위첨자 등 유니코드 숫자도 통과 (Unicode digits such as "²" pass isdigit())
        if not (national_id.isascii() and national_id.isdigit()):
            return "National id must contain digits only."
        if national_id.startswith("0"):
            return "National id must not start with 0."
        if entity.birth_date is not None and entity.birth_date > date.today():
            return "Birth date must not be in the future."
        return None
