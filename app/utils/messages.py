"""엔티티별 결과 메시지 카탈로그.

Per-entity message catalogue for manager outcomes.
Each manager owns one EntityMessages instance; failure messages for writes
always start with the operation's failed message so callers can match on it.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EntityMessages:
    """한 엔티티 유형의 성공/실패 메시지 묶음.

    Success and failure messages for one entity type.

    Attributes:
        entity: 표시용 엔티티 이름 (Display name, e.g. "Student")
    """

    entity: str

    @property
    def list_success(self) -> str:
        return f"{self.entity} list retrieved successfully."

    @property
    def list_empty(self) -> str:
        return f"{self.entity} list is empty."

    @property
    def get_success(self) -> str:
        return f"{self.entity} retrieved successfully."

    @property
    def not_found(self) -> str:
        return f"{self.entity} not found."

    @property
    def read_failed(self) -> str:
        return f"{self.entity} data could not be retrieved."

    @property
    def invalid_id(self) -> str:
        return f"{self.entity} id is missing or malformed."

    @property
    def create_success(self) -> str:
        return f"{self.entity} created successfully."

    @property
    def create_failed(self) -> str:
        return f"{self.entity} could not be created."

    @property
    def update_success(self) -> str:
        return f"{self.entity} updated successfully."

    @property
    def update_failed(self) -> str:
        return f"{self.entity} could not be updated."

    @property
    def delete_success(self) -> str:
        return f"{self.entity} deleted successfully."

    @property
    def delete_failed(self) -> str:
        return f"{self.entity} could not be deleted."

    @property
    def mapping_failed(self) -> str:
        return f"{self.entity} data could not be mapped."

    @staticmethod
    def with_reason(message: str, reason: str | None) -> str:
        """실패 메시지에 구체적 사유를 덧붙입니다 (Append a specific reason)."""
        return f"{message} {reason}" if reason else message


STUDENT = EntityMessages("Student")
INSTRUCTOR = EntityMessages("Instructor")
COURSE = EntityMessages("Course")
LESSON = EntityMessages("Lesson")
EXAM = EntityMessages("Exam")
EXAM_RESULT = EntityMessages("Exam result")
REGISTRATION = EntityMessages("Registration")
