"""결과 객체 모듈 — 성공/실패를 예외 대신 값으로 전달.

Outcome module — Reports success or failure as a value instead of an exception.
Every manager operation returns one of these; routers only read is_success,
message, and data.

Usage:
    from app.utils.result import DataResult, Result
    return Result.success("Student created.")
    return DataResult.failure("Student not found.")
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

T = TypeVar("T")


class Result(BaseModel):
    """페이로드 없는 결과 — 쓰기 작업의 성공/실패.

    Payload-less outcome of a write operation.
    Frozen: fields cannot be reassigned after construction.

    Attributes:
        is_success: 성공 여부 (Whether the operation succeeded)
        message: 사용자용 메시지 (Human-readable message)
    """

    model_config = ConfigDict(frozen=True)

    is_success: bool
    message: str = ""

    @classmethod
    def success(cls, message: str = "") -> "Result":
        return cls(is_success=True, message=message)

    @classmethod
    def failure(cls, message: str = "") -> "Result":
        return cls(is_success=False, message=message)


class DataResult(Result, Generic[T]):
    """페이로드를 가진 결과 — 조회 작업의 성공/실패.

    Outcome carrying a payload. A successful DataResult always carries data
    (possibly an empty collection); a failed one may carry None, so callers
    must check is_success before touching data.

    Attributes:
        data: 결과 데이터 (Payload, None only on failure)
    """

    data: T | None = None

    @model_validator(mode="after")
    def _require_payload_on_success(self) -> "DataResult[T]":
        if self.is_success and self.data is None:
            raise ValueError("A successful DataResult must carry data")
        return self

    @classmethod
    def success(cls, data: T, message: str = "") -> "DataResult[T]":  # type: ignore[override]
        return cls(is_success=True, message=message, data=data)

    @classmethod
    def failure(cls, message: str = "", data: T | None = None) -> "DataResult[T]":  # type: ignore[override]
        return cls(is_success=False, message=message, data=data)
