"""결과 객체 테스트.

Outcome tests — Immutability, payload rule on success, JSON serialisation.
"""

import pytest
from pydantic import ValidationError

from app.utils.result import DataResult, Result


class TestResult:
    """페이로드 없는 결과 테스트."""

    def test_success_and_failure_factories(self):
        ok = Result.success("Saved.")
        failed = Result.failure("Not saved.")
        assert ok.is_success is True and ok.message == "Saved."
        assert failed.is_success is False and failed.message == "Not saved."

    def test_is_frozen(self):
        """생성 후 필드 재할당 불가."""
        result = Result.success("Saved.")
        with pytest.raises(ValidationError):
            result.is_success = False  # type: ignore[misc]

    def test_serialises_to_json_dict(self):
        assert Result.failure("Nope.").model_dump(mode="json") == {
            "is_success": False,
            "message": "Nope.",
        }


class TestDataResult:
    """페이로드 결과 테스트."""

    def test_success_requires_data(self):
        """성공 결과에 data=None 이면 생성 실패."""
        with pytest.raises(ValidationError):
            DataResult(is_success=True, message="x", data=None)

    def test_failure_may_carry_none(self):
        result = DataResult.failure("Student list is empty.")
        assert result.is_success is False
        assert result.data is None

    def test_success_with_empty_collection_is_allowed(self):
        assert DataResult.success([], "ok").data == []

    def test_is_frozen(self):
        result = DataResult.success([1, 2], "ok")
        with pytest.raises(ValidationError):
            result.data = None  # type: ignore[misc]
