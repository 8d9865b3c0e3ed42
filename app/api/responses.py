"""결과 → HTTP 응답 변환.

Outcome to HTTP response conversion shared by every router.
A successful outcome answers 200, a failed one 400; the body is always the
serialised outcome.
"""

from fastapi import status
from fastapi.responses import JSONResponse

from app.utils.result import Result


def outcome_response(result: Result) -> JSONResponse:
    """Result/DataResult를 JSON 응답으로 변환합니다.

    Serialise a Result or DataResult into a JSON response.

    Args:
        result: 매니저가 반환한 결과 (Outcome returned by a manager)

    Returns:
        JSONResponse: 200 (성공) 또는 400 (실패) 응답 (200 on success, 400 on failure)
    """
    code: int = status.HTTP_200_OK if result.is_success else status.HTTP_400_BAD_REQUEST
    return JSONResponse(status_code=code, content=result.model_dump(mode="json"))
