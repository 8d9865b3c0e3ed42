"""Axiom 로깅 미들웨어 테스트.

Axiom logging middleware tests — Failure reason extraction, masking of
sensitive keys, skipped paths, and resilience to ingest failures.
"""

from unittest.mock import MagicMock

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from httpx import ASGITransport, AsyncClient

from app.middleware.axiom_logging import AxiomLoggingMiddleware, _extract_reason, _mask_dict


def _build_app(axiom: MagicMock) -> FastAPI:
    app = FastAPI()
    app.add_middleware(AxiomLoggingMiddleware, client=axiom, dataset="test-logs")

    @app.post("/students")
    async def create_student() -> JSONResponse:
        return JSONResponse(status_code=400, content={
            "is_success": False,
            "message": "Student could not be created. National id must not start with 0.",
        })

    @app.get("/ok")
    async def ok() -> dict[str, bool]:
        return {"is_success": True}

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


async def _call(app: FastAPI, method: str, url: str, **kwargs):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        return await ac.request(method, url, **kwargs)


class TestHelpers:
    """보조 함수 테스트."""

    def test_reason_from_outcome_message(self):
        assert _extract_reason(b'{"is_success": false, "message": "Exam not found."}') == "Exam not found."

    def test_reason_from_fastapi_detail(self):
        assert _extract_reason(b'{"detail": "Not Found"}') == "Not Found"

    def test_reason_from_validation_detail_list(self):
        reason = _extract_reason(b'{"detail": [{"loc": ["body", "name"], "msg": "Field required"}]}')
        assert "Field required" in reason

    def test_reason_from_plain_text(self):
        assert _extract_reason(b"Internal Server Error") == "Internal Server Error"

    def test_mask_national_id(self):
        masked = _mask_dict({"name": "Ada", "national_id": "12345", "nested": [{"api_key": "k"}]})
        assert masked == {"name": "Ada", "national_id": "***", "nested": [{"api_key": "***"}]}


class TestMiddleware:
    """미들웨어 동작 테스트."""

    async def test_failure_is_logged_with_reason_and_masked_body(self):
        axiom = MagicMock()
        res = await _call(_build_app(axiom), "POST", "/students", json={"name": "Ada", "national_id": "0123"})

        assert res.status_code == 400
        assert res.json()["message"].startswith("Student could not be created.")
        dataset, events = axiom.ingest_events.call_args.args
        assert dataset == "test-logs"
        assert events[0]["status_code"] == 400
        assert events[0]["error"] == "Student could not be created. National id must not start with 0."
        assert events[0]["request_body"] == {"name": "Ada", "national_id": "***"}

    async def test_success_is_logged_without_error(self):
        axiom = MagicMock()
        res = await _call(_build_app(axiom), "GET", "/ok")
        assert res.status_code == 200
        event = axiom.ingest_events.call_args.args[1][0]
        assert "error" not in event

    async def test_health_is_skipped(self):
        axiom = MagicMock()
        await _call(_build_app(axiom), "GET", "/health")
        axiom.ingest_events.assert_not_called()

    async def test_ingest_failure_does_not_break_request(self):
        axiom = MagicMock()
        axiom.ingest_events.side_effect = ConnectionError("axiom unreachable")
        res = await _call(_build_app(axiom), "GET", "/ok")
        assert res.status_code == 200
