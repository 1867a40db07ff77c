from __future__ import annotations

from typing import Any

import structlog

from app.infrastructure.observability.ingestion_logging import compact_error, emit_event
from app.infrastructure.observability.logger_config import bind_run_context, rename_event_key


class _CaptureLogger:
    def __init__(self):
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def info(self, event: str, **fields: Any) -> None:
        self.calls.append(("info", event, fields))

    def warning(self, event: str, **fields: Any) -> None:
        self.calls.append(("warning", event, fields))


def test_emit_event_drops_none_and_compacts_errors() -> None:
    logger = _CaptureLogger()

    emit_event(
        logger,
        "extraction_stage_failed",
        level="warning",
        stage="object_span",
        reason="line one\n   line two",
        employee_id=None,
    )

    assert logger.calls == [
        ("warning", "extraction_stage_failed", {"stage": "object_span", "reason": "line one line two"})
    ]


def test_emit_event_falls_back_to_info_for_unknown_level() -> None:
    logger = _CaptureLogger()

    emit_event(logger, "batch_ingested", level="trace", batch_index=1)

    assert logger.calls[0][0] == "info"


def test_compact_error_renders_exceptions_and_truncates() -> None:
    assert compact_error(ValueError("bad\tvalue")) == "ValueError: bad value"
    assert compact_error("x" * 50, limit=10) == "x" * 10 + "..."
    assert compact_error(None) == ""


def test_bind_run_context_replaces_previous_run() -> None:
    bind_run_context("first", collection="a")
    run_id = bind_run_context(collection="b")

    bound = structlog.contextvars.get_contextvars()
    assert bound == {"run_id": run_id, "collection": "b"}
    assert len(run_id) == 12
    structlog.contextvars.clear_contextvars()


def test_rename_event_key() -> None:
    assert rename_event_key(None, "info", {"event": "seed_run_started", "x": 1}) == {
        "x": 1,
        "message": "seed_run_started",
    }
