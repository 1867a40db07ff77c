from __future__ import annotations

from typing import Any

_ERROR_FIELDS = frozenset({"error", "reason"})


def compact_error(value: Any, *, limit: int = 320) -> str:
    """Single-line, length-capped rendering of an error or failure reason."""
    if isinstance(value, BaseException):
        text = f"{type(value).__name__}: {value}"
    else:
        text = str(value or "")
    text = " ".join(text.split())
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def emit_event(logger: Any, event: str, *, level: str = "info", **fields: Any) -> None:
    """
    Emits a structured event, dropping ``None`` fields.
    ``error``/``reason`` values are compacted so model output never floods the log.
    """
    payload: dict[str, Any] = {}
    for key, value in fields.items():
        if value is None or key == "event":
            continue
        payload[key] = compact_error(value) if key in _ERROR_FIELDS else value

    log_fn = getattr(logger, level, None)
    if not callable(log_fn):
        log_fn = logger.info
    log_fn(str(event), **payload)
