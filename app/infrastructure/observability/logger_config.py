import logging
import uuid
from typing import Optional

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars

from app.core.settings import settings


def bind_run_context(run_id: Optional[str] = None, **fields) -> str:
    """
    Binds the seeding run identity into structlog context vars.
    Every log line emitted during the run carries ``run_id``.
    """
    resolved = run_id or uuid.uuid4().hex[:12]
    clear_contextvars()
    bind_contextvars(run_id=resolved, **fields)
    return resolved


def rename_event_key(_, __, event_dict):
    """Canonical message field rename."""
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def configure_structlog(log_level: Optional[str] = None, json_logs: Optional[bool] = None) -> None:
    """
    Configures structlog on top of standard logging.
    JSON output by default, console rendering for local development.
    """
    resolved_level = str(log_level or settings.LOG_LEVEL or "INFO").upper()
    numeric_level = getattr(logging, resolved_level, logging.INFO)
    use_json = settings.LOG_JSON if json_logs is None else json_logs

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logging.basicConfig(level=numeric_level, handlers=[handler], force=True)

    processors = [
        merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if use_json:
        processors.extend([rename_event_key, structlog.processors.JSONRenderer()])
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
