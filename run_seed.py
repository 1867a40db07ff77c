import argparse
import asyncio
import sys
from typing import Optional, Sequence

import structlog
from dotenv import load_dotenv

from app.infrastructure.observability.ingestion_logging import emit_event
from app.infrastructure.observability.logger_config import configure_structlog

logger = structlog.get_logger("seed_database")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate synthetic employee records and load them into MongoDB Atlas."
    )
    parser.add_argument("--count", type=int, default=None, help="Records to generate.")
    parser.add_argument("--batch-size", type=int, default=None, help="Records per ingestion batch.")
    parser.add_argument(
        "--reset",
        action="store_true",
        default=None,
        help="Delete existing records before seeding.",
    )
    parser.add_argument("--log-level", default=None)
    parser.add_argument("--console-logs", action="store_true", help="Human readable logs.")
    args = parser.parse_args(argv)
    for name in ("count", "batch_size"):
        value = getattr(args, name)
        if value is not None and value <= 0:
            parser.error(f"--{name.replace('_', '-')} must be a positive integer")
    return args


async def main(args: argparse.Namespace) -> int:
    from app.application.use_cases.seed_database_use_case import SeedDatabaseUseCase

    try:
        use_case = SeedDatabaseUseCase.from_settings()
        await use_case.run(count=args.count, batch_size=args.batch_size, reset=args.reset)
    except Exception as exc:
        emit_event(logger, "seed_run_failed", level="error", error_type=type(exc).__name__, error=exc)
        logger.exception("seed_run_failed_traceback")
        return 1
    return 0


if __name__ == "__main__":
    load_dotenv()
    cli_args = parse_args()
    configure_structlog(log_level=cli_args.log_level, json_logs=not cli_args.console_logs)
    try:
        sys.exit(asyncio.run(main(cli_args)))
    except KeyboardInterrupt:
        sys.exit(130)
