"""
Record Recovery Chain - turns untrusted generator text into one valid record.

Stages run in strict order, each on the original text:

1. direct_parse - the LangChain output parser whose format instructions were
   sent with the prompt parses the whole response. Responses longer than
   ``EXTRACTION_MAX_PARSE_CHARS`` skip this stage.
2. object_span - the first balanced ``{...}`` span is parsed and validated.
3. array_span - the first balanced ``[...]`` span is parsed and its first
   element validated.
4. fallback - the fixed template.

Every stage yields a ``StageOutcome``; failures are logged and kept on the
returned ``ExtractionReport``. ``extract`` never raises for bad input.
"""
import json
from typing import Any, Callable, List, Optional, Tuple

import structlog
from langchain_core.exceptions import OutputParserException
from langchain_core.output_parsers import PydanticOutputParser
from pydantic import ValidationError

from app.core.settings import settings
from app.domain.schemas.employee import EmployeeRecord, new_employee_id
from app.domain.schemas.ingestion import ExtractionReport, ExtractionStage, StageOutcome
from app.infrastructure.observability.ingestion_logging import emit_event
from app.services.extraction.fallback import build_fallback_record
from app.services.extraction.json_spans import first_array_span, first_object_span

logger = structlog.get_logger(__name__)

IdFactory = Callable[[], str]
StageFn = Callable[[str], StageOutcome]


def build_record_parser() -> PydanticOutputParser:
    return PydanticOutputParser(pydantic_object=EmployeeRecord)


def _describe_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0] if exc.errors() else {}
    location = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
    return f"{exc.error_count()} validation error(s); first at {location}: {first.get('msg', '')}"


def _validate(stage: ExtractionStage, data: Any) -> StageOutcome:
    try:
        return StageOutcome.ok(stage, EmployeeRecord.model_validate(data))
    except ValidationError as exc:
        return StageOutcome.err(stage, _describe_validation_error(exc))


class RecordExtractor:
    """
    Recovery chain over one raw generator response.
    """

    def __init__(
        self,
        parser: Optional[PydanticOutputParser] = None,
        id_factory: IdFactory = new_employee_id,
        max_direct_parse_chars: Optional[int] = None,
    ):
        self.parser = parser or build_record_parser()
        self._id_factory = id_factory
        self.max_direct_parse_chars = int(
            max_direct_parse_chars or settings.EXTRACTION_MAX_PARSE_CHARS
        )

    @property
    def format_instructions(self) -> str:
        return self.parser.get_format_instructions()

    def extract(self, raw_text: str) -> EmployeeRecord:
        return self.run(raw_text).record

    def run(self, raw_text: str) -> ExtractionReport:
        text = raw_text if isinstance(raw_text, str) else str(raw_text or "")
        failures: List[StageOutcome] = []

        for stage, attempt in self._stages():
            outcome = attempt(text)
            if outcome.is_ok:
                record = outcome.record.with_fresh_id(self._id_factory())
                emit_event(
                    logger,
                    "record_extracted",
                    stage=stage.value,
                    employee_id=record.employee_id,
                    failed_stages=[f.stage.value for f in failures] or None,
                )
                return ExtractionReport(record=record, stage=stage, failures=failures)

            emit_event(
                logger,
                "extraction_stage_failed",
                level="warning",
                stage=stage.value,
                reason=outcome.reason,
            )
            failures.append(outcome)

        record = build_fallback_record(self._id_factory())
        emit_event(
            logger,
            "extraction_fallback_used",
            level="warning",
            employee_id=record.employee_id,
            response_chars=len(text),
        )
        return ExtractionReport(record=record, stage=ExtractionStage.FALLBACK, failures=failures)

    def _stages(self) -> Tuple[Tuple[ExtractionStage, StageFn], ...]:
        return (
            (ExtractionStage.DIRECT_PARSE, self._direct_parse),
            (ExtractionStage.OBJECT_SPAN, self._object_span),
            (ExtractionStage.ARRAY_SPAN, self._array_span),
        )

    def _direct_parse(self, text: str) -> StageOutcome:
        stage = ExtractionStage.DIRECT_PARSE
        if len(text) > self.max_direct_parse_chars:
            return StageOutcome.err(
                stage, f"response has {len(text)} chars, over the {self.max_direct_parse_chars} parse limit"
            )
        try:
            parsed = self.parser.parse(text)
        except OutputParserException as exc:
            return StageOutcome.err(stage, f"output parser rejected response: {exc}")
        except ValidationError as exc:
            return StageOutcome.err(stage, _describe_validation_error(exc))
        except (ValueError, TypeError, RecursionError) as exc:
            return StageOutcome.err(stage, f"{type(exc).__name__}: {exc}")
        if not isinstance(parsed, EmployeeRecord):
            return StageOutcome.err(stage, f"parser returned {type(parsed).__name__}")
        return StageOutcome.ok(stage, parsed)

    def _object_span(self, text: str) -> StageOutcome:
        stage = ExtractionStage.OBJECT_SPAN
        span = first_object_span(text)
        if span is None:
            return StageOutcome.err(stage, "no balanced {...} span")
        try:
            data = json.loads(span)
        except (ValueError, RecursionError) as exc:
            return StageOutcome.err(stage, f"object span is not JSON: {exc}")
        return _validate(stage, data)

    def _array_span(self, text: str) -> StageOutcome:
        stage = ExtractionStage.ARRAY_SPAN
        span = first_array_span(text)
        if span is None:
            return StageOutcome.err(stage, "no balanced [...] span")
        try:
            items = json.loads(span)
        except (ValueError, RecursionError) as exc:
            return StageOutcome.err(stage, f"array span is not JSON: {exc}")
        if not isinstance(items, list) or not items:
            return StageOutcome.err(stage, "array span is empty")
        return _validate(stage, items[0])
