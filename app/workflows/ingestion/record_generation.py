from typing import List, Optional

import structlog

from app.core.prompts.employee_prompts import EmployeePrompts
from app.domain.exceptions import GenerationBoundaryError
from app.domain.interfaces.text_generator import ITextGenerator
from app.domain.schemas.employee import EmployeeRecord
from app.domain.schemas.ingestion import ExtractionStage
from app.infrastructure.observability.ingestion_logging import emit_event
from app.services.extraction.recovery_chain import RecordExtractor

logger = structlog.get_logger(__name__)


class RecordGenerator:
    """
    Asks the generator for one record per call and recovers each response.
    Bad output never fails a call; an unreachable generator always does.
    """

    def __init__(self, generator: ITextGenerator, extractor: Optional[RecordExtractor] = None):
        self.generator = generator
        self.extractor = extractor or RecordExtractor()

    async def generate(self, count: int) -> List[EmployeeRecord]:
        if count <= 0:
            raise ValueError("count must be a positive integer")

        records: List[EmployeeRecord] = []
        fallbacks = 0
        for number in range(1, count + 1):
            prompt = EmployeePrompts.render_generation_msg(
                self.extractor.format_instructions, record_number=number, total=count
            )
            try:
                raw = await self.generator.invoke(prompt)
            except Exception as exc:
                emit_event(
                    logger,
                    "generator_call_failed",
                    level="error",
                    record_number=number,
                    error=exc,
                )
                raise GenerationBoundaryError(
                    "Text generator call failed", context={"record_number": number}
                ) from exc

            report = self.extractor.run(raw)
            if report.stage is ExtractionStage.FALLBACK:
                fallbacks += 1
            records.append(report.record)

        emit_event(logger, "records_generated", count=len(records), fallbacks=fallbacks)
        return records
