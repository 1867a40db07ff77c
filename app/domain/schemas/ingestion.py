"""
Transient value types passed between extraction, synthesis and persistence.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from app.domain.schemas.employee import EmployeeRecord


class ExtractionStage(str, Enum):
    DIRECT_PARSE = "direct_parse"
    OBJECT_SPAN = "object_span"
    ARRAY_SPAN = "array_span"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class StageOutcome:
    """Tagged result of one recovery stage: ``Ok(record)`` or ``Err(reason)``."""

    stage: ExtractionStage
    record: Optional[EmployeeRecord] = None
    reason: Optional[str] = None

    @classmethod
    def ok(cls, stage: ExtractionStage, record: EmployeeRecord) -> "StageOutcome":
        return cls(stage=stage, record=record)

    @classmethod
    def err(cls, stage: ExtractionStage, reason: str) -> "StageOutcome":
        return cls(stage=stage, reason=reason)

    @property
    def is_ok(self) -> bool:
        return self.record is not None


@dataclass(frozen=True)
class ExtractionReport:
    record: EmployeeRecord
    stage: ExtractionStage
    failures: List[StageOutcome] = field(default_factory=list)

    @property
    def used_fallback(self) -> bool:
        return self.stage is ExtractionStage.FALLBACK


@dataclass(frozen=True)
class IngestableDocument:
    record: EmployeeRecord
    summary: str

    @property
    def record_id(self) -> str:
        return self.record.employee_id

    def metadata(self) -> Dict[str, Any]:
        return self.record.model_dump(mode="json")


@dataclass(frozen=True)
class VectorEntry:
    text: str
    vector: List[float]
    metadata: Dict[str, Any]


@dataclass
class IngestionReport:
    batches: int = 0
    documents: int = 0
    first_record_ids: List[str] = field(default_factory=list)
