from app.services.extraction.fallback import FALLBACK_RECORD, build_fallback_record
from app.services.extraction.recovery_chain import RecordExtractor, build_record_parser

__all__ = [
    "FALLBACK_RECORD",
    "build_fallback_record",
    "RecordExtractor",
    "build_record_parser",
]
