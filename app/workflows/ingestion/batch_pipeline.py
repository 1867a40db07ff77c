"""
Batch Ingestion Pipeline - records -> summaries -> embeddings -> vector store.

Summaries are built on worker threads, at most ``summary_concurrency`` at a
time, and joined before batching. Batches are submitted strictly one after
another: batch N+1 is not embedded until batch N has been written. A failing
batch aborts the run; batches already written stay persisted.
"""
import asyncio
from typing import Awaitable, Callable, List, Optional, Sequence, TypeVar

import structlog

from app.ai.embeddings import EmbeddingService
from app.domain.exceptions import (
    EmbeddingBoundaryError,
    PersistenceBoundaryError,
    SeedPipelineError,
)
from app.domain.repositories.record_store import IRecordStore
from app.domain.schemas.employee import EmployeeRecord
from app.domain.schemas.ingestion import IngestableDocument, IngestionReport, VectorEntry
from app.infrastructure.observability.ingestion_logging import emit_event
from app.services.synthesis.employee_summary import summarize_employee

logger = structlog.get_logger(__name__)

T = TypeVar("T")
Summarizer = Callable[[EmployeeRecord], str]


def partition_batches(items: Sequence[T], batch_size: int) -> List[List[T]]:
    """Contiguous, order-preserving batches of at most ``batch_size`` items."""
    if batch_size <= 0:
        raise ValueError("batch_size must be a positive integer")
    return [list(items[i : i + batch_size]) for i in range(0, len(items), batch_size)]


class BatchIngestionPipeline:
    def __init__(
        self,
        embeddings: EmbeddingService,
        store: IRecordStore,
        batch_size: int = 5,
        summary_concurrency: int = 8,
        summarizer: Summarizer = summarize_employee,
    ):
        if batch_size <= 0:
            raise ValueError("batch_size must be a positive integer")
        self.embeddings = embeddings
        self.store = store
        self.batch_size = batch_size
        self.summarizer = summarizer
        self._summary_semaphore = asyncio.Semaphore(max(1, int(summary_concurrency)))

    async def build_documents(self, records: Sequence[EmployeeRecord]) -> List[IngestableDocument]:
        async def _build(record: EmployeeRecord) -> IngestableDocument:
            async with self._summary_semaphore:
                summary = await asyncio.to_thread(self.summarizer, record)
                return IngestableDocument(record=record, summary=summary)

        return list(await asyncio.gather(*(_build(r) for r in records)))

    async def ingest(
        self, records: Sequence[EmployeeRecord], batch_size: Optional[int] = None
    ) -> IngestionReport:
        size = self.batch_size if batch_size is None else batch_size
        if size <= 0:
            raise ValueError("batch_size must be a positive integer")

        documents = await self.build_documents(records)
        batches = partition_batches(documents, size)
        report = IngestionReport()
        emit_event(
            logger,
            "ingestion_started",
            records=len(documents),
            batches=len(batches),
            batch_size=size,
        )

        for index, batch in enumerate(batches, start=1):
            await self._submit_batch(index, len(batches), batch)
            report.batches += 1
            report.documents += len(batch)
            report.first_record_ids.append(batch[0].record_id)

        emit_event(
            logger,
            "ingestion_completed",
            batches=report.batches,
            documents=report.documents,
        )
        return report

    async def _submit_batch(
        self, index: int, total: int, batch: List[IngestableDocument]
    ) -> None:
        first_id = batch[0].record_id
        texts = [doc.summary for doc in batch]

        vectors = await self._boundary_call(
            self.embeddings.embed_texts(texts),
            EmbeddingBoundaryError,
            "embedding_batch_failed",
            batch_index=index,
            first_record_id=first_id,
        )
        entries = [
            VectorEntry(text=doc.summary, vector=vector, metadata=doc.metadata())
            for doc, vector in zip(batch, vectors)
        ]
        await self._boundary_call(
            self.store.upsert_batch(entries),
            PersistenceBoundaryError,
            "persistence_batch_failed",
            batch_index=index,
            first_record_id=first_id,
        )

        emit_event(
            logger,
            "batch_ingested",
            first_record_id=first_id,
            batch_index=index,
            total_batches=total,
            batch_size=len(batch),
        )

    @staticmethod
    async def _boundary_call(
        call: Awaitable[T],
        error_cls: type,
        event: str,
        **context,
    ) -> T:
        try:
            return await call
        except SeedPipelineError as exc:
            emit_event(logger, event, level="error", error=exc.message, **context)
            raise
        except Exception as exc:
            emit_event(logger, event, level="error", error=exc, **context)
            raise error_cls(f"{event}: {type(exc).__name__}", context=context) from exc
