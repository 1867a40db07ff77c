from typing import Any, AsyncContextManager, Callable, Optional

import structlog

from app.ai.embeddings import EmbeddingService
from app.core.settings import Settings, settings
from app.domain.repositories.record_store import IRecordStore
from app.domain.schemas.ingestion import IngestionReport
from app.infrastructure.mongo.client import mongo_session
from app.infrastructure.mongo.vector_store_repository import MongoVectorStoreRepository
from app.infrastructure.observability.ingestion_logging import emit_event
from app.infrastructure.observability.logger_config import bind_run_context
from app.workflows.ingestion.batch_pipeline import BatchIngestionPipeline
from app.workflows.ingestion.record_generation import RecordGenerator

logger = structlog.get_logger(__name__)

SessionFactory = Callable[[], AsyncContextManager[Any]]
StoreFactory = Callable[[Any], IRecordStore]


class SeedDatabaseUseCase:
    """
    One seeding run: connect, (reset), ensure index, generate, ingest, disconnect.
    The store session is opened and closed here and nowhere else.
    """

    def __init__(
        self,
        record_generator: RecordGenerator,
        embeddings: EmbeddingService,
        *,
        app_settings: Settings = settings,
        session_factory: Optional[SessionFactory] = None,
        store_factory: Optional[StoreFactory] = None,
    ):
        self.record_generator = record_generator
        self.embeddings = embeddings
        self.settings = app_settings
        self.session_factory = session_factory or (
            lambda: mongo_session(app_settings.MONGODB_ATLAS_URI)
        )
        self.store_factory = store_factory or (
            lambda client: MongoVectorStoreRepository.from_client(client, app_settings)
        )

    @classmethod
    def from_settings(cls, app_settings: Settings = settings) -> "SeedDatabaseUseCase":
        from app.ai.generation import LangChainTextGenerator

        return cls(
            RecordGenerator(LangChainTextGenerator()),
            EmbeddingService.from_settings(app_settings.OPENAI_API_KEY),
            app_settings=app_settings,
        )

    async def run(
        self,
        count: Optional[int] = None,
        batch_size: Optional[int] = None,
        reset: Optional[bool] = None,
    ) -> IngestionReport:
        record_count = count if count is not None else self.settings.SEED_RECORD_COUNT
        size = batch_size if batch_size is not None else self.settings.INGEST_BATCH_SIZE
        reset_collection = self.settings.SEED_RESET_COLLECTION if reset is None else reset

        run_id = bind_run_context(collection=self.settings.MONGODB_COLLECTION)
        emit_event(
            logger,
            "seed_run_started",
            run_id=run_id,
            records=record_count,
            batch_size=size,
            reset=reset_collection,
            embedding=self.embeddings.profile(),
        )

        async with self.session_factory() as client:
            store = self.store_factory(client)
            if reset_collection:
                await store.clear()
            if self.settings.VECTOR_INDEX_AUTO_CREATE:
                await store.ensure_vector_index(self.embeddings.dimensions)

            records = await self.record_generator.generate(record_count)
            pipeline = BatchIngestionPipeline(
                self.embeddings,
                store,
                batch_size=size,
                summary_concurrency=self.settings.SUMMARY_MAX_CONCURRENCY,
            )
            report = await pipeline.ingest(records)

        emit_event(
            logger,
            "seed_run_completed",
            batches=report.batches,
            documents=report.documents,
        )
        return report
