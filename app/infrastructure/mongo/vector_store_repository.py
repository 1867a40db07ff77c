from typing import Any, Dict, List, Sequence

import structlog
from pymongo import ReplaceOne
from pymongo.errors import PyMongoError
from pymongo.operations import SearchIndexModel

from app.domain.exceptions import PersistenceBoundaryError
from app.domain.repositories.record_store import IRecordStore
from app.domain.schemas.ingestion import VectorEntry
from app.infrastructure.observability.ingestion_logging import emit_event

logger = structlog.get_logger(__name__)


class MongoVectorStoreRepository(IRecordStore):
    """
    Concrete implementation of IRecordStore for a MongoDB Atlas collection.

    Stored shape: the record's JSON fields at top level, the summary under
    ``text_key`` and its vector under ``embedding_key``. Writes are keyed on
    ``id_key``; with freshly generated ids every write is an insert.
    """

    def __init__(
        self,
        collection: Any,
        *,
        index_name: str,
        text_key: str,
        embedding_key: str,
        id_key: str = "employee_id",
    ):
        self.collection = collection
        self.index_name = index_name
        self.text_key = text_key
        self.embedding_key = embedding_key
        self.id_key = id_key

    @classmethod
    def from_client(cls, client: Any, app_settings: Any) -> "MongoVectorStoreRepository":
        collection = client[app_settings.MONGODB_DATABASE][app_settings.MONGODB_COLLECTION]
        return cls(
            collection,
            index_name=app_settings.VECTOR_INDEX_NAME,
            text_key=app_settings.VECTOR_TEXT_KEY,
            embedding_key=app_settings.VECTOR_EMBEDDING_KEY,
        )

    def to_document(self, entry: VectorEntry) -> Dict[str, Any]:
        if entry.metadata.get(self.id_key) in (None, ""):
            raise ValueError(f"Vector entry metadata is missing '{self.id_key}'")
        document = dict(entry.metadata)
        document[self.text_key] = entry.text
        document[self.embedding_key] = [float(x) for x in entry.vector]
        return document

    async def upsert_batch(self, entries: Sequence[VectorEntry]) -> None:
        if not entries:
            return
        documents = [self.to_document(entry) for entry in entries]
        operations: List[ReplaceOne] = [
            ReplaceOne({self.id_key: doc[self.id_key]}, doc, upsert=True) for doc in documents
        ]
        try:
            result = await self.collection.bulk_write(operations, ordered=True)
        except PyMongoError as exc:
            raise PersistenceBoundaryError(
                "MongoDB rejected vector batch",
                context={"documents": len(documents), "index_name": self.index_name},
            ) from exc

        emit_event(
            logger,
            "vector_batch_written",
            level="debug",
            documents=len(documents),
            upserted=result.upserted_count,
            modified=result.modified_count,
        )

    async def clear(self) -> int:
        try:
            result = await self.collection.delete_many({})
        except PyMongoError as exc:
            raise PersistenceBoundaryError("MongoDB collection reset failed") from exc
        emit_event(logger, "collection_cleared", deleted=result.deleted_count)
        return int(result.deleted_count)

    def vector_index_definition(self, dimensions: int) -> Dict[str, Any]:
        return {
            "fields": [
                {
                    "type": "vector",
                    "path": self.embedding_key,
                    "numDimensions": int(dimensions),
                    "similarity": "cosine",
                }
            ]
        }

    async def ensure_collection(self) -> bool:
        """Creates the collection if missing. Search index commands fail on a missing namespace."""
        database = self.collection.database
        name = self.collection.name
        existing = await database.list_collection_names(filter={"name": name})
        if name in existing:
            return False
        await database.create_collection(name)
        emit_event(logger, "collection_created", collection=name)
        return True

    async def ensure_vector_index(self, dimensions: int) -> bool:
        try:
            await self.ensure_collection()
            cursor = await self.collection.list_search_indexes(self.index_name)
            existing = await cursor.to_list(length=None)
            if existing:
                emit_event(logger, "vector_index_present", index_name=self.index_name)
                return False

            await self.collection.create_search_index(
                SearchIndexModel(
                    definition=self.vector_index_definition(dimensions),
                    name=self.index_name,
                    type="vectorSearch",
                )
            )
        except PyMongoError as exc:
            raise PersistenceBoundaryError(
                "Vector search index check failed", context={"index_name": self.index_name}
            ) from exc

        emit_event(
            logger,
            "vector_index_created",
            index_name=self.index_name,
            embedding_key=self.embedding_key,
            dimensions=dimensions,
        )
        return True
