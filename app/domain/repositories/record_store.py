from abc import ABC, abstractmethod
from typing import Sequence

from app.domain.schemas.ingestion import VectorEntry


class IRecordStore(ABC):
    """
    Interface for the vector-searchable record collection.
    Decouples the ingestion pipeline from the concrete store engine.
    """

    @abstractmethod
    async def upsert_batch(self, entries: Sequence[VectorEntry]) -> None:
        """
        Persist one batch of (text, vector, metadata) entries.
        Either raises or the whole batch has been handed to the store.
        """
        pass

    @abstractmethod
    async def clear(self) -> int:
        """Remove every stored record. Returns the number deleted."""
        pass

    @abstractmethod
    async def ensure_vector_index(self, dimensions: int) -> bool:
        """Create the vector search index if missing. Returns True when created."""
        pass
