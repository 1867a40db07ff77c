"""
Embedding facade used by the ingestion pipeline.
Checks provider output shape and turns provider failures into boundary errors.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import structlog

from app.domain.exceptions import EmbeddingBoundaryError
from app.domain.interfaces.embedding_provider import IEmbeddingProvider
from app.infrastructure.observability.ingestion_logging import emit_event

logger = structlog.get_logger(__name__)


class EmbeddingService:
    """
    Facade Service for Embeddings.
    One ``embed_texts`` call is one round trip to the provider.
    """

    def __init__(self, provider: IEmbeddingProvider):
        self.provider = provider

    @classmethod
    def from_settings(cls, api_key: Optional[str] = None) -> "EmbeddingService":
        from app.ai.providers.openai_embeddings import OpenAIEmbeddingProvider

        return cls(OpenAIEmbeddingProvider(api_key=api_key))

    @property
    def dimensions(self) -> int:
        return self.provider.embedding_dimensions

    def profile(self) -> Dict[str, Any]:
        return self.provider.profile()

    async def embed_texts(self, texts: Sequence[str]) -> List[List[float]]:
        if not texts:
            return []
        try:
            vectors = await self.provider.embed(list(texts))
        except Exception as exc:
            emit_event(
                logger,
                "embedding_request_failed",
                level="error",
                provider=self.provider.provider_name,
                texts=len(texts),
                error=exc,
            )
            raise EmbeddingBoundaryError(
                "Embedding provider failed", context={"texts": len(texts), **self.profile()}
            ) from exc

        if len(vectors) != len(texts):
            emit_event(
                logger,
                "embedding_count_mismatch",
                level="error",
                expected=len(texts),
                received=len(vectors),
            )
            raise EmbeddingBoundaryError(
                "Embedding provider returned the wrong number of vectors",
                context={"expected": len(texts), "received": len(vectors)},
            )
        return [list(vector) for vector in vectors]
