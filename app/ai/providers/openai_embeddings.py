from typing import List, Optional, Sequence

import structlog
from langchain_core.embeddings import Embeddings
from langchain_openai import OpenAIEmbeddings

from app.core.ai_models import AIModelConfig
from app.domain.interfaces.embedding_provider import IEmbeddingProvider

logger = structlog.get_logger(__name__)


class OpenAIEmbeddingProvider(IEmbeddingProvider):
    """
    OpenAI embeddings through LangChain.
    ``dimensions`` is only forwarded to models that support shortening (text-embedding-3-*).
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: Optional[str] = None,
        dimensions: Optional[int] = None,
        client: Optional[Embeddings] = None,
    ):
        self._model_name = model_name or AIModelConfig.OPENAI_EMBEDDING_MODEL
        self._dimensions = int(dimensions or AIModelConfig.EMBEDDING_DIMENSIONS)
        if client is not None:
            self._client = client
        else:
            key = api_key or AIModelConfig.OPENAI_API_KEY
            if not key:
                raise ValueError("OPENAI_API_KEY must be set to build the embedding provider.")
            kwargs = {"model": self._model_name, "api_key": key}
            if self._model_name.startswith("text-embedding-3"):
                kwargs["dimensions"] = self._dimensions
            self._client = OpenAIEmbeddings(**kwargs)
        logger.info("openai_embedding_provider_initialized", **self.profile())

    @property
    def provider_name(self) -> str:
        return "openai"

    @property
    def model_name(self) -> str:
        return str(self._model_name)

    @property
    def embedding_dimensions(self) -> int:
        return int(self._dimensions)

    async def embed(self, texts: Sequence[str]) -> List[List[float]]:
        if not texts:
            return []
        return await self._client.aembed_documents(list(texts))
