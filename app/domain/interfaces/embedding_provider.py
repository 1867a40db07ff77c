from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence


class IEmbeddingProvider(ABC):
    """
    Interface for embedding providers.
    One call embeds one batch of summaries, preserving input order.
    """

    @abstractmethod
    async def embed(self, texts: Sequence[str]) -> List[List[float]]:
        """
        Generates one vector per input text.
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Stable provider identifier (e.g. 'openai')."""
        pass

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Configured embedding model identifier."""
        pass

    @property
    @abstractmethod
    def embedding_dimensions(self) -> int:
        """Output vector dimensions for this provider/model."""
        pass

    def profile(self) -> Dict[str, Any]:
        """Provider-agnostic embedding profile metadata for traceability."""
        return {
            "provider": str(self.provider_name),
            "model": str(self.model_name),
            "dimensions": int(self.embedding_dimensions),
        }
