from app.ai.embeddings import EmbeddingService
from app.ai.generation import LangChainTextGenerator, get_llm

__all__ = [
    "EmbeddingService",
    "LangChainTextGenerator",
    "get_llm",
]
