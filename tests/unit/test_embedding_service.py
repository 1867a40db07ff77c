from __future__ import annotations

from typing import List

import pytest
from langchain_core.embeddings import Embeddings
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from app.ai.embeddings import EmbeddingService
from app.ai.generation import LangChainTextGenerator, message_text
from app.ai.providers.openai_embeddings import OpenAIEmbeddingProvider
from app.domain.exceptions import EmbeddingBoundaryError


class _StaticEmbeddings(Embeddings):
    def __init__(self, vectors_per_call: int | None = None, error: Exception | None = None):
        self.vectors_per_call = vectors_per_call
        self.error = error
        self.calls: List[List[str]] = []

    def embed_documents(self, texts: List[str]) -> List[List[float]]:
        raise AssertionError("sync path is not used")

    def embed_query(self, text: str) -> List[float]:
        raise AssertionError("query path is not used")

    async def aembed_documents(self, texts: List[str]) -> List[List[float]]:
        self.calls.append(list(texts))
        if self.error is not None:
            raise self.error
        count = len(texts) if self.vectors_per_call is None else self.vectors_per_call
        return [(float(i), 1.0) for i in range(count)]


def _service(client: Embeddings) -> EmbeddingService:
    return EmbeddingService(
        OpenAIEmbeddingProvider(model_name="text-embedding-3-small", dimensions=2, client=client)
    )


@pytest.mark.asyncio
async def test_one_vector_per_text_in_order() -> None:
    client = _StaticEmbeddings()

    vectors = await _service(client).embed_texts(["a", "b", "c"])

    assert vectors == [[0.0, 1.0], [1.0, 1.0], [2.0, 1.0]]
    assert client.calls == [["a", "b", "c"]]


@pytest.mark.asyncio
async def test_empty_input_makes_no_request() -> None:
    client = _StaticEmbeddings()

    assert await _service(client).embed_texts([]) == []
    assert client.calls == []


@pytest.mark.asyncio
async def test_provider_failure_becomes_boundary_error() -> None:
    client = _StaticEmbeddings(error=RuntimeError("429 rate limited"))

    with pytest.raises(EmbeddingBoundaryError) as exc_info:
        await _service(client).embed_texts(["a"])

    assert exc_info.value.context["provider"] == "openai"
    assert isinstance(exc_info.value.__cause__, RuntimeError)


@pytest.mark.asyncio
async def test_vector_count_mismatch_is_rejected() -> None:
    with pytest.raises(EmbeddingBoundaryError, match="wrong number"):
        await _service(_StaticEmbeddings(vectors_per_call=1)).embed_texts(["a", "b"])


def test_provider_profile_and_dimensions() -> None:
    service = _service(_StaticEmbeddings())

    assert service.dimensions == 2
    assert service.profile() == {"provider": "openai", "model": "text-embedding-3-small", "dimensions": 2}


def test_provider_requires_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    from app.core.ai_models import AIModelConfig

    monkeypatch.setattr(AIModelConfig, "OPENAI_API_KEY", None)

    with pytest.raises(ValueError, match="OPENAI_API_KEY"):
        OpenAIEmbeddingProvider(api_key=None)


@pytest.mark.asyncio
async def test_text_generator_returns_raw_model_text() -> None:
    llm = FakeListChatModel(responses=['Here you go: {"first_name": "Ana"}'])

    text = await LangChainTextGenerator(llm=llm).invoke("make one employee")

    assert text == 'Here you go: {"first_name": "Ana"}'


def test_message_text_flattens_content_parts() -> None:
    message = type("Msg", (), {"content": [{"type": "text", "text": "{"}, "}", {"type": "image_url"}]})()

    assert message_text(message) == "{}"
    assert message_text("plain") == "plain"
