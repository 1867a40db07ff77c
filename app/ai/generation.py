"""
LangChain bridge for free-text generation.
The generator boundary returns raw text; structure is recovered downstream.
"""

from __future__ import annotations

from typing import Any, Optional

import structlog
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_openai import ChatOpenAI

from app.core.ai_models import AIModelConfig

logger = structlog.get_logger(__name__)


def _build_openai(*, temperature: float) -> BaseChatModel | None:
    if not AIModelConfig.is_openai_available():
        return None
    return ChatOpenAI(
        model=AIModelConfig.OPENAI_CHAT_MODEL,
        temperature=temperature,
        api_key=AIModelConfig.OPENAI_API_KEY,
    )


def get_llm(temperature: Optional[float] = None, capability: str = "GENERATION") -> BaseChatModel:
    """Returns the configured chat model for the given capability."""
    cap = (capability or "CHAT").strip().upper()
    temp = (
        AIModelConfig.get_temperature_for_capability(cap)
        if temperature is None
        else float(temperature)
    )
    model = _build_openai(temperature=temp)
    if model is None:
        raise ValueError("No valid AI Provider found. Set OPENAI_API_KEY.")
    return model


def message_text(message: Any) -> str:
    """Flattens a chat message (string or content-part list) into plain text."""
    content = getattr(message, "content", message)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type", "text") == "text":
                parts.append(str(part.get("text", "")))
        return "".join(parts)
    return str(content or "")


class LangChainTextGenerator:
    """Generator boundary over any LangChain chat model."""

    def __init__(self, llm: Optional[BaseChatModel] = None):
        self._llm = llm or get_llm(capability="GENERATION")

    async def invoke(self, prompt: str) -> str:
        message = await self._llm.ainvoke(prompt)
        text = message_text(message)
        logger.debug("generator_response_received", response_chars=len(text))
        return text
