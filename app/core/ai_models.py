"""
Centralized AI model configuration for the employee seeder.
Every model name and default temperature is resolved here, never inline.
"""

from app.core.settings import settings


class AIModelConfig:
    # OpenAI Configuration
    OPENAI_API_KEY = settings.OPENAI_API_KEY
    OPENAI_CHAT_MODEL = settings.OPENAI_CHAT_MODEL

    # Embedding Configuration
    OPENAI_EMBEDDING_MODEL = settings.OPENAI_EMBEDDING_MODEL
    EMBEDDING_DIMENSIONS = settings.EMBEDDING_DIMENSIONS

    # Default Temperatures
    DEFAULT_TEMPERATURE_CHAT = 0.0
    DEFAULT_TEMPERATURE_GENERATION = settings.GENERATION_TEMPERATURE

    _TEMPERATURE_BY_CAPABILITY = {
        "CHAT": DEFAULT_TEMPERATURE_CHAT,
        "GENERATION": DEFAULT_TEMPERATURE_GENERATION,
    }

    @classmethod
    def is_openai_available(cls) -> bool:
        return bool(cls.OPENAI_API_KEY)

    @classmethod
    def get_temperature_for_capability(cls, capability: str) -> float:
        normalized = (capability or "CHAT").strip().upper()
        return cls._TEMPERATURE_BY_CAPABILITY.get(normalized, cls.DEFAULT_TEMPERATURE_CHAT)
