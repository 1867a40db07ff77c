import logging
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


logger = logging.getLogger(__name__)


PROJECT_ROOT = Path(__file__).resolve().parents[2]
ROOT_ENV = PROJECT_ROOT / ".env"
ROOT_ENV_LOCAL = PROJECT_ROOT / ".env.local"


class Settings(BaseSettings):
    """
    Employee Seeder - Global Configuration Registry
    Centralizes all environment variables using Pydantic Settings.
    """

    model_config = SettingsConfigDict(
        env_file=(str(ROOT_ENV), str(ROOT_ENV_LOCAL)),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # AI Models & Services
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_CHAT_MODEL: str = "gpt-4o-mini"
    OPENAI_EMBEDDING_MODEL: str = "text-embedding-3-small"
    EMBEDDING_DIMENSIONS: int = Field(1536, gt=0)
    GENERATION_TEMPERATURE: float = Field(0.7, ge=0.0, le=2.0)

    # Vector store (MongoDB Atlas)
    MONGODB_ATLAS_URI: Optional[str] = None
    MONGODB_DATABASE: str = "hr_database"
    MONGODB_COLLECTION: str = "employees"
    VECTOR_INDEX_NAME: str = "vector_index"
    VECTOR_TEXT_KEY: str = "embedding_text"
    VECTOR_EMBEDDING_KEY: str = "embedding"
    VECTOR_INDEX_AUTO_CREATE: bool = True

    # Seeding / Throughput controls
    SEED_RECORD_COUNT: int = Field(10, gt=0)
    INGEST_BATCH_SIZE: int = Field(5, gt=0)
    SUMMARY_MAX_CONCURRENCY: int = Field(8, gt=0)
    SEED_RESET_COLLECTION: bool = False

    # Extraction
    EXTRACTION_MAX_PARSE_CHARS: int = Field(20000, gt=0)

    # Runtime
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True
    APP_ENV: Literal["local", "development", "staging", "production"] = "local"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str | None) -> str:
        return str(value or "INFO").strip().upper()

    @field_validator("APP_ENV", mode="before")
    @classmethod
    def _normalize_environment_label(cls, value: str | None) -> str:
        return str(value or "local").strip().lower()

    @field_validator("VECTOR_TEXT_KEY", "VECTOR_EMBEDDING_KEY", "VECTOR_INDEX_NAME")
    @classmethod
    def _reject_blank_names(cls, value: str) -> str:
        cleaned = str(value or "").strip()
        if not cleaned:
            raise ValueError("vector store names must not be blank")
        return cleaned

    @property
    def is_deployed_environment(self) -> bool:
        return self.APP_ENV in {"staging", "production"}


settings = Settings()  # type: ignore[call-arg]
