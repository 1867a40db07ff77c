from __future__ import annotations

import pytest
from pydantic import ValidationError

from app.core.ai_models import AIModelConfig
from app.core.settings import Settings


def test_defaults_match_the_hr_collection_layout() -> None:
    settings = Settings.model_validate({})

    assert settings.MONGODB_DATABASE == "hr_database"
    assert settings.MONGODB_COLLECTION == "employees"
    assert settings.VECTOR_INDEX_NAME == "vector_index"
    assert settings.VECTOR_TEXT_KEY == "embedding_text"
    assert settings.VECTOR_EMBEDDING_KEY == "embedding"
    assert settings.INGEST_BATCH_SIZE == 5


def test_environment_and_log_level_are_normalized() -> None:
    settings = Settings.model_validate({"APP_ENV": " Production ", "LOG_LEVEL": "debug"})

    assert settings.APP_ENV == "production"
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.is_deployed_environment is True


@pytest.mark.parametrize(
    "overrides",
    [
        {"INGEST_BATCH_SIZE": 0},
        {"SEED_RECORD_COUNT": -1},
        {"EMBEDDING_DIMENSIONS": 0},
        {"GENERATION_TEMPERATURE": 3.5},
        {"VECTOR_EMBEDDING_KEY": "  "},
        {"APP_ENV": "qa"},
    ],
)
def test_invalid_values_are_rejected(overrides: dict) -> None:
    with pytest.raises(ValidationError):
        Settings.model_validate(overrides)


def test_temperature_by_capability() -> None:
    assert AIModelConfig.get_temperature_for_capability("CHAT") == AIModelConfig.DEFAULT_TEMPERATURE_CHAT
    assert (
        AIModelConfig.get_temperature_for_capability("generation")
        == AIModelConfig.DEFAULT_TEMPERATURE_GENERATION
    )
