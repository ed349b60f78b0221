from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# .env sits in the project root (same level as "servicedir/")
ENV_FILE = Path(__file__).resolve().parents[2] / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Service Directory"
    env: str = "dev"
    mongo_uri: str = Field("mongodb://localhost:27017", validation_alias="MONGO_URI")
    mongo_db: str = Field("servicedir", validation_alias="MONGO_DB")

    default_country: str = Field("AU", validation_alias="DEFAULT_COUNTRY")

    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    log_file: Optional[str] = Field(None, validation_alias="LOG_FILE")

    cors_origins: List[str] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ]
    )

    openai_api_key: str = Field("", validation_alias="OPENAI_API_KEY")
    openai_model: str = Field("gpt-4o-mini", validation_alias="OPENAI_MODEL")
    openai_image_model: str = Field("dall-e-3", validation_alias="OPENAI_IMAGE_MODEL")
    generate_icons: bool = Field(False, validation_alias="GENERATE_ICONS")
    import_concurrency: int = Field(4, validation_alias="IMPORT_CONCURRENCY")

    # category slug -> offered tags; replaces the built-in vocabulary.
    # CATEGORY_TAGS is read as JSON
    category_tags_file: Optional[str] = Field(None, validation_alias="CATEGORY_TAGS_FILE")
    category_tags: Dict[str, List[str]] = Field(default_factory=dict)


@lru_cache
def get_settings() -> Settings:
    load_dotenv(ENV_FILE)
    return Settings()
