from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from vigenere_es.models.schemas import KeyLengthStrategy


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Vigenère Cryptanalysis Service"
    app_env: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    api_v1_prefix: str = "/api/v1"
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite+aiosqlite:///./vigenere.db"

    # Analysis settings
    max_ciphertext_length: int = 100_000
    ic_epsilon: float = Field(default=0.001, gt=0.0)
    max_key_length: int = Field(default=64, ge=1)
    key_length_strategy: KeyLengthStrategy = KeyLengthStrategy.AVERAGED
    rng_seed: int | None = None

    # History
    history_preview_length: int = 100

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
