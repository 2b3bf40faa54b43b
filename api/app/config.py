# api/app/config.py
from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application configuration.

    Loads environment variables from `.env` and is passed explicitly
    into the webhook verifier and the LLM client.
    """

    # ─────────────────────────────────────────────
    # Pydantic Settings Config
    # ─────────────────────────────────────────────
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ─────────────────────────────────────────────
    # Database
    # ─────────────────────────────────────────────
    database_url: str
    database_pool_size: int = 10
    database_max_overflow: int = 20

    # ─────────────────────────────────────────────
    # OpenAI (recommendations)
    # ─────────────────────────────────────────────
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o"
    openai_temperature: float = 0.7
    openai_max_tokens: int = 2048
    openai_timeout_seconds: float = 30.0

    # ─────────────────────────────────────────────
    # ElevenLabs voice agent
    # ─────────────────────────────────────────────
    elevenlabs_webhook_secret: str | None = None
    elevenlabs_agent_id: str | None = None

    # ─────────────────────────────────────────────
    # Identity provider tokens
    # ─────────────────────────────────────────────
    auth_jwt_secret: str
    auth_jwt_algorithm: str = "HS256"

    # ─────────────────────────────────────────────
    # API
    # ─────────────────────────────────────────────
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    @property
    def llm_enabled(self) -> bool:
        return bool(self.openai_api_key)


# ─────────────────────────────────────────────
# Cached Settings Instance
# ─────────────────────────────────────────────
@lru_cache
def get_settings() -> Settings:
    """
    Returns a cached Settings instance so config
    is only loaded once per process.
    """
    return Settings()
