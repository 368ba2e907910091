"""Application settings loaded from .env file."""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Anthropic
    ANTHROPIC_API_KEY: Optional[str] = None
    ANTHROPIC_BASE_URL: str = "https://api.anthropic.com"
    ANTHROPIC_MODEL: str = "claude-3-haiku-20240307"
    ANTHROPIC_VERSION: str = "2023-06-01"
    ANTHROPIC_TIMEOUT_SECONDS: float = 30.0

    # Store
    DATABASE_PATH: str = "data/claritynow.db"
    QUERY_TIMEOUT_SECONDS: float = 5.0
    MAX_RESULT_ROWS: int = 500

    # Conversation
    HISTORY_WINDOW: int = 5
    MAX_MESSAGE_LENGTH: int = 1000

    # API
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 3001
    CORS_ORIGINS: str = "http://localhost:5173"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def is_llm_configured(self) -> bool:
        return bool(self.ANTHROPIC_API_KEY)


settings = Settings()
