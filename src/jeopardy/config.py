"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from jeopardy import __version__
from jeopardy.constants import (
    CATEGORY_POOL_SIZE,
    CELL_PLACEHOLDER,
    JSERVICE_API_URL,
    NUM_CATEGORIES,
    NUM_CLUES_PER_CATEGORY,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Trivia API
    trivia_api_url: str = Field(
        default=JSERVICE_API_URL,
        description="Base URL of the jService-compatible trivia API",
    )
    trivia_api_timeout: float = Field(default=10.0, gt=0, description="Trivia API timeout in seconds")
    trivia_api_user_agent: str = Field(
        default=f"Jeopardy/{__version__}", description="User-Agent sent to the trivia API"
    )
    api_max_attempts: int = Field(
        default=3, ge=1, description="Attempts per trivia API call on transport errors (1 disables retry)"
    )

    # Board
    num_categories: int = Field(default=NUM_CATEGORIES, ge=1, description="Categories (columns) per board")
    clues_per_category: int = Field(
        default=NUM_CLUES_PER_CATEGORY, ge=1, description="Clues (rows) per category"
    )
    category_pool_size: int = Field(
        default=CATEGORY_POOL_SIZE, ge=1, description="Candidate categories fetched before sampling"
    )
    cell_placeholder: str = Field(default=CELL_PLACEHOLDER, description="Text shown for unrevealed cells")
    load_board_on_startup: bool = Field(
        default=True, description="Start loading a board when the API server starts"
    )

    # App
    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    debug: bool | None = Field(default=None, description="Debug mode (defaults based on environment)")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    cors_origins: list[str] = Field(
        default=["http://localhost:5173", "http://localhost:3000"],
        description="Allowed CORS origins",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.environment == "development"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def debug_enabled(self) -> bool:
        """Get debug mode, defaulting based on environment if not explicitly set."""
        if self.debug is not None:
            return self.debug
        return self.is_development


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience alias
settings = get_settings()
