"""Application configuration using Pydantic settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mindi.constants import BOT_MOVE_DELAY, GAME_OVER_DELAY, TRICK_RESOLUTION_DELAY


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")  # noqa: S104
    port: int = Field(default=8000, description="Server port")
    environment: str = Field(default="development", description="Environment")
    frontend_url: str = Field(default="http://localhost:5173", description="Frontend URL")
    log_level: str = Field(default="INFO", description="Log level for the mindi loggers")

    # Game Configuration
    default_table_size: int = Field(default=4, description="Table size when none is given")
    max_sessions: int = Field(default=100, ge=1, description="Max matches held in memory")
    session_ttl: float = Field(
        default=3600, ge=0, description="Seconds a session may sit untouched before it is reclaimed"
    )

    # Pacing (seconds)
    bot_move_delay: float = Field(
        default=BOT_MOVE_DELAY, ge=0, description="Delay before a bot plays"
    )
    trick_resolution_delay: float = Field(
        default=TRICK_RESOLUTION_DELAY, ge=0, description="Delay before a full trick is swept"
    )
    game_over_delay: float = Field(
        default=GAME_OVER_DELAY, ge=0, description="Delay before the winner is announced"
    )


# Global settings instance
settings = Settings()
