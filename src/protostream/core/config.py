"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="PROTO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Protocol
    generation_mode: str = Field(
        default="canvas", pattern="^(canvas|design)$", description="Delimiter grammar variant"
    )
    default_profile: str = Field(default="compact", description="Device profile name")

    # Assembly
    show_hotspots: bool = Field(default=True, description="Outline navigation triggers on load")
    include_tailwind: bool = Field(default=True, description="Link Tailwind into assembled documents")
    tailwind_url: str = Field(
        default="https://cdn.tailwindcss.com", description="Tailwind runtime stylesheet URL"
    )

    # Caching
    enable_cache: bool = Field(default=True, description="Cache assembled prototypes")
    cache_size: int = Field(default=32, gt=0, description="Cache max size")
    cache_ttl: int = Field(default=3600, gt=0, description="Cache TTL (seconds)")

    # Streaming
    stream_batch_size: int = Field(default=1, gt=0, description="Characters per parser pass")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
