"""
Demo configuration using pydantic-settings.

Loads configuration from DATASTAR_DEMO_* environment variables with
sensible defaults.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DATASTAR_VERSION = "1.0.0-RC.6"


class Settings(BaseSettings):
    """Demo settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DATASTAR_DEMO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = "127.0.0.1"
    port: int = 8080
    reload: bool = False

    # Client framework
    datastar_version: str = DATASTAR_VERSION

    # Generated docs
    docs_dir: Path = Path("docs")

    @property
    def datastar_cdn_url(self) -> str:
        return (
            "https://cdn.jsdelivr.net/gh/starfederation/datastar@"
            f"{self.datastar_version}/bundles/datastar.js"
        )

    @property
    def docs_index(self) -> Path:
        return self.docs_dir / "index.html"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
