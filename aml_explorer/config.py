"""Application configuration and settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "AML Explorer"
    app_version: str = "1.0.0"
    debug: bool = False
    port: int = 8000

    # API
    api_prefix: str = "/api/v1"

    # Block explorer (Blockbook-compatible API)
    explorer_base_url: str = "https://btc1.trezor.io/api"
    explorer_timeout: float = 30.0
    explorer_max_connections: int = Field(
        default=8,
        description="Keep-alive connections held per explorer host",
    )

    # Datasets
    data_dir: str = Field(default="./data", description="Root directory of dataset folders")
    default_data_folder: str = "1111DAYXhoxZx2tsRnzimfozo783x1yC2"
    folder_name_min_length: int = 14
    folder_name_max_length: int = 74

    # Demo transaction used by the CLI
    test_tx_id: str = "d6176384de4c0b98702eccb97f3ad6670bc8410d9da715fe5b49462d3e603993"


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
