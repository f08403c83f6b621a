"""Runtime configuration for the Maven source repository."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration values mapped from environment variables.

    Each field reads the upper-cased variable of the same name (`PROJECTS_DIR`,
    `API_TOKENS`, ...); `version` reads `APP_VERSION`.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field("Maven Source Repository")
    version: str = Field("1.0.0", validation_alias=AliasChoices("APP_VERSION", "version"))
    log_level: str = Field("INFO")

    # Storage layout
    projects_dir: str = Field("data/projects")

    # Repository surface
    default_group_id: str = Field("com.example")
    repository_base_path: str = Field("/repo")

    # Capability gates; an empty list leaves the gate open
    api_tokens: List[str] = Field(default_factory=list)
    admin_tokens: List[str] = Field(default_factory=list)

    # Upstream tag lookups
    github_api_url: str = Field("https://api.github.com")
    github_token: Optional[str] = Field(None)
    upstream_timeout: float = Field(10.0)

    # Project browser limits
    max_view_file_size: int = Field(1024 * 1024)
    tree_max_depth: int = Field(5)

    @property
    def projects_path(self) -> Path:
        return Path(self.projects_dir).resolve()


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance for dependency injection."""
    return Settings()
