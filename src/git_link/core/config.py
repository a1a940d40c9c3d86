"""Configuration for link resolution with pydantic-based settings."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GitLinkConfig(BaseSettings):
    """Configuration for the external programs and the object cache.

    Values are read from ``GIT_LINK_*`` environment variables (or a ``.env``
    file) when not passed explicitly.

    Attributes:
        vcs_program: Version-control program to invoke
        remote_program: Remote-execution program used for non-local access points
        metadata_dirname: Name of the directory marking a repository root
        cache_root: Directory holding cached objects (system temp dir if unset)
        cache_prefix: Prefix of each per-hash cache directory
        remote_timeout: Seconds to wait for a remote invocation (no limit if unset)
        store_links: Whether links may be stored for files inside repositories
        log_level: Logging level used by the HTTP entry point
    """

    model_config = SettingsConfigDict(
        env_prefix="GIT_LINK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    vcs_program: str = Field(
        default="git", description="Version-control program to invoke"
    )
    remote_program: str = Field(
        default="ssh", description="Remote-execution program for remote access points"
    )
    metadata_dirname: str = Field(
        default=".git", description="Directory marking a repository root"
    )
    cache_root: Optional[str] = Field(
        default=None, description="Cache directory (system temp dir if unset)"
    )
    cache_prefix: str = Field(
        default="git-link-", description="Prefix of per-hash cache directories"
    )
    remote_timeout: Optional[float] = Field(
        default=None, gt=0, description="Timeout in seconds for remote invocations"
    )
    store_links: bool = Field(
        default=True, description="Whether links may be stored for repository files"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level for the HTTP service"
    )

    @field_validator("vcs_program", "remote_program")
    @classmethod
    def validate_program(cls, v: str) -> str:
        """Reject blank program names."""
        if not v.strip():
            raise ValueError("program name must not be empty")
        return v

    @field_validator("metadata_dirname")
    @classmethod
    def validate_metadata_dirname(cls, v: str) -> str:
        """The marker must be a single directory name."""
        if not v or "/" in v or v in (".", ".."):
            raise ValueError(f"metadata_dirname must be a plain name, got {v!r}")
        return v

    @field_validator("cache_prefix")
    @classmethod
    def validate_cache_prefix(cls, v: str) -> str:
        if "/" in v:
            raise ValueError("cache_prefix must not contain '/'")
        return v

    @property
    def cache_path(self) -> Path:
        """Resolved cache root directory."""
        if self.cache_root:
            return Path(self.cache_root).expanduser()
        return Path(tempfile.gettempdir())


def get_config() -> GitLinkConfig:
    """Get configuration from environment variables."""
    return GitLinkConfig()
