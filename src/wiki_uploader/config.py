"""Uploader configuration loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any
from urllib.parse import urljoin, urlsplit

import yaml
from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import REQUEST_TIMEOUT_SECONDS, STORAGE_TIMEOUT_SECONDS

# Load .env file
load_dotenv()


class UploaderSettings(BaseSettings):
    """Settings for talking to the wiki backend and object storage.

    Values come from WIKI_UPLOADER_* environment variables (or a .env file),
    optionally overridden by a YAML config file.
    """

    model_config = SettingsConfigDict(env_prefix="WIKI_UPLOADER_", extra="ignore")

    base_url: str | None = None
    request_timeout: float | None = REQUEST_TIMEOUT_SECONDS
    storage_timeout: float | None = STORAGE_TIMEOUT_SECONDS
    log_dir: Path = Field(default_factory=lambda: Path.cwd() / "logs")
    user_agent: str = "wiki-uploader"

    def resolve_url(self, target: str) -> str:
        """Turn a page path like /art/new into an absolute URL.

        Absolute URLs are returned unchanged.
        """
        if urlsplit(target).scheme:
            return target
        if not self.base_url:
            raise ValueError(
                f"Cannot resolve relative URL {target!r}: "
                "set WIKI_UPLOADER_BASE_URL or pass a full URL"
            )
        return urljoin(self.base_url, target)


def load_settings(config_path: Path | None = None, **overrides: Any) -> UploaderSettings:
    """Load settings from the environment, a YAML file and explicit overrides.

    Args:
        config_path: Optional YAML file with setting names as keys.
        **overrides: Values taking precedence over everything else.

    Returns:
        Validated UploaderSettings.
    """
    data: dict[str, Any] = {}
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {config_path}")

    data.update({k: v for k, v in overrides.items() if v is not None})
    return UploaderSettings(**data)
