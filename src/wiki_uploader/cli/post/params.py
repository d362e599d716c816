"""Immutable parameter dataclasses for post commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class PostUploadParams:
    """Immutable parameters for uploading a post."""

    kind: str
    target_url: str
    manifest_path: Path
    config_path: Optional[Path]
    base_url: Optional[str]
    dry_run: bool

    @classmethod
    def from_cli(
        cls,
        kind: str,
        target_url: str,
        manifest: Path,
        config: Optional[Path] = None,
        base_url: Optional[str] = None,
        dry_run: bool = False,
        **kwargs,
    ) -> "PostUploadParams":
        """Create from CLI arguments."""
        return cls(
            kind=kind,
            target_url=target_url.strip(),
            manifest_path=manifest.expanduser(),
            config_path=config.expanduser() if config else None,
            base_url=base_url,
            dry_run=dry_run,
        )


@dataclass(frozen=True)
class PostDeleteParams:
    """Immutable parameters for deleting a post."""

    target_url: str
    config_path: Optional[Path]
    base_url: Optional[str]

    @classmethod
    def from_cli(
        cls,
        target_url: str,
        config: Optional[Path] = None,
        base_url: Optional[str] = None,
        **kwargs,
    ) -> "PostDeleteParams":
        """Create from CLI arguments."""
        return cls(
            target_url=target_url.strip(),
            config_path=config.expanduser() if config else None,
            base_url=base_url,
        )
