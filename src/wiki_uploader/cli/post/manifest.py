"""YAML manifests describing a post to upload from the command line.

Example:

    fields:
      title: Dark Knight
      creation_date: 2024-05-01
      creators: alice, bob
    assets:
      thumbnail: thumb.png
      gallery:
        - piece-1.png
        - key: https://bucket.example/art/piece-2.png

Asset entries are either a file path (relative to the manifest) or a
mapping with the key of an already uploaded object.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from ...constants import AssetRole


class AssetSource(BaseModel):
    """A file to upload, or the key of an existing upload."""

    path: Path | None = None
    key: str | None = None
    content_type: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _from_shorthand(cls, data: Any) -> Any:
        if isinstance(data, (str, Path)):
            return {"path": data}
        return data

    @model_validator(mode="after")
    def _exactly_one_source(self) -> "AssetSource":
        if (self.path is None) == (self.key is None):
            raise ValueError("each asset needs exactly one of 'path' or 'key'")
        return self

    @property
    def is_existing(self) -> bool:
        return self.key is not None


class ManifestAssets(BaseModel):
    """Assets section of a manifest."""

    thumbnail: AssetSource | None = None
    logo: AssetSource | None = None
    page_image: AssetSource | None = None
    gallery: list[AssetSource] = Field(default_factory=list)

    def singletons(self) -> list[tuple[AssetRole, AssetSource]]:
        pairs = [
            (AssetRole.THUMBNAIL, self.thumbnail),
            (AssetRole.LOGO, self.logo),
            (AssetRole.PAGE_IMAGE, self.page_image),
        ]
        return [(role, source) for role, source in pairs if source is not None]


class PostManifest(BaseModel):
    """A post's field values and assets."""

    fields: dict[str, Any] = Field(default_factory=dict)
    assets: ManifestAssets = Field(default_factory=ManifestAssets)

    @field_validator("fields", mode="before")
    @classmethod
    def _fields_default(cls, value: Any) -> Any:
        return value or {}

    def resolve_paths(self, base_dir: Path) -> "PostManifest":
        """Make relative asset paths relative to base_dir."""
        sources = [source for _, source in self.assets.singletons()] + self.assets.gallery
        for source in sources:
            if source.path is not None and not source.path.is_absolute():
                source.path = base_dir / source.path
        return self

    def missing_files(self) -> list[Path]:
        sources = [source for _, source in self.assets.singletons()] + self.assets.gallery
        return [
            source.path for source in sources
            if source.path is not None and not source.path.is_file()
        ]


def load_manifest(manifest_path: Path) -> PostManifest:
    """Load and validate a manifest file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the YAML is not a mapping.
        pydantic.ValidationError: If the structure is invalid.
    """
    if not manifest_path.exists():
        raise FileNotFoundError(f"Manifest not found: {manifest_path}")

    with open(manifest_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Manifest must contain a mapping: {manifest_path}")

    manifest = PostManifest.model_validate(data)
    return manifest.resolve_paths(manifest_path.parent)
