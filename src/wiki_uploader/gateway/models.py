"""Data models for the two-phase post protocol."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlsplit, urlunsplit

from pydantic import BaseModel, model_validator

from ..constants import (
    PROTOCOL_GRANTS_FIELD,
    PROTOCOL_LEGACY_ART_GRANTS_FIELD,
    PROTOCOL_LEGACY_THUMBNAIL_GRANT_FIELD,
)


@dataclass(frozen=True)
class Grant:
    """A presigned URL authorizing one direct write to object storage."""
    url: str

    @property
    def key(self) -> str:
        """Remote key of the object the grant writes: the URL minus its signature."""
        parts = urlsplit(self.url)
        return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))

    def __repr__(self) -> str:
        # The query string is a credential
        return f"Grant({self.key!r})"


class GrantPayload(BaseModel):
    """Body of a successful grant response.

    Accepts {"presigned_urls": [...]} as well as the older art shape
    {"thumbnail_presigned_url": ..., "art_presigned_urls": [...]}, which is
    flattened thumbnail first.
    """

    presigned_urls: list[str]

    @model_validator(mode="before")
    @classmethod
    def _flatten_legacy_shape(cls, data: Any) -> Any:
        if not isinstance(data, dict) or PROTOCOL_GRANTS_FIELD in data:
            return data
        if PROTOCOL_LEGACY_ART_GRANTS_FIELD in data or PROTOCOL_LEGACY_THUMBNAIL_GRANT_FIELD in data:
            urls = []
            thumbnail = data.get(PROTOCOL_LEGACY_THUMBNAIL_GRANT_FIELD)
            if thumbnail:
                urls.append(thumbnail)
            urls.extend(data.get(PROTOCOL_LEGACY_ART_GRANTS_FIELD) or [])
            return {PROTOCOL_GRANTS_FIELD: urls}
        return data


@dataclass
class GrantResponse:
    """Result of phase 1."""
    ok: bool
    status: int
    grants: list[Grant] = field(default_factory=list)


@dataclass
class CommitResult:
    """Result of phase 2.

    redirect_url is set when the server redirected to the created or updated
    resource, which signals it was persisted.
    """
    ok: bool
    status: int
    redirect_url: str | None = None
    error_body: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "ok": self.ok,
            "status": self.status,
            "redirect_url": self.redirect_url,
            "error_body": self.error_body,
        }


@dataclass
class DeleteResult:
    """Result of a DELETE on a post."""
    ok: bool
    status: int
