"""Data models for post assets."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from ..constants import AssetRole, AssetState


def _new_asset_id() -> str:
    return uuid.uuid4().hex


def _check_payload(
    state: AssetState,
    data: bytes | None,
    content_type: str | None,
    key: str | None,
) -> None:
    if state is AssetState.LOCAL:
        if data is None or key is not None:
            raise ValueError("Local assets carry bytes and no key")
        if not content_type:
            raise ValueError("Local assets need a content type")
    elif not key or data is not None:
        raise ValueError("Uploaded assets carry a key and no bytes")


@dataclass
class Asset:
    """A media asset of a post.

    A LOCAL asset carries raw bytes and a content type; an UPLOADED asset
    carries the remote key its bytes are stored under. Never both.
    """
    role: AssetRole
    state: AssetState
    data: bytes | None = None
    content_type: str | None = None
    key: str | None = None
    position: int | None = None
    filename: str | None = None
    id: str = field(default_factory=_new_asset_id)

    def __post_init__(self) -> None:
        self._check_payload()
        if self.role is AssetRole.GALLERY and self.position is None:
            raise ValueError("Gallery assets need a position")
        if self.role is not AssetRole.GALLERY and self.position is not None:
            raise ValueError(f"{self.role.value} assets have no position")

    def _check_payload(self) -> None:
        _check_payload(self.state, self.data, self.content_type, self.key)

    @property
    def is_local(self) -> bool:
        return self.state is AssetState.LOCAL

    @property
    def is_uploaded(self) -> bool:
        return self.state is AssetState.UPLOADED

    @property
    def size(self) -> int:
        """Number of unsent bytes (0 once uploaded)."""
        return len(self.data) if self.data is not None else 0

    def set_local(self, data: bytes, content_type: str, filename: str | None = None) -> None:
        """Reset to LOCAL with new bytes, discarding any previous key."""
        _check_payload(AssetState.LOCAL, data, content_type, None)
        self.state = AssetState.LOCAL
        self.data = data
        self.content_type = content_type
        self.key = None
        if filename is not None:
            self.filename = filename

    def set_uploaded(self, key: str) -> None:
        """Drop the local bytes and record the remote key."""
        _check_payload(AssetState.UPLOADED, None, self.content_type, key)
        self.state = AssetState.UPLOADED
        self.key = key
        self.data = None

    def __repr__(self) -> str:
        where = f"key={self.key!r}" if self.is_uploaded else f"{self.size} bytes"
        pos = f" @{self.position}" if self.position is not None else ""
        return f"<Asset {self.id[:8]} {self.role.value}{pos} {self.state.value} {where}>"
