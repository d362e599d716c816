"""Exceptions raised while assembling and submitting a post.

All of them derive from UploadError so the editing session can turn any
failure into a user-visible message without stopping the process.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .assets.models import Asset


class UploadError(Exception):
    """Base exception for submission errors."""

    @property
    def user_message(self) -> str:
        """Text shown to the editor."""
        return str(self)


class ValidationError(UploadError):
    """A form field or a required asset is missing or invalid.

    Raised before any network call; nothing has been mutated.
    """

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field

    @property
    def user_message(self) -> str:
        return f"ERROR: {self}"


class ProtocolError(UploadError):
    """The server broke the two-phase protocol (e.g. wrong grant count)."""

    def __init__(self, message: str, expected: int | None = None, received: int | None = None):
        super().__init__(message)
        self.expected = expected
        self.received = received


class ServerError(UploadError):
    """The backend answered with a 4xx/5xx status."""

    def __init__(self, status: int, reason: str = "", body: str = ""):
        super().__init__(f"ERROR {status}, {reason}: {body}" if reason else f"ERROR {status}: {body}")
        self.status = status
        self.reason = reason
        self.body = body


class StorageWriteError(UploadError):
    """One or more object storage writes failed.

    Attributes:
        failures: (asset, reason) pairs, one per failed write.
    """

    def __init__(self, failures: list[tuple["Asset", str]]):
        self.failures = failures
        names = ", ".join(
            f"{asset.filename or asset.id} ({reason})" for asset, reason in failures
        )
        super().__init__(f"Failed to upload {len(failures)} file(s): {names}")


class NetworkError(UploadError):
    """The backend could not be reached, e.g. a refused connection or a timeout."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Could not reach {url}: {reason}")
        self.url = url
        self.reason = reason


class SubmissionInProgressError(UploadError):
    """A submission was started while another one is still in flight."""

    def __init__(self, message: str = "A submission is already in progress."):
        super().__init__(message)


class StoreLockedError(UploadError):
    """The asset store refused a structural change during a submission."""

    def __init__(self, message: str = "Assets cannot be changed while a submission is in progress."):
        super().__init__(message)


class UnknownAssetError(KeyError):
    """No asset with the given id exists in the store."""

    def __init__(self, asset_id: str):
        super().__init__(asset_id)
        self.asset_id = asset_id

    def __str__(self) -> str:
        return f"Unknown asset: {self.asset_id}"
