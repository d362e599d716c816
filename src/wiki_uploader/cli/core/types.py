"""Core types for CLI - immutable data structures and Result type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar, Generic, Union, Any

if TYPE_CHECKING:
    from ...upload.models import SubmissionResult

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful result containing a value."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False


@dataclass(frozen=True)
class Failure:
    """Failed result containing an error message."""

    error: str
    details: dict[str, Any] | None = None

    @classmethod
    def from_submission(cls, result: "SubmissionResult") -> "Failure":
        """Describe a failed submission, keeping the state it stopped in."""
        details: dict[str, Any] = {"stopped at": result.status.value}
        if result.http_status is not None:
            details["http status"] = result.http_status
        if result.failed_assets:
            details["failed assets"] = ", ".join(a[:8] for a in result.failed_assets)
        return cls(result.message, details)

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True


# Result type - either Success[T] or Failure
Result = Union[Success[T], Failure]
