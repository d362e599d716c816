"""Backend gateway for the two-phase post protocol."""

from .client import ServerGateway
from .models import (
    CommitResult,
    DeleteResult,
    Grant,
    GrantResponse,
)

__all__ = [
    "ServerGateway",
    "CommitResult",
    "DeleteResult",
    "Grant",
    "GrantResponse",
]
