"""Status enums and state constants for the wiki uploader.

This module contains the enums that drive the upload state machines:
- Asset roles and asset lifecycle states
- Submission (two-phase upload) states

Workflow of a submission:
  IDLE -> REQUESTING_GRANTS -> UPLOADING_ASSETS -> COMMITTING_METADATA -> DONE
              |                      |                     |
              v                      v                     v
           FAILED                 FAILED                FAILED

MODIFICATION GUIDE:
------------------
- Add new enum values at the END to maintain backwards compatibility
- Singleton roles must also be added to SINGLETON_ROLES in grant order
"""

from enum import Enum
from typing import Final


# =============================================================================
# ASSET ROLES
# =============================================================================

class AssetRole(str, Enum):
    """Role an asset plays inside a post."""

    GALLERY = "gallery"
    """Ordered gallery entry (art pieces of an art post)."""

    THUMBNAIL = "thumbnail"
    """Preview image shown in listings. At most one per post."""

    LOGO = "logo"
    """Character logo. At most one per post."""

    PAGE_IMAGE = "page_image"
    """Main character page image. At most one per post."""

    @property
    def is_singleton(self) -> bool:
        """Whether at most one asset with this role may exist."""
        return self is not AssetRole.GALLERY


SINGLETON_ROLES: Final[tuple[AssetRole, ...]] = (
    AssetRole.THUMBNAIL,
    AssetRole.LOGO,
    AssetRole.PAGE_IMAGE,
)
"""Singleton roles in the order they are counted and given upload grants."""


# =============================================================================
# ASSET STATE
# =============================================================================

class AssetState(str, Enum):
    """Where the bytes of an asset currently live."""

    LOCAL = "local"
    """Bytes exist only in this editing session."""

    UPLOADED = "uploaded"
    """Bytes are durably stored under a remote key."""


# =============================================================================
# SUBMISSION STATUS
# =============================================================================

class UploadStatus(str, Enum):
    """Status of a two-phase submission."""

    IDLE = "idle"
    """No submission has started."""

    REQUESTING_GRANTS = "requesting_grants"
    """Phase 1: asking the server for upload grants."""

    UPLOADING_ASSETS = "uploading_assets"
    """Writing local bytes to object storage."""

    COMMITTING_METADATA = "committing_metadata"
    """Phase 2: sending the post fields and asset keys."""

    DONE = "done"
    """The server accepted the post."""

    FAILED = "failed"
    """The submission stopped; see the failure reason."""

    @property
    def is_in_flight(self) -> bool:
        """Whether a submission is currently between phases."""
        return self in (
            UploadStatus.REQUESTING_GRANTS,
            UploadStatus.UPLOADING_ASSETS,
            UploadStatus.COMMITTING_METADATA,
        )
