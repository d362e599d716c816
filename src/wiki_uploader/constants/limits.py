"""Protocol constants and defaults for the wiki uploader.

This module contains:
- Two-phase protocol field names
- Timeout defaults
- User-facing progress and confirmation texts

MODIFICATION GUIDE:
------------------
- PROTOCOL_* names are part of the server contract; change them together
  with the server
- Timeouts of None mean "wait forever"
"""

from typing import Final

# =============================================================================
# PROTOCOL
# =============================================================================

PROTOCOL_STEP_FIELD: Final[str] = "step"
"""JSON field distinguishing the two POSTs sent to the same resource URL."""

PROTOCOL_STEP_GRANTS: Final[str] = "1"
"""Step value of the grant request."""

PROTOCOL_STEP_COMMIT: Final[str] = "2"
"""Step value of the metadata commit."""

PROTOCOL_DEFAULT_COUNT_FIELD: Final[str] = "file_amount"
"""Default name of the field holding the number of grants requested."""

PROTOCOL_GRANTS_FIELD: Final[str] = "presigned_urls"
"""Response field listing the grants."""

PROTOCOL_LEGACY_THUMBNAIL_GRANT_FIELD: Final[str] = "thumbnail_presigned_url"
"""Older art endpoints answer with a separate thumbnail grant..."""

PROTOCOL_LEGACY_ART_GRANTS_FIELD: Final[str] = "art_presigned_urls"
"""...and a list of gallery grants."""


# =============================================================================
# TIMEOUTS
# =============================================================================

REQUEST_TIMEOUT_SECONDS: Final[float] = 60.0
"""Timeout for grant, commit and delete calls."""

STORAGE_TIMEOUT_SECONDS: Final[float | None] = None
"""Timeout for object storage writes. A stalled write stalls the submission."""


# =============================================================================
# USER-FACING TEXT
# =============================================================================

PROGRESS_REQUESTING_GRANTS: Final[str] = "Requesting permission to upload..."
PROGRESS_UPLOADING_ASSETS: Final[str] = "Uploading image files..."
PROGRESS_COMMITTING: Final[str] = "Uploading metadata..."
PROGRESS_DONE: Final[str] = "Upload successful!"

DELETE_CONFIRMATIONS: Final[tuple[str, str]] = (
    "Are you SURE you want to DELETE THIS POST? This CANNOT be undone!",
    "Again, CANNOT BE UNDONE. Everything will be gone. Admins won't be able to restore it. You sure?",
)
"""Both prompts must be accepted before a post is deleted."""

REMOVE_ASSET_CONFIRMATIONS: Final[tuple[str, str]] = (
    "Remove this image from the post?",
    "Are you sure? The image will have to be selected again to bring it back.",
)
"""Both prompts must be accepted before an asset is removed."""
