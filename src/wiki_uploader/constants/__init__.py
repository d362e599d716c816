"""Global constants package for the wiki uploader.

PACKAGE STRUCTURE:
-----------------
- status.py : Asset roles, asset states, submission states
- limits.py : Protocol field names, timeouts, user-facing texts

USAGE EXAMPLES:
--------------
    from wiki_uploader.constants import AssetRole, UploadStatus
    from wiki_uploader.constants import PROTOCOL_DEFAULT_COUNT_FIELD
"""

from .status import (
    AssetRole,
    AssetState,
    UploadStatus,
    SINGLETON_ROLES,
)
from .limits import (
    PROTOCOL_STEP_FIELD,
    PROTOCOL_STEP_GRANTS,
    PROTOCOL_STEP_COMMIT,
    PROTOCOL_DEFAULT_COUNT_FIELD,
    PROTOCOL_GRANTS_FIELD,
    PROTOCOL_LEGACY_THUMBNAIL_GRANT_FIELD,
    PROTOCOL_LEGACY_ART_GRANTS_FIELD,
    REQUEST_TIMEOUT_SECONDS,
    STORAGE_TIMEOUT_SECONDS,
    PROGRESS_REQUESTING_GRANTS,
    PROGRESS_UPLOADING_ASSETS,
    PROGRESS_COMMITTING,
    PROGRESS_DONE,
    DELETE_CONFIRMATIONS,
    REMOVE_ASSET_CONFIRMATIONS,
)

__all__ = [
    # Status
    "AssetRole",
    "AssetState",
    "UploadStatus",
    "SINGLETON_ROLES",
    # Protocol
    "PROTOCOL_STEP_FIELD",
    "PROTOCOL_STEP_GRANTS",
    "PROTOCOL_STEP_COMMIT",
    "PROTOCOL_DEFAULT_COUNT_FIELD",
    "PROTOCOL_GRANTS_FIELD",
    "PROTOCOL_LEGACY_THUMBNAIL_GRANT_FIELD",
    "PROTOCOL_LEGACY_ART_GRANTS_FIELD",
    # Timeouts
    "REQUEST_TIMEOUT_SECONDS",
    "STORAGE_TIMEOUT_SECONDS",
    # Text
    "PROGRESS_REQUESTING_GRANTS",
    "PROGRESS_UPLOADING_ASSETS",
    "PROGRESS_COMMITTING",
    "PROGRESS_DONE",
    "DELETE_CONFIRMATIONS",
    "REMOVE_ASSET_CONFIRMATIONS",
]
