"""Client-side assembly and two-phase upload of multi-asset wiki posts."""

from .assets import Asset, AssetStateStore, OrderingEngine
from .config import UploaderSettings, load_settings
from .constants import AssetRole, AssetState, UploadStatus
from .errors import (
    NetworkError,
    ProtocolError,
    ServerError,
    StorageWriteError,
    SubmissionInProgressError,
    UploadError,
    ValidationError,
)
from .forms import ArtPostForm, CharacterForm, FormAssembler
from .gateway import ServerGateway
from .session import EditingSession
from .storage import ObjectStorageWriter
from .upload import SubmissionResult, UploadCoordinator

__version__ = "0.1.0"

__all__ = [
    "Asset",
    "AssetStateStore",
    "OrderingEngine",
    "UploaderSettings",
    "load_settings",
    "AssetRole",
    "AssetState",
    "UploadStatus",
    "UploadError",
    "NetworkError",
    "ValidationError",
    "ProtocolError",
    "ServerError",
    "StorageWriteError",
    "SubmissionInProgressError",
    "ArtPostForm",
    "CharacterForm",
    "FormAssembler",
    "ServerGateway",
    "EditingSession",
    "ObjectStorageWriter",
    "SubmissionResult",
    "UploadCoordinator",
]
