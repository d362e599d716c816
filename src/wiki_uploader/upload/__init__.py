"""Two-phase submission orchestration."""

from .coordinator import UploadCoordinator
from .models import SubmissionResult, UploadProgress

__all__ = [
    "UploadCoordinator",
    "SubmissionResult",
    "UploadProgress",
]
