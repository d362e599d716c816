"""Data models for submission progress and results."""

from dataclasses import dataclass, field

from ..constants import UploadStatus


@dataclass
class UploadProgress:
    """Progress tracking for a submission."""
    status: UploadStatus = UploadStatus.IDLE
    current_step: str = "Idle"

    # Upload tracking
    assets_uploaded: int = 0
    total_assets: int = 0
    uploaded_keys: list[str] = field(default_factory=list)

    # Result
    error: str | None = None


@dataclass
class SubmissionResult:
    """Outcome of a submission, as shown to the editor."""
    success: bool
    status: UploadStatus
    message: str
    redirect_url: str | None = None
    http_status: int | None = None
    failed_assets: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "success": self.success,
            "status": self.status.value,
            "message": self.message,
            "redirect_url": self.redirect_url,
            "http_status": self.http_status,
            "failed_assets": list(self.failed_assets),
        }
