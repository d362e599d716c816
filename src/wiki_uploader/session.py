"""Editing session: the owner of one post's assets and submission flow."""

from __future__ import annotations

import logging
import mimetypes
from pathlib import Path

from .assets.models import Asset
from .assets.ordering import ConfirmCallback, OrderingEngine
from .assets.store import AssetStateStore
from .config import UploaderSettings
from .constants import AssetRole, DELETE_CONFIRMATIONS, PROGRESS_DONE, UploadStatus
from .errors import ServerError, StorageWriteError, UploadError, ValidationError
from .forms.base import FormAssembler
from .gateway.client import ServerGateway
from .gateway.models import DeleteResult
from .storage.writer import ObjectStorageWriter
from .upload.coordinator import ProgressCallback, UploadCoordinator
from .upload.models import SubmissionResult

_logger = logging.getLogger("wiki_upload")


def guess_content_type(path: Path) -> str:
    """Media type of a file from its extension."""
    content_type, _ = mimetypes.guess_type(path.name)
    return content_type or "application/octet-stream"


class EditingSession:
    """Everything needed to edit and submit one post.

    Owns the asset store and wires it into the ordering engine and the
    upload coordinator. Submission controls are disabled while a submission
    is in flight.

    Usage:
        session = EditingSession("/art/new", ArtPostForm(values), confirm=ask_user)
        session.add_file(AssetRole.THUMBNAIL, Path("thumb.png"))
        session.add_file(AssetRole.GALLERY, Path("piece.png"))
        result = await session.submit()
    """

    def __init__(
        self,
        target_url: str,
        form: FormAssembler | None = None,
        settings: UploaderSettings | None = None,
        gateway: ServerGateway | None = None,
        writer: ObjectStorageWriter | None = None,
        confirm: ConfirmCallback | None = None,
        progress_callback: ProgressCallback | None = None,
    ):
        """Initialize the session.

        Args:
            target_url: Resource URL of the post (page path or absolute URL).
            form: Form holding the editor's field values. Sessions without a
                form can only delete the post.
            settings: Uploader settings; loaded from the environment if omitted.
            gateway: Backend client; built from settings if omitted.
            writer: Object storage client; built from settings if omitted.
            confirm: Yes/no prompt used before destructive actions.
            progress_callback: Async callback for submission progress.
        """
        self.target_url = target_url
        self.form = form
        self.settings = settings or UploaderSettings()
        self.confirm = confirm

        self.store = AssetStateStore()
        self.ordering = OrderingEngine(self.store, confirm=confirm)
        self.gateway = gateway or ServerGateway(self.settings)
        self.coordinator = UploadCoordinator(
            self.store,
            self.gateway,
            writer or ObjectStorageWriter(self.settings),
            progress_callback=progress_callback,
        )

    @property
    def controls_enabled(self) -> bool:
        """False while a submission is running."""
        return not self.coordinator.in_flight

    # ------------------------------------------------------------------
    # Asset selection
    # ------------------------------------------------------------------

    def add_file(self, role: AssetRole, path: Path, content_type: str | None = None) -> Asset:
        """Read a file from disk and add it as a LOCAL asset."""
        return self.store.add(
            role,
            path.read_bytes(),
            content_type or guess_content_type(path),
            filename=path.name,
        )

    def replace_file(self, asset_id: str, path: Path, content_type: str | None = None) -> Asset:
        """Replace an asset's bytes with a file from disk."""
        return self.store.replace(
            asset_id,
            path.read_bytes(),
            content_type or guess_content_type(path),
            filename=path.name,
        )

    def load_existing(self, role: AssetRole, key: str) -> Asset:
        """Register an asset that is already stored on the server."""
        return self.store.load_uploaded(role, key)

    # ------------------------------------------------------------------
    # Server operations
    # ------------------------------------------------------------------

    async def submit(self) -> SubmissionResult:
        """Validate and submit the post. Never raises for submission errors.

        Returns:
            SubmissionResult with either the redirect target or the error text.
        """
        try:
            if self.form is None:
                raise ValidationError("Nothing to submit: this session has no form.")
            result = await self.coordinator.submit(self.target_url, self.form)
        except UploadError as e:
            return SubmissionResult(
                success=False,
                status=self.coordinator.status,
                message=e.user_message,
                http_status=e.status if isinstance(e, ServerError) else None,
                failed_assets=[asset.id for asset, _ in e.failures] if isinstance(e, StorageWriteError) else [],
            )

        return SubmissionResult(
            success=True,
            status=UploadStatus.DONE,
            message=PROGRESS_DONE,
            redirect_url=result.redirect_url,
            http_status=result.status,
        )

    async def delete(self) -> DeleteResult | None:
        """Delete the post after two explicit confirmations.

        Returns:
            DeleteResult, or None when the editor backed out.

        Raises:
            ServerError: If the backend refused the deletion.
            NetworkError: If the backend could not be reached.
        """
        if self.confirm is None:
            return None
        for message in DELETE_CONFIRMATIONS:
            if not self.confirm(message):
                _logger.info(f"DELETE | cancelled for {self.target_url}")
                return None
        return await self.gateway.delete_resource(self.target_url)
