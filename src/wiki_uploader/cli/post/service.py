"""Service for uploading and deleting posts from the command line."""

from __future__ import annotations

from typing import Callable, Optional

import httpx

from ...config import UploaderSettings, load_settings
from ...constants import AssetRole, UploadStatus
from ...errors import ServerError, UploadError, ValidationError
from ...forms import FORMS
from ...gateway.client import ServerGateway
from ...gateway.models import DeleteResult
from ...session import EditingSession
from ...storage.writer import ObjectStorageWriter
from ...upload.coordinator import ProgressCallback
from ...upload.models import SubmissionResult
from ..core.types import Result, Success, Failure
from .manifest import PostManifest, load_manifest
from .params import PostDeleteParams, PostUploadParams


class PostUploaderService:
    """Builds editing sessions from manifests and runs them.

    All per-post state lives in the session built for each call.
    """

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        """Initialize the service.

        Args:
            transport: Optional httpx transport shared by the backend and
                storage clients (used to fake both in tests).
        """
        self._transport = transport

    def _load_settings(self, config_path, base_url, target_url) -> Result[UploaderSettings]:
        try:
            settings = load_settings(config_path, base_url=base_url)
            settings.resolve_url(target_url)
        except (FileNotFoundError, ValueError) as e:
            return Failure(str(e))
        return Success(settings)

    def build_session(
        self,
        kind: str,
        target_url: str,
        manifest: PostManifest,
        settings: UploaderSettings,
        progress_callback: ProgressCallback | None = None,
    ) -> EditingSession:
        """Create a session holding the manifest's fields and assets."""
        session = EditingSession(
            target_url,
            FORMS[kind](manifest.fields),
            settings=settings,
            gateway=ServerGateway(settings, transport=self._transport),
            writer=ObjectStorageWriter(settings, transport=self._transport),
            progress_callback=progress_callback,
        )

        for role, source in manifest.assets.singletons():
            if source.is_existing:
                session.load_existing(role, source.key)
            else:
                session.add_file(role, source.path, source.content_type)

        for source in manifest.assets.gallery:
            if source.is_existing:
                session.load_existing(AssetRole.GALLERY, source.key)
            else:
                session.add_file(AssetRole.GALLERY, source.path, source.content_type)

        return session

    async def upload(
        self,
        params: PostUploadParams,
        progress_callback: ProgressCallback | None = None,
    ) -> Result[SubmissionResult]:
        """Upload the post described by the manifest.

        Returns:
            Result containing the SubmissionResult or Failure
        """
        settings_result = self._load_settings(params.config_path, params.base_url, params.target_url)
        if isinstance(settings_result, Failure):
            return settings_result
        settings = settings_result.value

        try:
            manifest = load_manifest(params.manifest_path)
        except (FileNotFoundError, ValueError) as e:
            return Failure(f"Invalid manifest: {e}")

        missing = manifest.missing_files()
        if missing:
            return Failure(
                f"{len(missing)} asset file(s) not found",
                {"missing": ", ".join(str(path) for path in missing)},
            )

        session = self.build_session(
            params.kind, params.target_url, manifest, settings, progress_callback,
        )

        if params.dry_run:
            return self._dry_run(session)

        result = await session.submit()
        if not result.success:
            return Failure.from_submission(result)
        return Success(result)

    def _dry_run(self, session: EditingSession) -> Result[SubmissionResult]:
        """Validate the form and assets without any network call."""
        try:
            session.form.assemble(session.store)
        except ValidationError as e:
            return Failure(e.user_message)

        pending = session.store.count_local()
        return Success(SubmissionResult(
            success=True,
            status=UploadStatus.IDLE,
            message=f"Dry run: {pending} file(s) would be uploaded, {len(session.store) - pending} already stored",
        ))

    async def delete(
        self,
        params: PostDeleteParams,
        confirm: Callable[[str], bool],
    ) -> Result[Optional[DeleteResult]]:
        """Delete a post after the editor confirmed twice.

        Returns:
            Result containing the DeleteResult (None if cancelled) or Failure
        """
        settings_result = self._load_settings(params.config_path, params.base_url, params.target_url)
        if isinstance(settings_result, Failure):
            return settings_result
        settings = settings_result.value

        session = EditingSession(
            params.target_url,
            settings=settings,
            gateway=ServerGateway(settings, transport=self._transport),
            confirm=confirm,
        )

        try:
            return Success(await session.delete())
        except ServerError as e:
            return Failure(e.user_message, {"http status": e.status})
        except UploadError as e:
            return Failure(e.user_message)
