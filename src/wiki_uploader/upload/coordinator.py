"""Orchestration of the two-phase post submission."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from ..assets.models import Asset
from ..assets.store import AssetStateStore
from ..constants import (
    UploadStatus,
    PROGRESS_COMMITTING,
    PROGRESS_DONE,
    PROGRESS_REQUESTING_GRANTS,
    PROGRESS_UPLOADING_ASSETS,
)
from ..errors import StorageWriteError, SubmissionInProgressError, UploadError
from ..forms.base import FormAssembler
from ..gateway.client import ServerGateway
from ..gateway.models import CommitResult
from ..storage.writer import ObjectStorageWriter
from .models import UploadProgress

_logger = logging.getLogger("wiki_upload")

ProgressCallback = Callable[[UploadProgress], Awaitable[None]]


class UploadCoordinator:
    """Drives one post submission through the two-phase protocol.

    Workflow:
    1. Validate the form (no network before this succeeds)
    2. Request one upload grant per LOCAL asset (phase 1)
    3. PUT every LOCAL asset to its grant concurrently, wait for all of them
    4. Mark successfully written assets UPLOADED
    5. Commit the post fields and asset keys (phase 2)

    Grants are consumed in the order they were counted: singleton roles
    first, then the gallery by position. Nothing in the store changes before
    the storage writes, so a refused or malformed grant response leaves the
    session exactly as it was. Assets whose bytes reached storage stay
    UPLOADED even if a later step fails, so a retry never writes them twice.
    """

    def __init__(
        self,
        store: AssetStateStore,
        gateway: ServerGateway,
        writer: ObjectStorageWriter,
        progress_callback: ProgressCallback | None = None,
    ):
        """Initialize the coordinator.

        Args:
            store: Assets of the post being edited.
            gateway: Client for the backend endpoints.
            writer: Client for object storage writes.
            progress_callback: Async callback for progress updates.
        """
        self.store = store
        self.gateway = gateway
        self.writer = writer
        self.progress_callback = progress_callback

        self._progress = UploadProgress()
        self.failure_reason: str | None = None

    @property
    def status(self) -> UploadStatus:
        return self._progress.status

    @property
    def progress(self) -> UploadProgress:
        return self._progress

    @property
    def in_flight(self) -> bool:
        return self.status.is_in_flight

    async def _report_progress(self, status: UploadStatus, step: str) -> None:
        """Update and report progress."""
        if status is not self._progress.status:
            _logger.info(f"SUBMIT | {self._progress.status.value} -> {status.value} | {step}")
        self._progress.status = status
        self._progress.current_step = step
        if self.progress_callback:
            await self.progress_callback(self._progress)

    async def _fail(self, error: UploadError) -> None:
        self.failure_reason = error.user_message
        self._progress.error = error.user_message
        _logger.error(f"SUBMIT | failed during {self._progress.status.value}: {error}")
        try:
            await self._report_progress(UploadStatus.FAILED, error.user_message)
        except Exception as e:
            _logger.warning(f"SUBMIT | progress callback failed while reporting the failure: {e}")

    async def submit(self, target_url: str, form: FormAssembler) -> CommitResult:
        """Submit the post at target_url.

        Returns:
            CommitResult of phase 2.

        Raises:
            ValidationError: Before any network call, store untouched.
            ProtocolError: Grant count mismatch, store untouched.
            ServerError: Grant request or commit refused by the backend.
            StorageWriteError: At least one storage write failed; phase 2 was
                not attempted.
            NetworkError: The backend could not be reached.
            SubmissionInProgressError: Another submission is in flight.
            UploadError: Any other failure, e.g. a raising progress callback.

        The coordinator never stays in flight after this returns or raises.
        """
        if self.in_flight:
            raise SubmissionInProgressError()

        draft = form.assemble(self.store)

        self.failure_reason = None
        self._progress = UploadProgress()

        try:
            with self.store.locked():
                return await self._run(target_url, form, draft)
        except UploadError as e:
            await self._fail(e)
            raise
        except Exception as e:
            error = UploadError(f"Unexpected error: {e}")
            await self._fail(error)
            raise error from e
        finally:
            if self.in_flight:
                # Cancelled between phases
                self._progress.status = UploadStatus.FAILED
                self.failure_reason = self.failure_reason or "Submission was cancelled."
                _logger.error("SUBMIT | cancelled")

    async def _run(self, target_url, form, draft) -> CommitResult:
        # Phase 1
        pending = self.store.local_assets_in_grant_order()
        self._progress.total_assets = len(pending)
        await self._report_progress(UploadStatus.REQUESTING_GRANTS, PROGRESS_REQUESTING_GRANTS)

        grant_response = await self.gateway.request_upload_grants(
            target_url, len(pending), count_field=form.count_field,
        )

        # Storage writes
        await self._report_progress(UploadStatus.UPLOADING_ASSETS, PROGRESS_UPLOADING_ASSETS)
        assignments = list(zip(pending, grant_response.grants))
        outcomes = await self.writer.write_all(assignments, on_settled=self._on_write_settled)

        failures: list[tuple[Asset, str]] = []
        for outcome in outcomes:
            if outcome.success:
                self.store.mark_uploaded(outcome.asset.id, outcome.grant.key)
                self._progress.uploaded_keys.append(outcome.grant.key)
            else:
                failures.append((outcome.asset, outcome.error))

        if failures:
            raise StorageWriteError(failures)

        # Phase 2
        await self._report_progress(UploadStatus.COMMITTING_METADATA, PROGRESS_COMMITTING)
        payload = form.build_payload(draft, self.store)
        result = await self.gateway.commit_metadata(target_url, payload)

        await self._report_progress(UploadStatus.DONE, PROGRESS_DONE)
        return result

    async def _on_write_settled(self, asset: Asset, finished: int, total: int) -> None:
        self._progress.assets_uploaded = finished
        await self._report_progress(
            UploadStatus.UPLOADING_ASSETS,
            f"{PROGRESS_UPLOADING_ASSETS} ({finished}/{total})",
        )
