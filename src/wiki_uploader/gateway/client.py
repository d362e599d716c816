"""HTTP client for the wiki's two-phase post endpoints."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
import pydantic

from ..config import UploaderSettings
from ..constants import (
    PROTOCOL_DEFAULT_COUNT_FIELD,
    PROTOCOL_STEP_COMMIT,
    PROTOCOL_STEP_FIELD,
    PROTOCOL_STEP_GRANTS,
)
from ..errors import NetworkError, ProtocolError, ServerError
from .models import CommitResult, DeleteResult, Grant, GrantPayload, GrantResponse

_logger = logging.getLogger("wiki_api")


class ServerGateway:
    """Client for the backend side of post submission.

    Implements the two POSTs of the upload protocol, both sent to the page's
    own URL and told apart by a "step" field:
    1. Ask for one upload grant per local asset
    2. Commit the post fields together with the resulting asset keys

    plus the DELETE used to remove a post. Every 4xx/5xx answer is raised as
    a ServerError carrying the status and the response body.
    """

    def __init__(
        self,
        settings: UploaderSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the gateway.

        Args:
            settings: Uploader settings (base URL, timeouts).
            transport: Optional httpx transport, used to fake the server in tests.
        """
        self.settings = settings or UploaderSettings()
        self._transport = transport

        # API call counter for logging
        self._api_call_count = 0

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.settings.request_timeout,
            transport=self._transport,
            follow_redirects=True,
            headers={"User-Agent": self.settings.user_agent},
        )

    async def _send(
        self,
        method: str,
        target_url: str,
        body: dict | None = None,
    ) -> httpx.Response:
        """Send a request to the backend.

        Raises:
            ServerError: If the backend answers with a 4xx/5xx status.
            NetworkError: If no response arrived at all.
        """
        self._api_call_count += 1
        call = self._api_call_count
        url = self.settings.resolve_url(target_url)

        step = (body or {}).get(PROTOCOL_STEP_FIELD, "-")
        _logger.info(f"API CALL #{call} | {method} {url} | step: {step} | fields: {list((body or {}).keys())}")

        try:
            async with self._client() as client:
                response = await client.request(method, url, json=body)
        except httpx.HTTPError as e:
            _logger.error(f"API CALL #{call} | {type(e).__name__}: {e}")
            raise NetworkError(url, f"{type(e).__name__}: {e}") from e

        if response.is_error:
            _logger.error(f"API CALL #{call} | ERROR {response.status_code}: {response.text[:500]}")
            raise ServerError(response.status_code, response.reason_phrase, response.text)

        _logger.info(f"API CALL #{call} | SUCCESS {response.status_code}")
        return response

    async def request_upload_grants(
        self,
        target_url: str,
        local_asset_count: int,
        count_field: str = PROTOCOL_DEFAULT_COUNT_FIELD,
    ) -> GrantResponse:
        """Phase 1: ask for one upload grant per local asset.

        Args:
            target_url: The post's resource URL.
            local_asset_count: Number of assets waiting to be uploaded.
            count_field: Name of the count field ("file_amount", "art_amount").

        Returns:
            GrantResponse with exactly local_asset_count grants.

        Raises:
            ServerError: If the backend refused the request.
            ProtocolError: If the response is malformed or the grant count
                does not match the requested count.
        """
        if local_asset_count < 0:
            raise ValueError("local_asset_count cannot be negative")

        response = await self._send("POST", target_url, {
            PROTOCOL_STEP_FIELD: PROTOCOL_STEP_GRANTS,
            count_field: local_asset_count,
        })

        try:
            payload = GrantPayload.model_validate(response.json())
        except (json.JSONDecodeError, pydantic.ValidationError) as e:
            raise ProtocolError(f"Invalid grant response: {e}") from e

        grants = [Grant(url) for url in payload.presigned_urls]
        if len(grants) != local_asset_count:
            _logger.error(f"GRANTS | requested {local_asset_count}, received {len(grants)}")
            raise ProtocolError(
                f"Server returned {len(grants)} upload grant(s) for {local_asset_count} file(s)",
                expected=local_asset_count,
                received=len(grants),
            )

        return GrantResponse(ok=True, status=response.status_code, grants=grants)

    async def commit_metadata(self, target_url: str, payload: dict[str, Any]) -> CommitResult:
        """Phase 2: send the post fields and asset keys.

        Returns:
            CommitResult; redirect_url is the final URL when the backend
            redirected to the created resource.

        Raises:
            ServerError: If the backend rejected the post.
        """
        body = {PROTOCOL_STEP_FIELD: PROTOCOL_STEP_COMMIT, **payload}
        response = await self._send("POST", target_url, body)

        redirect_url = str(response.url) if response.history else None
        return CommitResult(ok=True, status=response.status_code, redirect_url=redirect_url)

    async def delete_resource(self, target_url: str) -> DeleteResult:
        """Delete a post. Confirmation is the caller's job."""
        response = await self._send("DELETE", target_url)
        return DeleteResult(ok=True, status=response.status_code)
