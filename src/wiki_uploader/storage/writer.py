"""Direct writes of asset bytes to object storage through upload grants."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable

import httpx

from ..assets.models import Asset
from ..config import UploaderSettings
from ..gateway.models import Grant

_logger = logging.getLogger("wiki_api")

# Async callback(asset, finished, total) fired as each write settles
WriteCallback = Callable[[Asset, int, int], Awaitable[None]]


@dataclass
class StorageWriteOutcome:
    """How one write ended."""
    asset: Asset
    grant: Grant
    status: int | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None


class ObjectStorageWriter:
    """PUTs local asset bytes to presigned URLs.

    The storage endpoint only has to accept a byte payload with a
    Content-Type header; any 2xx answer counts as a successful write.
    """

    def __init__(
        self,
        settings: UploaderSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or UploaderSettings()
        self._transport = transport

    async def write(self, client: httpx.AsyncClient, asset: Asset, grant: Grant) -> StorageWriteOutcome:
        """Write one asset. Never raises; failures are reported in the outcome."""
        if not asset.is_local:
            return StorageWriteOutcome(asset, grant, error="asset has no local bytes")

        _logger.info(f"STORAGE PUT | {grant.key} | {asset.content_type} | {asset.size} bytes")
        try:
            response = await client.put(
                grant.url,
                content=asset.data,
                headers={"Content-Type": asset.content_type},
            )
        except httpx.HTTPError as e:
            _logger.error(f"STORAGE PUT | {grant.key} | {type(e).__name__}: {e}")
            return StorageWriteOutcome(asset, grant, error=f"{type(e).__name__}: {e}")

        if not response.is_success:
            _logger.error(f"STORAGE PUT | {grant.key} | HTTP {response.status_code}")
            return StorageWriteOutcome(
                asset, grant,
                status=response.status_code,
                error=f"HTTP {response.status_code} {response.reason_phrase}".strip(),
            )

        _logger.info(f"STORAGE PUT | {grant.key} | OK {response.status_code}")
        return StorageWriteOutcome(asset, grant, status=response.status_code)

    async def write_all(
        self,
        assignments: list[tuple[Asset, Grant]],
        on_settled: WriteCallback | None = None,
    ) -> list[StorageWriteOutcome]:
        """Write every asset concurrently and wait until all of them settled.

        Args:
            assignments: (asset, grant) pairs.
            on_settled: Optional async callback fired as each write finishes.

        Returns:
            One outcome per assignment, in assignment order.
        """
        total = len(assignments)
        finished = 0

        async with httpx.AsyncClient(timeout=self.settings.storage_timeout, transport=self._transport) as client:

            async def _write(asset: Asset, grant: Grant) -> StorageWriteOutcome:
                nonlocal finished
                outcome = await self.write(client, asset, grant)
                finished += 1
                if on_settled:
                    await on_settled(asset, finished, total)
                return outcome

            settled = await asyncio.gather(
                *(_write(asset, grant) for asset, grant in assignments),
                return_exceptions=True,
            )

        outcomes = []
        for (asset, grant), result in zip(assignments, settled):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                _logger.error(f"STORAGE PUT | {grant.key} | {type(result).__name__}: {result}")
                result = StorageWriteOutcome(asset, grant, error=f"{type(result).__name__}: {result}")
            outcomes.append(result)
        return outcomes
