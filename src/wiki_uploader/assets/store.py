"""In-memory store of the assets of the post being edited."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterator

from ..constants import AssetRole, AssetState, SINGLETON_ROLES
from ..errors import StoreLockedError, UnknownAssetError
from .models import Asset

_logger = logging.getLogger("wiki_upload")

# Listener for change notifications: (event, asset)
ChangeListener = Callable[[str, Asset], None]


class AssetStateStore:
    """Holds the gallery sequence and the singleton assets of one post.

    The store is owned by an editing session and passed explicitly to the
    ordering engine, the upload coordinator and the form assembler.

    Invariants:
    - at most one asset per singleton role
    - gallery positions are unique and contiguous (0..n-1)
    - structural changes are refused while locked by a submission

    Events emitted to listeners: "added", "replaced", "removed", "moved",
    "uploaded".
    """

    def __init__(self):
        self._gallery: list[Asset] = []
        self._singletons: dict[AssetRole, Asset] = {}
        self._listeners: list[ChangeListener] = []
        self._locked = False

    # ------------------------------------------------------------------
    # Notifications and locking
    # ------------------------------------------------------------------

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a change listener. Returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self, event: str, asset: Asset) -> None:
        for listener in list(self._listeners):
            listener(event, asset)

    @property
    def is_locked(self) -> bool:
        return self._locked

    @contextmanager
    def locked(self) -> Iterator["AssetStateStore"]:
        """Refuse structural changes for the duration of the block."""
        if self._locked:
            raise StoreLockedError()
        self._locked = True
        try:
            yield self
        finally:
            self._locked = False

    def _ensure_unlocked(self) -> None:
        if self._locked:
            raise StoreLockedError()

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    def add(
        self,
        role: AssetRole,
        data: bytes,
        content_type: str,
        filename: str | None = None,
    ) -> Asset:
        """Add a freshly selected file as a LOCAL asset.

        Gallery assets are appended at the end. For singleton roles the new
        asset replaces the existing one, discarding its key.
        """
        return self._insert(Asset(
            role=role,
            state=AssetState.LOCAL,
            data=data,
            content_type=content_type,
            filename=filename,
            position=len(self._gallery) if role is AssetRole.GALLERY else None,
        ))

    def load_uploaded(self, role: AssetRole, key: str, filename: str | None = None) -> Asset:
        """Register an asset that already exists on the server."""
        return self._insert(Asset(
            role=role,
            state=AssetState.UPLOADED,
            key=key,
            filename=filename,
            position=len(self._gallery) if role is AssetRole.GALLERY else None,
        ))

    def _insert(self, asset: Asset) -> Asset:
        self._ensure_unlocked()
        if asset.role is AssetRole.GALLERY:
            self._gallery.append(asset)
            event = "added"
        else:
            event = "replaced" if asset.role in self._singletons else "added"
            self._singletons[asset.role] = asset
        _logger.debug(f"STORE | {event} {asset!r}")
        self._notify(event, asset)
        return asset

    def replace(
        self,
        asset_id: str,
        data: bytes,
        content_type: str,
        filename: str | None = None,
    ) -> Asset:
        """Swap the bytes of an asset, resetting it to LOCAL.

        The asset keeps its id, role and position; any previous key is lost
        and the asset will be uploaded again on the next submission.
        """
        self._ensure_unlocked()
        asset = self.get(asset_id)
        asset.set_local(data, content_type, filename)
        _logger.debug(f"STORE | replaced {asset!r}")
        self._notify("replaced", asset)
        return asset

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, asset_id: str) -> Asset:
        for asset in self._iter_all():
            if asset.id == asset_id:
                return asset
        raise UnknownAssetError(asset_id)

    def __contains__(self, asset_id: object) -> bool:
        return any(asset.id == asset_id for asset in self._iter_all())

    def __len__(self) -> int:
        return len(self._gallery) + len(self._singletons)

    def singleton(self, role: AssetRole) -> Asset | None:
        """Return the asset holding a singleton role, if any."""
        if not role.is_singleton:
            raise ValueError(f"{role.value} is not a singleton role")
        return self._singletons.get(role)

    def list(self, role: AssetRole | None = None) -> list[Asset]:
        """Assets in grant order: singletons first, then the gallery by position."""
        if role is None:
            return list(self._iter_all())
        if role is AssetRole.GALLERY:
            return list(self._gallery)
        asset = self._singletons.get(role)
        return [asset] if asset else []

    def _iter_all(self) -> Iterator[Asset]:
        for role in SINGLETON_ROLES:
            if role in self._singletons:
                yield self._singletons[role]
        yield from self._gallery

    def count_local(self) -> int:
        """Number of assets still waiting for an upload grant."""
        return sum(1 for asset in self._iter_all() if asset.is_local)

    def local_assets_in_grant_order(self) -> list[Asset]:
        """LOCAL assets in the order upload grants are requested and consumed."""
        return [asset for asset in self._iter_all() if asset.is_local]

    # ------------------------------------------------------------------
    # Mutations used by the ordering engine and the coordinator
    # ------------------------------------------------------------------

    def mark_uploaded(self, asset_id: str, key: str) -> Asset:
        """Transition a LOCAL asset to UPLOADED.

        Allowed while locked: this is the coordinator's own transition.
        """
        asset = self.get(asset_id)
        if not asset.is_local:
            raise ValueError(f"Asset {asset_id} is already uploaded")
        asset.set_uploaded(key)
        _logger.debug(f"STORE | uploaded {asset!r}")
        self._notify("uploaded", asset)
        return asset

    def swap_positions(self, first: int, second: int) -> None:
        """Exchange two gallery entries."""
        self._ensure_unlocked()
        gallery = self._gallery
        gallery[first], gallery[second] = gallery[second], gallery[first]
        gallery[first].position = first
        gallery[second].position = second
        self._notify("moved", gallery[first])
        self._notify("moved", gallery[second])

    def discard(self, asset_id: str) -> Asset:
        """Remove an asset and renumber the gallery densely."""
        self._ensure_unlocked()
        asset = self.get(asset_id)
        if asset.role is AssetRole.GALLERY:
            self._gallery.remove(asset)
            for index, remaining in enumerate(self._gallery):
                remaining.position = index
            asset.position = None
        else:
            del self._singletons[asset.role]
        _logger.debug(f"STORE | removed {asset!r}")
        self._notify("removed", asset)
        return asset
