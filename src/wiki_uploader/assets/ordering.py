"""Reordering and removal of assets before submission."""

from __future__ import annotations

import logging
from typing import Callable

from ..constants import AssetRole, REMOVE_ASSET_CONFIRMATIONS
from .store import AssetStateStore

_logger = logging.getLogger("wiki_upload")

# Asks the editor a yes/no question
ConfirmCallback = Callable[[str], bool]


def _refuse(message: str) -> bool:
    return False


class OrderingEngine:
    """Moves and removes assets inside an AssetStateStore.

    Moving is a pairwise swap between the current and the target slot, not a
    shift of everything in between. Removal is destructive and needs two
    explicit confirmations from the editor.
    """

    def __init__(
        self,
        store: AssetStateStore,
        confirm: ConfirmCallback | None = None,
        confirmations: tuple[str, ...] = REMOVE_ASSET_CONFIRMATIONS,
    ):
        """Initialize the ordering engine.

        Args:
            store: Store holding the assets of the post.
            confirm: Callback asking the editor a yes/no question. Without one,
                every removal is refused.
            confirmations: Prompts shown, in order, before removing an asset.
        """
        self.store = store
        self.confirm = confirm or _refuse
        self.confirmations = confirmations

    def move(self, asset_id: str, delta: int) -> int:
        """Move a gallery asset by delta slots, clamped to the gallery bounds.

        Returns:
            The asset's position after the move.
        """
        asset = self.store.get(asset_id)
        if asset.role is not AssetRole.GALLERY:
            raise ValueError(f"Only gallery assets can be reordered, not {asset.role.value}")

        last = len(self.store.list(AssetRole.GALLERY)) - 1
        current = asset.position
        target = min(max(current + delta, 0), last)
        if target == current:
            return current

        self.store.swap_positions(current, target)
        _logger.info(f"ORDER | moved {asset_id[:8]} {current} -> {target}")
        return target

    def move_up(self, asset_id: str) -> int:
        return self.move(asset_id, -1)

    def move_down(self, asset_id: str) -> int:
        return self.move(asset_id, 1)

    def remove(self, asset_id: str) -> bool:
        """Remove an asset after the editor confirmed every prompt.

        Returns:
            True if the asset was removed, False if a confirmation was refused.
        """
        # Resolve first so unknown ids fail before anyone is prompted
        self.store.get(asset_id)

        for message in self.confirmations:
            if not self.confirm(message):
                _logger.info(f"ORDER | removal of {asset_id[:8]} cancelled")
                return False

        self.store.discard(asset_id)
        _logger.info(f"ORDER | removed {asset_id[:8]}")
        return True
