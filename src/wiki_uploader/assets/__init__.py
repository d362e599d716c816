"""Asset state tracking and ordering for post editing."""

from .models import Asset
from .store import AssetStateStore
from .ordering import OrderingEngine

__all__ = [
    "Asset",
    "AssetStateStore",
    "OrderingEngine",
]
