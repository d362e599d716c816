"""Object storage writes for post assets."""

from .writer import ObjectStorageWriter, StorageWriteOutcome

__all__ = [
    "ObjectStorageWriter",
    "StorageWriteOutcome",
]
