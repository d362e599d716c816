"""Post feature - upload and delete commands."""

from .commands import delete_post, upload_art, upload_character
from .params import PostDeleteParams, PostUploadParams
from .service import PostUploaderService

__all__ = [
    "delete_post",
    "upload_art",
    "upload_character",
    "PostDeleteParams",
    "PostUploadParams",
    "PostUploaderService",
]
