"""Post command validators."""

from __future__ import annotations

from typing import List
from urllib.parse import urlsplit

from ..core.types import Result, Success, Failure
from .params import PostDeleteParams, PostUploadParams

# Post kinds accepted by upload commands
VALID_POST_KINDS: List[str] = [
    "art",
    "character",
]


def _validate_target_url(target_url: str) -> Failure | None:
    if not target_url:
        return Failure("Target URL is empty")
    if not urlsplit(target_url).scheme and not target_url.startswith("/"):
        return Failure(
            f"Invalid target URL: {target_url}",
            {"hint": "Use a full URL or a page path starting with '/'"},
        )
    return None


def validate_post_upload_params(params: PostUploadParams) -> Result[PostUploadParams]:
    """Validate all post upload parameters.

    Returns Result with params if valid, or Failure with error.
    """
    if params.kind not in VALID_POST_KINDS:
        return Failure(
            f"Invalid post kind: {params.kind}",
            {"valid_kinds": VALID_POST_KINDS},
        )

    url_failure = _validate_target_url(params.target_url)
    if url_failure:
        return url_failure

    if not params.manifest_path.is_file():
        return Failure(
            f"Manifest not found: {params.manifest_path}",
            {"hint": "Pass the path of a YAML file with 'fields' and 'assets'"},
        )

    if params.config_path is not None and not params.config_path.is_file():
        return Failure(f"Config file not found: {params.config_path}")

    return Success(params)


def validate_post_delete_params(params: PostDeleteParams) -> Result[PostDeleteParams]:
    """Validate post delete parameters."""
    url_failure = _validate_target_url(params.target_url)
    if url_failure:
        return url_failure

    if params.config_path is not None and not params.config_path.is_file():
        return Failure(f"Config file not found: {params.config_path}")

    return Success(params)
