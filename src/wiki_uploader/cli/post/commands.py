"""Post CLI commands - thin wrappers orchestrating params, validation, display, and service."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer

from ..core.console import console
from ..core.types import Failure
from .display import (
    make_progress_printer,
    show_delete_config,
    show_delete_result,
    show_post_error,
    show_upload_config,
    show_upload_result,
)
from .params import PostDeleteParams, PostUploadParams
from .service import PostUploaderService
from .validators import validate_post_delete_params, validate_post_upload_params


def _run_upload(
    kind: str,
    target_url: str,
    manifest: Path,
    config: Optional[Path],
    base_url: Optional[str],
    dry_run: bool,
) -> None:
    """Shared body of the upload commands."""
    params = PostUploadParams.from_cli(
        kind=kind,
        target_url=target_url,
        manifest=manifest,
        config=config,
        base_url=base_url,
        dry_run=dry_run,
    )

    validation = validate_post_upload_params(params)
    if isinstance(validation, Failure):
        show_post_error(console, validation.error, validation.details)
        raise typer.Exit(1)

    show_upload_config(console, params)

    service = PostUploaderService()
    result = asyncio.run(service.upload(params, progress_callback=make_progress_printer(console)))

    if isinstance(result, Failure):
        show_post_error(console, result.error, result.details)
        raise typer.Exit(1)

    show_upload_result(console, result.value)


def upload_art(
    target_url: str = typer.Argument(..., help="Post URL or page path (e.g. /art/new)"),
    manifest: Path = typer.Argument(..., help="YAML manifest with fields and assets"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML settings file"),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Site URL for page paths"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Validate without uploading"),
) -> None:
    """Upload an art post: thumbnail plus gallery."""
    _run_upload("art", target_url, manifest, config, base_url, dry_run)


def upload_character(
    target_url: str = typer.Argument(..., help="Post URL or page path (e.g. /characters/new)"),
    manifest: Path = typer.Argument(..., help="YAML manifest with fields and assets"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML settings file"),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Site URL for page paths"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Validate without uploading"),
) -> None:
    """Upload a character sheet: thumbnail, page image and optional logo."""
    _run_upload("character", target_url, manifest, config, base_url, dry_run)


def delete_post(
    target_url: str = typer.Argument(..., help="Post URL or page path"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML settings file"),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Site URL for page paths"),
) -> None:
    """Delete a post. Asks for confirmation twice."""
    params = PostDeleteParams.from_cli(target_url=target_url, config=config, base_url=base_url)

    validation = validate_post_delete_params(params)
    if isinstance(validation, Failure):
        show_post_error(console, validation.error, validation.details)
        raise typer.Exit(1)

    show_delete_config(console, params)

    service = PostUploaderService()
    result = asyncio.run(service.delete(
        params,
        confirm=lambda message: typer.confirm(message, default=False),
    ))

    if isinstance(result, Failure):
        show_post_error(console, result.error, result.details)
        raise typer.Exit(1)

    show_delete_result(console, result.value)
