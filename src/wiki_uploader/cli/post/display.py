"""Display functions for post commands - pure functions for Rich output."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.panel import Panel

from ...gateway.models import DeleteResult
from ...upload.models import SubmissionResult, UploadProgress
from .params import PostDeleteParams, PostUploadParams


def show_upload_config(console: Console, params: PostUploadParams) -> None:
    """Display upload configuration panel."""
    console.print(Panel(
        f"Uploading [cyan]{params.kind}[/cyan] post\n"
        f"Target: [green]{params.target_url}[/green]\n"
        f"Manifest: [yellow]{params.manifest_path}[/yellow]\n"
        f"Dry Run: [{'yellow' if params.dry_run else 'dim'}]{params.dry_run}[/]",
        title="Post Upload",
    ))


def make_progress_printer(console: Console):
    """Build an async progress callback printing each new step once."""
    last_step: list[str] = []

    async def _print(progress: UploadProgress) -> None:
        if last_step and last_step[-1] == progress.current_step:
            return
        last_step.append(progress.current_step)
        console.print(f"[dim]{progress.current_step}[/dim]")

    return _print


def show_upload_result(console: Console, result: SubmissionResult) -> None:
    """Display a successful submission."""
    lines = [f"[bold green]{result.message}[/bold green]"]
    if result.redirect_url:
        lines.append(f"\n[bold]Post:[/] {result.redirect_url}")
    console.print(Panel("\n".join(lines), title="Complete", border_style="green"))


def show_post_error(console: Console, error: str, details: Optional[dict] = None) -> None:
    """Display an upload or delete error."""
    console.print(f"\n[red]{error}[/red]")
    if details:
        for key, value in details.items():
            console.print(f"  [dim]{key}:[/dim] [yellow]{value}[/yellow]")


def show_delete_config(console: Console, params: PostDeleteParams) -> None:
    console.print(Panel(
        f"Deleting [red]{params.target_url}[/red]",
        title="Post Delete",
        border_style="red",
    ))


def show_delete_result(console: Console, result: Optional[DeleteResult]) -> None:
    """Display the outcome of a delete request."""
    if result is None:
        console.print("[yellow]Delete cancelled.[/yellow]")
    else:
        console.print(f"[green]Post deleted (HTTP {result.status}).[/green]")
