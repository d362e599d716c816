"""Typer app configuration and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from ..config import UploaderSettings

# Create Typer app
app = typer.Typer(
    name="wiki-upload",
    help="Assemble wiki posts locally and upload them in two phases",
    add_completion=False,
)

_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def register_commands() -> None:
    """Register all commands from feature modules."""
    from .post.commands import delete_post, upload_art, upload_character

    app.command(name="upload-art")(upload_art)
    app.command(name="upload-character")(upload_character)
    app.command(name="delete")(delete_post)


def _file_logger(name: str, log_file: Path) -> None:
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)


def setup_logging(log_dir: Path) -> None:
    """Configure logging for CLI.

    - Suppresses console output from libraries
    - wiki_api: every backend and storage call -> wiki_api.log
    - wiki_upload: store changes and submission states -> wiki_upload.log
    """
    log_dir.mkdir(parents=True, exist_ok=True)

    # Keep the root logger off the console
    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(logging.CRITICAL)

    for logger_name in ["httpx", "httpcore", "asyncio"]:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.WARNING)
        logger.propagate = False

    _file_logger("wiki_api", log_dir / "wiki_api.log")
    _file_logger("wiki_upload", log_dir / "wiki_upload.log")


@app.callback()
def _configure() -> None:
    """Set up logging before any command runs."""
    setup_logging(UploaderSettings().log_dir)


# Register all commands
register_commands()


def main() -> None:
    """CLI entry point."""
    app()
