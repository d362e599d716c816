"""Command line interface.

Layout:
- core/: Shared utilities (Result types, console)
- post/: Post upload and delete commands

Usage:
    wiki-upload --help
    wiki-upload upload-art /art/new post.yaml --base-url https://wiki.example
    wiki-upload delete https://wiki.example/art/dark-knight
"""

from .app import app, main

__all__ = ["app", "main"]
