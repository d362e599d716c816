"""Core utilities for CLI - pure functions and shared types."""

from .types import Result, Success, Failure
from .console import console

__all__ = [
    # Types
    "Result",
    "Success",
    "Failure",
    # Console
    "console",
]
