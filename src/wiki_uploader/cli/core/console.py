"""Shared Rich console for the wiki-upload commands."""

import sys

from rich.console import Console

# Box drawing characters break on Windows cp1252 terminals.
# Automatic highlighting is off so URLs and storage keys print verbatim.
console = Console(safe_box=sys.platform == "win32", highlight=False)
