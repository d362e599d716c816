"""Pure parsing helpers for editable form fields."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from ..errors import ValidationError


def slugify(title: str) -> str:
    """Derive a URL slug from a title: lower-cased, spaces become hyphens.

    Examples:
        slugify("Dark Knight") -> "dark-knight"
    """
    return title.strip().lower().replace(" ", "-")


def split_tokens(value: Any, delimiter: str = ",") -> list[str]:
    """Split delimiter-separated text into trimmed, non-empty tokens.

    Lists are accepted as already split. Order is preserved.

    Examples:
        split_tokens("a, b,,c ") -> ["a", "b", "c"]
        split_tokens("line 1\\n\\nline 2", "\\n") -> ["line 1", "line 2"]
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        parts = [str(item) for item in value]
    else:
        parts = str(value).split(delimiter)
    return [part.strip() for part in parts if part and part.strip()]


def parse_iso_date(value: Any, label: str = "Date") -> str:
    """Validate a YYYY-MM-DD date and return it in that format.

    Raises:
        ValidationError: If the value is not a valid calendar date.
    """
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    try:
        return datetime.strptime(str(value).strip(), "%Y-%m-%d").date().isoformat()
    except ValueError:
        raise ValidationError(
            f"{label} is invalid. Please ensure your date was in the YYYY-MM-DD format."
        ) from None


def parse_infobox(value: Any) -> list[dict[str, str]]:
    """Parse "Title: Description" lines into infobox rows.

    Blank lines are skipped. Only the first colon separates title from
    description, so descriptions may contain colons themselves.

    Raises:
        ValidationError: If a line has no colon or an empty title.
    """
    rows = []
    for line_number, line in enumerate(str(value or "").splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        title, sep, description = line.partition(":")
        if not sep or not title.strip():
            raise ValidationError(
                f"Infobox line {line_number} must look like 'Title: Description'.",
                field="infobox",
            )
        rows.append({"title": title.strip(), "description": description.strip()})
    return rows
