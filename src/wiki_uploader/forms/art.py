"""Form for art gallery posts."""

from __future__ import annotations

from typing import Any

from ..constants import AssetRole
from ..errors import ValidationError
from .base import FormAssembler
from .parsers import parse_iso_date, split_tokens


class ArtPostForm(FormAssembler):
    """An art post: a thumbnail plus an ordered gallery of art pieces.

    Fields:
        title (required), creation_date (required, YYYY-MM-DD),
        creators (required, comma-separated), is_nsfw, slug (defaults to
        the slugified title), description, tags (comma-separated).
    """

    count_field = "art_amount"
    singleton_fields = {AssetRole.THUMBNAIL: "thumbnail_key"}
    required_roles = (AssetRole.THUMBNAIL,)
    gallery_field = "art_keys"

    def build_fields(self) -> dict[str, Any]:
        title = self._required_text("title", "Title")
        creation_date = parse_iso_date(
            self._required_text("creation_date", "Creation date"),
            label="Creation date",
        )

        creators = split_tokens(self.values.get("creators"), ",")
        if not creators:
            raise ValidationError("At least one artist is required.", field="creators")

        fields: dict[str, Any] = {
            "title": title,
            "creation_date": creation_date,
            "is_nsfw": self._flag("is_nsfw"),
            "creators": creators,
            "slug": self._slug(title),
        }

        self._add_optional(fields, "description", strip=False)

        tags = split_tokens(self.values.get("tags"), ",")
        if tags:
            fields["tags"] = tags

        return fields
