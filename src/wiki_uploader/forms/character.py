"""Form for character sheet posts."""

from __future__ import annotations

from typing import Any

from ..constants import AssetRole, PROTOCOL_DEFAULT_COUNT_FIELD
from .base import FormAssembler
from .parsers import parse_infobox, split_tokens


class CharacterForm(FormAssembler):
    """A character sheet: thumbnail, page image and an optional logo.

    Fields:
        name (required), creator (required), slug (defaults to the slugified
        name), subtitles (one per line), is_hidden, infobox ("Title:
        Description" per line), and the optional birthday, long_name,
        retirement_reason, tag, page_contents, overlay_css, custom_css.
    """

    count_field = PROTOCOL_DEFAULT_COUNT_FIELD
    singleton_fields = {
        AssetRole.THUMBNAIL: "thumbnail_key",
        AssetRole.PAGE_IMAGE: "page_img_key",
        AssetRole.LOGO: "logo_url",
    }
    required_roles = (AssetRole.THUMBNAIL, AssetRole.PAGE_IMAGE)

    OPTIONAL_FIELDS = (
        "birthday",
        "long_name",
        "retirement_reason",
        "tag",
        "page_contents",
        "overlay_css",
        "custom_css",
    )

    def build_fields(self) -> dict[str, Any]:
        name = self._required_text("name", "Name")
        creator = self._required_text("creator", "Creator")

        fields: dict[str, Any] = {
            "name": name,
            "slug": self._slug(name),
            "subtitles": split_tokens(self.values.get("subtitles"), "\n"),
            "creator": creator,
            "is_hidden": self._flag("is_hidden"),
            "infobox": parse_infobox(self.values.get("infobox")),
        }

        for field_name in self.OPTIONAL_FIELDS:
            self._add_optional(fields, field_name)

        return fields
