"""Post forms: field validation and commit payload assembly."""

from .base import FormAssembler, PostDraft
from .art import ArtPostForm
from .character import CharacterForm
from .parsers import parse_infobox, parse_iso_date, slugify, split_tokens

FORMS: dict[str, type[FormAssembler]] = {
    "art": ArtPostForm,
    "character": CharacterForm,
}

__all__ = [
    "FormAssembler",
    "PostDraft",
    "ArtPostForm",
    "CharacterForm",
    "FORMS",
    "parse_infobox",
    "parse_iso_date",
    "slugify",
    "split_tokens",
]
