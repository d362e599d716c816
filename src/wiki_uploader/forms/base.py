"""Base class for the forms that turn editor input into a post payload.

A form knows three things about its post type:
- which text fields exist and how they are validated
- which asset roles it takes, and which of them are mandatory
- how the resulting asset keys are named in the commit payload
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Mapping

from ..assets.store import AssetStateStore
from ..constants import AssetRole, PROTOCOL_DEFAULT_COUNT_FIELD
from ..errors import ValidationError
from .parsers import slugify


@dataclass(frozen=True)
class PostDraft:
    """Validated fields of one submission attempt."""

    fields: dict[str, Any] = field(default_factory=dict)


class FormAssembler(ABC):
    """Validates editor input and builds the commit payload.

    Subclasses declare their asset roles through class attributes and
    implement build_fields().
    """

    # Name of the grant count field sent in phase 1
    count_field: ClassVar[str] = PROTOCOL_DEFAULT_COUNT_FIELD

    # Singleton role -> payload field holding its key
    singleton_fields: ClassVar[dict[AssetRole, str]] = {}

    # Singleton roles that must be set before submitting
    required_roles: ClassVar[tuple[AssetRole, ...]] = ()

    # Payload field holding the ordered gallery keys (None: no gallery)
    gallery_field: ClassVar[str | None] = None

    # Human-readable names used in error messages
    role_labels: ClassVar[dict[AssetRole, str]] = {
        AssetRole.THUMBNAIL: "Thumbnail",
        AssetRole.LOGO: "Logo",
        AssetRole.PAGE_IMAGE: "Page image",
        AssetRole.GALLERY: "Gallery image",
    }

    def __init__(self, values: Mapping[str, Any]):
        """Initialize the form.

        Args:
            values: Raw field values keyed by field name, as typed by the editor.
        """
        self.values = dict(values)

    @property
    def accepted_roles(self) -> set[AssetRole]:
        roles = set(self.singleton_fields)
        if self.gallery_field:
            roles.add(AssetRole.GALLERY)
        return roles

    @abstractmethod
    def build_fields(self) -> dict[str, Any]:
        """Validate the text fields and return them in payload form.

        Raises:
            ValidationError: On the first missing or invalid field.
        """
        ...

    def validate_assets(self, store: AssetStateStore) -> None:
        """Check that mandatory assets are present and no foreign role is used."""
        for role in self.required_roles:
            if store.singleton(role) is None:
                raise ValidationError(f"{self.role_labels[role]} wasn't selected.", field=role.value)

        for asset in store.list():
            if asset.role not in self.accepted_roles:
                raise ValidationError(
                    f"This post does not take a {self.role_labels[asset.role].lower()}.",
                    field=asset.role.value,
                )

    def assemble(self, store: AssetStateStore) -> PostDraft:
        """Validate everything needed for a submission.

        Raises:
            ValidationError: On the first failure; nothing is submitted.
        """
        fields = self.build_fields()
        self.validate_assets(store)
        return PostDraft(fields=fields)

    def build_payload(self, draft: PostDraft, store: AssetStateStore) -> dict[str, Any]:
        """Merge the draft fields with the keys of the (uploaded) assets.

        Singleton roles become named key fields; the gallery becomes an
        ordered list of keys following gallery positions.
        """
        payload = dict(draft.fields)

        for role, field_name in self.singleton_fields.items():
            asset = store.singleton(role)
            if asset is None:
                continue
            if not asset.is_uploaded:
                raise RuntimeError(f"{role.value} asset has not been uploaded yet")
            payload[field_name] = asset.key

        if self.gallery_field:
            gallery = store.list(AssetRole.GALLERY)
            if any(not asset.is_uploaded for asset in gallery):
                raise RuntimeError("Gallery contains assets that have not been uploaded yet")
            payload[self.gallery_field] = [asset.key for asset in gallery]

        return payload

    # ------------------------------------------------------------------
    # Field helpers
    # ------------------------------------------------------------------

    def _raw_text(self, name: str, strip: bool = True) -> str:
        value = self.values.get(name)
        if value is None:
            return ""
        text = str(value)
        return text.strip() if strip else text

    def _required_text(self, name: str, label: str) -> str:
        text = self._raw_text(name)
        if not text:
            raise ValidationError(f"{label} is required.", field=name)
        return text

    def _flag(self, name: str) -> bool:
        value = self.values.get(name, False)
        if isinstance(value, str):
            return value.strip().lower() in ("1", "true", "yes", "on")
        return bool(value)

    def _slug(self, title: str) -> str:
        return self._raw_text("slug") or slugify(title)

    def _add_optional(self, fields: dict[str, Any], name: str, strip: bool = True) -> None:
        """Copy an optional field into the payload only when it is non-empty."""
        text = self._raw_text(name, strip=strip)
        if text.strip():
            fields[name] = text
