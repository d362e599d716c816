"""Tests for the art and character forms."""

import pytest

from wiki_uploader.assets import AssetStateStore
from wiki_uploader.constants import AssetRole
from wiki_uploader.errors import ValidationError
from wiki_uploader.forms import FORMS, ArtPostForm, CharacterForm


@pytest.fixture
def store():
    return AssetStateStore()


class TestArtPostForm:
    """Tests for art post fields and assets."""

    def test_fields(self, art_values, store):
        store.add(AssetRole.THUMBNAIL, b"t", "image/png")
        draft = ArtPostForm(art_values).assemble(store)

        assert draft.fields == {
            "title": "Dark Knight",
            "creation_date": "2024-05-01",
            "is_nsfw": False,
            "creators": ["alice", "bob"],
            "slug": "dark-knight",
        }

    def test_optional_fields(self, art_values):
        art_values.update({
            "slug": "custom-slug",
            "description": "  Inked by hand.\n",
            "tags": "ink, knight",
            "is_nsfw": "yes",
        })
        fields = ArtPostForm(art_values).build_fields()

        assert fields["slug"] == "custom-slug"
        assert fields["description"] == "  Inked by hand.\n"
        assert fields["tags"] == ["ink", "knight"]
        assert fields["is_nsfw"] is True

    def test_blank_description_omitted(self, art_values):
        art_values["description"] = "   "
        assert "description" not in ArtPostForm(art_values).build_fields()

    @pytest.mark.parametrize("field,message", [
        ("title", "Title is required."),
        ("creation_date", "Creation date is required."),
        ("creators", "At least one artist is required."),
    ])
    def test_required_fields(self, art_values, field, message):
        art_values[field] = " "
        with pytest.raises(ValidationError) as exc_info:
            ArtPostForm(art_values).build_fields()
        assert str(exc_info.value) == message
        assert exc_info.value.field == field

    def test_missing_thumbnail(self, art_values, store):
        store.add(AssetRole.GALLERY, b"g", "image/png")
        with pytest.raises(ValidationError) as exc_info:
            ArtPostForm(art_values).assemble(store)
        assert exc_info.value.user_message == "ERROR: Thumbnail wasn't selected."

    def test_foreign_role_rejected(self, art_values, store):
        store.add(AssetRole.THUMBNAIL, b"t", "image/png")
        store.add(AssetRole.LOGO, b"l", "image/png")
        with pytest.raises(ValidationError, match="does not take a logo"):
            ArtPostForm(art_values).assemble(store)

    def test_payload_keys(self, art_values, store):
        store.load_uploaded(AssetRole.THUMBNAIL, "thumb-key")
        store.load_uploaded(AssetRole.GALLERY, "g0")
        store.load_uploaded(AssetRole.GALLERY, "g1")
        form = ArtPostForm(art_values)

        payload = form.build_payload(form.assemble(store), store)

        assert payload["thumbnail_key"] == "thumb-key"
        assert payload["art_keys"] == ["g0", "g1"]

    def test_payload_refuses_local_assets(self, art_values, store):
        store.load_uploaded(AssetRole.THUMBNAIL, "thumb-key")
        store.add(AssetRole.GALLERY, b"g", "image/png")
        form = ArtPostForm(art_values)

        with pytest.raises(RuntimeError):
            form.build_payload(form.assemble(store), store)


class TestCharacterForm:
    """Tests for character sheet fields and assets."""

    def test_fields(self, character_values):
        fields = CharacterForm(character_values).build_fields()

        assert fields == {
            "name": "Iris Vale",
            "slug": "iris-vale",
            "subtitles": ["The Wanderer", "Keeper of Keys"],
            "creator": "alice",
            "is_hidden": False,
            "infobox": [
                {"title": "Age", "description": "27"},
                {"title": "Home", "description": "Port Ash"},
            ],
        }

    def test_optional_fields_only_when_filled(self, character_values):
        character_values.update({"birthday": "03-14", "custom_css": "", "tag": " hero "})
        fields = CharacterForm(character_values).build_fields()

        assert fields["birthday"] == "03-14"
        assert fields["tag"] == "hero"
        assert "custom_css" not in fields
        assert "overlay_css" not in fields

    def test_name_required(self, character_values):
        del character_values["name"]
        with pytest.raises(ValidationError, match="Name is required."):
            CharacterForm(character_values).build_fields()

    def test_page_image_required(self, character_values, store):
        store.add(AssetRole.THUMBNAIL, b"t", "image/png")
        with pytest.raises(ValidationError, match="Page image wasn't selected."):
            CharacterForm(character_values).assemble(store)

    def test_gallery_rejected(self, character_values, store):
        store.add(AssetRole.THUMBNAIL, b"t", "image/png")
        store.add(AssetRole.PAGE_IMAGE, b"p", "image/png")
        store.add(AssetRole.GALLERY, b"g", "image/png")
        with pytest.raises(ValidationError, match="gallery image"):
            CharacterForm(character_values).assemble(store)

    def test_payload_with_and_without_logo(self, character_values, store):
        store.load_uploaded(AssetRole.THUMBNAIL, "thumb-key")
        store.load_uploaded(AssetRole.PAGE_IMAGE, "page-key")
        form = CharacterForm(character_values)

        payload = form.build_payload(form.assemble(store), store)
        assert payload["thumbnail_key"] == "thumb-key"
        assert payload["page_img_key"] == "page-key"
        assert "logo_url" not in payload
        assert "art_keys" not in payload

        store.load_uploaded(AssetRole.LOGO, "logo-key")
        payload = form.build_payload(form.assemble(store), store)
        assert payload["logo_url"] == "logo-key"

    def test_count_field(self):
        assert CharacterForm.count_field == "file_amount"
        assert ArtPostForm.count_field == "art_amount"


def test_form_registry():
    assert FORMS == {"art": ArtPostForm, "character": CharacterForm}
