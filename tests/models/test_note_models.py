"""
Tests for note, settings and search models.
"""

import pytest
from pydantic import ValidationError

from hashnotes.models import (
    DEFAULT_NOTE_COLOR,
    AppSettings,
    ImageAsset,
    Note,
    NoteDraft,
    NoteUpdate,
    SearchOptions,
    SearchResult,
    SortBy,
    Theme,
    ViewMode,
)


@pytest.mark.unit
class TestNote:
    """Tests for the Note model."""

    def test_defaults(self):
        note = Note(id="n", title="Title", created_at=1, updated_at=2)

        assert note.content == ""
        assert note.hashtags == []
        assert note.definitions is None
        assert note.color == DEFAULT_NOTE_COLOR
        assert note.pinned is False

    def test_hashtags_normalized(self):
        note = Note(id="n", title="T", hashtags=["UE5", "#UE5", " ", "#Blueprints"])

        assert note.hashtags == ["#UE5", "#Blueprints"]

    def test_camel_case_input_and_output(self):
        note = Note.model_validate(
            {
                "id": "n",
                "title": "T",
                "blueprintNodes": ["Branch"],
                "images": [{"id": "img_1", "dataUrl": "data:image/png;base64,AA=="}],
                "createdAt": 5,
                "updatedAt": 6,
            }
        )

        data = note.to_dict()
        assert note.blueprint_nodes == ["Branch"]
        assert data["blueprintNodes"] == ["Branch"]
        assert data["images"] == [{"id": "img_1", "dataUrl": "data:image/png;base64,AA=="}]
        assert data["createdAt"] == 5
        assert "definitions" not in data

    def test_unknown_fields_ignored(self):
        note = Note.model_validate({"id": "n", "title": "T", "legacyField": 1})

        assert not hasattr(note, "legacyField")

    def test_updated_at_clamped_to_created_at(self):
        note = Note(id="n", title="T", created_at=10, updated_at=5)

        assert note.updated_at == 10

    def test_created_at_defaults_to_updated_at(self):
        note = Note.model_validate({"id": "n", "title": "T", "updatedAt": 42})

        assert note.created_at == 42

    def test_requires_id_and_title(self):
        with pytest.raises(ValidationError):
            Note.model_validate({"title": "T"})
        with pytest.raises(ValidationError):
            Note.model_validate({"id": "n"})

    def test_has_hashtag(self):
        note = Note(id="n", title="T", hashtags=["#UI"])

        assert note.has_hashtag("#UI") is True
        assert note.has_hashtag("#ui") is False


@pytest.mark.unit
class TestNoteInputs:
    """Tests for NoteDraft and NoteUpdate."""

    def test_draft_normalizes_hashtags(self):
        assert NoteDraft(title="T", hashtags=["UI"]).hashtags == ["#UI"]

    def test_update_tracks_only_set_fields(self):
        update = NoteUpdate.model_validate({"title": "New", "blueprintNodes": []})

        assert update.model_dump(exclude_unset=True) == {"title": "New", "blueprint_nodes": []}

    def test_update_ignores_identity_fields(self):
        update = NoteUpdate.model_validate({"id": "x", "createdAt": 1, "pinned": True})

        assert update.model_dump(exclude_unset=True) == {"pinned": True}


@pytest.mark.unit
class TestSettingsAndSearchModels:
    """Tests for AppSettings and search models."""

    def test_settings_defaults(self):
        settings = AppSettings()

        assert settings.theme == Theme.SYSTEM
        assert settings.sort_by == SortBy.UPDATED
        assert settings.view_mode == ViewMode.GRID

    def test_settings_serialize_camel_case(self):
        assert AppSettings(sort_by=SortBy.TITLE).to_dict() == {
            "theme": "system",
            "sortBy": "title",
            "viewMode": "grid",
        }

    def test_settings_reject_unknown_values(self):
        with pytest.raises(ValidationError):
            AppSettings.model_validate({"viewMode": "carousel"})

    def test_search_options_is_empty(self):
        assert SearchOptions().is_empty is True
        assert SearchOptions(terms=["ism"]).is_empty is False
        assert SearchOptions(hashtags=["#UI"]).is_empty is False

    def test_search_result_score_non_negative(self):
        note = Note(id="n", title="T")

        with pytest.raises(ValidationError):
            SearchResult(note=note, score=-1)

    def test_image_asset_aliases(self):
        image = ImageAsset(id="img_1", data_url="data:,", alt="Alt")

        assert image.to_dict() == {"id": "img_1", "dataUrl": "data:,", "alt": "Alt"}
