"""Tests for the JSON file store."""

import json
from unittest.mock import patch

import pytest

from suggestions.state import initialize_state
from suggestions.storage import SuggestionFileStore


class TestSuggestionFileStore:
    def test_missing_file(self, tmp_path):
        assert SuggestionFileStore(tmp_path / "none.json").load() == []

    def test_save_then_load(self, tmp_path, sample_suggestions):
        store = SuggestionFileStore(tmp_path / "data" / "suggestions.json")
        store.save(sample_suggestions)

        raw = store.load()
        assert [r["id"] for r in raw] == ["suggestion-1", "suggestion-2", "suggestion-3"]
        assert list(initialize_state(raw).suggestions) == sample_suggestions
        assert not (tmp_path / "data" / "suggestions.json.tmp").exists()

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / "suggestions.json"
        path.write_text("{not json")
        assert SuggestionFileStore(path).load() == []

    def test_non_list_payload(self, tmp_path):
        path = tmp_path / "suggestions.json"
        path.write_text(json.dumps({"id": "x"}))
        assert SuggestionFileStore(path).load() == []

    def test_keeps_non_ascii(self, tmp_path, make_suggestion):
        path = tmp_path / "suggestions.json"
        SuggestionFileStore(path).save([make_suggestion(issue="Überschrift fehlt")])
        assert "Überschrift" in path.read_text(encoding="utf-8")

    def test_overwrites_previous_contents(self, tmp_path, make_suggestion):
        store = SuggestionFileStore(tmp_path / "suggestions.json")
        store.save([make_suggestion(id="a"), make_suggestion(id="b")])
        store.save([make_suggestion(id="c")])
        assert [r["id"] for r in store.load()] == ["c"]

    def test_failed_write_leaves_no_temp_file(self, tmp_path, make_suggestion):
        path = tmp_path / "suggestions.json"
        store = SuggestionFileStore(path)
        store.save([make_suggestion(id="a")])

        with patch("suggestions.storage.json.dump", side_effect=TypeError("not serializable")):
            with pytest.raises(TypeError):
                store.save([make_suggestion(id="b")])

        assert not (tmp_path / "suggestions.json.tmp").exists()
        assert [r["id"] for r in store.load()] == ["a"]
