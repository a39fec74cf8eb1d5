"""
Unit tests for catalogue loading.
"""

from pathlib import Path

import pytest

from movie_pdf.loading import LoaderError, load_catalogue


class TestLoadCatalogue:
    """Tests for load_catalogue()."""

    def test_load_when_array_then_returns_entries(self, write_catalogue, inception_entry):
        path = write_catalogue([inception_entry, {"title": "Heat"}])

        entries = load_catalogue(path)

        assert len(entries) == 2
        assert entries[1] == {"title": "Heat"}

    def test_load_when_invalid_entries_then_still_returned(self, write_catalogue):
        """Validation happens per record later, not here."""
        path = write_catalogue([{"year": 2010}, 5])

        assert load_catalogue(path) == [{"year": 2010}, 5]

    def test_load_when_missing_file_then_raises(self, tmp_path: Path):
        with pytest.raises(LoaderError, match="does not exist"):
            load_catalogue(tmp_path / "nope.json")

    def test_load_when_bad_json_then_raises(self, tmp_path: Path):
        path = tmp_path / "movies.json"
        path.write_text("[{", encoding="utf-8")

        with pytest.raises(LoaderError, match="Invalid JSON"):
            load_catalogue(path)

    def test_load_when_not_array_then_raises(self, write_catalogue):
        path = write_catalogue({"title": "Inception"})

        with pytest.raises(LoaderError, match="JSON array"):
            load_catalogue(path)
