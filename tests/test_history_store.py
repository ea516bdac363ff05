"""Tests for history persistence and the history models."""

import json
from pathlib import Path
from unittest import mock

import pytest
from pydantic import ValidationError

from ouroboros.core.errors import MetadataError
from ouroboros.core.history_store import (
    append_version,
    get_history_path,
    load_history,
    save_history,
)
from ouroboros.models import FileHistory, FileVersion


@pytest.fixture
def alias_dir(tmp_path: Path) -> Path:
    """Create a temporary alias directory."""
    d = tmp_path / "memory" / "notes.txt"
    d.mkdir(parents=True)
    return d


def make_history(versions: int = 0) -> FileHistory:
    history = FileHistory(alias="notes.txt", original_path="/work/notes.txt")
    for n in range(versions):
        history.append(f"hash{n + 1}", size=n, mtime_ns=1000 + n)
    return history


class TestFileHistoryModel:
    """Tests for FileHistory behaviour."""

    @pytest.mark.unit
    def test_fresh_history_is_empty(self) -> None:
        history = make_history()
        assert history.latest is None
        assert history.next_version == 1
        assert not history.matches_metadata(0, 0)
        assert not history.matches_hash("anything")

    @pytest.mark.unit
    def test_append_numbers_contiguously(self) -> None:
        history = make_history(3)
        assert [v.version for v in history.versions] == [1, 2, 3]
        assert history.latest is not None
        assert history.latest.hash == "hash3"

    @pytest.mark.unit
    def test_matches_metadata_requires_both(self) -> None:
        """Size and mtime must both match the latest version."""
        history = make_history(1)
        assert history.matches_metadata(0, 1000)
        assert not history.matches_metadata(0, 1001)
        assert not history.matches_metadata(1, 1000)

    @pytest.mark.unit
    def test_rejects_gapped_versions(self) -> None:
        """Non-contiguous version numbers fail validation."""
        data = {
            "alias": "a",
            "original_path": "/a",
            "versions": [
                {"version": 1, "hash": "h1", "size": 1, "mtime_ns": 1, "processed_at": "t"},
                {"version": 3, "hash": "h3", "size": 1, "mtime_ns": 2, "processed_at": "t"},
            ],
        }
        with pytest.raises(ValidationError):
            FileHistory.model_validate(data)

    @pytest.mark.unit
    def test_version_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            FileVersion(version=0, hash="h", size=0, mtime_ns=0)

    @pytest.mark.unit
    def test_processed_at_has_offset(self) -> None:
        """Timestamps are local time with an explicit UTC offset."""
        record = make_history(1).versions[0]
        assert record.processed_at[-6] in "+-"


class TestLoadHistory:
    """Tests for load_history function."""

    @pytest.mark.unit
    def test_missing_file_returns_fresh(self, alias_dir: Path) -> None:
        history = load_history(alias_dir, "notes.txt", "/work/notes.txt")
        assert history.versions == []
        assert history.alias == "notes.txt"
        assert history.original_path == "/work/notes.txt"

    @pytest.mark.unit
    def test_roundtrip_existing(self, alias_dir: Path) -> None:
        save_history(alias_dir, make_history(2))
        history = load_history(alias_dir, "notes.txt", "/work/notes.txt")
        assert len(history.versions) == 2

    @pytest.mark.unit
    def test_corrupt_json_resets(self, alias_dir: Path) -> None:
        """Unparsable history restarts numbering at 1 instead of failing."""
        get_history_path(alias_dir).write_text("not valid json {{{")
        history = load_history(alias_dir, "notes.txt", "/work/notes.txt")
        assert history.next_version == 1

    @pytest.mark.unit
    def test_invalid_schema_resets(self, alias_dir: Path) -> None:
        get_history_path(alias_dir).write_text('{"wrong": "schema"}')
        history = load_history(alias_dir, "notes.txt", "/work/notes.txt")
        assert history.versions == []

    @pytest.mark.unit
    def test_unreadable_file_raises(self, alias_dir: Path) -> None:
        """An existing but unreadable history is a metadata failure."""
        get_history_path(alias_dir).write_text("{}")
        with (
            mock.patch.object(Path, "read_text", side_effect=PermissionError("denied")),
            pytest.raises(MetadataError) as exc_info,
        ):
            load_history(alias_dir, "notes.txt", "/work/notes.txt")
        assert exc_info.value.path == get_history_path(alias_dir)


class TestSaveHistory:
    """Tests for save_history and append_version functions."""

    @pytest.mark.unit
    def test_writes_pretty_json(self, alias_dir: Path) -> None:
        path = save_history(alias_dir, make_history(1))
        text = path.read_text()
        assert text.startswith("{\n  ")
        data = json.loads(text)
        assert data["versions"][0]["version"] == 1
        assert data["versions"][0]["diff_file"] is None

    @pytest.mark.unit
    def test_leaves_no_temp_files(self, alias_dir: Path) -> None:
        save_history(alias_dir, make_history(1))
        save_history(alias_dir, make_history(2))
        assert sorted(p.name for p in alias_dir.iterdir()) == ["history.json"]

    @pytest.mark.unit
    def test_failed_write_keeps_previous(self, alias_dir: Path) -> None:
        """A failed rewrite raises and leaves the old history intact."""
        save_history(alias_dir, make_history(1))
        before = get_history_path(alias_dir).read_text()

        with (
            mock.patch("ouroboros.core.atomic.os.replace", side_effect=OSError("disk full")),
            pytest.raises(MetadataError),
        ):
            save_history(alias_dir, make_history(2))

        assert get_history_path(alias_dir).read_text() == before
        assert sorted(p.name for p in alias_dir.iterdir()) == ["history.json"]

    @pytest.mark.unit
    def test_append_version_persists(self, alias_dir: Path) -> None:
        history = make_history(1)
        record = append_version(alias_dir, history, "newhash", 10, 2000, diff_file="v2.diff")
        assert record.version == 2

        reloaded = load_history(alias_dir, "notes.txt", "/work/notes.txt")
        assert [v.version for v in reloaded.versions] == [1, 2]
        assert reloaded.versions[-1].diff_file == "v2.diff"
