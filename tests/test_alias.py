"""Tests for storage alias resolution."""

from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from ouroboros.core.alias import calculate_path_alias, find_alias_collisions


class TestCalculatePathAlias:
    """Tests for calculate_path_alias function."""

    @pytest.mark.unit
    def test_relative_to_cwd(self) -> None:
        """Paths under the working directory are aliased relative to it."""
        alias = calculate_path_alias("/work/project/src/main.rs", cwd="/work/project")
        assert alias == "src_main.rs"

    @pytest.mark.unit
    def test_outside_cwd_uses_absolute(self) -> None:
        """Paths outside the working directory keep their full path."""
        alias = calculate_path_alias("/etc/hosts", cwd="/work/project")
        assert alias == "_etc_hosts"

    @pytest.mark.unit
    def test_root_cwd_strips_leading_separator(self) -> None:
        """From the filesystem root every path is relative to it."""
        assert calculate_path_alias("/etc/hosts", cwd="/") == "etc_hosts"
        assert calculate_path_alias("/home/me/a b.txt", cwd="/") == "home_me_a_b.txt"

    @pytest.mark.unit
    def test_sibling_prefix_is_not_under_cwd(self) -> None:
        """A directory sharing a name prefix with cwd is not inside it."""
        alias = calculate_path_alias("/work/project2/a.txt", cwd="/work/project")
        assert alias == "_work_project2_a.txt"

    @pytest.mark.unit
    def test_windows_path(self) -> None:
        """Backslashes, drive colons and spaces become underscores."""
        alias = calculate_path_alias(r"D:\Data\My Notes\Todo.TXT", cwd=r"C:\Users\me")
        assert alias == "d__data_my_notes_todo.txt"

    @pytest.mark.unit
    def test_strips_long_path_prefix(self) -> None:
        """The \\\\?\\ long-path prefix is ignored on both path and cwd."""
        alias = calculate_path_alias(r"\\?\C:\repo\a b.md", cwd=r"\\?\C:\repo")
        assert alias == "a_b.md"

    @pytest.mark.unit
    def test_lowercases(self) -> None:
        assert calculate_path_alias("/w/README.MD", cwd="/w") == "readme.md"

    @pytest.mark.unit
    def test_defaults_to_process_cwd(self, workspace: Path) -> None:
        """Without an explicit cwd the process working directory is used."""
        assert calculate_path_alias(workspace / "notes" / "a.txt") == "notes_a.txt"

    @given(
        parts=st.lists(
            st.text(alphabet="abcdefgXYZ019 .-_", min_size=1, max_size=8),
            min_size=1,
            max_size=5,
        )
    )
    @settings(max_examples=100)
    def test_alias_is_flat_and_deterministic(self, parts: list[str]) -> None:
        """Aliases never contain separators, colons, spaces or uppercase."""
        path = "/" + "/".join(parts)
        alias = calculate_path_alias(path, cwd="/nonexistent-cwd")
        assert alias == calculate_path_alias(path, cwd="/nonexistent-cwd")
        assert not set(alias) & {"/", "\\", ":", " "}
        assert alias == alias.lower()


class TestFindAliasCollisions:
    """Tests for find_alias_collisions function."""

    @pytest.mark.unit
    def test_no_collisions(self) -> None:
        paths = [Path("/w/a.txt"), Path("/w/b.txt")]
        assert find_alias_collisions(paths, cwd="/w") == {}

    @pytest.mark.unit
    def test_case_only_difference_collides(self) -> None:
        """Paths differing only in case share an alias."""
        paths = [Path("/w/Notes.txt"), Path("/w/notes.txt")]
        collisions = find_alias_collisions(paths, cwd="/w")
        assert collisions == {"notes.txt": sorted(paths)}

    @pytest.mark.unit
    def test_separator_substitution_collides(self) -> None:
        """A nested path and an underscored name can collide."""
        paths = [Path("/w/a/b.txt"), Path("/w/a_b.txt")]
        collisions = find_alias_collisions(paths, cwd="/w")
        assert list(collisions) == ["a_b.txt"]

    @pytest.mark.unit
    def test_duplicates_are_not_collisions(self) -> None:
        paths = [Path("/w/a.txt"), Path("/w/a.txt")]
        assert find_alias_collisions(paths, cwd="/w") == {}
