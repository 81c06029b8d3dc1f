"""
Tests for the PathCursor entity.
"""

import os

import pytest

from file_manager.entities.path_cursor import PathCursor


class TestPathCursor:
    """Test cases for the PathCursor entity."""

    def test_from_directory_splits_components(self, temp_directory):
        """The cursor renders back to the directory it was built from."""
        cursor = PathCursor.from_directory(temp_directory)

        assert cursor.render() == temp_directory
        assert cursor.depth == len(cursor.segments) > 1

    def test_empty_segments_rejected(self):
        """A cursor can never be empty."""
        with pytest.raises(ValueError, match="at least one segment"):
            PathCursor([])

    def test_push_and_render(self):
        """Pushed segments are joined with the path separator."""
        cursor = PathCursor(["home"])
        cursor.push("projects")

        assert cursor.render() == os.path.join("home", "projects")
        assert cursor.segments == ["home", "projects"]

    def test_pop_removes_last_segment(self):
        """Popping returns to the parent."""
        cursor = PathCursor(["home", "projects"])
        cursor.pop()

        assert cursor.render() == "home"

    def test_pop_never_goes_below_root(self):
        """Any number of pops from the root leaves the cursor unchanged."""
        cursor = PathCursor.from_directory(os.path.abspath(os.sep))
        before = cursor.render()

        for _ in range(5):
            cursor.pop()

        assert cursor.depth == 1
        assert cursor.render() == before

    def test_pop_from_home_stops_at_filesystem_root(self, temp_directory):
        """Repeated pops walk up to the first segment and stop there."""
        cursor = PathCursor.from_directory(temp_directory)

        for _ in range(cursor.depth + 3):
            cursor.pop()

        assert cursor.depth == 1

    def test_resolve_does_not_mutate(self):
        """resolve() joins a name without changing the cursor."""
        cursor = PathCursor(["home"])

        assert cursor.resolve("notes.txt") == os.path.join("home", "notes.txt")
        assert cursor.segments == ["home"]

    def test_segments_is_a_copy(self):
        """Callers cannot mutate the cursor through the segments property."""
        cursor = PathCursor(["home"])
        cursor.segments.append("oops")

        assert cursor.segments == ["home"]

    def test_str_and_repr(self):
        """String forms expose the rendered path and the segments."""
        cursor = PathCursor(["home", "docs"])

        assert str(cursor) == os.path.join("home", "docs")
        assert repr(cursor) == "PathCursor(segments=['home', 'docs'])"

    def test_resolve_keeps_absolute_names_under_cursor(self):
        """An absolute name is joined below the cursor instead of replacing it."""
        cursor = PathCursor(["home", "alice"])

        assert cursor.resolve(os.sep + "etc") == os.path.join("home", "alice", "etc")
        assert cursor.resolve(os.sep) == os.path.join("home", "alice", "")

    def test_push_strips_leading_separators(self):
        cursor = PathCursor(["home"])

        cursor.push(os.sep + "docs")

        assert cursor.segments == ["home", "docs"]
        assert cursor.render() == os.path.join("home", "docs")

    def test_push_root_is_a_no_op(self):
        cursor = PathCursor(["home"])

        cursor.push(os.sep)

        assert cursor.segments == ["home"]
