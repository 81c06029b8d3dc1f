"""
Tests for command parsing.
"""

import pytest

from file_manager.entities.command import CommandKind, parse_command


class TestParseCommand:
    """Test cases for parse_command."""

    def test_keyword_and_arguments(self):
        """The first token is the keyword, the rest are arguments."""
        command = parse_command("rn old.txt new.txt")

        assert command.keyword == "rn"
        assert command.arguments == ["old.txt", "new.txt"]
        assert command.kind is CommandKind.RN

    def test_keyword_is_case_insensitive(self):
        """Keywords are lower-cased before matching."""
        assert parse_command("LS").kind is CommandKind.LS
        assert parse_command(".EXIT").kind is CommandKind.EXIT

    def test_arguments_keep_their_case(self):
        """Only the keyword is lower-cased."""
        assert parse_command("cd Projects").arguments == ["Projects"]

    def test_extra_whitespace_is_ignored(self):
        """Runs of whitespace separate tokens; surrounding whitespace is dropped."""
        command = parse_command("  cp   a.txt\tb.txt  \n")

        assert command.keyword == "cp"
        assert command.arguments == ["a.txt", "b.txt"]

    @pytest.mark.parametrize("line", ["", "   ", "\n", "\t"])
    def test_empty_input(self, line):
        """Blank lines parse to an unknown command with no arguments."""
        command = parse_command(line)

        assert command.keyword == ""
        assert command.arguments == []
        assert command.kind is CommandKind.UNKNOWN

    def test_unknown_keyword(self):
        """Unrecognized keywords are not an error."""
        command = parse_command("rm -rf /")

        assert command.kind is CommandKind.UNKNOWN
        assert command.arguments == ["-rf", "/"]

    def test_every_keyword_is_recognized(self):
        """Every command of the shell maps to its own kind."""
        keywords = {".exit", "up", "cd", "ls", "cat", "add", "rn", "cp", "mv"}

        kinds = {parse_command(k).kind for k in keywords}

        assert CommandKind.UNKNOWN not in kinds
        assert len(kinds) == len(keywords)
