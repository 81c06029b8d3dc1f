"""
Command domain entity and the line parser that produces it.
"""

from dataclasses import dataclass, field
from enum import Enum


class CommandKind(Enum):
    """Closed set of commands understood by the shell."""

    EXIT = ".exit"
    UP = "up"
    CD = "cd"
    LS = "ls"
    CAT = "cat"
    ADD = "add"
    RN = "rn"
    CP = "cp"
    MV = "mv"
    UNKNOWN = ""

    @classmethod
    def from_keyword(cls, keyword: str) -> "CommandKind":
        """Map a lower-cased keyword to its kind, UNKNOWN when unrecognized."""
        if not keyword:
            return cls.UNKNOWN
        try:
            return cls(keyword)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class ParsedCommand:
    """One input line split into a keyword and positional arguments."""

    keyword: str
    arguments: list[str] = field(default_factory=list)

    @property
    def kind(self) -> CommandKind:
        return CommandKind.from_keyword(self.keyword)


def parse_command(line: str) -> ParsedCommand:
    """
    Split a raw input line into a command.

    Never fails: empty input gives an empty keyword, which maps to
    CommandKind.UNKNOWN.

    Args:
        line: Raw line read from the terminal

    Returns:
        ParsedCommand with a lower-cased keyword
    """
    tokens = (line or "").split()
    if not tokens:
        return ParsedCommand(keyword="")
    return ParsedCommand(keyword=tokens[0].lower(), arguments=tokens[1:])
