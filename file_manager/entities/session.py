"""
Session state and command results.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from file_manager.entities.path_cursor import PathCursor


@dataclass
class Session:
    """State shared by the dispatcher and every handler for one run."""

    cursor: PathCursor
    username: str


class ResultStatus(Enum):
    """How a handler call ended."""

    OK = "ok"
    EXIT = "exit"
    NAVIGATION_ERROR = "navigation_error"
    READ_ERROR = "read_error"
    WRITE_ERROR = "write_error"


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a single handler call."""

    status: ResultStatus
    message: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.status in (
            ResultStatus.NAVIGATION_ERROR,
            ResultStatus.READ_ERROR,
            ResultStatus.WRITE_ERROR,
        )

    @classmethod
    def ok(cls) -> "CommandResult":
        return cls(ResultStatus.OK)

    @classmethod
    def exit(cls) -> "CommandResult":
        return cls(ResultStatus.EXIT)

    @classmethod
    def navigation_error(cls, message: str) -> "CommandResult":
        return cls(ResultStatus.NAVIGATION_ERROR, message)

    @classmethod
    def read_error(cls, message: str) -> "CommandResult":
        return cls(ResultStatus.READ_ERROR, message)

    @classmethod
    def write_error(cls, message: str) -> "CommandResult":
        return cls(ResultStatus.WRITE_ERROR, message)
