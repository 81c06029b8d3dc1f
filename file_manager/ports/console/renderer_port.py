"""
Renderer port: everything the shell writes to the terminal goes through it.
"""

from abc import ABC, abstractmethod

from file_manager.entities.directory_entry import DirectoryEntry


class RendererPort(ABC):
    """Port interface for console output."""

    @abstractmethod
    def welcome(self, username: str) -> None:
        pass

    @abstractmethod
    def farewell(self, username: str) -> None:
        pass

    @abstractmethod
    def current_directory(self, path: str) -> None:
        """Print the line shown after every command."""
        pass

    @abstractmethod
    def directory_table(self, entries: list[DirectoryEntry]) -> None:
        """Render a listing as a Name/Type table, in the given order."""
        pass

    @abstractmethod
    def error(self, message: str) -> None:
        """Print an error message followed by a blank line."""
        pass

    @abstractmethod
    def write_text(self, text: str) -> None:
        """Write raw text with no framing."""
        pass

    @abstractmethod
    def end_text(self) -> None:
        """Finish a raw text stream so the next output starts on a new line."""
        pass
