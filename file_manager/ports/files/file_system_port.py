"""
File system port interface defining the contract for file operations.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from file_manager.entities.directory_entry import DirectoryEntry


class FileSystemPort(ABC):
    """Port interface for the file system operations the shell relies on."""

    @abstractmethod
    def ensure_directory(self, path: str) -> None:
        """
        Check that a path can be opened as a directory.

        Args:
            path: Directory path to check

        Raises:
            NavigationError: If the path is missing, not a directory or not openable
        """
        pass

    @abstractmethod
    def list_directory(self, path: str) -> list[DirectoryEntry]:
        """
        List the immediate entries of a directory.

        Args:
            path: Directory to list

        Returns:
            Unsorted list of DirectoryEntry

        Raises:
            ReadError: If the directory cannot be read
        """
        pass

    @abstractmethod
    def stream_text(self, path: str) -> Iterator[str]:
        """
        Read a file as UTF-8 text, chunk by chunk.

        Args:
            path: File to read

        Returns:
            Iterator over decoded text chunks

        Raises:
            ReadError: If the file is missing, unreadable or not valid UTF-8
        """
        pass

    @abstractmethod
    def create_file(self, path: str) -> None:
        """
        Create a new empty file.

        Args:
            path: File to create

        Raises:
            WriteError: If the file exists or cannot be created
        """
        pass

    @abstractmethod
    def rename(self, source: str, target: str) -> None:
        """
        Rename a file without overwriting an existing target.

        Args:
            source: Existing path
            target: New path

        Raises:
            WriteError: If the rename fails
        """
        pass

    @abstractmethod
    def copy_file(self, source: str, target: str) -> None:
        """
        Copy a file's bytes into a newly created file.

        Returns only once the target is fully written and closed.

        Args:
            source: File to copy
            target: File to create

        Raises:
            WriteError: If either side fails; a partial target is removed
        """
        pass

    @abstractmethod
    def remove_file(self, path: str) -> None:
        """
        Delete a file.

        Args:
            path: File to delete

        Raises:
            WriteError: If the file cannot be removed
        """
        pass
