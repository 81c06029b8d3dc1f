"""
Local file system adapter implementation for file operations.
"""

import logging
import os
import shutil
from collections.abc import Iterator
from typing import IO

from typing_extensions import override

from file_manager.config.settings import DEFAULT_CHUNK_SIZE
from file_manager.entities.directory_entry import DirectoryEntry, EntryKind
from file_manager.exceptions import NavigationError, ReadError, WriteError
from file_manager.ports.files.file_system_port import FileSystemPort


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the file system port."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        """
        Initialize the adapter.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
            chunk_size: Buffer size in bytes used when streaming files
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._chunk_size = chunk_size

    @override
    def ensure_directory(self, path: str) -> None:
        if not os.path.exists(path):
            raise NavigationError(f"Directory does not exist: {path}")

        if not os.path.isdir(path):
            raise NavigationError(f"Path is not a directory: {path}")

        try:
            # Opening the directory catches missing execute/read permission.
            with os.scandir(path):
                pass
        except OSError as e:
            raise NavigationError(f"Cannot open directory {path}: {e}")

    @override
    def list_directory(self, path: str) -> list[DirectoryEntry]:
        try:
            entries: list[DirectoryEntry] = []
            with os.scandir(path) as it:
                for item in it:
                    kind = EntryKind.DIRECTORY if item.is_dir() else EntryKind.FILE
                    entries.append(DirectoryEntry(name=item.name, kind=kind))
            return entries
        except OSError as e:
            raise ReadError(f"Failed to read directory {path}: {e}")

    @override
    def stream_text(self, path: str) -> Iterator[str]:
        try:
            handle = open(path, "r", encoding="utf-8", newline="")
        except OSError as e:
            raise ReadError(f"Cannot open file {path}: {e}")
        return self._iter_chunks(handle, path)

    def _iter_chunks(self, handle: IO[str], path: str) -> Iterator[str]:
        with handle:
            while True:
                try:
                    chunk = handle.read(self._chunk_size)
                except (OSError, UnicodeDecodeError) as e:
                    raise ReadError(f"Failed to read file {path}: {e}")
                if not chunk:
                    break
                yield chunk

    @override
    def create_file(self, path: str) -> None:
        try:
            with open(path, "x", encoding="utf-8"):
                pass
        except OSError as e:
            raise WriteError(f"Cannot create file {path}: {e}")
        self._logger.debug(f"Created file {path}")

    @override
    def rename(self, source: str, target: str) -> None:
        if os.path.lexists(target):
            raise WriteError(f"Target already exists: {target}")
        try:
            os.rename(source, target)
        except OSError as e:
            raise WriteError(f"Cannot rename {source} to {target}: {e}")

    @override
    def copy_file(self, source: str, target: str) -> None:
        try:
            src = open(source, "rb")
        except OSError as e:
            raise WriteError(f"Cannot open source file {source}: {e}")

        with src:
            try:
                dst = open(target, "xb")
            except OSError as e:
                raise WriteError(f"Cannot create target file {target}: {e}")

            try:
                with dst:
                    shutil.copyfileobj(src, dst, self._chunk_size)
                    dst.flush()
            except OSError as e:
                self._discard_partial(target)
                raise WriteError(f"Failed to copy {source} to {target}: {e}")

    def _discard_partial(self, path: str) -> None:
        """Remove a destination left half-written by a failed copy."""
        try:
            os.remove(path)
        except OSError as e:
            self._logger.warning(f"Could not remove partial file {path}: {e}")

    @override
    def remove_file(self, path: str) -> None:
        try:
            os.remove(path)
        except OSError as e:
            raise WriteError(f"Cannot remove file {path}: {e}")
