"""
Pytest configuration and shared fixtures.
"""

import io
import os
import tempfile
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from file_manager.adapters.console.rich_renderer import RichConsoleRenderer
from file_manager.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_manager.config.settings import Settings
from file_manager.container import DependencyContainer
from file_manager.entities.path_cursor import PathCursor
from file_manager.entities.session import Session

BINARY_CONTENT = bytes(range(256)) * 4


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Layout:
        notes.txt        "hello world\\n"
        data.bin         non UTF-8 bytes
        beta/            empty directory
        alpha/inner.txt  "inside"

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        with open(os.path.join(temp_dir, "notes.txt"), "w", encoding="utf-8") as f:
            f.write("hello world\n")

        with open(os.path.join(temp_dir, "data.bin"), "wb") as f:
            f.write(BINARY_CONTENT)

        os.makedirs(os.path.join(temp_dir, "beta"))
        alpha = os.path.join(temp_dir, "alpha")
        os.makedirs(alpha)
        with open(os.path.join(alpha, "inner.txt"), "w", encoding="utf-8") as f:
            f.write("inside")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def console():
    """Rich console writing plain text into memory."""
    return Console(
        file=io.StringIO(),
        width=120,
        color_system=None,
        force_terminal=False,
        highlight=False,
        soft_wrap=True,
    )


@pytest.fixture
def renderer(console):
    return RichConsoleRenderer(console)


@pytest.fixture
def file_system(mock_logger):
    return LocalFileSystemAdapter(mock_logger, chunk_size=64)


@pytest.fixture
def session(temp_directory):
    """Session whose cursor starts in the temporary directory."""
    return Session(cursor=PathCursor.from_directory(temp_directory), username="tester")


@pytest.fixture
def dependency_container(temp_directory, mock_logger, monkeypatch, renderer):
    """
    Create a dependency container rooted at the temporary directory.

    Returns:
        DependencyContainer instance with mocked logger and in-memory renderer
    """
    monkeypatch.setenv("FILE_MANAGER_HOME", temp_directory)
    container = DependencyContainer(Settings())
    # Replace the logger with our mock
    container._logger = mock_logger
    container._instances["renderer"] = renderer
    return container


@pytest.fixture
def read_output(console):
    """Return a callable giving everything printed on the test console so far."""
    return lambda: console.file.getvalue()
