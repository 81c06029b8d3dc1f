"""
Tests for the RenameFileUseCase.
"""

import os
from unittest.mock import MagicMock

import pytest

from file_manager.entities.session import ResultStatus
from file_manager.ports.files.file_system_port import FileSystemPort
from file_manager.use_cases.files.rename_file import RenameFileUseCase


class TestRenameFileUseCase:
    """Test cases for the RenameFileUseCase."""

    def test_renames_within_cursor_directory(self, session, file_system, mock_logger):
        use_case = RenameFileUseCase(file_system, mock_logger)

        result = use_case.execute(session, ["notes.txt", "final.txt"])

        assert result.status is ResultStatus.OK
        assert not os.path.exists(session.cursor.resolve("notes.txt"))
        assert os.path.isfile(session.cursor.resolve("final.txt"))

    def test_missing_source(self, session, file_system, mock_logger):
        use_case = RenameFileUseCase(file_system, mock_logger)

        result = use_case.execute(session, ["missing.txt", "final.txt"])

        assert result.status is ResultStatus.WRITE_ERROR
        assert result.message == "File can't be renamed: missing.txt"

    def test_existing_target(self, session, file_system, mock_logger):
        use_case = RenameFileUseCase(file_system, mock_logger)

        result = use_case.execute(session, ["notes.txt", "data.bin"])

        assert result.status is ResultStatus.WRITE_ERROR
        assert os.path.exists(session.cursor.resolve("notes.txt"))

    @pytest.mark.parametrize("arguments", [[], ["notes.txt"]])
    def test_missing_arguments_are_a_no_op(self, session, mock_logger, arguments):
        mock_fs = MagicMock(spec=FileSystemPort)

        result = RenameFileUseCase(mock_fs, mock_logger).execute(session, arguments)

        assert result.status is ResultStatus.OK
        mock_fs.rename.assert_not_called()
