"""
Use case for creating an empty file (``add``).
"""

import logging
from typing import Optional

from typing_extensions import override

from file_manager.entities.session import CommandResult, Session
from file_manager.exceptions import FileManagerError
from file_manager.ports.commands.command_handler_port import CommandHandlerPort
from file_manager.ports.files.file_system_port import FileSystemPort


class CreateFileUseCase(CommandHandlerPort):
    """Use case for creating a new empty file in the current directory."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    @override
    def execute(self, session: Session, arguments: list[str]) -> CommandResult:
        """
        Create ``arguments[0]``; an existing file is never truncated.

        Args:
            session: Current session
            arguments: ``[name]``; a missing name is a no-op

        Returns:
            CommandResult.ok() or a write error
        """
        if not arguments:
            return CommandResult.ok()

        name = arguments[0]
        path = session.cursor.resolve(name)
        try:
            self._logger.info(f"Creating file: {path}")
            self._file_system.create_file(path)
        except FileManagerError as e:
            self._logger.warning(f"Error creating file: {e}")
            return CommandResult.write_error(f"File can't be created: {name}")
        return CommandResult.ok()
