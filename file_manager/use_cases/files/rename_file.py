"""
Use case for renaming a file (``rn``).
"""

import logging
from typing import Optional

from typing_extensions import override

from file_manager.entities.session import CommandResult, Session
from file_manager.exceptions import FileManagerError
from file_manager.ports.commands.command_handler_port import CommandHandlerPort
from file_manager.ports.files.file_system_port import FileSystemPort


class RenameFileUseCase(CommandHandlerPort):
    """Use case for renaming a file inside the current directory."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    @override
    def execute(self, session: Session, arguments: list[str]) -> CommandResult:
        if len(arguments) < 2:
            return CommandResult.ok()

        old_name, new_name = arguments[0], arguments[1]
        source = session.cursor.resolve(old_name)
        target = session.cursor.resolve(new_name)
        try:
            self._logger.info(f"Renaming {source} to {target}")
            self._file_system.rename(source, target)
        except FileManagerError as e:
            self._logger.warning(f"Error renaming file: {e}")
            return CommandResult.write_error(f"File can't be renamed: {old_name}")
        return CommandResult.ok()
