"""
Use case for copying a file (``cp``).
"""

import logging
from typing import Optional

from typing_extensions import override

from file_manager.entities.session import CommandResult, Session
from file_manager.exceptions import FileManagerError
from file_manager.ports.commands.command_handler_port import CommandHandlerPort
from file_manager.ports.files.file_system_port import FileSystemPort


class CopyFileUseCase(CommandHandlerPort):
    """Use case for copying a file byte for byte within the current directory."""

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
        Copy ``arguments[0]`` to a new file ``arguments[1]``.

        Args:
            session: Current session
            arguments: ``[old_name, new_name]``; fewer is a no-op

        Returns:
            CommandResult.ok() or a write error
        """
        if len(arguments) < 2:
            return CommandResult.ok()

        old_name, new_name = arguments[0], arguments[1]
        source = session.cursor.resolve(old_name)
        target = session.cursor.resolve(new_name)
        try:
            self._logger.info(f"Copying {source} to {target}")
            self._file_system.copy_file(source, target)
        except FileManagerError as e:
            self._logger.warning(f"Error copying file: {e}")
            return CommandResult.write_error(f"File can't be copied: {old_name}")
        return CommandResult.ok()
