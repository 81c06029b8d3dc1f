"""
Use case for moving the cursor into a subdirectory (``cd``).
"""

import logging
from typing import Optional

from typing_extensions import override

from file_manager.entities.session import CommandResult, Session
from file_manager.exceptions import FileManagerError
from file_manager.ports.commands.command_handler_port import CommandHandlerPort
from file_manager.ports.files.file_system_port import FileSystemPort


class ChangeDirectoryUseCase(CommandHandlerPort):
    """Use case for changing the current directory."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Port used to check the target directory
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    @override
    def execute(self, session: Session, arguments: list[str]) -> CommandResult:
        """
        Push ``arguments[0]`` onto the cursor if it is an openable directory.

        The cursor is only touched after the check succeeds, so a failed
        ``cd`` leaves it exactly as it was.

        Args:
            session: Current session
            arguments: ``[path]``; a missing path is a no-op

        Returns:
            CommandResult.ok() or a navigation error
        """
        if not arguments:
            return CommandResult.ok()

        path = arguments[0]
        target = session.cursor.resolve(path)
        try:
            self._file_system.ensure_directory(target)
        except FileManagerError as e:
            self._logger.warning(f"Cannot change directory: {e}")
            return CommandResult.navigation_error(f"No such file or directory: {path}")

        session.cursor.push(path)
        self._logger.info(f"Changed directory to: {session.cursor.render()}")
        return CommandResult.ok()
