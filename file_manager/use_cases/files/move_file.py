"""
Use case for moving a file into another directory (``mv``).
"""

import logging
import os
from typing import Optional

from typing_extensions import override

from file_manager.entities.session import CommandResult, Session
from file_manager.exceptions import FileManagerError
from file_manager.ports.commands.command_handler_port import CommandHandlerPort
from file_manager.ports.files.file_system_port import FileSystemPort


class MoveFileUseCase(CommandHandlerPort):
    """
    Use case for moving a file as copy-then-delete.

    The source is removed only after copy_file has returned, i.e. after
    the destination has been completely written and closed. If the copy
    fails the source is never touched.
    """

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
        Move ``arguments[0]`` into directory ``arguments[1]``, keeping its name.

        Args:
            session: Current session
            arguments: ``[old_name, destination_dir]``; fewer is a no-op

        Returns:
            CommandResult.ok() or a write error
        """
        if len(arguments) < 2:
            return CommandResult.ok()

        old_name, destination = arguments[0], arguments[1]
        source = session.cursor.resolve(old_name)
        target = os.path.join(
            session.cursor.resolve(destination), os.path.basename(old_name)
        )
        failure = CommandResult.write_error(f"File can't be moved: {old_name}")

        try:
            self._logger.info(f"Moving {source} to {target}")
            self._file_system.copy_file(source, target)
        except FileManagerError as e:
            self._logger.warning(f"Error moving file, source kept: {e}")
            return failure

        try:
            self._file_system.remove_file(source)
        except FileManagerError as e:
            # Both copies now exist; nothing is lost.
            self._logger.warning(f"Copied to {target} but could not remove source: {e}")
            return failure
        return CommandResult.ok()
