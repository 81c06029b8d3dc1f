"""
Use case for listing the current directory (``ls``).
"""

import logging
from typing import Optional

from typing_extensions import override

from file_manager.entities.directory_entry import sort_entries
from file_manager.entities.session import CommandResult, Session
from file_manager.exceptions import FileManagerError
from file_manager.ports.commands.command_handler_port import CommandHandlerPort
from file_manager.ports.console.renderer_port import RendererPort
from file_manager.ports.files.file_system_port import FileSystemPort


class ListDirectoryUseCase(CommandHandlerPort):
    """Use case for listing the entries of the current directory."""

    def __init__(
        self,
        file_system: FileSystemPort,
        renderer: RendererPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Port used to read the directory
            renderer: Port used to draw the table
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._renderer = renderer
        self._logger = logger or logging.getLogger(__name__)

    @override
    def execute(self, session: Session, arguments: list[str]) -> CommandResult:
        """
        Render the cursor directory, directories first, then files.

        Args:
            session: Current session
            arguments: Ignored

        Returns:
            CommandResult.ok() or a read error
        """
        directory = session.cursor.render()
        try:
            self._logger.info(f"Listing directory: {directory}")
            entries = self._file_system.list_directory(directory)
        except FileManagerError as e:
            self._logger.warning(f"Error listing directory: {e}")
            return CommandResult.read_error(f"Can't read directory: {directory}")

        self._logger.info(f"Found {len(entries)} entries")
        self._renderer.directory_table(sort_entries(entries))
        return CommandResult.ok()
