"""
Use case for printing a file (``cat``).
"""

import logging
from typing import Optional

from typing_extensions import override

from file_manager.entities.session import CommandResult, Session
from file_manager.exceptions import FileManagerError
from file_manager.ports.commands.command_handler_port import CommandHandlerPort
from file_manager.ports.console.renderer_port import RendererPort
from file_manager.ports.files.file_system_port import FileSystemPort


class ReadFileUseCase(CommandHandlerPort):
    """Stream a UTF-8 file to the console."""

    def __init__(
        self,
        file_system: FileSystemPort,
        renderer: RendererPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._renderer = renderer
        self._logger = logger or logging.getLogger(__name__)

    @override
    def execute(self, session: Session, arguments: list[str]) -> CommandResult:
        if not arguments:
            return CommandResult.ok()

        name = arguments[0]
        path = session.cursor.resolve(name)
        self._logger.info(f"Reading file: {path}")
        try:
            for chunk in self._file_system.stream_text(path):
                self._renderer.write_text(chunk)
        except FileManagerError as e:
            self._logger.warning(f"Error reading file: {e}")
            return CommandResult.read_error(f"No such file: {name}")
        finally:
            self._renderer.end_text()

        return CommandResult.ok()
