"""
Command dispatcher: routes a parsed command to its handler.
"""

import logging
from collections.abc import Mapping
from typing import Optional

from file_manager.entities.command import CommandKind, ParsedCommand
from file_manager.entities.session import CommandResult, Session
from file_manager.exceptions import (
    ConfigurationError,
    FileManagerError,
    NavigationError,
    ReadError,
)
from file_manager.ports.commands.command_handler_port import CommandHandlerPort
from file_manager.ports.console.renderer_port import RendererPort


class CommandDispatcher:
    """
    Map every CommandKind to exactly one handler.

    The table is checked when the dispatcher is built: a kind without a
    handler is a ConfigurationError, so the shell never starts with a
    command it cannot run. UNKNOWN is ignored silently.
    """

    def __init__(
        self,
        handlers: Mapping[CommandKind, CommandHandlerPort],
        renderer: RendererPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the dispatcher.

        Args:
            handlers: Handler for each CommandKind except UNKNOWN
            renderer: Port used to print error messages
            logger: Logger instance to use for logging

        Raises:
            ConfigurationError: If the handler table is incomplete or maps UNKNOWN
        """
        expected = {kind for kind in CommandKind if kind is not CommandKind.UNKNOWN}
        missing = expected - set(handlers)
        if missing:
            names = ", ".join(sorted(kind.value for kind in missing))
            raise ConfigurationError(f"No handler registered for: {names}")
        if CommandKind.UNKNOWN in handlers:
            raise ConfigurationError("UNKNOWN commands cannot have a handler")

        self._handlers = dict(handlers)
        self._renderer = renderer
        self._logger = logger or logging.getLogger(__name__)

    def dispatch(self, session: Session, command: ParsedCommand) -> CommandResult:
        """
        Run a command and print its error message, if any.

        Args:
            session: Current session
            command: Parsed input line

        Returns:
            The handler's CommandResult (OK for unknown commands)
        """
        kind = command.kind
        if kind is CommandKind.UNKNOWN:
            if command.keyword:
                self._logger.debug(f"Ignoring unknown command: {command.keyword}")
            return CommandResult.ok()

        handler = self._handlers[kind]
        try:
            result = handler.execute(session, list(command.arguments))
        except FileManagerError as e:
            # Handlers return results; this only catches ones that slipped through.
            self._logger.warning(f"Unhandled error in '{kind.value}': {e}")
            result = self._result_for(e)

        if result.is_error and result.message:
            self._renderer.error(result.message)
        return result

    @staticmethod
    def _result_for(error: FileManagerError) -> CommandResult:
        if isinstance(error, NavigationError):
            return CommandResult.navigation_error(str(error))
        if isinstance(error, ReadError):
            return CommandResult.read_error(str(error))
        return CommandResult.write_error(str(error))
