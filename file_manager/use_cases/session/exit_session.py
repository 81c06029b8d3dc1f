"""
Use case for ending the session (``.exit``).
"""

from typing_extensions import override

from file_manager.entities.session import CommandResult, Session
from file_manager.ports.commands.command_handler_port import CommandHandlerPort


class ExitSessionUseCase(CommandHandlerPort):
    """Ask the session loop to say goodbye and stop."""

    @override
    def execute(self, session: Session, arguments: list[str]) -> CommandResult:
        return CommandResult.exit()
