"""
Port for command handlers invoked by the dispatcher.
"""

from abc import ABC, abstractmethod

from file_manager.entities.session import CommandResult, Session


class CommandHandlerPort(ABC):
    """
    Port interface for a single shell command.

    Handlers never raise for file system failures: they return a
    CommandResult describing the outcome.
    """

    @abstractmethod
    def execute(self, session: Session, arguments: list[str]) -> CommandResult:
        """
        Run the command against the session.

        Args:
            session: Current session (cursor and username)
            arguments: Positional arguments from the input line

        Returns:
            CommandResult; missing arguments give an OK no-op
        """
        pass
