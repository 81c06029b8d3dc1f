"""
Use case for moving the cursor one level up (``up``).
"""

import logging
from typing import Optional

from typing_extensions import override

from file_manager.entities.session import CommandResult, Session
from file_manager.ports.commands.command_handler_port import CommandHandlerPort


class GoUpUseCase(CommandHandlerPort):
    """Ascend one level; stays put at the root."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    @override
    def execute(self, session: Session, arguments: list[str]) -> CommandResult:
        session.cursor.pop()
        self._logger.info(f"Moved up to: {session.cursor.render()}")
        return CommandResult.ok()
