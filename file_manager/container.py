"""
Dependency injection container for managing application dependencies.
"""

import logging

from file_manager.adapters.console.rich_renderer import RichConsoleRenderer
from file_manager.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_manager.config.settings import Settings, settings as default_settings
from file_manager.entities.command import CommandKind
from file_manager.entities.path_cursor import PathCursor
from file_manager.entities.session import Session
from file_manager.ports.commands.command_handler_port import CommandHandlerPort
from file_manager.ports.console.renderer_port import RendererPort
from file_manager.ports.files.file_system_port import FileSystemPort
from file_manager.use_cases.dispatcher import CommandDispatcher
from file_manager.use_cases.files.copy_file import CopyFileUseCase
from file_manager.use_cases.files.create_file import CreateFileUseCase
from file_manager.use_cases.files.list_directory import ListDirectoryUseCase
from file_manager.use_cases.files.move_file import MoveFileUseCase
from file_manager.use_cases.files.read_file import ReadFileUseCase
from file_manager.use_cases.files.rename_file import RenameFileUseCase
from file_manager.use_cases.navigation.change_directory import ChangeDirectoryUseCase
from file_manager.use_cases.navigation.go_up import GoUpUseCase
from file_manager.use_cases.session.exit_session import ExitSessionUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, settings: Settings | None = None):
        self._settings = settings or default_settings
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    @property
    def settings(self) -> Settings:
        return self._settings

    def get_file_system(self) -> FileSystemPort:
        """
        Get file system adapter instance.

        Returns:
            FileSystemPort implementation
        """
        if "file_system" not in self._instances:
            self._instances["file_system"] = LocalFileSystemAdapter(
                self._logger, chunk_size=self._settings.chunk_size
            )
        return self._instances["file_system"]

    def get_renderer(self) -> RendererPort:
        """
        Get console renderer instance.

        Returns:
            RendererPort implementation
        """
        if "renderer" not in self._instances:
            self._instances["renderer"] = RichConsoleRenderer()
        return self._instances["renderer"]

    def get_handlers(self) -> dict[CommandKind, CommandHandlerPort]:
        """
        Get one handler per command, with injected dependencies.

        Returns:
            Mapping from CommandKind to its handler
        """
        if "handlers" not in self._instances:
            fs = self.get_file_system()
            renderer = self.get_renderer()
            self._instances["handlers"] = {
                CommandKind.EXIT: ExitSessionUseCase(),
                CommandKind.UP: GoUpUseCase(self._logger),
                CommandKind.CD: ChangeDirectoryUseCase(fs, self._logger),
                CommandKind.LS: ListDirectoryUseCase(fs, renderer, self._logger),
                CommandKind.CAT: ReadFileUseCase(fs, renderer, self._logger),
                CommandKind.ADD: CreateFileUseCase(fs, self._logger),
                CommandKind.RN: RenameFileUseCase(fs, self._logger),
                CommandKind.CP: CopyFileUseCase(fs, self._logger),
                CommandKind.MV: MoveFileUseCase(fs, self._logger),
            }
        return self._instances["handlers"]

    def get_dispatcher(self) -> CommandDispatcher:
        """
        Get the command dispatcher.

        Returns:
            Configured CommandDispatcher
        """
        if "dispatcher" not in self._instances:
            self._instances["dispatcher"] = CommandDispatcher(
                self.get_handlers(), self.get_renderer(), self._logger
            )
        return self._instances["dispatcher"]

    def create_session(self, username: str) -> Session:
        """Start a new session with the cursor at the configured home directory."""
        cursor = PathCursor.from_directory(self._settings.home_directory)
        return Session(cursor=cursor, username=username)

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
