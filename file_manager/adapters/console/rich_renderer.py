"""
Console renderer built on rich.
"""

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text
from typing_extensions import override

from file_manager.entities.directory_entry import DirectoryEntry
from file_manager.ports.console.renderer_port import RendererPort


class RichConsoleRenderer(RendererPort):
    """Render shell output on a rich Console (stdout by default)."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(highlight=False, soft_wrap=True)
        self._open_line = False

    @property
    def console(self) -> Console:
        return self._console

    def _line(self, text: str) -> None:
        # User-supplied names may contain '[...]', so never parse markup.
        self._console.print(text, markup=False, highlight=False)

    @override
    def welcome(self, username: str) -> None:
        self._line(f"Welcome to the File Manager, {username}!")

    @override
    def farewell(self, username: str) -> None:
        self._line(f"Thank you for using File Manager, {username}, goodbye!")

    @override
    def current_directory(self, path: str) -> None:
        self._line(f"You are currently in {path}")

    @override
    def directory_table(self, entries: list[DirectoryEntry]) -> None:
        tbl = Table(box=box.MINIMAL_DOUBLE_HEAD)
        tbl.add_column("Name", style="cyan", overflow="fold")
        tbl.add_column("Type", no_wrap=True, min_width=len("directory"))
        for entry in entries:
            details = entry.get_details()
            tbl.add_row(Text(details["name"]), details["type"])
        self._console.print(tbl)

    @override
    def error(self, message: str) -> None:
        self._line(message)
        self._console.print()

    @override
    def write_text(self, text: str) -> None:
        if not text:
            return
        # Bypass rich rendering so tabs and control characters stay as they are.
        self._console.file.write(text)
        self._console.file.flush()
        self._open_line = not text.endswith("\n")

    @override
    def end_text(self) -> None:
        if self._open_line:
            self._console.file.write("\n")
            self._console.file.flush()
        self._open_line = False
