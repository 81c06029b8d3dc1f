"""
Directory listing entry entity.
"""

import locale
from dataclasses import dataclass
from enum import Enum


class EntryKind(Enum):
    """Type column of a listing entry."""

    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class DirectoryEntry:
    """Immediate child of a directory, as shown by ``ls``."""

    name: str
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def get_details(self) -> dict[str, str]:
        return {"name": self.name, "type": self.kind.value}


def sort_entries(entries: list[DirectoryEntry]) -> list[DirectoryEntry]:
    """
    Order entries for display.

    Directories come first, then files; each group is sorted by the
    current locale's collation of the name.

    Args:
        entries: Entries in any order

    Returns:
        A new, sorted list
    """
    directories = [e for e in entries if e.is_dir]
    files = [e for e in entries if not e.is_dir]
    directories.sort(key=lambda e: locale.strxfrm(e.name))
    files.sort(key=lambda e: locale.strxfrm(e.name))
    return directories + files
