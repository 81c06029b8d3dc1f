"""
Path cursor domain entity.
"""

import os
from pathlib import Path


class PathCursor:
    """
    Stack of path segments describing where the user currently is.

    The first segment(s) come from the home directory; the cursor never
    drops below a single segment.
    """

    def __init__(self, segments: list[str]):
        """
        Initialize the cursor.

        Args:
            segments: Root-to-leaf path components, at least one

        Raises:
            ValueError: If no segment is given
        """
        if not segments:
            raise ValueError("A path cursor needs at least one segment")
        self._segments: list[str] = list(segments)

    @classmethod
    def from_directory(cls, directory: str) -> "PathCursor":
        """
        Build a cursor from an absolute directory path.

        Args:
            directory: Directory the cursor starts in (usually the home directory)

        Returns:
            A PathCursor whose segments are the path's components
        """
        return cls(list(Path(directory).parts) or [directory])

    @property
    def segments(self) -> list[str]:
        return list(self._segments)

    @property
    def depth(self) -> int:
        return len(self._segments)

    @staticmethod
    def _relative(name: str) -> str:
        # Leading separators would make os.path.join drop the cursor.
        return name.lstrip(os.sep + (os.altsep or ""))

    def push(self, segment: str) -> None:
        """Append a segment. Callers validate the target before pushing."""
        segment = self._relative(segment)
        if segment:
            self._segments.append(segment)

    def pop(self) -> None:
        """Drop the last segment; a no-op when only the root is left."""
        if len(self._segments) > 1:
            self._segments.pop()

    def resolve(self, name: str) -> str:
        """Return the path of ``name`` under the cursor, even when ``name`` is absolute."""
        return os.path.join(*self._segments, self._relative(name))

    def render(self) -> str:
        return os.path.join(*self._segments)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"PathCursor(segments={self._segments!r})"
