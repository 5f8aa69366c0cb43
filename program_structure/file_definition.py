"""Storage of source files and mapping of byte offsets to lines."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field


@dataclass
class SimpleFile:
    """A named source file with precomputed line start offsets (in bytes)."""

    name: str
    source: str
    data: bytes = field(init=False, repr=False)
    line_starts: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.data = self.source.encode("utf-8")
        self.line_starts = [0]
        self.line_starts.extend(
            pos + 1 for pos, byte in enumerate(self.data) if byte == 0x0A
        )

    def line_index(self, byte_index: int) -> int:
        """Return the zero-based line holding ``byte_index``."""
        if byte_index < 0:
            raise ValueError(f"negative byte index {byte_index}")
        return bisect_right(self.line_starts, byte_index) - 1


class FileLibrary:
    """A collection of source files addressed by integer ids."""

    def __init__(self) -> None:
        self._files: list[SimpleFile] = []

    def add_file(self, file_name: str, file_source: str) -> int:
        """Store a file and return its id."""
        self._files.append(SimpleFile(file_name, file_source))
        return len(self._files) - 1

    def get_file(self, file_id: int) -> SimpleFile:
        """Return the file with ``file_id``; raise ``KeyError`` if absent."""
        if not 0 <= file_id < len(self._files):
            raise KeyError(file_id)
        return self._files[file_id]

    def get_line(self, start: int, file_id: int) -> int | None:
        """Return the one-based line of byte ``start``, or None for an unknown file."""
        try:
            file = self.get_file(file_id)
        except KeyError:
            return None
        return file.line_index(start) + 1


def generate_file_location(start: int, end: int) -> range:
    """Return the byte span ``start..end``."""
    return range(start, end)