"""Compiler reports: errors and warnings with labelled source spans."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO

from .error_code import ReportCode
from .file_definition import FileLibrary


class ReportError(Exception):
    """Raised when a report cannot be rendered against its files."""


class MessageCategory(Enum):
    ERROR = "error"
    WARNING = "warning"


class LabelStyle(Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"


@dataclass
class Label:
    """A marked span of a file, with an optional message."""

    style: LabelStyle
    file_id: int
    location: range
    message: str = ""


@dataclass
class Report:
    """A diagnostic message with its code, labels and notes."""

    category: MessageCategory
    message: str
    code: ReportCode
    primary: list[Label] = field(default_factory=list)
    secondary: list[Label] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)

    @classmethod
    def error(cls, message: str, code: ReportCode) -> "Report":
        return cls(MessageCategory.ERROR, message, code)

    @classmethod
    def warning(cls, message: str, code: ReportCode) -> "Report":
        return cls(MessageCategory.WARNING, message, code)

    def add_primary(self, location: range, file_id: int, message: str) -> "Report":
        self.primary.append(Label(LabelStyle.PRIMARY, file_id, location, message))
        return self

    def add_secondary(
        self, location: range, file_id: int, message: str | None = None
    ) -> "Report":
        self.secondary.append(
            Label(LabelStyle.SECONDARY, file_id, location, message or "")
        )
        return self

    def add_note(self, note: str) -> "Report":
        self.notes.append(note)
        return self

    def is_error(self) -> bool:
        return self.category is MessageCategory.ERROR

    def is_warning(self) -> bool:
        return self.category is MessageCategory.WARNING

    def diagnostic_code(self) -> str:
        return str(self.code)

    def render(self, file_library: FileLibrary) -> str:
        """Format the report as plain text, quoting the labelled source lines."""
        header = f"{self.category.value}[{self.diagnostic_code()}]: {self.message}"
        placed = [
            _place_label(file_library, label)
            for label in (*self.primary, *self.secondary)
        ]
        gutter = max((len(str(p.line_no)) for p in placed), default=0)
        pad = " " * gutter
        lines = [header]
        for p in placed:
            marker = "^" if p.label.style is LabelStyle.PRIMARY else "-"
            underline = " " * (p.column - 1) + marker * p.width
            if p.label.message:
                underline += " " + p.label.message
            lines.append(f"{pad} ┌─ {p.file_name}:{p.line_no}:{p.column}")
            lines.append(f"{pad} │")
            lines.append(f"{p.line_no:>{gutter}} │ {p.text}")
            lines.append(f"{pad} │ {underline}")
        if placed:
            lines.append(f"{pad} │")
        lines.extend(f"{pad} = {note}" for note in self.notes)
        return "\n".join(lines) + "\n"


@dataclass
class _PlacedLabel:
    label: Label
    file_name: str
    line_no: int
    column: int
    width: int
    text: str


def _place_label(file_library: FileLibrary, label: Label) -> _PlacedLabel:
    try:
        file = file_library.get_file(label.file_id)
    except KeyError:
        raise ReportError(f"no file with id {label.file_id}") from None
    data = file.data
    start, end = label.location.start, label.location.stop
    if start < 0 or end < start or end > len(data):
        raise ReportError(
            f"location {start}..{end} is outside file {file.name!r}"
        )
    index = file.line_index(start)
    line_start = file.line_starts[index]
    line_end = (
        file.line_starts[index + 1] if index + 1 < len(file.line_starts) else len(data)
    )
    line_bytes = data[line_start:line_end].rstrip(b"\r\n")
    column = len(data[line_start:start].decode("utf-8", errors="replace")) + 1
    span_end = min(end, line_start + len(line_bytes))
    width = len(data[start:span_end].decode("utf-8", errors="replace")) if span_end > start else 0
    return _PlacedLabel(
        label=label,
        file_name=file.name,
        line_no=index + 1,
        column=column,
        width=max(1, width),
        text=line_bytes.decode("utf-8", errors="replace"),
    )


def print_reports(
    reports: list[Report], file_library: FileLibrary, stream: TextIO | None = None
) -> None:
    """Write every report to ``stream`` (standard error by default)."""
    out = sys.stderr if stream is None else stream
    for report in reports:
        out.write(report.render(file_library))