"""Reports produced while building and loading syntax trees."""

from __future__ import annotations

from typing import Sequence

from .error_code import ReportCode
from .error_definition import Report
from .nodes import Meta


def _version_text(version: Sequence[int]) -> str:
    return str(tuple(version))


def produce_report(error_code: ReportCode, location: range, file_id: int) -> Report:
    """Build the parse report for ``error_code`` at ``location``."""
    code = ReportCode
    labelled = {
        code.UNCLOSED_COMMENT: ("unterminated /* */", "Comment starts here"),
        code.MISSING_SEMICOLON: ("Missing semicolon", "A semicolon is needed here"),
        code.UNRECOGNIZED_INCLUDE: (
            "unrecognized argument in include directive",
            "this argument",
        ),
        code.UNRECOGNIZED_PRAGMA: (
            "unrecognized argument in pragma directive",
            "this argument",
        ),
        code.UNRECOGNIZED_VERSION: (
            "unrecognized version argument in pragma directive",
            "this argument",
        ),
        code.ILLEGAL_EXPRESSION: ("illegal expression", "here"),
        code.MULTIPLE_PRAGMA: ("Multiple pragma directives", "here"),
        code.EXPECTED_IDENTIFIER: (
            "An identifier is expected",
            "This should be an identifier",
        ),
    }
    if error_code in labelled:
        message, label = labelled[error_code]
        return Report.error(message, error_code).add_primary(location, file_id, label)
    if error_code is code.NO_MAIN_FOUND_IN_PROJECT:
        return Report.error("No main specified in the project structure", error_code)
    if error_code is code.MULTIPLE_MAIN:
        return Report.error(
            "Multiple main components in the project structure", error_code
        )
    raise ValueError(f"no parse report for code {error_code.name}")


def produce_version_warning_report(path: str, version: Sequence[int]) -> Report:
    report = Report.warning(
        f"File {path} does not include pragma version. "
        f"Assuming pragma version {_version_text(version)}",
        ReportCode.NO_COMPILER_VERSION_WARNING,
    )
    report.add_note(
        f"At the beginning of file {path}, you should add the directive "
        f'"pragma circom <Version>", to indicate which compiler version you are using.'
    )
    return report


def produce_report_with_message(error_code: ReportCode, msg: str) -> Report:
    if error_code is ReportCode.FILE_OS:
        return Report.error(f"Could not open file {msg}", error_code)
    if error_code is ReportCode.INCLUDE_NOT_FOUND:
        report = Report.error(
            f" The file {msg} to be included has not been found", error_code
        )
        report.add_note(
            "Consider using compilation option -l to indicate include paths"
        )
        return report
    raise ValueError(f"no message report for code {error_code.name}")


def produce_compiler_version_report(
    path: str, required_version: Sequence[int], version: Sequence[int]
) -> Report:
    return Report.error(
        f"File {path} requires pragma version {_version_text(required_version)} "
        f"that is not supported by the compiler (version {_version_text(version)})",
        ReportCode.COMPILER_VERSION_ERROR,
    )


def anonymous_inside_condition_error(meta: Meta) -> Report:
    report = Report.error(
        "An anonymous component cannot be used inside a condition ",
        ReportCode.ANONYMOUS_COMP_ERROR,
    )
    report.add_primary(
        meta.location,
        meta.require_file_id(),
        "This is an anonymous component used inside a condition",
    )
    return report


def anonymous_general_error(meta: Meta, msg: str) -> Report:
    report = Report.error(msg, ReportCode.ANONYMOUS_COMP_ERROR)
    report.add_primary(
        meta.location,
        meta.require_file_id(),
        "This is the anonymous component whose use is not allowed",
    )
    return report


def tuple_general_error(meta: Meta, msg: str) -> Report:
    report = Report.error(msg, ReportCode.TUPLE_ERROR)
    report.add_primary(
        meta.location,
        meta.require_file_id(),
        "This is the tuple whose use is not allowed",
    )
    return report