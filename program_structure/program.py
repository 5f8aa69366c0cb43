"""Top-level program structure: pragmas, definitions and the whole syntax tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Union

from .ast_reports import produce_report
from .error_code import ReportCode
from .error_definition import Report
from .expressions import Expression
from .nodes import Meta
from .statements import Statement

Version = tuple[int, int, int]
MainComponent = tuple[list[str], Expression]


@dataclass
class VersionPragma:
    """``pragma circom X.Y.Z;``"""

    meta: Meta
    file_id: int
    version: Version


@dataclass
class CustomGatesPragma:
    """``pragma custom_templates;``"""

    meta: Meta
    file_id: int


@dataclass
class UnrecognizedPragma:
    """A pragma that was already reported by the parser and is ignored here."""


Pragma = Union[VersionPragma, CustomGatesPragma, UnrecognizedPragma]


@dataclass
class Definition:
    """Base of callable definitions: templates and functions."""

    meta: Meta
    name: str
    args: list[str]
    arg_location: range
    body: Statement


@dataclass
class Template(Definition):
    parallel: bool = False
    is_custom_gate: bool = False


@dataclass
class Function(Definition):
    pass


@dataclass
class AST:
    """A parsed source file."""

    meta: Meta
    compiler_version: Version | None
    custom_gates: bool
    custom_gates_declared: bool
    includes: list[str] = field(default_factory=list)
    definitions: list[Definition] = field(default_factory=list)
    main_component: MainComponent | None = None


def build_ast(
    meta: Meta,
    pragmas: Sequence[Pragma],
    includes: Sequence[str],
    definitions: Sequence[Definition],
    main_component: MainComponent | None,
) -> tuple[AST, list[Report]]:
    """Assemble a syntax tree; repeated pragmas are returned as reports."""
    compiler_version: Version | None = None
    custom_gates: bool | None = None
    reports: list[Report] = []
    for pragma in pragmas:
        if isinstance(pragma, VersionPragma):
            if compiler_version is not None:
                reports.append(
                    produce_report(
                        ReportCode.MULTIPLE_PRAGMA,
                        range(pragma.meta.start, pragma.meta.end),
                        pragma.file_id,
                    )
                )
            else:
                compiler_version = tuple(pragma.version)  # type: ignore[assignment]
        elif isinstance(pragma, CustomGatesPragma):
            if custom_gates is not None:
                reports.append(
                    produce_report(
                        ReportCode.MULTIPLE_PRAGMA,
                        range(pragma.meta.start, pragma.meta.end),
                        pragma.file_id,
                    )
                )
            else:
                custom_gates = True
    definitions = list(definitions)
    custom_gates_declared = any(
        isinstance(d, Template) and d.is_custom_gate for d in definitions
    )
    ast = AST(
        meta=meta,
        compiler_version=compiler_version,
        custom_gates=bool(custom_gates),
        custom_gates_declared=custom_gates_declared,
        includes=list(includes),
        definitions=definitions,
        main_component=main_component,
    )
    return ast, reports


def build_template(
    meta: Meta,
    name: str,
    args: Sequence[str],
    arg_location: range,
    body: Statement,
    parallel: bool,
    is_custom_gate: bool,
) -> Template:
    return Template(meta, name, list(args), arg_location, body, parallel, is_custom_gate)


def build_function(
    meta: Meta, name: str, args: Sequence[str], arg_location: range, body: Statement
) -> Function:
    return Function(meta, name, list(args), arg_location, body)


def build_main_component(public: Sequence[str], call: Expression) -> MainComponent:
    """Pair the public input names with the main template call."""
    return (list(public), call)