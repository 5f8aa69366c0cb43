"""A whole program: all callables plus the main component."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from .error_definition import Report
from .expressions import Expression
from .file_definition import FileLibrary
from .function_data import FunctionData
from .program import Definition, MainComponent
from .program_merger import Merger
from .template_data import TemplateData


class ProgramArchiveError(Exception):
    """The program could not be assembled; carries the reports and files."""

    def __init__(self, file_library: FileLibrary, reports: list[Report]) -> None:
        super().__init__(f"{len(reports)} error(s) while building the program")
        self.file_library = file_library
        self.reports = reports


@dataclass
class ProgramArchive:
    """All templates and functions of a program with its main call."""

    id_max: int
    file_id_main: int
    file_library: FileLibrary
    functions: dict[str, FunctionData]
    templates: dict[str, TemplateData]
    public_inputs: list[str]
    initial_template_call: Expression
    custom_gates: bool

    @classmethod
    def create(
        cls,
        file_library: FileLibrary,
        file_id_main: int,
        main_component: MainComponent,
        program_contents: Iterable[tuple[int, Sequence[Definition]]],
        custom_gates: bool,
    ) -> "ProgramArchive":
        """Merge the definitions of every file; raise if any name is repeated."""
        merger = Merger()
        reports: list[Report] = []
        for file_id, definitions in program_contents:
            reports.extend(merger.add_definitions(file_id, definitions))
        fresh_id, functions, templates = merger.decompose()
        public_inputs, initial_template_call = main_component
        fresh_id = initial_template_call.fill(file_id_main, fresh_id)
        if reports:
            raise ProgramArchiveError(file_library, reports)
        return cls(
            id_max=fresh_id,
            file_id_main=file_id_main,
            file_library=file_library,
            functions=functions,
            templates=templates,
            public_inputs=list(public_inputs),
            initial_template_call=initial_template_call,
            custom_gates=custom_gates,
        )

    def contains_template(self, name: str) -> bool:
        return name in self.templates

    def get_template_data(self, name: str) -> TemplateData:
        if name not in self.templates:
            raise KeyError(name)
        return self.templates[name]

    @property
    def template_names(self) -> set[str]:
        return set(self.templates)

    def remove_template(self, name: str) -> None:
        self.templates.pop(name, None)

    def contains_function(self, name: str) -> bool:
        return name in self.functions

    def get_function_data(self, name: str) -> FunctionData:
        if name not in self.functions:
            raise KeyError(name)
        return self.functions[name]

    @property
    def function_names(self) -> set[str]:
        return set(self.functions)

    def remove_function(self, name: str) -> None:
        self.functions.pop(name, None)