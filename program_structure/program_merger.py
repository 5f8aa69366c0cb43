"""Collects the definitions of several files into one table of callables."""

from __future__ import annotations

from typing import Iterable

from .error_code import ReportCode
from .error_definition import Report
from .function_data import FunctionData
from .program import Definition, Template
from .template_data import TemplateData


class Merger:
    """Registers templates and functions, numbering their nodes as it goes."""

    def __init__(self) -> None:
        self.fresh_id = 0
        self.functions: dict[str, FunctionData] = {}
        self.templates: dict[str, TemplateData] = {}

    def add_definitions(
        self, file_id: int, definitions: Iterable[Definition]
    ) -> list[Report]:
        """Register the definitions of one file.

        Returns a report for every name already in use; such definitions
        are dropped.
        """
        reports: list[Report] = []
        for definition in definitions:
            name = definition.name
            if self.contains_function(name) or self.contains_template(name):
                report = Report.error(
                    "Duplicated callable symbol", ReportCode.SAME_SYMBOL_DECLARED_TWICE
                )
                report.add_primary(
                    definition.meta.file_location(), file_id, f"{name} is already in use"
                )
                reports.append(report)
            elif isinstance(definition, Template):
                data, self.fresh_id = TemplateData.create(
                    name,
                    file_id,
                    definition.body,
                    definition.args,
                    definition.arg_location,
                    self.fresh_id,
                    definition.parallel,
                    definition.is_custom_gate,
                )
                self.templates[name] = data
            else:
                fdata, self.fresh_id = FunctionData.create(
                    name,
                    file_id,
                    definition.body,
                    definition.args,
                    definition.arg_location,
                    self.fresh_id,
                )
                self.functions[name] = fdata
        return reports

    def contains_function(self, name: str) -> bool:
        return name in self.functions

    def contains_template(self, name: str) -> bool:
        return name in self.templates

    def decompose(
        self,
    ) -> tuple[int, dict[str, FunctionData], dict[str, TemplateData]]:
        """Return the next free element id, the functions and the templates."""
        return self.fresh_id, self.functions, self.templates