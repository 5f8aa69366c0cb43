"""A template definition registered in a program, with its interface signals."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .nodes import SignalType, VariableKind
from .statements import (
    Block,
    Declaration,
    IfThenElse,
    InitializationBlock,
    Statement,
    While,
)

SignalInfo = dict[str, tuple[int, set[str]]]


@dataclass
class TemplateData:
    """A template with its numbered body and declared inputs and outputs.

    ``input_signals`` and ``output_signals`` map each name to its number of
    dimensions and tags, ordered by name; the declaration lists keep the
    order in which the signals appear.
    """

    name: str
    file_id: int
    body: Statement
    name_of_params: list[str]
    param_location: range
    input_signals: SignalInfo = field(default_factory=dict)
    output_signals: SignalInfo = field(default_factory=dict)
    is_parallel: bool = False
    is_custom_gate: bool = False
    input_declarations: list[tuple[str, int]] = field(default_factory=list)
    output_declarations: list[tuple[str, int]] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        name: str,
        file_id: int,
        body: Statement,
        name_of_params: Sequence[str],
        param_location: range,
        next_id: int,
        is_parallel: bool,
        is_custom_gate: bool,
    ) -> tuple["TemplateData", int]:
        """Number the body from ``next_id`` and collect its signals.

        Returns the data and the next free element id.
        """
        next_id = body.fill(file_id, next_id)
        inputs: SignalInfo = {}
        outputs: SignalInfo = {}
        input_order: list[tuple[str, int]] = []
        output_order: list[tuple[str, int]] = []
        for decl in _signal_declarations(body):
            dims = len(decl.dimensions)
            entry = (dims, set(decl.xtype.tags))
            if decl.xtype.signal_type is SignalType.INPUT:
                inputs[decl.name] = entry
                input_order.append((decl.name, dims))
            elif decl.xtype.signal_type is SignalType.OUTPUT:
                outputs[decl.name] = entry
                output_order.append((decl.name, dims))
        data = cls(
            name=name,
            file_id=file_id,
            body=body,
            name_of_params=list(name_of_params),
            param_location=param_location,
            input_signals=dict(sorted(inputs.items())),
            output_signals=dict(sorted(outputs.items())),
            is_parallel=is_parallel,
            is_custom_gate=is_custom_gate,
            input_declarations=input_order,
            output_declarations=output_order,
        )
        return data, next_id

    @property
    def num_of_params(self) -> int:
        return len(self.name_of_params)

    def body_statements(self) -> list[Statement]:
        """The statements of the body, which must be a block."""
        if not isinstance(self.body, Block):
            raise ValueError("template body should be a block")
        return self.body.stmts

    def get_input_info(self, name: str) -> tuple[int, set[str]] | None:
        return self.input_signals.get(name)

    def get_output_info(self, name: str) -> tuple[int, set[str]] | None:
        return self.output_signals.get(name)


def _signal_declarations(stmt: Statement):
    """Yield the signal declarations reachable through the control structure."""
    if isinstance(stmt, IfThenElse):
        yield from _signal_declarations(stmt.if_case)
        if stmt.else_case is not None:
            yield from _signal_declarations(stmt.else_case)
    elif isinstance(stmt, Block):
        for inner in stmt.stmts:
            yield from _signal_declarations(inner)
    elif isinstance(stmt, While):
        yield from _signal_declarations(stmt.stmt)
    elif isinstance(stmt, InitializationBlock):
        for inner in stmt.initializations:
            yield from _signal_declarations(inner)
    elif isinstance(stmt, Declaration) and stmt.xtype.kind is VariableKind.SIGNAL:
        yield stmt