"""A function definition registered in a program."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .statements import Block, Statement


@dataclass
class FunctionData:
    """A function with its numbered body."""

    name: str
    file_id: int
    body: Statement
    name_of_params: list[str]
    param_location: range

    @classmethod
    def create(
        cls,
        name: str,
        file_id: int,
        body: Statement,
        name_of_params: Sequence[str],
        param_location: range,
        next_id: int,
    ) -> tuple["FunctionData", int]:
        """Number the body from ``next_id``; return the data and the next free id."""
        next_id = body.fill(file_id, next_id)
        return cls(name, file_id, body, list(name_of_params), param_location), next_id

    @property
    def num_of_params(self) -> int:
        return len(self.name_of_params)

    def body_statements(self) -> list[Statement]:
        """The statements of the body, which must be a block."""
        if not isinstance(self.body, Block):
            raise ValueError("function body should be a block")
        return self.body.stmts

    def replace_body(self, new: Statement) -> Statement:
        """Install ``new`` as the body and return the previous one."""
        old, self.body = self.body, new
        return old