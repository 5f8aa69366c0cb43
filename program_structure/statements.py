"""Statement nodes of the syntax tree and the functions that build them."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Iterator, Sequence, Union

from .expressions import Access, ArrayAccess, Expression, build_tuple
from .nodes import AssignOp, Meta, VariableType

_LOG_CHUNK = 230


@dataclass
class LogStr:
    """A literal piece of text passed to ``log``."""

    text: str


@dataclass
class LogExp:
    """An expression passed to ``log``."""

    expr: Expression


LogArgument = Union[LogStr, LogExp]
_Node = Union[Expression, "Statement"]


@dataclass
class Statement:
    """Base of every statement node."""

    meta: Meta

    def _children(self) -> Iterator[_Node]:
        """Sub-nodes in the order they are numbered by :meth:`fill`."""
        return iter(())

    def is_if_then_else(self) -> bool:
        return isinstance(self, IfThenElse)

    def is_while(self) -> bool:
        return isinstance(self, While)

    def is_return(self) -> bool:
        return isinstance(self, Return)

    def is_initialization_block(self) -> bool:
        return isinstance(self, InitializationBlock)

    def is_declaration(self) -> bool:
        return isinstance(self, Declaration)

    def is_substitution(self) -> bool:
        return isinstance(self, Substitution)

    def is_underscore_substitution(self) -> bool:
        return isinstance(self, UnderscoreSubstitution)

    def is_constraint_equality(self) -> bool:
        return isinstance(self, ConstraintEquality)

    def is_log_call(self) -> bool:
        return isinstance(self, LogCall)

    def is_block(self) -> bool:
        return isinstance(self, Block)

    def is_assert(self) -> bool:
        return isinstance(self, Assert)

    def contains_anonymous_comp(self) -> bool:
        return any(child.contains_anonymous_comp() for child in self._children())

    def fill(self, file_id: int, next_id: int) -> int:
        """Number this statement and everything under it from ``next_id``,
        set their file id, and return the next unused element id."""
        self.meta.elem_id = next_id
        next_id += 1
        self.meta.file_id = file_id
        for child in self._children():
            next_id = child.fill(file_id, next_id)
        return next_id


def _access_exprs(access: Sequence[Access]) -> Iterator[Expression]:
    for acc in access:
        if isinstance(acc, ArrayAccess):
            yield acc.expr


@dataclass
class IfThenElse(Statement):
    cond: Expression
    if_case: Statement
    else_case: Statement | None = None

    def _children(self) -> Iterator[_Node]:
        yield self.cond
        yield self.if_case
        if self.else_case is not None:
            yield self.else_case


@dataclass
class While(Statement):
    cond: Expression
    stmt: Statement

    def _children(self) -> Iterator[_Node]:
        yield self.cond
        yield self.stmt


@dataclass
class Return(Statement):
    value: Expression

    def _children(self) -> Iterator[_Node]:
        yield self.value


@dataclass
class InitializationBlock(Statement):
    xtype: VariableType
    initializations: list[Statement]

    def _children(self) -> Iterator[_Node]:
        yield from self.initializations


@dataclass
class Declaration(Statement):
    xtype: VariableType
    name: str
    dimensions: list[Expression]
    is_constant: bool = True

    def _children(self) -> Iterator[_Node]:
        yield from self.dimensions


@dataclass
class Substitution(Statement):
    var: str
    access: list[Access]
    op: AssignOp
    rhe: Expression

    def _children(self) -> Iterator[_Node]:
        yield self.rhe
        yield from _access_exprs(self.access)


@dataclass
class MultSubstitution(Statement):
    lhe: Expression
    op: AssignOp
    rhe: Expression

    def _children(self) -> Iterator[_Node]:
        yield self.rhe
        yield self.lhe


@dataclass
class UnderscoreSubstitution(Statement):
    op: AssignOp
    rhe: Expression

    def _children(self) -> Iterator[_Node]:
        yield self.rhe


@dataclass
class ConstraintEquality(Statement):
    lhe: Expression
    rhe: Expression

    def _children(self) -> Iterator[_Node]:
        yield self.lhe
        yield self.rhe


@dataclass
class LogCall(Statement):
    args: list[LogArgument]

    def _children(self) -> Iterator[_Node]:
        for arg in self.args:
            if isinstance(arg, LogExp):
                yield arg.expr


@dataclass
class Block(Statement):
    stmts: list[Statement]

    def _children(self) -> Iterator[_Node]:
        yield from self.stmts


@dataclass
class Assert(Statement):
    arg: Expression

    def _children(self) -> Iterator[_Node]:
        yield self.arg


def build_log_string(text: str) -> LogStr:
    return LogStr(text)


def build_log_expression(expr: Expression) -> LogExp:
    return LogExp(expr)


def build_conditional_block(
    meta: Meta, cond: Expression, if_case: Statement, else_case: Statement | None
) -> IfThenElse:
    return IfThenElse(meta, cond, if_case, else_case)


def build_while_block(meta: Meta, cond: Expression, stmt: Statement) -> While:
    return While(meta, cond, stmt)


def build_initialization_block(
    meta: Meta, xtype: VariableType, initializations: Sequence[Statement]
) -> InitializationBlock:
    return InitializationBlock(meta, xtype, list(initializations))


def build_block(meta: Meta, stmts: Sequence[Statement]) -> Block:
    return Block(meta, list(stmts))


def build_return(meta: Meta, value: Expression) -> Return:
    return Return(meta, value)


def build_declaration(
    meta: Meta, xtype: VariableType, name: str, dimensions: Sequence[Expression]
) -> Declaration:
    return Declaration(meta, xtype, name, list(dimensions), is_constant=True)


def build_substitution(
    meta: Meta, var: str, access: Sequence[Access], op: AssignOp, rhe: Expression
) -> Substitution:
    return Substitution(meta, var, list(access), op, rhe)


def build_constraint_equality(
    meta: Meta, lhe: Expression, rhe: Expression
) -> ConstraintEquality:
    return ConstraintEquality(meta, lhe, rhe)


def _split_string(text: str) -> list[LogStr]:
    return [
        LogStr(text[start:start + _LOG_CHUNK])
        for start in range(0, len(text), _LOG_CHUNK)
    ]


def build_log_call(meta: Meta, args: Sequence[LogArgument]) -> LogCall:
    """Build a log call, cutting long strings into pieces of bounded length."""
    new_args: list[LogArgument] = []
    for arg in args:
        if isinstance(arg, LogStr):
            new_args.extend(_split_string(arg.text))
        else:
            new_args.append(arg)
    return LogCall(meta, new_args)


def build_assert(meta: Meta, arg: Expression) -> Assert:
    return Assert(meta, arg)


def build_mult_substitution(
    meta: Meta, lhe: Expression, op: AssignOp, rhe: Expression
) -> MultSubstitution:
    return MultSubstitution(meta, lhe, op, rhe)


def build_anonymous_component_statement(meta: Meta, arg: Expression) -> MultSubstitution:
    """An anonymous component used as a statement: ``() <== arg``."""
    return MultSubstitution(
        meta,
        build_tuple(copy.deepcopy(meta), []),
        AssignOp.ASSIGN_CONSTRAINT_SIGNAL,
        arg,
    )