"""Expression nodes of the syntax tree and the functions that build them."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Iterator, Sequence, Union

from .nodes import AssignOp, ExpressionInfixOpcode, ExpressionPrefixOpcode, Meta


@dataclass
class ComponentAccess:
    """Access to a named field of a component: ``c.name``."""

    name: str


@dataclass
class ArrayAccess:
    """Access to an array position: ``a[expr]``."""

    expr: "Expression"


Access = Union[ComponentAccess, ArrayAccess]


@dataclass
class Expression:
    """Base of every expression node."""

    meta: Meta

    def _children(self) -> Iterator["Expression"]:
        """Sub-expressions in the order they are numbered by :meth:`fill`."""
        return iter(())

    def is_array(self) -> bool:
        return isinstance(self, (ArrayInLine, UniformArray))

    def is_infix(self) -> bool:
        return isinstance(self, InfixOp)

    def is_prefix(self) -> bool:
        return isinstance(self, PrefixOp)

    def is_tuple(self) -> bool:
        return isinstance(self, Tuple)

    def is_switch(self) -> bool:
        return isinstance(self, InlineSwitchOp)

    def is_parallel(self) -> bool:
        return isinstance(self, ParallelOp)

    def is_variable(self) -> bool:
        return isinstance(self, Variable)

    def is_number(self) -> bool:
        return isinstance(self, Number)

    def is_call(self) -> bool:
        return isinstance(self, Call)

    def is_anonymous_comp(self) -> bool:
        return isinstance(self, AnonymousComp)

    def make_anonymous_parallel(self) -> "Expression":
        """Return a parallel copy of an anonymous component; other nodes unchanged."""
        return self

    def contains_anonymous_comp(self) -> bool:
        return any(child.contains_anonymous_comp() for child in self._children())

    def contains_tuple(self) -> bool:
        return any(child.contains_tuple() for child in self._children())

    def fill(self, file_id: int, next_id: int) -> int:
        """Number this node and its sub-expressions from ``next_id`` and set
        their file id; return the next unused element id."""
        self.meta.elem_id = next_id
        next_id += 1
        self.meta.file_id = file_id
        for child in self._children():
            next_id = child.fill(file_id, next_id)
        return next_id


@dataclass
class InfixOp(Expression):
    lhe: Expression
    infix_op: ExpressionInfixOpcode
    rhe: Expression

    def _children(self) -> Iterator[Expression]:
        yield self.lhe
        yield self.rhe


@dataclass
class PrefixOp(Expression):
    prefix_op: ExpressionPrefixOpcode
    rhe: Expression

    def _children(self) -> Iterator[Expression]:
        yield self.rhe


@dataclass
class InlineSwitchOp(Expression):
    cond: Expression
    if_true: Expression
    if_false: Expression

    def _children(self) -> Iterator[Expression]:
        yield self.cond
        yield self.if_true
        yield self.if_false


@dataclass
class ParallelOp(Expression):
    rhe: Expression

    def _children(self) -> Iterator[Expression]:
        yield self.rhe


@dataclass
class Variable(Expression):
    name: str
    access: list[Access]

    def _children(self) -> Iterator[Expression]:
        for acc in self.access:
            if isinstance(acc, ArrayAccess):
                yield acc.expr


@dataclass
class Number(Expression):
    value: int


@dataclass
class Call(Expression):
    name: str
    args: list[Expression]

    def _children(self) -> Iterator[Expression]:
        yield from self.args


@dataclass
class AnonymousComp(Expression):
    name: str
    parallel: bool
    params: list[Expression]
    signals: list[Expression]
    names: list[tuple[AssignOp, str]] | None

    def _children(self) -> Iterator[Expression]:
        yield from self.params
        yield from self.signals

    def make_anonymous_parallel(self) -> Expression:
        return dataclasses.replace(self, parallel=True)

    def contains_anonymous_comp(self) -> bool:
        return True


@dataclass
class ArrayInLine(Expression):
    values: list[Expression]

    def _children(self) -> Iterator[Expression]:
        yield from self.values


@dataclass
class Tuple(Expression):
    values: list[Expression]

    def _children(self) -> Iterator[Expression]:
        yield from self.values

    def contains_tuple(self) -> bool:
        return True


@dataclass
class UniformArray(Expression):
    value: Expression
    dimension: Expression

    def _children(self) -> Iterator[Expression]:
        yield self.value
        yield self.dimension


def build_infix(
    meta: Meta, lhe: Expression, infix_op: ExpressionInfixOpcode, rhe: Expression
) -> InfixOp:
    return InfixOp(meta, lhe, infix_op, rhe)


def build_prefix(
    meta: Meta, prefix_op: ExpressionPrefixOpcode, rhe: Expression
) -> PrefixOp:
    return PrefixOp(meta, prefix_op, rhe)


def build_inline_switch_op(
    meta: Meta, cond: Expression, if_true: Expression, if_false: Expression
) -> InlineSwitchOp:
    return InlineSwitchOp(meta, cond, if_true, if_false)


def build_parallel_op(meta: Meta, rhe: Expression) -> ParallelOp:
    return ParallelOp(meta, rhe)


def build_variable(meta: Meta, name: str, access: Sequence[Access]) -> Variable:
    return Variable(meta, name, list(access))


def build_number(meta: Meta, value: int) -> Number:
    return Number(meta, value)


def build_call(meta: Meta, name: str, args: Sequence[Expression]) -> Call:
    return Call(meta, name, list(args))


def build_anonymous_component(
    meta: Meta,
    name: str,
    params: Sequence[Expression],
    signals: Sequence[Expression],
    names: Sequence[tuple[AssignOp, str]] | None,
    is_parallel: bool,
) -> AnonymousComp:
    return AnonymousComp(
        meta,
        name,
        is_parallel,
        list(params),
        list(signals),
        None if names is None else list(names),
    )


def build_array_in_line(meta: Meta, values: Sequence[Expression]) -> ArrayInLine:
    return ArrayInLine(meta, list(values))


def build_tuple(meta: Meta, values: Sequence[Expression]) -> Tuple:
    return Tuple(meta, list(values))


def build_uniform_array(
    meta: Meta, value: Expression, dimension: Expression
) -> UniformArray:
    return UniformArray(meta, value, dimension)


def build_component_access(name: str) -> ComponentAccess:
    return ComponentAccess(name)


def build_array_access(expr: Expression) -> ArrayAccess:
    return ArrayAccess(expr)


def unzip_3(
    items: Sequence[tuple[str, AssignOp, Expression]],
) -> tuple[list[tuple[AssignOp, str]], list[Expression]]:
    """Split ``(name, op, expr)`` triples into ``(op, name)`` pairs and expressions."""
    op_names = [(op, name) for name, op, _ in items]
    exprs = [expr for _, _, expr in items]
    return op_names, exprs