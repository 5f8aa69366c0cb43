"""Desugaring helpers used while building the syntax tree."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Sequence

from .expressions import (
    Access,
    Expression,
    Number,
    Variable,
    build_infix,
    build_number,
    build_tuple,
    build_uniform_array,
    build_variable,
)
from .nodes import AssignOp, ExpressionInfixOpcode, Meta, VariableType
from .statements import (
    Statement,
    build_block,
    build_declaration,
    build_initialization_block,
    build_mult_substitution,
    build_substitution,
    build_while_block,
)


@dataclass
class Symbol:
    """A declared name with its array dimensions and optional initial value."""

    name: str
    dimensions: list[Expression] = field(default_factory=list)
    init: Expression | None = None


@dataclass
class TupleInit:
    """The operator and value that initialise a tuple of declared symbols."""

    op: AssignOp
    expression: Expression


def _m(meta: Meta) -> Meta:
    return copy.deepcopy(meta)


def assign_with_op_shortcut(
    op: ExpressionInfixOpcode,
    meta: Meta,
    variable: tuple[str, Sequence[Access]],
    rhe: Expression,
) -> Statement:
    """Rewrite ``var op= rhe`` as ``var = var op rhe``."""
    name, access = variable
    target = build_variable(_m(meta), name, copy.deepcopy(list(access)))
    infix = build_infix(_m(meta), target, op, rhe)
    return build_substitution(meta, name, list(access), AssignOp.ASSIGN_VAR, infix)


def plusplus(meta: Meta, variable: tuple[str, Sequence[Access]]) -> Statement:
    one = build_number(_m(meta), 1)
    return assign_with_op_shortcut(ExpressionInfixOpcode.ADD, meta, variable, one)


def subsub(meta: Meta, variable: tuple[str, Sequence[Access]]) -> Statement:
    one = build_number(_m(meta), 1)
    return assign_with_op_shortcut(ExpressionInfixOpcode.SUB, meta, variable, one)


def for_into_while(
    meta: Meta, init: Statement, cond: Expression, step: Statement, body: Statement
) -> Statement:
    """Rewrite ``for (init; cond; step) body`` as a block holding a while loop."""
    while_body = build_block(_m(body.meta), [body, step])
    while_statement = build_while_block(_m(meta), cond, while_body)
    return build_block(meta, [init, while_statement])


def _zero_value(meta: Meta, dimensions: Sequence[Expression]) -> Expression:
    value: Expression = Number(_m(meta), 0)
    for dim in reversed(dimensions):
        value = build_uniform_array(_m(meta), value, copy.deepcopy(dim))
    return value


def split_declaration_into_single_nodes(
    meta: Meta, xtype: VariableType, symbols: Sequence[Symbol], op: AssignOp
) -> Statement:
    """One declaration per symbol, each followed by its initialisation.

    Variables without an initial value are set to zero arrays of their shape.
    """
    initializations: list[Statement] = []
    for symbol in symbols:
        initializations.append(
            build_declaration(_m(meta), xtype, symbol.name, copy.deepcopy(symbol.dimensions))
        )
        if symbol.init is not None:
            initializations.append(
                build_substitution(_m(meta), symbol.name, [], op, symbol.init)
            )
        elif xtype == VariableType.var():
            value = _zero_value(meta, symbol.dimensions)
            initializations.append(build_substitution(_m(meta), symbol.name, [], op, value))
    return build_initialization_block(meta, xtype, initializations)


def split_declaration_into_single_nodes_and_multisubstitution(
    meta: Meta,
    xtype: VariableType,
    symbols: Sequence[Symbol],
    init: TupleInit | None,
) -> Statement:
    """Declare every symbol, then assign them together from one tuple value."""
    initializations: list[Statement] = []
    values: list[Expression] = []
    for symbol in symbols:
        if symbol.init is not None:
            raise ValueError(f"symbol {symbol.name!r} of a tuple declaration has its own value")
        initializations.append(
            build_declaration(_m(meta), xtype, symbol.name, copy.deepcopy(symbol.dimensions))
        )
        if xtype == VariableType.var() and init is None:
            value = _zero_value(meta, symbol.dimensions)
            initializations.append(
                build_substitution(_m(meta), symbol.name, [], AssignOp.ASSIGN_VAR, value)
            )
        values.append(Variable(_m(meta), symbol.name, []))
    if init is not None:
        initializations.append(
            build_mult_substitution(
                _m(meta), build_tuple(_m(meta), values), init.op, init.expression
            )
        )
    return build_initialization_block(meta, xtype, initializations)