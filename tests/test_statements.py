import pytest

from program_structure.expressions import (
    AnonymousComp,
    ArrayAccess,
    Number,
    Tuple,
    Variable,
    build_anonymous_component,
    build_number,
    build_variable,
)
from program_structure.nodes import AssignOp, Meta, SignalType, VariableType
from program_structure.statements import (
    LogExp,
    LogStr,
    MultSubstitution,
    build_anonymous_component_statement,
    build_assert,
    build_block,
    build_conditional_block,
    build_constraint_equality,
    build_declaration,
    build_initialization_block,
    build_log_call,
    build_log_expression,
    build_log_string,
    build_mult_substitution,
    build_return,
    build_substitution,
    build_while_block,
)


def m():
    return Meta(0, 4)


def num(v=1):
    return build_number(m(), v)


def anon():
    return build_anonymous_component(m(), "T", [], [], None, False)


def test_predicates():
    cases = [
        (build_conditional_block(m(), num(), build_block(m(), []), None), "is_if_then_else"),
        (build_while_block(m(), num(), build_block(m(), [])), "is_while"),
        (build_return(m(), num()), "is_return"),
        (build_initialization_block(m(), VariableType.var(), []), "is_initialization_block"),
        (build_declaration(m(), VariableType.var(), "x", []), "is_declaration"),
        (build_substitution(m(), "x", [], AssignOp.ASSIGN_VAR, num()), "is_substitution"),
        (build_constraint_equality(m(), num(), num()), "is_constraint_equality"),
        (build_log_call(m(), []), "is_log_call"),
        (build_block(m(), []), "is_block"),
        (build_assert(m(), num()), "is_assert"),
    ]
    names = [name for _, name in cases] + ["is_underscore_substitution"]
    for stmt, name in cases:
        for other in names:
            assert getattr(stmt, other)() == (other == name)


def test_declaration_is_constant():
    decl = build_declaration(m(), VariableType.signal(SignalType.INPUT), "a", [num(2)])
    assert decl.is_constant is True
    assert decl.name == "a"


def test_log_call_splits_long_strings():
    text = "ab" * 300
    call = build_log_call(m(), [build_log_string(text)])
    pieces = [arg.text for arg in call.args]
    assert "".join(pieces) == text
    assert all(len(p) <= 230 for p in pieces)
    assert len(pieces) > 1


def test_log_call_keeps_expressions_in_place():
    expr = num(7)
    call = build_log_call(m(), [build_log_string("x"), build_log_expression(expr), LogStr("")])
    assert call.args == [LogStr("x"), LogExp(expr)]


def test_anonymous_component_statement():
    arg = anon()
    stmt = build_anonymous_component_statement(m(), arg)
    assert isinstance(stmt, MultSubstitution)
    assert isinstance(stmt.lhe, Tuple) and stmt.lhe.values == []
    assert stmt.op is AssignOp.ASSIGN_CONSTRAINT_SIGNAL
    assert stmt.rhe is arg


def test_contains_anonymous_comp():
    assert build_return(m(), anon()).contains_anonymous_comp()
    assert not build_return(m(), num()).contains_anonymous_comp()
    sub = build_substitution(m(), "x", [ArrayAccess(anon())], AssignOp.ASSIGN_VAR, num())
    assert sub.contains_anonymous_comp()
    nested = build_block(m(), [build_conditional_block(m(), num(), build_block(m(), []),
                                                       build_assert(m(), anon()))])
    assert nested.contains_anonymous_comp()
    assert build_log_call(m(), [LogExp(anon())]).contains_anonymous_comp()
    assert not build_log_call(m(), [LogStr("x")]).contains_anonymous_comp()


def test_fill_substitution_order():
    rhe = num()
    index = num()
    sub = build_substitution(m(), "x", [ArrayAccess(index)], AssignOp.ASSIGN_VAR, rhe)
    end = sub.fill(3, 10)
    assert end == 13
    assert (sub.meta.elem_id, rhe.meta.elem_id, index.meta.elem_id) == (10, 11, 12)
    assert {sub.meta.file_id, rhe.meta.file_id, index.meta.file_id} == {3}


def test_fill_mult_substitution_fills_rhe_first():
    lhe = build_variable(m(), "a", [])
    rhe = num()
    stmt = build_mult_substitution(m(), lhe, AssignOp.ASSIGN_SIGNAL, rhe)
    stmt.fill(0, 0)
    assert rhe.meta.elem_id < lhe.meta.elem_id