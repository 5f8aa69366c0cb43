import pytest

from program_structure.expressions import Number, Variable
from program_structure.nodes import Meta, SignalType, VariableType
from program_structure.statements import (
    Block,
    Declaration,
    IfThenElse,
    InitializationBlock,
    While,
)
from program_structure.template_data import TemplateData


def _decl(xtype, name, dims=0):
    return Declaration(
        Meta(0, 1), xtype, name, [Number(Meta(0, 1), 2) for _ in range(dims)]
    )


def _body():
    sig_in = VariableType.signal(SignalType.INPUT)
    sig_out = VariableType.signal(SignalType.OUTPUT, ["binary"])
    inter = VariableType.signal(SignalType.INTERMEDIATE)
    init = InitializationBlock(
        Meta(0, 1),
        sig_in,
        [_decl(sig_in, "z", 1), _decl(sig_out, "out"), _decl(inter, "tmp")],
    )
    cond = IfThenElse(
        Meta(0, 1),
        Variable(Meta(0, 1), "c", []),
        Block(Meta(0, 1), [_decl(VariableType.var(), "v")]),
        Block(Meta(0, 1), [_decl(sig_in, "b")]),
    )
    loop = While(
        Meta(0, 1),
        Variable(Meta(0, 1), "c", []),
        _decl(VariableType.signal(SignalType.OUTPUT), "c", 2),
    )
    return Block(Meta(0, 1), [init, cond, loop])


def _create(body, next_id=0):
    return TemplateData.create("T", 1, body, ["n"], range(0, 1), next_id, False, False)


def test_inputs_and_outputs_collected():
    data, _ = _create(_body())
    assert data.get_input_info("z") == (1, set())
    assert data.get_input_info("b") == (0, set())
    assert data.get_output_info("out") == (0, {"binary"})
    assert data.get_output_info("c") == (2, set())
    assert data.get_input_info("tmp") is None
    assert data.get_output_info("tmp") is None
    assert data.get_input_info("v") is None


def test_inputs_sorted_by_name_and_declarations_in_order():
    data, _ = _create(_body())
    assert list(data.input_signals) == ["b", "z"]
    assert data.input_declarations == [("z", 1), ("b", 0)]
    assert data.output_declarations == [("out", 0), ("c", 2)]


def test_repeated_declaration_listed_twice():
    sig_in = VariableType.signal(SignalType.INPUT)
    body = Block(Meta(0, 1), [_decl(sig_in, "a"), _decl(sig_in, "a", 1)])
    data, _ = _create(body)
    assert data.get_input_info("a") == (1, set())
    assert data.input_declarations == [("a", 0), ("a", 1)]


def test_body_numbered_from_next_id():
    body = _body()
    data, next_id = _create(body, 5)
    assert body.meta.elem_id == 5
    assert body.meta.file_id == 1
    assert next_id > 5
    assert data.num_of_params == 1


def test_body_statements():
    body = _body()
    data, _ = _create(body)
    assert data.body_statements() is body.stmts
    lone = _decl(VariableType.var(), "x")
    other, _ = _create(lone)
    with pytest.raises(ValueError):
        other.body_statements()