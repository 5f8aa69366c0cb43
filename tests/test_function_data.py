import pytest

from program_structure.expressions import Variable
from program_structure.function_data import FunctionData
from program_structure.nodes import Meta
from program_structure.statements import Block, Return


def _body():
    var = Variable(Meta(0, 1), "a", [])
    ret = Return(Meta(0, 2), var)
    return Block(Meta(0, 3), [ret]), ret, var


def test_create_numbers_body_in_preorder():
    body, ret, var = _body()
    data, next_id = FunctionData.create("f", 4, body, ["a"], range(2, 3), 7)
    ids = [body.meta.elem_id, ret.meta.elem_id, var.meta.elem_id]
    assert ids == list(range(7, next_id))
    assert {body.meta.file_id, ret.meta.file_id, var.meta.file_id} == {4}
    assert data.name == "f"
    assert data.file_id == 4


def test_num_of_params():
    body, _, _ = _body()
    data, _ = FunctionData.create("f", 0, body, ("a", "b"), range(0, 1), 0)
    assert data.num_of_params == 2
    assert data.name_of_params == ["a", "b"]


def test_body_statements():
    body, ret, _ = _body()
    data, _ = FunctionData.create("f", 0, body, [], range(0, 0), 0)
    assert data.body_statements() == [ret]


def test_body_statements_requires_block():
    _, ret, _ = _body()
    data, _ = FunctionData.create("f", 0, ret, [], range(0, 0), 0)
    with pytest.raises(ValueError):
        data.body_statements()


def test_replace_body_returns_old():
    body, _, _ = _body()
    data, _ = FunctionData.create("f", 0, body, [], range(0, 0), 0)
    new = Block(Meta(1, 2), [])
    assert data.replace_body(new) is body
    assert data.body is new