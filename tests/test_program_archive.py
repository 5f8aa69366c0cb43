import pytest

from program_structure.error_code import ReportCode
from program_structure.expressions import Call, Variable
from program_structure.file_definition import FileLibrary
from program_structure.nodes import Meta
from program_structure.program import build_function, build_main_component, build_template
from program_structure.program_archive import ProgramArchive, ProgramArchiveError
from program_structure.statements import Block


def _template(name):
    return build_template(
        Meta(0, 1), name, [], range(0, 0), Block(Meta(0, 1), []), False, False
    )


def _function(name):
    return build_function(Meta(0, 1), name, [], range(0, 0), Block(Meta(0, 1), []))


def _main():
    return build_main_component(["in"], Call(Meta(0, 4), "Main", [Variable(Meta(0, 1), "x", [])]))


def _archive():
    library = FileLibrary()
    main_id = library.add_file("main.circom", "component main = Main(x);\n")
    other_id = library.add_file("lib.circom", "")
    archive = ProgramArchive.create(
        library,
        main_id,
        _main(),
        [(main_id, [_template("Main")]), (other_id, [_function("f"), _template("T")])],
        True,
    )
    return archive, library, main_id


def test_create_collects_callables():
    archive, library, main_id = _archive()
    assert archive.template_names == {"Main", "T"}
    assert archive.function_names == {"f"}
    assert archive.contains_template("T")
    assert archive.contains_function("f")
    assert archive.get_template_data("Main").name == "Main"
    assert archive.get_function_data("f").file_id == 1
    assert archive.public_inputs == ["in"]
    assert archive.custom_gates is True
    assert archive.file_library is library
    assert archive.file_id_main == main_id


def test_main_call_numbered_after_definitions():
    archive, _, main_id = _archive()
    call = archive.initial_template_call
    assert call.meta.file_id == main_id
    assert call.args[0].meta.file_id == main_id
    body_ids = [t.body.meta.elem_id for t in archive.templates.values()]
    assert all(call.meta.elem_id > i for i in body_ids)
    assert archive.id_max > call.args[0].meta.elem_id


def test_duplicates_raise_with_reports():
    library = FileLibrary()
    with pytest.raises(ProgramArchiveError) as info:
        ProgramArchive.create(
            library,
            0,
            _main(),
            [(0, [_template("Main")]), (1, [_function("Main")])],
            False,
        )
    assert info.value.file_library is library
    assert [r.code for r in info.value.reports] == [ReportCode.SAME_SYMBOL_DECLARED_TWICE]


def test_missing_data_raises_key_error():
    archive, _, _ = _archive()
    with pytest.raises(KeyError):
        archive.get_template_data("Nope")
    with pytest.raises(KeyError):
        archive.get_function_data("nope")


def test_remove_template_and_function():
    archive, _, _ = _archive()
    archive.remove_template("T")
    archive.remove_function("f")
    archive.remove_function("missing")
    assert archive.template_names == {"Main"}
    assert archive.function_names == set()
    assert not archive.contains_template("T")
    assert not archive.contains_function("f")