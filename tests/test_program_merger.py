from program_structure.error_code import ReportCode
from program_structure.nodes import Meta
from program_structure.program import build_function, build_template
from program_structure.program_merger import Merger
from program_structure.statements import Block


def _function(name, meta=None):
    return build_function(meta or Meta(0, 1), name, ["a"], range(0, 1), Block(Meta(0, 1), []))


def _template(name, meta=None):
    return build_template(
        meta or Meta(0, 1), name, [], range(0, 0), Block(Meta(0, 1), []), False, False
    )


def test_registers_functions_and_templates():
    merger = Merger()
    reports = merger.add_definitions(0, [_function("f"), _template("T")])
    assert reports == []
    assert merger.contains_function("f")
    assert merger.contains_template("T")
    assert not merger.contains_function("T")
    assert not merger.contains_template("f")


def test_duplicate_name_reported():
    merger = Merger()
    merger.add_definitions(0, [_function("f")])
    reports = merger.add_definitions(2, [_template("f", Meta(5, 9))])
    assert len(reports) == 1
    report = reports[0]
    assert report.is_error()
    assert report.code is ReportCode.SAME_SYMBOL_DECLARED_TWICE
    assert report.message == "Duplicated callable symbol"
    label = report.primary[0]
    assert label.message == "f is already in use"
    assert label.file_id == 2
    assert label.location == range(5, 9)
    assert not merger.contains_template("f")


def test_first_definition_kept_on_duplicate():
    merger = Merger()
    first = _function("f")
    reports = merger.add_definitions(0, [first, _function("f")])
    assert len(reports) == 1
    _, functions, _ = merger.decompose()
    assert functions["f"].body is first.body


def test_ids_continue_across_definitions():
    merger = Merger()
    f = _function("f")
    t = _template("T")
    merger.add_definitions(0, [f])
    merger.add_definitions(1, [t])
    fresh_id, functions, templates = merger.decompose()
    assert f.body.meta.elem_id == 0
    assert t.body.meta.elem_id > f.body.meta.elem_id
    assert fresh_id > t.body.meta.elem_id
    assert functions["f"].file_id == 0
    assert templates["T"].file_id == 1