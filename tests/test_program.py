from program_structure.error_code import ReportCode
from program_structure.expressions import Call, Variable
from program_structure.nodes import Meta
from program_structure.program import (
    CustomGatesPragma,
    Function,
    Template,
    UnrecognizedPragma,
    VersionPragma,
    build_ast,
    build_function,
    build_main_component,
    build_template,
)
from program_structure.statements import Block


def _block():
    return Block(Meta(0, 1), [])


def test_first_version_kept_and_repeat_reported():
    second = Meta(10, 20)
    ast, reports = build_ast(
        Meta(0, 100),
        [VersionPragma(Meta(0, 5), 3, (2, 1, 0)), VersionPragma(second, 3, (2, 0, 0))],
        [],
        [],
        None,
    )
    assert ast.compiler_version == (2, 1, 0)
    assert len(reports) == 1
    report = reports[0]
    assert report.code is ReportCode.MULTIPLE_PRAGMA
    assert report.message == "Multiple pragma directives"
    assert report.primary[0].location == range(10, 20)
    assert report.primary[0].file_id == 3


def test_custom_gates_pragma():
    ast, reports = build_ast(
        Meta(0, 1), [CustomGatesPragma(Meta(0, 1), 0)], [], [], None
    )
    assert ast.custom_gates is True
    assert reports == []


def test_repeated_custom_gates_pragma_reported():
    _, reports = build_ast(
        Meta(0, 1),
        [CustomGatesPragma(Meta(0, 1), 0), CustomGatesPragma(Meta(2, 4), 0)],
        [],
        [],
        None,
    )
    assert [r.code for r in reports] == [ReportCode.MULTIPLE_PRAGMA]


def test_defaults_without_pragmas_and_unrecognized_ignored():
    ast, reports = build_ast(Meta(0, 1), [UnrecognizedPragma()], ["a.circom"], [], None)
    assert ast.compiler_version is None
    assert ast.custom_gates is False
    assert ast.includes == ["a.circom"]
    assert reports == []


def test_custom_gates_declared_detected():
    gate = build_template(Meta(0, 1), "G", [], range(0, 0), _block(), False, True)
    plain = build_template(Meta(0, 1), "T", [], range(0, 0), _block(), False, False)
    with_gate, _ = build_ast(Meta(0, 1), [], [], [plain, gate], None)
    without, _ = build_ast(Meta(0, 1), [], [], [plain], None)
    assert with_gate.custom_gates_declared is True
    assert without.custom_gates_declared is False


def test_builders():
    body = _block()
    template = build_template(Meta(0, 1), "T", ("n",), range(2, 4), body, True, False)
    assert isinstance(template, Template)
    assert template.args == ["n"]
    assert template.parallel is True
    assert template.body is body
    function = build_function(Meta(0, 1), "f", ["a", "b"], range(1, 3), body)
    assert isinstance(function, Function)
    assert function.args == ["a", "b"]
    assert function.arg_location == range(1, 3)


def test_main_component():
    call = Call(Meta(0, 1), "Main", [Variable(Meta(0, 1), "x", [])])
    public, expr = build_main_component(("in",), call)
    assert public == ["in"]
    assert expr is call