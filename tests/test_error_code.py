import re

import pytest

from program_structure.error_code import ReportCode


@pytest.mark.parametrize(
    "member, code",
    [
        (ReportCode.NO_MAIN_FOUND_IN_PROJECT, "P1001"),
        (ReportCode.MULTIPLE_PRAGMA, "P1013"),
        (ReportCode.UNCLOSED_COMMENT, "P1005"),
        (ReportCode.SAME_SYMBOL_DECLARED_TWICE, "T2008"),
        (ReportCode.UNKNOWN_DIMENSION, "T20460"),
        (ReportCode.UNCONSTRAINED_SIGNAL, "CA01"),
        (ReportCode.ERROR_WAT2WASM, "W01"),
        (ReportCode.TUPLE_ERROR, "TAC02"),
        (ReportCode.UNDERSCORE_WITH_NO_SIGNAL_WARNING, "TAC03"),
        (ReportCode.UNINITIALIZED_COMPONENT, "T20466"),
    ],
)
def test_display_code(member, code):
    assert str(member) == code


@pytest.mark.parametrize("member", list(ReportCode))
def test_every_code_has_expected_shape(member):
    looked_up = ReportCode(member.value)
    assert looked_up is member
    assert re.fullmatch(r"[A-Z]+\d+", looked_up.__str__()), member


def test_shared_codes_keep_members_distinct():
    a = ReportCode(ReportCode.WRONG_TYPES_IN_ASSIGN_OPERATION_OPERATOR_SIGNAL.value)
    b = ReportCode(ReportCode.WRONG_TYPES_IN_ASSIGN_OPERATION_TEMPLATE.value)
    assert a is not b
    assert a.__str__() == b.__str__() == "T2000"


def test_members_are_unique_values():
    members = list(ReportCode)
    recovered = [ReportCode(member.value) for member in members]
    assert recovered == members
    assert len({member.value for member in recovered}) == len(members)