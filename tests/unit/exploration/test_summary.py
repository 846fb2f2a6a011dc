"""
Tests for path-condition summaries.
"""

from digitsum.core.classifier import PathKind, classify
from digitsum.exploration.summary import DIGIT_SUM, FIRST_BYTE, describe_paths, sum_domain


def conditions_by_path(signed=False):
    return {c.path: c for c in describe_paths(signed=signed)}


def test_one_condition_per_path():
    assert [c.path for c in describe_paths()] == list(PathKind)


def test_exit_codes_follow_results():
    conditions = conditions_by_path()

    assert conditions[PathKind.ABOVE_THRESHOLD].exit_code == 1
    assert all(
        c.exit_code == 0 for kind, c in conditions.items() if kind is not PathKind.ABOVE_THRESHOLD
    )


def test_rendered_conditions():
    conditions = conditions_by_path()

    assert conditions[PathKind.EMPTY].render() == "('a[0]' <= 0)"
    assert conditions[PathKind.NEGATIVE].render() == "('a[0]' >= 45 && 'a[0]' <= 45)"
    assert conditions[PathKind.ABOVE_THRESHOLD].render() == (
        "(('a[0]' >= 1 && 'a[0]' <= 44) || ('a[0]' >= 46)) && ('sum' >= 43)"
    )
    assert conditions[PathKind.AT_OR_BELOW_THRESHOLD].render() == (
        "(('a[0]' >= 1 && 'a[0]' <= 44) || ('a[0]' >= 46)) && ('sum' <= 42)"
    )


def test_signed_leading_byte_excludes_zero_and_minus():
    leading = conditions_by_path(signed=True)[PathKind.ABOVE_THRESHOLD].constraints[FIRST_BYTE]

    assert leading.ranges == [(-128, -1), (1, 44), (46, 127)]


def test_sum_domains():
    assert sum_domain() == (-470, 2070)
    assert sum_domain(signed=True) == (-1760, 790)


def test_conditions_hold_for_samples():
    """Sample inputs satisfy the condition of the path they take."""
    conditions = conditions_by_path()
    for content in [b"", b"-5", b"99999999", b"5", b"9A9", b"\xff"]:
        trace = classify(content.ljust(11, b"\x00"))
        constraints = conditions[trace.path].constraints
        first = content[0] if content else 0

        assert constraints[FIRST_BYTE].contains(first)
        if trace.total is not None:
            assert constraints[DIGIT_SUM].contains(trace.total)


def test_to_dict():
    data = conditions_by_path()[PathKind.NEGATIVE].to_dict()

    assert data["path"] == "negative"
    assert data["constraints"] == {"a[0]": [[45, 45]]}
    assert data["exit_code"] == 0
