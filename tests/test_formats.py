import pytest

from bbploom.formats import format_pi, fractional_digits, group_digits
from bbploom.planner import make_context, plan_precision


PI_60 = "141592653589793238462643383279502884197169399375105820974944"


def test_format_pi_groups_and_wraps():
    ctx = make_context(plan_precision(60))
    text = format_pi(ctx.pi, 60, ctx)
    assert text == (
        "3.1415926535 8979323846 2643383279 5028841971 6939937510\n"
        "  5820974944"
    )


def test_single_digit():
    ctx = make_context(plan_precision(1))
    assert format_pi(ctx.pi, 1, ctx) == "3.1"


def test_truncates_instead_of_rounding():
    ctx = make_context(128)
    assert fractional_digits(ctx.mpf("3.14159"), 4, ctx) == "1415"
    assert fractional_digits(ctx.mpf("3.0009"), 3, ctx) == "000"


def test_fractional_digits_of_pi():
    ctx = make_context(plan_precision(60))
    assert fractional_digits(ctx.pi, 60, ctx) == PI_60


def test_group_digits():
    assert group_digits("12345") == "12345"
    assert group_digits("1" * 10 + "2" * 3) == "1111111111 222"


def test_rejects_other_integer_parts():
    ctx = make_context(128)
    with pytest.raises(ValueError):
        format_pi(ctx.mpf(2), 5, ctx)
