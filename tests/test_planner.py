import pytest

from bbploom.errors import UsageError
from bbploom.planner import make_context, plan, plan_capacity, plan_precision, plan_terms, plan_wire_digits


DIGIT_COUNTS = [1, 2, 10, 50, 99, 100, 1000, 5000, 20000]


def test_precision_formula():
    assert plan_precision(1) == 68
    assert plan_precision(50) == 239
    assert plan_precision(100) == 414


def test_precision_non_decreasing_and_sufficient():
    bits = [plan_precision(d) for d in DIGIT_COUNTS]
    assert bits == sorted(bits)
    for d, b in zip(DIGIT_COUNTS, bits):
        assert b >= d * 3.32


def test_terms():
    for d in DIGIT_COUNTS:
        assert plan_terms(d) == d + 10


def test_capacity_covers_wire_digits():
    for d in DIGIT_COUNTS:
        bits = plan_precision(d)
        wire = plan_wire_digits(d, bits)
        assert wire >= d + 20
        assert plan_capacity(d, bits) >= d + 100
        assert plan_capacity(d, bits) >= wire + 80


def test_plan():
    p = plan(1)
    assert p.terms == 11
    assert p.bits == 68
    assert p.digits == 1


def test_plan_rejects_zero():
    with pytest.raises(UsageError):
        plan(0)
    with pytest.raises(ValueError):
        plan(-5)


def test_make_context_is_isolated():
    a = make_context(100)
    b = make_context(400)
    assert a.prec == 100
    assert b.prec == 400
