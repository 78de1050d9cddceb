import pytest

from bbploom.bbp import term
from bbploom.planner import make_context, plan_precision


def test_first_term():
    ctx = make_context(plan_precision(100))
    expected = ctx.mpf(4) - ctx.mpf(1) / 2 - ctx.mpf(1) / 5 - ctx.mpf(1) / 6
    assert term(0, ctx) == expected
    assert abs(term(0, ctx) - ctx.mpf(47) / 15) < ctx.mpf(10) ** -100


def test_terms_positive_and_decreasing():
    ctx = make_context(plan_precision(50))
    prev = term(0, ctx)
    for k in range(1, 40):
        t = term(k, ctx)
        assert 0 < t < prev
        assert t < ctx.mpf(16) ** -k
        prev = t


def test_series_converges_to_pi():
    ctx = make_context(plan_precision(200))
    s = ctx.mpf(0)
    for k in range(210):
        s += term(k, ctx)
    assert abs(s - ctx.pi) < ctx.mpf(10) ** -200


def test_negative_index():
    with pytest.raises(ValueError):
        term(-1, make_context(64))
