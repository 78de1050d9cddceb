import logging
import math
from dataclasses import dataclass

from mpmath.ctx_mp import MPContext
from mpmath.libmp import repr_dps

from .errors import UsageError


log = logging.getLogger(__name__)

# margins carried over from the message buffer sizing: digits + 20 on the
# wire, digits + 100 for the whole message
_WIRE_MARGIN = 20
_CAPACITY_MARGIN = 100


@dataclass(frozen=True)
class Plan:
    digits: int
    bits: int
    terms: int
    wire_digits: int
    capacity: int


def plan_precision(digits: int) -> int:
    return int(math.ceil(int(digits) * 3.5)) + 64


def plan_terms(digits: int) -> int:
    return int(digits) + 10


def plan_wire_digits(digits: int, bits: int) -> int:
    """Significant digits needed to send a partial sum without loss.

    ``repr_dps`` is the count mpmath itself relies on to rebuild an mpf of
    ``bits`` precision from its decimal repr.
    """
    return max(int(digits) + _WIRE_MARGIN + 1, repr_dps(bits))


def plan_capacity(digits: int, bits: int) -> int:
    wire = plan_wire_digits(digits, bits)
    return max(int(digits) + _CAPACITY_MARGIN, wire + _CAPACITY_MARGIN - _WIRE_MARGIN)


def plan(digits: int) -> Plan:
    digits = int(digits)
    if digits < 1:
        raise UsageError("digits must be >= 1")
    bits = plan_precision(digits)
    p = Plan(
        digits=digits,
        bits=bits,
        terms=plan_terms(digits),
        wire_digits=plan_wire_digits(digits, bits),
        capacity=plan_capacity(digits, bits),
    )
    log.debug("planned %s", p)
    return p


def make_context(bits: int) -> MPContext:
    ctx = MPContext()
    ctx.prec = int(bits)
    return ctx
