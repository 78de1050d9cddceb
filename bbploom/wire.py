import re

from .errors import CommunicationFailure, SerializationOverflow


_DECIMAL = re.compile(rb"[0-9]+\.[0-9]+(e[-+]?[0-9]+)?")


def encode(value, plan, ctx) -> bytes:
    """Render a partial sum as ASCII decimal with ``plan.wire_digits`` significant digits."""
    if value < 0:
        raise ValueError("partial sums are non-negative")
    data = ctx.nstr(value, plan.wire_digits, strip_zeros=False, min_fixed=-5).encode("ascii")
    if len(data) > plan.capacity:
        raise SerializationOverflow(len(data), plan.capacity)
    return data


def decode(payload: bytes, ctx):
    if not isinstance(payload, (bytes, bytearray)) or not _DECIMAL.fullmatch(payload):
        raise CommunicationFailure("malformed partial sum payload")
    return ctx.mpf(payload.decode("ascii"))
