import re
from typing import Iterator, Tuple


def pi_digits_spigot() -> Iterator[int]:
    """Decimal digits of pi, leading 3 first, from Gibbons' streaming spigot."""
    q, r, t, i = 1, 180, 60, 2
    while True:
        u = 3 * (3 * i + 1) * (3 * i + 2)
        y = (q * (27 * i - 12) + 5 * r) // (5 * t)
        yield y
        q, r, t, i = 10 * q * i * (2 * i - 1), 10 * u * (q * (5 * i - 2) + r - y * t), t * u, i + 1


def spigot_fractional_digits(count: int) -> str:
    g = pi_digits_spigot()
    next(g)
    return "".join(str(next(g)) for _ in range(int(count)))


def extract_fractional_digits(display: str) -> str:
    if "." not in display:
        return ""
    return re.sub(r"\s+", "", display.split(".", 1)[1])


def verify_fractional_digits(display: str) -> Tuple[bool, int]:
    """Check the decimals of a formatted result against the spigot.

    Returns ``(ok, position)`` where ``position`` is the 1-based index of the
    first wrong decimal, or the number of decimals checked when all match.
    """
    actual = extract_fractional_digits(display)
    expected = spigot_fractional_digits(len(actual))
    for i, (a, b) in enumerate(zip(actual, expected)):
        if a != b:
            return False, i + 1
    return True, len(actual)
