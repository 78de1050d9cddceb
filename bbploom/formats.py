_GROUP = 10
_GROUPS_PER_LINE = 5
_INDENT = "  "


def fractional_digits(value, digits: int, ctx) -> str:
    """First ``digits`` decimals of ``value - 3``, truncated."""
    digits = int(digits)
    if digits < 1:
        raise ValueError("digits must be >= 1")
    if int(ctx.floor(value)) != 3:
        raise ValueError("integer part must be 3")
    frac = value - 3
    n = int(ctx.floor(frac * ctx.mpf(10) ** digits))
    return str(n).zfill(digits)


def group_digits(s: str) -> str:
    groups = [s[i : i + _GROUP] for i in range(0, len(s), _GROUP)]
    lines = [" ".join(groups[i : i + _GROUPS_PER_LINE]) for i in range(0, len(groups), _GROUPS_PER_LINE)]
    return ("\n" + _INDENT).join(lines)


def format_pi(value, digits: int, ctx) -> str:
    return "3." + group_digits(fractional_digits(value, digits, ctx))
