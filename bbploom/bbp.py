def term(k: int, ctx):
    """k-th BBP term, ``16**-k * (4/(8k+1) - 2/(8k+4) - 1/(8k+5) - 1/(8k+6))``.

    Every division and subtraction rounds at ``ctx.prec``; the ``16**-k``
    factor is applied as an exact binary shift.
    """
    k = int(k)
    if k < 0:
        raise ValueError("k must be >= 0")
    k8 = 8 * k
    s = ctx.mpf(4) / (k8 + 1)
    s = s - ctx.mpf(2) / (k8 + 4)
    s = s - ctx.mpf(1) / (k8 + 5)
    s = s - ctx.mpf(1) / (k8 + 6)
    return ctx.ldexp(s, -4 * k)
