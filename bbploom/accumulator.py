import logging

from .bbp import term


log = logging.getLogger(__name__)


def assigned_terms(rank: int, size: int, num_terms: int) -> range:
    rank = int(rank)
    size = int(size)
    if size < 1:
        raise ValueError("size must be >= 1")
    if not 0 <= rank < size:
        raise ValueError("rank must be in [0, size)")
    return range(rank, int(num_terms), size)


def local_sum(rank: int, size: int, num_terms: int, ctx):
    s = ctx.mpf(0)
    count = 0
    for k in assigned_terms(rank, size, num_terms):
        s += term(k, ctx)
        count += 1
    log.debug("rank %d summed %d terms", rank, count)
    return s
