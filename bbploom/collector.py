import logging
import operator
from typing import Callable, List, Optional

from .errors import CommunicationFailure
from .transport import Endpoint
from .wire import decode, encode


log = logging.getLogger(__name__)

COORDINATOR = 0
STRATEGIES = ("auto", "linear", "tree")
_LINEAR_MAX_WORKERS = 8


class LinearTopology:
    """Every contributor sends straight to the coordinator."""

    name = "linear"

    def __init__(self, size: int):
        self.size = size

    def children(self, rank: int) -> List[int]:
        if rank == COORDINATOR:
            return list(range(1, self.size))
        return []

    def parent(self, rank: int) -> Optional[int]:
        return None if rank == COORDINATOR else COORDINATOR


class TreeTopology:
    """Binomial tree rooted at the coordinator.

    The parent of ``r`` is ``r`` with its lowest set bit cleared; children are
    ``r + 2**i`` for every power of two below that bit. Depth is
    ``ceil(log2(size))``.
    """

    name = "tree"

    def __init__(self, size: int):
        self.size = size

    def children(self, rank: int) -> List[int]:
        limit = rank & -rank if rank else self.size
        out = []
        step = 1
        while step < limit and rank + step < self.size:
            out.append(rank + step)
            step <<= 1
        return out

    def parent(self, rank: int) -> Optional[int]:
        if rank == COORDINATOR:
            return None
        return rank - (rank & -rank)


def make_topology(strategy: str, size: int):
    strategy = (strategy or "auto").lower().strip()
    if strategy == "auto":
        strategy = "linear" if size <= _LINEAR_MAX_WORKERS else "tree"
    if strategy == "linear":
        return LinearTopology(size)
    if strategy == "tree":
        return TreeTopology(size)
    raise ValueError("unsupported strategy")


class _Role:
    def __init__(self, endpoint: Endpoint, topology, plan, ctx, merge: Callable = operator.add):
        self.endpoint = endpoint
        self.topology = topology
        self.plan = plan
        self.ctx = ctx
        self.merge = merge

    def _gather(self, value):
        acc = value
        for child in self.topology.children(self.endpoint.rank):
            payload = self.endpoint.recv(child)
            try:
                received = decode(payload, self.ctx)
            except CommunicationFailure as exc:
                raise CommunicationFailure(f"rank {child}: {exc}") from exc
            acc = self.merge(acc, received)
            log.debug("rank %d merged partial sum from rank %d", self.endpoint.rank, child)
        return acc


class Coordinator(_Role):
    def reduce(self, value):
        return self._gather(value)


class Contributor(_Role):
    def reduce(self, value) -> None:
        acc = self._gather(value)
        parent = self.topology.parent(self.endpoint.rank)
        self.endpoint.send(parent, encode(acc, self.plan, self.ctx))
        log.debug("rank %d sent partial sum to rank %d", self.endpoint.rank, parent)
        return None


def select_role(endpoint: Endpoint, plan, ctx, strategy: str = "auto"):
    topology = make_topology(strategy, endpoint.size)
    if endpoint.rank == COORDINATOR:
        return Coordinator(endpoint, topology, plan, ctx)
    return Contributor(endpoint, topology, plan, ctx)
