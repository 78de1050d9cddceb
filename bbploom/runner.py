import logging
import multiprocessing
import time
from concurrent.futures import FIRST_EXCEPTION, BrokenExecutor, ProcessPoolExecutor, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Optional

from .accumulator import local_sum
from .collector import COORDINATOR, select_role
from .errors import CommunicationFailure
from .formats import format_pi
from .planner import Plan, make_context, plan
from .transport import Endpoint, LocalGroup
from .wire import encode


log = logging.getLogger(__name__)

EXECUTORS = ("process", "thread")


@dataclass(frozen=True)
class Report:
    workers: int
    digits: int
    terms: int
    bits: int
    value: str
    text: str
    elapsed: float


def run_worker(endpoint: Endpoint, digits: int, strategy: str = "auto") -> Optional[Report]:
    """Program body every member of the group runs.

    Returns the report on the coordinator and ``None`` everywhere else.
    """
    return _run_planned(endpoint, plan(digits), strategy)


def _run_planned(endpoint: Endpoint, p: Plan, strategy: str) -> Optional[Report]:
    ctx = make_context(p.bits)
    role = select_role(endpoint, p, ctx, strategy)
    start = time.perf_counter()
    partial = local_sum(endpoint.rank, endpoint.size, p.terms, ctx)
    total = role.reduce(partial)
    elapsed = time.perf_counter() - start
    if endpoint.rank != COORDINATOR:
        return None
    log.debug("coordinator merged %d partial sums in %.3fs", endpoint.size, elapsed)
    return Report(
        workers=endpoint.size,
        digits=p.digits,
        terms=p.terms,
        bits=p.bits,
        value=encode(total, p, ctx).decode("ascii"),
        text=format_pi(total, p.digits, ctx),
        elapsed=elapsed,
    )


def _run_member(group: LocalGroup, rank: int, p: Plan, strategy: str) -> Optional[Report]:
    return _run_planned(group.endpoint(rank), p, strategy)


def _run_group(ex, group: LocalGroup, p: Plan, strategy: str) -> Report:
    futures = [ex.submit(_run_member, group, rank, p, strategy) for rank in range(group.size)]
    done, _ = wait(futures, return_when=FIRST_EXCEPTION)
    failed = [f for f in futures if f in done and f.exception() is not None]
    if failed:
        rank = futures.index(failed[0])
        log.debug("rank %d failed, aborting group", rank)
        group.abort(rank)
        wait(futures)
        exc = failed[0].exception()
        if isinstance(exc, BrokenExecutor):
            raise CommunicationFailure(f"worker group lost rank {rank}") from exc
        raise exc
    return futures[COORDINATOR].result()


def run_local(digits: int, workers: int = 1, executor: str = "process", strategy: str = "auto") -> Report:
    """Run a worker group of ``workers`` members on this host."""
    p = plan(digits)
    workers = int(workers)
    if workers < 1:
        raise ValueError("workers must be >= 1")
    executor = (executor or "process").lower().strip()
    if executor == "thread":
        group = LocalGroup(workers)
        with ThreadPoolExecutor(max_workers=workers) as ex:
            return _run_group(ex, group, p, strategy)
    if executor == "process":
        with multiprocessing.Manager() as manager:
            group = LocalGroup(workers, manager.Queue)
            with ProcessPoolExecutor(max_workers=workers) as ex:
                return _run_group(ex, group, p, strategy)
    raise ValueError("unsupported executor")
