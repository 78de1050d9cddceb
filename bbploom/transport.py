import logging
import queue
from collections import deque
from typing import Callable, Dict, List, Optional

from .errors import CommunicationFailure


log = logging.getLogger(__name__)

_ABORT = "abort"
_DATA = "data"


class Endpoint:
    """Blocking point-to-point messaging for one member of a worker group."""

    rank: int
    size: int

    def send(self, dest: int, payload: bytes) -> None:
        raise NotImplementedError

    def recv(self, source: int) -> bytes:
        raise NotImplementedError

    def abort(self) -> None:
        raise NotImplementedError

    def _check_peer(self, peer: int) -> None:
        if not 0 <= peer < self.size or peer == self.rank:
            raise CommunicationFailure(f"rank {self.rank} has no peer {peer}")


class LocalEndpoint(Endpoint):
    def __init__(self, rank: int, inboxes: List):
        self.rank = rank
        self.size = len(inboxes)
        self._inboxes = inboxes
        self._stash: Dict[int, deque] = {}

    def send(self, dest: int, payload: bytes) -> None:
        self._check_peer(dest)
        try:
            self._inboxes[dest].put((_DATA, self.rank, bytes(payload)))
        except (OSError, EOFError) as exc:
            raise CommunicationFailure(f"send {self.rank} -> {dest} failed: {exc}") from exc

    def recv(self, source: int) -> bytes:
        self._check_peer(source)
        pending = self._stash.get(source)
        if pending:
            return pending.popleft()
        while True:
            try:
                kind, sender, payload = self._inboxes[self.rank].get()
            except (OSError, EOFError) as exc:
                raise CommunicationFailure(f"recv {source} -> {self.rank} failed: {exc}") from exc
            if kind == _ABORT:
                raise CommunicationFailure(f"group aborted by rank {sender}")
            if sender == source:
                return payload
            self._stash.setdefault(sender, deque()).append(payload)

    def abort(self) -> None:
        for inbox in self._inboxes:
            inbox.put((_ABORT, self.rank, b""))


class LocalGroup:
    """Inboxes for a worker group living on one host.

    ``mailbox_factory`` builds one inbox per rank: ``queue.Queue`` for threads,
    ``multiprocessing.Manager().Queue`` for processes. Messages are matched by
    sender, so a receive for one source sets aside anything else that arrives.
    """

    def __init__(self, size: int, mailbox_factory: Optional[Callable] = None):
        size = int(size)
        if size < 1:
            raise ValueError("size must be >= 1")
        factory = mailbox_factory or queue.Queue
        self.size = size
        self.inboxes = [factory() for _ in range(size)]

    def endpoint(self, rank: int) -> LocalEndpoint:
        if not 0 <= rank < self.size:
            raise ValueError("rank must be in [0, size)")
        return LocalEndpoint(rank, self.inboxes)

    def abort(self, rank: int) -> None:
        log.debug("rank %d aborting local group", rank)
        LocalEndpoint(rank, self.inboxes).abort()
