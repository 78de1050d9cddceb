import logging

from mpi4py import MPI

from .errors import CommunicationFailure
from .transport import Endpoint


log = logging.getLogger(__name__)

_TAG = 0


class MPIEndpoint(Endpoint):
    def __init__(self, comm):
        self.comm = comm
        self.rank = comm.Get_rank()
        self.size = comm.Get_size()

    def send(self, dest: int, payload: bytes) -> None:
        self._check_peer(dest)
        try:
            self.comm.send(bytes(payload), dest=dest, tag=_TAG)
        except MPI.Exception as exc:
            raise CommunicationFailure(f"send {self.rank} -> {dest} failed: {exc}") from exc

    def recv(self, source: int) -> bytes:
        self._check_peer(source)
        try:
            return self.comm.recv(source=source, tag=_TAG)
        except MPI.Exception as exc:
            raise CommunicationFailure(f"recv {source} -> {self.rank} failed: {exc}") from exc

    def abort(self) -> None:
        log.debug("rank %d aborting MPI group", self.rank)
        self.comm.Abort(1)


def world_endpoint() -> MPIEndpoint:
    return MPIEndpoint(MPI.COMM_WORLD)
