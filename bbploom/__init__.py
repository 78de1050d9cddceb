__all__ = [
    "Plan",
    "plan",
    "plan_precision",
    "plan_terms",
    "make_context",
    "term",
    "assigned_terms",
    "local_sum",
    "encode",
    "decode",
    "select_role",
    "LocalGroup",
    "format_pi",
    "run_local",
    "run_worker",
    "BBPError",
    "UsageError",
    "SerializationOverflow",
    "CommunicationFailure",
]

from .accumulator import assigned_terms, local_sum
from .bbp import term
from .collector import select_role
from .errors import BBPError, CommunicationFailure, SerializationOverflow, UsageError
from .formats import format_pi
from .planner import Plan, make_context, plan, plan_precision, plan_terms
from .runner import run_local, run_worker
from .transport import LocalGroup
from .wire import decode, encode
