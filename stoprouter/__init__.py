from .exceptions import DuplicateNodeError, DuplicateStopError, InvariantViolation, NoNameError, TransportError
from .network import Network
from .routing import INFINITY, RoutingEntry, RoutingTable
from .stop import Stop
from .utils import euclidean, manhattan

__all__ = [
    "INFINITY", "RoutingEntry", "RoutingTable", "Stop", "Network",
    "TransportError", "NoNameError", "DuplicateNodeError", "DuplicateStopError", "InvariantViolation",
    "manhattan", "euclidean",
]
