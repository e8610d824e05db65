from __future__ import annotations
from typing import Callable, Dict, List, Optional

from .exceptions import InvariantViolation, NoNameError
from .routing import RoutingTable
from .utils import manhattan


def _coordinate(value) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or (isinstance(value, float) and not value.is_integer()):
        raise ValueError(f"stop coordinates must be integers, got {value!r}")
    return int(value)


class Stop:
    """A named location on an integer grid; stops are identified by name."""

    def __init__(self, name: str, x: int, y: int, metric: Optional[Callable[["Stop", "Stop"], int]] = None):
        if not name or not isinstance(name, str):
            raise NoNameError(name)
        self.name = name
        self.x = _coordinate(x); self.y = _coordinate(y)
        self.metric = metric or manhattan
        self._neighbours: Dict[str, Stop] = {}
        self._routing_table = RoutingTable(self)

    def __eq__(self, other):
        if not isinstance(other, Stop):
            return NotImplemented
        return self.name == other.name

    def __hash__(self): return hash(self.name)

    def __repr__(self): return f"Stop({self.name!r}, {self.x}, {self.y})"

    def distance_to(self, other: "Stop") -> int:
        # both ends must price the edge the same way
        if other.metric is not self.metric:
            raise InvariantViolation(f"stops {self.name} and {other.name} use different distance metrics")
        return self.metric(self, other)

    def add_neighbouring_stop(self, other: "Stop") -> None:
        # edges are undirected and registered once
        if other == self:
            return
        self._neighbours.setdefault(other.name, other)
        other._neighbours.setdefault(self.name, self)

    def get_neighbours(self) -> List["Stop"]: return list(self._neighbours.values())

    def is_neighbour(self, other: "Stop") -> bool: return other.name in self._neighbours

    def get_routing_table(self) -> RoutingTable: return self._routing_table
