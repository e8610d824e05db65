from __future__ import annotations
import logging
from typing import Dict, Iterator, List, Union

from .exceptions import DuplicateNodeError
from .stop import Stop

log = logging.getLogger(__name__)

StopRef = Union[Stop, str]


class Network:
    def __init__(self):
        self._stops: Dict[str, Stop] = {}

    def __iter__(self) -> Iterator[Stop]: return iter(list(self._stops.values()))

    def __len__(self) -> int: return len(self._stops)

    def __contains__(self, stop) -> bool:
        name = stop.name if isinstance(stop, Stop) else stop
        return name in self._stops

    def add_stop(self, stop: Stop) -> None:
        if stop.name in self._stops:
            raise DuplicateNodeError(stop.name)
        self._stops[stop.name] = stop
        log.info(f"added stop {stop.name} at ({stop.x},{stop.y})")

    def add_stops(self, *stops: Stop) -> None:
        for stop in stops:
            self.add_stop(stop)

    def get_stop(self, name: str) -> Stop:
        if name not in self._stops:
            raise KeyError(f"unknown stop {name!r}")
        return self._stops[name]

    def get_stops(self) -> List[Stop]: return list(self._stops.values())

    def _resolve(self, stop: StopRef) -> Stop:
        return self.get_stop(stop.name if isinstance(stop, Stop) else stop)

    def add_edge(self, a: StopRef, b: StopRef) -> None:
        """Connects two stops already in the network and re-converges."""
        self._resolve(a).get_routing_table().add_neighbour(self._resolve(b))

    def route(self, source: StopRef, destination: StopRef) -> List[Stop]:
        """Follows next hops from source to destination.

        Returns the stops visited, both ends included, or an empty list if
        destination is unreachable from source.
        """
        current, target = self._resolve(source), self._resolve(destination)
        path = [current]
        # stops linked by add_neighbour need not be in this network, so bound by what is reachable
        reachable = len(current.get_routing_table().traverse_network())
        while current != target:
            nxt = current.get_routing_table().next_stop(target)
            # more hops than reachable stops means the tables have not converged
            if nxt is None or len(path) > reachable:
                return []
            path.append(nxt)
            current = nxt
        return path
