from __future__ import annotations
import logging, sys, threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional

from .exceptions import InvariantViolation

if TYPE_CHECKING:
    from .stop import Stop

log = logging.getLogger(__name__)

# cost reported for destinations the table has never heard of; never stored
INFINITY = sys.maxsize

# one convergence pass at a time, network-wide
_SYNC_LOCK = threading.RLock()


@dataclass(frozen=True)
class RoutingEntry:
    next_hop: "Stop"
    cost: int


class RoutingTable:
    """Maps destination stops to the next stop and the cost of getting there.

    Every table starts out knowing only its own stop (cost 0). Tables learn
    about the rest of the network by pushing their entries to adjacent
    tables until nothing changes anywhere (see synchronise()).
    """

    def __init__(self, initial: "Stop"):
        self.initial = initial
        self._entries: Dict["Stop", RoutingEntry] = {initial: RoutingEntry(initial, 0)}

    def get_stop(self) -> "Stop":
        return self.initial

    def entries(self) -> Dict["Stop", RoutingEntry]:
        return dict(self._entries)

    def __contains__(self, destination) -> bool:
        return destination in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"RoutingTable({self.initial.name}, {len(self._entries)} entries)"

    def add_neighbour(self, neighbour: "Stop") -> None:
        """Adds neighbour as an adjacent stop, then re-converges the network.

        The adjacency is registered even if the existing entry for neighbour
        is already at least as cheap as the direct distance.
        """
        with _SYNC_LOCK:
            distance = self.initial.distance_to(neighbour)
            current = self._entries.get(neighbour)
            if current is None or distance < current.cost:
                self._entries[neighbour] = RoutingEntry(neighbour, distance)
            self.initial.add_neighbouring_stop(neighbour)
            log.debug(f"{self.initial.name} -- {neighbour.name} ({distance})")
            self.synchronise()

    def add_or_update_entry(self, destination: "Stop", new_cost: int, intermediate: "Stop") -> bool:
        with _SYNC_LOCK:
            current = self._entries.get(destination)
            # ties are rejected so equal-cost paths never keep propagating
            if current is not None and new_cost >= current.cost:
                return False
            self._entries[destination] = RoutingEntry(intermediate, new_cost)
            return True

    def cost_to(self, stop: Optional["Stop"]) -> int:
        entry = self._entries.get(stop)
        return INFINITY if entry is None else entry.cost

    def get_costs(self) -> Dict["Stop", int]:
        with _SYNC_LOCK:
            return {dest: entry.cost for dest, entry in self._entries.items()}

    def next_stop(self, destination: Optional["Stop"]) -> Optional["Stop"]:
        if destination is None:
            return None
        entry = self._entries.get(destination)
        return None if entry is None else entry.next_hop

    def transfer_entries(self, other: "Stop") -> bool:
        """Pushes this table's entries into the table of the adjacent stop other.

        Returns True if any entry of the other table was added or improved.
        """
        with _SYNC_LOCK:
            if not self.initial.is_neighbour(other):
                raise InvariantViolation(f"cannot transfer entries from {self.initial.name} to non-adjacent stop {other.name}")
            distance = self.initial.distance_to(other)
            other_table = other.get_routing_table()
            changed = False
            for destination, entry in list(self._entries.items()):
                if other_table.add_or_update_entry(destination, entry.cost + distance, self.initial):
                    changed = True
            return changed

    def traverse_network(self) -> List["Stop"]:
        """Returns every stop reachable from this table's stop, itself first."""
        traversed: List["Stop"] = []
        seen = set()
        stack = [self.initial]
        while stack:
            current = stack.pop()
            if current in seen:
                continue
            seen.add(current)
            traversed.append(current)
            # reversed so the first neighbour is visited first
            for neighbour in reversed(current.get_neighbours()):
                if neighbour not in seen:
                    stack.append(neighbour)
        return traversed

    def synchronise(self) -> None:
        """Exchanges entries across the reachable network until a fixed point.

        Every accepted update strictly lowers a non-negative cost for one of
        finitely many (stop, destination) pairs, so the loop ends.
        """
        with _SYNC_LOCK:
            passes = 0
            while True:
                passes += 1
                changed = False
                for stop in self.traverse_network():
                    table = stop.get_routing_table()
                    for neighbour in stop.get_neighbours():
                        if table.transfer_entries(neighbour):
                            log.debug(f"pass {passes}: {stop.name} -> {neighbour.name} changed")
                            changed = True
                if not changed:
                    break
            log.debug(f"{self.initial.name}: converged after {passes} pass(es)")
