from __future__ import annotations
import json, os
from typing import Callable, Dict, List, Optional, Tuple

from .network import Network
from .stop import Stop

REDIS_HOST = os.getenv("REDIS_HOST", "localhost")
REDIS_PORT = int(os.getenv("REDIS_PORT", "6379"))
REDIS_PASSWORD = os.getenv("REDIS_PASSWORD") or None
TTL_DEFAULT = int(os.getenv("TTL_DEFAULT", "8"))

def _load(path: str, kind: str) -> dict:
    with open(path, "r", encoding="utf-8") as f: data = json.load(f)
    if not isinstance(data, dict) or data.get("type") != kind:
        raise ValueError(f"{path}: expected a '{kind}' config, got {data.get('type') if isinstance(data, dict) else data!r}")
    return data["config"]

class StopsConfig:
    def __init__(self, positions: Dict[str, Tuple[int, int]]): self.positions=positions
    @staticmethod
    def load(path: str) -> "StopsConfig":
        # coordinates are validated by Stop, never truncated here
        return StopsConfig(positions={name: (xy[0], xy[1]) for name, xy in _load(path, "stops").items()})
    def position_of(self, name: str) -> Tuple[int, int]: return self.positions[name]
    def all_names(self) -> List[str]: return list(self.positions.keys())

class TopologyConfig:
    def __init__(self, neighbors: Dict[str, List[str]]):
        for name, nbrs in neighbors.items():
            if not isinstance(nbrs, list):
                raise ValueError(f"neighbours of {name!r} must be a list of stop names, got {type(nbrs).__name__}")
        self.neighbors={n: list(v) for n, v in neighbors.items()}
    @staticmethod
    def load(path: str) -> "TopologyConfig": return TopologyConfig(neighbors=_load(path, "topo"))
    def neighbors_of(self, name: str) -> List[str]: return list(self.neighbors.get(name, []))
    def edges(self) -> List[Tuple[str, str]]:
        seen = set(); out = []
        for u, nbrs in self.neighbors.items():
            for v in nbrs:
                key = frozenset((u, v))
                if key in seen or u == v: continue
                seen.add(key); out.append((u, v))
        return out

def build_network(stops: StopsConfig, topo: TopologyConfig, metric: Optional[Callable[[Stop, Stop], int]] = None) -> Network:
    network = Network()
    for name, (x, y) in stops.positions.items():
        network.add_stop(Stop(name, x, y, metric=metric))
    for u, v in topo.edges():
        network.add_edge(u, v)
    return network
