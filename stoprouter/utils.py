from __future__ import annotations
import logging, math
from typing import TYPE_CHECKING, Callable, Dict

if TYPE_CHECKING:
    from .routing import RoutingTable
    from .stop import Stop

def make_logger(name: str, level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s","%H:%M:%S"))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger

def manhattan(a: "Stop", b: "Stop") -> int: return abs(a.x - b.x) + abs(a.y - b.y)

def euclidean(a: "Stop", b: "Stop") -> int: return int(round(math.hypot(a.x - b.x, a.y - b.y)))

METRICS: Dict[str, Callable[["Stop", "Stop"], int]] = {"manhattan": manhattan, "euclidean": euclidean}

def pretty_table(table: "RoutingTable") -> str:
    lines = ["dest\tcost\tnext"]
    for dest, entry in sorted(table.entries().items(), key=lambda kv: kv[0].name):
        lines.append(f"{dest.name}\t{entry.cost}\t{entry.next_hop.name}")
    return "\n".join(lines)
