from __future__ import annotations
import heapq

import pytest

from stoprouter import Network, Stop, euclidean


def dijkstra(network, start):
    # reference costs computed with global knowledge of the graph
    dist = {s: float("inf") for s in network}
    dist[start] = 0
    pq = [(0, start.name, start)]
    while pq:
        d, _, u = heapq.heappop(pq)
        if d != dist[u]:
            continue
        for v in u.get_neighbours():
            nd = d + u.distance_to(v)
            if nd < dist[v]:
                dist[v] = nd
                heapq.heappush(pq, (nd, v.name, v))
    return {s: c for s, c in dist.items() if c != float("inf")}


@pytest.fixture
def triangle():
    """A(0,0), B(3,4), C(3,0) measured with straight-line distance; edges A-B, B-C."""
    a, b, c = Stop("A", 0, 0, metric=euclidean), Stop("B", 3, 4, metric=euclidean), Stop("C", 3, 0, metric=euclidean)
    network = Network()
    network.add_stops(a, b, c)
    network.add_edge(a, b)
    network.add_edge(b, c)
    return network, a, b, c


@pytest.fixture
def write_config(tmp_path):
    import json

    def _write(name, kind, config):
        path = tmp_path / name
        path.write_text(json.dumps({"type": kind, "config": config}), encoding="utf-8")
        return str(path)
    return _write
