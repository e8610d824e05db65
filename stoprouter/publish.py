from __future__ import annotations
import logging
from typing import Any, Dict, Optional

import redis.asyncio as redis

from .config import REDIS_HOST, REDIS_PASSWORD, REDIS_PORT
from .network import Network
from .protocol import encode, make_msg
from .stop import Stop

log = logging.getLogger(__name__)

def build_info(stop: Stop, neighbour: Stop, ttl: Optional[int] = None) -> Dict[str, Any]:
    """Distance vector of stop, addressed to neighbour."""
    table = stop.get_routing_table()
    entries = table.entries()
    payload = {
        "vector": {dest.name: e.cost for dest, e in entries.items()},
        "next": {dest.name: e.next_hop.name for dest, e in entries.items()},
    }
    return make_msg("dvr", "info", stop.name, neighbour.name, ttl=ttl, payload=payload)

async def publish_tables(network: Network, client=None, channels: Optional[Dict[str, str]] = None) -> int:
    """Sends every stop's table to each of its neighbours' channels.

    A client is created from REDIS_HOST/REDIS_PORT/REDIS_PASSWORD (and closed
    afterwards) when none is given. Returns the number of messages published.
    """
    channels = channels or {}
    r = client if client is not None else redis.Redis(host=REDIS_HOST, port=REDIS_PORT, password=REDIS_PASSWORD)
    sent = 0
    try:
        for stop in network:
            for neighbour in stop.get_neighbours():
                ch = channels.get(neighbour.name, neighbour.name)
                await r.publish(ch, encode(build_info(stop, neighbour)))
                sent += 1
    finally:
        if client is None:
            await r.aclose()
    log.info(f"published {sent} routing table(s)")
    return sent
