from __future__ import annotations
import argparse, asyncio, sys

from .config import StopsConfig, TopologyConfig, build_network
from .exceptions import TransportError
from .publish import publish_tables
from .utils import METRICS, make_logger, pretty_table

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Distance-vector routing tables for a network of stops")
    ap.add_argument("--stops", required=True, help="Path to stops JSON (name -> [x, y])")
    ap.add_argument("--topo", required=True, help="Path to topology JSON (name -> neighbours)")
    ap.add_argument("--metric", default="manhattan", choices=sorted(METRICS))
    ap.add_argument("--route", nargs=2, metavar=("SRC", "DST"), help="Print the path between two stops")
    ap.add_argument("--publish", action="store_true", help="Publish converged tables to redis")
    ap.add_argument("--log", default="INFO")
    args = ap.parse_args(argv)
    log = make_logger("stoprouter", args.log)

    try:
        network = build_network(StopsConfig.load(args.stops), TopologyConfig.load(args.topo), metric=METRICS[args.metric])
        path = network.route(*args.route) if args.route else None
    except (TransportError, ValueError, KeyError, OSError) as e:
        log.error(f"cannot build network: {e}")
        return 1

    if args.route:
        if not path:
            print(f"{args.route[1]} is unreachable from {args.route[0]}")
            return 1
        cost = path[0].get_routing_table().cost_to(path[-1])
        print(f"{' -> '.join(s.name for s in path)}\t{cost}")
    else:
        for stop in network:
            print(f"== {stop.name}")
            print(pretty_table(stop.get_routing_table()))

    if args.publish:
        asyncio.run(publish_tables(network))
    return 0

if __name__ == "__main__":
    sys.exit(main())
