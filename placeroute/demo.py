"""Find the shortest route between two places on a ring of places.

Builds the ring network with random weights, runs Dijkstra for the chosen
start and end places, prints the route and optionally saves a picture of the
network with the route highlighted.
"""

import argparse

from placeroute.network_builder import N_PLACES, WEIGHT_RANGE, build_ring_network, place_name
from placeroute.pathfinding.dijkstra import shortest_path
from placeroute.pathfinding.route import describe_route
from placeroute.visualize_network import DEFAULT_PLOT, LAYOUTS, draw_graph_with_path


def build_parser():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--places", type=int, default=N_PLACES, help="number of places on the ring")
    parser.add_argument("--min-weight", type=int, default=WEIGHT_RANGE[0])
    parser.add_argument("--max-weight", type=int, default=WEIGHT_RANGE[1])
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--start", type=str, default=None, help="start place, e.g. A")
    parser.add_argument("--end", type=str, default=None, help="end place, e.g. E")
    parser.add_argument("--swap", action="store_true", help="exchange start and end")
    parser.add_argument("--plot", nargs="?", const=DEFAULT_PLOT, default=None,
                        help=f"save a picture of the route (default file: {DEFAULT_PLOT})")
    parser.add_argument("--layout", choices=LAYOUTS, default="polygon")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        graph = build_ring_network(args.places, (args.min_weight, args.max_weight), seed=args.seed)
    except ValueError as e:
        parser.error(str(e))

    start, end = args.start, args.end
    if args.swap:
        start, end = end, start

    for node, edges in graph.items():
        print(f"{place_name(node)}: " + ", ".join(f"{e.to} ({e.weight})" for e in edges))

    path, cost = [], float('inf')
    if start and end:
        path, cost = shortest_path(graph, start, end)

    print(describe_route(start, end, path))
    if len(path) > 1:
        print(f"Total weight: {cost}")

    if args.plot:
        draw_graph_with_path(graph, path, start, end, output_link=args.plot, layout=args.layout)
    return path


if __name__ == "__main__":
    main()
