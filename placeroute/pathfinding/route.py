from placeroute.pathfinding.dijkstra import iter_edges


def path_edges(path):
    # consecutive (u, v) hops of a path
    return list(zip(path[:-1], path[1:]))


def path_cost(graph, path):
    """
    Total weight of walking along path. With parallel edges the cheapest one is used.
    Raises ValueError if some hop has no edge in graph.
    """
    total = 0
    for u, v in path_edges(path):
        weights = [w for to, w in iter_edges(graph, u) if to == v] if u in graph else []
        if not weights:
            raise ValueError(f"Edge {u}->{v} not present in graph.")
        total += min(weights)
    return total


def describe_route(start, end, path):
    """Status line shown next to the map."""
    if start in (None, "") or end in (None, ""): # endpoint not selected yet
        return "Select start and end places"
    if len(path) > 1:
        return "Shortest path: " + " → ".join(str(n) for n in path)
    return "No path found"
