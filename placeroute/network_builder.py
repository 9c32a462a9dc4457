import random

import networkx as nx

from placeroute.pathfinding.dijkstra import Edge, iter_edges

N_PLACES = 9
WEIGHT_RANGE = (5, 70) # inclusive, random integer weight per directed edge


def _check_weight_range(weight_range):
    low, high = weight_range
    if low < 0 or high < low:
        raise ValueError(f"Invalid weight range {weight_range}: need 0 <= low <= high.")
    return low, high


def place_name(node):
    return f"Place {node}"


def add_undirected_edge(graph, u, v, weight, reverse_weight=None):
    """
    Insert u -> v and v -> u. The reverse direction may carry its own weight.
    """
    if reverse_weight is None:
        reverse_weight = weight
    if weight < 0 or reverse_weight < 0:
        raise ValueError(f"Negative weight on edge {u}-{v} is not supported.")
    graph.setdefault(u, []).append(Edge(v, weight))
    graph.setdefault(v, []).append(Edge(u, reverse_weight))
    return graph


def build_ring_network(n_places=N_PLACES, weight_range=WEIGHT_RANGE, seed=None):
    """
    Places 'A', 'B', ... on a ring, each linked to its next and previous neighbour.
    Both directions of a ring segment get independent random weights.
    """
    if not 1 <= n_places <= 26:
        raise ValueError(f"n_places must be between 1 and 26, got {n_places}.")
    low, high = _check_weight_range(weight_range)
    rng = random.Random(seed)

    labels = [chr(65 + i) for i in range(n_places)]
    graph = {}
    for i, node in enumerate(labels):
        next_node = labels[(i + 1) % n_places]
        prev_node = labels[(i - 1) % n_places]
        graph[node] = [
            Edge(next_node, rng.randint(low, high)),
            Edge(prev_node, rng.randint(low, high)),
        ]
    return graph


def build_random_network(n_nodes=15, edge_prob=0.4, weight_range=(1, 11), seed=None):
    """
    Arbitrary topology on top of an Erdos-Renyi skeleton.
    Every undirected edge becomes two directed edges with their own weights.
    The result may be disconnected.
    """
    if n_nodes < 0:
        raise ValueError(f"n_nodes must be non-negative, got {n_nodes}.")
    if not 0 <= edge_prob <= 1:
        raise ValueError(f"edge_prob must be within [0, 1], got {edge_prob}.")
    low, high = _check_weight_range(weight_range)
    rng = random.Random(seed)

    G_temp = nx.erdos_renyi_graph(n=n_nodes, p=edge_prob, seed=seed)
    mapping = {n: f"n{n + 1}" for n in G_temp.nodes()}

    graph = {mapping[n]: [] for n in G_temp.nodes()}
    for u, v in G_temp.edges():
        add_undirected_edge(graph, mapping[u], mapping[v], rng.randint(low, high), rng.randint(low, high))
    return graph


def to_networkx(graph):
    # MultiDiGraph keeps parallel edges apart
    G = nx.MultiDiGraph()
    G.add_nodes_from(graph)
    for u in graph:
        for v, w in iter_edges(graph, u):
            G.add_edge(u, v, weight=w)
    return G


if __name__ == "__main__":
    ring = build_ring_network(seed=42)
    for node, edges in ring.items():
        print(place_name(node), "->", ", ".join(f"{e.to} ({e.weight})" for e in edges))
