import heapq
import itertools
from collections import namedtuple

INF = float('inf')

Edge = namedtuple('Edge', ['to', 'weight'])


class PriorityQueue:
    """
    Min-heap frontier of (priority, sequence, node) entries.
    Equal priorities come out in insertion order, so nodes themselves are never compared.
    """

    def __init__(self):
        self._heap = []
        self._counter = itertools.count()

    def push(self, priority, node):
        heapq.heappush(self._heap, (priority, next(self._counter), node))

    def pop(self):
        priority, _, node = heapq.heappop(self._heap)
        return node, priority

    def __len__(self):
        return len(self._heap)


def iter_edges(graph, node):
    # accepts {node: [(to, weight), ...]} as well as {node: {to: weight}}
    edges = graph[node]
    if isinstance(edges, dict):
        return edges.items()
    return edges


def _search(graph, src, dst):
    if src not in graph or dst not in graph:
        return [], INF

    dist = {node: INF for node in graph} # initial value is INF for every nodes in graph
    dist[src] = 0
    parent = {node: None for node in graph}

    pq = PriorityQueue()
    for node in graph:
        pq.push(dist[node], node)

    while pq:
        node, current_dist = pq.pop()

        if node == dst:
            # reconstruct path
            path = []
            while node is not None:
                path.append(node)
                node = parent[node]
            path.reverse()
            if path[0] != src: # dst was never reached from src
                return [], INF
            return path, dist[dst]

        # skip outdated elements
        if current_dist > dist[node]:
            continue
        if dist[node] == INF: # unreachable, nothing to relax
            continue

        for neighbor, weight in iter_edges(graph, node):
            if neighbor not in dist: # dangling edge, target is not a node of graph
                continue
            new_dist = current_dist + weight
            if dist[neighbor] > new_dist: # dv > du + w
                dist[neighbor] = new_dist
                parent[neighbor] = node
                pq.push(new_dist, neighbor)

    return [], INF


def dijkstra(graph, src, dst):
    """
    Shortest path from src to dst as a list of nodes.
    Returns [] when either endpoint is not in graph or dst is unreachable, [src] when src == dst.
    """
    path, _ = _search(graph, src, dst)
    return path


def shortest_path(graph, src, dst):
    """Same search as dijkstra() but also returns the total weight (INF when there is no path)."""
    return _search(graph, src, dst)


if __name__ == "__main__":
    # demo
    graph = {
        'A': [Edge('B', 5)],
        'B': [Edge('A', 5), Edge('C', 3)],
        'C': [Edge('B', 3)],
    }
    path, cost = shortest_path(graph, 'A', 'C')
    print("Shortest path:", path)
    print("Total cost:", cost)
