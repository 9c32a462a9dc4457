import pytest

from placeroute.pathfinding.dijkstra import Edge
from placeroute.pathfinding.route import describe_route, path_cost, path_edges


def test_path_edges():
    assert path_edges(['A', 'B', 'C']) == [('A', 'B'), ('B', 'C')]
    assert path_edges(['A']) == []
    assert path_edges([]) == []


def test_path_cost_uses_cheapest_parallel_edge():
    graph = {'A': [Edge('B', 9), Edge('B', 2)], 'B': [Edge('C', 4)], 'C': []}
    assert path_cost(graph, ['A', 'B', 'C']) == 6


def test_path_cost_trivial_paths():
    graph = {'A': []}
    assert path_cost(graph, []) == 0
    assert path_cost(graph, ['A']) == 0


def test_path_cost_missing_edge():
    graph = {'A': [Edge('B', 1)], 'B': []}
    with pytest.raises(ValueError):
        path_cost(graph, ['B', 'A'])
    with pytest.raises(ValueError):
        path_cost(graph, ['Z', 'A'])


def test_describe_route_needs_both_endpoints():
    assert describe_route(None, 'A', []) == "Select start and end places"
    assert describe_route('A', "", []) == "Select start and end places"


def test_describe_route_no_path():
    assert describe_route('A', 'Z', []) == "No path found"
    # a trivial one-place route is reported the same way
    assert describe_route('A', 'A', ['A']) == "No path found"


def test_describe_route_real_path():
    assert describe_route('A', 'C', ['A', 'B', 'C']) == "Shortest path: A → B → C"
