import math

import matplotlib
matplotlib.use("Agg")

import pytest

from placeroute.network_builder import build_ring_network
from placeroute.pathfinding.dijkstra import Edge, dijkstra
from placeroute.visualize_network import draw_graph_with_path, place_positions, segment_graph


def test_place_positions_form_a_polygon():
    pos = place_positions("ABCD")
    assert pos['A'] == pytest.approx((0.0, 1.0), abs=1e-9)
    assert pos['B'] == pytest.approx((1.0, 0.0), abs=1e-9)
    assert pos['C'] == pytest.approx((0.0, -1.0), abs=1e-9)
    for x, y in pos.values():
        assert math.hypot(x, y) == pytest.approx(1.0)


def test_place_positions_empty():
    assert place_positions([]) == {}


def test_segment_graph_one_segment_per_pair():
    graph = build_ring_network(9, seed=2)
    H = segment_graph(graph)
    assert H.number_of_nodes() == 9
    assert H.number_of_edges() == 9


def test_segment_graph_labels_forward_direction():
    graph = {'B': [Edge('A', 7), Edge('B', 1)], 'A': [Edge('B', 5)]}
    H = segment_graph(graph)
    assert H['A']['B']['weight'] == 5
    assert not H.has_edge('B', 'B')


def test_draw_graph_with_path(tmp_path):
    graph = build_ring_network(9, seed=5)
    path = dijkstra(graph, 'A', 'E')
    output = tmp_path / "plots" / "route.png"
    saved = draw_graph_with_path(graph, path, 'A', 'E', output_link=str(output))
    assert saved == str(output)
    assert output.exists() and output.stat().st_size > 0


@pytest.mark.parametrize("layout", ["spring", "shell"])
def test_draw_graph_other_layouts(tmp_path, layout):
    graph = build_ring_network(5, seed=5)
    output = tmp_path / f"{layout}.png"
    draw_graph_with_path(graph, [], 'A', None, output_link=str(output), layout=layout)
    assert output.exists()


def test_draw_graph_unknown_layout(tmp_path):
    with pytest.raises(ValueError):
        draw_graph_with_path({'A': []}, output_link=str(tmp_path / "x.png"), layout="kamada")
