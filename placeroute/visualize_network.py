import os
import random

import matplotlib.pyplot as plt
from matplotlib.patches import Patch
import networkx as nx
import numpy as np

from placeroute.network_builder import build_ring_network
from placeroute.pathfinding.dijkstra import dijkstra, iter_edges
from placeroute.pathfinding.route import describe_route, path_cost, path_edges

DEFAULT_PLOT = "plots/route.png"
PATH_COLOR = "#7C3AED"
NODE_COLORS = {
    'start': '#38bdf8',
    'end': '#a21caf',
    'place': '#818cf8',
}
LAYOUTS = ("polygon", "spring", "shell")


def place_positions(nodes):
    """
    Regular polygon of unit radius, first place at the top, going clockwise.
    """
    nodes = list(nodes)
    angles = 2 * np.pi * np.arange(len(nodes)) / max(len(nodes), 1) - np.pi / 2
    return {node: (float(np.cos(a)), float(-np.sin(a))) for node, a in zip(nodes, angles)}


def segment_graph(graph):
    """
    Undirected view of graph with one segment per connected pair, used for drawing.
    A segment is labeled with the weight of its edge in the direction u < v when there is one.
    """
    H = nx.Graph()
    H.add_nodes_from(graph)
    for u in graph:
        for v, w in iter_edges(graph, u):
            if u == v: # self loops are not drawn
                continue
            forward = str(u) < str(v)
            if not H.has_edge(u, v):
                H.add_edge(u, v, weight=w, forward=forward)
            elif forward and not H[u][v]['forward']:
                H[u][v].update(weight=w, forward=True)
    return H


def draw_graph_with_path(graph, path=None, start=None, end=None, output_link=DEFAULT_PLOT, layout="polygon"):
    H = segment_graph(graph)

    if layout == "polygon":
        pos = place_positions(H.nodes())
    elif layout == "shell":
        pos = nx.shell_layout(H)
    elif layout == "spring":
        pos = nx.spring_layout(H, seed=42, k=2.0)
    else:
        raise ValueError(f"Unknown layout {layout!r}, expected one of {LAYOUTS}.")

    plt.figure(figsize=(10, 8))

    node_colors = [
        NODE_COLORS['start'] if n == start else NODE_COLORS['end'] if n == end else NODE_COLORS['place']
        for n in H.nodes()
    ]
    nx.draw_networkx_nodes(H, pos, node_color=node_colors, node_size=700)
    nx.draw_networkx_labels(H, pos, font_size=11, font_color='white', font_weight='bold')
    nx.draw_networkx_edges(H, pos, edge_color='#cbd5e1', width=2.0)
    nx.draw_networkx_edge_labels(H, pos, edge_labels=nx.get_edge_attributes(H, 'weight'), font_size=8)

    # highlight the route, hop by hop in travel direction
    if path and len(path) > 1:
        hops = path_edges(path)
        route = nx.DiGraph()
        route.add_edges_from(hops)
        nx.draw_networkx_edges(
            route, pos, edgelist=hops,
            width=4.0, edge_color=PATH_COLOR, style='dashed',
            arrows=True, arrowstyle='->', arrowsize=18
        )
        hop_labels = {(a, b): path_cost(graph, [a, b]) for a, b in hops}
        nx.draw_networkx_edge_labels(
            route, pos,
            edge_labels=hop_labels,
            font_color=PATH_COLOR,
            font_size=10,
            bbox=dict(facecolor='white', edgecolor='none', alpha=0.8)
        )

    legend_elements = [
        Patch(facecolor=color, label=name.capitalize())
        for name, color in NODE_COLORS.items()
    ]
    legend_elements.append(Patch(facecolor=PATH_COLOR, label='Route'))
    plt.legend(handles=legend_elements, loc='upper left', frameon=True)

    plt.title(describe_route(start, end, path or []), fontsize=12)
    plt.axis('off')
    plt.tight_layout()
    os.makedirs(os.path.dirname(output_link) or ".", exist_ok=True)
    plt.savefig(output_link)
    plt.close()
    print(f"✅ Saved {output_link}")
    return output_link


if __name__ == "__main__":
    graph = build_ring_network()
    src, dst = random.sample(sorted(graph), 2)
    draw_graph_with_path(graph, dijkstra(graph, src, dst), src, dst)
