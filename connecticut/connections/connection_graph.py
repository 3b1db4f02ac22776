"""
Node/edge view of a connection set with force-directed layout positions.

Nodes are the identifiers that appear in any connection, edges run from the
source to its follower. Positions come from networkx's spring layout
(Fruchterman-Reingold) centered on the drawing canvas.
"""

from typing import Any, Dict, List, Optional, Tuple
import networkx as nx
import numpy as np

from connecticut.utils.config import GRAPH_WIDTH, GRAPH_HEIGHT
from .connection_engine import Connection


def build_connection_graph(connections: List[Connection]) -> nx.DiGraph:
    """Build a directed graph with one edge per connection."""
    G = nx.DiGraph()
    for connection in connections:
        G.add_edge(connection.source, connection.follower)
    return G


def layout_connection_graph(
    G: nx.DiGraph,
    width: int = GRAPH_WIDTH,
    height: int = GRAPH_HEIGHT,
    seed: Optional[int] = None
) -> Dict[str, Tuple[float, float]]:
    """
    Compute force-directed node positions inside a width x height canvas.

    Args:
        G: Connection graph
        width: Canvas width
        height: Canvas height
        seed: Optional random seed for a reproducible layout

    Returns:
        Mapping of node to (x, y), empty for an empty graph
    """
    if G.number_of_nodes() == 0:
        return {}

    center = (width / 2, height / 2)
    # Keep a margin so nodes are not drawn on the canvas edge
    scale = min(width, height) * 0.4
    positions = nx.spring_layout(G, center=center, scale=scale, seed=seed)

    return {
        node: tuple(float(v) for v in np.round(pos, 2))
        for node, pos in positions.items()
    }


def connection_graph_to_dict(
    connections: List[Connection],
    width: int = GRAPH_WIDTH,
    height: int = GRAPH_HEIGHT,
    seed: Optional[int] = None
) -> Dict[str, Any]:
    """
    Node-link representation for a client-side renderer.

    Returns:
        {"width", "height", "nodes": [{"id", "x", "y"}], "links": [{"source", "target"}]}
    """
    G = build_connection_graph(connections)
    positions = layout_connection_graph(G, width=width, height=height, seed=seed)

    return {
        "width": width,
        "height": height,
        "nodes": [
            {"id": node, "x": positions[node][0], "y": positions[node][1]}
            for node in G.nodes
        ],
        "links": [
            {"source": source, "target": target}
            for source, target in G.edges
        ]
    }
