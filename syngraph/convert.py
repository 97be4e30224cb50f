"""
Hand a generated Graph to other tools.

Each function only iterates the graph (edges(), vertex_count()), so it
works the same on either backend and never mutates its input.
"""

import csv
from pathlib import Path
from typing import Union

import networkx as nx
import numpy as np
from scipy import sparse

from .graph import Graph


def to_networkx(graph: Graph) -> nx.Graph:
    """networkx Graph (MultiGraph if parallel edges are allowed) with nodes 0..n-1."""
    G = nx.MultiGraph() if graph.multigraph else nx.Graph()
    G.add_nodes_from(range(graph.vertex_count()))
    G.add_edges_from(graph.edges())
    return G


def to_scipy_sparse(graph: Graph, dtype=np.int64) -> sparse.csr_array:
    """
    Symmetric n x n CSR adjacency. Entry (u, v) counts the edges between u
    and v; a self-loop counts once on the diagonal.
    """
    n = graph.vertex_count()
    rows, cols = [], []
    for u, v in graph.edges():
        rows.append(u)
        cols.append(v)
        if u != v:
            rows.append(v)
            cols.append(u)
    row_arr = np.asarray(rows, dtype=np.int64)
    col_arr = np.asarray(cols, dtype=np.int64)
    data = np.ones(len(row_arr), dtype=dtype)
    # duplicate coordinates are summed, which is what parallel edges need
    return sparse.coo_array((data, (row_arr, col_arr)), shape=(n, n)).tocsr()


def write_edge_list(graph: Graph, path: Union[str, Path]) -> int:
    """Write edges as CSV rows of 'u,v' (0-based) under a header. Returns the row count."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with path.open("w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["u", "v"])
        for u, v in graph.edges():
            writer.writerow([u, v])
            count += 1
    return count
