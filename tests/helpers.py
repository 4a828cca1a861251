"""Shared graph builders and a brute-force reference for the stepper tests."""

import math
import random
from typing import Dict, Hashable

from graph import WeightedGraph


def random_graph(seed: int, n: int = 7, p: float = 0.35, max_weight: int = 9) -> WeightedGraph:
    """Erdős–Rényi style graph on nodes 0..n-1; may be disconnected."""
    rng = random.Random(seed)
    edges = []
    for i in range(n):
        for j in range(i + 1, n):
            if rng.random() < p:
                edges.append((i, j, rng.randint(1, max_weight)))
    return WeightedGraph.from_edges(edges, nodes=range(n))


def brute_force_distances(graph: WeightedGraph, start: Hashable) -> Dict[Hashable, float]:
    """Bellman-Ford style relaxation of every edge |V| times."""
    dist = {n: math.inf for n in graph}
    dist[start] = 0
    for _ in range(len(graph)):
        for u, v, w in graph.edges():
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
            if dist[v] + w < dist[u]:
                dist[u] = dist[v] + w
    return dist
