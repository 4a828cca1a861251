"""
graph.py — Immutable Weighted Graph
====================================
Single source of truth for the graph.  The stepper and the renderer
both read from this object; neither can change it.

Responsibilities:
  1. Validation on construction             (symmetry, positive weights, …)
  2. Adjacency queries                      (neighbors, weight, edges, …)
  3. Factory methods                        (edge list, adjacency-list text)
  4. Serialisation round-trip               (to_dict / from_dict)

Design decisions:
  - Adjacency is stored as {node: {neighbour: weight}}, copied on the way
    in and wrapped in MappingProxyType so callers only ever get read-only
    views.  A graph can therefore be shared by any number of steppers.
  - Undirected only.  graph[u][v] == graph[v][u] is checked, not assumed.
  - Node ids must be mutually orderable: the stepper breaks distance ties
    by ascending node id.
"""

import math
from numbers import Real
from types import MappingProxyType
from typing import (
    Any, Dict, FrozenSet, Hashable, Iterable, Iterator, List, Mapping, Optional, Tuple
)

from graph.errors import MalformedGraphError, UnknownNodeError


Node        = Hashable
Weight      = float
Adjacency   = Mapping[Node, Mapping[Node, Weight]]
EdgeTriple  = Tuple[Node, Node, Weight]


class WeightedGraph:
    """
    Attributes:
        _adj   : {node: MappingProxy({neighbour: weight})}, read-only
        _nodes : frozenset of every node id
        _order : node ids in ascending order (tie-break order)
    """

    __slots__ = ("_adj", "_nodes", "_order")

    def __init__(self, adjacency: Adjacency):
        if not isinstance(adjacency, Mapping):
            raise MalformedGraphError(
                f"Adjacency must be a mapping, got {type(adjacency).__name__}"
            )

        adj: Dict[Node, Dict[Node, Weight]] = {}
        for node, nbrs in adjacency.items():
            if not isinstance(nbrs, Mapping):
                raise MalformedGraphError(
                    f"Neighbours of {node!r} must be a mapping, got {type(nbrs).__name__}"
                )
            adj[node] = {nbr: _check_weight(node, nbr, w) for nbr, w in nbrs.items()}

        _validate(adj)

        try:
            order = sorted(adj)
        except TypeError as exc:
            raise MalformedGraphError(f"Node ids are not mutually orderable: {exc}") from exc

        self._adj   = MappingProxyType({n: MappingProxyType(nbrs) for n, nbrs in adj.items()})
        self._nodes = frozenset(adj)
        self._order = tuple(order)

    # ==================================================================
    # QUERIES
    # ==================================================================
    def nodes(self) -> FrozenSet[Node]:
        return self._nodes

    def sorted_nodes(self) -> Tuple[Node, ...]:
        """Node ids in ascending order."""
        return self._order

    def neighbors(self, node: Node) -> Mapping[Node, Weight]:
        """Read-only {neighbour: weight} view.  Raises UnknownNodeError."""
        try:
            return self._adj[node]
        except (KeyError, TypeError):
            raise UnknownNodeError(node) from None

    def weight(self, u: Node, v: Node) -> Optional[Weight]:
        """Weight of edge u–v, or None if the two nodes are not adjacent."""
        nbrs = self.neighbors(u)
        if v not in self:
            raise UnknownNodeError(v)
        return nbrs.get(v)

    def has_edge(self, u: Node, v: Node) -> bool:
        return u in self and v in self._adj[u]

    def edges(self) -> Iterator[EdgeTriple]:
        """Every undirected edge exactly once, as (u, v, w) with u < v."""
        for u in self._order:
            for v in sorted(self._adj[u]):
                if u < v:
                    yield u, v, self._adj[u][v]

    def edge_count(self) -> int:
        return sum(len(nbrs) for nbrs in self._adj.values()) // 2

    # ==================================================================
    # FACTORIES
    # ==================================================================
    @classmethod
    def from_edges(cls, edges: Iterable[EdgeTriple], nodes: Iterable[Node] = ()) -> "WeightedGraph":
        """
        Build from (u, v, w) triples.  Each edge is mirrored automatically;
        listing the same pair twice is fine as long as the weight agrees.
        `nodes` adds isolated nodes.
        """
        adj: Dict[Node, Dict[Node, Weight]] = {n: {} for n in nodes}
        for u, v, w in edges:
            for a, b in ((u, v), (v, u)):
                existing = adj.setdefault(a, {}).get(b)
                if existing is not None and existing != w:
                    raise MalformedGraphError(
                        f"Duplicate edge {u!r}-{v!r} with differing weights ({existing} vs {w})"
                    )
                adj[a][b] = w
        return cls(adj)

    @classmethod
    def from_adjacency_list(cls, text: str) -> "WeightedGraph":
        """
        Parse a simple text adjacency list.

        Supported formats (one node per line):
            a: b d              → a–b, a–d  (weight 1)
            a: b(22) d(8)       → a–b weight 22, a–d weight 8
            a -> b(22), d(8)    → alternate arrow syntax, comma separated
            a → b(22)

        Lines starting with '#' are comments.  Edges only need to be
        declared from one side; a pair declared from both sides must
        agree on the weight.
        """
        nodes: List[str] = []
        edges: List[EdgeTriple] = []

        for lineno, raw in enumerate(text.strip().splitlines(), start=1):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue

            if ":" in line:
                src, rest = line.split(":", 1)
            elif "→" in line:
                src, rest = line.split("→", 1)
            elif "->" in line:
                src, rest = line.split("->", 1)
            else:
                raise MalformedGraphError(f"Line {lineno}: expected 'node: neighbours', got {raw!r}")

            src = src.strip()
            if not src:
                raise MalformedGraphError(f"Line {lineno}: missing node name")
            nodes.append(src)

            for token in rest.replace(",", " ").split():
                if "(" in token and token.endswith(")"):
                    tgt, w_str = token[:-1].split("(", 1)
                    try:
                        w = float(w_str)
                    except ValueError:
                        raise MalformedGraphError(
                            f"Line {lineno}: bad weight {w_str!r} for edge {src}-{tgt}"
                        ) from None
                else:
                    tgt, w = token, 1.0
                tgt = tgt.strip()
                if not tgt:
                    raise MalformedGraphError(f"Line {lineno}: missing neighbour name in {token!r}")
                edges.append((src, tgt, w))

        return cls.from_edges(edges, nodes=nodes)

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "nodes": list(self._order),
            "edges": [[u, v, w] for u, v, w in self.edges()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WeightedGraph":
        return cls.from_edges(
            ((u, v, w) for u, v, w in data.get("edges", [])),
            nodes=data.get("nodes", []),
        )

    # ==================================================================
    # DUNDER
    # ==================================================================
    def __contains__(self, node: Any) -> bool:
        try:
            return node in self._nodes
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._order)

    def __eq__(self, other) -> bool:
        return isinstance(other, WeightedGraph) and self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(tuple(self.edges()))

    def __repr__(self) -> str:
        return f"WeightedGraph(nodes={len(self)}, edges={self.edge_count()})"


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------
def _check_weight(u: Node, v: Node, w: Any) -> Weight:
    if isinstance(w, bool) or not isinstance(w, Real):
        raise MalformedGraphError(f"Edge {u!r}-{v!r}: weight must be a number, got {w!r}")
    if not math.isfinite(w) or w <= 0:
        raise MalformedGraphError(f"Edge {u!r}-{v!r}: weight must be positive and finite, got {w!r}")
    return w


def _validate(adj: Dict[Node, Dict[Node, Weight]]) -> None:
    for u, nbrs in adj.items():
        for v, w in nbrs.items():
            if u == v:
                raise MalformedGraphError(f"Self-loop on {u!r}")
            if v not in adj:
                raise MalformedGraphError(f"Edge {u!r}-{v!r} points at undeclared node {v!r}")
            back = adj[v].get(u)
            if back is None:
                raise MalformedGraphError(f"Edge {u!r}-{v!r} has no reverse entry")
            if back != w:
                raise MalformedGraphError(
                    f"Asymmetric weight on {u!r}-{v!r}: {w} vs {back}"
                )
