#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SeedWeaver v0.1.0

Graph Expander contract and a reference in-memory implementation.

The traversal core never owns graph storage. Everything it knows about the
graph arrives through a GraphExpander: neighbour lists, degrees and the base
priority of a vertex. get_neighbors() is the only call the engine blocks on,
so expanders backed by a database, a remote API or a lazy loader plug in
without changes to the core.

Author: SeedWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from abc import ABC, abstractmethod
from collections import defaultdict
from typing import Any, Dict, Hashable, Iterable, List, NamedTuple, Optional, Sequence, Tuple
import logging

logger = logging.getLogger(__name__)

DEFAULT_RELATIONSHIP = "edge"


class Neighbor(NamedTuple):
    """An edge incident to a vertex, seen from that vertex."""
    target_id: Hashable
    relationship_type: str = DEFAULT_RELATIONSHIP


class GraphExpander(ABC):
    """
    Abstract graph access used by the expansion engine.

    Implementations must make get_neighbors() idempotent: the engine and the
    salience estimator may call it more than once for the same vertex.
    """

    @abstractmethod
    def get_neighbors(self, node_id: Hashable) -> List[Neighbor]:
        """Return every edge incident to node_id."""

    @abstractmethod
    def get_degree(self, node_id: Hashable) -> int:
        """Return the non-negative degree of node_id."""

    @abstractmethod
    def add_edge(self, source: Hashable, target: Hashable, relationship_type: str) -> None:
        """Record that the engine traversed source -> target. Best effort."""

    @abstractmethod
    def get_node(self, node_id: Hashable) -> Optional[Any]:
        """Return node payload, or None if unknown."""

    def calculate_priority(
        self,
        node_id: Hashable,
        node_weight: float = 1.0,
        epsilon: float = 1e-10,
    ) -> float:
        """
        Base priority of a vertex (lower is expanded first).

        Args:
            node_id: Vertex to score
            node_weight: Weight dividing the degree
            epsilon: Guard against a zero weight

        Returns:
            degree / (node_weight + epsilon)
        """
        return self.get_degree(node_id) / (node_weight + epsilon)


class InMemoryGraphExpander(GraphExpander):
    """
    Adjacency-list expander over an in-memory edge list.

    Neighbour lists keep edge insertion order, which makes every run over
    the same input reproducible. Undirected graphs store each edge in both
    directions; self-loops are stored once.

    Attributes:
        directed: Whether edges are one-way
        node_weights: Optional per-vertex weights used by calculate_priority
        added_edges: Log of (source, target, relationship) reported by the engine
    """

    def __init__(
        self,
        directed: bool = False,
        node_weights: Optional[Dict[Hashable, float]] = None,
        epsilon: float = 1e-10,
    ):
        self.directed = directed
        self.node_weights = dict(node_weights or {})
        self.epsilon = epsilon
        self._adjacency: Dict[Hashable, List[Neighbor]] = defaultdict(list)
        self._nodes: Dict[Hashable, Any] = {}
        self.added_edges: List[Tuple[Hashable, Hashable, str]] = []
        self.neighbor_calls: Dict[Hashable, int] = defaultdict(int)

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Sequence],
        directed: bool = False,
        default_relationship: str = DEFAULT_RELATIONSHIP,
        **kwargs,
    ) -> "InMemoryGraphExpander":
        """
        Build an expander from (source, target) or (source, target, relationship) tuples.
        """
        expander = cls(directed=directed, **kwargs)
        for edge in edges:
            if len(edge) == 2:
                source, target = edge
                relationship = default_relationship
            elif len(edge) == 3:
                source, target, relationship = edge
            else:
                raise ValueError(f"Edge must have 2 or 3 fields, got {len(edge)}: {edge!r}")
            expander.add_graph_edge(source, target, relationship)
        return expander

    def add_node(self, node_id: Hashable, data: Any = None) -> None:
        """Register a vertex (isolated vertices have no edges)."""
        self._nodes[node_id] = data if data is not None else node_id
        self._adjacency.setdefault(node_id, [])

    def add_graph_edge(
        self,
        source: Hashable,
        target: Hashable,
        relationship_type: str = DEFAULT_RELATIONSHIP,
    ) -> None:
        """Insert an edge into the underlying graph."""
        for node in (source, target):
            if node not in self._nodes:
                self.add_node(node)
        self._adjacency[source].append(Neighbor(target, relationship_type))
        if not self.directed and source != target:
            self._adjacency[target].append(Neighbor(source, relationship_type))

    # ------------------------------------------------------------------
    # GraphExpander contract
    # ------------------------------------------------------------------

    def get_neighbors(self, node_id: Hashable) -> List[Neighbor]:
        self.neighbor_calls[node_id] += 1
        return list(self._adjacency.get(node_id, ()))

    def get_degree(self, node_id: Hashable) -> int:
        return len(self._adjacency.get(node_id, ()))

    def calculate_priority(
        self,
        node_id: Hashable,
        node_weight: Optional[float] = None,
        epsilon: Optional[float] = None,
    ) -> float:
        if node_weight is None:
            node_weight = self.node_weights.get(node_id, 1.0)
        if epsilon is None:
            epsilon = self.epsilon
        return super().calculate_priority(node_id, node_weight, epsilon)

    def add_edge(self, source: Hashable, target: Hashable, relationship_type: str) -> None:
        self.added_edges.append((source, target, relationship_type))

    def get_node(self, node_id: Hashable) -> Optional[Any]:
        return self._nodes.get(node_id)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def nodes(self) -> List[Hashable]:
        return list(self._nodes)

    def edge_count(self) -> int:
        total = sum(len(neighbors) for neighbors in self._adjacency.values())
        if self.directed:
            return total
        loops = sum(
            1 for node, neighbors in self._adjacency.items()
            for neighbor in neighbors if neighbor.target_id == node
        )
        return (total - loops) // 2 + loops

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return (
            f"InMemoryGraphExpander(nodes={len(self._nodes)}, "
            f"edges={self.edge_count()}, directed={self.directed})"
        )

# SeedWeaver v0.1.0
# Any usage is subject to this software's license.
