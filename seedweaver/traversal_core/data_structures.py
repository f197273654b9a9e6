#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SeedWeaver v0.1.0

Immutable result types returned by an expansion run.

Author: SeedWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Hashable, Mapping, Optional, Tuple


EdgeKey = Tuple[Hashable, Hashable]


@dataclass(frozen=True)
class DiscoveredPath:
    """
    A path connecting two seeds.

    Attributes:
        from_seed: Index of the frontier that discovered the meeting vertex
        to_seed: Index of the frontier that already owned it
        nodes: Vertices from seeds[from_seed] to seeds[to_seed]
        iteration: Engine iteration at which the path was found
    """
    from_seed: int
    to_seed: int
    nodes: Tuple[Hashable, ...]
    iteration: int = 0

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def oriented_nodes(self) -> Tuple[Hashable, ...]:
        """Nodes running from the lower-indexed seed to the higher-indexed one."""
        if self.from_seed <= self.to_seed:
            return self.nodes
        return self.nodes[::-1]

    @property
    def edges(self) -> Tuple[EdgeKey, ...]:
        return tuple(zip(self.nodes, self.nodes[1:]))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'from_seed': self.from_seed,
            'to_seed': self.to_seed,
            'nodes': list(self.nodes),
            'iteration': self.iteration,
        }


@dataclass(frozen=True)
class ExpansionStats:
    """
    Counters collected during one run.

    Attributes:
        nodes_expanded: Vertices popped from any frontier
        edges_traversed: Edges leading to a vertex new to the expanding frontier
        iterations: Loop iterations (equals nodes_expanded)
        degree_distribution: Expanded-vertex count per degree bucket
        paths_found: Novel paths recorded
        duplicate_paths: Reconstructions rejected as already seen
        reconstruction_failures: Reconstructions dropped for a broken parent chain
        looping_paths: Reconstructions rejected for revisiting a vertex
        degree_summary: Mean/median/max degree of expanded vertices
    """
    nodes_expanded: int = 0
    edges_traversed: int = 0
    iterations: int = 0
    degree_distribution: Mapping[str, int] = field(default_factory=dict)
    paths_found: int = 0
    duplicate_paths: int = 0
    reconstruction_failures: int = 0
    looping_paths: int = 0
    degree_summary: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, 'degree_distribution', MappingProxyType(dict(self.degree_distribution)))
        object.__setattr__(self, 'degree_summary', MappingProxyType(dict(self.degree_summary)))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'nodes_expanded': self.nodes_expanded,
            'edges_traversed': self.edges_traversed,
            'iterations': self.iterations,
            'degree_distribution': dict(self.degree_distribution),
            'paths_found': self.paths_found,
            'duplicate_paths': self.duplicate_paths,
            'reconstruction_failures': self.reconstruction_failures,
            'looping_paths': self.looping_paths,
            'degree_summary': dict(self.degree_summary),
        }


@dataclass(frozen=True)
class ExpansionResult:
    """
    Everything a run reports back to the caller.

    Attributes:
        paths: Novel seed-to-seed paths in discovery order
        sampled_nodes: Union of all frontiers' visited sets
        sampled_edges: Traversed (source, target) edge keys
        visited_per_frontier: Visited set of each frontier, in seed order
        stats: Run counters
        expansion_order: Vertices in the order they were popped
        edge_sequence: Traversed edge keys in traversal order
        discovery_iteration: Iteration at which each vertex was first discovered (seeds: 0)
        salience: Final salience estimates (adaptive strategy only)
        phase_transition_iteration: Iteration of the switch to salience priority, if any
        strategy: Name of the priority function used
    """
    paths: Tuple[DiscoveredPath, ...]
    sampled_nodes: FrozenSet[Hashable]
    sampled_edges: FrozenSet[EdgeKey]
    visited_per_frontier: Tuple[FrozenSet[Hashable], ...]
    stats: ExpansionStats
    expansion_order: Tuple[Hashable, ...] = ()
    edge_sequence: Tuple[EdgeKey, ...] = ()
    discovery_iteration: Mapping[Hashable, int] = field(default_factory=dict)
    salience: Mapping[Hashable, float] = field(default_factory=dict)
    phase_transition_iteration: Optional[int] = None
    strategy: str = ""

    def __post_init__(self):
        object.__setattr__(self, 'discovery_iteration', MappingProxyType(dict(self.discovery_iteration)))
        object.__setattr__(self, 'salience', MappingProxyType(dict(self.salience)))

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready view; vertex identifiers are emitted as-is."""
        return {
            'strategy': self.strategy,
            'paths': [path.to_dict() for path in self.paths],
            'sampled_nodes': sorted(self.sampled_nodes, key=str),
            'sampled_edges': [list(edge) for edge in self.edge_sequence],
            'visited_per_frontier': [sorted(visited, key=str) for visited in self.visited_per_frontier],
            'expansion_order': list(self.expansion_order),
            'phase_transition_iteration': self.phase_transition_iteration,
            'stats': self.stats.to_dict(),
        }

# SeedWeaver v0.1.0
# Any usage is subject to this software's license.
