#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SeedWeaver v0.1.0

Priority functions for the expansion engine.

AdaptiveSaliencePriority is the two-phase function behind retrospective
salience-guided expansion:

- Phase 1 (no path yet):  pi(v) = base(v)
- Phase 2 (after the first path, permanently):
                          pi(v) = base(v) * (1 - salience(v))

where base(v) is the expander's calculate_priority() (degree over node
weight) and salience(v) is the maximum, over every discovered path P, of

    Jaccard(v, P) = |N(v) & nodes(P)| / |N(v) | nodes(P)|

Salience is refreshed for every visited vertex each time a novel path is
recorded. Taking the max means one strong association with a path is never
diluted by many weak ones, and it keeps salience non-decreasing.

Because the priority function itself changes at the transition, the engine
drains and re-prioritises every queued vertex exactly once when
on_path_discovered() first returns True.

DegreePriority (phase 1 forever), EntropyGuidedPriority and
PathPreservingPriority are siblings behind the same interface.

Author: SeedWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from abc import ABC, abstractmethod
from collections import Counter
from enum import Enum
from typing import Any, Dict, FrozenSet, Hashable, Iterable, Mapping, Optional, Sequence, Set
import logging
import math

from .errors import ExpansionConfigurationError

logger = logging.getLogger(__name__)


# ============================================================================
#                         ENUMS & CONSTANTS
# ============================================================================

class PriorityStrategy(str, Enum):
    """Available vertex prioritisation strategies."""
    DEGREE = "degree"
    SALIENCE = "salience"
    ENTROPY = "entropy"
    PATH_PRESERVING = "path_preserving"


ENTROPY_EPSILON = 0.001


# ============================================================================
#                         BASE INTERFACE
# ============================================================================

class PriorityFunction(ABC):
    """
    Computes the priority of a vertex (lower is expanded first).

    Subclasses may cache neighbour lists; the engine shares every neighbour
    list it fetches through observe_neighbors() so expanded vertices are
    never fetched twice.
    """

    strategy: PriorityStrategy

    def __init__(self, expander, priority_options: Optional[Mapping[str, Any]] = None):
        self.expander = expander
        self.priority_options = dict(priority_options or {})
        self._neighbor_cache: Dict[Hashable, Sequence] = {}

    @abstractmethod
    def priority(self, node: Hashable, frontier_index: Optional[int] = None) -> float:
        """
        Priority of node under the current state of the function.

        frontier_index is the frontier about to enqueue node; functions
        that do not depend on frontier state ignore it.
        """

    def base_priority(self, node: Hashable) -> float:
        return self.expander.calculate_priority(node, **self.priority_options)

    def observe_neighbors(self, node: Hashable, neighbors: Sequence) -> None:
        self._neighbor_cache[node] = neighbors

    def observe_ownership(self, node: Hashable, frontier_index: int) -> None:
        """Notification that a frontier has visited node."""

    def neighbors(self, node: Hashable) -> Sequence:
        """Cached neighbour list, fetched from the expander on first use."""
        cached = self._neighbor_cache.get(node)
        if cached is None:
            cached = self.expander.get_neighbors(node)
            self._neighbor_cache[node] = cached
        return cached

    def on_path_discovered(self, path_nodes: Sequence[Hashable], visited_nodes: Iterable[Hashable]) -> bool:
        """
        Notification of a novel path.

        Returns:
            True if every queued vertex must be re-prioritised now
        """
        return False

    @property
    def salience_scores(self) -> Dict[Hashable, float]:
        return {}

    @property
    def phase_two_active(self) -> bool:
        return False


# ============================================================================
#                         IMPLEMENTATIONS
# ============================================================================

class DegreePriority(PriorityFunction):
    """Pure degree prioritisation: low-degree vertices first, hubs deferred."""

    strategy = PriorityStrategy.DEGREE

    def priority(self, node: Hashable, frontier_index: Optional[int] = None) -> float:
        return self.base_priority(node)


class AdaptiveSaliencePriority(PriorityFunction):
    """
    Degree priority that becomes salience-modulated after the first path.

    Attributes:
        salience_phase_active: One-way flag, set on the first novel path
        paths_seen: Number of paths folded into the salience estimates
    """

    strategy = PriorityStrategy.SALIENCE

    def __init__(self, expander, priority_options: Optional[Mapping[str, Any]] = None):
        super().__init__(expander, priority_options)
        self.salience_phase_active = False
        self.paths_seen = 0
        self._salience: Dict[Hashable, float] = {}
        self._neighbor_sets: Dict[Hashable, FrozenSet[Hashable]] = {}
        self.logger = logging.getLogger(f"{__name__}.AdaptiveSaliencePriority")

    def priority(self, node: Hashable, frontier_index: Optional[int] = None) -> float:
        base = self.base_priority(node)
        if not self.salience_phase_active:
            return base
        return base * (1.0 - self._salience.get(node, 0.0))

    def salience(self, node: Hashable) -> float:
        return self._salience.get(node, 0.0)

    @property
    def salience_scores(self) -> Dict[Hashable, float]:
        return dict(self._salience)

    @property
    def phase_two_active(self) -> bool:
        return self.salience_phase_active

    def on_path_discovered(self, path_nodes: Sequence[Hashable], visited_nodes: Iterable[Hashable]) -> bool:
        transition = not self.salience_phase_active
        if transition:
            self.salience_phase_active = True
            self.logger.info(
                f"Switching to salience-aware priority after first path ({len(path_nodes)} nodes)"
            )
        self.update_salience(path_nodes, visited_nodes)
        return transition

    def update_salience(self, path_nodes: Sequence[Hashable], visited_nodes: Iterable[Hashable]) -> None:
        """Fold one path into the salience estimate of every visited vertex."""
        path_set = frozenset(path_nodes)
        self.paths_seen += 1
        updated = 0
        for node in visited_nodes:
            score = self.jaccard(node, path_set)
            if score > self._salience.get(node, 0.0):
                self._salience[node] = score
                updated += 1
        self.logger.debug(f"Salience raised for {updated} vertices (path #{self.paths_seen})")

    def jaccard(self, node: Hashable, path_set: FrozenSet[Hashable]) -> float:
        """Jaccard similarity between node's neighbour set and a path's node set."""
        neighbor_set = self._neighbor_set(node)
        union = len(neighbor_set | path_set)
        if union == 0:
            return 0.0
        return len(neighbor_set & path_set) / union

    def _neighbor_set(self, node: Hashable) -> FrozenSet[Hashable]:
        cached = self._neighbor_sets.get(node)
        if cached is None:
            cached = frozenset(neighbor.target_id for neighbor in self.neighbors(node))
            self._neighbor_sets[node] = cached
        return cached


class EntropyGuidedPriority(PriorityFunction):
    """
    Neighbourhood-diversity priority.

    pi(v) = (1 / (H(v) + eps)) * ln(deg(v) + 1), with H(v) the base-2 Shannon
    entropy of v's neighbour relationship types. Homogeneous neighbourhoods
    are explored first; the log-degree factor keeps hubs deferred.
    """

    strategy = PriorityStrategy.ENTROPY

    def __init__(self, expander, priority_options: Optional[Mapping[str, Any]] = None):
        super().__init__(expander, priority_options)
        self._entropy: Dict[Hashable, float] = {}

    def local_entropy(self, node: Hashable) -> float:
        cached = self._entropy.get(node)
        if cached is not None:
            return cached
        neighbors = self.neighbors(node)
        entropy = 0.0
        if neighbors:
            total = len(neighbors)
            counts = Counter(neighbor.relationship_type for neighbor in neighbors)
            for count in counts.values():
                p = count / total
                entropy -= p * math.log2(p)
        self._entropy[node] = entropy
        return entropy

    def priority(self, node: Hashable, frontier_index: Optional[int] = None) -> float:
        degree = self.expander.get_degree(node)
        return (1.0 / (self.local_entropy(node) + ENTROPY_EPSILON)) * math.log(degree + 1)


class PathPreservingPriority(PriorityFunction):
    """
    Degree priority discounted by contact with other frontiers.

    pi(v, f) = deg(v) / (1 + path_potential(v, f)), where path_potential
    counts v's distinct neighbours already visited by a frontier other
    than f. Vertices bordering another frontier's region are expanded
    sooner.

    The value is fixed when the vertex is enqueued; queued vertices are
    not re-scored as ownership grows.
    """

    strategy = PriorityStrategy.PATH_PRESERVING

    def __init__(self, expander, priority_options: Optional[Mapping[str, Any]] = None):
        super().__init__(expander, priority_options)
        self._owners: Dict[Hashable, Set[int]] = {}

    def observe_ownership(self, node: Hashable, frontier_index: int) -> None:
        self._owners.setdefault(node, set()).add(frontier_index)

    def path_potential(self, node: Hashable, frontier_index: Optional[int] = None) -> int:
        """
        Neighbours of node visited by a frontier other than frontier_index.

        With no frontier given, any visited neighbour counts.
        """
        potential = 0
        for target in {neighbor.target_id for neighbor in self.neighbors(node)}:
            owners = self._owners.get(target)
            if not owners:
                continue
            if frontier_index is None or owners - {frontier_index}:
                potential += 1
        return potential

    def priority(self, node: Hashable, frontier_index: Optional[int] = None) -> float:
        degree = self.expander.get_degree(node)
        return degree / (1 + self.path_potential(node, frontier_index))


# ============================================================================
#                         FACTORY
# ============================================================================

_STRATEGIES = {
    PriorityStrategy.DEGREE: DegreePriority,
    PriorityStrategy.SALIENCE: AdaptiveSaliencePriority,
    PriorityStrategy.ENTROPY: EntropyGuidedPriority,
    PriorityStrategy.PATH_PRESERVING: PathPreservingPriority,
}


def create_priority_function(
    strategy,
    expander,
    priority_options: Optional[Mapping[str, Any]] = None,
) -> PriorityFunction:
    """
    Build a priority function by strategy name or enum member.

    Raises:
        ExpansionConfigurationError: Unknown strategy
    """
    try:
        strategy = PriorityStrategy(strategy)
    except ValueError:
        valid = ", ".join(s.value for s in PriorityStrategy)
        raise ExpansionConfigurationError(f"Unknown priority strategy: {strategy!r} (expected one of: {valid})")
    return _STRATEGIES[strategy](expander, priority_options)

# SeedWeaver v0.1.0
# Any usage is subject to this software's license.
