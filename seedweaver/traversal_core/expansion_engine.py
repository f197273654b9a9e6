#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SeedWeaver v0.1.0

Multi-frontier expansion engine for seed-bounded graph sampling.

One frontier grows from each seed. Every iteration expands the single
globally cheapest queued vertex across all frontiers, so no frontier can
race through a hub-free region while a cheaper candidate waits in another
frontier's queue. A vertex discovered by a second frontier closes a path
between the two seeds.

ALGORITHM
═══════════════════════════════════════════════════════════════════════════════
1. Create N frontiers, one per seed (seed visited, queued, no parent)
2. While any frontier queue is non-empty:
   a. Pick the frontier whose queue minimum is globally lowest
   b. Pop v, fetch its neighbours from the expander
   c. For each neighbour new to this frontier: record the edge, mark it
      visited with parent v, enqueue it with the current priority
   d. For every other frontier that already owns the neighbour,
      reconstruct the seed-to-seed path and keep it if it is novel
3. Return the sampled subgraph, paths and statistics

Termination is purely structural: the loop ends when every frontier is
exhausted. There is no step, depth or edge limit. With one seed there are no
other frontiers to collide with, so no path is ever reported; two seeds give
bidirectional search and three or more give multi-seed search through the
same loop.

Complexity: O(E log V) for the loop, plus O(P * V) Jaccard updates for the
salience strategy (P = paths found).

Author: SeedWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from typing import Any, Dict, Hashable, Iterator, List, Mapping, Optional, Sequence
import logging

from .adaptive_priority import (
    AdaptiveSaliencePriority,
    DegreePriority,
    EntropyGuidedPriority,
    PathPreservingPriority,
    PriorityFunction,
)
from .data_structures import DiscoveredPath, EdgeKey, ExpansionResult
from .errors import ExpansionConfigurationError, ExpansionStateError
from .frontier import FrontierState, OwnershipIndex
from .path_reconstruction import PathDeduplicator, is_simple_path, reconstruct_path
from ..traversal_utils.statistics import StatisticsCollector

logger = logging.getLogger(__name__)


class ExpansionEngine:
    """
    Priority-driven expansion across N >= 1 seed frontiers.

    The engine is single-use: build it, call run() once, read the result.
    All frontier state is private to the engine for the duration of the run.

    Example:
        >>> expander = InMemoryGraphExpander.from_edges([("A", "B"), ("B", "C")])
        >>> result = ExpansionEngine(expander, ["A", "C"]).run()
        >>> result.paths[0].nodes
        ('C', 'B', 'A')
    """

    def __init__(
        self,
        expander,
        seeds: Sequence[Hashable],
        priority: Optional[PriorityFunction] = None,
    ):
        """
        Initialize the engine.

        Args:
            expander: GraphExpander providing neighbour access
            seeds: Seed vertex identifiers (N >= 1, duplicates allowed)
            priority: Priority function (default: adaptive salience)

        Raises:
            ExpansionConfigurationError: If no seeds are provided
        """
        seeds = tuple(seeds)
        if not seeds:
            raise ExpansionConfigurationError("At least one seed node is required")

        self.expander = expander
        self.seeds = seeds
        self.priority = priority if priority is not None else AdaptiveSaliencePriority(expander)
        self.logger = logging.getLogger(f"{__name__}.{type(self).__name__}")

        self._frontiers: List[FrontierState] = []
        self._ownership = OwnershipIndex()
        self._deduplicator = PathDeduplicator()
        self._stats = StatisticsCollector()
        self._paths: List[DiscoveredPath] = []
        self._edge_sequence: List[EdgeKey] = []
        self._sampled_edges = set()
        self._expansion_order: List[Hashable] = []
        self._discovery_iteration: Dict[Hashable, int] = {}
        self._phase_transition_iteration: Optional[int] = None
        self._has_run = False

        for index, seed in enumerate(seeds):
            frontier = FrontierState.create(index, seed, self.priority.priority(seed, index))
            self._frontiers.append(frontier)
            self._claim(seed, index)
            self._discovery_iteration.setdefault(seed, 0)

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self) -> ExpansionResult:
        """
        Run the expansion until every frontier is exhausted.

        Errors raised by the expander propagate unchanged; no partial result
        is returned in that case.

        Returns:
            ExpansionResult with paths, sampled subgraph and statistics

        Raises:
            ExpansionStateError: If the engine has already run
        """
        if self._has_run:
            raise ExpansionStateError("ExpansionEngine.run() may only be called once per engine")
        self._has_run = True

        self.logger.info(
            f"Starting {self.priority.strategy.value} expansion from {len(self.seeds)} seed(s)"
        )

        while True:
            active = self._select_frontier()
            if active is None:
                break
            self._expand_step(active)

        result = self._build_result()
        self.logger.info(
            f"Expansion complete: {result.stats.iterations} iterations, "
            f"{len(result.sampled_nodes)} nodes, {len(result.sampled_edges)} edges, "
            f"{len(result.paths)} paths"
        )
        return result

    def _expand_step(self, active: FrontierState) -> None:
        """Pop and expand the minimum vertex of one frontier."""
        iteration = self._stats.record_iteration()
        node = active.pop()
        self._expansion_order.append(node)
        self._stats.record_expansion(self.expander.get_degree(node))

        neighbors = self.expander.get_neighbors(node)
        self.priority.observe_neighbors(node, neighbors)

        for target, relationship in neighbors:
            if active.has_visited(target):
                continue

            self._stats.record_edge()
            self._notify_edge(node, target, relationship)
            edge_key = (node, target)
            if edge_key not in self._sampled_edges:
                self._sampled_edges.add(edge_key)
                self._edge_sequence.append(edge_key)

            active.discover(target, node, relationship, self.priority.priority(target, active.index))
            self._discovery_iteration.setdefault(target, iteration)

            for other_index in self._ownership.other_owners(target, active.index):
                self._record_collision(active, self._frontiers[other_index], target, iteration)
            self._claim(target, active.index)

    def _select_frontier(self) -> Optional[FrontierState]:
        """Non-empty frontier with the globally lowest queue minimum (first wins ties)."""
        best = None
        best_priority = None
        for frontier in self._frontiers:
            if frontier.is_exhausted:
                continue
            peek = frontier.queue.peek_priority()
            if best is None or peek < best_priority:
                best = frontier
                best_priority = peek
        return best

    def _claim(self, node: Hashable, frontier_index: int) -> None:
        self._ownership.register(node, frontier_index)
        self.priority.observe_ownership(node, frontier_index)

    def _notify_edge(self, source: Hashable, target: Hashable, relationship: str) -> None:
        # Edge bookkeeping on the expander is best effort
        try:
            self.expander.add_edge(source, target, relationship)
        except Exception as e:
            self.logger.warning(f"Expander failed to record edge {source!r} -> {target!r}: {e}")

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def _record_collision(
        self,
        frontier_a: FrontierState,
        frontier_b: FrontierState,
        meeting_node: Hashable,
        iteration: int,
    ) -> None:
        nodes = reconstruct_path(frontier_a, frontier_b, meeting_node)
        if nodes is None:
            self._stats.record_reconstruction_failure()
            self.logger.warning(
                f"Dropped path through {meeting_node!r} between seeds "
                f"{frontier_a.index} and {frontier_b.index}: broken parent chain"
            )
            return

        # The loop-free part was already recorded when the repeated vertex collided
        if not is_simple_path(nodes):
            self._stats.record_looping_path()
            self.logger.debug(f"Looping walk through {meeting_node!r} ignored")
            return

        if not self._deduplicator.add(frontier_a.index, frontier_b.index, nodes):
            self._stats.record_duplicate()
            self.logger.debug(f"Duplicate path through {meeting_node!r} ignored")
            return

        path = DiscoveredPath(
            from_seed=frontier_a.index,
            to_seed=frontier_b.index,
            nodes=nodes,
            iteration=iteration,
        )
        self._paths.append(path)
        self._stats.record_path()
        self.logger.info(
            f"Path {len(self._paths)} found at iteration {iteration}: "
            f"seed {path.from_seed} -> seed {path.to_seed} ({len(nodes)} nodes)"
        )

        if self.priority.on_path_discovered(nodes, self._iter_visited()):
            self._phase_transition_iteration = iteration
            self._rebuild_queues()

    def _iter_visited(self) -> Iterator[Hashable]:
        """Every vertex visited by any frontier, each once, in discovery order."""
        seen = set()
        for frontier in self._frontiers:
            for node in frontier.discovery_order:
                if node not in seen:
                    seen.add(node)
                    yield node

    def _rebuild_queues(self) -> None:
        """Drain every queue and re-insert with freshly computed priorities."""
        requeued = 0
        for frontier in self._frontiers:
            pending = frontier.queue.drain()
            for node in pending:
                frontier.queue.push(node, self.priority.priority(node, frontier.index))
            requeued += len(pending)
        self.logger.info(f"Re-prioritised {requeued} queued vertices across {len(self._frontiers)} frontiers")

    # ------------------------------------------------------------------
    # Result
    # ------------------------------------------------------------------

    def _build_result(self) -> ExpansionResult:
        sampled_nodes = set()
        visited_per_frontier = []
        for frontier in self._frontiers:
            sampled_nodes.update(frontier.visited)
            visited_per_frontier.append(frozenset(frontier.visited))

        return ExpansionResult(
            paths=tuple(self._paths),
            sampled_nodes=frozenset(sampled_nodes),
            sampled_edges=frozenset(self._sampled_edges),
            visited_per_frontier=tuple(visited_per_frontier),
            stats=self._stats.freeze(),
            expansion_order=tuple(self._expansion_order),
            edge_sequence=tuple(self._edge_sequence),
            discovery_iteration=self._discovery_iteration,
            salience=self.priority.salience_scores,
            phase_transition_iteration=self._phase_transition_iteration,
            strategy=self.priority.strategy.value,
        )

    @property
    def frontier_count(self) -> int:
        return len(self._frontiers)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(seeds={len(self.seeds)}, "
            f"strategy={self.priority.strategy.value})"
        )


class DegreePrioritisedExpansion(ExpansionEngine):
    """Expansion ordered by degree alone for the whole run."""

    def __init__(self, expander, seeds: Sequence[Hashable], priority_options: Optional[Mapping[str, Any]] = None):
        super().__init__(expander, seeds, DegreePriority(expander, priority_options))


class RetrospectiveSalienceExpansion(ExpansionEngine):
    """Degree-first expansion that turns salience-aware after the first path."""

    def __init__(self, expander, seeds: Sequence[Hashable], priority_options: Optional[Mapping[str, Any]] = None):
        super().__init__(expander, seeds, AdaptiveSaliencePriority(expander, priority_options))


class EntropyGuidedExpansion(ExpansionEngine):
    """Expansion favouring vertices with homogeneous neighbourhoods."""

    def __init__(self, expander, seeds: Sequence[Hashable], priority_options: Optional[Mapping[str, Any]] = None):
        super().__init__(expander, seeds, EntropyGuidedPriority(expander, priority_options))


class PathPreservingExpansion(ExpansionEngine):
    """Expansion favouring vertices that border another frontier's region."""

    def __init__(self, expander, seeds: Sequence[Hashable], priority_options: Optional[Mapping[str, Any]] = None):
        super().__init__(expander, seeds, PathPreservingPriority(expander, priority_options))

# SeedWeaver v0.1.0
# Any usage is subject to this software's license.
