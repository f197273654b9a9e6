#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SeedWeaver v0.1.0

Path reconstruction from frontier parent pointers, and path deduplication.

When a vertex m is owned by frontier A (which just discovered it) and
frontier B (which owned it before), the connecting path is

    seed_A -> ... -> m -> ... -> seed_B

built by walking A's parent pointers from m back to seed_A and B's parent
pointers from m back to seed_B. A walk that does not end at its seed means
the parent map is inconsistent; reconstruct_path() then returns None (or
raises PathReconstructionError when strict=True).

Author: SeedWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from typing import Hashable, List, Optional, Sequence, Set, Tuple

from .errors import PathReconstructionError
from .frontier import FrontierState

PathSignature = Tuple[int, int, Tuple[Hashable, ...]]


def _walk_to_root(frontier: FrontierState, start: Hashable) -> List[Hashable]:
    """
    Follow parent pointers from start, returning the ancestors visited
    (start excluded, root last).

    The walk is bounded by the size of the visited set; exceeding it means
    the parent map contains a cycle.
    """
    ancestors = []
    current = start
    limit = len(frontier.visited)
    while current in frontier.parents:
        current = frontier.parents[current].parent
        ancestors.append(current)
        if len(ancestors) > limit:
            raise PathReconstructionError(
                f"Parent chain from {start!r} in frontier {frontier.index} does not terminate",
                frontier_index=frontier.index,
                meeting_node=start,
            )
    return ancestors


def reconstruct_path(
    frontier_a: FrontierState,
    frontier_b: FrontierState,
    meeting_node: Hashable,
    strict: bool = False,
) -> Optional[Tuple[Hashable, ...]]:
    """
    Build the seed_A -> meeting -> seed_B path.

    Args:
        frontier_a: Frontier that just discovered meeting_node
        frontier_b: Frontier that already owned meeting_node
        meeting_node: Collision vertex
        strict: Raise instead of returning None on a broken chain

    Returns:
        Tuple of vertices with meeting_node appearing once, or None

    Raises:
        PathReconstructionError: Broken chain and strict=True
    """
    try:
        from_a = _walk_to_root(frontier_a, meeting_node)
        from_b = _walk_to_root(frontier_b, meeting_node)

        root_a = from_a[-1] if from_a else meeting_node
        if root_a != frontier_a.seed:
            raise PathReconstructionError(
                f"Walk from {meeting_node!r} ended at {root_a!r}, "
                f"expected seed {frontier_a.seed!r} of frontier {frontier_a.index}",
                frontier_index=frontier_a.index,
                meeting_node=meeting_node,
            )

        root_b = from_b[-1] if from_b else meeting_node
        if root_b != frontier_b.seed:
            raise PathReconstructionError(
                f"Walk from {meeting_node!r} ended at {root_b!r}, "
                f"expected seed {frontier_b.seed!r} of frontier {frontier_b.index}",
                frontier_index=frontier_b.index,
                meeting_node=meeting_node,
            )
    except PathReconstructionError:
        if strict:
            raise
        return None

    from_a.reverse()
    return tuple(from_a) + (meeting_node,) + tuple(from_b)


def is_simple_path(nodes: Sequence[Hashable]) -> bool:
    """True if no vertex occurs more than once."""
    return len(set(nodes)) == len(nodes)


def path_signature(from_seed: int, to_seed: int, nodes: Sequence[Hashable]) -> PathSignature:
    """
    Orientation-independent key for a path.

    The node sequence is oriented from the lower seed index, so the same
    path reported as A->B or B->A yields one signature. For a path between
    two frontiers with the same index ordering is ambiguous and the smaller
    of the two orientations is used.
    """
    nodes = tuple(nodes)
    reversed_nodes = nodes[::-1]
    if from_seed < to_seed:
        canonical = nodes
    elif from_seed > to_seed:
        canonical = reversed_nodes
    else:
        canonical = min(nodes, reversed_nodes)
    low, high = sorted((from_seed, to_seed))
    return (low, high, canonical)


class PathDeduplicator:
    """Set of path signatures seen during one run."""

    def __init__(self):
        self._seen: Set[PathSignature] = set()

    def add(self, from_seed: int, to_seed: int, nodes: Sequence[Hashable]) -> bool:
        """Record a path; True only if its signature was not seen before."""
        signature = path_signature(from_seed, to_seed, nodes)
        if signature in self._seen:
            return False
        self._seen.add(signature)
        return True

    def __contains__(self, signature: PathSignature) -> bool:
        return signature in self._seen

    def __len__(self) -> int:
        return len(self._seen)

# SeedWeaver v0.1.0
# Any usage is subject to this software's license.
