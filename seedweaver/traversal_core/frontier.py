#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SeedWeaver v0.1.0

Per-seed frontier state and the cross-frontier ownership index.

Author: SeedWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from dataclasses import dataclass, field
from typing import Dict, Hashable, List, NamedTuple, Optional, Set

from .priority_queue import MinPriorityQueue


class ParentLink(NamedTuple):
    """Back-pointer used for path reconstruction."""
    parent: Hashable
    relationship_type: str


@dataclass
class FrontierState:
    """
    State for a single expansion frontier.

    Attributes:
        index: Position of the seed in the engine's seed list
        seed: Seed vertex this frontier grows from
        queue: Vertices discovered but not yet expanded
        visited: Every vertex this frontier has ever pushed (seed included)
        discovery_order: visited, in insertion order
        parents: Vertex -> ParentLink (the seed has none)
        expanded: Vertices already popped
    """
    index: int
    seed: Hashable
    queue: MinPriorityQueue = field(default_factory=MinPriorityQueue)
    visited: Set[Hashable] = field(default_factory=set)
    discovery_order: List[Hashable] = field(default_factory=list)
    parents: Dict[Hashable, ParentLink] = field(default_factory=dict)
    expanded: Set[Hashable] = field(default_factory=set)

    @classmethod
    def create(cls, index: int, seed: Hashable, priority: float) -> "FrontierState":
        frontier = cls(index=index, seed=seed)
        frontier.visited.add(seed)
        frontier.discovery_order.append(seed)
        frontier.queue.push(seed, priority)
        return frontier

    def has_visited(self, node: Hashable) -> bool:
        return node in self.visited

    def discover(self, node: Hashable, parent: Hashable, relationship_type: str, priority: float) -> None:
        """Mark node visited with its parent link and enqueue it."""
        self.visited.add(node)
        self.discovery_order.append(node)
        self.parents[node] = ParentLink(parent, relationship_type)
        self.queue.push(node, priority)

    def pop(self) -> Hashable:
        node = self.queue.pop()
        self.expanded.add(node)
        return node

    def parent_of(self, node: Hashable) -> Optional[Hashable]:
        link = self.parents.get(node)
        return link.parent if link is not None else None

    @property
    def is_exhausted(self) -> bool:
        return not self.queue


class OwnershipIndex:
    """
    Vertex -> indices of the frontiers that visited it, in discovery order.

    Replaces an O(N) scan over frontiers with an O(1) lookup and still
    reports every owner, so one discovery can close several paths.
    """

    def __init__(self):
        self._owners: Dict[Hashable, List[int]] = {}

    def register(self, node: Hashable, frontier_index: int) -> None:
        owners = self._owners.setdefault(node, [])
        if frontier_index not in owners:
            owners.append(frontier_index)

    def owners(self, node: Hashable) -> List[int]:
        return list(self._owners.get(node, ()))

    def other_owners(self, node: Hashable, frontier_index: int) -> List[int]:
        return [index for index in self._owners.get(node, ()) if index != frontier_index]

    def __contains__(self, node: Hashable) -> bool:
        return node in self._owners

    def __len__(self) -> int:
        return len(self._owners)

# SeedWeaver v0.1.0
# Any usage is subject to this software's license.
