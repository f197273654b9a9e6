#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SeedWeaver v0.1.0

Expansion statistics: counters and the expanded-degree histogram.

Author: SeedWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from typing import Any, Dict, List

import numpy as np

from ..traversal_core.data_structures import ExpansionStats


# Inclusive upper bounds of each bucket; anything above the last is "1000+"
DEGREE_BUCKET_EDGES = np.array([5, 10, 50, 100, 500, 1000])
DEGREE_BUCKET_LABELS = ("1-5", "6-10", "11-50", "51-100", "101-500", "501-1000", "1000+")


def degree_bucket(degree: int) -> str:
    """
    Histogram bucket label for a degree value.

    Degree 0 shares the "1-5" bucket.
    """
    index = int(np.searchsorted(DEGREE_BUCKET_EDGES, degree, side="left"))
    return DEGREE_BUCKET_LABELS[index]


class StatisticsCollector:
    """
    Mutable counters owned by one engine run.

    freeze() produces the immutable ExpansionStats handed back to callers.
    """

    def __init__(self):
        self.iterations = 0
        self.nodes_expanded = 0
        self.edges_traversed = 0
        self.paths_found = 0
        self.duplicate_paths = 0
        self.reconstruction_failures = 0
        self.looping_paths = 0
        self._bucket_counts = np.zeros(len(DEGREE_BUCKET_LABELS), dtype=np.int64)
        self._expanded_degrees: List[int] = []

    def record_iteration(self) -> int:
        self.iterations += 1
        return self.iterations

    def record_expansion(self, degree: int) -> None:
        """Count one popped vertex and bucket its degree."""
        self.nodes_expanded += 1
        index = int(np.searchsorted(DEGREE_BUCKET_EDGES, degree, side="left"))
        self._bucket_counts[index] += 1
        self._expanded_degrees.append(degree)

    def record_edge(self) -> None:
        self.edges_traversed += 1

    def record_path(self) -> None:
        self.paths_found += 1

    def record_duplicate(self) -> None:
        self.duplicate_paths += 1

    def record_reconstruction_failure(self) -> None:
        self.reconstruction_failures += 1

    def record_looping_path(self) -> None:
        self.looping_paths += 1

    @property
    def degree_distribution(self) -> Dict[str, int]:
        """Non-empty buckets in ascending degree order."""
        return {
            label: int(count)
            for label, count in zip(DEGREE_BUCKET_LABELS, self._bucket_counts)
            if count > 0
        }

    def summary(self) -> Dict[str, Any]:
        """Descriptive statistics over the degrees of expanded vertices."""
        if not self._expanded_degrees:
            return {'mean_degree': 0.0, 'median_degree': 0.0, 'max_degree': 0}
        degrees = np.asarray(self._expanded_degrees, dtype=float)
        return {
            'mean_degree': float(np.mean(degrees)),
            'median_degree': float(np.median(degrees)),
            'max_degree': int(np.max(degrees)),
        }

    def freeze(self) -> ExpansionStats:
        return ExpansionStats(
            nodes_expanded=self.nodes_expanded,
            edges_traversed=self.edges_traversed,
            iterations=self.iterations,
            degree_distribution=self.degree_distribution,
            paths_found=self.paths_found,
            duplicate_paths=self.duplicate_paths,
            reconstruction_failures=self.reconstruction_failures,
            looping_paths=self.looping_paths,
            degree_summary=self.summary(),
        )

# SeedWeaver v0.1.0
# Any usage is subject to this software's license.
