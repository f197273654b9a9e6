"""
SeedWeaver v0.1.0

Traversal utilities: the graph expander contract with its in-memory
reference implementation, and expansion statistics.

Author: SeedWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from .expander import (
    DEFAULT_RELATIONSHIP,
    GraphExpander,
    InMemoryGraphExpander,
    Neighbor,
)
from .statistics import (
    DEGREE_BUCKET_LABELS,
    StatisticsCollector,
    degree_bucket,
)

__all__ = [
    "DEFAULT_RELATIONSHIP",
    "GraphExpander",
    "InMemoryGraphExpander",
    "Neighbor",
    "DEGREE_BUCKET_LABELS",
    "StatisticsCollector",
    "degree_bucket",
]

# SeedWeaver v0.1.0
# Any usage is subject to this software's license.
