#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SeedWeaver v0.1.0

Package initialization and version metadata.

Author: SeedWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from .version import __version__
from .traversal_core import (
    ExpansionEngine,
    DegreePrioritisedExpansion,
    RetrospectiveSalienceExpansion,
    EntropyGuidedExpansion,
    PathPreservingExpansion,
    ExpansionResult,
    ExpansionStats,
    DiscoveredPath,
)
from .traversal_utils import GraphExpander, InMemoryGraphExpander, Neighbor

__all__ = [
    "__version__",
    "ExpansionEngine",
    "DegreePrioritisedExpansion",
    "RetrospectiveSalienceExpansion",
    "EntropyGuidedExpansion",
    "PathPreservingExpansion",
    "ExpansionResult",
    "ExpansionStats",
    "DiscoveredPath",
    "GraphExpander",
    "InMemoryGraphExpander",
    "Neighbor",
]

# SeedWeaver v0.1.0
# Any usage is subject to this software's license.
