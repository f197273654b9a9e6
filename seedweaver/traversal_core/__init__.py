"""
SeedWeaver v0.1.0

Traversal core: multi-frontier expansion, priority functions, path
reconstruction and the result types they produce.

Author: SeedWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from .priority_queue import MinPriorityQueue
from .frontier import FrontierState, OwnershipIndex, ParentLink
from .data_structures import DiscoveredPath, ExpansionResult, ExpansionStats
from .errors import (
    SeedWeaverError,
    ExpansionConfigurationError,
    ExpansionStateError,
    PathReconstructionError,
)
from .adaptive_priority import (
    PriorityStrategy,
    PriorityFunction,
    DegreePriority,
    AdaptiveSaliencePriority,
    EntropyGuidedPriority,
    PathPreservingPriority,
    create_priority_function,
)
from .path_reconstruction import (
    PathDeduplicator,
    is_simple_path,
    path_signature,
    reconstruct_path,
)
from .expansion_engine import (
    ExpansionEngine,
    DegreePrioritisedExpansion,
    RetrospectiveSalienceExpansion,
    EntropyGuidedExpansion,
    PathPreservingExpansion,
)

__all__ = [
    # Queue and frontier state
    "MinPriorityQueue",
    "FrontierState",
    "OwnershipIndex",
    "ParentLink",
    # Results
    "DiscoveredPath",
    "ExpansionResult",
    "ExpansionStats",
    # Errors
    "SeedWeaverError",
    "ExpansionConfigurationError",
    "ExpansionStateError",
    "PathReconstructionError",
    # Priority functions
    "PriorityStrategy",
    "PriorityFunction",
    "DegreePriority",
    "AdaptiveSaliencePriority",
    "EntropyGuidedPriority",
    "PathPreservingPriority",
    "create_priority_function",
    # Paths
    "PathDeduplicator",
    "is_simple_path",
    "path_signature",
    "reconstruct_path",
    # Engines
    "ExpansionEngine",
    "DegreePrioritisedExpansion",
    "RetrospectiveSalienceExpansion",
    "EntropyGuidedExpansion",
    "PathPreservingExpansion",
]

# SeedWeaver v0.1.0
# Any usage is subject to this software's license.
