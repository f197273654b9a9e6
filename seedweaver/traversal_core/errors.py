#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SeedWeaver v0.1.0

Exception hierarchy for the traversal core.

All traversal errors inherit from SeedWeaverError so they can be caught
uniformly by the pipeline and CLI. Errors raised by a graph expander are
never wrapped: they propagate out of ExpansionEngine.run() unchanged.

Author: SeedWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""


class SeedWeaverError(Exception):
    """Base exception for all SeedWeaver errors."""
    pass


class ExpansionConfigurationError(SeedWeaverError, ValueError):
    """Invalid engine construction (no seeds, unknown strategy)."""
    pass


class ExpansionStateError(SeedWeaverError, RuntimeError):
    """Engine used outside its single-run lifecycle."""
    pass


class PathReconstructionError(SeedWeaverError):
    """A parent-pointer walk did not terminate at its expected seed."""

    def __init__(self, message: str, frontier_index: int = -1, meeting_node=None):
        self.frontier_index = frontier_index
        self.meeting_node = meeting_node
        super().__init__(message)

# SeedWeaver v0.1.0
# Any usage is subject to this software's license.
