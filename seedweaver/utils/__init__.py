"""
SeedWeaver v0.1.0

Application-level utilities: the configuration-driven sampling pipeline.

Author: SeedWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from .pipeline import SamplingPipeline

__all__ = ["SamplingPipeline"]
