#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SeedWeaver v0.1.0

Result export: expansion result JSON and discovered-path TSV.

Author: SeedWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Sequence

from ..traversal_core.data_structures import ExpansionResult

logger = logging.getLogger(__name__)


def export_result_json(
    result: ExpansionResult,
    output_path: str | Path,
    seeds: Sequence[Any] | None = None,
) -> dict[str, Any]:
    """
    Export a full expansion result to JSON.

    Vertex identifiers that are not JSON types are written with str().

    Args:
        result: Result of ExpansionEngine.run()
        output_path: Path to output JSON file
        seeds: Seed list, recorded alongside the result if given

    Returns:
        The dictionary that was written
    """
    output_path = Path(output_path)
    payload = result.to_dict()
    if seeds is not None:
        payload['seeds'] = list(seeds)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(payload, f, indent=2, default=str)

    logger.info(f"Expansion result exported to {output_path}")
    logger.info(f"  Paths: {len(result.paths)}")
    logger.info(f"  Sampled nodes: {len(result.sampled_nodes):,}")
    logger.info(f"  Sampled edges: {len(result.sampled_edges):,}")

    return payload


def export_paths_tsv(
    result: ExpansionResult,
    output_path: str | Path,
    seeds: Sequence[Any] | None = None,
) -> None:
    """
    Export discovered paths to TSV.

    Format:
    path_id\tfrom_seed\tto_seed\tlength\tnodes

    Seeds are written by identifier when the seed list is given, by index
    otherwise. Nodes are comma-separated in discovery orientation.
    """
    output_path = Path(output_path)
    logger.info(f"Exporting {len(result.paths)} paths to {output_path}")

    def seed_label(index: int) -> str:
        return str(seeds[index]) if seeds is not None else str(index)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write("# Discovered seed-to-seed paths\n")
        f.write("path_id\tfrom_seed\tto_seed\tlength\tnodes\n")

        for i, path in enumerate(result.paths, start=1):
            nodes = ','.join(str(node) for node in path.nodes)
            f.write(
                f"path_{i}\t{seed_label(path.from_seed)}\t{seed_label(path.to_seed)}"
                f"\t{len(path.nodes)}\t{nodes}\n"
            )

    logger.info(f"Exported {len(result.paths)} paths")

# SeedWeaver v0.1.0
# Any usage is subject to this software's license.
