#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SeedWeaver v0.1.0

Edge list loader: builds an InMemoryGraphExpander from a plain-text edge list.

Author: SeedWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from __future__ import annotations
import logging
from pathlib import Path

from ..traversal_utils.expander import DEFAULT_RELATIONSHIP, InMemoryGraphExpander

logger = logging.getLogger(__name__)


def parse_edge_line(line: str, delimiter: str | None = None) -> tuple[str, ...] | None:
    """
    Split one edge-list line into fields.

    Returns None for blank and comment lines.
    """
    line = line.strip()
    if not line or line.startswith('#'):
        return None
    return tuple(field.strip() for field in line.split(delimiter))


def load_edge_list(
    edge_path: str | Path,
    delimiter: str | None = None,
    directed: bool = False,
    default_relationship: str = DEFAULT_RELATIONSHIP,
) -> InMemoryGraphExpander:
    """
    Load a graph from an edge-list file.

    File Format:
    ------------
    Column 1: source vertex
    Column 2: target vertex
    Column 3: optional relationship type (default_relationship if absent)

    Lines starting with '#' are comments. Columns are split on whitespace
    unless a delimiter is given.

    Args:
        edge_path: Path to the edge-list file
        delimiter: Column separator (None = any whitespace)
        directed: Treat edges as one-way
        default_relationship: Relationship for two-column lines

    Returns:
        InMemoryGraphExpander over the loaded edges

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If a line has fewer than 2 or more than 3 columns

    Example file content:
        # citation graph
        paperA  paperB  cites
        paperB  paperC
    """
    edge_path = Path(edge_path)
    logger.info(f"Loading edge list: {edge_path}")

    if not edge_path.exists():
        raise FileNotFoundError(f"Edge list not found: {edge_path}")

    expander = InMemoryGraphExpander(directed=directed)
    line_num = 0
    edge_count = 0

    with open(edge_path, 'r', encoding='utf-8') as f:
        for line in f:
            line_num += 1
            fields = parse_edge_line(line, delimiter)
            if fields is None:
                continue

            if len(fields) not in (2, 3):
                raise ValueError(
                    f"Line {line_num}: expected 2 or 3 columns, got {len(fields)}: {line.rstrip()}"
                )

            relationship = fields[2] if len(fields) == 3 and fields[2] else default_relationship
            expander.add_graph_edge(fields[0], fields[1], relationship)
            edge_count += 1

    logger.info(f"Loaded {edge_count} edges over {len(expander)} vertices from {edge_path}")
    return expander

# SeedWeaver v0.1.0
# Any usage is subject to this software's license.
