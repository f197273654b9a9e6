#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SeedWeaver v0.1.0

Pytest configuration and shared fixtures.

Author: SeedWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import pytest
from pathlib import Path
import tempfile
import shutil

from seedweaver.traversal_utils import InMemoryGraphExpander


STAR_LEAVES = [f"S{i}" for i in range(20)]
CHAIN_NODES = [f"N{i}" for i in range(10)]


@pytest.fixture
def temp_output_dir():
    """Create temporary output directory for tests."""
    temp_dir = tempfile.mkdtemp(prefix="seedweaver_test_")
    yield Path(temp_dir)
    # Cleanup after test
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def star_edges():
    """Undirected star: center HUB, leaves S0..S19."""
    return [("HUB", leaf) for leaf in STAR_LEAVES]


@pytest.fixture
def star_graph(star_edges):
    """Expander over the 20-leaf star."""
    return InMemoryGraphExpander.from_edges(star_edges)


@pytest.fixture
def chain_edges():
    """Undirected 10-vertex chain N0 - N1 - ... - N9."""
    return list(zip(CHAIN_NODES, CHAIN_NODES[1:]))


@pytest.fixture
def chain_graph(chain_edges):
    """Expander over the 10-vertex chain."""
    return InMemoryGraphExpander.from_edges(chain_edges)


@pytest.fixture
def typed_edges():
    """Small labelled graph with two routes between A and Z."""
    return [
        ("A", "B", "cites"),
        ("A", "C", "cites"),
        ("B", "D", "cites"),
        ("C", "D", "authored_by"),
        ("C", "E", "mentions"),
        ("D", "Z", "cites"),
        ("E", "Z", "mentions"),
        ("E", "F", "cites"),
    ]


@pytest.fixture
def edge_list_file(temp_output_dir, typed_edges):
    """Tab-separated edge list of typed_edges with a comment header."""
    path = temp_output_dir / "graph.tsv"
    with open(path, 'w') as f:
        f.write("# source\ttarget\trelationship\n")
        for source, target, relationship in typed_edges:
            f.write(f"{source}\t{target}\t{relationship}\n")
    return path

# SeedWeaver v0.1.0
# Any usage is subject to this software's license.
