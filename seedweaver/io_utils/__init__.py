"""
SeedWeaver v0.1.0

I/O Module for SeedWeaver.

1. edge_list.py - Edge-list loading into an in-memory graph expander
2. result_export.py - Expansion result export (JSON, path TSV)
"""

from .edge_list import load_edge_list, parse_edge_line
from .result_export import export_paths_tsv, export_result_json

__all__ = [
    "load_edge_list",
    "parse_edge_line",
    "export_paths_tsv",
    "export_result_json",
]
