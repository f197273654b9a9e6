#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SeedWeaver v0.1.0

Tests for the configuration-driven sampling pipeline.

Author: SeedWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import json
import logging

import pytest

from seedweaver.config import ConfigValidationError, load_config
from seedweaver.traversal_core import EntropyGuidedPriority, ExpansionConfigurationError
from seedweaver.utils import SamplingPipeline


@pytest.fixture
def pipeline_config(edge_list_file, temp_output_dir):
    """Config sampling typed_edges between A and Z with both exports enabled."""
    config = load_config()
    config['graph']['path'] = str(edge_list_file)
    config['graph']['delimiter'] = '\t'
    config['sampling']['seeds'] = ['A', 'Z']
    config['output']['path'] = str(temp_output_dir / "out" / "result.json")
    config['output']['paths_tsv'] = str(temp_output_dir / "out" / "paths.tsv")
    return config


class TestSamplingPipeline:
    """Test a full run from configuration to exported files."""

    def test_run_summary(self, pipeline_config):
        """Test the summary dictionary of a successful run."""
        pipeline = SamplingPipeline(pipeline_config, configure_logging=False)
        summary = pipeline.run()

        assert summary['status'] == 'success'
        assert summary['strategy'] == 'salience'
        assert summary['seeds'] == ['A', 'Z']
        assert summary['paths_found'] == len(pipeline.result.paths) >= 1
        assert summary['sampled_nodes'] == 7
        assert summary['iterations'] == pipeline.result.stats.iterations
        assert summary['phase_transition_iteration'] == pipeline.result.paths[0].iteration

    def test_outputs_written(self, pipeline_config):
        """Test that the JSON and TSV exports exist and agree."""
        summary = SamplingPipeline(pipeline_config, configure_logging=False).run()

        with open(summary['outputs']['json']) as f:
            written = json.load(f)
        assert written['seeds'] == ['A', 'Z']
        assert len(written['paths']) == summary['paths_found']

        with open(summary['outputs']['paths_tsv']) as f:
            lines = f.read().splitlines()
        assert lines[0].startswith("#")
        assert lines[1].split("\t")[0] == "path_id"
        rows = lines[2:]
        assert len(rows) == summary['paths_found']
        assert all(row.startswith("path_") for row in rows)

    def test_no_exports_configured(self, pipeline_config):
        """Test that a run without output paths writes nothing."""
        pipeline_config['output']['path'] = None
        pipeline_config['output']['paths_tsv'] = None

        summary = SamplingPipeline(pipeline_config, configure_logging=False).run()
        assert summary['outputs'] == {}

    def test_strategy_and_priority_options(self, pipeline_config):
        """Test that strategy and priority settings reach the engine."""
        pipeline_config['sampling']['strategy'] = 'entropy'
        pipeline_config['priority']['node_weight'] = 2.0

        pipeline = SamplingPipeline(pipeline_config, configure_logging=False)
        engine = pipeline.build_engine(pipeline.load_graph())

        assert isinstance(engine.priority, EntropyGuidedPriority)
        assert pipeline.priority_options() == {'node_weight': 2.0, 'epsilon': 1e-10}

    def test_numeric_seeds_match_string_vertices(self, temp_output_dir):
        """Test that YAML integers match vertex names read from the file."""
        edges = temp_output_dir / "numbers.txt"
        edges.write_text("1 2\n2 3\n")
        config = load_config()
        config['graph']['path'] = str(edges)
        config['sampling']['seeds'] = [1, 3]

        pipeline = SamplingPipeline(config, configure_logging=False)
        summary = pipeline.run()

        assert summary['paths_found'] == 1
        assert pipeline.result.paths[0].oriented_nodes == ('1', '2', '3')

    def test_unknown_seed_warns(self, pipeline_config, caplog):
        """Test that a seed missing from the graph is reported."""
        pipeline_config['sampling']['seeds'] = ['A', 'nowhere']

        with caplog.at_level(logging.WARNING, logger="seedweaver"):
            summary = SamplingPipeline(pipeline_config, configure_logging=False).run()

        assert "'nowhere' is not a vertex" in caplog.text
        assert summary['paths_found'] == 0


class TestPipelineErrors:
    """Test configuration problems surfaced by the pipeline."""

    def test_invalid_config_rejected(self, pipeline_config):
        pipeline_config['sampling']['strategy'] = 'random'
        with pytest.raises(ConfigValidationError, match="Invalid sampling strategy"):
            SamplingPipeline(pipeline_config, configure_logging=False)

    def test_graph_path_required(self):
        config = load_config()
        config['sampling']['seeds'] = ['A']

        with pytest.raises(ConfigValidationError, match="graph.path is required"):
            SamplingPipeline(config, configure_logging=False).run()

    def test_seeds_required(self, pipeline_config):
        pipeline_config['sampling']['seeds'] = []

        with pytest.raises(ExpansionConfigurationError):
            SamplingPipeline(pipeline_config, configure_logging=False).run()

# SeedWeaver v0.1.0
# Any usage is subject to this software's license.
