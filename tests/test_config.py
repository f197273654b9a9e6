#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SeedWeaver v0.1.0

Tests for configuration schema and parser.

Author: SeedWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import copy

import pytest
import yaml

from seedweaver.config import (
    DEFAULT_CONFIG,
    ConfigParser,
    ConfigValidationError,
    load_config,
    save_config_template,
    validate_config,
)


# ═══════════════════════════════════════════════════════════════════════
#  Schema: defaults, templates, validation
# ═══════════════════════════════════════════════════════════════════════

class TestSchema:
    """Default configuration, loading and templates."""

    def test_default_sections(self):
        assert set(DEFAULT_CONFIG) == {'graph', 'sampling', 'priority', 'output'}
        assert DEFAULT_CONFIG['sampling']['strategy'] == 'salience'

    def test_defaults_are_valid(self):
        assert validate_config(copy.deepcopy(DEFAULT_CONFIG)) == []

    def test_load_without_file(self):
        """Test that loading with no path returns an independent copy of the defaults."""
        config = load_config()
        config['output']['logging']['level'] = 'DEBUG'

        assert DEFAULT_CONFIG['output']['logging']['level'] == 'INFO'

    def test_load_merges_user_values(self, temp_output_dir):
        """Test that user YAML overrides only the keys it sets."""
        path = temp_output_dir / "user.yaml"
        path.write_text("sampling:\n  strategy: degree\n  seeds: [A, B]\n")

        config = load_config(path)
        assert config['sampling'] == {'strategy': 'degree', 'seeds': ['A', 'B']}
        assert config['graph']['directed'] is False

    @pytest.mark.parametrize("template, strategy", [
        ('default', 'salience'),
        ('degree', 'degree'),
        ('entropy', 'entropy'),
    ])
    def test_templates(self, temp_output_dir, template, strategy):
        """Test that each template writes loadable YAML with its strategy."""
        path = temp_output_dir / f"{template}.yaml"
        save_config_template(path, template=template)

        with open(path) as f:
            written = yaml.safe_load(f)
        assert written['sampling']['strategy'] == strategy
        assert written['sampling']['seeds'] == ['SEED_A', 'SEED_B']

    def test_unknown_template(self, temp_output_dir):
        with pytest.raises(ValueError, match="Unknown configuration template"):
            save_config_template(temp_output_dir / "x.yaml", template='hybrid')

    def test_template_does_not_touch_defaults(self, temp_output_dir):
        save_config_template(temp_output_dir / "e.yaml", template='entropy')
        assert DEFAULT_CONFIG['sampling']['strategy'] == 'salience'
        assert DEFAULT_CONFIG['graph']['delimiter'] is None


class TestValidateConfig:
    """Error reporting for invalid settings."""

    def make_config(self, **sections):
        config = copy.deepcopy(DEFAULT_CONFIG)
        for section, values in sections.items():
            config[section].update(values)
        return config

    def test_invalid_strategy(self):
        errors = validate_config(self.make_config(sampling={'strategy': 'random'}))
        assert errors == ["Invalid sampling strategy: random"]

    @pytest.mark.parametrize("strategy", ['salience', 'degree', 'entropy', 'path_preserving'])
    def test_every_strategy_accepted(self, strategy):
        assert validate_config(self.make_config(sampling={'strategy': strategy})) == []

    def test_missing_graph_file(self, temp_output_dir):
        missing = temp_output_dir / "missing.tsv"
        errors = validate_config(self.make_config(graph={'path': str(missing)}))
        assert errors == [f"Graph file not found: {missing}"]

    def test_seeds_must_be_list(self):
        errors = validate_config(self.make_config(sampling={'seeds': 'A'}))
        assert "sampling.seeds must be a list" in errors

    def test_negative_weight(self):
        errors = validate_config(self.make_config(priority={'node_weight': -1}))
        assert any("node_weight" in error for error in errors)

    def test_zero_weight_and_epsilon(self):
        errors = validate_config(self.make_config(priority={'node_weight': 0, 'epsilon': 0}))
        assert errors == ["priority.node_weight + priority.epsilon must be positive"]

    def test_bad_log_level(self):
        config = self.make_config()
        config['output']['logging']['level'] = 'LOUD'
        assert validate_config(config) == ["Invalid logging level: LOUD"]

    def test_multiple_errors_reported(self):
        errors = validate_config(self.make_config(
            sampling={'strategy': 'random', 'seeds': None},
            priority={'epsilon': -1},
        ))
        assert len(errors) == 3


# ═══════════════════════════════════════════════════════════════════════
#  ConfigParser
# ═══════════════════════════════════════════════════════════════════════

class TestConfigParser:
    """YAML loading, env substitution, overrides and dotted access."""

    def test_defaults_only(self):
        parser = ConfigParser()

        assert parser.get('sampling.strategy') == 'salience'
        assert parser.get('priority.epsilon') == 1e-10
        assert parser.get('no.such.key', 'fallback') == 'fallback'
        assert parser.validate()

    def test_user_file(self, temp_output_dir):
        path = temp_output_dir / "run.yaml"
        path.write_text("graph:\n  directed: true\nsampling:\n  seeds: [X, Y, Z]\n")

        parser = ConfigParser(path)
        assert parser.get_graph_config()['directed'] is True
        assert parser.get_sampling_config()['seeds'] == ['X', 'Y', 'Z']
        assert parser.get_priority_config()['epsilon'] == 1e-10
        assert 'logging' in parser.get_output_config()

    def test_missing_file(self, temp_output_dir):
        with pytest.raises(FileNotFoundError):
            ConfigParser(temp_output_dir / "absent.yaml")

    def test_invalid_yaml(self, temp_output_dir):
        path = temp_output_dir / "broken.yaml"
        path.write_text("sampling: [unclosed\n")

        with pytest.raises(ConfigValidationError, match="Invalid YAML"):
            ConfigParser(path)

    def test_top_level_must_be_mapping(self, temp_output_dir):
        path = temp_output_dir / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigValidationError, match="mapping"):
            ConfigParser(path)

    def test_env_substitution(self, temp_output_dir, monkeypatch):
        """Test ${VAR} and ${VAR:-default} expansion."""
        monkeypatch.setenv("SEEDWEAVER_GRAPH_DIR", "/data/graphs")
        monkeypatch.delenv("SEEDWEAVER_UNSET", raising=False)
        path = temp_output_dir / "env.yaml"
        path.write_text(
            "graph:\n"
            "  path: ${SEEDWEAVER_GRAPH_DIR}/citations.tsv\n"
            "output:\n"
            "  path: ${SEEDWEAVER_UNSET:-out}/result.json\n"
        )

        parser = ConfigParser(path)
        assert parser.get('graph.path') == "/data/graphs/citations.tsv"
        assert parser.get('output.path') == "out/result.json"

    def test_cli_overrides(self):
        parser = ConfigParser()
        parser.merge_cli_overrides({
            'sampling.strategy': 'entropy',
            'graph.directed': None,
            'extra.nested.value': 3,
        })

        assert parser.get('sampling.strategy') == 'entropy'
        assert parser.get('graph.directed') is False
        assert parser.get('extra.nested.value') == 3

    def test_validate_raises(self):
        parser = ConfigParser()
        parser.merge_cli_overrides({'sampling.strategy': 'random'})

        with pytest.raises(ConfigValidationError, match="Invalid sampling strategy"):
            parser.validate()

    def test_to_dict_is_a_copy(self):
        parser = ConfigParser()
        parser.to_dict()['sampling']['seeds'].append('A')

        assert parser.get('sampling.seeds') == []
        assert repr(parser) == "ConfigParser(config_file=None)"

# SeedWeaver v0.1.0
# Any usage is subject to this software's license.
