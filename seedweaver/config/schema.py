"""
SeedWeaver v0.1.0

Configuration schema for SeedWeaver.

Defines all available configuration parameters with defaults and validation.

Author: SeedWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from typing import Dict, Any, Optional, List
from pathlib import Path
import copy
import yaml


# Default configuration values
DEFAULT_CONFIG = {
    # ========================================================================
    # Graph Input
    # ========================================================================
    'graph': {
        'path': None,  # Edge-list file
        'directed': False,
        'delimiter': None,  # None = any whitespace
        'default_relationship': 'edge',  # Used for two-column lines
    },

    # ========================================================================
    # Sampling
    # ========================================================================
    'sampling': {
        'strategy': 'salience',  # 'salience', 'degree', 'entropy', 'path_preserving'
        'seeds': [],
    },

    # ========================================================================
    # Base Priority: degree / (node_weight + epsilon)
    # ========================================================================
    'priority': {
        'node_weight': None,  # None = expander's own per-node weight (1.0)
        'epsilon': 1e-10,
    },

    # ========================================================================
    # Output
    # ========================================================================
    'output': {
        'path': None,  # Result JSON; None = print summary only
        'paths_tsv': None,
        'logging': {
            'level': 'INFO',
            'log_file': None,
        },
    },
}

VALID_STRATEGIES = ['salience', 'degree', 'entropy', 'path_preserving']
VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from file or use defaults.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Configuration dictionary
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path and Path(config_path).exists():
        with open(config_path, 'r') as f:
            user_config = yaml.safe_load(f)

        if user_config:
            # Deep merge user config into defaults
            config = _deep_merge(config, user_config)

    return config


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Override dictionary

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def save_config_template(output_path: Path, template: str = 'default'):
    """
    Save a configuration template to file.

    Args:
        output_path: Output file path
        template: Template type ('default', 'degree', 'entropy')
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    config['graph']['path'] = 'graph.tsv'
    config['sampling']['seeds'] = ['SEED_A', 'SEED_B']

    # Customize for specific templates
    if template == 'degree':
        config['sampling']['strategy'] = 'degree'

    elif template == 'entropy':
        config['sampling']['strategy'] = 'entropy'
        config['graph']['delimiter'] = '\t'

    elif template != 'default':
        raise ValueError(f"Unknown configuration template: {template}")

    with open(output_path, 'w') as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration dictionary.

    Args:
        config: Configuration to validate

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    # Graph input
    graph_path = config.get('graph', {}).get('path')
    if graph_path and not Path(graph_path).exists():
        errors.append(f"Graph file not found: {graph_path}")

    # Sampling
    sampling = config.get('sampling', {})
    strategy = sampling.get('strategy')
    if strategy not in VALID_STRATEGIES:
        errors.append(f"Invalid sampling strategy: {strategy}")

    seeds = sampling.get('seeds')
    if not isinstance(seeds, list):
        errors.append("sampling.seeds must be a list")

    # Priority
    priority = config.get('priority', {})
    node_weight = priority.get('node_weight')
    epsilon = priority.get('epsilon', 0)
    weight_ok = node_weight is None or (isinstance(node_weight, (int, float)) and node_weight >= 0)
    epsilon_ok = isinstance(epsilon, (int, float)) and epsilon >= 0
    if not weight_ok:
        errors.append(f"Invalid priority.node_weight: {node_weight} (must be a non-negative number)")
    if not epsilon_ok:
        errors.append(f"Invalid priority.epsilon: {epsilon} (must be a non-negative number)")
    if weight_ok and epsilon_ok and node_weight is not None and node_weight + epsilon <= 0:
        errors.append("priority.node_weight + priority.epsilon must be positive")

    # Logging
    level = config.get('output', {}).get('logging', {}).get('level', 'INFO')
    if str(level).upper() not in VALID_LOG_LEVELS:
        errors.append(f"Invalid logging level: {level}")

    return errors

# SeedWeaver v0.1.0
# Any usage is subject to this software's license.
