#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SeedWeaver v0.1.0

Run configuration: a YAML file layered over DEFAULT_CONFIG, then CLI options
layered over that.

Strings in the file may reference the environment as ${NAME} or
${NAME:-fallback}; references are resolved once, when the file is read.

Author: SeedWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import copy
import os
import re
import yaml
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .schema import DEFAULT_CONFIG, _deep_merge, validate_config


class ConfigValidationError(Exception):
    """A configuration file or value that cannot be used for a run."""
    pass


class ConfigParser:
    """
    Layered SeedWeaver configuration.

    Lookup uses dotted keys, e.g. parser.get('sampling.strategy').
    """

    ENV_PATTERN = re.compile(r'\$\{([^}:]+)(?::-(.*?))?\}')
    SECTIONS = ('graph', 'sampling', 'priority', 'output')

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        """
        Args:
            config_file: YAML file overriding the defaults (optional)
        """
        self.config_file = Path(config_file) if config_file else None
        self._config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)

        if self.config_file is not None:
            self._read_file()

    def _read_file(self):
        if not self.config_file.is_file():
            raise FileNotFoundError(f"Config file does not exist: {self.config_file}")

        try:
            loaded = yaml.safe_load(self.config_file.read_text())
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML in {self.config_file}: {e}")

        if loaded is None:
            return
        if not isinstance(loaded, dict):
            raise ConfigValidationError(
                f"{self.config_file} must contain a mapping at top level, "
                f"got {type(loaded).__name__}"
            )

        self._config = self._expand_env(_deep_merge(self._config, loaded))

    @classmethod
    def _expand_env(cls, value: Any) -> Any:
        """Resolve ${NAME} and ${NAME:-fallback} inside every string value."""
        if isinstance(value, dict):
            return {key: cls._expand_env(item) for key, item in value.items()}
        if isinstance(value, list):
            return [cls._expand_env(item) for item in value]
        if isinstance(value, str):
            return cls.ENV_PATTERN.sub(
                lambda m: os.environ.get(m.group(1), m.group(2) or ''), value
            )
        return value

    def merge_cli_overrides(self, overrides: Dict[str, Any]):
        """
        Apply dotted-key overrides such as {'graph.directed': True}.

        None means "option not given" and leaves the current value alone.
        Missing intermediate sections are created.
        """
        for dotted, value in overrides.items():
            if value is None:
                continue
            *parents, leaf = dotted.split('.')
            section = self._config
            for name in parents:
                if not isinstance(section.get(name), dict):
                    section[name] = {}
                section = section[name]
            section[leaf] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Value at a dotted key, or default when any level is absent."""
        node = self._config
        for part in key.split('.'):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def get_graph_config(self) -> Dict[str, Any]:
        return self._config.get('graph', {})

    def get_sampling_config(self) -> Dict[str, Any]:
        return self._config.get('sampling', {})

    def get_priority_config(self) -> Dict[str, Any]:
        return self._config.get('priority', {})

    def get_output_config(self) -> Dict[str, Any]:
        return self._config.get('output', {})

    def to_dict(self) -> Dict[str, Any]:
        """Independent copy of the merged configuration."""
        return copy.deepcopy(self._config)

    def validate(self) -> bool:
        """
        Check the merged configuration.

        Returns:
            True when every check passes

        Raises:
            ConfigValidationError: Listing every problem found, '; '-separated
        """
        missing = [name for name in self.SECTIONS if not isinstance(self._config.get(name), dict)]
        if missing:
            raise ConfigValidationError(f"Missing configuration section(s): {', '.join(missing)}")

        errors = validate_config(self._config)
        if errors:
            raise ConfigValidationError("; ".join(errors))
        return True

    def __repr__(self) -> str:
        return f"ConfigParser(config_file={self.config_file})"

# SeedWeaver v0.1.0
# Any usage is subject to this software's license.
