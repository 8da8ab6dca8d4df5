"""
Configuration for Grapho Algorithms.

This module defines the default settings used when graphs are loaded
and algorithms are run from the command line:
1. Graph construction (representation, directedness, weight type)
2. Algorithm selection and its source/target nodes
3. Output formatting and logging
"""

import json
import logging
import os
from typing import Any, Dict

# Settings for building graphs and running algorithms
GRAPH_CONFIG = {
    'graph': {
        'representation': 'list',  # list, matrix
        'directed': True,
        'weight_type': 'float',  # float, int
    },
    'algorithm': {
        'name': 'bellman-ford',
        'source': 0,
        'target': 5,
    },
    'traversal': {
        # Deepest path dfs_recursive follows before giving up
        'max_recursion_depth': 900,
    },
    'output': {
        'precision': 1,  # decimals for weights and distances
    },
}

LOGGING_CONFIG = {
    'level': 'WARNING',
    'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    'console': True,
}

WEIGHT_TYPES = {
    'float': float,
    'int': int,
}


class GraphConfig:
    """Layered configuration: defaults, then a JSON file, then a dictionary."""

    def __init__(self, config_dict: Dict = None, config_file: str = None):
        """
        Initialize a configuration.

        Args:
            config_dict: Overrides, nested by section like GRAPH_CONFIG
            config_file: Path to a JSON file with overrides
        """
        self.config = {section: dict(values) for section, values in GRAPH_CONFIG.items()}
        self.config['logger'] = dict(LOGGING_CONFIG)

        if config_file:
            if not os.path.exists(config_file):
                raise FileNotFoundError(f"Config file not found: {config_file}")
            with open(config_file, 'r') as f:
                self._merge(json.load(f))

        if config_dict:
            self._merge(config_dict)

    def _merge(self, overrides: Dict):
        for section, values in overrides.items():
            if isinstance(values, dict):
                self.config.setdefault(section, {}).update(values)
            else:
                self.config[section] = values

    def get(self, section: str, key: str, default: Any = None) -> Any:
        return self.config.get(section, {}).get(key, default)

    def set(self, section: str, key: str, value: Any):
        self.config.setdefault(section, {})[key] = value

    @property
    def weight_type(self):
        name = self.get('graph', 'weight_type', 'float')
        if name not in WEIGHT_TYPES:
            raise ValueError(f"Unsupported weight type: {name}")
        return WEIGHT_TYPES[name]


def setup_logger(config: GraphConfig = None, level=None) -> logging.Logger:
    """
    Configure the package logger.

    Calling it again only updates the level, so handlers never pile up.

    Args:
        config: Configuration holding a 'logger' section
        level: Level name or number overriding the configured one

    Returns:
        The 'grapho_algorithms' logger
    """
    settings = config.config['logger'] if config is not None else LOGGING_CONFIG
    logger = logging.getLogger('grapho_algorithms')
    logger.setLevel(level if level is not None else settings.get('level', 'WARNING'))

    if settings.get('console', True) and not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(settings.get('format', LOGGING_CONFIG['format'])))
        logger.addHandler(console_handler)

    return logger
