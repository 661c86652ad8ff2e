"""
Configuration management for the cluedo-board CLI.

Handles loading CLI settings from a JSON file and the environment.
"""

import os
import json
import logging
from pathlib import Path
from typing import Dict, Any, List, Optional

from ..game.constants import Room, RoomTopology, STANDARD_TOPOLOGY

logger = logging.getLogger(__name__)


class BoardConfig:
    """Manages CLI configuration settings."""

    DEFAULT_CONFIG = {
        # Board settings
        'layout_path': None,  # Packaged standard board if None
        'corner_pairs': None,  # Standard stairs if None, else [[room, room], ...]

        # Output formatting
        'color_output': True,

        # CLI behavior
        'verbose': False,
        'quiet': False,
    }

    BOOL_KEYS = ('color_output', 'verbose', 'quiet')

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, uses default locations.
        """
        self._config = self.DEFAULT_CONFIG.copy()
        self._config_file = config_file or self._find_config_file()
        self._load_config()

    def _find_config_file(self) -> Optional[str]:
        """Find configuration file in standard locations."""
        config_locations = [
            Path.cwd() / '.cluedo-board.json',
            Path.cwd() / 'cluedo-board.json',
            Path.home() / '.cluedo-board.json',
            Path.home() / '.config' / 'cluedo-board.json',
        ]

        for config_path in config_locations:
            if config_path.exists() and config_path.is_file():
                logger.debug(f"Found config file: {config_path}")
                return str(config_path)

        return None

    def _load_config(self):
        """Load configuration from file and environment variables."""
        if self._config_file and os.path.exists(self._config_file):
            try:
                with open(self._config_file, 'r') as f:
                    file_config = json.load(f)
                    self._config.update(file_config)
                    logger.debug(f"Loaded config from {self._config_file}")
            except (json.JSONDecodeError, IOError) as e:
                logger.warning(f"Failed to load config file {self._config_file}: {e}")

        self._load_env_config()

    def _load_env_config(self):
        """Load configuration from environment variables."""
        env_mappings = {
            'CLUEDO_BOARD_LAYOUT': 'layout_path',
            'CLUEDO_BOARD_CORNER_PAIRS': 'corner_pairs',
            'CLUEDO_BOARD_COLOR': 'color_output',
            'CLUEDO_BOARD_VERBOSE': 'verbose',
            'CLUEDO_BOARD_QUIET': 'quiet',
        }

        for env_var, config_key in env_mappings.items():
            env_value = os.environ.get(env_var)
            if env_value is None:
                continue
            if config_key in self.BOOL_KEYS:
                self._config[config_key] = env_value.lower() in ('true', '1', 'yes', 'on')
            elif config_key == 'corner_pairs':
                # e.g. "KITCHEN:STUDY,CONSERVATORY:LOUNGE"
                self._config[config_key] = [
                    pair.split(':') for pair in env_value.split(',') if pair.strip()
                ]
            else:
                self._config[config_key] = env_value

    def topology(self) -> RoomTopology:
        """Build the room topology described by ``corner_pairs``."""
        pairs = self._config.get('corner_pairs')
        if not pairs:
            return STANDARD_TOPOLOGY

        resolved = []
        for pair in pairs:
            if len(pair) != 2:
                raise ValueError(f"Invalid corner pair {pair!r}: expected two room names")
            rooms = [Room.from_name(name) for name in pair]
            if None in rooms:
                raise ValueError(f"Invalid corner pair {pair!r}: unknown room name")
            resolved.append(tuple(rooms))
        return RoomTopology.with_corner_pairs(resolved)

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set configuration value."""
        self._config[key] = value

    def update(self, updates: Dict[str, Any]):
        """Update configuration with multiple values."""
        self._config.update(updates)

    def to_dict(self) -> Dict[str, Any]:
        """Return configuration as dictionary."""
        return self._config.copy()

    def __repr__(self):
        return f"BoardConfig(config_file={self._config_file})"


def format_corner_pairs(pairs: Optional[List[List[str]]]) -> str:
    if not pairs:
        return "standard"
    return ", ".join(f"{a}<->{b}" for a, b in pairs)


# Global configuration instance
_config = None

def get_config() -> BoardConfig:
    """Get global configuration instance."""
    global _config
    if _config is None:
        _config = BoardConfig()
    return _config

def set_config(config: BoardConfig):
    """Set global configuration instance."""
    global _config
    _config = config
