"""
Configuration loading and management.
Loads matcher, export, and logging settings from a YAML file.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .models import DEFAULT_FUZZY_THRESHOLD
from .utils import clamp_threshold


logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.yaml"


@dataclass
class MatcherConfig:
    """Settings for matching runs."""
    use_fuzzy: bool = False
    fuzzy_threshold: int = DEFAULT_FUZZY_THRESHOLD
    export_dir: Path = Path('./exports')
    log_dir: Path = Path('./logs')
    log_level: str = "INFO"
    json_logs: bool = True
    csv_delimiter: Optional[str] = None
    csv_encoding: str = "utf-8"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'MatcherConfig':
        """Build config from a parsed YAML mapping, defaulting missing keys."""
        defaults = cls()
        return cls(
            use_fuzzy=bool(data.get('use_fuzzy', defaults.use_fuzzy)),
            fuzzy_threshold=clamp_threshold(data.get('fuzzy_threshold', defaults.fuzzy_threshold)),
            export_dir=Path(data.get('export_dir', defaults.export_dir)),
            log_dir=Path(data.get('log_dir', defaults.log_dir)),
            log_level=str(data.get('log_level', defaults.log_level)).upper(),
            json_logs=bool(data.get('json_logs', defaults.json_logs)),
            csv_delimiter=data.get('csv_delimiter', defaults.csv_delimiter),
            csv_encoding=data.get('csv_encoding', defaults.csv_encoding),
        )


class ConfigLoader:
    """Loads and caches configuration from YAML files."""

    def __init__(self, config_dir: Path):
        self.config_dir = Path(config_dir)
        self._cache = {}

    def _load_yaml(self, filepath: Path) -> dict[str, Any]:
        """Load a YAML file and cache it."""
        if filepath in self._cache:
            return self._cache[filepath]

        if not filepath.exists():
            raise FileNotFoundError(f"Config file not found: {filepath}")

        logger.info(f"Loading config: {filepath}")
        with open(filepath, 'r') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {filepath}")

        self._cache[filepath] = data
        return data

    def load(self, filename: str = CONFIG_FILENAME) -> MatcherConfig:
        """Load matcher configuration."""
        data = self._load_yaml(self.config_dir / filename)
        config = MatcherConfig.from_dict(data)
        logger.debug(f"Loaded config: fuzzy={config.use_fuzzy} threshold={config.fuzzy_threshold}")
        return config

    def load_or_default(self, filename: str = CONFIG_FILENAME) -> MatcherConfig:
        """Load configuration, falling back to defaults when the file is absent."""
        if not (self.config_dir / filename).exists():
            logger.debug(f"No {filename} in {self.config_dir}, using defaults")
            return MatcherConfig()
        return self.load(filename)

    def clear_cache(self):
        """Clear configuration cache (useful for testing or reload)."""
        self._cache.clear()
        logger.debug("Config cache cleared")
