"""
Configuration management for hyperrank
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .exceptions import ConfigurationError

EXECUTORS = ("process", "thread", "serial")


class Config:
    """Configuration manager with environment-specific settings"""

    def __init__(self, config_path: Optional[str] = None, environment: str = "default"):
        self.environment = environment
        self._config = self._load_config(config_path)
        self._validate()

    def _load_config(self, config_path: Optional[str] = None) -> Dict[str, Any]:
        """Load configuration from YAML files"""

        # Default configuration
        default_config = {
            'ingest': {
                'source_column': 'SOURCE_SUBREDDIT',
                'target_column': 'TARGET_SUBREDDIT',
                'delimiter': '\t',
            },
            'closeness': {
                'executor': 'process',
                'workers': None,  # os.cpu_count()
                'chunksize': None,
            },
            'report': {
                'top_k': 5,
            },
            'logging': {
                'level': 'WARNING',
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            }
        }

        if config_path:
            config_file = Path(config_path)
            if not config_file.exists():
                raise ConfigurationError(f"Config file not found: {config_file}")
        else:
            # Look for config files in standard locations
            possible_paths = [
                Path('config') / f'{self.environment}.yaml',
                Path('config') / 'default.yaml',
            ]

            config_file = None
            for path in possible_paths:
                if path.exists():
                    config_file = path
                    break

        if config_file and config_file.exists():
            try:
                with open(config_file, 'r', encoding='utf-8') as f:
                    file_config = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                raise ConfigurationError(f"Failed to load config from {config_file}: {e}") from e
            if file_config:
                if not isinstance(file_config, dict):
                    raise ConfigurationError(f"Config file {config_file} must contain a mapping")
                default_config = self._deep_merge(default_config, file_config)

        return self._apply_env(default_config)

    def _apply_env(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Environment variables win over file and default values"""
        executor = os.getenv('HYPERRANK_EXECUTOR')
        if executor:
            config['closeness']['executor'] = executor
        workers = _env_int('HYPERRANK_WORKERS')
        if workers is not None:
            config['closeness']['workers'] = workers
        level = os.getenv('HYPERRANK_LOG_LEVEL')
        if level:
            config['logging']['level'] = level
        return config

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries"""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def _validate(self) -> None:
        executor = self.get('closeness.executor')
        if executor not in EXECUTORS:
            raise ConfigurationError(
                f"closeness.executor must be one of {', '.join(EXECUTORS)}, got {executor!r}"
            )
        for key in ('closeness.workers', 'closeness.chunksize', 'report.top_k'):
            value = self.get(key)
            if value is None:
                continue
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ConfigurationError(f"{key} must be a positive integer, got {value!r}")

    def get(self, path: str, default: Any = None) -> Any:
        """Get config value using dot notation (e.g., 'closeness.workers')"""
        keys = path.split('.')
        value = self._config

        try:
            for key in keys:
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, path: str, value: Any) -> None:
        """Set config value using dot notation"""
        keys = path.split('.')
        config = self._config

        for key in keys[:-1]:
            if key not in config:
                config[key] = {}
            config = config[key]

        missing = object()
        previous = config.get(keys[-1], missing)
        config[keys[-1]] = value
        try:
            self._validate()
        except ConfigurationError:
            if previous is missing:
                del config[keys[-1]]
            else:
                config[keys[-1]] = previous
            raise

    @property
    def ingest(self) -> Dict[str, Any]:
        """Edge-list reader configuration"""
        return self.get('ingest', {})

    @property
    def closeness(self) -> Dict[str, Any]:
        """Closeness fan-out configuration"""
        return self.get('closeness', {})

    def to_dict(self) -> Dict[str, Any]:
        """Return full configuration as dictionary"""
        return self._config.copy()


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw == '':
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e
