"""
Centralized configuration management for the Release Notes Viewer.

Provides:
- Configuration loading from YAML files
- Validation
- Environment variable support
- Default values
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Dict, Any

import yaml


DEFAULT_CHANGELOG_URL = (
    "https://raw.githubusercontent.com/anthropics/claude-code/main/CHANGELOG.md"
)
DEFAULT_TIMEOUT = 30
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080


@dataclass
class SourceConfig:
    """Where the changelog document comes from."""
    url: str = DEFAULT_CHANGELOG_URL
    timeout: float = DEFAULT_TIMEOUT


@dataclass
class WebConfig:
    """Web server configuration."""
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


@dataclass
class AppConfig:
    """Main application configuration."""
    source: SourceConfig = field(default_factory=SourceConfig)
    web: WebConfig = field(default_factory=WebConfig)
    _config_path: Optional[str] = None

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> 'AppConfig':
        """Build from a configuration dictionary as returned by load_config."""
        source = config.get('source', {})
        web = config.get('web', {})
        return cls(
            source=SourceConfig(
                url=source.get('url', DEFAULT_CHANGELOG_URL),
                timeout=source.get('timeout', DEFAULT_TIMEOUT),
            ),
            web=WebConfig(
                host=web.get('host', DEFAULT_HOST),
                port=web.get('port', DEFAULT_PORT),
            ),
            _config_path=config.get('_config_path'),
        )


class ConfigError(Exception):
    """Configuration error."""
    pass


def load_config(
    config_path: Optional[str] = None,
    validate: bool = True
) -> Dict[str, Any]:
    """
    Load configuration from YAML file with environment variable support.

    Environment variables can override YAML values:
    - RELNOTES_CHANGELOG_URL: URL of the changelog document
    - RELNOTES_TIMEOUT: Fetch timeout in seconds
    - RELNOTES_PORT: Port for the web server

    Args:
        config_path: Path to YAML config file, or None to use defaults only
        validate: Whether to validate the resulting values

    Returns:
        Configuration dictionary

    Raises:
        ConfigError: If an explicit config file is missing, unreadable,
            or validation fails
    """
    config: Dict[str, Any] = {}

    if config_path is not None:
        if not os.path.exists(config_path):
            raise ConfigError(
                f"Config file not found: {config_path}\n"
                "Copy config.example.yaml to config.yaml or omit --config to use defaults."
            )

        with open(config_path, 'r', encoding='utf-8') as f:
            try:
                config = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Config file {config_path} must contain a mapping")

    for section in ('source', 'web'):
        # An empty "source:" key loads as None
        if config.get(section) is None:
            config[section] = {}
        elif not isinstance(config[section], dict):
            raise ConfigError(f"{section} must be a mapping in config")

    # Apply environment variable overrides
    if os.getenv('RELNOTES_CHANGELOG_URL'):
        config['source']['url'] = os.getenv('RELNOTES_CHANGELOG_URL')

    if os.getenv('RELNOTES_TIMEOUT'):
        config['source']['timeout'] = _parse_number(
            'RELNOTES_TIMEOUT', os.getenv('RELNOTES_TIMEOUT'), float
        )

    if os.getenv('RELNOTES_PORT'):
        config['web']['port'] = _parse_number(
            'RELNOTES_PORT', os.getenv('RELNOTES_PORT'), int
        )

    # Set defaults
    config['source'].setdefault('url', DEFAULT_CHANGELOG_URL)
    config['source'].setdefault('timeout', DEFAULT_TIMEOUT)
    config['web'].setdefault('host', DEFAULT_HOST)
    config['web'].setdefault('port', DEFAULT_PORT)

    config['_config_path'] = config_path

    if validate:
        validate_config(config)

    return config


def _parse_number(name: str, value: str, kind):
    try:
        return kind(value)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {value!r}")


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate configuration values.

    Args:
        config: Configuration dictionary

    Raises:
        ConfigError: If validation fails
    """
    url = config.get('source', {}).get('url', '')
    if not url:
        raise ConfigError("source.url is required in config")
    if not url.startswith(('http://', 'https://')):
        raise ConfigError(f"source.url must be an http(s) URL, got {url!r}")

    timeout = config.get('source', {}).get('timeout', DEFAULT_TIMEOUT)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError("source.timeout must be a positive number")

    port = config.get('web', {}).get('port', DEFAULT_PORT)
    if isinstance(port, bool) or not isinstance(port, int) or port <= 0:
        raise ConfigError("web.port must be a positive integer")


def get_changelog_url(config: Dict[str, Any]) -> str:
    """
    Get the changelog URL from config.

    Args:
        config: Configuration dictionary

    Returns:
        Changelog document URL
    """
    return config.get('source', {}).get('url', DEFAULT_CHANGELOG_URL)


def get_timeout(config: Dict[str, Any]) -> float:
    """Get the fetch timeout in seconds from config."""
    return config.get('source', {}).get('timeout', DEFAULT_TIMEOUT)
