"""Configuration management for nexus-repos.

Handles loading and validation of YAML configuration files describing
the Nexus server to talk to and how to log.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_CONFIG_PATH = "/etc/nexus-repos/config.yaml"


@dataclass
class NexusConfig:
    """Connection settings for a Nexus server."""

    url: str
    username: Optional[str] = None
    password: Optional[str] = None
    timeout: float = 30.0
    verify_ssl: bool = True


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "INFO"
    log_dir: str = "/var/log/nexus-repos"
    file_logging: bool = False
    console_logging: bool = True


@dataclass
class ClientConfig:
    """Top-level configuration for nexus-repos."""

    nexus: NexusConfig
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def parse_nexus_config(nexus_dict: Dict[str, Any]) -> NexusConfig:
    """Parse the ``nexus`` configuration section.

    Args:
        nexus_dict: Nexus configuration dictionary

    Returns:
        NexusConfig instance

    Raises:
        ValueError: If no server URL is configured
    """
    url = nexus_dict.get("url")
    if not url:
        raise ValueError("Nexus server URL is required (nexus.url)")

    return NexusConfig(
        url=url,
        username=nexus_dict.get("username"),
        password=nexus_dict.get("password"),
        timeout=float(nexus_dict.get("timeout", 30.0)),
        verify_ssl=nexus_dict.get("verify_ssl", True),
    )


def parse_logging_config(logging_dict: Dict[str, Any]) -> LoggingConfig:
    """Parse the ``logging`` configuration section."""
    return LoggingConfig(
        level=logging_dict.get("level", "INFO"),
        log_dir=logging_dict.get("log_dir", "/var/log/nexus-repos"),
        file_logging=logging_dict.get("file_logging", False),
        console_logging=logging_dict.get("console_logging", True),
    )


def parse_config(config_dict: Dict[str, Any]) -> ClientConfig:
    """Parse the full configuration dictionary.

    Args:
        config_dict: Full configuration dictionary

    Returns:
        ClientConfig instance
    """
    logging_config = LoggingConfig()
    if "logging" in config_dict:
        logging_config = parse_logging_config(config_dict["logging"])

    return ClientConfig(
        nexus=parse_nexus_config(config_dict.get("nexus", {})),
        logging=logging_config,
    )


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with config_file.open("r") as f:
        config = yaml.safe_load(f)

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise TypeError(
            f"Configuration root must be a mapping, got {type(config).__name__}"
        )

    # Expand environment variables
    config = _expand_env_vars(config)

    return config


def _expand_env_vars(obj: Any) -> Any:
    """Recursively expand environment variables in configuration.

    Args:
        obj: Configuration object (dict, list, str, etc.)

    Returns:
        Configuration with expanded environment variables
    """
    if isinstance(obj, dict):
        return {key: _expand_env_vars(value) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    elif isinstance(obj, str):
        return os.path.expandvars(obj)
    else:
        return obj


def load_typed_config(config_path: str = DEFAULT_CONFIG_PATH) -> ClientConfig:
    """Load and parse configuration into typed dataclass.

    Args:
        config_path: Path to configuration file

    Returns:
        ClientConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
        ValueError: If the Nexus URL is missing
    """
    config_dict = load_config(config_path)
    return parse_config(config_dict)
