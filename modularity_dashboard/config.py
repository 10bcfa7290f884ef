"""
Configuration management for the Modularization Dashboard.
"""

import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional

import yaml

from .exceptions import ConfigurationError
from .logging_config import get_logger

logger = get_logger('config')

DEFAULT_INTRO = (
    "This page lists the libraries resolved for the project and how far each "
    "of them has adopted the Java Module System."
)


@dataclass
class MavenConfig:
    """Configuration for the Maven invocations."""
    executable: Optional[str] = None  # None prefers ./mvnw, then mvn
    tree_file: str = "tree.txt"
    verbose_tree_file: str = "tree-verbose.txt"
    classpath_file: str = "cp.txt"
    verbose_tree: bool = True
    extra_args: list = field(default_factory=list)


@dataclass
class InspectionConfig:
    """Configuration for artifact inspection."""
    repository_marker: str = ".m2"
    max_java_release: Optional[int] = None  # None detects it from the local JVM


@dataclass
class AnnotationConfig:
    """Configuration for dependency tree annotation."""
    root_coordinate: Optional[str] = None  # None uses the first tree line
    artifact_url: str = "https://central.sonatype.com/artifact/{group_id}/{artifact_id}"


@dataclass
class OutputConfig:
    """Configuration for report output."""
    output_path: str = os.path.join("site", "index.html")
    json_path: Optional[str] = None
    title: str = "Modularization Dashboard"
    intro: str = DEFAULT_INTRO


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "INFO"
    log_file: Optional[str] = None
    verbose: bool = False


@dataclass
class Config:
    """Main configuration class."""
    maven: MavenConfig = field(default_factory=MavenConfig)
    inspection: InspectionConfig = field(default_factory=InspectionConfig)
    annotation: AnnotationConfig = field(default_factory=AnnotationConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from file or use defaults.

    Args:
        config_path: Optional path to configuration file

    Returns:
        Config object with loaded settings

    Raises:
        ConfigurationError: If configuration file is invalid
    """
    config = Config()

    if config_path and os.path.exists(config_path):
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in configuration file: {e}")
        except OSError as e:
            raise ConfigurationError(f"Error loading configuration file: {e}")

        if config_data:
            if not isinstance(config_data, dict):
                raise ConfigurationError(f"Configuration file must contain a mapping: {config_path}")
            _update_config_from_dict(config, config_data)
            logger.info(f"Loaded configuration from {config_path}")

    elif config_path:
        logger.warning(f"Configuration file not found: {config_path}")

    _validate_config(config)
    return config


def _update_config_from_dict(config: Config, config_data: Dict[str, Any]) -> None:
    """
    Update configuration object from dictionary data.

    Args:
        config: Config object to update
        config_data: Dictionary with configuration data
    """
    sections = {f.name for f in fields(config)}
    for section_name, section_data in config_data.items():
        if section_name not in sections:
            raise ConfigurationError(f"Unknown configuration section: '{section_name}'")
        if section_data is None:
            continue
        if not isinstance(section_data, dict):
            raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping")

        section = getattr(config, section_name)
        known_keys = {f.name for f in fields(section)}
        for key, value in section_data.items():
            if key not in known_keys:
                raise ConfigurationError(f"Unknown configuration key: '{section_name}.{key}'")
            setattr(section, key, value)


def _validate_config(config: Config) -> None:
    release = config.inspection.max_java_release
    if release is not None and (not isinstance(release, int) or release < 9):
        raise ConfigurationError(f"inspection.max_java_release must be an integer >= 9, got {release!r}")

    if not config.inspection.repository_marker:
        raise ConfigurationError("inspection.repository_marker must not be empty")

    if not isinstance(config.maven.extra_args, list):
        raise ConfigurationError("maven.extra_args must be a list")

    try:
        config.annotation.artifact_url.format(group_id="g", artifact_id="a", version="v")
    except (KeyError, IndexError, ValueError) as e:
        raise ConfigurationError(f"Invalid annotation.artifact_url template: {e}")


def get_default_config_path() -> Optional[str]:
    """
    Get the default configuration file path.

    Returns:
        Path to default config file if it exists, None otherwise
    """
    possible_paths = [
        'modularity_dashboard.yaml',
        'modularity_dashboard.yml',
        os.path.expanduser('~/.modularity_dashboard.yaml'),
        os.path.expanduser('~/.modularity_dashboard.yml'),
    ]

    for path in possible_paths:
        if os.path.exists(path):
            return path

    return None
