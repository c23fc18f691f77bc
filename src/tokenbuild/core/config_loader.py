"""
Build configuration persistence.

Reads tokenbuild.yaml from the project root. A missing file means the
default platform layout; platforms listed in the file replace the default
set entirely.

Default location: {project_root}/tokenbuild.yaml
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import ConfigError, ErrorContext
from .ir.config import ProjectConfig

logger = logging.getLogger(__name__)

CONFIG_FILE = "tokenbuild.yaml"


def get_config_path(project_root: Path) -> Path:
    """Get the tokenbuild.yaml file path."""
    return project_root / CONFIG_FILE


def load_project_config(
    project_root: Path,
    *,
    config_path: Path | None = None,
    use_defaults: bool = True,
) -> ProjectConfig:
    """Load the build configuration.

    Args:
        project_root: Root directory of the token project.
        config_path: Explicit config file; overrides the default location.
        use_defaults: If True, return the default config when no file exists.

    Returns:
        ProjectConfig instance.

    Raises:
        ConfigError: If the file is missing (when use_defaults=False) or invalid.
    """
    path = config_path or get_config_path(project_root)

    if not path.exists():
        if use_defaults and config_path is None:
            logger.debug(f"No {CONFIG_FILE} found in {project_root}, using defaults")
            return ProjectConfig()
        raise ConfigError(f"Config not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}", ErrorContext(file=path)) from e

    if data is None:
        logger.warning(f"Empty {path}, using defaults")
        return ProjectConfig()
    if not isinstance(data, dict):
        raise ConfigError("Expected a mapping at the top level", ErrorContext(file=path))

    return parse_project_config(data, source=path)


def parse_project_config(data: dict[str, Any], *, source: Path | None = None) -> ProjectConfig:
    """Validate raw config data into a ProjectConfig."""
    try:
        return ProjectConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config schema: {e}", ErrorContext(file=source)) from e


def save_project_config(project_root: Path, config: ProjectConfig) -> Path:
    """Write a config to tokenbuild.yaml using camelCase keys.

    Returns:
        Path to the saved file.
    """
    path = get_config_path(project_root)
    data = config.model_dump(mode="json", by_alias=True, exclude_none=True)
    path.write_text(
        yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True),
        encoding="utf-8",
    )
    logger.info(f"Saved build config to {path}")
    return path
