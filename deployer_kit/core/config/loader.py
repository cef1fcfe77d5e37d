"""
Configuration loader — reads deployer-kit.yml into a KitConfig.

The file is optional. Without one, built-in defaults apply
(``script/deployers``, ``out``, ``forge build`` / ``forge fmt``).
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from deployer_kit.core.errors import ConfigError
from deployer_kit.core.models.config import KitConfig

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "deployer-kit.yml"

__all__ = ["CONFIG_FILE", "ConfigError", "find_config_file", "load_config"]


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for deployer-kit.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to deployer-kit.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_config(path: Path | None = None, *, search: bool = True) -> KitConfig:
    """Load and validate the generator configuration.

    Args:
        path: Explicit path to a config file. Must exist when given.
        search: When no path is given, look for deployer-kit.yml upward
            from the working directory. If nothing is found, defaults apply.

    Returns:
        Validated KitConfig with relative paths anchored at the config
        file's directory.

    Raises:
        ConfigError: If the file is missing (explicit path) or invalid.
    """
    if path is None:
        path = find_config_file() if search else None
        if path is None:
            logger.debug("No %s found, using defaults", CONFIG_FILE)
            return KitConfig()
    elif not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        config = KitConfig.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    return _anchor_paths(config, path.parent.resolve())


def _anchor_paths(config: KitConfig, root: Path) -> KitConfig:
    """Resolve the config's relative paths against *root*."""
    update = {
        "output_dir": str(root / config.output_dir),
        "artifacts_dir": str(root / config.artifacts_dir),
    }
    if config.template:
        update["template"] = str(root / config.template)
    return config.model_copy(update=update)
