"""Configuration loading with fail-fast behavior and layered merging.

Layers, later ones overriding earlier ones:
1. Global user config (~/.ef80escape/config.json)
2. Project local config (cwd/.ef80escape/config.json)

Missing layers are skipped. With no layers at all, Pydantic defaults apply.
A later layer overrides single keys of a section, so a local file holding
{"payload": {"field": "body"}} keeps the global payload.indent.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ef80escape.config.schema import Config
from ef80escape.core.errors import ConfigError

logger = logging.getLogger(__name__)

APP_DIR_NAME = ".ef80escape"
CONFIG_FILE_NAME = "config.json"


def get_default_config_path() -> Path:
    """Global config file, ~/.ef80escape/config.json."""
    return Path.home() / APP_DIR_NAME / CONFIG_FILE_NAME


def get_local_config_path(cwd: Path) -> Path:
    return cwd / APP_DIR_NAME / CONFIG_FILE_NAME


def load_config_layer(path: Path, *, required: bool = False) -> dict[str, Any] | None:
    """Read one config file as a JSON object.

    A UTF-8 BOM is tolerated and a blank file counts as an empty object.

    Args:
        path: Config file to read.
        required: If True, a missing file is an error instead of None.

    Returns:
        The parsed object, or None if the file is missing and not required.

    Raises:
        ConfigError: If the file is required but missing, unreadable, not
            JSON, or holds something other than an object.
    """
    if not path.is_file():
        if required:
            raise ConfigError(f"Config file not found: {path}")
        logger.debug("No config file at %s", path)
        return None

    try:
        content = path.read_text(encoding="utf-8-sig").strip()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if not content:
        return {}

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(
            f"Expected a JSON object in config file {path}, got {type(data).__name__}"
        )
    return data


def _overlay(base: dict[str, Any], layer: dict[str, Any]) -> dict[str, Any]:
    """Apply layer on top of base, one section deep."""
    merged = dict(base)
    for section, values in layer.items():
        current = merged.get(section)
        if isinstance(current, dict) and isinstance(values, dict):
            merged[section] = {**current, **values}
        else:
            merged[section] = values
    return merged


def load_config(path: Path | None = None, cwd: Path | None = None) -> Config:
    """Load configuration from file with layered merging.

    Args:
        path: Explicit config file path. If provided, skips layered loading.
        cwd: Working directory for local lookup. Defaults to Path.cwd().

    Returns:
        Validated Config object.

    Raises:
        ConfigError: If any config file contains invalid JSON or merged config
            fails validation.
    """
    if path is not None:
        data = load_config_layer(path, required=True)
        try:
            return Config.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Config validation failed for {path}: {e}") from e

    global_config = get_default_config_path()
    local_config = get_local_config_path(cwd or Path.cwd())

    layers = [global_config]
    # Running from inside the home directory would load the global file twice
    if local_config.resolve() != global_config.resolve():
        layers.append(local_config)

    merged: dict[str, Any] = {}
    loaded_from: list[Path] = []
    for layer in layers:
        data = load_config_layer(layer)
        if data:
            merged = _overlay(merged, data)
            loaded_from.append(layer)

    if not loaded_from:
        logger.debug("No config files found, using Pydantic defaults")
        return Config()

    logger.info("Config loaded from: %s", [str(p) for p in loaded_from])
    try:
        return Config.model_validate(merged)
    except ValidationError as e:
        sources = ", ".join(str(p) for p in loaded_from)
        raise ConfigError(f"Config validation failed (merged from {sources}): {e}") from e
