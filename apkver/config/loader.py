"""
Settings loading for apkver.

Settings come from an optional YAML file layered over built-in defaults.
The comparison core never reads settings itself; the CLI (or any other
caller) loads them once and passes the values down.

Settings File
-------------
    apiVersion: apkver/v1
    compare:
      max_digits: 18
    logging:
      verbose: false
      debug: false

Every key is optional. Unknown keys are ignored.

File Discovery
--------------
1. An explicit path passed to load_settings() (must exist).
2. Otherwise the first `.apkver.yaml` found walking upward from start_dir
   (default: the current working directory).
3. Otherwise built-in defaults only.

Merge Behavior
--------------
The file is deep-merged over the defaults with "last wins" semantics:
  - **Dicts**: Recursively merged (keys from overlay override base)
  - **Everything else**: Overwritten

Error Handling
--------------
- ConfigError: Missing explicit file, YAML parse errors, empty or
  non-mapping documents, unsupported apiVersion, invalid values
- All errors are chained with "from err" for better debugging

Examples
--------
    >>> from apkver.config import load_settings
    >>> settings = load_settings()
    >>> settings.max_digits
    18
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from apkver.exceptions import ConfigError
from apkver.logging import get_global_logger
from apkver.versioning.cursor import MAX_DIGITS

SETTINGS_FILENAME = ".apkver.yaml"
API_VERSION = "apkver/v1"

_DEFAULTS: dict[str, Any] = {
    "apiVersion": API_VERSION,
    "compare": {"max_digits": MAX_DIGITS},
    "logging": {"verbose": False, "debug": False},
}

# -------------------------------
# Data types
# -------------------------------


@dataclass(frozen=True)
class Settings:
    """Effective apkver settings.

    Attributes:
        max_digits: Longest digit run the tokenizer accepts.
        verbose: Print verbose log messages.
        debug: Print debug log messages (implies verbose).
        source: Settings file the values came from, or None for defaults.

    """

    max_digits: int = MAX_DIGITS
    verbose: bool = False
    debug: bool = False
    source: Path | None = None


# -------------------------------
# YAML helpers
# -------------------------------


def _load_yaml_file(p: Path) -> dict[str, Any]:
    """
    Load a YAML settings file and return the parsed mapping.

    Raises:
      ConfigError - missing file, invalid YAML, empty or non-mapping document
    """
    if not p.exists():
        raise ConfigError(f"settings file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {p}: {err}") from err
    if data is None:
        raise ConfigError(f"YAML file is empty: {p}")
    if not isinstance(data, dict):
        raise ConfigError(f"top-level YAML must be a mapping (dict): {p}")
    return data


def _deep_merge_dicts(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """
    Deep-merge two dicts with "overlay wins".

    This function does not mutate inputs; returns a new dict.
    """
    result: dict[str, Any] = dict(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


def _find_settings_file(start_dir: Path) -> Path | None:
    """Walk upward from 'start_dir' looking for a settings file."""
    for parent in [start_dir] + list(start_dir.parents):
        candidate = parent / SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


# -------------------------------
# Validation
# -------------------------------


def _section(cfg: dict[str, Any], name: str, p: Path | None) -> dict[str, Any]:
    value = cfg.get(name)
    if not isinstance(value, dict):
        raise ConfigError(f"'{name}' must be a mapping in {p}")
    return value


def _build_settings(cfg: dict[str, Any], source: Path | None) -> Settings:
    api_version = cfg.get("apiVersion")
    if api_version != API_VERSION:
        raise ConfigError(
            f"unsupported apiVersion {api_version!r} in {source} "
            f"(expected {API_VERSION!r})"
        )

    compare = _section(cfg, "compare", source)
    max_digits = compare.get("max_digits")
    # bool is an int subclass; reject it explicitly
    if isinstance(max_digits, bool) or not isinstance(max_digits, int):
        raise ConfigError(f"compare.max_digits must be an integer in {source}")
    if max_digits < 1:
        raise ConfigError(f"compare.max_digits must be positive in {source}")

    logging_cfg = _section(cfg, "logging", source)
    flags: dict[str, bool] = {}
    for key in ("verbose", "debug"):
        value = logging_cfg.get(key)
        if not isinstance(value, bool):
            raise ConfigError(f"logging.{key} must be true or false in {source}")
        flags[key] = value

    return Settings(
        max_digits=max_digits,
        verbose=flags["verbose"],
        debug=flags["debug"],
        source=source,
    )


# -------------------------------
# Public API
# -------------------------------


def load_settings(
    path: Path | None = None,
    *,
    start_dir: Path | None = None,
) -> Settings:
    """Load effective settings.

    Args:
        path: Explicit settings file. Must exist if given.
        start_dir: Directory to start searching for `.apkver.yaml` when no
            explicit path is given. Defaults to the current directory.

    Returns:
        The merged, validated Settings.

    Raises:
        ConfigError: If the file is missing, unparsable, or holds invalid values.

    """
    logger = get_global_logger()

    if path is None:
        path = _find_settings_file((start_dir or Path.cwd()).resolve())

    if path is None:
        logger.debug("CONFIG", "No settings file found; using defaults")
        return _build_settings(_DEFAULTS, None)

    overlay = _load_yaml_file(path)
    logger.verbose("CONFIG", f"Loaded settings from {path}")
    return _build_settings(_deep_merge_dicts(_DEFAULTS, overlay), path)
