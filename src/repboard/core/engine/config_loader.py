"""
YAML → typed config loader.

Loads engine settings from repboard.yaml (bundled with the package) and
optionally merges user overrides from ~/.repboard/repboard.yaml, or from
repboard.yaml inside an explicit data directory.

Usage:
    from repboard.core.engine.config_loader import load_engine_settings
    settings = load_engine_settings()
    settings.weight_last7  # 5

Sections recognised: scoring, windows, progress, presentation.  Keys inside
a section map one-to-one onto EngineSettings fields; unknown keys are
ignored.  If the user override file cannot be parsed, a warning is emitted
and the file is ignored.
"""

from __future__ import annotations

import importlib.resources
import warnings
from dataclasses import fields
from pathlib import Path
from typing import Any

import yaml

from ..config import CONFIG_FILE_NAME, DATA_DIR_NAME
from ..models import EngineSettings

_SECTIONS = ("scoring", "windows", "progress", "presentation")

# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a single YAML file; a non-mapping document yields {}."""
    with open(path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)
    return data if isinstance(data, dict) else {}


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (non-destructive to base)."""
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def get_bundled_yaml_path() -> Path | None:
    """Return the path to the bundled repboard.yaml, or None if not found."""
    ref = importlib.resources.files("repboard").joinpath(CONFIG_FILE_NAME)
    if ref.is_file():
        with importlib.resources.as_file(ref) as p:
            return p
    candidate = Path(__file__).parent.parent.parent / CONFIG_FILE_NAME
    return candidate if candidate.exists() else None


def get_user_yaml_path(data_dir: Path | None = None) -> Path | None:
    """
    Return the user override file if it exists, else None.

    Args:
        data_dir: Data directory to look in; defaults to ~/.repboard
    """
    base = data_dir if data_dir is not None else Path.home() / DATA_DIR_NAME
    p = Path(base) / CONFIG_FILE_NAME
    return p if p.exists() else None


def load_model_config(data_dir: Path | None = None) -> dict[str, Any]:
    """
    Load and merge configuration from YAML sources.

    Load order (later overrides earlier):
    1. Bundled src/repboard/repboard.yaml
    2. User override (see get_user_yaml_path)

    Returns:
        Merged dict of config sections.  Empty dict if no YAML available.
    """
    config: dict[str, Any] = {}

    bundled = get_bundled_yaml_path()
    if bundled is not None:
        config = _deep_merge(config, _load_yaml_file(bundled))

    user = get_user_yaml_path(data_dir)
    if user is not None:
        try:
            user_cfg = _load_yaml_file(user)
        except (OSError, yaml.YAMLError) as exc:
            warnings.warn(
                f"repboard: ignoring unreadable config override {user} ({exc})",
                stacklevel=2,
            )
            user_cfg = {}
        if user_cfg:
            config = _deep_merge(config, user_cfg)

    return config


def settings_from_config(config: dict[str, Any]) -> EngineSettings:
    """
    Build EngineSettings from a merged config dict.

    Raises:
        ValueError: If a value is out of range (see EngineSettings)
    """
    known = {f.name for f in fields(EngineSettings)}
    values: dict[str, Any] = {}
    for section in _SECTIONS:
        body = config.get(section) or {}
        if not isinstance(body, dict):
            raise ValueError(f"config section '{section}' must be a mapping, got {body!r}")
        for key, value in body.items():
            if key in known:
                values[key] = value
    return EngineSettings(**values)


def load_engine_settings(data_dir: Path | None = None) -> EngineSettings:
    """Load YAML config and return validated EngineSettings."""
    return settings_from_config(load_model_config(data_dir))
