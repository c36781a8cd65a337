"""Read configuration files from disk."""

from __future__ import annotations

import importlib.util
import json
import logging
from pathlib import Path
from typing import Any, Mapping

from gust.errors import ConfigError
from gust.model.config import Config

logger = logging.getLogger(__name__)

__all__ = ["load_config", "read_config"]


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path}: invalid JSON: {exc}", cause=exc) from exc


def _read_python(path: Path) -> Any:
    spec = importlib.util.spec_from_file_location(f"_gust_config_{abs(hash(path))}", path)
    if spec is None or spec.loader is None:
        raise ConfigError(f"{path}: cannot be imported")
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        raise ConfigError(f"{path}: failed to execute: {exc}", cause=exc) from exc
    if not hasattr(module, "config"):
        raise ConfigError(f"{path}: no module-level 'config' defined")
    return module.config


def read_config(path: Path) -> tuple[Mapping[str, Any], Path]:
    """Read the raw config mapping in *path* and the directory it lives in.

    ``.json`` files are parsed; ``.py`` files are executed and their
    ``config`` attribute is used, which is how callables (lazy theme tokens,
    plugin objects) get into a config.
    """
    path = Path(path).resolve()
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")
    suffix = path.suffix.lower()
    if suffix == ".json":
        raw = _read_json(path)
    elif suffix == ".py":
        raw = _read_python(path)
    else:
        raise ConfigError(f"{path}: unsupported config format '{suffix}'")
    if not isinstance(raw, Mapping):
        raise ConfigError(f"{path}: config must be a mapping, got {type(raw).__name__}")
    logger.debug("Read config %s", path)
    return raw, path.parent


def load_config(path: str | Path) -> Config:
    """Load and resolve a configuration file."""
    from gust.config.resolver import resolve_config

    raw, root = read_config(Path(path))
    return resolve_config(raw, root=root)
