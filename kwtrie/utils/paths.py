from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any, Dict

import yaml

_CONFIG_DIR = Path(os.getenv("KWTRIE_CONFIG_DIR", "configs"))
_CACHE: Dict[Path, Dict[str, Any]] = {}

_DEFAULT_PATHS: Dict[str, Any] = {
    "data": {
        "raw": "data/raw",
        "processed": "data/processed",
    },
    "artifacts": {
        "logs": "artifacts/logs",
    },
    "reports": "reports",
}


def set_config_dir(config_dir: str | os.PathLike) -> None:
    """Set the directory where YAML configs reside (default: ./configs).

    This can be overridden by setting env var KWTRIE_CONFIG_DIR or via CLI.
    """
    global _CONFIG_DIR
    _CONFIG_DIR = Path(config_dir)


def _paths_yaml() -> Path:
    return (_CONFIG_DIR / "paths.yaml").resolve()


def load_yaml_once(path: str | os.PathLike) -> Dict[str, Any]:
    """Load a YAML file and cache its parsed content by absolute path.

    - A missing paths.yaml resolves to built-in directory defaults.
    - Any other missing file resolves to an empty mapping so in-code defaults apply.
    - Malformed YAML, or a YAML root that is not a mapping, raises ValueError.
    """
    p = Path(path).resolve()
    if p in _CACHE:
        return _CACHE[p]

    if not p.exists():
        data = copy.deepcopy(_DEFAULT_PATHS) if p.name == "paths.yaml" else {}
        _CACHE[p] = data
        return data

    with open(p, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML: {p} ({e})") from e
    if not isinstance(data, dict):
        raise ValueError(f"YAML root must be a mapping: {p}")
    _CACHE[p] = data
    return data


def clear_cache() -> None:
    _CACHE.clear()


def _get_from_dot(mapping: Dict[str, Any], dot_key: str) -> Any:
    cur: Any = mapping
    for part in dot_key.split("."):
        if not isinstance(cur, dict) or part not in cur:
            raise KeyError(f"Key not found in config: {dot_key}")
        cur = cur[part]
    return cur


def get_value(mapping: Dict[str, Any], dot_key: str, default: Any = None) -> Any:
    """Dot-key lookup that returns `default` instead of raising."""
    try:
        return _get_from_dot(mapping, dot_key)
    except KeyError:
        return default


def get_path(dot_key: str) -> str:
    """Return a path value from configs/paths.yaml via dot notation.

    Example: get_path("artifacts.logs") -> "artifacts/logs"
    """
    cfg = load_yaml_once(_paths_yaml())
    val = _get_from_dot(cfg, dot_key)
    if not isinstance(val, str):
        raise TypeError(f"Config value for '{dot_key}' must be a string path")
    return val


def expand(dot_key: str, *parts: str) -> str:
    """Join base path from config with additional parts and ensure directory exists.

    - If parts represent a file path, ensure parent directory exists.
    - Returns the full path as a string.
    """
    base = Path(get_path(dot_key))
    full = base.joinpath(*parts)
    target_dir = full if full.suffix == "" else full.parent
    target_dir.mkdir(parents=True, exist_ok=True)
    return str(full)
