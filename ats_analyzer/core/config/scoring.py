from __future__ import annotations

from functools import lru_cache
from importlib.resources import abc, files
from pathlib import Path
from typing import Any

import yaml

from .settings import settings

_BUNDLED_SCORING_CONFIG = "scoring.yaml"


def _scoring_config_path() -> Path | abc.Traversable:
    if settings.scoring_config_path:
        return Path(settings.scoring_config_path)
    return files(__package__).joinpath(_BUNDLED_SCORING_CONFIG)


def _read_scoring_file(path: Path | abc.Traversable) -> dict[str, Any]:
    if not path.is_file():
        raise RuntimeError(
            f"Scoring weights file missing: '{path}'. "
            "Set SCORING_CONFIG_PATH or reinstall the package."
        )
    try:
        with path.open("r", encoding="utf-8") as handle:
            parsed = yaml.safe_load(handle)
    except OSError as exc:
        raise RuntimeError(f"Cannot open scoring weights file '{path}': {exc}") from exc
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Scoring weights file '{path}' is not valid YAML: {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Scoring weights file '{path}' must hold a mapping at the top level.")
    return parsed


@lru_cache(maxsize=1)
def get_scoring_config() -> dict[str, Any]:
    """Scoring weights, thresholds and caps, read once per process."""
    return _read_scoring_file(_scoring_config_path())


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Look up a dotted key such as 'ats.density.high_above'; `default` when any segment is absent."""
    if not path:
        return default

    node: Any = get_scoring_config()
    for segment in path.split("."):
        if not isinstance(node, dict) or segment not in node:
            return default
        node = node[segment]
    return node


def clear_scoring_config_cache() -> None:
    get_scoring_config.cache_clear()
