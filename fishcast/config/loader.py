"""YAML config loader, dotted-key lookup and in-place file updates."""

import logging
from pathlib import Path
from typing import Any

import yaml

from fishcast.config.defaults import DEFAULT_SPOTS
from fishcast.config.schema import FishcastConfig

logger = logging.getLogger(__name__)


def load_config(path: str | Path) -> FishcastConfig:
    """Load and validate config from a YAML file.

    If no spots are specified in the YAML, injects DEFAULT_SPOTS.
    """
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return _validate(raw)


def default_config() -> FishcastConfig:
    return FishcastConfig(spots=DEFAULT_SPOTS)


def get_config_value(config: FishcastConfig, dotted_key: str) -> Any:
    """Look up a value by dotted key, e.g. 'forecast.days' or 'spots.0.name'.

    Values come back in their YAML form: enums as strings, models as dicts.
    """
    node: Any = config.model_dump(mode="json")
    for part in dotted_key.split("."):
        try:
            node = node[int(part)] if isinstance(node, list) else node[part]
        except (KeyError, IndexError, ValueError, TypeError):
            raise KeyError(f"Unknown config key: {dotted_key}") from None
    return node


def set_config_value(path: str | Path, dotted_key: str, value: Any) -> FishcastConfig:
    """Set one key in the YAML file at `path` and return the validated result.

    String values are parsed as YAML scalars or lists unless the key
    currently holds a string, so "3" sets an int and "[snook]" a list while
    a station id such as "8721604" stays text. The file is only rewritten
    once the updated config validates. A missing file is created, and keys
    the file does not mention are added without copying in defaults, except
    that editing a spot first writes out the full spot list. Comments in
    the file are not preserved.
    """
    path = Path(path)
    raw: dict = {}
    if path.exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

    current = get_config_value(_validate(raw), dotted_key)
    if isinstance(value, str) and current is not None and not isinstance(current, str):
        value = yaml.safe_load(value)

    parts = dotted_key.split(".")
    if parts[0] == "spots" and len(parts) > 1 and not raw.get("spots"):
        raw["spots"] = [s.model_dump(mode="json") for s in DEFAULT_SPOTS]
    _assign(raw, parts, value)

    config = _validate(raw)
    with open(path, "w") as f:
        yaml.safe_dump(raw, f, sort_keys=False)
    logger.info("Wrote %s = %r to %s", dotted_key, value, path)
    return config


def _validate(raw: dict) -> FishcastConfig:
    if not raw.get("spots"):
        raw = {**raw, "spots": DEFAULT_SPOTS}
    return FishcastConfig(**raw)


def _assign(node: Any, parts: list[str], value: Any) -> None:
    for part in parts[:-1]:
        node = node[int(part)] if isinstance(node, list) else node.setdefault(part, {})
    last = parts[-1]
    if isinstance(node, list):
        node[int(last)] = value
    else:
        node[last] = value
