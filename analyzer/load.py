import yaml
import copy
import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional
from analyzer.defaults import CONFIG_SECTIONS, DEFAULT_CONFIG

CONFIG_PATH = "config/config.yaml"
CONFIG_ENV = "ANALYZER_CONFIG"


def load_yaml(path: str | Path) -> dict[str, Any]:
    path = Path(path)

    if not path.is_file():
        raise FileNotFoundError(f"YAML file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        try:
            return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Error parsing YAML file {path}: {e}")


def merge_config(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(dict(base))
    for key, value in overrides.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: Optional[str | Path] = None) -> dict[str, Any]:
    """
    Returns the defaults from ``analyzer.defaults`` overlaid with the YAML file.

    An explicit ``path`` (or ``$ANALYZER_CONFIG``) must exist; the default
    ``config/config.yaml`` is optional.
    """
    explicit = path or os.environ.get(CONFIG_ENV)
    target = Path(explicit or CONFIG_PATH)

    if not explicit and not target.is_file():
        return merge_config(DEFAULT_CONFIG, {})

    loaded = load_yaml(target)
    if not isinstance(loaded, Mapping):
        raise yaml.YAMLError(f"Config file {target} must contain a mapping")

    sections: dict[str, Any] = {}
    for section, value in loaded.items():
        if section not in CONFIG_SECTIONS:
            logging.getLogger(__name__).warning(f"Ignoring unknown config section '{section}' in {target}")
            continue
        # an empty section (``metrics:``) loads as None
        if value is None:
            value = {}
        if not isinstance(value, Mapping):
            raise yaml.YAMLError(f"Config section '{section}' in {target} must be a mapping")
        sections[section] = value

    return merge_config(DEFAULT_CONFIG, sections)
