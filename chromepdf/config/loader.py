import yaml
import copy
from pathlib import Path
from typing import Optional, Union

from .defaults import DEFAULT_CONFIG


def merge_config(user_config: dict) -> dict:
    """
    Merge a user mapping over DEFAULT_CONFIG.

    Sections (pdf / browser / render) are merged key by key so a user
    file only has to name what it changes.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    for key, value in (user_config or {}).items():
        if isinstance(value, dict) and isinstance(config.get(key), dict):
            config[key].update(value)
        else:
            config[key] = value

    return config


def load_config(path: Optional[Union[str, Path]] = None) -> dict:
    """
    Load a YAML config file and merge it with the defaults.

    - No path: defaults only
    - Missing file: FileNotFoundError
    - Malformed YAML or anything but a mapping: ValueError
    """
    user_config = {}

    if path:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            try:
                user_config = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise ValueError(f"Invalid YAML in {path}: {exc}") from exc

        if not isinstance(user_config, dict):
            raise ValueError("Config file must contain a YAML dictionary")

    return merge_config(user_config)
