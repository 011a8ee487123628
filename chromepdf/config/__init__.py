from .loader import load_config, merge_config
from .defaults import DEFAULT_CONFIG

__all__ = [
    "load_config",
    "merge_config",
    "DEFAULT_CONFIG",
]
