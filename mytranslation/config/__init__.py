"""Configuration helpers for mytranslation."""

from .builder import build_config
from .defaults import DEFAULT_CONFIG, get_default_config, merge_config
from .validator import ConfigValidator, ValidationError

__all__ = [
    "DEFAULT_CONFIG",
    "get_default_config",
    "merge_config",
    "build_config",
    "ConfigValidator",
    "ValidationError",
]
