"""Utilities for turning caller overrides into a validated configuration."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from .defaults import get_default_config, merge_config
from .validator import ConfigValidator

ConfigDict = Dict[str, Any]


def build_config(overrides: Mapping[str, Any] | None = None) -> ConfigDict:
    """Merge overrides onto the defaults and validate the result.

    - `None` values inside a section are dropped so that unset CLI options
      keep their default
    - the merged dictionary is checked with `ConfigValidator`

    Raises:
        ValueError: If the merged configuration fails validation.
    """
    cleaned: ConfigDict = {}
    for section, values in (overrides or {}).items():
        if isinstance(values, Mapping):
            cleaned[section] = {k: v for k, v in values.items() if v is not None}
        elif values is not None:
            cleaned[section] = values

    config = merge_config(get_default_config(), cleaned)
    ConfigValidator.validate_or_raise(config)
    return config
