"""Convert capability strings from property files into typed values."""

from typing import Any

import yaml


def as_object(value: str) -> Any:
    """Interpret ``value`` with YAML scalar and flow rules.

    ``"true"`` becomes ``True``, ``"30"`` becomes ``30``, ``"[a, b]"`` a
    list and ``"{k: v}"`` a dict.  Anything YAML rejects, or reads as
    null, comes back as the original string.
    """
    if value is None:
        return None
    stripped = value.strip()
    if not stripped:
        return value
    try:
        parsed = yaml.safe_load(stripped)
    except yaml.YAMLError:
        return value
    if parsed is None or isinstance(parsed, (str, bytes)):
        return value
    # dates and other YAML-native types are not capability values
    if not isinstance(parsed, (bool, int, float, list, dict)):
        return value
    return parsed


__all__ = ["as_object"]
