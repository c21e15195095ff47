"""
Environment Variables
---------------------

:class:`EnvironmentVariables` is the property store every resolver reads
from: a flat, mutable mapping of dotted string keys to string values.
Environment scoping lives entirely in the key names
(``environments.<env>.<name>``); this class knows nothing about it and
simply stores and filters keys.

Nested configuration (for example a parsed YAML document) is flattened
with :meth:`EnvironmentVariables.from_dict`::

    variables = EnvironmentVariables.from_dict({
        "environment": "ci",
        "environments": {"ci": {"webdriver": {"base": {"url": "http://ci"}}}},
    })
    variables.get_property("environments.ci.webdriver.base.url")  # 'http://ci'
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, Mapping, MutableMapping, Optional


_TRUE_VALUES = {"true", "yes", "on", "1"}
_FALSE_VALUES = {"false", "no", "off", "0"}


def _as_property_string(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_as_property_string(item) for item in value)
    return str(value)


class EnvironmentVariables(MutableMapping[str, str]):
    """Mutable string-to-string property store."""

    def __init__(self, properties: Optional[Mapping[str, Any]] = None) -> None:
        self._properties: Dict[str, str] = {}
        for key, value in (properties or {}).items():
            self.set_property(key, value)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], prefix: str = "") -> "EnvironmentVariables":
        """Flatten a nested mapping into dotted keys.

        ``None`` leaves are skipped.  Lists become comma separated
        strings, which is how ``environment: [ci, staging]`` turns into the
        ``ci,staging`` value the resolver expects.
        """
        variables = cls()
        stack = [(prefix, data)]
        while stack:
            base, node = stack.pop()
            for key, value in node.items():
                dotted = f"{base}.{key}" if base else str(key)
                if isinstance(value, Mapping):
                    stack.append((dotted, value))
                elif value is not None:
                    variables.set_property(dotted, value)
        return variables

    # MutableMapping protocol

    def __getitem__(self, key: str) -> str:
        return self._properties[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.set_property(key, value)

    def __delitem__(self, key: str) -> None:
        del self._properties[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._properties!r})"

    # Property accessors

    def get_property(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._properties.get(key, default)

    def set_property(self, key: str, value: Any) -> None:
        self._properties[str(key)] = _as_property_string(value)

    def clear_property(self, key: str) -> None:
        self._properties.pop(key, None)

    def get_properties_with_prefix(self, prefix: str) -> Dict[str, str]:
        """Return every raw key/value pair whose key starts with ``prefix``."""
        return {key: value for key, value in self._properties.items() if key.startswith(prefix)}

    def get_boolean_property(self, key: str, default: bool = False) -> bool:
        value = self._properties.get(key)
        if value is None:
            return default
        normalised = value.strip().lower()
        if normalised in _TRUE_VALUES:
            return True
        if normalised in _FALSE_VALUES:
            return False
        return default

    def get_integer_value(self, key: str, default: int = 0) -> int:
        value = self._properties.get(key)
        if value is None:
            return default
        try:
            return int(value.strip())
        except ValueError:
            return default

    def copy(self) -> "EnvironmentVariables":
        return self.__class__(dict(self._properties))


__all__ = ["EnvironmentVariables"]
