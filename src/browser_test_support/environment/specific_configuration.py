"""
Environment-Specific Configuration
----------------------------------

Resolves a property name to the value that applies under the currently
active environment(s).  Properties may be scoped in the key itself::

    environments.<env>.<name>      only when <env> is active
    environments.all.<name>        every environment
    environments.default.<name>    when no named environment supplies one
    <name>                         unscoped

The active environments come from the unscoped ``environment`` key, a
comma separated list such as ``ci,staging``.  When several active
environments define the same property the one listed last wins.

How a lookup proceeds depends on the overall shape of the property
store, classified once per resolver as an :class:`EnvironmentStrategy`.
Each strategy maps to a plain function over ``(variables, environments,
key)`` so the chains can be exercised on their own.

Values may refer to other properties with ``#{name}``; references are
expanded through the same resolver.  A reference that cannot be
resolved is left in place.  Each replacement is expanded in turn before
it is spliced in; a name that reappears on its own expansion path raises
:class:`PropertySubstitutionError`.

Nothing resolved is cached: the store may change between calls and the
next call sees the change.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from ..utils.logger import get_logger
from .errors import (
    ConfigurationError,
    PropertySubstitutionError,
    UndefinedEnvironmentVariableError,
)
from .system_property import SystemProperty
from .variables import EnvironmentVariables


logger = get_logger(__name__)

ENVIRONMENT_KEY = "environment"
ENVIRONMENTS_PREFIX = "environments."
ALL_ENVIRONMENTS = "all"
DEFAULT_ENVIRONMENT = "default"

ENVIRONMENT_PREFIX_PATTERN = re.compile(r"^environments\.([^.]*)\.")
VARIABLE_EXPRESSION_PATTERN = re.compile(r"#\{([^}]*)\}")

PropertyName = Union[str, SystemProperty]
Lookup = Callable[[EnvironmentVariables, Sequence[str], str], Optional[str]]


def active_environments_in(variables: EnvironmentVariables) -> List[str]:
    """Parse the comma separated ``environment`` property."""
    raw = variables.get_property(ENVIRONMENT_KEY, "") or ""
    return [name.strip() for name in raw.split(",") if name.strip()]


def are_defined_in(variables: EnvironmentVariables) -> bool:
    """Return True if any ``environments.*`` property exists."""
    return bool(variables.get_properties_with_prefix(ENVIRONMENTS_PREFIX))


def _environment_key(environment: str, key: str) -> str:
    return f"{ENVIRONMENTS_PREFIX}{environment}.{key}"


def _specified_environments_not_configured(variables: EnvironmentVariables) -> bool:
    # all() over no active environments is True: an unnamed environment
    # counts as not configured.
    return all(
        not variables.get_properties_with_prefix(f"{ENVIRONMENTS_PREFIX}{environment}.")
        for environment in active_environments_in(variables)
    )


# Lookup chains


def contextless_property(variables: EnvironmentVariables, environments: Sequence[str], key: str) -> Optional[str]:
    return variables.get_property(key)


def default_property(variables: EnvironmentVariables, environments: Sequence[str], key: str) -> Optional[str]:
    """``environments.all`` then ``environments.default`` then the bare key."""
    for candidate in (
        _environment_key(ALL_ENVIRONMENTS, key),
        _environment_key(DEFAULT_ENVIRONMENT, key),
        key,
    ):
        value = variables.get_property(candidate)
        if value is not None:
            return value
    return None


def property_for_named_environments(
    variables: EnvironmentVariables, environments: Sequence[str], key: str
) -> Optional[str]:
    """Active environments in order, the last non-empty value winning.

    Falls back to ``environments.all`` and then to :func:`default_property`.
    """
    value: Optional[str] = None
    for environment in environments:
        candidate = variables.get_property(_environment_key(environment, key))
        if candidate:
            value = candidate
    if value is None:
        value = variables.get_property(_environment_key(ALL_ENVIRONMENTS, key))
    if value is None:
        value = default_property(variables, environments, key)
    return value


class EnvironmentStrategy(Enum):
    NO_ENVIRONMENTS_CONFIGURED = "no_environments_configured"
    NAMED_ENVIRONMENT_NOT_CONFIGURED = "named_environment_not_configured"
    DEFAULT_ONLY_CONFIGURED = "default_only_configured"
    ENVIRONMENT_CONFIGURED_BUT_UNNAMED = "environment_configured_but_unnamed"
    ENVIRONMENT_CONFIGURED_AND_NAMED = "environment_configured_and_named"

    @classmethod
    def defined_in(cls, variables: EnvironmentVariables) -> "EnvironmentStrategy":
        """Classify a property store; the first matching rule wins."""
        if not are_defined_in(variables):
            return cls.NO_ENVIRONMENTS_CONFIGURED
        if _specified_environments_not_configured(variables):
            return cls.NAMED_ENVIRONMENT_NOT_CONFIGURED
        environment_is_specified = variables.get_property(ENVIRONMENT_KEY) is not None
        defaults_are_configured = bool(
            variables.get_properties_with_prefix(f"{ENVIRONMENTS_PREFIX}{DEFAULT_ENVIRONMENT}.")
        )
        if defaults_are_configured and not environment_is_specified:
            return cls.DEFAULT_ONLY_CONFIGURED
        if not environment_is_specified:
            return cls.ENVIRONMENT_CONFIGURED_BUT_UNNAMED
        return cls.ENVIRONMENT_CONFIGURED_AND_NAMED

    @property
    def lookup(self) -> Lookup:
        return _LOOKUPS[self]


_LOOKUPS: Dict[EnvironmentStrategy, Lookup] = {
    EnvironmentStrategy.NO_ENVIRONMENTS_CONFIGURED: contextless_property,
    EnvironmentStrategy.ENVIRONMENT_CONFIGURED_BUT_UNNAMED: contextless_property,
    EnvironmentStrategy.NAMED_ENVIRONMENT_NOT_CONFIGURED: default_property,
    EnvironmentStrategy.DEFAULT_ONLY_CONFIGURED: default_property,
    EnvironmentStrategy.ENVIRONMENT_CONFIGURED_AND_NAMED: property_for_named_environments,
}


def _names_of(property_names: Sequence[PropertyName]) -> List[str]:
    names: List[str] = []
    for name in property_names:
        if isinstance(name, SystemProperty):
            names.extend(name.names)
        else:
            names.append(name)
    return names


class EnvironmentSpecificConfiguration:
    """Environment-aware view over an :class:`EnvironmentVariables` store.

    Construction is cheap; build one wherever a lookup is needed::

        config = EnvironmentSpecificConfiguration.from_variables(variables)
        base_url = config.get_property("webdriver.base.url")
    """

    def __init__(self, variables: EnvironmentVariables) -> None:
        self._variables = variables
        self._strategy = EnvironmentStrategy.defined_in(variables)
        logger.debug(
            "Resolving properties with strategy %s for environments %s",
            self._strategy.name,
            active_environments_in(variables),
        )

    @classmethod
    def from_variables(cls, variables: EnvironmentVariables) -> "EnvironmentSpecificConfiguration":
        return cls(variables)

    are_defined_in = staticmethod(are_defined_in)

    @property
    def strategy(self) -> EnvironmentStrategy:
        return self._strategy

    @property
    def active_environments(self) -> List[str]:
        return active_environments_in(self._variables)

    def get_property_value(self, property_name: str) -> Optional[str]:
        """Look a key up through the strategy chain, without expansion."""
        return self._strategy.lookup(self._variables, self.active_environments, property_name)

    def get_optional_property(self, *property_names: PropertyName) -> Optional[str]:
        """Return the expanded value of the first name that resolves.

        Later names act as legacy fallbacks for earlier ones.
        """
        for name in _names_of(property_names):
            value = self.get_property_value(name)
            if value is not None:
                return self._substitute_properties(name, value)
        return None

    def resolve(self, property_name: PropertyName) -> Optional[str]:
        return self.get_optional_property(property_name)

    def get_property(self, property_name: PropertyName) -> str:
        """Like :meth:`resolve`, but a missing value is an error."""
        value = self.get_optional_property(property_name)
        if value is None:
            raise UndefinedEnvironmentVariableError(str(property_name), self.active_environments)
        return value

    def get_integer_property(self, property_name: PropertyName) -> int:
        value = self.get_property(property_name)
        try:
            return int(value.strip())
        except ValueError as exc:
            raise ConfigurationError(
                f"Property '{property_name}' should be an integer but was '{value}'"
            ) from exc

    def get_properties_with_prefix(self, prefix: str) -> Dict[str, str]:
        """Resolve every property under ``prefix`` for the active environments.

        Returned keys have any ``environments.<env>.`` scope removed, and
        each value is what :meth:`resolve` gives for that unscoped key, so
        scoped and unscoped definitions of the same name collapse to the
        one that takes precedence.
        """
        environments = self.active_environments
        properties: Dict[str, str] = {}
        for key in list(self._variables.keys()):
            if not self._matches_environment(key, environments):
                continue
            name = self._strip_environment_prefix(key)
            if not name.startswith(prefix) or name in properties:
                continue
            value = self.resolve(name)
            if value is not None:
                properties[name] = value
        return properties

    def property_group_is_defined_for(self, prefix: str) -> bool:
        return bool(self.get_properties_with_prefix(prefix))

    @staticmethod
    def _matches_environment(key: str, environments: Sequence[str]) -> bool:
        match = ENVIRONMENT_PREFIX_PATTERN.match(key)
        if match is None:
            return True
        return match.group(1) in environments

    @staticmethod
    def _strip_environment_prefix(key: str) -> str:
        return ENVIRONMENT_PREFIX_PATTERN.sub("", key, count=1)

    def _substitute_properties(self, property_name: str, value: str, expanding: Tuple[str, ...] = ()) -> str:
        path = expanding + (property_name,)
        parts: List[str] = []
        position = 0
        for match in VARIABLE_EXPRESSION_PATTERN.finditer(value):
            nested_name = match.group(1)
            replacement = self.get_property_value(nested_name)
            if replacement is None:
                replacement = EnvironmentSpecificConfiguration(self._variables).get_property_value(nested_name)
            if replacement is None:
                logger.debug("No value for #{%s} in property %s", nested_name, property_name)
                continue
            if nested_name in path:
                raise PropertySubstitutionError(path + (nested_name,))
            parts.append(value[position : match.start()])
            parts.append(self._substitute_properties(nested_name, replacement, path))
            position = match.end()
        parts.append(value[position:])
        return "".join(parts)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(strategy={self._strategy.name}, environments={self.active_environments})"


__all__ = [
    "EnvironmentSpecificConfiguration",
    "EnvironmentStrategy",
    "active_environments_in",
    "are_defined_in",
    "contextless_property",
    "default_property",
    "property_for_named_environments",
]
