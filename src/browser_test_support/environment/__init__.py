"""
Environment Package
-------------------

Property storage and environment-aware resolution.  Client code normally
needs only :class:`EnvironmentVariables` and
:class:`EnvironmentSpecificConfiguration`.
"""

from .errors import (
    ConfigurationError,
    PropertySubstitutionError,
    UndefinedEnvironmentVariableError,
)
from .specific_configuration import (
    EnvironmentSpecificConfiguration,
    EnvironmentStrategy,
    active_environments_in,
)
from .system_property import SystemProperty
from .variables import EnvironmentVariables

__all__ = [
    "ConfigurationError",
    "EnvironmentSpecificConfiguration",
    "EnvironmentStrategy",
    "EnvironmentVariables",
    "PropertySubstitutionError",
    "SystemProperty",
    "UndefinedEnvironmentVariableError",
    "active_environments_in",
]
