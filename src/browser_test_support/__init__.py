"""
Browser Test Support
====================

Support code for browser-automation test runs that are parameterised by
environment.  The top-level exports cover the common path: load the
property store, resolve properties for the active environments, and
build WebDriver capabilities from them.

Modules
-------

``config``
    Loads YAML, ``.env`` and process environment settings into an
    :class:`EnvironmentVariables` store.

``environment``
    The property store and the environment-aware resolver.

``webdriver``
    W3C capability mapping and null driver stand-ins.

``screenplay``
    Null element state for elements that could not be found.
"""

from .config import load_environment_variables
from .environment import (
    ConfigurationError,
    EnvironmentSpecificConfiguration,
    EnvironmentVariables,
    SystemProperty,
    UndefinedEnvironmentVariableError,
)
from .screenplay import MissingWebElement
from .webdriver import W3CCapabilities, WebDriverStub

__all__ = [
    "ConfigurationError",
    "EnvironmentSpecificConfiguration",
    "EnvironmentVariables",
    "MissingWebElement",
    "SystemProperty",
    "UndefinedEnvironmentVariableError",
    "W3CCapabilities",
    "WebDriverStub",
    "load_environment_variables",
]
