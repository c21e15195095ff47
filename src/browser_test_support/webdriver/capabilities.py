"""
W3C Capabilities
----------------

Maps a group of environment-specific properties onto WebDriver
capabilities.  With ``environment=ci`` and::

    environments.ci.webdriver.capabilities.browserName = chrome
    environments.all.webdriver.capabilities.acceptInsecureCerts = true

``W3CCapabilities(variables).with_prefix("webdriver.capabilities")``
returns ``{"browserName": "chrome", "acceptInsecureCerts": True}``.
Values other than the standard string fields are typed with
:func:`capability_value.as_object`, and a ``proxy`` mapping becomes a
Selenium :class:`~selenium.webdriver.common.proxy.Proxy`.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from selenium.webdriver.common.options import ArgOptions
from selenium.webdriver.common.proxy import Proxy

from ..environment.specific_configuration import (
    ALL_ENVIRONMENTS,
    ENVIRONMENTS_PREFIX,
    EnvironmentSpecificConfiguration,
)
from ..environment.variables import EnvironmentVariables
from ..utils.logger import get_logger
from . import capability_value


logger = get_logger(__name__)

BROWSER_NAME = "browserName"
BROWSER_VERSION = "browserVersion"
PLATFORM_NAME = "platformName"
STRING_CAPABILITIES = (BROWSER_NAME, BROWSER_VERSION, PLATFORM_NAME)


class W3CCapabilities:
    """Build a capabilities dictionary from prefixed properties."""

    def __init__(self, variables: EnvironmentVariables) -> None:
        self.variables = variables

    @classmethod
    def defined_in(cls, variables: EnvironmentVariables) -> "W3CCapabilities":
        return cls(variables)

    def with_prefix(self, prefix: str) -> Dict[str, Any]:
        group = prefix.rstrip(".") + "."
        configuration = EnvironmentSpecificConfiguration.from_variables(self.variables)
        properties = configuration.get_properties_with_prefix(group)
        # capabilities shared by every environment
        all_scope = f"{ENVIRONMENTS_PREFIX}{ALL_ENVIRONMENTS}."
        for key in self.variables.get_properties_with_prefix(all_scope + group):
            name = key[len(all_scope):]
            if name not in properties:
                value = configuration.resolve(name)
                if value is not None:
                    properties[name] = value

        capabilities: Dict[str, Any] = {}
        for name in STRING_CAPABILITIES:
            value = properties.get(group + name)
            if value is not None:
                capabilities[name] = value

        for property_name, raw_value in properties.items():
            name = property_name[len(group):]
            if not name or name in STRING_CAPABILITIES:
                continue
            capabilities[name] = self._typed_value(name, capability_value.as_object(raw_value))

        logger.debug("Capabilities for %s: %s", prefix, sorted(capabilities))
        return capabilities

    def apply_to(self, options: ArgOptions, prefix: str) -> ArgOptions:
        """Set the capabilities under ``prefix`` on Selenium browser options."""
        for name, value in self.with_prefix(prefix).items():
            if isinstance(value, Proxy):
                options.proxy = value
            else:
                options.set_capability(name, value)
        return options

    @staticmethod
    def _typed_value(name: str, value: Any) -> Any:
        if name == "proxy" and isinstance(value, Mapping):
            return Proxy(raw=dict(value))
        return value


__all__ = ["W3CCapabilities"]
