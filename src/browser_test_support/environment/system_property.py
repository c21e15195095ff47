"""
Well-known property names.

Each member carries its current name and the name older configuration
files used for the same setting.  Resolvers try the current name first
and fall back to the legacy one.
"""

from enum import Enum
from typing import Optional, Tuple


class SystemProperty(Enum):
    WEBDRIVER_DRIVER = ("webdriver.driver", "thucydides.driver")
    WEBDRIVER_BASE_URL = ("webdriver.base.url", "thucydides.base.url")
    WEBDRIVER_REMOTE_URL = ("webdriver.remote.url", "thucydides.remote.url")
    WEBDRIVER_TIMEOUTS_IMPLICITLYWAIT = (
        "webdriver.timeouts.implicitlywait",
        "thucydides.timeouts.implicitlywait",
    )
    WEBDRIVER_WAIT_FOR_TIMEOUT = ("webdriver.wait.for.timeout", "thucydides.wait.for.timeout")
    SERENITY_BROWSER_HEADLESS = ("headless.mode", None)
    SERENITY_TAKE_SCREENSHOTS = ("serenity.take.screenshots", "thucydides.take.screenshots")
    SERENITY_PROJECT_NAME = ("serenity.project.name", "thucydides.project.name")

    def __init__(self, property_name: str, legacy_property_name: Optional[str]) -> None:
        self.property_name = property_name
        self.legacy_property_name = legacy_property_name

    @property
    def names(self) -> Tuple[str, ...]:
        """Lookup order: current name, then the legacy name if any."""
        if self.legacy_property_name:
            return (self.property_name, self.legacy_property_name)
        return (self.property_name,)

    def __str__(self) -> str:
        return self.property_name


__all__ = ["SystemProperty"]
