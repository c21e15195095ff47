"""
WebDriver Package
-----------------

Capability mapping for Selenium sessions and null driver stand-ins for
runs without a browser.
"""

from .capabilities import W3CCapabilities
from .stubs import WebDriverStub, WebElementStub

__all__ = ["W3CCapabilities", "WebDriverStub", "WebElementStub"]
