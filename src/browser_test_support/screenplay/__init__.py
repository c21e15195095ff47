"""State matchers used by screenplay-style questions about page elements."""

from .missing_web_element import MissingWebElement

__all__ = ["MissingWebElement"]
