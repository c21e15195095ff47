"""
Missing Web Element
-------------------

:class:`MissingWebElement` is the state reported for an element that
could not be located.  Queries answer as an absent element would: not
visible, not enabled, no text.  Assertions that require the element to
exist or show something fail with :class:`AssertionError`; assertions
that require it to be absent or hidden pass.  :meth:`expect` replaces
the failure message of the next failing assertion.

    state = MissingWebElement("Login button")
    state.should_not_be_visible()          # passes
    state.expect("Login should be shown").should_be_visible()  # raises
"""

from __future__ import annotations

from typing import List, NoReturn, Optional


class MissingWebElement:
    """Null object for the state of an element that is not on the page."""

    def __init__(self, element_name: str) -> None:
        self.element_name = element_name
        self.expected_error_message: Optional[str] = None

    def __repr__(self) -> str:
        return f"MissingWebElement({self.element_name!r})"

    # Queries

    def is_visible(self) -> bool:
        return False

    def is_currently_visible(self) -> bool:
        return False

    def is_currently_enabled(self) -> bool:
        return False

    def is_enabled(self) -> bool:
        return False

    def is_disabled(self) -> bool:
        return False

    def is_present(self) -> bool:
        return False

    def is_selected(self) -> bool:
        return False

    def is_clickable(self) -> bool:
        return False

    def has_focus(self) -> bool:
        return False

    def contains_text(self, value: str) -> bool:
        return False

    def contains_value(self, value: str) -> bool:
        return False

    def contains_only_text(self, value: str) -> bool:
        return False

    def contains_select_option(self, value: str) -> bool:
        return False

    def get_selected_visible_text_value(self) -> Optional[str]:
        return None

    def get_selected_value(self) -> Optional[str]:
        return None

    def get_select_options(self) -> Optional[List[str]]:
        return None

    def get_text_value(self) -> Optional[str]:
        return None

    def get_value(self) -> str:
        return ""

    def get_text(self) -> str:
        return ""

    def get_attribute(self, name: str) -> str:
        return ""

    # Assertions that need the element

    def should_be_visible(self) -> "MissingWebElement":
        self._fail_with_message("Element should be visible")

    def should_be_currently_visible(self) -> "MissingWebElement":
        self._fail_with_message("Element should be visible")

    def should_contain_text(self, text_value: str) -> "MissingWebElement":
        self._fail_with_message(
            f"The text '{text_value}' was not found in the web element. Element text '{self.element_name}'."
        )

    def should_contain_only_text(self, text_value: str) -> "MissingWebElement":
        self._fail_with_message(
            f"The text '{text_value}' does not match the elements text '{self.element_name}'."
        )

    def should_contain_selected_option(self, text_value: str) -> "MissingWebElement":
        self._fail_with_message(
            f"The list element '{text_value}' was not found in the web element {self.element_name}"
        )

    def should_be_enabled(self) -> "MissingWebElement":
        self._fail_with_message(f"Field '{self.element_name}' should be enabled")

    def should_be_present(self) -> "MissingWebElement":
        self._fail_with_message(f"Field '{self.element_name}' should be present")

    # Assertions satisfied by absence

    def should_not_be_visible(self) -> "MissingWebElement":
        return self

    def should_not_be_currently_visible(self) -> "MissingWebElement":
        return self

    def should_not_contain_text(self, text_value: str) -> "MissingWebElement":
        return self

    def should_not_be_enabled(self) -> "MissingWebElement":
        return self

    def should_not_be_present(self) -> "MissingWebElement":
        return self

    def expect(self, error_message: str) -> "MissingWebElement":
        self.expected_error_message = error_message
        return self

    def get_error_message(self, default_error_message: str) -> str:
        if self.expected_error_message is not None:
            return self.expected_error_message
        return default_error_message

    def _fail_with_message(self, error_message: str) -> NoReturn:
        raise AssertionError(self.get_error_message(error_message))


__all__ = ["MissingWebElement"]
