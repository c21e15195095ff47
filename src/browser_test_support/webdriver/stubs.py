"""
WebDriver Stubs
---------------

Null implementations of the Selenium driver surface, used when a test
step runs without a real browser session (dry runs, or steps that
must not touch the browser).  Every action is a logged no-op and every
query returns an empty value.  The classes follow Selenium's Python
API by duck typing; none of them opens a connection.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..utils.logger import get_logger


logger = get_logger(__name__)


class WebElementStub:
    """Element returned by :meth:`WebDriverStub.find_element`."""

    tag_name = ""
    text = ""
    id = ""

    @property
    def location(self) -> Dict[str, int]:
        return {"x": 0, "y": 0}

    @property
    def size(self) -> Dict[str, int]:
        return {"height": 0, "width": 0}

    @property
    def rect(self) -> Dict[str, int]:
        return {"x": 0, "y": 0, "height": 0, "width": 0}

    def click(self) -> None:
        logger.debug("[Stub] click")

    def submit(self) -> None:
        logger.debug("[Stub] submit")

    def clear(self) -> None:
        logger.debug("[Stub] clear")

    def send_keys(self, *value: Any) -> None:
        logger.debug("[Stub] send_keys %s", value)

    def get_attribute(self, name: str) -> Optional[str]:
        return None

    def get_dom_attribute(self, name: str) -> Optional[str]:
        return None

    def get_property(self, name: str) -> Optional[str]:
        return None

    def value_of_css_property(self, property_name: str) -> str:
        return ""

    def is_displayed(self) -> bool:
        return False

    def is_enabled(self) -> bool:
        return False

    def is_selected(self) -> bool:
        return False

    def find_element(self, by: str = "id", value: Optional[str] = None) -> "WebElementStub":
        return WebElementStub()

    def find_elements(self, by: str = "id", value: Optional[str] = None) -> List["WebElementStub"]:
        return []

    @property
    def screenshot_as_png(self) -> bytes:
        return b""


class AlertStub:
    text = ""

    def accept(self) -> None:
        logger.debug("[Stub] accept alert")

    def dismiss(self) -> None:
        logger.debug("[Stub] dismiss alert")

    def send_keys(self, keys_to_send: str) -> None:
        logger.debug("[Stub] alert send_keys %s", keys_to_send)


class TargetLocatorStub:
    """``driver.switch_to`` replacement; every switch stays on the stub."""

    def __init__(self, driver: "WebDriverStub") -> None:
        self._driver = driver

    @property
    def active_element(self) -> WebElementStub:
        return WebElementStub()

    @property
    def alert(self) -> AlertStub:
        return AlertStub()

    def default_content(self) -> "WebDriverStub":
        return self._driver

    def frame(self, frame_reference: Any) -> "WebDriverStub":
        logger.debug("[Stub] switch to frame %s", frame_reference)
        return self._driver

    def parent_frame(self) -> "WebDriverStub":
        return self._driver

    def new_window(self, type_hint: Optional[str] = None) -> "WebDriverStub":
        return self._driver

    def window(self, window_name: str) -> "WebDriverStub":
        logger.debug("[Stub] switch to window %s", window_name)
        return self._driver


class NavigationStub:
    def back(self) -> None:
        logger.debug("[Stub] back")

    def forward(self) -> None:
        logger.debug("[Stub] forward")

    def refresh(self) -> None:
        logger.debug("[Stub] refresh")

    def to(self, url: str) -> None:
        logger.debug("[Stub] navigate to %s", url)


class TimeoutsStub:
    def implicitly_wait(self, time_to_wait: float) -> "TimeoutsStub":
        return self

    def set_page_load_timeout(self, time_to_wait: float) -> "TimeoutsStub":
        return self

    def set_script_timeout(self, time_to_wait: float) -> "TimeoutsStub":
        return self


class WindowStub:
    def get_size(self) -> Dict[str, int]:
        return {"width": 0, "height": 0}

    def set_size(self, width: int, height: int) -> None:
        pass

    def get_position(self) -> Dict[str, int]:
        return {"x": 0, "y": 0}

    def set_position(self, x: int, y: int) -> None:
        pass

    def maximize(self) -> None:
        pass

    def minimize(self) -> None:
        pass

    def fullscreen(self) -> None:
        pass


class OptionsStub:
    """``manage()`` view: cookies, timeouts and the window."""

    def add_cookie(self, cookie: Dict[str, Any]) -> None:
        pass

    def delete_cookie(self, name: str) -> None:
        pass

    def delete_all_cookies(self) -> None:
        pass

    def get_cookie(self, name: str) -> Optional[Dict[str, Any]]:
        return None

    def get_cookies(self) -> List[Dict[str, Any]]:
        return []

    def timeouts(self) -> TimeoutsStub:
        return TimeoutsStub()

    def window(self) -> WindowStub:
        return WindowStub()


class WebDriverStub:
    """Stand-in for :class:`selenium.webdriver.remote.webdriver.WebDriver`."""

    current_url = ""
    title = ""
    page_source = ""
    current_window_handle = ""
    name = "stub"

    @property
    def window_handles(self) -> List[str]:
        return []

    @property
    def capabilities(self) -> Dict[str, Any]:
        return {}

    def get(self, url: str) -> None:
        logger.debug("[Stub] get %s", url)

    def find_element(self, by: str = "id", value: Optional[str] = None) -> WebElementStub:
        return WebElementStub()

    def find_elements(self, by: str = "id", value: Optional[str] = None) -> List[WebElementStub]:
        return []

    def execute_script(self, script: str, *args: Any) -> None:
        return None

    def execute_async_script(self, script: str, *args: Any) -> None:
        return None

    def get_screenshot_as_png(self) -> bytes:
        return b""

    def save_screenshot(self, filename: str) -> bool:
        return False

    def close(self) -> None:
        logger.debug("[Stub] close")

    def quit(self) -> None:
        logger.debug("[Stub] quit")

    @property
    def switch_to(self) -> TargetLocatorStub:
        return TargetLocatorStub(self)

    def navigate(self) -> NavigationStub:
        return NavigationStub()

    def manage(self) -> OptionsStub:
        return OptionsStub()

    def back(self) -> None:
        self.navigate().back()

    def forward(self) -> None:
        self.navigate().forward()

    def refresh(self) -> None:
        self.navigate().refresh()

    def implicitly_wait(self, time_to_wait: float) -> None:
        pass

    def set_page_load_timeout(self, time_to_wait: float) -> None:
        pass

    def set_script_timeout(self, time_to_wait: float) -> None:
        pass

    def get_cookies(self) -> List[Dict[str, Any]]:
        return self.manage().get_cookies()

    def get_cookie(self, name: str) -> Optional[Dict[str, Any]]:
        return self.manage().get_cookie(name)

    def add_cookie(self, cookie_dict: Dict[str, Any]) -> None:
        self.manage().add_cookie(cookie_dict)

    def delete_cookie(self, name: str) -> None:
        self.manage().delete_cookie(name)

    def delete_all_cookies(self) -> None:
        self.manage().delete_all_cookies()

    def get_window_size(self, windowHandle: str = "current") -> Dict[str, int]:
        return WindowStub().get_size()

    def set_window_size(self, width: int, height: int, windowHandle: str = "current") -> None:
        pass

    def maximize_window(self) -> None:
        pass

    def __enter__(self) -> "WebDriverStub":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.quit()


__all__ = [
    "AlertStub",
    "NavigationStub",
    "OptionsStub",
    "TargetLocatorStub",
    "TimeoutsStub",
    "WebDriverStub",
    "WebElementStub",
    "WindowStub",
]
