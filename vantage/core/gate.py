"""
Script Executor Gate.

Every helper goes through here before touching the page, so a driver
without script support fails before any script is sent.
"""

from typing import Any, TYPE_CHECKING

from vantage.core.errors import UnsupportedCapability

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver
    from selenium.webdriver.remote.webelement import WebElement


def script_executor(driver: Any) -> "WebDriver":
    """
    Return the driver as a script executor.

    Args:
        driver: Selenium WebDriver (or anything exposing execute_script)

    Returns:
        The same driver, once it is known to run scripts

    Raises:
        UnsupportedCapability: if the driver cannot execute scripts
    """
    if driver is None or not callable(getattr(driver, "execute_script", None)):
        raise UnsupportedCapability(type(driver).__name__)
    return driver


def driver_of(element: "WebElement") -> "WebDriver":
    """Return the gated driver that owns a WebElement."""
    # WebElement.parent is the WebDriver the element was found with
    return script_executor(getattr(element, "parent", None))
