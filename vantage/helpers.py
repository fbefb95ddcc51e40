"""
Public helper functions.

Thin function-style entry points over the sense and action layers, for
callers that just have a driver or an element in hand.
"""

from typing import Any, Optional, TYPE_CHECKING

from vantage.core.config import HelperConfig
from vantage.layers.action.centering import center_element
from vantage.layers.action.injector import LibraryInjector
from vantage.layers.sense.readiness import is_library_loaded
from vantage.layers.sense.xpath import absolute_xpath

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver
    from selenium.webdriver.remote.webelement import WebElement


def is_utility_library_loaded(driver: Any) -> bool:
    """Is jQuery loaded and callable in the driver's current page?"""
    return is_library_loaded(driver)


def inject_utility_library(
    driver: Any,
    timeout_seconds: float,
    config: Optional[HelperConfig] = None,
) -> "WebDriver":
    """
    Inject jQuery if not present and wait up to timeout_seconds for it to load.
    
    Args:
        driver: Selenium WebDriver
        timeout_seconds: Seconds to wait for the library to become ready
        config: Library URL and polling settings
    
    Returns:
        The driver as a script executor
    """
    return LibraryInjector(driver, config).inject(timeout_seconds)


def absolute_path(element: "WebElement") -> str:
    """What is the absolute XPath of the element?"""
    return absolute_xpath(element)


def bring_into_view(element: "WebElement", config: Optional[HelperConfig] = None) -> None:
    """
    Bring the element into the vertical middle of the viewport if its click
    point is obstructed. Injects jQuery first when it is needed and missing.
    """
    center_element(element, config)
