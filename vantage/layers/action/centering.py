"""
Viewport Centering - Bring an obstructed element to the middle of the screen.

Scrolling an element just inside the viewport leaves it at the edge,
which is exactly where sticky headers and footers live. When the element's
click point turns out to be covered, it is scrolled to the vertical middle
of the viewport instead.
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from vantage.core.config import HelperConfig
from vantage.core.gate import driver_of
from vantage.layers.action.injector import LibraryInjector
from vantage.layers.sense.occlusion import OcclusionDetector, OcclusionReport

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver
    from selenium.webdriver.remote.webelement import WebElement

logger = logging.getLogger(__name__)

# Horizontal scrolling is left to the nearest-edge scroll in viewport_point()
CENTER_ELEMENT_JS = """
var el = arguments[0];
var offsetTop = jQuery(el).offset().top;
var adjustment = Math.max(0, (jQuery(window).height() - jQuery(el).outerHeight(true)) / 2);
var scrollTop = offsetTop - adjustment;
jQuery('html,body').animate({scrollTop: scrollTop}, 0);
return scrollTop;
"""


@dataclass
class CenteringResult:
    """Result of a bring-into-view request."""
    scrolled: bool
    report: OcclusionReport
    duration_ms: float
    scroll_top: Optional[float] = None


class ViewportCenterer:
    """
    Scroll elements into the vertical middle of the viewport when covered.
    
    Example:
        >>> centerer = ViewportCenterer(driver)
        >>> result = centerer.bring_into_view(element)
        >>> if result.scrolled:
        ...     print(f"Scrolled to {result.scroll_top}")
    """
    
    def __init__(self, driver: "WebDriver", config: Optional[HelperConfig] = None):
        """
        Initialize the centering action.
        
        Args:
            driver: Selenium WebDriver
            config: Library and wait settings (defaults if omitted)
        """
        self.driver = driver
        self.config = config or HelperConfig()
        self.detector = OcclusionDetector(driver)
        self.injector = LibraryInjector(driver, self.config)
    
    def bring_into_view(self, element: "WebElement") -> CenteringResult:
        """
        Center the element vertically if its click point is obstructed.
        
        Elements already fully visible and unobstructed do not move at all;
        off-screen ones are first scrolled just inside the viewport.
        
        Raises:
            InjectionTimeout: if the library is needed but never loads;
                no scroll happens in that case
        """
        start_time = time.time()
        
        # Scrolls only elements that are not already fully in the viewport
        point = self.detector.viewport_point(element)
        report = self.detector.inspect(element, point)
        
        if not report.obstructed:
            return CenteringResult(
                scrolled=False,
                report=report,
                duration_ms=(time.time() - start_time) * 1000,
            )
        
        executor = self.injector.inject(self.config.injection_timeout)
        scroll_top = executor.execute_script(CENTER_ELEMENT_JS, element)
        logger.info(f"[Centering] Scrolled {report.target_xpath} to scrollTop={scroll_top}")
        
        return CenteringResult(
            scrolled=True,
            report=report,
            duration_ms=(time.time() - start_time) * 1000,
            scroll_top=scroll_top,
        )


def center_element(element: "WebElement", config: Optional[HelperConfig] = None) -> CenteringResult:
    """Bring an element into view using the driver it was found with."""
    return ViewportCenterer(driver_of(element), config).bring_into_view(element)
