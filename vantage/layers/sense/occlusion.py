"""
Occlusion Detector - Would a click actually land on the target?

Selenium clicks an element at the center of its box. Fixed headers,
cookie banners and modal overlays can sit on top of that point, in which
case the browser delivers the click to something else. This detector
hit-tests the click point in the page and compares the absolute XPath of
whatever is found there with the target's.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, TYPE_CHECKING

from vantage.core.gate import script_executor
from vantage.layers.sense.xpath import XPathResolver

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver
    from selenium.webdriver.remote.webelement import WebElement

logger = logging.getLogger(__name__)

ELEMENT_FROM_POINT_JS = "return document.elementFromPoint(arguments[0], arguments[1]);"

# Scrolls only when the box is not fully inside the viewport, and then by the
# smallest amount. Returns the top-left corner in viewport coordinates.
VIEWPORT_POINT_JS = """
var el = arguments[0];
var rect = el.getBoundingClientRect();
var inView = (
    rect.top >= 0 &&
    rect.left >= 0 &&
    rect.bottom <= (window.innerHeight || document.documentElement.clientHeight) &&
    rect.right <= (window.innerWidth || document.documentElement.clientWidth)
);
if (!inView) {
    el.scrollIntoView({block: 'nearest', inline: 'nearest'});
    rect = el.getBoundingClientRect();
}
return {x: Math.round(rect.left), y: Math.round(rect.top)};
"""


@dataclass(frozen=True)
class ClickPoint:
    """An (x, y) integer pair in viewport coordinates."""
    x: int
    y: int
    
    @classmethod
    def from_location(cls, location: Dict[str, Any]) -> "ClickPoint":
        """Create from a Selenium location dict ({'x': ..., 'y': ...})."""
        return cls(x=int(location["x"]), y=int(location["y"]))


@dataclass
class OcclusionReport:
    """Result of hit-testing an element's click point."""
    obstructed: bool
    click_point: ClickPoint
    target_xpath: str
    hit_xpath: Optional[str]  # None when nothing is hit-testable at the point
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "obstructed": self.obstructed,
            "click_point": {"x": self.click_point.x, "y": self.click_point.y},
            "target_xpath": self.target_xpath,
            "hit_xpath": self.hit_xpath,
        }


def click_point_for(point: ClickPoint, size: Dict[str, Any]) -> ClickPoint:
    """
    Compute where Selenium clicks: the element's point plus half its size.
    
    Args:
        point: Viewport position of the element's top-left corner
        size: Selenium size dict ({'width': ..., 'height': ...})
    """
    return ClickPoint(
        x=point.x + int(size["width"]) // 2,
        y=point.y + int(size["height"]) // 2,
    )


class OcclusionDetector:
    """
    Decide whether a click on an element would hit a different element.
    
    Only the single topmost element at the click point is compared; the
    detector does not look through frames or shadow roots.
    
    Example:
        >>> detector = OcclusionDetector(driver)
        >>> point = detector.viewport_point(element)
        >>> detector.is_click_obstructed(element, point)
        False
    """
    
    def __init__(self, driver: "WebDriver"):
        """
        Initialize the detector.
        
        Args:
            driver: Selenium WebDriver
        """
        self.driver = script_executor(driver)
        self.resolver = XPathResolver(self.driver)
    
    def viewport_point(self, element: "WebElement") -> ClickPoint:
        """
        Return the element's in-viewport position.
        
        Elements already fully visible are not moved; others are scrolled
        just far enough to become visible.
        """
        return ClickPoint.from_location(self.driver.execute_script(VIEWPORT_POINT_JS, element))
    
    def inspect(self, element: "WebElement", point: ClickPoint) -> OcclusionReport:
        """
        Hit-test the element's click point.
        
        Args:
            element: The element the caller wants to click
            point: Its in-viewport position as reported by the driver
        
        Returns:
            OcclusionReport with both paths and the verdict
        """
        click_at = click_point_for(point, element.size)
        hit = self.driver.execute_script(ELEMENT_FROM_POINT_JS, click_at.x, click_at.y)
        target_xpath = self.resolver.resolve(element)
        
        if hit is None:
            # Nothing is hit-testable there, so the click cannot reach the target
            logger.warning(
                f"[Occlusion] No element at ({click_at.x}, {click_at.y}) for {target_xpath}; "
                f"treating as obstructed"
            )
            return OcclusionReport(True, click_at, target_xpath, None)
        
        hit_xpath = self.resolver.resolve(hit)
        obstructed = hit_xpath != target_xpath
        if obstructed:
            logger.debug(f"[Occlusion] {target_xpath} is covered by {hit_xpath} at ({click_at.x}, {click_at.y})")
        return OcclusionReport(obstructed, click_at, target_xpath, hit_xpath)
    
    def is_click_obstructed(self, element: "WebElement", point: ClickPoint) -> bool:
        """Return True if a click at the element's center would land elsewhere."""
        return self.inspect(element, point).obstructed
