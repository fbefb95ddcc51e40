"""Sense Layer - In-page probes: library readiness, XPaths and occlusion."""

from vantage.layers.sense.occlusion import ClickPoint, OcclusionDetector, OcclusionReport
from vantage.layers.sense.readiness import ReadinessResult, is_library_loaded, wait_until_ready
from vantage.layers.sense.xpath import XPathResolver, absolute_xpath, document_xpath

__all__ = [
    "ClickPoint",
    "OcclusionDetector",
    "OcclusionReport",
    "ReadinessResult",
    "XPathResolver",
    "absolute_xpath",
    "document_xpath",
    "is_library_loaded",
    "wait_until_ready",
]
