"""
Vantage - Selenium helpers for element paths and obstructed clicks.

Computes absolute XPaths for DOM nodes, detects when the point Selenium
would click is covered by another element, and scrolls such elements into
the middle of the viewport.
"""

__version__ = "0.1.0"

from vantage.core.config import HelperConfig
from vantage.core.errors import InjectionTimeout, UnsupportedCapability, VantageError
from vantage.helpers import (
    absolute_path,
    bring_into_view,
    inject_utility_library,
    is_utility_library_loaded,
)

__all__ = [
    "HelperConfig",
    "InjectionTimeout",
    "UnsupportedCapability",
    "VantageError",
    "absolute_path",
    "bring_into_view",
    "inject_utility_library",
    "is_utility_library_loaded",
    "__version__",
]
