"""Action Layer - Page-mutating helpers: library injection and centering."""

from vantage.layers.action.injector import LibraryInjector
from vantage.layers.action.centering import CenteringResult, ViewportCenterer, center_element

__all__ = ["CenteringResult", "LibraryInjector", "ViewportCenterer", "center_element"]
