"""
Errors raised by the Vantage helpers.

Only two failures are named here. Everything else the driver raises
(stale elements, detached nodes, lost sessions) passes through untouched.
"""

from typing import Optional


class VantageError(Exception):
    """Base class for all Vantage errors."""


class UnsupportedCapability(VantageError):
    """The driver cannot execute JavaScript in the page."""

    def __init__(self, driver_type: Optional[str] = None):
        self.driver_type = driver_type
        detail = f" ({driver_type})" if driver_type else ""
        super().__init__(f"This driver does not support javascript execution{detail}")


class InjectionTimeout(VantageError):
    """The utility library did not become ready within the wait budget."""

    def __init__(self, waited_seconds: float, library_url: str):
        self.waited_seconds = waited_seconds
        self.library_url = library_url
        super().__init__(
            f"Utility library not ready after {waited_seconds:.2f}s "
            f"(source: {library_url})"
        )
