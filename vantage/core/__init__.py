"""Core module - Errors, configuration, script gate and driver management."""

from vantage.core.config import HelperConfig
from vantage.core.errors import InjectionTimeout, UnsupportedCapability, VantageError
from vantage.core.gate import driver_of, script_executor
from vantage.core.driver_factory import create_driver

__all__ = [
    "HelperConfig",
    "InjectionTimeout",
    "UnsupportedCapability",
    "VantageError",
    "create_driver",
    "driver_of",
    "script_executor",
]
