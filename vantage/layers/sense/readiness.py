"""
Readiness Prober - Is the utility library callable in the page?

The probe is best effort: a page that is navigating away, a cross-origin
error or a broken script all read as "not loaded".
"""

import logging
import time
from dataclasses import dataclass
from typing import Any

from selenium.common.exceptions import WebDriverException

from vantage.core.gate import script_executor

logger = logging.getLogger(__name__)

LIBRARY_PROBE_JS = "return (typeof jQuery === 'function') && jQuery() != null;"


@dataclass
class ReadinessResult:
    """Outcome of a bounded wait for the library."""
    ready: bool
    waited_seconds: float
    polls: int


def is_library_loaded(driver: Any) -> bool:
    """
    Check whether jQuery is present and callable in the current page.
    
    Args:
        driver: Selenium WebDriver
    
    Returns:
        True if the library answered, False otherwise (including on error)
    
    Raises:
        UnsupportedCapability: if the driver cannot execute scripts
    """
    executor = script_executor(driver)
    try:
        return executor.execute_script(LIBRARY_PROBE_JS) is True
    except WebDriverException as e:
        logger.debug(f"[Readiness] Probe failed, treating as not loaded: {e.msg or e}")
        return False


def wait_until_ready(driver: Any, timeout: float, poll_interval: float) -> ReadinessResult:
    """
    Poll the probe until it reports True or the deadline passes.
    
    Never raises on timeout; the caller decides what a miss means.
    
    Args:
        driver: Selenium WebDriver
        timeout: Maximum seconds to wait
        poll_interval: Seconds between probes
    
    Returns:
        ReadinessResult with the final flag and the time spent
    """
    start = time.monotonic()
    deadline = start + timeout
    polls = 0
    
    while True:
        polls += 1
        if is_library_loaded(driver):
            return ReadinessResult(True, time.monotonic() - start, polls)
        
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            return ReadinessResult(False, time.monotonic() - start, polls)
        time.sleep(min(poll_interval, remaining))
