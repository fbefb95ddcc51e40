"""
Unit tests for the library injector.
"""

import time

import pytest

from vantage.core.config import HelperConfig
from vantage.core.errors import InjectionTimeout, UnsupportedCapability
from vantage.layers.action.injector import INJECT_LIBRARY_JS, LibraryInjector
from vantage.layers.sense.readiness import LIBRARY_PROBE_JS
from vantage.helpers import inject_utility_library, is_utility_library_loaded

FAST = HelperConfig(library_url="https://cdn.example/jquery.js", poll_interval=0.01)


def test_already_loaded_is_a_no_op(driver):
    driver.library_loaded = True
    executor = LibraryInjector(driver, FAST).inject(timeout=1)
    
    assert executor is driver
    assert driver.scripts_run(INJECT_LIBRARY_JS) == []
    assert driver.script_tags == []


def test_injects_configured_url_and_waits(driver):
    driver.load_after_probes = 2
    executor = LibraryInjector(driver, FAST).inject(timeout=1)
    
    assert executor is driver
    assert driver.scripts_run(INJECT_LIBRARY_JS) == [("https://cdn.example/jquery.js",)]
    assert driver.library_loaded is True


def test_second_call_does_not_reinject(driver):
    injector = LibraryInjector(driver, FAST)
    injector.inject(timeout=1)
    injector.inject(timeout=1)
    
    assert len(driver.scripts_run(INJECT_LIBRARY_JS)) == 1
    assert driver.script_tags == ["https://cdn.example/jquery.js"]


def test_pending_tag_is_not_duplicated(driver):
    # First attempt times out while the tag is still loading
    driver.load_after_probes = None
    injector = LibraryInjector(driver, FAST)
    with pytest.raises(InjectionTimeout):
        injector.inject(timeout=0.05)
    
    # Not ready on the first probe, so inject() runs the tag script again
    driver.load_after_probes = 2
    driver._probes_since_injection = 0
    injector.inject(timeout=1)
    
    assert len(driver.scripts_run(INJECT_LIBRARY_JS)) == 2
    assert driver.script_tags == ["https://cdn.example/jquery.js"]


def test_timeout_is_bounded(driver):
    driver.load_after_probes = None
    config = HelperConfig(poll_interval=0.1)
    
    start = time.monotonic()
    with pytest.raises(InjectionTimeout) as exc_info:
        LibraryInjector(driver, config).inject(timeout=1)
    elapsed = time.monotonic() - start
    
    assert 1.0 <= elapsed < 1.0 + 0.1 + 0.5
    assert exc_info.value.waited_seconds >= 1.0
    assert exc_info.value.library_url == config.library_url
    assert config.library_url in str(exc_info.value)


def test_default_timeout_comes_from_config(driver):
    driver.load_after_probes = None
    config = HelperConfig(injection_timeout=0.05, poll_interval=0.01)
    with pytest.raises(InjectionTimeout):
        LibraryInjector(driver, config).inject()


def test_gate_fails_before_any_script(no_script_driver):
    with pytest.raises(UnsupportedCapability):
        LibraryInjector(no_script_driver).inject(timeout=1)
    assert no_script_driver.calls == []


def test_public_helpers(driver):
    assert is_utility_library_loaded(driver) is False
    assert inject_utility_library(driver, 1, FAST) is driver
    assert is_utility_library_loaded(driver) is True
    # Probe, inject, probe(s) during the wait, final probe above
    assert driver.calls[0] == (LIBRARY_PROBE_JS, ())


def test_public_inject_gate(no_script_driver):
    with pytest.raises(UnsupportedCapability):
        inject_utility_library(no_script_driver, 1)
