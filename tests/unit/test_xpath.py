"""
Unit tests for the absolute XPath resolver.

The walk itself runs in the browser (see tests/integration); these tests
cover the Python side and the shape of the shipped function.
"""

import pytest
from unittest.mock import MagicMock
from selenium.common.exceptions import StaleElementReferenceException

from vantage.core.errors import UnsupportedCapability
from vantage.helpers import absolute_path
from vantage.layers.sense.xpath import (
    ABSOLUTE_XPATH_FUNCTION_JS,
    ABSOLUTE_XPATH_JS,
    DOCUMENT_XPATH_JS,
    XPathResolver,
    absolute_xpath,
    document_xpath,
)


def test_resolve_passes_element_as_argument(driver):
    element = driver.element("/html[1]/body[1]/div[2]")
    assert XPathResolver(driver).resolve(element) == "/html[1]/body[1]/div[2]"
    assert driver.scripts_run(ABSOLUTE_XPATH_JS) == [(element,)]


def test_resolve_none_is_empty(driver):
    assert XPathResolver(driver).resolve(None) == ""


def test_resolve_is_not_cached(driver):
    element = driver.element("/html[1]/body[1]/div[2]")
    resolver = XPathResolver(driver)
    resolver.resolve(element)
    element.xpath = "/html[1]/body[1]/div[3]"
    assert resolver.resolve(element) == "/html[1]/body[1]/div[3]"
    assert len(driver.scripts_run(ABSOLUTE_XPATH_JS)) == 2


def test_absolute_xpath_uses_owning_driver(driver):
    element = driver.element("/html[1]/body[1]/p[1]/text()[1]")
    assert absolute_xpath(element) == "/html[1]/body[1]/p[1]/text()[1]"
    assert absolute_path(element) == "/html[1]/body[1]/p[1]/text()[1]"


def test_document_xpath_is_root(driver):
    assert document_xpath(driver) == "/"
    assert driver.scripts_run(DOCUMENT_XPATH_JS) == [()]


def test_gate_fails_before_any_script(no_script_driver):
    element = MagicMock()
    element.parent = no_script_driver
    with pytest.raises(UnsupportedCapability):
        absolute_path(element)
    assert no_script_driver.calls == []


def test_stale_element_propagates():
    driver = MagicMock()
    driver.execute_script.side_effect = StaleElementReferenceException("gone")
    element = MagicMock()
    element.parent = driver
    with pytest.raises(StaleElementReferenceException):
        absolute_path(element)


class TestShippedFunction:
    """The in-page function must implement the documented walk."""
    
    @pytest.mark.parametrize("segment", [
        "'text()'",
        "'comment()'",
        "'processing-instruction()'",
        "'@' + node.nodeName",
    ])
    def test_segment_names(self, segment):
        assert segment in ABSOLUTE_XPATH_FUNCTION_JS
    
    def test_attribute_nodes_step_to_owner(self):
        assert "node.ownerElement : node.parentNode" in ABSOLUTE_XPATH_FUNCTION_JS
    
    def test_document_is_root(self):
        assert "if (node instanceof Document) {\n        return '/';" in ABSOLUTE_XPATH_FUNCTION_JS
    
    def test_output_is_lowercased(self):
        assert "comp.name.toLowerCase()" in ABSOLUTE_XPATH_FUNCTION_JS
    
    def test_invocations_share_one_function(self):
        assert ABSOLUTE_XPATH_JS.startswith(ABSOLUTE_XPATH_FUNCTION_JS)
        assert DOCUMENT_XPATH_JS.startswith(ABSOLUTE_XPATH_FUNCTION_JS)
        assert ABSOLUTE_XPATH_JS.endswith("return absoluteXPath(arguments[0]);")
        assert DOCUMENT_XPATH_JS.endswith("return absoluteXPath(document);")
