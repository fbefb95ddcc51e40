"""
Shared fakes for unit tests.

FakeDriver answers the handful of scripts Vantage sends, keyed on the
script constants themselves, so no browser is needed.
"""

import pytest

from vantage.layers.action.centering import CENTER_ELEMENT_JS
from vantage.layers.action.injector import INJECT_LIBRARY_JS
from vantage.layers.sense.occlusion import ELEMENT_FROM_POINT_JS, VIEWPORT_POINT_JS
from vantage.layers.sense.readiness import LIBRARY_PROBE_JS
from vantage.layers.sense.xpath import ABSOLUTE_XPATH_JS, DOCUMENT_XPATH_JS


class FakeElement:
    def __init__(self, driver, xpath, left=100, offset_top=1200, size=(80, 40), outer_height=40):
        self.parent = driver
        self.xpath = xpath
        self.left = left
        self.size = {"width": size[0], "height": size[1]}
        self.offset_top = offset_top
        self.outer_height = outer_height


class FakeDriver:
    """Emulates a vertically scrollable page; scroll_top is the document scroll."""

    def __init__(self, viewport_height=800, viewport_width=1280):
        self.viewport_height = viewport_height
        self.viewport_width = viewport_width
        self.library_loaded = False
        self.load_after_probes = 1  # probes after injection until ready; None = never
        self.probe_error = None
        self.script_tags = []
        self.hit = None
        self.hit_points = []
        self.scroll_top = 0
        self.calls = []
        self._probes_since_injection = 0

    def element(self, xpath, **kwargs):
        return FakeElement(self, xpath, **kwargs)

    def scripts_run(self, script):
        return [args for s, args in self.calls if s == script]

    def execute_script(self, script, *args):
        self.calls.append((script, args))
        if script == LIBRARY_PROBE_JS:
            return self._probe()
        if script == INJECT_LIBRARY_JS:
            if args[0] in self.script_tags:
                return False
            self.script_tags.append(args[0])
            return True
        if script == VIEWPORT_POINT_JS:
            return self._viewport_point(args[0])
        if script == ELEMENT_FROM_POINT_JS:
            self.hit_points.append(args)
            return self.hit
        if script == ABSOLUTE_XPATH_JS:
            return args[0].xpath if args[0] is not None else ""
        if script == DOCUMENT_XPATH_JS:
            return "/"
        if script == CENTER_ELEMENT_JS:
            el = args[0]
            self.scroll_top = el.offset_top - max(0, (self.viewport_height - el.outer_height) / 2)
            return self.scroll_top
        raise AssertionError(f"unexpected script: {script[:60]}")

    def _viewport_point(self, el):
        top = el.offset_top - self.scroll_top
        bottom = top + el.size["height"]
        if top < 0:
            self.scroll_top = el.offset_top
        elif bottom > self.viewport_height:
            self.scroll_top = el.offset_top + el.size["height"] - self.viewport_height
        return {"x": el.left, "y": el.offset_top - self.scroll_top}

    def _probe(self):
        if self.probe_error is not None:
            raise self.probe_error
        if not self.library_loaded and self.script_tags and self.load_after_probes is not None:
            self._probes_since_injection += 1
            if self._probes_since_injection >= self.load_after_probes:
                self.library_loaded = True
        return self.library_loaded


class NoScriptDriver:
    """A driver that cannot run JavaScript."""

    def __init__(self):
        self.calls = []

    def find_element(self, by, value):
        self.calls.append((by, value))


@pytest.fixture
def driver():
    return FakeDriver()


@pytest.fixture
def no_script_driver():
    return NoScriptDriver()
