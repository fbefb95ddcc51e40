#!/usr/bin/env python3
"""
Sticky Header Example
=====================

This example builds a page with a fixed header, scrolls a button under
it, and then lets Vantage bring it back out.

The button is inside the viewport, so nothing looks wrong, but a plain
element.click() would hit the header.

Usage:
    python examples/sticky_header.py
"""

import logging
from urllib.parse import quote

from vantage import HelperConfig
from vantage.core.driver_factory import create_driver
from vantage.layers.action import ViewportCenterer

PAGE = """
<html><body style="margin: 0">
  <div style="position: fixed; top: 0; width: 100%; height: 120px; background: #222"></div>
  <div style="height: 1500px"></div>
  <button id="buy" style="height: 40px">Buy now</button>
  <div style="height: 1500px"></div>
</body></html>
"""


def main():
    """Center a button hidden under a fixed header."""
    logging.basicConfig(level=logging.INFO)
    
    print("=" * 60)
    print("🔭 Vantage - Sticky Header")
    print("=" * 60)
    print()
    
    driver = create_driver(headless=False)
    
    try:
        driver.get("data:text/html;charset=utf-8," + quote(PAGE))
        button = driver.find_element("id", "buy")
        # Park the button just below the top edge, behind the header
        driver.execute_script("window.scrollTo(0, arguments[0].offsetTop - 40);", button)
        
        centerer = ViewportCenterer(driver, HelperConfig.from_env())
        result = centerer.bring_into_view(button)
        
        print(f"Target:      {result.report.target_xpath}")
        print(f"Hit at click: {result.report.hit_xpath}")
        if result.scrolled:
            print(f"✅ Centered at scrollTop={result.scroll_top}")
        else:
            print("Nothing in the way, no scroll needed")
        
        button.click()
        print("Clicked!")
    
    finally:
        print()
        print("Closing browser...")
        driver.quit()
        print("Done!")


if __name__ == "__main__":
    main()
