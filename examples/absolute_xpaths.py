#!/usr/bin/env python3
"""
Absolute XPath Example
======================

This example prints the absolute XPath of every link on a page.

Absolute XPaths ignore ids and classes, so they stay the same as long as
the document structure does. Handy for logging exactly which node a test
touched.

Usage:
    python examples/absolute_xpaths.py
"""

from vantage import absolute_path
from vantage.core.driver_factory import create_driver
from vantage.layers.sense import document_xpath


def main():
    """Print absolute XPaths for all links."""
    
    print("=" * 60)
    print("🔭 Vantage - Absolute XPaths")
    print("=" * 60)
    print()
    
    driver = create_driver(headless=False)
    
    try:
        url = "https://example.com"
        print(f"Navigating to: {url}")
        driver.get(url)
        print(f"Document: {document_xpath(driver)}")
        print()
        
        for link in driver.find_elements("tag name", "a"):
            print(f"  {absolute_path(link)}  ->  {link.text[:40]}")
    
    finally:
        print()
        print("Closing browser...")
        driver.quit()
        print("Done!")


if __name__ == "__main__":
    main()
