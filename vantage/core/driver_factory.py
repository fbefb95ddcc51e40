"""
Driver Factory - Chrome WebDriver creation for the CLI and live tests.

The helpers themselves accept any driver; this module only exists so the
command line and the integration tests can open a browser the same way.
"""

from typing import Optional, Tuple
from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions

# Type alias for driver - can be extended to support other browsers
WebDriverType = webdriver.Chrome

DEFAULT_WINDOW_SIZE = (1280, 800)


def create_driver(
    headless: bool = True,
    window_size: Tuple[int, int] = DEFAULT_WINDOW_SIZE,
    profile_path: Optional[str] = None,
) -> WebDriverType:
    """
    Create a Chrome WebDriver.
    
    Args:
        headless: Run browser in headless mode
        window_size: (width, height) of the browser window in pixels
        profile_path: Path to browser profile for session persistence
    
    Returns:
        Chrome WebDriver instance
    
    Example:
        >>> driver = create_driver(headless=True)
        >>> driver.get("https://example.com")
    """
    options = build_options(headless, window_size, profile_path)
    return webdriver.Chrome(options=options)


def build_options(
    headless: bool = True,
    window_size: Tuple[int, int] = DEFAULT_WINDOW_SIZE,
    profile_path: Optional[str] = None,
) -> ChromeOptions:
    """Build the Chrome options used by create_driver()."""
    options = ChromeOptions()
    
    if headless:
        options.add_argument("--headless=new")
    
    if profile_path:
        options.add_argument(f"--user-data-dir={profile_path}")
    
    # A fixed window keeps viewport arithmetic reproducible
    width, height = window_size
    options.add_argument(f"--window-size={width},{height}")
    
    # Common stability options
    options.add_argument("--disable-extensions")
    options.add_argument("--no-sandbox")
    options.add_argument("--disable-dev-shm-usage")
    options.add_argument("--disable-gpu")
    options.add_experimental_option("excludeSwitches", ["enable-automation"])
    
    return options
