"""
Library Injector - Make sure jQuery is available in the page.

Appends a script tag pointing at the configured library URL when the
probe says the library is missing, then waits for it to load.
"""

import logging
from typing import Optional, TYPE_CHECKING

from vantage.core.config import HelperConfig
from vantage.core.errors import InjectionTimeout
from vantage.core.gate import script_executor
from vantage.layers.sense.readiness import is_library_loaded, wait_until_ready

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver

logger = logging.getLogger(__name__)

# arguments[0] is the library URL. Returns false when a tag for that URL
# already exists, so a library that is still loading is not requested twice.
INJECT_LIBRARY_JS = """
var src = arguments[0];
var scripts = document.getElementsByTagName('script');
for (var i = 0; i < scripts.length; i++) {
    if (scripts[i].getAttribute('src') === src) {
        return false;
    }
}
var head = document.head || document.getElementsByTagName('head')[0] || document.documentElement;
var newScript = document.createElement('script');
newScript.type = 'text/javascript';
newScript.src = src;
head.appendChild(newScript);
return true;
"""


class LibraryInjector:
    """
    Inject the utility library on demand.
    
    Repeated calls are cheap: once the library answers, inject() returns
    without touching the page.
    
    Example:
        >>> injector = LibraryInjector(driver)
        >>> executor = injector.inject(timeout=5)
        >>> executor.execute_script("return jQuery.fn.jquery")
        '1.7.2'
    """
    
    def __init__(self, driver: "WebDriver", config: Optional[HelperConfig] = None):
        """
        Initialize the injector.
        
        Args:
            driver: Selenium WebDriver
            config: Library URL and polling settings (defaults if omitted)
        """
        self.driver = driver
        self.config = config or HelperConfig()
    
    def inject(self, timeout: Optional[float] = None) -> "WebDriver":
        """
        Inject the library if needed and wait until it is ready.
        
        Args:
            timeout: Seconds to wait for the library (config default if None)
        
        Returns:
            The driver, usable as a script executor
        
        Raises:
            UnsupportedCapability: if the driver cannot execute scripts
            InjectionTimeout: if the library is not ready in time
        """
        executor = script_executor(self.driver)
        if is_library_loaded(executor):
            return executor
        
        timeout = self.config.injection_timeout if timeout is None else timeout
        appended = executor.execute_script(INJECT_LIBRARY_JS, self.config.library_url)
        if appended:
            logger.info(f"[Injector] Injected {self.config.library_url}")
        else:
            logger.info(f"[Injector] Script tag for {self.config.library_url} already present, waiting")
        
        result = wait_until_ready(executor, timeout, self.config.poll_interval)
        if not result.ready:
            raise InjectionTimeout(result.waited_seconds, self.config.library_url)
        
        logger.info(f"[Injector] Library ready after {result.waited_seconds:.2f}s ({result.polls} polls)")
        return executor
