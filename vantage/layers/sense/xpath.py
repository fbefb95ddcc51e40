"""
Absolute XPath Resolver.

Computes a canonical path such as ``/html[1]/body[1]/div[2]`` for a DOM
node, independent of ids and classes. Node types and sibling order are
only visible inside the page, so the walk runs there as one self-contained
function and Python only ships the node in and the string out.

Paths are recomputed on every call because the DOM may change in between.
"""

from typing import Any, Optional, TYPE_CHECKING

from vantage.core.gate import driver_of, script_executor

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver
    from selenium.webdriver.remote.webelement import WebElement

ABSOLUTE_XPATH_FUNCTION_JS = """
function absoluteXPath(node) {
    var comps = [];
    var comp, i;
    var xpath = '';

    var position = function(node) {
        if (node.nodeType === Node.ATTRIBUTE_NODE) {
            return null;
        }
        var pos = 1;
        for (var sib = node.previousSibling; sib; sib = sib.previousSibling) {
            if (sib.nodeName === node.nodeName) {
                ++pos;
            }
        }
        return pos;
    };

    if (node instanceof Document) {
        return '/';
    }

    for (; node && !(node instanceof Document);
           node = node.nodeType === Node.ATTRIBUTE_NODE ? node.ownerElement : node.parentNode) {
        comp = {};
        switch (node.nodeType) {
            case Node.TEXT_NODE:
                comp.name = 'text()';
                break;
            case Node.ATTRIBUTE_NODE:
                comp.name = '@' + node.nodeName;
                break;
            case Node.PROCESSING_INSTRUCTION_NODE:
                comp.name = 'processing-instruction()';
                break;
            case Node.COMMENT_NODE:
                comp.name = 'comment()';
                break;
            case Node.ELEMENT_NODE:
                comp.name = node.nodeName;
                break;
            default:
                comp.name = null;
        }
        if (comp.name === null) {
            continue;
        }
        comp.position = position(node);
        comps.push(comp);
    }

    for (i = comps.length - 1; i >= 0; i--) {
        comp = comps[i];
        xpath += '/' + comp.name.toLowerCase();
        if (comp.position !== null) {
            xpath += '[' + comp.position + ']';
        }
    }
    return xpath;
}
"""

ABSOLUTE_XPATH_JS = ABSOLUTE_XPATH_FUNCTION_JS + "return absoluteXPath(arguments[0]);"
DOCUMENT_XPATH_JS = ABSOLUTE_XPATH_FUNCTION_JS + "return absoluteXPath(document);"


class XPathResolver:
    """
    Resolve absolute XPaths for nodes of one driver's current page.
    
    Example:
        >>> resolver = XPathResolver(driver)
        >>> resolver.resolve(driver.find_element("css selector", "#save"))
        '/html[1]/body[1]/form[1]/button[2]'
    """
    
    def __init__(self, driver: "WebDriver"):
        self.driver = script_executor(driver)
    
    def resolve(self, node: Optional["WebElement"]) -> str:
        """
        Return the absolute XPath of a node.
        
        A None node resolves to the empty string, matching the in-page
        function's behaviour for null.
        """
        xpath = self.driver.execute_script(ABSOLUTE_XPATH_JS, node)
        return xpath or ""
    
    def resolve_document(self) -> str:
        """Return the path of the document itself, which is always '/'."""
        return self.driver.execute_script(DOCUMENT_XPATH_JS)


def absolute_xpath(element: "WebElement") -> str:
    """
    Return the absolute XPath of a WebElement.
    
    The owning driver is taken from the element, so no driver argument is
    needed.
    
    Raises:
        UnsupportedCapability: if the element's driver cannot execute scripts
    """
    return XPathResolver(driver_of(element)).resolve(element)


def document_xpath(driver: Any) -> str:
    """Return the absolute XPath of the current document ('/')."""
    return XPathResolver(driver).resolve_document()
