from abc import ABC, abstractmethod
from typing import Union

from browser_support.exceptions import ElementNotVisibleException
from browser_support.locating.interfaces import LocatorInterface, WebElementInterface


class WebElementRetriever(ABC):
    """Abstract element retriever - can be mocked easily"""

    @abstractmethod
    def find_element(self, locator: LocatorInterface) -> WebElementInterface:
        """Find a single element"""
        pass

    @property
    @abstractmethod
    def driver(self) -> WebElementInterface:
        """The driver the lookups run against"""
        pass


class BasicWebElementRetriever(WebElementRetriever):
    """Looks elements up directly on the driver"""

    def __init__(self, driver: WebElementInterface):
        self._driver = driver

    def find_element(self, locator: LocatorInterface) -> WebElementInterface:
        return locator.find_element(self._driver)

    @property
    def driver(self) -> WebElementInterface:
        return self._driver


class WebElementRetrieverDecorator(WebElementRetriever):
    """Base for retrievers that wrap another retriever"""

    def __init__(self, retriever: WebElementRetriever):
        self._decorated_retriever = retriever

    @property
    def driver(self) -> WebElementInterface:
        return self._decorated_retriever.driver


class DisplayedWebElementRetriever(WebElementRetrieverDecorator):
    """
    Returns the element found only if it is displayed;
    raises ElementNotVisibleException otherwise.
    """

    def __init__(self, retriever: Union[WebElementRetriever, WebElementInterface]):
        """A bare driver gets wrapped in a BasicWebElementRetriever"""
        if not isinstance(retriever, WebElementRetriever):
            retriever = BasicWebElementRetriever(retriever)
        super().__init__(retriever)

    def find_element(self, locator: LocatorInterface) -> WebElementInterface:
        element = self._decorated_retriever.find_element(locator)
        if not element.is_displayed():
            raise ElementNotVisibleException(f"Not visible: {locator}")
        return element
