from typing import List, Tuple

from browser_support.exceptions import NoSuchElementException
from browser_support.locating.interfaces import LocatorInterface, WebElementInterface


class ChainedLocator:
    """
    Locates elements using a series of other lookups.

    Every locator after the first one searches only inside the elements
    found by the previous step, so

        ChainedLocator(Locator(By.ID, "menu"), Locator(By.TAG_NAME, "a"))

    finds every link that appears under the element with id "menu".
    """

    def __init__(self, *locators: LocatorInterface):
        self._locators: Tuple[LocatorInterface, ...] = tuple(locators)

    def find_element(self, root: WebElementInterface) -> WebElementInterface:
        """
        Follow the chain one element at a time

        Input: root - driver or element to start from
        Output: the element found by the last locator
        Raises: NoSuchElementException when any step finds nothing
        """
        if not self._locators:
            raise NoSuchElementException("No locators were specified in this chain")

        element = self._locators[0].find_element(root)
        for locator in self._locators[1:]:
            try:
                element = locator.find_element(element)
            except NoSuchElementException as e:
                raise NoSuchElementException(f"Cannot locate an element using {self}") from e
        return element

    def find_elements(self, root: WebElementInterface) -> List[WebElementInterface]:
        """
        Apply each locator to every element found by the previous one

        Input: root - driver or element to start from
        Output: flattened list, in parent order
        """
        if not self._locators:
            return []

        elements = self._locators[0].find_elements(root)
        for locator in self._locators[1:]:
            # once a step finds nothing, the rest of the chain is skipped
            if not elements:
                break
            next_elements = []
            for element in elements:
                next_elements.extend(locator.find_elements(element))
            elements = next_elements

        return elements

    def __eq__(self, other) -> bool:
        if not isinstance(other, ChainedLocator):
            return NotImplemented
        return self._locators == other._locators

    def __hash__(self) -> int:
        return hash(self._locators)

    def __str__(self) -> str:
        return "By.chained({" + ",".join(str(locator) for locator in self._locators) + "})"

    def __repr__(self) -> str:
        return f"ChainedLocator({', '.join(repr(locator) for locator in self._locators)})"
