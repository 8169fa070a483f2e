
from typing import List, Protocol


class WebElementInterface(Protocol):
    """Protocol for search contexts (driver or element) - doesn't require Selenium"""

    def find_element(self, by: str, value: str) -> 'WebElementInterface':
        ...

    def find_elements(self, by: str, value: str) -> List['WebElementInterface']:
        ...


class LocatorInterface(Protocol):
    """Anything that can look elements up below a search root"""

    def find_element(self, root: WebElementInterface) -> WebElementInterface:
        ...

    def find_elements(self, root: WebElementInterface) -> List[WebElementInterface]:
        ...
