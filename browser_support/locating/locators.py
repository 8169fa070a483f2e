from dataclasses import dataclass
from typing import List

from selenium.webdriver.common.by import By

from browser_support.locating.interfaces import WebElementInterface


BY_SUFFIXES = {
    "ID": By.ID,
    "NAME": By.NAME,
    "XPATH": By.XPATH,
    "LINK_TEXT": By.LINK_TEXT,
    "PARTIAL_LINK_TEXT": By.PARTIAL_LINK_TEXT,
    "TAG_NAME": By.TAG_NAME,
    "CLASS_NAME": By.CLASS_NAME,
    "CSS_SELECTOR": By.CSS_SELECTOR,
}
SUFFIXES_BY_STRATEGY = {by: suffix for suffix, by in BY_SUFFIXES.items()}


@dataclass(frozen=True)
class Locator:
    """A single (by, value) lookup, e.g. Locator(By.CSS_SELECTOR, "div.card")"""

    by: str
    value: str

    @classmethod
    def from_suffix(cls, by_suffix: str, value: str) -> 'Locator':
        """Build from a name like 'XPATH' or 'css_selector'"""
        by_suffix = by_suffix.upper()
        if by_suffix not in BY_SUFFIXES:
            raise ValueError(f"Invalid by_suffix: {by_suffix}")
        return cls(BY_SUFFIXES[by_suffix], value)

    def find_element(self, root: WebElementInterface) -> WebElementInterface:
        return root.find_element(self.by, self.value)

    def find_elements(self, root: WebElementInterface) -> List[WebElementInterface]:
        return root.find_elements(self.by, self.value)

    def __str__(self) -> str:
        # strategies outside the table are shown as given
        suffix = SUFFIXES_BY_STRATEGY.get(self.by, self.by)
        return f"By.{suffix}: {self.value}"
