from unittest.mock import Mock

import pytest
from selenium.webdriver.common.by import By

from browser_support.locating.locators import Locator


class TestLocator:
    """Tests for single (by, value) locators"""

    @pytest.mark.parametrize("suffix,expected", [
        ("CSS_SELECTOR", By.CSS_SELECTOR),
        ("xpath", By.XPATH),
        ("Id", By.ID),
        ("TAG_NAME", By.TAG_NAME),
        ("PARTIAL_LINK_TEXT", By.PARTIAL_LINK_TEXT),
    ])
    def test_from_suffix(self, suffix, expected):
        """Should resolve suffix names case-insensitively"""
        assert Locator.from_suffix(suffix, "x") == Locator(expected, "x")

    def test_from_suffix_invalid(self):
        with pytest.raises(ValueError, match="Invalid by_suffix"):
            Locator.from_suffix("SHADOW", "x")

    def test_find_element_delegates_to_root(self):
        root = Mock(name="Root")
        locator = Locator(By.CSS_SELECTOR, "div.card")

        assert locator.find_element(root) is root.find_element.return_value
        root.find_element.assert_called_once_with(By.CSS_SELECTOR, "div.card")

    def test_find_elements_delegates_to_root(self):
        root = Mock(name="Root")
        root.find_elements.return_value = ["a", "b"]

        assert Locator(By.ID, "menu").find_elements(root) == ["a", "b"]
        root.find_elements.assert_called_once_with(By.ID, "menu")

    @pytest.mark.parametrize("locator,expected", [
        (Locator(By.CSS_SELECTOR, "div.card"), "By.CSS_SELECTOR: div.card"),
        (Locator(By.LINK_TEXT, "Next"), "By.LINK_TEXT: Next"),
        (Locator.from_suffix("xpath", "//a"), "By.XPATH: //a"),
        (Locator("-custom strategy", "x"), "By.-custom strategy: x"),
    ])
    def test_str(self, locator, expected):
        """Should describe the strategy by its suffix name"""
        assert str(locator) == expected

    def test_is_hashable(self):
        assert len({Locator(By.ID, "a"), Locator(By.ID, "a")}) == 1
