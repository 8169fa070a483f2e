from unittest.mock import Mock

import pytest
from selenium.common.exceptions import ElementNotVisibleException, NoSuchElementException
from selenium.webdriver.common.by import By

from browser_support.locating.locators import Locator
from browser_support.locating.retrievers import (
    BasicWebElementRetriever,
    DisplayedWebElementRetriever,
    WebElementRetriever,
)


LOCATOR = Locator(By.ID, "submit")


class TestDisplayedWebElementRetriever:

    @pytest.fixture
    def mock_driver(self):
        return Mock(name="Driver")

    @pytest.fixture
    def mock_retriever(self, mock_driver):
        retriever = Mock(spec=WebElementRetriever)
        retriever.driver = mock_driver
        return retriever

    def test_returns_displayed_element(self, mock_retriever):
        element = Mock(name="Element")
        element.is_displayed.return_value = True
        mock_retriever.find_element.return_value = element

        result = DisplayedWebElementRetriever(mock_retriever).find_element(LOCATOR)

        assert result is element
        mock_retriever.find_element.assert_called_once_with(LOCATOR)

    def test_raises_for_hidden_element(self, mock_retriever):
        """Should raise ElementNotVisibleException naming the locator"""
        element = Mock(name="Element")
        element.is_displayed.return_value = False
        mock_retriever.find_element.return_value = element

        with pytest.raises(ElementNotVisibleException) as exc_info:
            DisplayedWebElementRetriever(mock_retriever).find_element(LOCATOR)

        assert "Not visible: By.ID: submit" in str(exc_info.value)

    def test_lookup_errors_propagate(self, mock_retriever):
        mock_retriever.find_element.side_effect = NoSuchElementException("gone")

        with pytest.raises(NoSuchElementException):
            DisplayedWebElementRetriever(mock_retriever).find_element(LOCATOR)

    def test_driver_comes_from_decorated_retriever(self, mock_retriever, mock_driver):
        assert DisplayedWebElementRetriever(mock_retriever).driver is mock_driver

    def test_wraps_bare_driver(self, mock_driver):
        """A driver is decorated through a BasicWebElementRetriever"""
        element = Mock(name="Element")
        element.is_displayed.return_value = True
        mock_driver.find_element.return_value = element

        retriever = DisplayedWebElementRetriever(mock_driver)

        assert retriever.find_element(LOCATOR) is element
        assert retriever.driver is mock_driver
        mock_driver.find_element.assert_called_once_with(By.ID, "submit")


class TestBasicWebElementRetriever:

    def test_find_element(self):
        driver = Mock(name="Driver")
        retriever = BasicWebElementRetriever(driver)

        assert retriever.find_element(LOCATOR) is driver.find_element.return_value
        assert retriever.driver is driver
