from typing import List

from selenium.webdriver.support.ui import Select

from browser_support.exceptions import (
    NoSelectionException,
    NoSuchElementException,
    NotMultipleSelectException,
    OptionNotFoundException,
)
from browser_support.select.interfaces import OptionElementInterface, SelectControl


class SelectElement(SelectControl):
    """
    SelectControl backed by Selenium's Select helper.

    Nothing is cached: every call reads the options from the page again.
    Errors from the element itself (stale element, disabled option and
    the like) are not caught.
    """

    def __init__(self, element):
        """
        Input: element - WebElement for a <select> tag
        Raises: UnexpectedTagNameException for any other tag
        """
        self._element = element
        self._select = Select(element)

    # ==================== READING ====================

    def is_multiple(self) -> bool:
        # read at call time, Select only looks once when it is built
        multiple = self._element.get_dom_attribute("multiple")
        return multiple is not None and multiple != "false"

    def options(self) -> List[OptionElementInterface]:
        return self._select.options

    def all_selected_options(self) -> List[OptionElementInterface]:
        return self._select.all_selected_options

    def first_selected_option(self) -> OptionElementInterface:
        try:
            return self._select.first_selected_option
        except NoSuchElementException as e:
            raise NoSelectionException("No options are selected") from e

    # ==================== SELECTING ====================

    def select_by_visible_text(self, text: str) -> None:
        try:
            self._select.select_by_visible_text(text)
        except NoSuchElementException as e:
            raise OptionNotFoundException(f"Cannot locate option with visible text: {text}") from e

    def select_by_index(self, index: int) -> None:
        try:
            self._select.select_by_index(index)
        except NoSuchElementException as e:
            raise OptionNotFoundException(f"Cannot locate option with index: {index}") from e

    def select_by_value(self, value: str) -> None:
        try:
            self._select.select_by_value(value)
        except NoSuchElementException as e:
            raise OptionNotFoundException(f"Cannot locate option with value: {value}") from e

    # ==================== DESELECTING ====================

    def deselect_all(self) -> None:
        self._require_multiple("deselect all options")
        self._select.deselect_all()

    def deselect_by_value(self, value: str) -> None:
        self._require_multiple("deselect options")
        try:
            self._select.deselect_by_value(value)
        except NoSuchElementException as e:
            raise OptionNotFoundException(f"Cannot locate option with value: {value}") from e

    def deselect_by_index(self, index: int) -> None:
        self._require_multiple("deselect options")
        try:
            self._select.deselect_by_index(index)
        except NoSuchElementException as e:
            raise OptionNotFoundException(f"Cannot locate option with index: {index}") from e

    def deselect_by_visible_text(self, text: str) -> None:
        self._require_multiple("deselect options")
        try:
            self._select.deselect_by_visible_text(text)
        except NoSuchElementException as e:
            raise OptionNotFoundException(f"Cannot locate option with visible text: {text}") from e

    def _require_multiple(self, action: str) -> None:
        if not self.is_multiple():
            raise NotMultipleSelectException(f"You may only {action} of a multi-select")
