"""
Abstract interface for dropdown-style controls.
"""

from abc import ABC, abstractmethod
from typing import List, Protocol


class OptionElementInterface(Protocol):
    """What a select control needs from an element - doesn't require Selenium"""

    @property
    def text(self) -> str:
        ...

    def get_attribute(self, name: str) -> str:
        ...

    def is_selected(self) -> bool:
        ...

    def is_enabled(self) -> bool:
        ...

    def click(self) -> None:
        ...


class SelectControl(ABC):
    """Interface for reading and changing the selection of a dropdown."""

    @abstractmethod
    def is_multiple(self) -> bool:
        """Whether more than one option can be selected at a time."""
        pass

    @abstractmethod
    def options(self) -> List[OptionElementInterface]:
        """All options, in document order."""
        pass

    @abstractmethod
    def all_selected_options(self) -> List[OptionElementInterface]:
        """Selected options, in document order."""
        pass

    @abstractmethod
    def first_selected_option(self) -> OptionElementInterface:
        pass

    @abstractmethod
    def select_by_visible_text(self, text: str) -> None:
        pass

    @abstractmethod
    def select_by_index(self, index: int) -> None:
        pass

    @abstractmethod
    def select_by_value(self, value: str) -> None:
        pass

    @abstractmethod
    def deselect_all(self) -> None:
        pass

    @abstractmethod
    def deselect_by_value(self, value: str) -> None:
        pass

    @abstractmethod
    def deselect_by_index(self, index: int) -> None:
        pass

    @abstractmethod
    def deselect_by_visible_text(self, text: str) -> None:
        pass
