"""
Exceptions raised by the browser support helpers.

Everything extends Selenium's exception hierarchy, so code that already
catches WebDriverException (or NoSuchElementException) keeps working.
"""

from typing import Optional

from selenium.common.exceptions import (
    ElementNotVisibleException,
    NoSuchElementException,
    NoSuchWindowException,
    WebDriverException,
)


# ==================== WINDOWS ====================

class NoNewWindowException(NoSuchWindowException):
    """No window was opened since the session was created"""

    def __init__(self, msg: Optional[str] = None):
        super().__init__(msg or "Can't switch to a new window: no new windows detected")


class AmbiguousNewWindowsException(WebDriverException):
    """More than one window was opened since the session was created"""

    def __init__(self, count: int, msg: Optional[str] = None):
        self.count = count
        super().__init__(
            msg or f"Can't switch to a new window: {count} new windows have been opened"
        )


class WindowSessionClosedException(WebDriverException):
    """The session already closed its window and can't be reused"""


# ==================== SELECT ====================

class NoSelectionException(NoSuchElementException):
    """The select element has no selected option"""


class OptionNotFoundException(NoSuchElementException):
    """No option matched the requested text, index or value"""


class NotMultipleSelectException(WebDriverException):
    """Deselecting is only possible on a multi-select"""


__all__ = [
    "AmbiguousNewWindowsException",
    "ElementNotVisibleException",
    "NoNewWindowException",
    "NoSelectionException",
    "NoSuchElementException",
    "NotMultipleSelectException",
    "OptionNotFoundException",
    "WindowSessionClosedException",
]
