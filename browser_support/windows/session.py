from enum import Enum
from typing import Optional, Set

from selenium.common.exceptions import TimeoutException
from selenium.webdriver.support.ui import WebDriverWait

from browser_support.config.support_config import SupportConfig
from browser_support.exceptions import (
    AmbiguousNewWindowsException,
    NoNewWindowException,
    WindowSessionClosedException,
)
from browser_support.utils import get_logger
from browser_support.windows.interfaces import WindowDriverInterface


logger = get_logger(__name__)


class WindowState(Enum):
    NOT_ATTACHED = "not_attached"
    ATTACHED = "attached"
    CLOSED = "closed"


class WindowSession:
    """
    Manages a new window which opens up after interacting with the UI.

    Usage:
        with WindowSession(driver) as session:
            link.click()  # opens a new window
            session.switch_to_new_window(timeout=5)
            button_on_new_window.click()
        # the new window is closed and focus is back on the old one

    The session is single-shot: it discovers at most one new window and
    never touches a window it did not discover itself.
    """

    def __init__(
        self,
        driver: WindowDriverInterface,
        config: Optional[SupportConfig] = None
    ):
        """
        Input:
            - driver: Selenium WebDriver (or anything with the same window API)
            - config: timeouts and log level; without one the defaults are
              used and the module logger level is left untouched
        """
        self._driver = driver
        self._config = config or SupportConfig()
        if config is not None:
            get_logger(__name__, config.log_level)
        self.logger = logger

        self.initial_windows: Set[str] = set(driver.window_handles)
        self.initial_active_window: str = driver.current_window_handle
        self.new_window: Optional[str] = None
        self.state = WindowState.NOT_ATTACHED

    # ==================== PUBLIC API ====================

    def switch_to_new_window(self, timeout: Optional[float] = None) -> 'WindowSession':
        """
        Switch to the window opened after this session was created

        Input: timeout - seconds to wait for the window to show up;
               0 checks once, None uses the configured default
        Output: self
        Raises:
            - NoNewWindowException: no new window (after the wait)
            - AmbiguousNewWindowsException: more than one new window
        """
        if self.state is WindowState.CLOSED:
            raise WindowSessionClosedException("This window session has already been closed")

        if self.new_window is None:
            self.new_window = self._detect_new_window(
                self._config.new_window_timeout if timeout is None else timeout
            )
            self.state = WindowState.ATTACHED

        self.logger.debug(f"Switching to new window {self.new_window}")
        self._driver.switch_to.window(self.new_window)
        return self

    def switch_back(self) -> 'WindowSession':
        """Switch to the window which was active when this session was created"""
        self.logger.debug(f"Switching back to window {self.initial_active_window}")
        self._driver.switch_to.window(self.initial_active_window)
        return self

    def close(self) -> None:
        """
        Close the new window and give focus back.

        If the new window is the active one, focus goes back to the
        initial window. Otherwise focus returns to whatever window was
        active right before this call.
        Does nothing when no window was discovered or it is already gone.
        Driver errors propagate, possibly leaving the sequence half done.
        """
        if self.state is not WindowState.ATTACHED:
            self.state = WindowState.CLOSED
            return

        self.state = WindowState.CLOSED
        if self.new_window not in self._driver.window_handles:
            self.logger.debug(f"Window {self.new_window} is already closed")
            return

        active_window = self._driver.current_window_handle
        if active_window == self.new_window:
            self._driver.close()
            self._driver.switch_to.window(self.initial_active_window)
            self.logger.debug(
                f"Closed window {self.new_window}, back on {self.initial_active_window}"
            )
        else:
            self._driver.switch_to.window(self.new_window)
            self._driver.close()
            self._driver.switch_to.window(active_window)
            self.logger.debug(f"Closed window {self.new_window}, back on {active_window}")

    def __enter__(self) -> 'WindowSession':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        self.close()
        return False

    # ==================== HELPERS ====================

    def _new_windows(self) -> Set[str]:
        return set(self._driver.window_handles) - self.initial_windows

    def _detect_new_window(self, timeout: float) -> str:
        if timeout > 0:
            wait = WebDriverWait(
                self._driver, timeout, poll_frequency=self._config.poll_frequency
            )
            try:
                new_windows = wait.until(lambda _driver: self._new_windows())
            except TimeoutException:
                self.logger.warning(f"No new window appeared within {timeout}s")
                raise NoNewWindowException(
                    f"Can't switch to a new window: no new windows detected within {timeout}s"
                )
        else:
            new_windows = self._new_windows()

        if len(new_windows) > 1:
            self.logger.warning(f"{len(new_windows)} new windows opened, refusing to pick one")
            raise AmbiguousNewWindowsException(len(new_windows))
        if not new_windows:
            self.logger.warning("No new window detected")
            raise NoNewWindowException()

        return next(iter(new_windows))


def open_window_session(
    driver: WindowDriverInterface,
    config: Optional[SupportConfig] = None
) -> WindowSession:
    """Factory for a WindowSession, meant to be used in a with block"""
    return WindowSession(driver, config)
