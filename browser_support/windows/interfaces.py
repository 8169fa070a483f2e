
from typing import List, Protocol


class SwitchToInterface(Protocol):
    """The part of driver.switch_to the window session uses"""

    def window(self, window_name: str) -> None:
        ...


class WindowDriverInterface(Protocol):
    """Protocol for window operations - doesn't require a live browser"""

    @property
    def window_handles(self) -> List[str]:
        ...

    @property
    def current_window_handle(self) -> str:
        ...

    @property
    def switch_to(self) -> SwitchToInterface:
        ...

    def close(self) -> None:
        ...
