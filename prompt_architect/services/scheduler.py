"""
Cancellable delayed callbacks.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable


class Scheduler(ABC):
    """Runs a callback once after a delay; pending callbacks can be cancelled."""

    @abstractmethod
    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> Any:
        """Return a handle accepted by cancel()."""
        pass

    @abstractmethod
    def cancel(self, handle: Any) -> None:
        pass

