"""
Clipboard access used by the copy action.
"""

from abc import ABC, abstractmethod


class Clipboard(ABC):

    @abstractmethod
    def write_text(self, text: str) -> None:
        """Replace the clipboard contents. Fire-and-forget."""
        pass
