"""
Abstract base class for text generation services used in Prompt Architect.
This provides a common interface for different AI models.
"""

from abc import ABC, abstractmethod
from typing import Optional

class AIService(ABC):
    """Abstract base class for AI services."""

    @abstractmethod
    def generate(self, system_instruction: str, content: str) -> Optional[str]:
        """
        Generate text for the given content.

        Args:
            system_instruction: Fixed directive sent alongside every request
            content: The user content to respond to

        Returns:
            The generated text, or None if the model returned nothing
        """
        pass
