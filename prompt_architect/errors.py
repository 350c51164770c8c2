"""
Exceptions raised while enhancing a prompt.
"""

from prompt_architect.constants import API_KEY_MISSING_MESSAGE, ENHANCE_FAILED_MESSAGE


class PromptArchitectError(Exception):
    """Base class for errors whose message is safe to show to the user."""


class ConfigurationError(PromptArchitectError):
    """The API credential could not be resolved."""

    def __init__(self, message: str = API_KEY_MISSING_MESSAGE):
        super().__init__(message)


class EnhancementError(PromptArchitectError):
    """The generation call failed. The underlying cause is chained, never shown."""

    def __init__(self, message: str = ENHANCE_FAILED_MESSAGE):
        super().__init__(message)


class EmptyResponseError(EnhancementError):
    """The model returned no text."""
