"""
Gemini service implementation for Prompt Architect.
Handles synchronous text generation using Google's Gemini models.
"""

from typing import Optional
from google import genai

from prompt_architect.services.ai_service import AIService
from prompt_architect.utils.logger import logger

class GeminiService(AIService):
    """Gemini service implementation."""

    def __init__(self, client: genai.Client, model: str):
        """
        Initialize the Gemini service.

        Args:
            client: Configured Gemini client, created once at startup
            model: Gemini model to use
        """
        self.gemini_client = client
        self.model = model

    def generate(self, system_instruction: str, content: str) -> Optional[str]:
        """
        Send one generate_content request to Gemini.
        Errors from the SDK are not caught here.

        Args:
            system_instruction: Fixed directive sent alongside every request
            content: The user content to respond to

        Returns:
            The response text, or None if the response carried no text
        """
        logger.info(f"Generating content with Gemini model: {self.model}")

        config = {
            "system_instruction": system_instruction,
        }

        response = self.gemini_client.models.generate_content(
            model=self.model,
            contents=content,
            config=config
        )

        text_content = response.text
        logger.debug(f"Gemini returned {len(text_content or '')} characters")
        return text_content
