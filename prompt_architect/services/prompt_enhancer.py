"""
Turns a composed prompt into a cleaned JSON specification via an AI service.
"""

import re
from pathlib import Path
from typing import Optional

from prompt_architect.constants import EXAMPLE_SPEC_FILE, SYSTEM_INSTRUCTION_FILE
from prompt_architect.errors import ConfigurationError, EmptyResponseError, EnhancementError
from prompt_architect.services.ai_service import AIService
from prompt_architect.utils.logger import logger

PROMPTS_DIR = Path(__file__).parent.parent / "prompts"

_OPENING_FENCE = re.compile(r"\A```[\w.+-]*\n")
_CLOSING_FENCE = re.compile(r"(?:\A|\n)```\Z")


def load_system_instruction(prompts_dir: Path = PROMPTS_DIR) -> str:
    """Build the system instruction with the worked example inlined."""
    with open(prompts_dir / SYSTEM_INSTRUCTION_FILE, 'r') as prompt_file:
        template = prompt_file.read()
    with open(prompts_dir / EXAMPLE_SPEC_FILE, 'r') as example_file:
        example = example_file.read().strip()
    return template.replace("{example}", example)


def clean_response_text(text: Optional[str]) -> str:
    """
    Strip surrounding whitespace and a markdown code fence from model output.

    Only a fence at the very start of the trimmed text is recognized; anything
    else is returned trimmed but otherwise untouched.

    Raises:
        EmptyResponseError: if the model returned no text, or only an empty fence
    """
    if not text or not text.strip():
        raise EmptyResponseError()

    clean_text = text.strip()
    if _OPENING_FENCE.match(clean_text):
        clean_text = _OPENING_FENCE.sub("", clean_text, count=1)
        clean_text = _CLOSING_FENCE.sub("", clean_text, count=1)

    # A fence wrapped around nothing is still an empty response
    if not clean_text.strip():
        raise EmptyResponseError()
    return clean_text


class PromptEnhancer:
    """Stateless wrapper that enhances one prompt per call."""

    def __init__(self, ai_service: Optional[AIService], system_instruction: Optional[str] = None):
        """
        Args:
            ai_service: Service used for generation; None when no credential was configured
            system_instruction: Overrides the bundled instruction
        """
        self.ai_service = ai_service
        self.system_instruction = system_instruction or load_system_instruction()

    def enhance(self, composed_prompt: str) -> str:
        if self.ai_service is None:
            logger.error("Enhancement requested without a configured API key")
            raise ConfigurationError()

        try:
            text = self.ai_service.generate(self.system_instruction, composed_prompt)
        except Exception as e:
            logger.exception(f"Gemini API Error: {e}")
            raise EnhancementError() from e

        try:
            return clean_response_text(text)
        except EmptyResponseError:
            logger.error("No response from Gemini")
            raise
