"""
Factory for creating service instances at startup.
"""

from typing import Callable, Optional

from google import genai

from prompt_architect.form_controller import FormController
from prompt_architect.models.form import FormState
from prompt_architect.services.clipboard import Clipboard
from prompt_architect.services.gemini_service import GeminiService
from prompt_architect.services.prompt_enhancer import PromptEnhancer
from prompt_architect.services.scheduler import Scheduler
from prompt_architect.utils.config import Config, config
from prompt_architect.utils.logger import logger

def create_enhancer(app_config: Config = config) -> PromptEnhancer:
    """
    Build the prompt enhancer, constructing the Gemini client once.

    A missing API key is not fatal here: the enhancer is created without a
    service and reports the configuration error on first use.

    Args:
        app_config: Loaded configuration

    Returns:
        PromptEnhancer instance
    """
    if not app_config.has_api_key:
        logger.warning("GOOGLE_AI_API_KEY is not set; enhancement requests will fail")
        return PromptEnhancer(ai_service=None)

    gemini_client = genai.Client(api_key=app_config.google_ai_api_key)
    ai_service = GeminiService(gemini_client, app_config.google_ai_model)
    logger.info(f"Using Gemini model: {app_config.google_ai_model}")
    return PromptEnhancer(ai_service=ai_service)


def create_controller(
    clipboard: Clipboard,
    scheduler: Scheduler,
    enhancer: Optional[PromptEnhancer] = None,
    on_change: Optional[Callable[[FormState], None]] = None,
) -> FormController:
    """Wire a FormController to the given platform clipboard and scheduler."""
    return FormController(
        enhancer=enhancer or create_enhancer(),
        clipboard=clipboard,
        scheduler=scheduler,
        on_change=on_change,
    )
