"""
Controller that owns the form state and drives the prompt enhancer.
"""

from typing import Callable, Optional

from prompt_architect import transitions
from prompt_architect.constants import COPY_RESET_DELAY_SECONDS, UNKNOWN_ERROR_MESSAGE
from prompt_architect.errors import PromptArchitectError
from prompt_architect.models.form import EnhancementRequest, FormState
from prompt_architect.services.clipboard import Clipboard
from prompt_architect.services.prompt_enhancer import PromptEnhancer
from prompt_architect.services.scheduler import Scheduler
from prompt_architect.utils.logger import logger


class FormController:
    """Single writer of FormState.

    Commands are update_idea, update_context, submit and copy_result. A UI that
    must stay responsive during the API call can use begin_submit and
    complete_submit around its own worker instead of submit.
    """

    def __init__(
        self,
        enhancer: PromptEnhancer,
        clipboard: Clipboard,
        scheduler: Scheduler,
        copy_reset_delay: float = COPY_RESET_DELAY_SECONDS,
        on_change: Optional[Callable[[FormState], None]] = None,
    ):
        self.enhancer = enhancer
        self.clipboard = clipboard
        self.scheduler = scheduler
        self.copy_reset_delay = copy_reset_delay
        self.on_change = on_change

        self._state = FormState()
        self._pending_reset = None
        self._copy_generation = 0

    @property
    def state(self) -> FormState:
        return self._state

    def _set_state(self, state: FormState) -> None:
        self._state = state
        if self.on_change is not None:
            self.on_change(state)

    # ---------------- inputs ----------------

    def update_idea(self, text: str) -> None:
        self._set_state(transitions.update_idea(self._state, text))

    def update_context(self, text: str) -> None:
        self._set_state(transitions.update_context(self._state, text))

    # ---------------- submit ----------------

    def begin_submit(self) -> Optional[EnhancementRequest]:
        """Enter Loading and return the request, or None if the guard refuses."""
        next_state = transitions.begin_submit(self._state)
        if next_state is None:
            logger.debug("Submit ignored: idea is empty or a request is in flight")
            return None

        request = self._state.to_request()
        self._set_state(next_state)
        return request

    def complete_submit(self, result_text: Optional[str] = None, error: Optional[BaseException] = None) -> None:
        """Leave Loading with either the result or the error's user-facing message."""
        if error is not None:
            self._set_state(transitions.submit_failed(self._state, self._error_message(error)))
        else:
            self._set_state(transitions.submit_succeeded(self._state, result_text))

    def submit(self) -> None:
        request = self.begin_submit()
        if request is None:
            return

        try:
            result_text = self.enhancer.enhance(request.composed_prompt)
        except Exception as e:
            self.complete_submit(error=e)
        else:
            logger.info("Prompt enhanced successfully")
            self.complete_submit(result_text=result_text)
        finally:
            if self._state.is_loading:
                self._set_state(self._state.model_copy(update={"is_loading": False}))

    @staticmethod
    def _error_message(error: BaseException) -> str:
        if isinstance(error, PromptArchitectError):
            logger.warning(f"Enhancement failed: {error}")
            return str(error)
        logger.error(f"Unexpected error while enhancing prompt: {error!r}")
        return UNKNOWN_ERROR_MESSAGE

    # ---------------- copy ----------------

    def copy_result(self) -> bool:
        """Copy the result to the clipboard. Returns False when there is nothing to copy."""
        if not self._state.result_text:
            return False

        self.clipboard.write_text(self._state.result_text)
        self._set_state(transitions.mark_copied(self._state))

        # Restart the confirmation window instead of stacking timers
        if self._pending_reset is not None:
            self.scheduler.cancel(self._pending_reset)
        self._copy_generation += 1
        generation = self._copy_generation
        self._pending_reset = self.scheduler.schedule(
            self.copy_reset_delay, lambda: self._reset_copied(generation)
        )
        return True

    def _reset_copied(self, generation: int) -> None:
        # A timer that fired after being superseded must not clear the flag
        if generation != self._copy_generation:
            return
        self._pending_reset = None
        self._set_state(transitions.reset_copied(self._state))
