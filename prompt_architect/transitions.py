"""
Pure state transitions for the enhancement form.

Every function takes the current FormState and returns the next one; none of
them perform I/O. begin_submit returns None when the submit guard refuses.
"""

from typing import Optional

from prompt_architect.models.form import FormState


def update_idea(state: FormState, text: str) -> FormState:
    return state.model_copy(update={"idea_text": text})


def update_context(state: FormState, text: str) -> FormState:
    return state.model_copy(update={"context_text": text})


def begin_submit(state: FormState) -> Optional[FormState]:
    if not state.can_submit:
        return None
    return state.model_copy(update={
        "is_loading": True,
        "error_message": None,
        "result_text": None,
    })


def submit_succeeded(state: FormState, result_text: str) -> FormState:
    return state.model_copy(update={
        "is_loading": False,
        "error_message": None,
        "result_text": result_text,
    })


def submit_failed(state: FormState, error_message: str) -> FormState:
    return state.model_copy(update={
        "is_loading": False,
        "error_message": error_message,
        "result_text": None,
    })


def mark_copied(state: FormState) -> FormState:
    return state.model_copy(update={"is_copied": True})


def reset_copied(state: FormState) -> FormState:
    return state.model_copy(update={"is_copied": False})
