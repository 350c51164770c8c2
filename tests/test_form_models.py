"""
Tests for the form data models and pure transitions.
"""

import pytest
from pydantic import ValidationError

from prompt_architect import transitions
from prompt_architect.models.form import EnhancementRequest, FormState, Phase


class TestEnhancementRequest:

    @pytest.mark.parametrize("idea", ["a todo app", "  padded idea  ", "multi\nline\nidea"])
    def test_without_context_prompt_is_idea_verbatim(self, idea):
        assert EnhancementRequest(idea_text=idea).composed_prompt == idea
        assert EnhancementRequest(idea_text=idea, context_text="   ").composed_prompt == idea

    def test_with_context_prompt_has_labeled_sections(self):
        request = EnhancementRequest(idea_text="a todo app", context_text="Todo Pro")

        prompt = request.composed_prompt

        context_block, task_block = prompt.split("\n\n")
        assert context_block == "Project Name/Context: Todo Pro"
        assert task_block == "Task: a todo app"
        assert task_block[len("Task: "):] == request.idea_text

    @pytest.mark.parametrize("idea", ["", "   ", "\n"])
    def test_blank_idea_is_rejected(self, idea):
        with pytest.raises(ValidationError):
            EnhancementRequest(idea_text=idea, context_text="Todo")


class TestFormState:

    def test_defaults(self):
        state = FormState()
        assert state.phase == Phase.IDLE
        assert state.can_submit is False
        assert state.submit_label == "Enhance Prompt"
        assert state.copy_label == "Copy JSON"

    def test_state_is_immutable(self):
        with pytest.raises(ValidationError):
            FormState().idea_text = "changed"

    def test_phase_derivation(self):
        assert FormState(is_loading=True).phase == Phase.LOADING
        assert FormState(error_message="x").phase == Phase.FAILED
        assert FormState(result_text="{}").phase == Phase.SUCCESS

    def test_loading_disables_submit(self):
        state = FormState(idea_text="a todo app", is_loading=True)
        assert state.can_submit is False
        assert state.submit_label == "Architecting..."


class TestTransitions:

    def test_begin_submit_clears_result_and_error(self):
        state = FormState(idea_text="a todo app", error_message="old", result_text="old")

        next_state = transitions.begin_submit(state)

        assert next_state.is_loading is True
        assert next_state.error_message is None
        assert next_state.result_text is None
        assert state.error_message == "old"

    def test_begin_submit_refuses_blank_idea(self):
        assert transitions.begin_submit(FormState(idea_text="  ", context_text="ctx")) is None

    def test_begin_submit_refuses_while_loading(self):
        assert transitions.begin_submit(FormState(idea_text="a", is_loading=True)) is None

    def test_success_and_failure_are_exclusive(self):
        loading = transitions.begin_submit(FormState(idea_text="a"))

        succeeded = transitions.submit_succeeded(loading, "{}")
        failed = transitions.submit_failed(loading, "nope")

        assert (succeeded.result_text, succeeded.error_message, succeeded.is_loading) == ("{}", None, False)
        assert (failed.result_text, failed.error_message, failed.is_loading) == (None, "nope", False)

    def test_copied_flag_round_trip_leaves_other_fields(self):
        state = FormState(idea_text="a", result_text="{}")

        copied = transitions.mark_copied(state)

        assert copied.is_copied is True
        assert transitions.reset_copied(copied) == state
