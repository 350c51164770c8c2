from __future__ import annotations

import threading
from functools import partial
from typing import Any, Callable, Optional

import tkinter as tk
from tkinter import ttk
from tkinter.scrolledtext import ScrolledText

from prompt_architect.constants import APP_TITLE
from prompt_architect.factory import create_controller
from prompt_architect.models.form import EnhancementRequest, FormState
from prompt_architect.services.clipboard import Clipboard
from prompt_architect.services.prompt_enhancer import PromptEnhancer
from prompt_architect.services.scheduler import Scheduler
from prompt_architect.utils.logger import logger


class TkClipboard(Clipboard):
    def __init__(self, widget: tk.Misc):
        self.widget = widget

    def write_text(self, text: str) -> None:
        self.widget.clipboard_clear()
        self.widget.clipboard_append(text)


class TkScheduler(Scheduler):
    """Runs callbacks on the Tk event loop via after()."""

    def __init__(self, widget: tk.Misc):
        self.widget = widget

    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> str:
        return self.widget.after(int(delay_seconds * 1000), callback)

    def cancel(self, handle: Any) -> None:
        self.widget.after_cancel(handle)


class PromptArchitectGUI:
    def __init__(self, master: tk.Misc, enhancer: Optional[PromptEnhancer] = None):
        self.master = master
        self.controller = create_controller(
            clipboard=TkClipboard(master),
            scheduler=TkScheduler(master),
            enhancer=enhancer,
            on_change=self._render,
        )
        self._shown_result: Optional[str] = None

        # --- ui ---
        self._build_ui()
        self._render(self.controller.state)

    # ---------------- UI ----------------

    def _build_ui(self) -> None:
        self.master.title(APP_TITLE)
        self.master.geometry("760x680")
        self.master.grid_columnconfigure(0, weight=1)

        header = ttk.Label(
            self.master,
            text="Enter your rough idea, and let AI structure a comprehensive professional specification.",
            wraplength=700,
        )
        header.grid(row=0, column=0, sticky="w", padx=10, pady=(10, 4))

        form = ttk.Frame(self.master)
        form.grid(row=1, column=0, sticky="ew", padx=10)
        form.grid_columnconfigure(0, weight=1)

        ttk.Label(form, text="Project Name / Context (Optional)").grid(row=0, column=0, sticky="w")
        self._context_var = tk.StringVar(value="")
        self._context_var.trace_add("write", self._on_context_changed)
        self._context_entry = ttk.Entry(form, textvariable=self._context_var)
        self._context_entry.grid(row=1, column=0, sticky="ew", pady=(2, 8))

        ttk.Label(form, text="Your Idea").grid(row=2, column=0, sticky="w")
        self._idea_text = ScrolledText(form, height=5, wrap="word")
        self._idea_text.grid(row=3, column=0, sticky="ew", pady=(2, 8))
        self._idea_text.bind("<<Modified>>", self._on_idea_edited)

        self._enhance_btn = ttk.Button(form, command=self._on_enhance_clicked)
        self._enhance_btn.grid(row=4, column=0, sticky="ew")

        # Error banner
        self._error_var = tk.StringVar(value="")
        self._error_label = ttk.Label(self.master, textvariable=self._error_var, foreground="#dc2626", wraplength=700)
        self._error_label.grid(row=2, column=0, sticky="w", padx=10, pady=(8, 0))

        # Result
        self._result_frame = ttk.LabelFrame(self.master, text="Generated Specification")
        self._result_frame.grid(row=3, column=0, sticky="nsew", padx=10, pady=10)
        self.master.grid_rowconfigure(3, weight=1)
        self._result_frame.grid_columnconfigure(0, weight=1)
        self._result_frame.grid_rowconfigure(1, weight=1)

        self._copy_btn = ttk.Button(self._result_frame, command=self._on_copy_clicked)
        self._copy_btn.grid(row=0, column=0, sticky="e", padx=10, pady=(6, 0))

        self._result_text = ScrolledText(self._result_frame, height=16, wrap="word", state="disabled")
        self._result_text.grid(row=1, column=0, sticky="nsew", padx=10, pady=10)

    def _render(self, state: FormState) -> None:
        self._enhance_btn.configure(
            text=state.submit_label,
            state="normal" if state.can_submit else "disabled",
        )

        if state.error_message is not None:
            self._error_var.set(state.error_message)
            self._error_label.grid()
        else:
            self._error_var.set("")
            self._error_label.grid_remove()

        if state.result_text is not None:
            if state.result_text != self._shown_result:
                self._set_result_text(state.result_text)
            self._copy_btn.configure(text=state.copy_label)
            self._result_frame.grid()
        else:
            self._result_frame.grid_remove()
        self._shown_result = state.result_text

    def _set_result_text(self, text: str) -> None:
        self._result_text.configure(state="normal")
        self._result_text.delete("1.0", "end")
        self._result_text.insert("1.0", text)
        self._result_text.configure(state="disabled")

    # ---------------- UI events ----------------

    def _on_context_changed(self, *_args) -> None:
        self.controller.update_context(self._context_var.get())

    def _on_idea_edited(self, _event=None) -> None:
        # <<Modified>> fires once per flag set; clearing it re-arms the event
        if not self._idea_text.edit_modified():
            return
        self._sync_idea()
        self._idea_text.edit_modified(False)

    def _sync_idea(self) -> None:
        idea_text = self._idea_text.get("1.0", "end-1c")
        if idea_text != self.controller.state.idea_text:
            self.controller.update_idea(idea_text)

    def _on_enhance_clicked(self) -> None:
        self._sync_idea()
        request = self.controller.begin_submit()
        if request is None:
            return
        threading.Thread(target=self._run_enhancement, args=(request,), daemon=True).start()

    def _run_enhancement(self, request: EnhancementRequest) -> None:
        # Worker thread: only the Tk thread may touch the controller
        try:
            result_text = self.controller.enhancer.enhance(request.composed_prompt)
        except Exception as e:
            self.master.after(0, partial(self.controller.complete_submit, error=e))
            return
        logger.info("Prompt enhanced successfully")
        self.master.after(0, partial(self.controller.complete_submit, result_text=result_text))

    def _on_copy_clicked(self) -> None:
        self.controller.copy_result()


def run_gui(enhancer: Optional[PromptEnhancer] = None) -> None:
    root = tk.Tk()
    PromptArchitectGUI(root, enhancer)
    root.mainloop()
