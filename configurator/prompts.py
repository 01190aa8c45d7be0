"""Interactive prompts.

``ask`` and ``confirm`` deliberately do no validation: an empty answer means
"use the default", anything else is taken literally.  Only ``y`` (in any
case) counts as a yes, so ``yes`` is a no.
"""

from __future__ import annotations

from collections.abc import Callable

from .utils import console


def _console_input(prompt: str) -> str:
    return console.input(prompt, markup=False)


class Prompter:
    """Reads answers from the terminal (or any ``input``-like callable)."""

    def __init__(self, input_func: Callable[[str], str] | None = None) -> None:
        self._input = input_func or _console_input

    def ask(self, question: str, default: str = "") -> str:
        """Ask a free-text question.

        Returns:
            The trimmed answer, or *default* unchanged when the answer is empty.
        """
        suffix = f" ({default})" if default else ""
        answer = self._input(f"{question}{suffix}: ").strip()
        if not answer:
            return default
        return answer

    def confirm(self, question: str, default: bool = False) -> bool:
        """Ask a yes/no question; only ``y``/``Y`` is a yes."""
        hint = "Y/n" if default else "y/N"
        answer = self.ask(f"{question} ({hint})")
        if not answer:
            return default
        return answer.lower() == "y"
