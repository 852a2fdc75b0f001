# src/task_tracker/core/ports.py

"""
Ports (interfaces) used by the command handlers.

Handlers talk to the user through a Prompter instead of input()/print(),
so the console connector and the test fakes are interchangeable.
"""

from __future__ import annotations

from typing import Protocol


class Prompter(Protocol):
    """Line-oriented user I/O."""

    def ask(self, prompt: str) -> str | None:
        """Read one line. None means the input stream is closed."""
        ...

    def say(self, text: str) -> None: ...
