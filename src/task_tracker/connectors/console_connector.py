# src/task_tracker/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import CANCEL, registry as command_registry
from ..core.ports import Prompter
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_WORDS = frozenset({CANCEL, "exit", "quit", "/exit", "/quit"})


class ConsolePrompter:
    """Prompter backed by input()/print()."""

    def ask(self, prompt: str) -> str | None:
        try:
            return input(prompt)
        except EOFError:
            return None

    def say(self, text: str) -> None:
        print(text)


def run_console_loop(state: AppState, prompter: Prompter | None = None) -> None:
    prompter = prompter or ConsolePrompter()
    logger.info("Console connector started (tasks=%d).", len(state.store))
    prompter.say(command_registry.build_help())

    while True:
        try:
            line = prompter.ask("\n-> ")
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            prompter.say("")
            break

        if line is None:
            logger.info("Console EOF received, exiting.")
            break

        line = line.strip()
        if not line:
            continue

        if line.lower() in EXIT_WORDS:
            logger.info("Console exit command received.")
            break

        try:
            with state.lock:
                reply = command_registry.handle(state, line, prompter)
        except KeyboardInterrupt:
            reply = "Cancelled."
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            prompter.say(reply)

    logger.info("Console connector finished.")
