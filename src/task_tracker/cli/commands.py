# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TypeVar

from ..core.ports import Prompter
from ..core.state import AppState
from ..tasks.codecs import (
    PRIORITY_CHOICES,
    STATUS_CHOICES,
    format_priority,
    format_status,
    parse_priority,
    parse_status,
)
from ..tasks.due_dates import DATE_FORMAT_HINT, validate_due_date
from ..tasks.errors import DateErrorKind, InvalidDate, SnapshotExportError
from ..tasks.exporter import export_snapshot
from ..tasks.results import Result
from ..tasks.task_models import Task, normalize_category, normalize_title

CommandHandler = Callable[[AppState, list[str], Prompter], str]

T = TypeVar("T")

CANCEL = "0"
RULE = "-" * 74

logger = logging.getLogger(__name__)


class _Cancelled(Exception):
    """User entered the cancel token (or closed input) in the middle of a command."""


class CommandRegistry:
    """Menu command registry used by the console connector (1..10, help, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, tuple[str, str]] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = (aliases[0] if aliases else "", help_text)
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str, prompter: Prompter) -> str | None:
        """
        Handle a line like "3", "find", "/find dennis files".
        Returns a reply string, or None for a blank line.
        """
        parts = line.strip().split()
        if not parts:
            return None

        name = parts[0].lstrip("/").lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: {parts[0]}. Use help to list available commands."

        try:
            return handler(state, args, prompter)
        except _Cancelled:
            return "Cancelled."

    def build_help(self) -> str:
        lines = ["Task Tracker:"]
        for name, (number, help_text) in self._help.items():
            lines.append(f"  {number:>2} {name:<10} - {help_text}")
        lines.append(f"  {CANCEL:>2} {'exit':<10} - Quit.")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering ----


def render_task(task: Task) -> str:
    return (
        f"Title: {task.title}, Category: {task.category}, Due Date: {task.due_date}, "
        f"Priority: {format_priority(task.priority)}, Status: {format_status(task.status)}"
    )


def render_tasks(tasks: Sequence[Task], filter_label: str | None = None) -> str:
    if not tasks and filter_label is not None:
        return f"No tasks with '{filter_label}' found."
    header = "Tasks:" if filter_label is None else f"Tasks filtered by - {filter_label}:"
    if not tasks:
        return "\n".join([RULE, header, "  (none)", RULE])
    return "\n".join([RULE, header, *(render_task(t) for t in tasks), RULE])


# ---- prompting ----


def _ask(prompter: Prompter, label: str) -> str:
    raw = prompter.ask(f"{label} [{CANCEL} to cancel]: ")
    if raw is None or raw.strip() == CANCEL:
        raise _Cancelled()
    return raw.strip()


def _ask_text(prompter: Prompter, label: str) -> str:
    while True:
        text = _ask(prompter, label)
        if text:
            return text
        prompter.say("Input must not be empty.")


def _ask_valid(
    prompter: Prompter,
    label: str,
    parse: Callable[[str], Result[T]],
    allowed: Sequence[str],
) -> T:
    while True:
        res = parse(_ask(prompter, label))
        if res.ok:
            return res.unwrap()
        prompter.say(f"Not a valid input. Available inputs: {' '.join(allowed)}")


def _ask_choice(prompter: Prompter, label: str, choices: Sequence[str]) -> str:
    by_lower = {c.lower(): c for c in choices}
    while True:
        picked = by_lower.get(_ask(prompter, label).lower())
        if picked is not None:
            return picked
        prompter.say(f"Not a valid input. Available inputs: {' '.join(choices)}")


def _ask_due_date(prompter: Prompter) -> str:
    while True:
        res = validate_due_date(_ask(prompter, f"Due date ({DATE_FORMAT_HINT})"))
        if res.ok:
            return res.unwrap()
        err = res.error
        assert isinstance(err, InvalidDate)
        if err.reason is DateErrorKind.MALFORMED:
            prompter.say(f"Wrong format ({err.detail}). Use {DATE_FORMAT_HINT}.")
        else:
            prompter.say(f"No such date ({err.detail}).")


def _ask_existing_title(state: AppState, prompter: Prompter, args: list[str]) -> str:
    title = normalize_title(" ".join(args)) if args else ""
    while True:
        if not title:
            title = normalize_title(_ask_text(prompter, "Task title"))
        if state.store.find_index(title) is not None:
            return title
        prompter.say(f"No task with name '{title}' found.")
        title = ""


# ---- handlers ----


def cmd_help(state: AppState, args: list[str], prompter: Prompter) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str], prompter: Prompter) -> str:
    """Collect and validate every field first; the store is touched only at the end."""
    title = normalize_title(" ".join(args)) if args else ""
    if not title:
        title = normalize_title(_ask_text(prompter, "Task title"))
    category = normalize_category(_ask_text(prompter, "Task category"))
    due_date = _ask_due_date(prompter)
    priority = _ask_valid(prompter, "Priority (Low/Medium/High)", parse_priority, PRIORITY_CHOICES)
    status = _ask_valid(prompter, "Status (Open/InProgress/Done)", parse_status, STATUS_CHOICES)

    state.store.add(Task(title, category, due_date, priority, status))
    return f"Added {title}."


def cmd_remove(state: AppState, args: list[str], prompter: Prompter) -> str:
    title = _ask_existing_title(state, prompter, args)
    removed = state.store.remove(title)
    if removed > 1:
        return f"Removed {title} ({removed} tasks)."
    return f"Removed {title}."


def cmd_find(state: AppState, args: list[str], prompter: Prompter) -> str:
    title = _ask_existing_title(state, prompter, args)
    task = state.store.find(title)
    if task is None:
        return f"No task with name '{title}' found."
    return f"Found task:\n{render_task(task)}"


def cmd_change(state: AppState, args: list[str], prompter: Prompter) -> str:
    """
    change          -> ask for title, then status (1) or priority (2)
    change <title>  -> same, title given inline
    """
    title = _ask_existing_title(state, prompter, args)
    task = state.store.find(title)
    if task is not None:
        prompter.say(render_task(task))

    which = _ask_choice(prompter, "Change status (1) / priority (2)", ("1", "2"))

    if which == "1":
        status = _ask_valid(prompter, "New status (Open/InProgress/Done)", parse_status, STATUS_CHOICES)
        old_status = state.store.set_status(title, status)
        if old_status is None:
            return f"No task with name '{title}' found."
        return (
            f"Changed status of '{title}' from '{format_status(old_status)}' "
            f"to '{format_status(status)}'."
        )

    priority = _ask_valid(prompter, "New priority (Low/Medium/High)", parse_priority, PRIORITY_CHOICES)
    old_priority = state.store.set_priority(title, priority)
    if old_priority is None:
        return f"No task with name '{title}' found."
    return (
        f"Changed priority of '{title}' from '{format_priority(old_priority)}' "
        f"to '{format_priority(priority)}'."
    )


def cmd_list(state: AppState, args: list[str], prompter: Prompter) -> str:
    return render_tasks(state.store.list_tasks())


def cmd_filter_category(state: AppState, args: list[str], prompter: Prompter) -> str:
    categories = state.store.categories()
    if not categories:
        return "No tasks to filter."
    category = _ask_choice(prompter, "Category", categories)
    return render_tasks(state.store.filter_by_category(category), category)


def cmd_filter_priority(state: AppState, args: list[str], prompter: Prompter) -> str:
    priority = _ask_valid(prompter, "Priority (Low/Medium/High)", parse_priority, PRIORITY_CHOICES)
    label = format_priority(priority)
    return render_tasks(state.store.filter_by_priority(priority), label)


def cmd_filter_status(state: AppState, args: list[str], prompter: Prompter) -> str:
    status = _ask_valid(prompter, "Status (Open/InProgress/Done)", parse_status, STATUS_CHOICES)
    label = format_status(status)
    return render_tasks(state.store.filter_by_status(status), label)


def cmd_sort(state: AppState, args: list[str], prompter: Prompter) -> str:
    """
    sort            -> ask: alphabetically (1) / by priority (2)
    sort title      -> alphabetically
    sort priority   -> by priority, Low first
    """
    key = args[0].lower() if args else ""
    if key not in ("title", "priority"):
        choice = _ask_choice(prompter, "Sort alphabetically (1) / by priority (2)", ("1", "2"))
        key = "title" if choice == "1" else "priority"

    if key == "title":
        state.store.sort_by_title()
    else:
        state.store.sort_by_priority()
    return render_tasks(state.store.list_tasks())


def cmd_export(state: AppState, args: list[str], prompter: Prompter) -> str:
    """
    export          -> write to the configured export path
    export <path>   -> write to <path>
    """
    target = Path(" ".join(args)).expanduser() if args else Path(state.settings.export_path)
    try:
        path = export_snapshot(state.store, target)
    except SnapshotExportError as e:
        return f"Export failed: {e}"
    return f"Exported {len(state.store)} tasks to {path}."


registry.register("add", cmd_add, help_text="Add a task.", aliases=["1"])
registry.register("remove", cmd_remove, help_text="Remove a task by title.", aliases=["2", "rm"])
registry.register("find", cmd_find, help_text="Find a task by title.", aliases=["3"])
registry.register("change", cmd_change, help_text="Change status / priority of a task.", aliases=["4"])
registry.register("list", cmd_list, help_text="List all tasks.", aliases=["5", "ls"])
registry.register("category", cmd_filter_category, help_text="Filter by category.", aliases=["6"])
registry.register("priority", cmd_filter_priority, help_text="Filter by priority.", aliases=["7"])
registry.register("status", cmd_filter_status, help_text="Filter by status.", aliases=["8"])
registry.register("sort", cmd_sort, help_text="Sort by title or priority.", aliases=["9"])
registry.register("export", cmd_export, help_text="Export tasks as JSON: export [path].", aliases=["10"])
registry.register("help", cmd_help, help_text="Show this menu.", aliases=["h", "?"])
