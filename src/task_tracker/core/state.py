# src/task_tracker/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Store Settings on the state for easy access in command handlers.
    settings: object
    store: TaskStore

    # Held for the whole of a command, so "read store + write snapshot" is never
    # interleaved with a mutation if a second caller is ever added.
    lock: threading.RLock = field(default_factory=threading.RLock)
