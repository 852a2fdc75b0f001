# src/task_tracker/tasks/exporter.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from .codecs import format_priority, format_status
from .errors import SnapshotExportError
from .task_models import Task
from .task_store import TaskStore

logger = logging.getLogger(__name__)


def task_record(task: Task) -> dict[str, str]:
    return {
        "title": task.title,
        "category": task.category,
        "dueDate": task.due_date,
        "priority": format_priority(task.priority),
        "status": format_status(task.status),
    }


def snapshot_document(tasks: Iterable[Task]) -> dict[str, Any]:
    """Build the snapshot object: {"tasks": [record, ...]} in store order."""
    return {"tasks": [task_record(t) for t in tasks]}


def export_snapshot(store: TaskStore, path: str | Path) -> Path:
    """
    Write the store contents to `path` as JSON.

    The document is written to a sibling .tmp file and moved into place with
    os.replace, so readers see either the previous snapshot or the new one.
    """
    path = Path(path)
    if not path.name:
        raise SnapshotExportError(f"Could not write snapshot to {path}: not a file path")
    doc = snapshot_document(store.list_tasks())
    tmp = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(json.dumps(doc, ensure_ascii=False, indent=2) + "\n", "utf-8")
        os.replace(tmp, path)
    except OSError as e:
        with contextlib.suppress(OSError):
            tmp.unlink()
        logger.exception("Failed to export snapshot to %s", path)
        raise SnapshotExportError(f"Could not write snapshot to {path}: {e}") from e

    logger.info("Exported snapshot: %d tasks to %s", len(doc["tasks"]), path)
    return path
