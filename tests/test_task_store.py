# tests/test_task_store.py

from __future__ import annotations

from dataclasses import replace

from task_tracker.tasks.task_models import Priority, Status, Task
from task_tracker.tasks.task_store import TaskStore


def _titles(tasks: list[Task]) -> list[str]:
    return [t.title for t in tasks]


def test_add_then_find_index_returns_added_task(alpha: Task, beta: Task) -> None:
    store = TaskStore()
    store.add(alpha)
    store.add(beta)

    assert len(store) == 2
    idx = store.find_index("beta")
    assert idx == 1
    assert store.get(idx) == beta


def test_find_index_missing_and_case_sensitive(alpha: Task) -> None:
    store = TaskStore([alpha])
    assert store.find_index("nope") is None
    assert store.find_index("ALPHA") is None
    assert store.find("nope") is None


def test_duplicate_titles_first_match_wins(alpha: Task) -> None:
    store = TaskStore()
    store.add(alpha)
    store.add(replace(alpha, category="other"))

    assert store.find_index("alpha") == 0
    found = store.find("alpha")
    assert found is not None
    assert found.category == "work"


def test_remove_drops_all_matches_and_is_noop_when_absent(alpha: Task, beta: Task) -> None:
    store = TaskStore([alpha, beta, replace(alpha, due_date="05-05-2025")])

    assert store.remove("missing") == 0
    assert len(store) == 3

    assert store.remove("alpha") == 2
    assert store.find_index("alpha") is None
    assert _titles(store.list_tasks()) == ["beta"]


def test_store_keeps_its_own_copies(alpha: Task) -> None:
    store = TaskStore()
    store.add(alpha)
    alpha.status = Status.DONE

    got = store.get(0)
    assert got.status is Status.OPEN

    got.priority = Priority.HIGH
    assert store.get(0).priority is Priority.LOW


def test_filter_by_category_is_ordered_snapshot(store: TaskStore) -> None:
    result = store.filter_by_category("service")
    assert _titles(result) == ["finja2", "finja"]
    assert all(t.category == "service" for t in result)

    result[0].title = "changed"
    result.clear()
    assert _titles(store.filter_by_category("service")) == ["finja2", "finja"]


def test_filter_by_priority_and_status(store: TaskStore) -> None:
    assert _titles(store.filter_by_priority(Priority.HIGH)) == ["finja", "dennis files"]
    assert _titles(store.filter_by_priority(Priority.MEDIUM)) == ["finja2"]
    assert _titles(store.filter_by_status(Status.OPEN)) == ["finja", "dennis files"]
    assert store.filter_by_category("nothing") == []


def test_sort_by_title_is_lexicographic(store: TaskStore) -> None:
    store.sort_by_title()
    titles = _titles(store.list_tasks())
    assert all(titles[i] <= titles[i + 1] for i in range(len(titles) - 1))
    assert titles == ["dennis files", "finja", "finja2", "xavi"]


def test_sort_by_priority_is_ascending(store: TaskStore) -> None:
    store.sort_by_priority()
    prios = [int(t.priority) for t in store.list_tasks()]
    assert all(prios[i] <= prios[i + 1] for i in range(len(prios) - 1))
    assert prios[0] == Priority.LOW


def test_set_status_and_priority_return_previous_value(store: TaskStore) -> None:
    assert store.set_status("finja", Status.DONE) is Status.OPEN
    assert store.find("finja").status is Status.DONE  # type: ignore[union-attr]

    assert store.set_priority("xavi", Priority.HIGH) is Priority.LOW
    assert store.find("xavi").priority is Priority.HIGH  # type: ignore[union-attr]


def test_set_on_missing_title_changes_nothing(store: TaskStore) -> None:
    before = store.list_tasks()
    assert store.set_status("ghost", Status.DONE) is None
    assert store.set_priority("ghost", Priority.HIGH) is None
    assert store.list_tasks() == before


def test_categories_first_seen_order(store: TaskStore) -> None:
    assert store.categories() == ["service", "humor", "it"]
    assert TaskStore().categories() == []
