import json

import pytest

from jitcli.ticket import Ticket, sample_tickets
from jitcli.tree import (
    filter_orphan_tasks,
    filter_subtasks_by_parent,
    filter_tasks_by_parent,
    filter_tickets_by_status,
    filter_tickets_by_type,
    format_ticket_text,
    has_subtask_with_parent,
    has_task_with_parent,
    render_json,
    render_tree,
    sort_tickets,
)


@pytest.fixture(autouse=True)
def _plain_output(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("CLICOLOR_FORCE", raising=False)


@pytest.fixture
def tickets():
    items = sample_tickets()
    sort_tickets(items)
    return items


def _by_key(items):
    return {t.key: t for t in items}


def test_filter_by_status_ignores_case():
    result = filter_tickets_by_status(sample_tickets(), "in progress")
    assert {t.key for t in result} == {"PROJ-100", "PROJ-103", "PROJ-201", "PROJ-301"}
    assert all(t.status == "In Progress" for t in result)


def test_sort_orders_by_type_then_key():
    items = list(reversed(sample_tickets()))
    sort_tickets(items)
    assert [t.key for t in items] == [
        "PROJ-100", "PROJ-200",
        "PROJ-101", "PROJ-104", "PROJ-201", "PROJ-300", "PROJ-302",
        "PROJ-102", "PROJ-103", "PROJ-105", "PROJ-301",
    ]


def test_sort_puts_unknown_types_first():
    items = [Ticket("B-1", "task"), Ticket("A-1", "bug")]
    sort_tickets(items)
    assert [t.key for t in items] == ["A-1", "B-1"]


def test_type_and_parent_filters(tickets):
    tasks = filter_tickets_by_type(tickets, "task")
    subtasks = filter_tickets_by_type(tickets, "subtask")
    assert [t.key for t in filter_tasks_by_parent(tasks, "PROJ-100")] == ["PROJ-101", "PROJ-104"]
    assert [t.key for t in filter_subtasks_by_parent(subtasks, "PROJ-101")] == ["PROJ-102", "PROJ-103"]
    assert [t.key for t in filter_orphan_tasks(tasks)] == ["PROJ-300", "PROJ-302"]


def test_has_parent_checks(tickets):
    tasks = filter_tickets_by_type(tickets, "task")
    subtasks = filter_tickets_by_type(tickets, "subtask")
    assert has_task_with_parent(tasks, "PROJ-100", "PROJ-104")
    assert not has_task_with_parent(tasks, "PROJ-200", "PROJ-104")
    assert has_subtask_with_parent(subtasks, "PROJ-104", "PROJ-105")
    assert not has_subtask_with_parent(subtasks, "PROJ-101", "PROJ-105")


def test_format_ticket_text_plain():
    ticket = _by_key(sample_tickets())["PROJ-100"]
    assert format_ticket_text(ticket, False) == "  Epic [PROJ-100] <In Progress> - User Authentication"
    assert format_ticket_text(ticket, True).startswith("@ Epic [PROJ-100]")


def test_render_tree_structure(tickets):
    keyed = _by_key(tickets)
    lines = render_tree(tickets, "", "", "PROJ-103", False).splitlines()
    assert lines == [
        format_ticket_text(keyed["PROJ-100"], False),
        "   ├─── " + format_ticket_text(keyed["PROJ-101"], False),
        "   │   ├─── " + format_ticket_text(keyed["PROJ-102"], False),
        "   │   ╰─── " + format_ticket_text(keyed["PROJ-103"], True),
        "   ╰─── " + format_ticket_text(keyed["PROJ-104"], False),
        "       ╰─── " + format_ticket_text(keyed["PROJ-105"], False),
        "",
        format_ticket_text(keyed["PROJ-200"], False),
        "   ╰─── " + format_ticket_text(keyed["PROJ-201"], False),
    ]


def test_render_tree_marks_only_most_specific_focus(tickets):
    output = render_tree(tickets, "PROJ-100", "PROJ-101", "PROJ-103", True)
    focused = [line for line in output.splitlines() if "@" in line]
    assert len(focused) == 1
    assert "[PROJ-103]" in focused[0]


def test_render_tree_with_orphans(tickets):
    keyed = _by_key(tickets)
    lines = render_tree(tickets, "", "PROJ-300", "", True).splitlines()
    start = lines.index("== ORPHAN TASKS ==")
    assert lines[start - 1] == "" and lines[start + 1] == ""
    assert lines[start + 2:] == [
        "   ├─── " + format_ticket_text(keyed["PROJ-300"], True),
        "   │   ╰─── " + format_ticket_text(keyed["PROJ-301"], False),
        "   ╰─── " + format_ticket_text(keyed["PROJ-302"], False),
    ]


def test_render_tree_hides_orphans_unless_asked(tickets):
    assert "ORPHAN" not in render_tree(tickets, "", "", "", False)
    assert "PROJ-302" not in render_tree(tickets, "", "", "", False)


def test_render_json_round_trip(tickets):
    data = json.loads(render_json(tickets, "PROJ-100", "", "PROJ-103"))
    assert data["current_focus"] == {"epic": "PROJ-100", "task": "", "subtask": "PROJ-103"}
    assert [t["key"] for t in data["tickets"]] == [t.key for t in tickets]
    by_key = {t["key"]: t for t in data["tickets"]}
    assert "parent_key" not in by_key["PROJ-100"]
    assert by_key["PROJ-101"]["parent_key"] == "PROJ-100"
    assert by_key["PROJ-102"]["status"] == "Done"
    assert list(by_key["PROJ-101"]) == ["key", "type", "title", "status", "description", "parent_key"]


def test_render_json_empty():
    data = json.loads(render_json([], "", "", ""))
    assert data["tickets"] == []
    assert data["current_focus"]["epic"] == ""