import pytest

from jitcli.colors import colorize_ticket
from jitcli.enhanced import render_enhanced_tree
from jitcli.ticket import Ticket, sample_tickets
from jitcli.tree import sort_tickets


@pytest.fixture(autouse=True)
def _plain(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")


def _sorted_samples():
    tickets = sample_tickets()
    sort_tickets(tickets)
    return tickets


def _by_key(tickets, key):
    return next(t for t in tickets if t.key == key)


def test_header_and_first_epic():
    tickets = _sorted_samples()
    lines = render_enhanced_tree(tickets, "PROJ-100", "PROJ-101", "PROJ-103", False).splitlines()
    assert lines[0] == "Enhanced Ticket Tree:"
    assert lines[1] == ""
    assert lines[2] == colorize_ticket(_by_key(tickets, "PROJ-100"), True, False)


def test_task_and_subtask_indentation():
    tickets = _sorted_samples()
    lines = render_enhanced_tree(tickets, "PROJ-100", "PROJ-101", "PROJ-103", False).splitlines()
    assert "   " + colorize_ticket(_by_key(tickets, "PROJ-101"), True, False) in lines
    assert "      " + colorize_ticket(_by_key(tickets, "PROJ-102"), False, False) in lines
    assert "      " + colorize_ticket(_by_key(tickets, "PROJ-103"), True, False) in lines


def test_every_focused_level_is_marked():
    tickets = _sorted_samples()
    out = render_enhanced_tree(tickets, "PROJ-100", "PROJ-101", "PROJ-103", False)
    marked = [line for line in out.splitlines() if line.lstrip().startswith("@")]
    assert len(marked) == 3


def test_orphans_hidden_unless_requested():
    tickets = _sorted_samples()
    hidden = render_enhanced_tree(tickets, "", "", "", False)
    shown = render_enhanced_tree(tickets, "", "", "", True)
    assert "== ORPHAN TASKS ==" not in hidden
    assert "== ORPHAN TASKS ==" in shown
    assert colorize_ticket(_by_key(tickets, "PROJ-302"), False, True) in shown.splitlines()
    assert "   " + colorize_ticket(_by_key(tickets, "PROJ-301"), False, True) in shown.splitlines()


def test_focus_summary():
    out = render_enhanced_tree(_sorted_samples(), "PROJ-100", "PROJ-101", "PROJ-103", False)
    lines = out.splitlines()
    index = lines.index("Current Focus:")
    assert lines[index + 1:] == ["  Epic: PROJ-100", "  Task: PROJ-101", "  Subtask: PROJ-103"]


def test_no_focus_summary_without_focus():
    out = render_enhanced_tree(_sorted_samples(), "", "", "", True)
    assert "Current Focus:" not in out
    assert "@" not in out


def test_only_partial_focus_listed():
    out = render_enhanced_tree(_sorted_samples(), "", "PROJ-201", "", False)
    lines = out.splitlines()
    assert lines[-2:] == ["Current Focus:", "  Task: PROJ-201"]


def test_empty_tickets():
    out = render_enhanced_tree([], "", "", "", True)
    assert out == "Enhanced Ticket Tree:\n\n"


def test_each_epic_followed_by_blank_line():
    tickets = [
        Ticket("A-1", "epic", "One", "To Do"),
        Ticket("A-2", "epic", "Two", "Done"),
    ]
    lines = render_enhanced_tree(tickets, "", "", "", False).splitlines()
    assert lines[2:] == [
        colorize_ticket(tickets[0], False, False),
        "",
        colorize_ticket(tickets[1], False, False),
        "",
    ]