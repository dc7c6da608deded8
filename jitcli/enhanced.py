"""Indented ticket tree in which every focused level is marked."""

from __future__ import annotations

from collections.abc import Iterable

from jitcli.colors import colorize_header, colorize_ticket
from jitcli.ticket import Ticket, TicketType
from jitcli.tree import (
    filter_orphan_tasks,
    filter_subtasks_by_parent,
    filter_tasks_by_parent,
    filter_tickets_by_type,
)

_INDENT = "   "


def render_enhanced_tree(
    tickets: Iterable[Ticket],
    current_epic: str,
    current_task: str,
    current_subtask: str,
    show_orphans: bool,
) -> str:
    """Render the ticket tree with indentation and a focus summary.

    Unlike the plain tree, every level that matches its focus key is marked.
    """
    tickets = list(tickets)
    epics = filter_tickets_by_type(tickets, TicketType.EPIC.value)
    tasks = filter_tickets_by_type(tickets, TicketType.TASK.value)
    subtasks = filter_tickets_by_type(tickets, TicketType.SUBTASK.value)

    lines: list[str] = ["Enhanced Ticket Tree:", ""]

    for epic in epics:
        lines.append(colorize_ticket(epic, epic.key == current_epic, False))
        for task in filter_tasks_by_parent(tasks, epic.key):
            lines.append(_INDENT + colorize_ticket(task, task.key == current_task, False))
            for subtask in filter_subtasks_by_parent(subtasks, task.key):
                focused = subtask.key == current_subtask
                lines.append(_INDENT * 2 + colorize_ticket(subtask, focused, False))
        lines.append("")

    orphans = filter_orphan_tasks(tasks)
    if orphans and show_orphans:
        lines.extend([colorize_header("== ORPHAN TASKS =="), ""])
        for task in orphans:
            lines.append(colorize_ticket(task, task.key == current_task, True))
            for subtask in filter_subtasks_by_parent(subtasks, task.key):
                focused = subtask.key == current_subtask
                lines.append(_INDENT + colorize_ticket(subtask, focused, True))
        lines.append("")

    if current_epic or current_task or current_subtask:
        lines.append(colorize_header("Current Focus:"))
        if current_epic:
            lines.append(f"  Epic: {current_epic}")
        if current_task:
            lines.append(f"  Task: {current_task}")
        if current_subtask:
            lines.append(f"  Subtask: {current_subtask}")

    return "".join(line + "\n" for line in lines)