"""Filtering, ordering and rendering of the ticket hierarchy."""

from __future__ import annotations

from collections.abc import Iterable

from jitcli.colors import colorize_ticket
from jitcli.ticket import Ticket, TicketType

_TYPE_ORDER = {
    TicketType.EPIC.value: 1,
    TicketType.TASK.value: 2,
    TicketType.SUBTASK.value: 3,
}

# Connector drawn before a child, keyed by whether it is the last sibling.
_CONNECTOR = {True: "╰─── ", False: "├─── "}


def filter_tickets_by_status(tickets: Iterable[Ticket], status: str) -> list[Ticket]:
    """Return tickets whose status matches, ignoring case."""
    wanted = status.casefold()
    return [t for t in tickets if t.status.casefold() == wanted]


def sort_tickets(tickets: list[Ticket]) -> None:
    """Sort in place: epics, then tasks, then subtasks, each by key."""
    tickets.sort(key=lambda t: (_TYPE_ORDER.get(t.type, 0), t.key))


def filter_tickets_by_type(tickets: Iterable[Ticket], ticket_type: str) -> list[Ticket]:
    """Return tickets of the given type."""
    return [t for t in tickets if t.type == ticket_type]


def filter_tasks_by_parent(tasks: Iterable[Ticket], parent_key: str) -> list[Ticket]:
    """Return tasks under the given epic."""
    return [t for t in tasks if t.parent_key == parent_key]


def filter_subtasks_by_parent(subtasks: Iterable[Ticket], parent_key: str) -> list[Ticket]:
    """Return subtasks under the given task."""
    return [t for t in subtasks if t.parent_key == parent_key]


def filter_orphan_tasks(tasks: Iterable[Ticket]) -> list[Ticket]:
    """Return tasks that have no parent."""
    return [t for t in tasks if not t.parent_key]


def has_task_with_parent(tasks: Iterable[Ticket], epic_key: str, task_key: str) -> bool:
    """Tell whether the task with task_key sits under epic_key."""
    return any(t.parent_key == epic_key and t.key == task_key for t in tasks)


def has_subtask_with_parent(
    subtasks: Iterable[Ticket], task_key: str, subtask_key: str
) -> bool:
    """Tell whether the subtask with subtask_key sits under task_key."""
    return any(t.parent_key == task_key and t.key == subtask_key for t in subtasks)


def format_ticket_text(ticket: Ticket, is_focused: bool) -> str:
    """Format one ticket line with colours and the focus marker."""
    return colorize_ticket(ticket, is_focused, False)


def render_tree(
    tickets: Iterable[Ticket],
    current_epic: str,
    current_task: str,
    current_subtask: str,
    show_orphans: bool,
) -> str:
    """Render the epic/task/subtask tree; only the most specific focus is marked."""
    if current_subtask:
        focus, focus_type = current_subtask, TicketType.SUBTASK.value
    elif current_task:
        focus, focus_type = current_task, TicketType.TASK.value
    elif current_epic:
        focus, focus_type = current_epic, TicketType.EPIC.value
    else:
        focus, focus_type = "", ""

    def text(ticket: Ticket) -> str:
        return format_ticket_text(ticket, ticket.type == focus_type and ticket.key == focus)

    tickets = list(tickets)
    epics = filter_tickets_by_type(tickets, TicketType.EPIC.value)
    tasks = filter_tickets_by_type(tickets, TicketType.TASK.value)
    subtasks = filter_tickets_by_type(tickets, TicketType.SUBTASK.value)

    lines: list[str] = []
    for epic_index, epic in enumerate(epics):
        lines.append(text(epic))
        epic_tasks = filter_tasks_by_parent(tasks, epic.key)
        for task_index, task in enumerate(epic_tasks):
            last_task = task_index == len(epic_tasks) - 1
            lines.append("   " + _CONNECTOR[last_task] + text(task))
            indent = "       " if last_task else "   │   "
            task_subtasks = filter_subtasks_by_parent(subtasks, task.key)
            for sub_index, subtask in enumerate(task_subtasks):
                last_sub = sub_index == len(task_subtasks) - 1
                lines.append(indent + _CONNECTOR[last_sub] + text(subtask))
        if epic_index < len(epics) - 1:
            lines.append("")

    orphans = filter_orphan_tasks(tasks)
    if orphans and show_orphans:
        lines.extend(["", "== ORPHAN TASKS ==", ""])
        for index, task in enumerate(orphans):
            task_subtasks = filter_subtasks_by_parent(subtasks, task.key)
            if task_subtasks:
                lines.append("   ├─── " + text(task))
                for sub_index, subtask in enumerate(task_subtasks):
                    last_sub = sub_index == len(task_subtasks) - 1
                    lines.append("   │   " + _CONNECTOR[last_sub] + text(subtask))
            else:
                lines.append("   " + _CONNECTOR[index == len(orphans) - 1] + text(task))

    return "".join(line + "\n" for line in lines)


def render_json(
    tickets: Iterable[Ticket],
    current_epic: str,
    current_task: str,
    current_subtask: str,
) -> str:
    """Render the focus and tickets in the log command's JSON layout."""
    tickets = list(tickets)
    out = [
        "{\n",
        '  "current_focus": {\n',
        f'    "epic": "{current_epic}",\n',
        f'    "task": "{current_task}",\n',
        f'    "subtask": "{current_subtask}"\n',
        "  },\n",
        '  "tickets": [\n',
    ]
    for index, ticket in enumerate(tickets):
        out.append("    {\n")
        out.append(f'      "key": "{ticket.key}",\n')
        out.append(f'      "type": "{ticket.type}",\n')
        out.append(f'      "title": "{ticket.title}",\n')
        out.append(f'      "status": "{ticket.status}",\n')
        out.append(f'      "description": "{ticket.description}"')
        if ticket.parent_key:
            out.append(f',\n      "parent_key": "{ticket.parent_key}"')
        out.append("\n    },\n" if index < len(tickets) - 1 else "\n    }\n")
    out.append("  ]\n")
    out.append("}\n")
    return "".join(out)