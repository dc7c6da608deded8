"""Terminal colour scheme for ticket listings."""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass

from jitcli.ticket import Ticket

_RESET = "\x1b[0m"


def _color_enabled() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    for name in ("FORCE_COLOR", "CLICOLOR_FORCE"):
        value = os.environ.get(name)
        if value and value != "0":
            return True
    stream = sys.stdout
    return bool(getattr(stream, "isatty", None) and stream.isatty())


@dataclass(frozen=True)
class Style:
    """A foreground colour, optionally bold."""

    foreground: str
    bold: bool = False

    def render(self, text: str) -> str:
        """Return text wrapped in colour codes when the terminal supports them."""
        if not _color_enabled():
            return text
        hexcode = self.foreground.lstrip("#")
        red, green, blue = (int(hexcode[i:i + 2], 16) for i in (0, 2, 4))
        codes = ["1"] if self.bold else []
        codes.append(f"38;2;{red};{green};{blue}")
        return f"\x1b[{';'.join(codes)}m{text}{_RESET}"


EPIC_COLOR = Style("#8B5CF6")
TASK_COLOR = Style("#3B82F6")
SUBTASK_COLOR = Style("#60A5FA")
FOCUS_COLOR = Style("#F97316")
HEADER_COLOR = Style("#6B7280", bold=True)

STATUS_DONE = Style("#10B981")
STATUS_IN_PROGRESS = Style("#F59E0B")
STATUS_BLOCKED = Style("#EF4444")
STATUS_TODO = Style("#6B7280")

TREE_COLOR = Style("#6B7280")

_STATUS_STYLES = {
    "done": STATUS_DONE,
    "completed": STATUS_DONE,
    "closed": STATUS_DONE,
    "in progress": STATUS_IN_PROGRESS,
    "in-progress": STATUS_IN_PROGRESS,
    "progress": STATUS_IN_PROGRESS,
    "blocked": STATUS_BLOCKED,
    "block": STATUS_BLOCKED,
}

_TYPE_STYLES = {
    "epic": EPIC_COLOR,
    "task": TASK_COLOR,
    "subtask": SUBTASK_COLOR,
}

_WORD_START = re.compile(r"(?<!\w)(\w)")


def _title(word: str) -> str:
    return _WORD_START.sub(lambda m: m.group(1).upper(), word)


def get_status_color(status: str) -> Style:
    """Return the style for a ticket status, case-insensitively."""
    return _STATUS_STYLES.get(status.lower(), STATUS_TODO)


def get_ticket_type_color(ticket_type: str) -> Style:
    """Return the style for a ticket type; unknown types use the task colour."""
    return _TYPE_STYLES.get(ticket_type, TASK_COLOR)


def colorize_ticket(ticket: Ticket, is_focused: bool, show_orphan: bool) -> str:
    """Format a ticket as one coloured line."""
    parts = [
        FOCUS_COLOR.render("@") if is_focused else " ",
        get_ticket_type_color(ticket.type).render(_title(ticket.type)),
        f"[{ticket.key}]",
        get_status_color(ticket.status).render(f"<{ticket.status}>"),
        "-",
        ticket.title,
    ]
    return " ".join(parts)


def colorize_header(header: str) -> str:
    """Format a section header."""
    return HEADER_COLOR.render(header)


def colorize_tree_line(prefix: str, connector: str, is_last: bool) -> str:
    """Format a tree branch after the given indentation."""
    return TREE_COLOR.render(prefix + ("└─" if is_last else "├─"))