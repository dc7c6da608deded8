"""Helpers behind the status, track, link, open and comment commands."""

from __future__ import annotations

import re
import shutil
import subprocess
import sys
from typing import Optional

from jitcli.ticket import Ticket

_TICKET_KEY = re.compile(r"[A-Z]+-[0-9]+")

_STATUS_ALIASES = {
    "todo": "To Do",
    "to-do": "To Do",
    "to do": "To Do",
    "progress": "In Progress",
    "in-progress": "In Progress",
    "in progress": "In Progress",
    "done": "Done",
    "completed": "Done",
    "complete": "Done",
    "blocked": "Blocked",
    "block": "Blocked",
}

COMMENT_SEPARATOR = "---"


class InvalidTicketKey(ValueError):
    """Raised when a ticket key is not of the form PROJECT-NUMBER."""


def normalize_status(value: str) -> str:
    """Map a user-supplied status word to its standard status name.

    Raises ValueError when the word is not a known status.
    """
    status = _STATUS_ALIASES.get(value.strip().lower())
    if status is None:
        raise ValueError("Invalid status. Use: todo, progress, done, or blocked")
    return status


def validate_ticket_key(key: str) -> str:
    """Return the key unchanged if it looks like PROJECT-NUMBER, else raise."""
    if not _TICKET_KEY.fullmatch(key):
        raise InvalidTicketKey(
            "ticket key must be in format PROJECT-NUMBER (e.g., SRE-1234)"
        )
    return key


def resolve_focus(
    current_epic: str, current_task: str, current_subtask: str
) -> Optional[str]:
    """Return the most specific focused key (subtask, task, then epic), or None."""
    return current_subtask or current_task or current_epic or None


def ticket_url(base_url: str, key: str) -> str:
    """Return the browser URL of a ticket on the given Jira instance."""
    return f"{base_url}/browse/{key}"


def _run(command: list[str], action: str, text: Optional[str] = None) -> None:
    try:
        subprocess.run(
            command,
            input=text.encode("utf-8") if text is not None else None,
            check=True,
        )
    except FileNotFoundError as err:
        raise RuntimeError(f"failed to start {action} command: {err}") from err
    except subprocess.CalledProcessError as err:
        raise RuntimeError(f"{action} command failed: {err}") from err
    except OSError as err:
        raise RuntimeError(f"failed to run {action} command: {err}") from err


def copy_to_clipboard(text: str) -> None:
    """Copy text to the system clipboard with the platform's clipboard tool."""
    platform = sys.platform
    if platform == "darwin":
        command = ["pbcopy"]
    elif platform.startswith("linux"):
        if shutil.which("xclip"):
            command = ["xclip", "-selection", "clipboard"]
        elif shutil.which("xsel"):
            command = ["xsel", "--clipboard", "--input"]
        else:
            raise RuntimeError("no clipboard tool available (install xclip or xsel)")
    elif platform == "win32":
        command = ["clip"]
    else:
        raise RuntimeError(f"unsupported platform: {platform}")
    _run(command, "clipboard", text)


def open_browser(url: str) -> None:
    """Open url in the default web browser."""
    platform = sys.platform
    if platform == "darwin":
        command = ["open", url]
    elif platform.startswith("linux"):
        if shutil.which("xdg-open"):
            command = ["xdg-open", url]
        elif shutil.which("sensible-browser"):
            command = ["sensible-browser", url]
        else:
            raise RuntimeError("no browser opener available (install xdg-utils)")
    elif platform == "win32":
        command = ["cmd", "/c", "start", url]
    else:
        raise RuntimeError(f"unsupported platform: {platform}")
    _run(command, "browser", None)


def comment_template(ticket: Ticket) -> str:
    """Return the text placed in the editor when writing a comment."""
    return (
        f"# Comment for {ticket.key}: {ticket.title}\n"
        "\n"
        "Add your comment below this line:\n"
        f"{COMMENT_SEPARATOR}\n"
        "\n"
    )


def extract_comment(content: str) -> str:
    """Return the comment text found after the separator line, trimmed."""
    found = False
    kept: list[str] = []
    for line in content.split("\n"):
        if line.strip() == COMMENT_SEPARATOR:
            found = True
            continue
        if found:
            kept.append(line)
    return "\n".join(kept).strip()