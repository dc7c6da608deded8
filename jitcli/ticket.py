"""Ticket model shared by the tree views, colouring and AI enrichment."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TicketType(str, Enum):
    """The three levels of the ticket hierarchy."""

    EPIC = "epic"
    TASK = "task"
    SUBTASK = "subtask"


@dataclass
class Ticket:
    """A tracked ticket as the command line sees it."""

    key: str = ""
    type: str = ""
    title: str = ""
    status: str = ""
    description: str = ""
    parent_key: str = ""
    ai_enhanced: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.type, TicketType):
            self.type = self.type.value


def sample_tickets() -> list[Ticket]:
    """Return the demonstration tickets shown by the log views."""
    epic, task, subtask = TicketType.EPIC, TicketType.TASK, TicketType.SUBTASK
    return [
        Ticket("PROJ-100", epic, "User Authentication", "In Progress",
               "Modernize our authentication system"),
        Ticket("PROJ-101", task, "OAuth Implementation", "To Do",
               "Implement OAuth 2.0 providers", parent_key="PROJ-100"),
        Ticket("PROJ-102", subtask, "Google OAuth", "Done",
               "Integrate Google OAuth provider", parent_key="PROJ-101"),
        Ticket("PROJ-103", subtask, "GitHub OAuth", "In Progress",
               "Integrate GitHub OAuth provider", parent_key="PROJ-101"),
        Ticket("PROJ-104", task, "MFA Setup", "Blocked",
               "Implement multi-factor authentication", parent_key="PROJ-100"),
        Ticket("PROJ-105", subtask, "TOTP Implementation", "To Do",
               "Implement TOTP-based MFA", parent_key="PROJ-104"),
        Ticket("PROJ-200", epic, "Database Migration", "Done",
               "Migrate to new database schema"),
        Ticket("PROJ-201", task, "Schema Updates", "In Progress",
               "Update database schema", parent_key="PROJ-200"),
        Ticket("PROJ-300", task, "Standalone Feature", "To Do",
               "A task without a parent epic"),
        Ticket("PROJ-301", subtask, "Implementation Details", "In Progress",
               "Details for standalone feature", parent_key="PROJ-300"),
        Ticket("PROJ-302", task, "Another Orphan Task", "Done",
               "Another task without parent"),
    ]