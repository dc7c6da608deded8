"""AI provider interface, the mock provider and enrichment helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from jitcli.ticket import Ticket


class AIError(Exception):
    """Raised when AI enrichment cannot be carried out."""


@dataclass
class EnrichmentContext:
    """Context handed to a provider alongside the content to enrich."""

    ticket_type: str = ""
    project: str = ""
    current_epic: str = ""
    current_task: str = ""
    user_email: str = ""
    custom_fields: dict[str, Any] = field(default_factory=dict)


@dataclass
class AIConfig:
    """Settings for an AI provider."""

    provider: str = ""
    model: str = ""
    max_tokens: int = 0
    temperature: float = 0.0
    api_key: str = ""
    base_url: str = ""


class Provider(ABC):
    """An AI enrichment service."""

    @abstractmethod
    def name(self) -> str:
        """Return the provider name."""

    @abstractmethod
    def enrich(self, content: str, context: EnrichmentContext) -> str:
        """Return the enriched form of content."""


class MockProvider(Provider):
    """A provider that returns predictable text, for tests and dry runs."""

    def __init__(self, config: Optional[AIConfig] = None) -> None:
        self.config = config if config is not None else AIConfig()

    def name(self) -> str:
        return "mock"

    def enrich(self, content: str, context: EnrichmentContext) -> str:
        enriched = (
            f"[AI ENRICHED] {content}\n\n"
            f"Enhanced with AI assistance for {context.ticket_type} ticket "
            f"in project {context.project}."
        )
        if context.current_epic:
            enriched += f"\n\nRelated to epic: {context.current_epic}"
        return enriched


def enrich_ticket(
    provider: Optional[Provider], ticket: Ticket, context: EnrichmentContext
) -> None:
    """Replace the ticket's description with the provider's enrichment."""
    if provider is None:
        raise AIError("no AI provider configured")
    try:
        enriched = provider.enrich(ticket.description, context)
    except AIError as err:
        raise AIError(f"failed to enrich ticket description: {err}") from err
    ticket.description = enriched
    ticket.ai_enhanced = True


def enrich_comment(
    provider: Optional[Provider], comment: str, context: EnrichmentContext
) -> str:
    """Return the enriched comment, or the comment unchanged without a provider."""
    if provider is None:
        return comment
    try:
        return provider.enrich(comment, context)
    except AIError as err:
        raise AIError(f"failed to enrich comment: {err}") from err