"""Ticket tree views, workflow helpers and AI enrichment for Jira-style tickets."""

__version__ = "0.0.1"