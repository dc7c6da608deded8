"""Construction of AI providers from configuration."""

from __future__ import annotations

from jitcli.ai.openai_provider import OpenAIProvider
from jitcli.ai.provider import AIConfig, AIError, MockProvider, Provider


def new_provider(config: AIConfig) -> Provider:
    """Return the provider named by config.provider, case-insensitively."""
    kind = config.provider.lower()
    if kind == "openai":
        return OpenAIProvider(config)
    if kind in ("mock", "test"):
        return MockProvider(config)
    raise AIError(f"unsupported AI provider: {config.provider}")