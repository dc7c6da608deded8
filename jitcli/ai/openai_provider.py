"""AI provider backed by the OpenAI chat completions API."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

import requests

from jitcli.ai.provider import AIConfig, AIError, EnrichmentContext, Provider
from jitcli.ai.templates import TemplateError, TemplateManager

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_MAX_TOKENS = 1000
DEFAULT_TEMPERATURE = 0.7
DEFAULT_TEMPLATE_DIR = "./templates/ai"
REQUEST_TIMEOUT = 30.0

_ENRICH_SYSTEM_PROMPT = (
    "You are an expert software development assistant. "
    "Provide clear, professional, and actionable responses."
)
_COMMENT_SYSTEM_PROMPT = (
    "You are an expert software development assistant. "
    "Provide clear, professional, and helpful comments."
)


class OpenAIProvider(Provider):
    """Enriches ticket text through the OpenAI chat completions endpoint."""

    def __init__(
        self,
        config: AIConfig,
        template_dir: Union[str, Path] = DEFAULT_TEMPLATE_DIR,
    ) -> None:
        if not config.api_key:
            raise AIError("OpenAI API key is required")
        if not config.model:
            config.model = DEFAULT_MODEL
        if config.max_tokens == 0:
            config.max_tokens = DEFAULT_MAX_TOKENS
        if config.temperature == 0:
            config.temperature = DEFAULT_TEMPERATURE
        self.config = config
        self._session = requests.Session()
        self._templates = TemplateManager(template_dir)
        try:
            self._templates.create_default_templates()
        except TemplateError as err:
            raise AIError(f"failed to create default templates: {err}") from err

    def name(self) -> str:
        return "openai"

    def enrich(self, content: str, context: EnrichmentContext) -> str:
        try:
            prompt = self._templates.get_enrichment_prompt(content, context)
        except TemplateError as err:
            raise AIError(f"failed to generate prompt: {err}") from err
        return self._complete(_ENRICH_SYSTEM_PROMPT, prompt)

    def enrich_comment(self, comment: str, context: EnrichmentContext) -> str:
        """Return an enriched version of a ticket comment."""
        try:
            prompt = self._templates.get_comment_prompt(comment, context)
        except TemplateError as err:
            raise AIError(f"failed to generate comment prompt: {err}") from err
        return self._complete(_COMMENT_SYSTEM_PROMPT, prompt)

    def _complete(self, system_prompt: str, prompt: str) -> str:
        payload: dict[str, Any] = {
            "model": self.config.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
        }
        if self.config.max_tokens:
            payload["max_tokens"] = self.config.max_tokens
        if self.config.temperature:
            payload["temperature"] = self.config.temperature

        try:
            response = self._request(payload)
        except AIError as err:
            raise AIError(f"OpenAI API request failed: {err}") from err

        choices = response.get("choices") or []
        if not choices:
            raise AIError("no response choices from OpenAI")
        message = choices[0].get("message") or {}
        return message.get("content") or ""

    def _request(self, payload: dict[str, Any]) -> dict[str, Any]:
        endpoint = (self.config.base_url or DEFAULT_BASE_URL) + "/chat/completions"
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.api_key}",
        }
        try:
            resp = self._session.post(
                endpoint, json=payload, headers=headers, timeout=REQUEST_TIMEOUT
            )
        except requests.RequestException as err:
            raise AIError(f"HTTP request failed: {err}") from err

        if resp.status_code != 200:
            status = f"{resp.status_code} {resp.reason or ''}".rstrip()
            raise AIError(f"OpenAI API error: {status} - {resp.text}")

        try:
            body = resp.json()
        except ValueError as err:
            raise AIError(f"failed to parse response: {err}") from err
        if not isinstance(body, dict):
            raise AIError("failed to parse response: expected a JSON object")

        error = body.get("error")
        if error:
            message = error.get("message", "") if isinstance(error, dict) else str(error)
            raise AIError(f"OpenAI API error: {message}")
        return body