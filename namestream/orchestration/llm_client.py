# namestream/orchestration/llm_client.py
# -*- coding: utf-8 -*-
"""
LLMClient — thin wrapper around an OpenAI-compatible chat-completion API.

Current implementation:
- Uses OpenAI Python client v1 (OpenAI() + client.chat.completions.create),
  pointed at config.base_url (Groq's OpenAI-compatible endpoint by default).
- Credentials, model and sampling settings come from AppConfig, resolved once.
- Exactly one attempt per call: the SDK retry loop is disabled.
- Any failure of the call is wrapped in UpstreamError; a missing key raises
  ConfigurationError before any network traffic.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional

import httpx
from openai import OpenAI, OpenAIError

from namestream.config.settings import AppConfig
from namestream.orchestration.errors import ConfigurationError, UpstreamError
from namestream.utils.logging import SimpleLogger

Message = Dict[str, str]


class LLMClient:
    """
    Neutral LLM gateway.

    You give it:
      - messages: [{"role": "user", "content": "..."}]
      - model_name, temperature, max_output_tokens

    It returns:
      - the raw text content of the first choice
    """

    def __init__(self, config: AppConfig, client: Optional[Any] = None) -> None:
        self.config = config
        self._client: Optional[Any] = client

        if self._client is not None:
            return

        if not config.has_api_key:
            SimpleLogger.warning(
                "LLMClient: no API key configured (GROQ_API_KEY / NAMESTREAM_API_KEY / "
                "NAMESTREAM_DEV_API_KEY). Any LLM call will fail until you set one."
            )
            return

        self._client = OpenAI(
            api_key=config.api_key,
            base_url=config.base_url,
            max_retries=0,
            http_client=httpx.Client(timeout=config.timeout),
        )
        SimpleLogger.info(
            f"LLMClient: client initialised (base_url={config.base_url}, "
            f"model={config.model_name}, key from {config.api_key_source})."
        )

    @property
    def is_ready(self) -> bool:
        return self._client is not None

    def chat(
            self,
            *,
            messages: List[Message],
            model_name: str,
            temperature: float,
            max_output_tokens: int,
    ) -> str:
        """
        Thin wrapper over chat.completions.create. Returns the first choice's text.
        """
        if self._client is None:
            raise ConfigurationError(
                "API key is not configured: set GROQ_API_KEY "
                "(or NAMESTREAM_API_KEY / NAMESTREAM_DEV_API_KEY for local development)"
            )

        try:
            resp = self._client.chat.completions.create(
                model=model_name,
                messages=messages,
                temperature=temperature,
                max_tokens=max_output_tokens,
            )
        except (OpenAIError, httpx.HTTPError) as exc:
            SimpleLogger.error(f"LLMClient: completion call failed: {exc!r}")
            raise UpstreamError(f"completion call failed: {exc}") from exc

        choices = getattr(resp, "choices", None) or []
        if not choices:
            raise UpstreamError("completion returned no choices")

        content = choices[0].message.content
        return content if isinstance(content, str) else str(content or "")

    def complete(self, prompt: str) -> str:
        """One user-role message, model settings from AppConfig."""
        return self.chat(
            messages=[{"role": "user", "content": prompt}],
            model_name=self.config.model_name,
            temperature=self.config.temperature,
            max_output_tokens=self.config.max_output_tokens,
        )
