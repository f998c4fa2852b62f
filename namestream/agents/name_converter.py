# -*- coding: utf-8 -*-
"""
NameConverter agent.

Job:
- Take (name, culture) from the caller.
- Ask PromptBuilder for the conversion prompt.
- Call LLMClient once (no retries).
- Normalize the raw reply into NameResult (original_name falls back to the
  trimmed input name).
"""

from __future__ import annotations

from namestream.orchestration.agent_prompt_helpers.field_normalizer import normalize
from namestream.orchestration.errors import InvalidResponse
from namestream.orchestration.llm_client import LLMClient
from namestream.orchestration.name_result import NameResult
from namestream.orchestration.prompt_builder import PromptBuilder
from namestream.utils.logging import SimpleLogger


class NameConverter:
    """
    Orchestrates one conversion request.

    This class stays thin:
    - It does NOT know the prompt template (PromptBuilder does that).
    - It does NOT know how to repair JSON (field_normalizer / json_parser do that).
    - It holds no per-request state, so one instance serves concurrent requests.
    """

    def __init__(self, prompt_builder: PromptBuilder, llm_client: LLMClient) -> None:
        self._prompt_builder = prompt_builder
        self._llm_client = llm_client

    def run(self, name: str, culture: str) -> NameResult:
        prompt = self._prompt_builder.build(name, culture)
        SimpleLogger.debug(f"NameConverter → LLM prompt:\n{prompt}")

        raw_result = self._llm_client.complete(prompt)
        SimpleLogger.info(f"NameConverter ← LLM raw result: {raw_result!r}")

        try:
            return normalize(raw_result, fallback_name=name)
        except InvalidResponse as exc:
            SimpleLogger.error(
                f"NameConverter: unusable model reply for name={name.strip()!r} "
                f"culture={culture!r}: {exc}; raw={exc.raw_text!r}"
            )
            raise
