"""
PromptBuilder
=============
Composes the conversion prompt in a fixed order:
[Task: four steps] → [Culture guidelines, if the tag is known] → [JSON shape + JSON-only rule]
The caller's name and culture are interpolated verbatim (name trimmed).
"""
from __future__ import annotations

from typing import List, Optional

from namestream.orchestration.agent_prompt_helpers.compose_texts import (
    build_guidelines_text,
    build_output_text,
    build_task_text,
)
from namestream.orchestration.errors import BadRequest
from namestream.preprocessing.culture_catalog import CultureCatalog
from namestream.utils.logging import SimpleLogger


class PromptBuilder:
    def __init__(self, catalog: Optional[CultureCatalog] = None) -> None:
        self.catalog = catalog

    def build(self, name: str, culture: str) -> str:
        name = (name or "").strip()
        if not name:
            raise BadRequest("Name is required")
        if culture is None or not str(culture).strip():
            raise BadRequest("Culture is required")
        culture = str(culture)

        guidelines: List[str] = []
        if self.catalog is not None:
            guidelines = self.catalog.guidelines_for(culture)
            if not guidelines:
                SimpleLogger.debug(f"PromptBuilder: no guidelines for culture {culture!r}, passing through")

        blocks = [build_task_text(name, culture)]
        guidelines_text = build_guidelines_text(culture, guidelines)
        if guidelines_text:
            blocks.append(guidelines_text)
        blocks.append(build_output_text())

        return "\n\n".join(blocks)
