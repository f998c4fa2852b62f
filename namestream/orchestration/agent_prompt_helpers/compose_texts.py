# -*- coding: utf-8 -*-
"""
compose_texts
=============

Why this helper exists:
- The conversion prompt is text-heavy and would clutter PromptBuilder.
- We want PromptBuilder to read like a high-level story, and all text
  formatting to live here.

What it does:
- `build_task_text(name, culture)`: the fixed four-step instruction.
- `build_guidelines_text(culture, guidelines)`: optional per-culture block.
- `build_output_text()`: target JSON shape plus the "JSON only" instruction.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List

RESULT_SHAPE: Dict[str, Any] = {
    "original_name": "input name",
    "name_meaning": "meaning of the original name",
    "cultural_translation": "the meaning translated into the target culture",
    "final_name": {
        "native_script": "the new name in the culture's native script",
        "romanized": "the new name in Latin letters",
        "pronunciation": "how to pronounce the new name",
        "meaning_in_english": "meaning of the new name in English",
    },
}

JSON_ONLY_INSTRUCTION = (
    "Return ONLY the JSON object. No explanations, no prose, no markdown, no code fences."
)


def build_task_text(name: str, culture: str) -> str:
    lines: List[str] = [
        f'Given this name: "{name}", create a {culture} version following these steps:',
        "1. Determine the meaning of the original name",
        f"2. Translate the meaning into {culture}",
        f"3. Create a new {culture} name that captures the essence",
        "4. Provide the name in native script, romanized form and pronunciation",
    ]
    return "\n".join(lines)


def build_guidelines_text(culture: str, guidelines: List[str]) -> str:
    """
    Build the per-culture formatting block. Empty string if there are no guidelines.
    """
    if not guidelines:
        return ""
    lines: List[str] = [f"Formatting guidelines for {culture}:"]
    for item in guidelines:
        lines.append(f"- {item}")
    return "\n".join(lines)


def build_output_text() -> str:
    lines: List[str] = [
        "Return a JSON object in exactly this format:",
        json.dumps(RESULT_SHAPE, ensure_ascii=False, indent=2),
        "",
        JSON_ONLY_INSTRUCTION,
    ]
    return "\n".join(lines)
