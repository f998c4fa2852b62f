# -*- coding: utf-8 -*-
"""
field_normalizer
================

Why this helper exists:
- The model decides which keys it returns; the UI needs a fixed shape.
- Turning a loosely-typed dict into NameResult, field by field, with
  defaults, should not sit inside the agent.

What it does:
- `normalize_text()` coerces one raw value to a string or a default.
- `project_result()` builds NameResult from a parsed dict.
- `normalize()` is the full pipeline: raw text -> dict -> NameResult.

Legacy keys from the original Japanese-only reply are accepted when the
canonical key is missing (japanese_translation, kanji, romaji, hiragana).
Extra keys are dropped.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Sequence

from namestream.orchestration.agent_prompt_helpers.json_parser import extract_json_object
from namestream.orchestration.name_result import FinalName, NameResult
from namestream.utils.logging import SimpleLogger

UNKNOWN_MEANING = "Unknown"

RESULT_ALIASES: Dict[str, Sequence[str]] = {
    "original_name": ("original_name",),
    "name_meaning": ("name_meaning",),
    "cultural_translation": ("cultural_translation", "japanese_translation"),
}

FINAL_NAME_ALIASES: Dict[str, Sequence[str]] = {
    "native_script": ("native_script", "kanji"),
    "romanized": ("romanized", "romaji"),
    "pronunciation": ("pronunciation", "hiragana"),
    "meaning_in_english": ("meaning_in_english",),
}


def normalize_text(raw_value: Any, default_value: str = "") -> str:
    """
    Rules:
    - str -> unchanged (blank -> default_value)
    - int / float / bool -> str(value)
    - None, list, dict, anything else -> default_value
    """
    if isinstance(raw_value, str):
        return raw_value if raw_value.strip() else default_value
    if isinstance(raw_value, bool):
        return "true" if raw_value else "false"
    if isinstance(raw_value, (int, float)):
        return str(raw_value)
    return default_value


def _pick(obj: Mapping[str, Any], keys: Sequence[str], default_value: str) -> str:
    for key in keys:
        value = normalize_text(obj.get(key), "")
        if value:
            return value
    return default_value


def project_result(obj: Mapping[str, Any], fallback_name: str) -> NameResult:
    """Project a parsed model dict into NameResult, substituting defaults."""
    final_raw = obj.get("final_name")
    if not isinstance(final_raw, Mapping):
        if final_raw is not None:
            SimpleLogger.warning(
                f"field_normalizer.project_result: final_name is {type(final_raw).__name__}, ignoring"
            )
        final_raw = {}

    final_name = FinalName(
        **{
            field_id: _pick(final_raw, keys, "")
            for field_id, keys in FINAL_NAME_ALIASES.items()
        }
    )

    return NameResult(
        original_name=_pick(obj, RESULT_ALIASES["original_name"], fallback_name),
        name_meaning=_pick(obj, RESULT_ALIASES["name_meaning"], UNKNOWN_MEANING),
        cultural_translation=_pick(obj, RESULT_ALIASES["cultural_translation"], ""),
        final_name=final_name,
    )


def normalize(raw_text: Any, fallback_name: str) -> NameResult:
    """
    Raw model text -> NameResult.

    Raises InvalidResponse only when the text is not recoverable as a JSON
    object; missing fields never fail.
    """
    obj = extract_json_object(raw_text)
    return project_result(obj, fallback_name=(fallback_name or "").strip())
