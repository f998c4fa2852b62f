# -*- coding: utf-8 -*-
"""
json_parser
===========

Why this helper exists:
- LLMs often return messy strings: JSON wrapped in ```json fences, stray
  control characters, single quotes or unquoted keys.
- NameConverter should not be cluttered with low-level parsing details.

What it does:
- `clean_model_text(raw)` trims, strips Markdown fences and control characters.
- `repair_json_text(text)` is the single best-effort textual repair pass.
- `extract_json_object(raw)` runs: clean -> strict parse -> one repair -> parse.
  Anything that still does not give a JSON object raises InvalidResponse.
"""

from __future__ import annotations

import json
import re
from typing import Any, Dict

from namestream.orchestration.errors import InvalidResponse
from namestream.utils.logging import SimpleLogger

_FENCE_OPEN = re.compile(r"^```[ \t]*(?:json)?[ \t]*\r?\n?", re.IGNORECASE)
_FENCE_CLOSE = re.compile(r"\r?\n?[ \t]*```$")
# C0 controls except \t \n \r, plus DEL
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
_WHITESPACE_BREAKS = re.compile(r"[\r\n\t]+")
_UNQUOTED_KEY = re.compile(r"([{,]\s*)([A-Za-z_][A-Za-z0-9_]*)(\s*:)")
_SINGLE_QUOTED = re.compile(r"'([^'\"]*)'")


def strip_code_fences(text: str) -> str:
    """Remove a leading ``` / ```json marker and a trailing ``` marker if present."""
    stripped = text.strip()
    if not stripped.startswith("```"):
        return stripped
    stripped = _FENCE_OPEN.sub("", stripped, count=1)
    stripped = _FENCE_CLOSE.sub("", stripped, count=1)
    return stripped.strip()


def clean_model_text(raw_output: str) -> str:
    text = raw_output.strip()
    text = strip_code_fences(text)
    text = _CONTROL_CHARS.sub("", text)
    return text.strip()


def repair_json_text(text: str) -> str:
    """
    Best-effort repair, applied at most once.

    - keep only the outermost {...} if the object is surrounded by prose
    - newlines / tabs -> single space
    - 'single quoted' strings -> "double quoted", only for replies with no " at all
    - bare object keys -> quoted keys
    """
    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end > start:
        text = text[start : end + 1]

    text = _WHITESPACE_BREAKS.sub(" ", text)
    if '"' not in text:
        text = _SINGLE_QUOTED.sub(r'"\1"', text)
    text = _UNQUOTED_KEY.sub(r'\1"\2"\3', text)
    return text


def extract_json_object(raw_output: Any) -> Dict[str, Any]:
    """
    Parse the raw LLM output into a dict.

    Strategy:
    - If already a dict: return as-is.
    - Clean the text and try json.loads directly.
    - If that fails: run repair_json_text once and retry.
    - Otherwise raise InvalidResponse (raw text attached for the error log).
    """
    if isinstance(raw_output, dict):
        return raw_output

    if not isinstance(raw_output, str):
        raise InvalidResponse(
            f"model output has unexpected type {type(raw_output).__name__}",
            raw_text=repr(raw_output),
        )

    text = clean_model_text(raw_output)
    if not text:
        raise InvalidResponse("model returned empty content", raw_text=raw_output)

    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as exc:
        SimpleLogger.warning(
            f"json_parser.extract_json_object: strict parse failed ({exc}); "
            f"attempting repair. raw={raw_output!r}"
        )
        repaired = repair_json_text(text)
        try:
            parsed = json.loads(repaired)
        except json.JSONDecodeError as exc2:
            raise InvalidResponse(
                f"model output is not valid JSON after repair: {exc2}",
                raw_text=raw_output,
            ) from exc2
        SimpleLogger.info("json_parser.extract_json_object: repaired JSON parsed")

    if not isinstance(parsed, dict):
        raise InvalidResponse(
            f"model output is JSON {type(parsed).__name__}, expected an object",
            raw_text=raw_output,
        )
    return parsed
