# -*- coding: utf-8 -*-
"""
NameResult — the fixed output shape returned to the UI.

Every field is always present. Construction from untrusted model JSON goes
through field_normalizer.project_result(), never through NameResult(**data).
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class FinalName:
    native_script: str = ""
    romanized: str = ""
    pronunciation: str = ""
    meaning_in_english: str = ""


@dataclass(frozen=True)
class NameResult:
    original_name: str = ""
    name_meaning: str = "Unknown"
    cultural_translation: str = ""
    final_name: FinalName = field(default_factory=FinalName)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        # json.dumps escapes quotes and control characters inside values
        return json.dumps(self.to_dict(), ensure_ascii=False)
