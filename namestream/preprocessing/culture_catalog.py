# namestream/preprocessing/culture_catalog.py
# Purpose: Load the culture catalog JSON once and resolve caller culture tags.
# Methods used, in order:
#   1) exact canonical tag
#   2) alias
# Unknown tags are NOT rejected: the prompt passes them through and the model free-forms.

from __future__ import annotations
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import json
import unicodedata
import re

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parents[1] / "config" / "cultures.json"


class CultureCatalog:
    def __init__(self, json_path: Optional[str] = None) -> None:
        self.json_path = str(json_path or DEFAULT_CATALOG_PATH)
        self.labels: Dict[str, str] = {}
        self.guidelines: Dict[str, List[str]] = {}
        self.aliases: Dict[str, str] = {}

        self._load()

    def _load(self) -> None:
        with open(self.json_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        for entry in data.get("cultures", []) or []:
            tag = self.normalize_key(entry.get("tag", ""))
            if not tag:
                continue
            self.labels[tag] = entry.get("label") or tag.title()
            self.guidelines[tag] = [str(g) for g in entry.get("guidelines", []) or []]

        self.aliases = {
            self.normalize_key(k): self.normalize_key(v)
            for k, v in (data.get("aliases", {}) or {}).items()
        }

    # lowercase, NFKC, trim, collapse inner spaces, drop punctuation
    def normalize_key(self, s: str) -> str:
        if not isinstance(s, str):
            return ""
        s = unicodedata.normalize("NFKC", s).lower().strip()
        s = re.sub(r"\s+", " ", s)
        s = re.sub(r"[^\w\s]+", "", s)
        return s

    def resolve(self, raw_tag: str) -> Tuple[Optional[str], str]:
        """
        Returns (canonical_tag | None, method)
        method ∈ {"canonical","alias","unknown"}
        """
        nk = self.normalize_key(raw_tag)
        if nk in self.labels:
            return (nk, "canonical")
        if nk in self.aliases and self.aliases[nk] in self.labels:
            return (self.aliases[nk], "alias")
        return (None, "unknown")

    def is_known(self, raw_tag: str) -> bool:
        return self.resolve(raw_tag)[0] is not None

    def guidelines_for(self, raw_tag: str) -> List[str]:
        tag, _method = self.resolve(raw_tag)
        if tag is None:
            return []
        return list(self.guidelines.get(tag, []))

    def label_for(self, raw_tag: str) -> str:
        tag, _method = self.resolve(raw_tag)
        if tag is None:
            return raw_tag
        return self.labels[tag]

    def options(self) -> List[Tuple[str, str]]:
        """(tag, label) pairs in catalog order, for selectors."""
        return list(self.labels.items())
