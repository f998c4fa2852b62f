# -*- coding: utf-8 -*-
"""
agent_prompt_helpers package
============================

This package groups small, focused helper modules used by PromptBuilder and
NameConverter. Each file has a single responsibility:
- compose_texts: the text blocks of the conversion prompt.
- json_parser: fence/control-char cleanup, strict parse, one bounded repair.
- field_normalizer: projection of the parsed dict into NameResult with defaults.
"""
