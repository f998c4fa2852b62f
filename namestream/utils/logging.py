# -*- coding: utf-8 -*-
"""
SimpleLogger — tiny logging facade for namestream.

Goal:
- One import for every module: SimpleLogger.info/debug/warning/error.
- Print one line per message to stdout, so uvicorn and streamlit logs show it
  next to their own output.
- A level threshold (NAMESTREAM_LOG_LEVEL) keeps debug prompts out of normal runs.
  The import-time value only covers the real environment; AppController
  re-applies the level from AppConfig once .env has been loaded.
"""

from __future__ import annotations
import os
import sys
import datetime
from typing import ClassVar, Dict

_LEVELS: Dict[str, int] = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


class SimpleLogger:
    """
    Very small logging helper.

    Usage:
        SimpleLogger.info("message")
        SimpleLogger.debug("details")
    """

    _enabled: ClassVar[bool] = True
    _prefix: ClassVar[str] = "namestream"
    _threshold: ClassVar[int] = _LEVELS.get(
        os.getenv("NAMESTREAM_LOG_LEVEL", "INFO").upper().replace("WARNING", "WARN"),
        _LEVELS["INFO"],
    )

    @classmethod
    def _log(cls, level: str, msg: str) -> None:
        if not cls._enabled or _LEVELS[level] < cls._threshold:
            return
        now = datetime.datetime.now().strftime("%H:%M:%S")
        line = f"{cls._prefix} | {level:5s} | {now} | {msg}"
        print(line, file=sys.stdout, flush=True)

    @classmethod
    def debug(cls, msg: str) -> None:
        cls._log("DEBUG", msg)

    @classmethod
    def info(cls, msg: str) -> None:
        cls._log("INFO", msg)

    @classmethod
    def warning(cls, msg: str) -> None:
        cls._log("WARN", msg)

    @classmethod
    def error(cls, msg: str) -> None:
        cls._log("ERROR", msg)

    @classmethod
    def set_enabled(cls, enabled: bool) -> None:
        cls._enabled = enabled

    @classmethod
    def set_prefix(cls, prefix: str) -> None:
        cls._prefix = prefix

    @classmethod
    def set_level(cls, level: str) -> None:
        """Set the minimum level that is printed ("DEBUG", "INFO", "WARN", "ERROR")."""
        key = level.upper().replace("WARNING", "WARN")
        if key not in _LEVELS:
            raise ValueError(f"SimpleLogger: unknown level {level!r}")
        cls._threshold = _LEVELS[key]
