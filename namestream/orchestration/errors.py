# -*- coding: utf-8 -*-
"""
Error types shared by the orchestration layer and the HTTP API.

Each error knows the HTTP status it maps to and the short message that is
safe to show to the caller. The API layer renders all of them the same way:
    {"error": public_message, "details": str(exc)}
"""

from __future__ import annotations

from typing import Optional


class NameStreamError(Exception):
    """Base class for all namestream failures."""

    status_code: int = 500
    public_message: str = "Failed to process request"


class BadRequest(NameStreamError):
    """A required input field is missing or empty."""

    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.public_message = message


class ConfigurationError(NameStreamError):
    """The API credential (or another required setting) is not configured."""

    public_message = "Service is not configured"


class UpstreamError(NameStreamError):
    """The completion call itself failed (network, auth, rate limit, upstream 5xx)."""

    public_message = "Failed to process request"


class InvalidResponse(NameStreamError):
    """The model reply is not recoverable as a JSON object."""

    public_message = "Model returned an invalid response"

    def __init__(self, message: str, raw_text: Optional[str] = None) -> None:
        super().__init__(message)
        self.raw_text = raw_text
