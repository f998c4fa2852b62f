# -*- coding: utf-8 -*-
"""
HTTP API for the name converter.

Run locally, e.g.:
  uvicorn namestream.app.api:app --port 8000

Endpoints:
  POST /convert-name                      {name, culture} -> NameResult
  POST /.netlify/functions/convert-name   same handler, kept for the old front end
  GET  /cultures                          catalog entries for the UI selector
  GET  /health
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, Optional

from fastapi import Body, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from namestream.app.controller import AppController
from namestream.orchestration.errors import BadRequest, InvalidResponse, NameStreamError
from namestream.utils.logging import SimpleLogger

app = FastAPI(title="namestream", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_controller() -> AppController:
    return AppController()


@app.exception_handler(NameStreamError)
def _handle_namestream_error(request: Request, exc: NameStreamError) -> JSONResponse:
    if exc.status_code >= 500:
        raw = exc.raw_text if isinstance(exc, InvalidResponse) else None
        SimpleLogger.error(
            f"{request.method} {request.url.path} failed: {type(exc).__name__}: {exc}"
            + (f"; raw={raw!r}" if raw is not None else "")
        )
    else:
        SimpleLogger.info(f"{request.method} {request.url.path} rejected: {exc}")

    body: Dict[str, Any] = {"error": exc.public_message}
    if exc.status_code >= 500:
        body["details"] = str(exc)
    return JSONResponse(status_code=exc.status_code, content=body)


@app.exception_handler(Exception)
def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    SimpleLogger.error(
        f"{request.method} {request.url.path} failed unexpectedly: {type(exc).__name__}: {exc!r}"
    )
    return JSONResponse(
        status_code=500,
        content={"error": NameStreamError.public_message, "details": str(exc)},
    )


@app.exception_handler(RequestValidationError)
def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    SimpleLogger.info(f"{request.method} {request.url.path} rejected: invalid body")
    return JSONResponse(status_code=400, content={"error": "Request body must be a JSON object"})


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/cultures")
def cultures(controller: AppController = Depends(get_controller)) -> dict:
    return {
        "cultures": [
            {"tag": tag, "label": label} for tag, label in controller.catalog.options()
        ]
    }


@app.post("/convert-name")
@app.post("/.netlify/functions/convert-name")
def convert_name(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    controller: AppController = Depends(get_controller),
) -> JSONResponse:
    if payload is None:
        raise BadRequest("Request body must be a JSON object")

    name = payload.get("name")
    if not isinstance(name, str) or not name.strip():
        raise BadRequest("Name is required")

    culture = payload.get("culture")
    if not isinstance(culture, str) or not culture.strip():
        raise BadRequest("Culture is required")

    result = controller.convert_name(name, culture)
    return JSONResponse(status_code=200, content=result.to_dict())
