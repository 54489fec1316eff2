"""HTTP boundary: validates batch requests and runs the converter."""

from __future__ import annotations

import json
import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, ValidationError

from polyglotforge import __version__
from polyglotforge.config import PolyglotForgeConfig, load_config
from polyglotforge.converter import (
    BatchConverter,
    ConversionRequest,
    ConversionResult,
    create_batch_converter,
)

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Liveness payload."""

    model_config = ConfigDict(extra="forbid")

    ok: bool


class ConversionRequestError(ValueError):
    """Raised for request bodies that must be rejected before any provider call."""


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def parse_conversion_request(raw: object) -> ConversionRequest:
    """Validate a decoded JSON body.

    The empty-batch check runs before model validation so that `{}` and
    `{"files": []}` both report "No files provided".
    """
    if not isinstance(raw, dict):
        raise ConversionRequestError("Request body must be a JSON object")
    if not raw.get("files"):
        raise ConversionRequestError("No files provided")
    try:
        return ConversionRequest.model_validate(raw)
    except ValidationError as e:
        raise ConversionRequestError(f"Invalid request: {e}") from e


def create_app(
    config: PolyglotForgeConfig | None = None,
    batch: BatchConverter | None = None,
) -> FastAPI:
    """Create the conversion HTTP application.

    The provider client is built once here and shared read-only by all
    requests. Pass `batch` to substitute the whole pipeline (tests).
    """
    config = config or load_config()
    batch = batch or create_batch_converter(config)

    app = FastAPI(
        title="PolyglotForge",
        version=__version__,
        description="Convert source files to another language with an LLM.",
    )
    app.state.batch = batch
    max_body = config.server.max_body_bytes

    # CORS is added after this, so it wraps every response including 413s.
    @app.middleware("http")
    async def limit_body_size(request: Request, call_next):
        length = request.headers.get("content-length")
        if length is not None and length.isdigit() and int(length) > max_body:
            return _error(status.HTTP_413_CONTENT_TOO_LARGE, "Request body too large")
        return await call_next(request)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/api/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(ok=True)

    @app.post("/api/convert", response_model=ConversionResult)
    async def convert(request: Request):
        try:
            raw = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return _error(status.HTTP_400_BAD_REQUEST, "Request body must be valid JSON")
        try:
            conversion = parse_conversion_request(raw)
        except ConversionRequestError as e:
            return _error(status.HTTP_400_BAD_REQUEST, str(e))

        try:
            result = await request.app.state.batch.convert(conversion)
        except Exception as e:
            logger.exception("API error")
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
        return result

    return app


def run(config: PolyglotForgeConfig, host: str | None = None, port: int | None = None) -> None:
    """Serve the app with uvicorn (blocking)."""
    import uvicorn

    host = host or config.server.host
    port = port or config.server.port
    logger.info("PolyglotForge server running on http://%s:%d", host, port)
    uvicorn.run(create_app(config), host=host, port=port, log_config=None)
