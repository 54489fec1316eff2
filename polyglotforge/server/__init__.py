"""FastAPI transport for the conversion pipeline."""

from polyglotforge.server.app import (
    ConversionRequestError,
    create_app,
    parse_conversion_request,
    run,
)

__all__ = ["ConversionRequestError", "create_app", "parse_conversion_request", "run"]
