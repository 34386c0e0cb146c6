"""
Exception handlers that shape error responses.

Handlers raise ``HTTPException`` for not-found (404), forbidden (403)
and similar conditions, and FastAPI renders those as
``{"detail": "..."}``.  This module covers the two remaining cases:

* Request validation failures become 400 responses listing each
  offending field as a dotted path with the reason.
* Anything unexpected is logged with its traceback and answered with a
  generic 500 so internals do not leak to clients.
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

# Request sections FastAPI prefixes to error locations.
_LOCATION_ROOTS = {"body", "query", "path", "header", "cookie"}


def format_validation_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Flatten pydantic error dictionaries into ``field``/``message`` pairs."""
    formatted = []
    for error in errors:
        location = [str(part) for part in error.get("loc", ())]
        if error.get("type") == "json_invalid":
            # loc carries a character offset into the raw body here
            location = ["body"]
        elif location and location[0] in _LOCATION_ROOTS and len(location) > 1:
            location = location[1:]
        formatted.append(
            {
                "field": ".".join(location) or "body",
                "message": error.get("msg", "Invalid value"),
                "type": error.get("type", "value_error"),
            }
        )
    return formatted


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = format_validation_errors(exc.errors())
    logger.info("Validation failed for %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation failed", "errors": errors},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
