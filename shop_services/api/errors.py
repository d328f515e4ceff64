"""
Exception handlers installed on both applications.

FastAPI answers undecodable or mistyped request bodies with 422.  Both
services treat that as malformed input and answer 400 instead, keeping
the ``{"detail": "..."}`` body shape of ``HTTPException``.

A request abandoned by its client gets 499 (client closed request);
nobody reads that response, it only keeps access logs honest.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .disconnect import ClientDisconnected


logger = logging.getLogger(__name__)

HTTP_499_CLIENT_CLOSED_REQUEST = 499


def _describe(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    detail = _describe(exc)
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, detail)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail})


async def client_disconnected_handler(request: Request, exc: ClientDisconnected) -> JSONResponse:
    return JSONResponse(status_code=HTTP_499_CLIENT_CLOSED_REQUEST, content={"detail": "Client closed request"})


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ClientDisconnected, client_disconnected_handler)
