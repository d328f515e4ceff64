"""
FastAPI dependencies shared by the routers.

Services are attached to ``app.state`` by the factories
in ``shop_services.main``; these helpers fetch them per request so
handlers never touch module globals.
"""

import re
from typing import Optional

from fastapi import Header, HTTPException, Request, status

from shop_services.core.deadline import parse_timeout_header
from shop_services.services.order_service import OrderService
from shop_services.services.user_service import UserService

_ID_RE = re.compile(r"[+-]?[0-9]+")

# Ids are 64-bit signed integers.
_ID_MIN, _ID_MAX = -(2 ** 63), 2 ** 63 - 1


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


def get_order_service(request: Request) -> OrderService:
    return request.app.state.order_service


def request_timeout(x_request_timeout: Optional[str] = Header(None)) -> Optional[float]:
    """Caller's time budget from the ``X-Request-Timeout`` header."""
    try:
        return parse_timeout_header(x_request_timeout)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid X-Request-Timeout header",
        )


def parse_record_id(raw: str, kind: str) -> int:
    """Parse a path identifier, answering 400 ``Invalid <kind> ID`` on failure."""
    if len(raw) <= 20 and _ID_RE.fullmatch(raw):
        value = int(raw)
        if _ID_MIN <= value <= _ID_MAX:
            return value
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid {kind} ID")
