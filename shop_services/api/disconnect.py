"""
Cancel in-flight work when the HTTP client goes away.

Starlette does not cancel a plain endpoint when its client disconnects,
so a handler awaiting the user service would keep that call running
until the lookup ceiling fires.  ``cancel_on_disconnect`` races the
handler's work against a listener on the ASGI ``receive`` channel and
cancels the work as soon as ``http.disconnect`` arrives.

Only use it once the request body has been consumed; the listener
reads (and discards) any further ``receive`` messages.
"""

import asyncio
import logging
from typing import Awaitable, TypeVar

from starlette.requests import Request
from starlette.types import Receive


logger = logging.getLogger(__name__)

T = TypeVar("T")


class ClientDisconnected(Exception):
    """The client closed the connection before the response was ready."""


async def wait_for_disconnect(receive: Receive) -> None:
    """Return once the server reports ``http.disconnect``."""
    while True:
        message = await receive()
        if message["type"] == "http.disconnect":
            return


async def cancel_on_disconnect(request: Request, work: Awaitable[T]) -> T:
    """Await ``work`` unless the client disconnects first.

    Raises
    ------
    ClientDisconnected
        If the disconnect arrived first.  ``work`` has been cancelled
        and has finished unwinding by the time this is raised.
    """
    work_task = asyncio.ensure_future(work)
    listener = asyncio.ensure_future(wait_for_disconnect(request.receive))
    try:
        done, _ = await asyncio.wait({work_task, listener}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        listener.cancel()
        work_task.cancel()

    if work_task in done:
        return work_task.result()

    # Let the cancellation reach the peer call before reporting.
    await asyncio.gather(work_task, return_exceptions=True)
    logger.info("Client disconnected during %s %s", request.method, request.url.path)
    raise ClientDisconnected()
