"""User service client.

The order service uses :class:`UserServiceClient` to fetch a single
user from the user service's ``GET /users/{id}`` route.  The client
wraps an ``httpx.AsyncClient`` carrying its own fixed timeout; callers
may pass a tighter per-call ``timeout`` and whichever bound is reached
first aborts the request.

Failures are reported as subclasses of :class:`UserServiceError` so
callers can tell "definitely absent" apart from "could not determine":

* :class:`UserNotFoundError` – the service answered 404.  Its message
  is exactly ``"user not found"``.
* :class:`UnexpectedStatusError` – any other non-200 status.
* :class:`UserServiceUnavailableError` – connection refused, DNS
  failure, client timeout, the caller's timeout or any other request
  failure reported by httpx (e.g. too many redirects).
* :class:`UserDecodeError` – a body that cannot be decoded: a broken
  ``Content-Encoding`` or a 200 whose JSON is not a user.

Cancellation of the calling task is not an error: ``CancelledError``
propagates unchanged and aborts the in-flight request.  There are no
retries and no caching.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from shop_services.schemas.user import User


logger = logging.getLogger(__name__)


class UserServiceError(Exception):
    """Base class for every failure of a user lookup."""


class UserNotFoundError(UserServiceError):
    """The user service reported that the user does not exist."""

    def __init__(self) -> None:
        super().__init__("user not found")


class UnexpectedStatusError(UserServiceError):
    """The user service answered with a status other than 200 or 404."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"user service returned status: {status_code}")


class UserServiceUnavailableError(UserServiceError):
    """The request did not complete (transport failure or timeout)."""

    def __init__(self, cause: object) -> None:
        super().__init__(f"failed to connect to user service: {cause}")


class UserDecodeError(UserServiceError):
    """The response body could not be decoded into a user."""

    def __init__(self, cause: object) -> None:
        super().__init__(f"failed to decode user: {cause}")


class UserServiceClient:
    """Client for the user service's fetch-by-id route."""

    USER_PATH = "/users/{user_id}"

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the user service, e.g.
                ``http://localhost:8081``.
            timeout: Fixed connect/read/write/pool timeout of the
                underlying HTTP client, in seconds.
            transport: Optional httpx transport.  Tests pass an
                ``httpx.MockTransport`` here.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http = httpx.AsyncClient(timeout=timeout, transport=transport)

    def user_url(self, user_id: int) -> str:
        return self.base_url + self.USER_PATH.format(user_id=user_id)

    async def get_user(self, user_id: int, *, timeout: Optional[float] = None) -> User:
        """Fetch one user.

        Args:
            user_id: Identifier of the user to fetch.
            timeout: Optional overall bound for this call, in seconds.
                Applied on top of the client's own timeout.
        Returns:
            The decoded :class:`User`.
        Raises:
            UserServiceError: see the module docstring for subclasses.
        """
        url = self.user_url(user_id)
        logger.debug("Fetching user %s from %s", user_id, url)
        try:
            if timeout is None:
                response = await self._http.get(url)
            else:
                response = await asyncio.wait_for(self._http.get(url), timeout)
        except asyncio.TimeoutError as exc:
            raise UserServiceUnavailableError(f"timed out after {timeout:g}s") from exc
        except httpx.DecodingError as exc:
            raise UserDecodeError(exc) from exc
        except httpx.RequestError as exc:
            raise UserServiceUnavailableError(str(exc) or type(exc).__name__) from exc

        if response.status_code == httpx.codes.NOT_FOUND:
            raise UserNotFoundError()
        if response.status_code != httpx.codes.OK:
            raise UnexpectedStatusError(response.status_code)
        try:
            return User.model_validate_json(response.content)
        except ValidationError as exc:
            raise UserDecodeError(exc) from exc

    async def aclose(self) -> None:
        """Release pooled connections."""
        await self._http.aclose()

    async def __aenter__(self) -> "UserServiceClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
