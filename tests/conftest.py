"""Shared fixtures: fake user services and app builders."""

import asyncio
from typing import Callable, Dict, List

import httpx
import pytest

from shop_services.clients.user_client import UserServiceClient
from shop_services.core.config import Settings
from shop_services.core.store import RecordStore
from shop_services.schemas.order import SEED_ORDERS, Order

USER_SERVICE_URL = "http://users.test"

ALICE = {"id": 1, "name": "Alice", "email": "alice@example.com"}
BOB = {"id": 2, "name": "Bob", "email": "bob@example.com"}


class FakeUserService:
    """Callable for ``httpx.MockTransport`` that serves ``/users/{id}``.

    ``mode`` switches behaviour: ``"ok"`` serves ``users`` (404 for
    unknown ids), ``"down"`` raises a connection error, ``"hang"``
    never answers and ``"error"`` answers 500.
    """

    def __init__(self, users: Dict[int, dict] = None, mode: str = "ok") -> None:
        self.users = {1: ALICE, 2: BOB} if users is None else users
        self.mode = mode
        self.requests: List[httpx.Request] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.mode == "down":
            raise httpx.ConnectError("Connection refused", request=request)
        if self.mode == "hang":
            await asyncio.sleep(30)
        if self.mode == "error":
            return httpx.Response(500, text="boom")
        user_id = int(request.url.path.rsplit("/", 1)[-1])
        if user_id not in self.users:
            return httpx.Response(404, text="User not found")
        return httpx.Response(200, json=self.users[user_id])


def make_user_client(handler: Callable, **kwargs) -> UserServiceClient:
    return UserServiceClient(USER_SERVICE_URL, transport=httpx.MockTransport(handler), **kwargs)


@pytest.fixture
def fake_users() -> FakeUserService:
    return FakeUserService()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        user_service_url=USER_SERVICE_URL,
        user_client_timeout=5.0,
        user_lookup_timeout=0.2,
        log_level="WARNING",
    )


@pytest.fixture
def order_store() -> RecordStore[Order]:
    return RecordStore(SEED_ORDERS)
