"""
Application factories for the user and order services.

``create_user_app`` and ``create_order_app`` build fully configured
FastAPI instances.  Each call constructs its own stores, so tests get
isolated state simply by calling the factory again.  Module-level
``user_app`` and ``order_app`` are created at import time so uvicorn
can discover them, e.g.::

    uvicorn shop_services.main:user_app --port 8081
    uvicorn shop_services.main:order_app --port 8082
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.endpoints import health, orders, users
from .api.errors import install_error_handlers
from .clients.user_client import UserServiceClient
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.store import RecordStore
from .schemas.order import SEED_ORDERS, Order
from .schemas.user import SEED_USERS, User
from .services.order_service import OrderService
from .services.user_service import UserService


logger = logging.getLogger(__name__)


def create_user_app(
    settings: Optional[Settings] = None,
    store: Optional[RecordStore[User]] = None,
) -> FastAPI:
    """Create the user service.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration; the module-level ``settings`` when omitted.
    store : Optional[RecordStore[User]]
        User storage; a store seeded with the fixture users when omitted.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level)

    app = FastAPI(title=f"{settings.project_name}: users", version=settings.api_version)
    app.state.settings = settings
    app.state.user_service = UserService(store if store is not None else RecordStore(SEED_USERS))

    install_error_handlers(app)
    app.include_router(users.router, prefix="/users", tags=["users"])
    app.include_router(health.router, tags=["health"])
    return app


def create_order_app(
    settings: Optional[Settings] = None,
    store: Optional[RecordStore[Order]] = None,
    user_client: Optional[UserServiceClient] = None,
) -> FastAPI:
    """Create the order service.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration; the module-level ``settings`` when omitted.
    store : Optional[RecordStore[Order]]
        Order storage; a store seeded with the fixture orders when omitted.
    user_client : Optional[UserServiceClient]
        Client for the user service.  When omitted one is built from
        ``settings`` and closed on application shutdown; a client
        passed in is left for the caller to close.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level)

    owns_client = user_client is None
    if user_client is None:
        user_client = UserServiceClient(settings.user_service_url, timeout=settings.user_client_timeout)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Order service using user service at %s", user_client.base_url)
        yield
        if owns_client:
            await user_client.aclose()

    app = FastAPI(
        title=f"{settings.project_name}: orders",
        version=settings.api_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.order_service = OrderService(
        store if store is not None else RecordStore(SEED_ORDERS),
        user_client,
        lookup_timeout=settings.user_lookup_timeout,
    )

    install_error_handlers(app)
    app.include_router(orders.router, prefix="/orders", tags=["orders"])
    app.include_router(health.router, tags=["health"])
    return app


user_app = create_user_app()
order_app = create_order_app()
