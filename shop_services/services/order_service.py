"""
Business logic for orders.

Orders reference users that live in another service, and the two call
sites that consult it apply opposite failure policies over the same
:class:`~shop_services.clients.user_client.UserServiceClient`:

* ``get_order`` enriches the order with its user on a best-effort
  basis.  Any lookup failure (absent user, unreachable service, bad
  status, undecodable body) is logged and the order is returned
  without the ``user`` field.
* ``create_order`` only stores the order if the user service confirms
  the user exists right now.  Any lookup failure rejects the order
  with :class:`UserValidationError`.

Both calls are bounded by ``bounded_timeout(lookup_timeout, inbound)``.
The store lock is never held while the peer call is in flight.
"""

import logging
from typing import List, Optional

from shop_services.clients.user_client import UserServiceClient, UserServiceError
from shop_services.core.deadline import bounded_timeout
from shop_services.core.store import RecordStore
from shop_services.schemas.order import Order, OrderWithUser


logger = logging.getLogger(__name__)


class UserValidationError(Exception):
    """The owning user of a new order could not be verified."""

    def __init__(self, cause: UserServiceError) -> None:
        self.cause = cause
        super().__init__(f"User not found or service unavailable: {cause}")


class OrderService:
    """Сервис для работы с заказами.

    Parameters
    ----------
    store : RecordStore[Order]
        Order storage.
    user_client : UserServiceClient
        Client for the user service.
    lookup_timeout : float
        Ceiling in seconds for each user lookup.
    """

    def __init__(
        self,
        store: RecordStore[Order],
        user_client: UserServiceClient,
        lookup_timeout: float = 3.0,
    ) -> None:
        self.store = store
        self.user_client = user_client
        self.lookup_timeout = lookup_timeout

    def list_orders(self) -> List[Order]:
        """Return all stored orders without user details."""
        return self.store.list()

    async def get_order(
        self, order_id: int, *, inbound_timeout: Optional[float] = None
    ) -> Optional[OrderWithUser]:
        """Return the order with its user attached when available.

        Returns ``None`` only when the order itself does not exist.
        """
        order = self.store.get(order_id)
        if order is None:
            return None

        timeout = bounded_timeout(self.lookup_timeout, inbound_timeout)
        try:
            user = await self.user_client.get_user(order.user_id, timeout=timeout)
        except UserServiceError as exc:
            logger.warning("Failed to get user %s for order %s: %s", order.user_id, order.id, exc)
            return OrderWithUser.from_order(order)
        return OrderWithUser.from_order(order, user)

    async def create_order(
        self, data: Order, *, inbound_timeout: Optional[float] = None
    ) -> Order:
        """Store a new order after confirming its user exists.

        Raises
        ------
        UserValidationError
            If the user lookup failed for any reason.
        """
        timeout = bounded_timeout(self.lookup_timeout, inbound_timeout)
        try:
            await self.user_client.get_user(data.user_id, timeout=timeout)
        except UserServiceError as exc:
            logger.info("Rejected order for user %s: %s", data.user_id, exc)
            raise UserValidationError(exc) from exc
        order = self.store.create(data)
        logger.info("Created order %s for user %s", order.id, order.user_id)
        return order
