"""
Pydantic models for orders.

``Order`` is what the order store keeps.  ``OrderWithUser`` is a
response-only shape: a single fetched order plus a snapshot of its
owning user, present only when the user service answered.  The user
snapshot is never written back to the store.  Scalar fields are
strict, as for users: ``"42"`` is not a valid ``user_id``.
"""

from typing import Optional

from pydantic import BaseModel, Field, StrictInt, StrictStr

from .user import User


class Order(BaseModel):
    """An order as stored by the order service."""

    id: StrictInt = Field(0, examples=[1])
    user_id: StrictInt = Field(0, examples=[1], description="Owning user; checked against the user service on creation")
    product: StrictStr = Field("", examples=["Laptop"])
    quantity: StrictInt = Field(0, examples=[1])
    status: StrictStr = Field("", examples=["pending"], description="Free-text label, e.g. pending or shipped")


class OrderWithUser(Order):
    """Schema for a single order returned by ``GET /orders/{id}``."""

    user: Optional[User] = None

    @classmethod
    def from_order(cls, order: Order, user: Optional[User] = None) -> "OrderWithUser":
        return cls(**order.model_dump(), user=user)


# Fixture orders loaded into a fresh order store.
SEED_ORDERS = (
    Order(id=1, user_id=1, product="Laptop", quantity=1, status="pending"),
    Order(id=2, user_id=2, product="Mouse", quantity=2, status="shipped"),
)
