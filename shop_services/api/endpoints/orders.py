"""
Order endpoints.

``GET /orders/{id}`` enriches the order with its user when the user
service answers and degrades to the bare order otherwise.
``POST /orders`` refuses orders whose user cannot be verified.  Both
honour an optional ``X-Request-Timeout`` header that can only shorten
the fixed lookup ceiling, and both cancel the user lookup if the
client disconnects while it is in flight.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status

from shop_services.api.deps import get_order_service, parse_record_id, request_timeout
from shop_services.api.disconnect import cancel_on_disconnect
from shop_services.schemas.order import Order, OrderWithUser
from shop_services.services.order_service import OrderService, UserValidationError

router = APIRouter()


@router.get("", response_model=List[Order])
async def list_orders(service: OrderService = Depends(get_order_service)) -> List[Order]:
    """Return every order.  Listing never calls the user service."""
    return service.list_orders()


@router.post("", response_model=Order, status_code=status.HTTP_201_CREATED)
async def create_order(
    order: Order,
    request: Request,
    service: OrderService = Depends(get_order_service),
    timeout: Optional[float] = Depends(request_timeout),
) -> Order:
    """Create an order once its ``user_id`` is confirmed by the user service."""
    try:
        return await cancel_on_disconnect(request, service.create_order(order, inbound_timeout=timeout))
    except UserValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.get("/", include_in_schema=False)
async def get_order_without_id() -> None:
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid order ID")


@router.get("/{order_id}", response_model=OrderWithUser, response_model_exclude_none=True)
async def get_order(
    order_id: str,
    request: Request,
    service: OrderService = Depends(get_order_service),
    timeout: Optional[float] = Depends(request_timeout),
) -> OrderWithUser:
    """Fetch one order, with ``user`` attached when the lookup succeeds."""
    order_ref = parse_record_id(order_id, "order")
    order = await cancel_on_disconnect(request, service.get_order(order_ref, inbound_timeout=timeout))
    if order is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
    return order
