"""
User endpoints.

List, create and fetch-by-id over the user store.  Handlers are plain
functions; FastAPI runs them in its threadpool, so concurrent requests
really do contend on the store's lock.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from shop_services.api.deps import get_user_service, parse_record_id
from shop_services.schemas.user import User
from shop_services.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=List[User])
def list_users(service: UserService = Depends(get_user_service)) -> List[User]:
    """Return every user.  Order is insertion order."""
    return service.list_users()


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
def create_user(user: User, service: UserService = Depends(get_user_service)) -> User:
    """Register a user.  The ``id`` in the body is ignored."""
    return service.create_user(user)


@router.get("/", include_in_schema=False)
def get_user_without_id() -> None:
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid user ID")


@router.get("/{user_id}", response_model=User)
def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> User:
    """Fetch one user; this is the route the order service calls."""
    user = service.get_user(parse_record_id(user_id, "user"))
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
