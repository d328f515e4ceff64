"""
Business logic for users.

``UserService`` wraps the user ``RecordStore``.  There is nothing to
decide here beyond id assignment, which the store owns; the service
exists so handlers of both services read the same way and so creation
is logged in one place.
"""

import logging
from typing import List, Optional

from shop_services.core.store import RecordStore
from shop_services.schemas.user import User


logger = logging.getLogger(__name__)


class UserService:
    """Сервис для работы с пользователями.

    Хранит пользователей в памяти процесса.  Обновление и удаление не
    поддерживаются; содержимое полей не проверяется.
    """

    def __init__(self, store: RecordStore[User]) -> None:
        self.store = store

    def list_users(self) -> List[User]:
        return self.store.list()

    def get_user(self, user_id: int) -> Optional[User]:
        return self.store.get(user_id)

    def create_user(self, data: User) -> User:
        user = self.store.create(data)
        logger.info("Created user %s (%s)", user.id, user.email)
        return user
