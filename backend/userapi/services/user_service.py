"""
Users API Backend - User Service (Business Logic)
==================================================

What:  Business rules for listing, fetching, creating and deleting users.
Why:   Keeps routes thin: they translate HTTP to service calls, and the
       service translates "not there" into NotFoundError.
How:   Wraps a UserStore handed in at construction time.
Who:   Built by create_app(); injected into routes via get_user_service.
"""

import logging
from typing import List

from userapi.exceptions import NotFoundError, ValidationError
from userapi.schemas.user import REQUIRED_FIELDS_MESSAGE, User, UserCreate
from userapi.store import UserStore

logger = logging.getLogger(__name__)


class UserService:
    """
    Business logic layer for user operations.

    Error Handling Strategy:
        Missing users raise NotFoundError (404). Empty name/email raise
        ValidationError (400) before the store is touched.
    """

    def __init__(self, store: UserStore):
        self.store = store

    def list_users(self) -> List[User]:
        return self.store.list()

    def get_user(self, user_id: str) -> User:
        """
        Look up a user by the digit string taken from the path.

        Raises:
            NotFoundError: no user has this id
        """
        user = self.store.get(user_id)
        if user is None:
            raise NotFoundError(resource="User", resource_id=user_id)
        return user

    def create_user(self, payload: UserCreate) -> User:
        """
        Create a user from a validated payload.

        The schema already rejects empty fields for HTTP callers; the check is
        repeated here so direct callers get the same guarantee.

        Raises:
            ValidationError: name or email is empty (store untouched)
        """
        if not payload.name or not payload.email:
            raise ValidationError(message=REQUIRED_FIELDS_MESSAGE)

        user = self.store.add(name=payload.name, email=payload.email)
        logger.info("User created: id=%d", user.id)
        return user

    def delete_user(self, user_id: str) -> User:
        """
        Remove a user by id. The id counter is not rolled back.

        Raises:
            NotFoundError: no user has this id
        """
        user = self.store.remove(user_id)
        if user is None:
            raise NotFoundError(resource="User", resource_id=user_id)
        logger.info("User deleted: id=%d", user.id)
        return user
