"""
Users API Backend - In-Memory User Store
=========================================

What:  The ordered list of users plus the next-id counter, and the FastAPI
       dependencies that hand the per-app store and service to route handlers.
Why:   All user state lives in one explicit object owned by the application
       instance instead of module globals, so each app (and each test) gets
       its own isolated store.
How:   A single threading.Lock guards every read and write of the list and
       the counter.
When:  Created by create_app(); lives until the process exits. Never persisted.

Concurrency:
    Route handlers are async and run on the event loop, but the same store can
    be touched from the threadpool (sync dependencies, tests driving it from
    threads). The lock makes "read counter, append, increment" one atomic step
    and keeps list/get/delete from iterating a list that is being mutated.
    None of the locked sections await, so holding a threading.Lock is safe.

Lookup:
    Linear scan comparing str(user.id) with the raw path string. At this scale
    a dict index would only add a second structure to keep in sync.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Iterable, List, Optional

from fastapi import Request

from userapi.schemas.user import User

if TYPE_CHECKING:
    from userapi.services.user_service import UserService

logger = logging.getLogger(__name__)

SAMPLE_USERS = (
    ("John Doe", "john@example.com"),
    ("Jane Smith", "jane@example.com"),
)


def utc_now_rfc3339() -> str:
    """Current UTC time as RFC3339 with second precision, e.g. 2024-01-15T12:00:00Z."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class UserStore:
    """
    Lock-guarded, insertion-ordered collection of users.

    Invariants:
        - ids in the list are unique
        - next_id is greater than every id ever issued (deletes never lower it)
    """

    def __init__(self, users: Optional[Iterable[User]] = None):
        self._lock = threading.Lock()
        self._users: List[User] = list(users or [])
        self._next_id = max((u.id for u in self._users), default=0) + 1

    @classmethod
    def with_sample_users(cls) -> "UserStore":
        """Store pre-loaded with the two sample users (ids 1 and 2, next id 3)."""
        created = utc_now_rfc3339()
        return cls(
            User(id=i, name=name, email=email, created=created)
            for i, (name, email) in enumerate(SAMPLE_USERS, start=1)
        )

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._next_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def list(self) -> List[User]:
        """Snapshot of all users in insertion order."""
        with self._lock:
            return list(self._users)

    def get(self, user_id: str) -> Optional[User]:
        with self._lock:
            for user in self._users:
                if str(user.id) == user_id:
                    return user
        return None

    def add(self, name: str, email: str) -> User:
        """Create a user with the next id and append it."""
        with self._lock:
            user = User(
                id=self._next_id,
                name=name,
                email=email,
                created=utc_now_rfc3339(),
            )
            self._users.append(user)
            self._next_id += 1
        return user

    def remove(self, user_id: str) -> Optional[User]:
        """Remove the first user whose id matches; returns it, or None."""
        with self._lock:
            for index, user in enumerate(self._users):
                if str(user.id) == user_id:
                    del self._users[index]
                    return user
        return None


# ── Dependencies ──────────────────────────────────────────────────────────
def get_store(request: Request) -> UserStore:
    """FastAPI dependency returning the store owned by the running app."""
    return request.app.state.store


def get_user_service(request: Request) -> "UserService":
    """FastAPI dependency returning the app's UserService."""
    return request.app.state.user_service
