"""User Store — in-memory record store owning user records and the identifier counter.

Invariants:
    - Identifiers come from the counter only; counter starts at 1 and only grows
    - Username and email are unique across live records
    - Uniqueness scan runs in insertion order; per record, email is compared before username
    - Failed operations mutate nothing (records and counter untouched)
    - Every read hands out copies; callers cannot reach stored state
    - All operations run under a single lock (check-then-act is atomic)

Design Decisions:
    - One store object owned by the app and injected into routes, not module-level state
      (ADR: explicit ownership, fresh store per test)
    - Linear scans over a list: insertion order is the listing order and entity
      count is small, so no index is kept
    - threading.Lock over asyncio.Lock: operations are synchronous and never await
"""

import logging
import threading
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable

from user_service.core.domain_types import User, UserId
from user_service.core.errors import (
    DuplicateEmailError,
    DuplicateUsernameError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserStore:
    """Process-local user records with uniqueness enforcement."""

    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self._clock = clock
        self._lock = threading.Lock()
        self._users: list[User] = []
        self._next_id = 1

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def create(
        self,
        username: str,
        email: str,
        first_name: str,
        last_name: str,
        age: int,
    ) -> User:
        """Insert a new record. Raises DuplicateEmailError / DuplicateUsernameError."""
        with self._lock:
            for existing in self._users:
                if existing.email == email:
                    raise DuplicateEmailError(email)
                if existing.username == username:
                    raise DuplicateUsernameError(username)

            now = self._clock()
            user = User(
                id=UserId(self._next_id),
                username=username,
                email=email,
                first_name=first_name,
                last_name=last_name,
                age=age,
                created_at=now,
                updated_at=now,
            )
            self._users.append(user)
            self._next_id += 1

        logger.info(
            f"Created user {user.username}", extra={"user_id": user.id},
        )
        return replace(user)

    def get_by_id(self, user_id: int) -> User:
        """Return a copy of the record. Raises UserNotFoundError."""
        with self._lock:
            for user in self._users:
                if user.id == user_id:
                    return replace(user)
        raise UserNotFoundError(user_id)

    def list_all(self) -> list[User]:
        """Snapshot of all records in insertion order."""
        with self._lock:
            return [replace(user) for user in self._users]

    def delete_by_id(self, user_id: int) -> None:
        """Remove the record, keeping the order of the rest. Raises UserNotFoundError."""
        with self._lock:
            for index, user in enumerate(self._users):
                if user.id == user_id:
                    del self._users[index]
                    break
            else:
                raise UserNotFoundError(user_id)

        logger.info(f"Deleted user {user_id}", extra={"user_id": user_id})

    def _reset(self) -> None:
        """Test hook: clear all records and restart ids at 1.

        Not part of the store contract; no route or production path calls it.
        """
        with self._lock:
            self._users = []
            self._next_id = 1
