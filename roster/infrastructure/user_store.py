"""User Store - in-memory authoritative collection of user records.

Invariants:
    - Exactly one record per id; ids come from a monotonic counter and are never reused
    - list_users() returns insertion order; update keeps a record in place
    - Callers only ever see copies: mutating a returned User never changes the store
    - Missing ids are not errors: get returns None, update/delete are no-ops

Design Decisions:
    - Explicit instance owned by the app (app.state) and injected via Depends(get_user_store),
      not module-level data (ADR: tests get a fresh store through dependency_overrides)
    - dict keyed by id: Python dicts keep insertion order, so no separate list is needed
    - No persistence, no locking: single-process uvicorn, state lost on restart
"""

import logging

from fastapi import Request

from roster.core.domain_types import UserId
from roster.schemas.user import User, UserFields

logger = logging.getLogger(__name__)


class UserStore:
    """In-memory user collection."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._users)

    def list_users(self) -> list[User]:
        return [u.model_copy() for u in self._users.values()]

    def get_user(self, user_id: UserId) -> User | None:
        user = self._users.get(user_id)
        return user.model_copy() if user else None

    def add_user(self, fields: UserFields) -> User:
        """Assign the next id and append. Returns a copy of the new record."""
        user_id = UserId(self._next_id)
        self._next_id += 1
        user = User(id=user_id, **fields.model_dump())
        self._users[user_id] = user
        logger.debug(f"Stored user {user_id}", extra={"user_id": user_id})
        return user.model_copy()

    def update_user(self, user_id: UserId, fields: UserFields) -> None:
        """Replace every field but the id. No-op for unknown ids."""
        if user_id not in self._users:
            return
        self._users[user_id] = User(id=user_id, **fields.model_dump())

    def delete_user(self, user_id: UserId) -> bool:
        """Remove if present. No-op for unknown ids; returns whether a record went."""
        return self._users.pop(user_id, None) is not None


def get_user_store(request: Request) -> UserStore:
    """FastAPI dependency: the store owned by the running app."""
    return request.app.state.user_store
