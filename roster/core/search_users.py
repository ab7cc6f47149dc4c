"""User Search - case-insensitive substring filtering over the user list.

Invariants:
    - Pure function: no IO, the caller passes the users in
    - name matches first OR last name; email matches the stored email
    - Filters are conjunctive; an empty or missing filter does not narrow
    - Input order is preserved (insertion order from the store)

Design Decisions:
    - Simple substring matching (not fuzzy): predictable and testable
    - Linear scan: the roster is small and in memory
"""

from typing import Iterable

from roster.schemas.user import User


def _matches_name(user: User, needle: str) -> bool:
    return needle in user.first_name.lower() or needle in user.last_name.lower()


def search_users(
    users: Iterable[User],
    name: str | None = None,
    email: str | None = None,
) -> list[User]:
    """Filter users by name and/or email fragment."""
    matches = list(users)
    if name:
        needle = name.lower()
        matches = [u for u in matches if _matches_name(u, needle)]
    if email:
        needle = email.lower()
        matches = [u for u in matches if needle in u.email.lower()]
    return matches
