"""User Schemas - candidate record, cleaned fields, stored record, violation.

Invariants:
    - UserForm holds raw, untrusted strings exactly as submitted (no rules applied)
    - UserFields is what the store accepts: trimmed, normalized, age as int
    - User adds the store-assigned id; id is never part of UserFields
    - Violation is a single (field, message) pair

Design Decisions:
    - Python attribute names are snake_case; form aliases (firstName, ...) are
      handled by the route dependency that builds UserForm
    - Field rules are NOT expressed as pydantic constraints: every violation must
      be collected and re-rendered, not raised as a 422 (see core/validation.py)
"""

from pydantic import BaseModel

from roster.core.domain_types import UserField, UserId


class UserForm(BaseModel):
    """Candidate record - user-submitted values prior to validation."""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    age: str = ""
    bio: str = ""


class UserFields(BaseModel):
    """Validated, mutable user fields (everything but the id)."""
    first_name: str
    last_name: str
    email: str
    age: int
    bio: str = ""


class User(UserFields):
    """Stored user record."""
    id: UserId


class Violation(BaseModel):
    """One failed constraint."""
    field: UserField
    message: str
