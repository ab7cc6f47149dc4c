"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps int; ids are assigned by the store, never by callers
    - UserField values are the HTML form field names (the wire contract)
    - Field bounds defined once here, read by validation and templates

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: usable directly as dict keys and in templates
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)


# ─── Enums ───────────────────────────────────────────────────────

class UserField(str, Enum):
    """Submitted form fields, in the order rules are evaluated."""
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    EMAIL = "email"
    AGE = "age"
    BIO = "bio"


# ─── Bounds ──────────────────────────────────────────────────────

NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 10
AGE_MIN = 18
AGE_MAX = 200
BIO_MAX_LENGTH = 200
