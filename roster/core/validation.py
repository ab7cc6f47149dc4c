"""User Validation - ordered field rules plus the cross-record email uniqueness check.

Invariants:
    - Every rule is evaluated; failures are collected, never short-circuited
    - Violations come out in rule order (field rules by form order, uniqueness last)
    - Values are trimmed before any rule sees them
    - Uniqueness compares normalized emails, so case variants collide
    - Pure functions: the caller passes the current users in, nothing is read from a store

Design Decisions:
    - Rules as data (field, predicate, message) over chained validators: the rule
      table is the single place to read or extend the constraints
    - email-validator for syntax (same backend pydantic's EmailStr uses), with
      provider canonicalization layered on top in normalize_email()
    - Names accept ASCII letters only, matching the en-US alphabet
"""

import re
from dataclasses import dataclass
from typing import Callable, Iterable

from email_validator import EmailNotValidError, validate_email

from roster.core.domain_types import (
    AGE_MAX, AGE_MIN, BIO_MAX_LENGTH, NAME_MAX_LENGTH, NAME_MIN_LENGTH,
    UserField, UserId,
)
from roster.schemas.user import User, UserFields, UserForm, Violation

_ALPHA = re.compile(r"^[A-Za-z]+$")
_INT = re.compile(r"^[-+]?[0-9]+$")

# Attribute on UserForm for each submitted field
_ATTRS: dict[UserField, str] = {
    UserField.FIRST_NAME: "first_name",
    UserField.LAST_NAME: "last_name",
    UserField.EMAIL: "email",
    UserField.AGE: "age",
    UserField.BIO: "bio",
}

ALPHA_ERR = "must only contain letters."
LENGTH_ERR = f"must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters."
EMAIL_ERR = "must be a valid email address."
AGE_ERR = f"must be between {AGE_MIN} and {AGE_MAX}."
BIO_ERR = f"must be less than {BIO_MAX_LENGTH} characters."
EMAIL_IN_USE = "Email already in use."


@dataclass(frozen=True)
class Rule:
    """One field constraint: predicate over the trimmed value."""
    field: UserField
    check: Callable[[str], bool]
    message: str


def _is_alpha(value: str) -> bool:
    return bool(_ALPHA.match(value))


def _length_between(low: int, high: int) -> Callable[[str], bool]:
    return lambda value: low <= len(value) <= high


def _is_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def parse_age(value: str) -> int | None:
    """Integer value of a trimmed age string, or None if it is not an in-range int."""
    if not _INT.match(value):
        return None
    # Bound the digit count first: int() refuses very long strings
    digits = value.lstrip("+-").lstrip("0") or "0"
    if len(digits) > len(str(AGE_MAX)):
        return None
    age = -int(digits) if value.startswith("-") else int(digits)
    return age if AGE_MIN <= age <= AGE_MAX else None


def _is_age(value: str) -> bool:
    return parse_age(value) is not None


USER_RULES: tuple[Rule, ...] = (
    Rule(UserField.FIRST_NAME, _is_alpha, f"First name {ALPHA_ERR}"),
    Rule(
        UserField.FIRST_NAME,
        _length_between(NAME_MIN_LENGTH, NAME_MAX_LENGTH),
        f"First name {LENGTH_ERR}",
    ),
    Rule(UserField.LAST_NAME, _is_alpha, f"Last name {ALPHA_ERR}"),
    Rule(
        UserField.LAST_NAME,
        _length_between(NAME_MIN_LENGTH, NAME_MAX_LENGTH),
        f"Last name {LENGTH_ERR}",
    ),
    Rule(UserField.EMAIL, _is_email, f"Email {EMAIL_ERR}"),
    Rule(UserField.AGE, _is_age, f"Age {AGE_ERR}"),
    Rule(UserField.BIO, _length_between(0, BIO_MAX_LENGTH), f"Bio {BIO_ERR}"),
)


# ─── Email canonicalization ──────────────────────────────────────

_GMAIL_DOMAINS = {"gmail.com", "googlemail.com"}
_PLUS_TAG_DOMAINS = {
    "outlook.com", "hotmail.com", "live.com",
    "icloud.com", "me.com", "mac.com",
}
_YAHOO_DOMAINS = {"yahoo.com", "ymail.com", "rocketmail.com"}


def normalize_email(value: str) -> str:
    """Canonical form of an email address (lowercased, provider tags removed).

    Gmail ignores dots and +tags and treats googlemail.com as gmail.com;
    Outlook/iCloud drop +tags; Yahoo drops -tags. Addresses without an "@"
    are only trimmed and lowercased.
    """
    value = value.strip().lower()
    local, sep, domain = value.rpartition("@")
    if not sep:
        return value
    if domain in _GMAIL_DOMAINS:
        local = local.split("+", 1)[0].replace(".", "")
        domain = "gmail.com"
    elif domain in _PLUS_TAG_DOMAINS:
        local = local.split("+", 1)[0]
    elif domain in _YAHOO_DOMAINS:
        local = local.split("-", 1)[0]
    return f"{local}@{domain}"


# ─── Validation ──────────────────────────────────────────────────

def _trimmed(candidate: UserForm, field: UserField) -> str:
    return getattr(candidate, _ATTRS[field]).strip()


def check_fields(candidate: UserForm) -> list[Violation]:
    """Apply every field rule; one violation per failed rule."""
    return [
        Violation(field=rule.field, message=rule.message)
        for rule in USER_RULES
        if not rule.check(_trimmed(candidate, rule.field))
    ]


def email_in_use(
    email: str, users: Iterable[User], exclude_id: UserId | None = None,
) -> bool:
    """True if another user already holds the normalized form of email."""
    target = normalize_email(email)
    return any(
        normalize_email(u.email) == target
        for u in users
        if u.id != exclude_id
    )


def validate_user(
    candidate: UserForm,
    existing_users: Iterable[User],
    check_unique: bool = True,
    exclude_id: UserId | None = None,
) -> list[Violation]:
    """Full violation list for a candidate record. Empty list means valid.

    The uniqueness rule only runs on syntactically valid emails; an invalid
    address already carries its own violation.
    """
    violations = check_fields(candidate)
    if not check_unique:
        return violations
    email = _trimmed(candidate, UserField.EMAIL)
    email_invalid = any(v.field == UserField.EMAIL for v in violations)
    if not email_invalid and email_in_use(email, existing_users, exclude_id):
        violations.append(
            Violation(field=UserField.EMAIL, message=EMAIL_IN_USE),
        )
    return violations


def clean_user(candidate: UserForm) -> UserFields:
    """Trimmed, normalized, typed fields. Only call on a valid candidate."""
    return UserFields(
        first_name=candidate.first_name.strip(),
        last_name=candidate.last_name.strip(),
        email=normalize_email(candidate.email),
        age=parse_age(candidate.age.strip()),
        bio=candidate.bio.strip(),
    )


def echo_form(candidate: UserForm) -> UserForm:
    """Submitted values, trimmed, as re-rendered after a rejected write.

    Fields the requester did not submit stay unset.
    """
    submitted = candidate.model_dump(exclude_unset=True)
    return UserForm(**{k: v.strip() for k, v in submitted.items()})
