"""User Routes - list, create, update, delete and search over the injected store.

Invariants:
    - Every handler is independent; the only shared state is the injected UserStore
    - Unknown id on update (GET or POST) raises ResourceNotFoundError -> 404, store untouched
    - Rejected submissions re-render the form with status 400, echoing trimmed values
    - Successful writes and every delete answer 303 See Other to "/"
    - Delete never checks existence (idempotent)

Design Decisions:
    - Form fields read by read_user_form into a typed UserForm before any rule runs
    - Path ids taken as str: a malformed id behaves like an unknown one (404 / no-op)
      instead of surfacing as a request validation error
    - Update-path uniqueness gated by Settings.check_email_unique_on_update
"""

import logging

from fastapi import APIRouter, Depends, Form, Query, Request, status
from fastapi.responses import RedirectResponse

from roster.api import views
from roster.config import Settings, get_settings
from roster.core.domain_types import UserId
from roster.core.errors import ResourceNotFoundError
from roster.core.search_users import search_users
from roster.core.validation import clean_user, echo_form, validate_user
from roster.infrastructure.user_store import UserStore, get_user_store
from roster.schemas.user import User, UserForm, Violation

logger = logging.getLogger(__name__)
router = APIRouter(tags=["users"])


def read_user_form(
    first_name: str | None = Form(None, alias="firstName"),
    last_name: str | None = Form(None, alias="lastName"),
    email: str | None = Form(None),
    age: str | None = Form(None),
    bio: str | None = Form(None),
) -> UserForm:
    """Build the candidate record from submitted form fields.

    Only submitted fields are set, so callers can tell missing from empty
    via model_dump(exclude_unset=True).
    """
    submitted = {
        "first_name": first_name, "last_name": last_name,
        "email": email, "age": age, "bio": bio,
    }
    return UserForm(**{k: v for k, v in submitted.items() if v is not None})


_MAX_ID_DIGITS = 18


def _parse_user_id(raw: str) -> UserId | None:
    """Path id as UserId, or None when it cannot name a stored user."""
    if not (raw.isascii() and raw.isdigit()):
        return None
    digits = raw.lstrip("0") or "0"
    if len(digits) > _MAX_ID_DIGITS:
        return None
    return UserId(int(digits))


def get_user_or_404(store: UserStore, raw_id: str) -> User:
    """Look up a user by path id or raise 404."""
    user_id = _parse_user_id(raw_id)
    user = store.get_user(user_id) if user_id is not None else None
    if user is None:
        raise ResourceNotFoundError("User", raw_id)
    return user


def _redirect_home() -> RedirectResponse:
    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)


def _log_rejected(action: str, violations: list[Violation]) -> None:
    logger.warning(
        f"Rejected {action}: {len(violations)} violation(s)",
        extra={"violations": [v.message for v in violations]},
    )


@router.get("/")
async def list_users(
    request: Request, store: UserStore = Depends(get_user_store),
):
    """User list."""
    return views.render(request, views.INDEX, {
        "title": "User list",
        "users": store.list_users(),
    })


@router.get("/new")
async def create_user_form(request: Request):
    """Empty create form."""
    return views.render(request, views.CREATE_USER, {"title": "Create user"})


@router.post("/new")
async def create_user(
    request: Request,
    form: UserForm = Depends(read_user_form),
    store: UserStore = Depends(get_user_store),
):
    """Validate (including email uniqueness) and add, or re-render with violations."""
    violations = validate_user(form, store.list_users())
    if violations:
        _log_rejected("create", violations)
        return views.render(
            request, views.CREATE_USER,
            {
                "title": "Create user",
                "errors": violations,
                "user": echo_form(form).model_dump(),
            },
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    user = store.add_user(clean_user(form))
    logger.info(f"Created user {user.id}", extra={"user_id": user.id})
    return _redirect_home()


@router.get("/{user_id}/update")
async def update_user_form(
    user_id: str,
    request: Request,
    store: UserStore = Depends(get_user_store),
):
    """Update form prefilled with stored values."""
    user = get_user_or_404(store, user_id)
    return views.render(request, views.UPDATE_USER, {
        "title": "Update user",
        "user": user.model_dump(),
    })


@router.post("/{user_id}/update")
async def update_user(
    user_id: str,
    request: Request,
    form: UserForm = Depends(read_user_form),
    store: UserStore = Depends(get_user_store),
    settings: Settings = Depends(get_settings),
):
    """Validate and replace every field but the id, or re-render with violations."""
    user = get_user_or_404(store, user_id)
    violations = validate_user(
        form, store.list_users(),
        check_unique=settings.check_email_unique_on_update,
        exclude_id=user.id,
    )
    if violations:
        _log_rejected("update", violations)
        submitted = echo_form(form).model_dump(exclude_unset=True)
        return views.render(
            request, views.UPDATE_USER,
            {
                "title": "Update user",
                "user": {**user.model_dump(), **submitted},
                "errors": violations,
            },
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    store.update_user(user.id, clean_user(form))
    logger.info(f"Updated user {user.id}", extra={"user_id": user.id})
    return _redirect_home()


@router.post("/{user_id}/delete")
async def delete_user(
    user_id: str, store: UserStore = Depends(get_user_store),
):
    """Delete if present; always redirect."""
    parsed = _parse_user_id(user_id)
    if parsed is not None and store.delete_user(parsed):
        logger.info(f"Deleted user {parsed}", extra={"user_id": parsed})
    return _redirect_home()


@router.get("/search")
async def search(
    request: Request,
    name: str | None = Query(None),
    email: str | None = Query(None),
    store: UserStore = Depends(get_user_store),
):
    """Filtered user list (full list when no filter is given)."""
    return views.render(request, views.SEARCH, {
        "title": "Search Results",
        "users": search_users(store.list_users(), name=name, email=email),
        "name": name or "",
        "email": email or "",
    })
