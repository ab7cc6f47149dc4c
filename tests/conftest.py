"""Root conftest - shared test configuration and data builders."""

import os

import pytest

from roster.schemas.user import UserForm

# Keep developer .env overrides from leaking into test settings
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("CHECK_EMAIL_UNIQUE_ON_UPDATE", "false")


@pytest.fixture
def valid_form() -> UserForm:
    return UserForm(
        first_name="Jo", last_name="Lee", email="jo@x.com", age="30", bio="",
    )
