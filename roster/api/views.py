"""View Rendering - thin wrapper over Jinja2Templates.

Invariants:
    - render(request, view, data) is the only way routes produce HTML
    - data always carries "title"; "users", "user", "errors" as the view needs them

Design Decisions:
    - Templates resolved once per directory (lru_cache), bundled dir by default
    - View names as constants: routes and tests refer to one spelling
"""

from functools import lru_cache
from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from roster.config import get_settings

_BUNDLED_TEMPLATES = Path(__file__).resolve().parent.parent / "templates"

INDEX = "index.html"
CREATE_USER = "create_user.html"
UPDATE_USER = "update_user.html"
SEARCH = "search.html"


@lru_cache
def get_templates(directory: str | None = None) -> Jinja2Templates:
    return Jinja2Templates(directory=directory or str(_BUNDLED_TEMPLATES))


def render(
    request: Request, view: str, data: dict, status_code: int = 200,
) -> Response:
    """Render a view with its data payload."""
    templates = get_templates(get_settings().templates_dir)
    return templates.TemplateResponse(
        request, view, data, status_code=status_code,
    )
