"""Single-origin CORS policy.

``django-cors-headers`` asks its ``check_request_enabled`` signal whether a
request's origin may be served; ``allow_frontend_origin`` answers with
``is_allowed_origin`` against the configured ``FRONTEND_URL``.
"""

from __future__ import annotations

from typing import Optional

from django.conf import settings
from django.http import HttpRequest


def is_allowed_origin(origin: Optional[str], allowed_origin: Optional[str]) -> bool:
    """Return ``True`` when ``origin`` is exactly the configured front-end origin.

    Trailing slashes are ignored on both sides; a missing origin or an
    unconfigured front end never matches.
    """
    if not origin or not allowed_origin:
        return False
    return origin.rstrip("/") == allowed_origin.rstrip("/")


def allow_frontend_origin(sender, request: HttpRequest, **kwargs) -> bool:
    return is_allowed_origin(request.headers.get("Origin"), settings.FRONTEND_URL)
