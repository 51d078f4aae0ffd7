"""DRF exception handler producing the API's error envelope.

Framework errors (malformed JSON, unsupported method, ...) keep their
status code and are rendered as ``{"error": <detail>}``.  Database errors
that escape a view are logged and rendered as a 500 with the same
envelope instead of Django's HTML error page.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.db import DatabaseError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = structlog.get_logger(__name__)


def _flatten_detail(data: Any) -> Any:
    if isinstance(data, dict) and set(data) == {"detail"}:
        return data["detail"]
    return data


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    response = exception_handler(exc, context)
    if response is not None:
        response.data = {"error": _flatten_detail(response.data)}
        return response

    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.error(
            "database_error",
            view=view.__class__.__name__ if view is not None else None,
            error=str(exc),
        )
        set_rollback()
        return Response(
            {"error": "Internal Server Error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return None
