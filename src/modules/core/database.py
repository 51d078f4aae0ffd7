"""Database connection lifecycle.

``check_database_connection`` runs once at process startup (see
``config.wsgi``); ``close_database_connections`` runs at shutdown.
Per-request connection handling stays with Django.
"""

from __future__ import annotations

import structlog
from django.core.exceptions import ImproperlyConfigured
from django.db import DatabaseError, connections

logger = structlog.get_logger(__name__)


def check_database_connection(alias: str = "default", fail_fast: bool = False) -> bool:
    """Open a connection to ``alias`` and report whether it succeeded.

    A failure is logged and reported as ``False`` so the process keeps
    serving; with ``fail_fast`` it raises ``ImproperlyConfigured`` instead.
    """
    try:
        connections[alias].ensure_connection()
    except DatabaseError as exc:
        logger.error("database_connection_failed", alias=alias, error=str(exc))
        if fail_fast:
            raise ImproperlyConfigured(
                f"Database '{alias}' is unreachable: {exc}"
            ) from exc
        return False

    logger.info("database_connected", alias=alias)
    return True


def close_database_connections() -> None:
    """Close every open connection held by this process."""
    connections.close_all()
    logger.info("database_connections_closed")
