"""WSGI entry point.

Checks the database once at startup and closes connections on shutdown.
"""

import atexit
import os

from django.conf import settings
from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

application = get_wsgi_application()

from modules.core.database import (  # noqa: E402
    check_database_connection,
    close_database_connections,
)

check_database_connection(fail_fast=settings.DATABASE_FAIL_FAST)
atexit.register(close_database_connections)
