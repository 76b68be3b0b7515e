"""Database connection bootstrap.

``connect_db`` is called once when the WSGI/ASGI application is built.
A failing database does not abort start-up: the failure is logged and
the process keeps serving (requests that touch the database will fail
on their own).
"""

from __future__ import annotations

import structlog
from django.conf import settings
from django.core.management import call_command
from django.db import DEFAULT_DB_ALIAS, DatabaseError, connections

logger = structlog.get_logger(__name__)


def connect_db(alias: str = DEFAULT_DB_ALIAS) -> bool:
    """Open the connection for ``alias`` and optionally sync the schema.

    Returns ``True`` when the database is reachable, ``False`` otherwise.
    """
    connection = connections[alias]
    try:
        connection.ensure_connection()
    except DatabaseError as exc:
        logger.error(
            "database_connection_failed",
            alias=alias,
            error=str(exc),
        )
        return False

    if settings.DATABASE_SYNC_ON_STARTUP:
        call_command("migrate", database=alias, interactive=False, verbosity=0)
        logger.info("database_synced", alias=alias)

    logger.info("database_connected", alias=alias, vendor=connection.vendor)
    return True
