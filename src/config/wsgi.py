"""WSGI entry point.

Exposes ``application`` for WSGI servers and ``manage.py runserver``.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

application = get_wsgi_application()

from modules.core.database import connect_db  # noqa: E402

connect_db()
