"""WSGI config for the ewm project."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "ewm.settings")

application = get_wsgi_application()
