"""ASGI config for the ewm project."""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "ewm.settings")

application = get_asgi_application()
