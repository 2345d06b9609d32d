"""ASGI config for the notice panel project."""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "notice_panel.settings")

application = get_asgi_application()
