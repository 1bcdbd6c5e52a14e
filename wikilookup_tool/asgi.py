"""ASGI config for wikilookup_tool.

The lookup view is asynchronous, so serving through ASGI lets concurrent
lookups share one event loop.
"""

import os

from django.core.asgi import get_asgi_application  # type: ignore

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'wikilookup_tool.settings')

application = get_asgi_application()
