"""
ASGI config for CatalogAdminService project.
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "CatalogAdminService.settings.dev")

application = get_asgi_application()
