"""
WSGI config for the starships inventory.

The store is migrated and seeded before the application is handed to the
server, so no request can observe an empty collection.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'starships_site.settings')

application = get_wsgi_application()

from starships.startup import bootstrap  # noqa: E402

bootstrap()
