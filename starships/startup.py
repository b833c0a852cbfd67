import logging

from django.conf import settings
from django.core.management import call_command

from starships_site.config import ensure_data_directory

from .services import seed_starships

logger = logging.getLogger(__name__)


def bootstrap(cancel_event=None):
    """
    Prepare the store before the first request: data directory, schema, seed.

    SeedFallbackFailed propagates so the process fails to start.
    """
    if settings.STARSHIPS_ENSURE_DATA_DIR:
        ensure_data_directory(settings.STARSHIPS_DATABASE_PATH)

    call_command('migrate', interactive=False, verbosity=0)

    if not settings.STARSHIPS_SEED_ON_STARTUP:
        logger.info("Startup seeding disabled")
        return None

    return seed_starships(cancel_event=cancel_event)
