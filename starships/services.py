import logging

from django.db import DatabaseError, transaction

from .exceptions import SeedFallbackFailed, SeedFetchFailed
from .models import Starship
from .utils import fetch_remote_starships

logger = logging.getLogger(__name__)

SOURCE_REMOTE = 'remote'
SOURCE_FALLBACK = 'fallback'

FALLBACK_STARSHIPS = [
    {
        'name': 'X-Wing',
        'model': 'T-65B',
        'manufacturer': 'Incom Corporation',
        'starship_class': 'Starfighter',
        'crew': '1',
        'passengers': '0',
    },
    {
        'name': 'Millennium Falcon',
        'model': 'YT-1300',
        'manufacturer': 'Corellian Engineering Corporation',
        'starship_class': 'Light Freighter',
        'crew': '2',
        'passengers': '6',
    },
    {
        'name': 'TIE Fighter',
        'model': 'Twin Ion Engine/Ln',
        'manufacturer': 'Sienar Fleet Systems',
        'starship_class': 'Starfighter',
        'crew': '1',
        'passengers': '0',
    },
]


def seed_starships(cancel_event=None, fetch=fetch_remote_starships):
    """
    Populate an empty store, from SWAPI when it answers and from the
    embedded fallback set otherwise.

    Returns the source used, or None when the store already had data.
    Only a failure to commit the fallback set is raised.
    """
    if Starship.objects.exists():
        logger.debug("Starships already present, skipping seed")
        return None

    records = []
    try:
        records = fetch(cancel_event=cancel_event)
        if not records:
            logger.warning("SWAPI returned no starships; falling back to embedded seed.")
    except SeedFetchFailed as exc:
        logger.warning("SWAPI seed failed; falling back to embedded seed: %s", exc, exc_info=exc)

    if records:
        # ids are assigned by the database
        with transaction.atomic():
            Starship.objects.bulk_create([Starship(**data) for data in records])
        logger.info("Seeded %s starships from %s.", len(records), SOURCE_REMOTE)
        return SOURCE_REMOTE

    try:
        with transaction.atomic():
            Starship.objects.bulk_create([Starship(**data) for data in FALLBACK_STARSHIPS])
    except DatabaseError as exc:
        logger.exception("Could not commit embedded starship seed")
        raise SeedFallbackFailed("Embedded starship seed could not be committed") from exc

    logger.info("Seeded %s starships from %s.", len(FALLBACK_STARSHIPS), SOURCE_FALLBACK)
    return SOURCE_FALLBACK
