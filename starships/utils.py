import logging
from urllib.parse import urljoin

import requests
from django.conf import settings
from rest_framework import serializers

from .exceptions import SeedFetchFailed
from .serializers import RemotePageSerializer

logger = logging.getLogger(__name__)


def build_session(user_agent=None):
    session = requests.Session()
    session.headers.update({
        'User-Agent': user_agent or settings.STARSHIPS_USER_AGENT,
        'Accept': 'application/json',
    })
    return session


def fetch_page(session, url, timeout):
    """
    GET one page and return its validated ``{"next", "results"}`` dict,
    or None for a null body.
    """
    try:
        response = session.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout:
        raise SeedFetchFailed(f"Request to {url} timed out")
    except requests.exceptions.RequestException as e:
        raise SeedFetchFailed(f"Could not fetch {url}: {str(e)}")

    content_type = response.headers.get('Content-Type', '')
    if 'json' not in content_type:
        raise SeedFetchFailed(f"Unsupported content type {content_type!r} from {url}")

    try:
        payload = response.json()
    except ValueError as e:
        raise SeedFetchFailed(f"Malformed JSON from {url}: {str(e)}")

    if payload is None:
        return None

    serializer = RemotePageSerializer(data=payload)
    try:
        serializer.is_valid(raise_exception=True)
    except serializers.ValidationError as e:
        raise SeedFetchFailed(f"Malformed page from {url}: {e.detail}")
    return serializer.validated_data


def fetch_remote_starships(cancel_event=None, session=None, base_url=None, first_page=None, timeout=None):
    """
    Walk the paginated starships collection and return every normalized record.

    ``cancel_event`` (a threading.Event) is checked before each page request.
    Any failure raises SeedFetchFailed and discards pages already fetched.
    """
    base_url = base_url or settings.STARSHIPS_SWAPI_BASE_URL
    url = urljoin(base_url, first_page or settings.STARSHIPS_SWAPI_FIRST_PAGE)
    timeout = timeout or settings.STARSHIPS_SWAPI_TIMEOUT

    owns_session = session is None
    if owns_session:
        session = build_session()

    records = []
    visited = set()
    try:
        while url:
            if url in visited:
                raise SeedFetchFailed(f"Pagination loops back to {url}")
            visited.add(url)

            if cancel_event is not None and cancel_event.is_set():
                raise SeedFetchFailed("Remote fetch cancelled")

            page = fetch_page(session, url, timeout)
            if page is None:
                break

            records.extend(page['results'])
            logger.debug("Fetched %s starships from %s", len(page['results']), url)

            # next is absolute on SWAPI; relative references resolve against the base
            url = urljoin(base_url, page['next']) if page['next'] else None
    finally:
        if owns_session:
            session.close()

    return records
