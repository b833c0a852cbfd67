import logging
import os
import sys

from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)

PRIMARY_SETTING = "STARSHIPS_DEFAULT_CONNECTION"
# Azure App Service exposes "Custom" connection strings under this name
FALLBACK_SETTING = "CUSTOMCONNSTR_DefaultConnection"

DATA_SOURCE_KEY = "data source="


def resolve_connection_string(environ=None, default=None):
    """
    Resolve the store connection string.

    The primary setting wins, then the App Service fallback variable, then
    ``default``. Raises ImproperlyConfigured when nothing is set.
    """
    if environ is None:
        environ = os.environ

    value = environ.get(PRIMARY_SETTING) or environ.get(FALLBACK_SETTING) or default
    if not value or not value.strip():
        raise ImproperlyConfigured("DefaultConnection is not configured.")
    return value.strip()


def sqlite_path_from_connection_string(connection_string: str) -> str:
    """
    Extract the database file from ``Data Source=<path>;...``.

    A string without the ``Data Source=`` key is taken as a bare path.
    """
    idx = connection_string.lower().find(DATA_SOURCE_KEY)
    if idx < 0:
        return connection_string.strip().strip('"')

    value = connection_string[idx + len(DATA_SOURCE_KEY):]
    end = value.find(';')
    if end >= 0:
        value = value[:end]
    return value.strip().strip('"')


def default_connection_string(base_dir) -> str:
    """Local development store under ``<base_dir>/data``."""
    return f"Data Source={os.path.join(base_dir, 'data', 'starships.db')}"


def should_ensure_data_directory(debug: bool, environ=None, platform=None, using_default=False) -> bool:
    if using_default:
        return True
    if environ is None:
        environ = os.environ
    if platform is None:
        platform = sys.platform

    if environ.get("STARSHIPS_ENSURE_DATA_DIR") == "1":
        return True
    return not debug and platform.startswith("linux")


def ensure_data_directory(db_path: str):
    """Create the parent directory of the SQLite file if it is missing."""
    directory = os.path.dirname(db_path)
    if not directory:
        return None

    os.makedirs(directory, exist_ok=True)
    logger.info("Ensured SQLite data directory exists at %s", directory)
    return directory
