"""
Django settings for the starships inventory.
"""
import os
from pathlib import Path

from .config import (
    default_connection_string,
    resolve_connection_string,
    should_ensure_data_directory,
    sqlite_path_from_connection_string,
)

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "django-insecure-starships-dev-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "1") == "1"

ALLOWED_HOSTS = [h for h in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",") if h]


INSTALLED_APPS = [
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'rest_framework',
    'starships',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'starships_site.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'starships_site.wsgi.application'


# Database
_LOCAL_CONNECTION = default_connection_string(BASE_DIR) if DEBUG else None
DEFAULT_CONNECTION = resolve_connection_string(default=_LOCAL_CONNECTION)

STARSHIPS_DATABASE_PATH = sqlite_path_from_connection_string(DEFAULT_CONNECTION)
STARSHIPS_ENSURE_DATA_DIR = should_ensure_data_directory(
    DEBUG, using_default=DEFAULT_CONNECTION == _LOCAL_CONNECTION
)

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': STARSHIPS_DATABASE_PATH,
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.AutoField'

MESSAGE_STORAGE = 'django.contrib.messages.storage.cookie.CookieStorage'


# Internationalization
LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True


STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'


REST_FRAMEWORK = {
    'UNAUTHENTICATED_USER': None,
}


# Seeding
STARSHIPS_SEED_ON_STARTUP = os.environ.get("STARSHIPS_SEED_ON_STARTUP", "1") == "1"
STARSHIPS_SWAPI_BASE_URL = os.environ.get("STARSHIPS_SWAPI_BASE_URL", "https://swapi.dev/api/")
STARSHIPS_SWAPI_FIRST_PAGE = "starships/"
STARSHIPS_SWAPI_TIMEOUT = float(os.environ.get("STARSHIPS_SWAPI_TIMEOUT", "10"))
STARSHIPS_USER_AGENT = "starships-inventory/1.0"


LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'starships': {
            'handlers': ['console'],
            'level': os.environ.get("DJANGO_LOG_LEVEL", "INFO"),
            'propagate': False,
        },
        'starships_site': {
            'handlers': ['console'],
            'level': os.environ.get("DJANGO_LOG_LEVEL", "INFO"),
            'propagate': False,
        },
    },
}
