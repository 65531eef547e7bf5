"""
Django settings for the archive test suite.
"""
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = 'archive-test-secret-key'
DEBUG = False
ALLOWED_HOSTS = ['*']

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'rest_framework',
    'archive',
]

MIDDLEWARE = [
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'archive.urls'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'
USE_TZ = True
TIME_ZONE = 'UTC'

REST_FRAMEWORK = {
    'DEFAULT_RENDERER_CLASSES': ['archive.utils.renderers.ORJSONRenderer'],
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': ['rest_framework.permissions.AllowAny'],
    'UNAUTHENTICATED_USER': None,
}

# Archive
ARCHIVE_STORAGE_DIR = BASE_DIR / 'storage' / 'test-objects'
ARCHIVE_IMPORT_DIR = BASE_DIR / 'import'
ARCHIVE_INGEST_WORKERS = 1
ARCHIVE_DECODE_FORCE = False
ARCHIVE_BULK_DATA_THRESHOLD = 1024
ARCHIVE_CONTENT_LOCATION = 'localhost'

# Leave logging to pytest's caplog
ARCHIVE_CONFIGURE_LOGGING = False
ARCHIVE_LOG_LEVEL = 'DEBUG'
