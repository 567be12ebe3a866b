"""
Test settings for northwind project.

Runs against an in-memory SQLite database so the suite needs no server.
"""

from .base import *

DEBUG = False

ALLOWED_HOSTS = ['testserver', 'localhost', '127.0.0.1']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

CATALOG_CONFIG = {
    **CATALOG_CONFIG,
    'PRESERVE_REFERENCES': False,
    'API_URL': 'http://catalog.test',
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'CRITICAL',
    },
}
