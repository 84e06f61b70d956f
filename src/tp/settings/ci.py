# -*- coding: utf-8 -*-
"""
CI/Testing settings - inherits from development with an in-memory SQLite
database and a scratch directory for journey documents.

Use this for test runs: DJANGO_SETTINGS_MODULE=tp.settings.ci
"""
import tempfile

from .development import *

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

# Tests that write documents override this per test with a fresh
# temporary directory.
JOURNEY_DATA_PATH = os.path.join( tempfile.gettempdir(), 'tp-ci-journeys' )

# Minimal logging for cleaner test output
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{levelname} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'WARNING',
        },
        'tp': {
            'handlers': ['console'],
            'level': 'WARNING',
        },
    },
}
