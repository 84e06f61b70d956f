# -*- coding: utf-8 -*-
"""
Base settings shared by every environment.  Environment-specific modules
(development, ci) import everything from here and override.
"""
import os
from pathlib import Path

BASE_DIR = Path( __file__ ).resolve().parent.parent.parent

SECRET_KEY = os.environ.get( 'TP_SECRET_KEY', 'tp-insecure-development-key' )

DEBUG = False

ALLOWED_HOSTS = [ h for h in os.environ.get( 'TP_ALLOWED_HOSTS', 'localhost' ).split( ',' ) if h ]

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'rest_framework',
    'tp.apps.common',
    'tp.apps.journeys',
]

MIDDLEWARE = []

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.path.join( BASE_DIR, 'tp.sqlite3' ),
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

# ====================
# Journey documents

# One serialized document per journey lives in this directory.
JOURNEY_DATA_PATH = os.environ.get(
    'TP_JOURNEY_DATA_PATH',
    os.path.join( BASE_DIR, 'data' ),
)
JOURNEY_DOCUMENT_EXTENSION = '.json'

# Textual date format accepted when adding countries and locations.
JOURNEY_DATE_INPUT_FORMAT = '%d-%m-%Y'
JOURNEY_DATE_INPUT_FORMAT_DISPLAY = 'dd-mm-yyyy'

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{asctime} {levelname} [{name}] {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'WARNING',
        },
        'tp': {
            'handlers': ['console'],
            'level': 'INFO',
        },
    },
}
