"""
Django settings for running the Countman test suite.

SQLite runs from a file so threaded tests get real concurrent connections.
Set COUNTMAN_TEST_DB_ENGINE=postgresql (plus the PG* env vars) to run
the suite against PostgreSQL.
"""

import os
import tempfile

SECRET_KEY = 'countman-tests'
DEBUG = True
USE_TZ = True
TIME_ZONE = 'UTC'

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'rest_framework',
    'countman',
]

MIDDLEWARE = [
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
]

ROOT_URLCONF = 'countman.tests.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

if os.environ.get('COUNTMAN_TEST_DB_ENGINE') == 'postgresql':
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': os.environ.get('PGDATABASE', 'countman'),
            'USER': os.environ.get('PGUSER', 'postgres'),
            'PASSWORD': os.environ.get('PGPASSWORD', ''),
            'HOST': os.environ.get('PGHOST', 'localhost'),
            'PORT': os.environ.get('PGPORT', '5432'),
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': os.path.join(tempfile.gettempdir(), 'countman.sqlite3'),
            'OPTIONS': {'timeout': 30},
            'TEST': {'NAME': os.path.join(tempfile.gettempdir(), 'test_countman.sqlite3')},
        }
    }

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

COUNTMAN = {
    'PRODUCT_RESOLVER': 'countman.tests.fakes.FakeCatalog',
    'VALIDATE_LOCATIONS': True,
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {'class': 'logging.StreamHandler'},
    },
    'loggers': {
        'countman': {'handlers': ['console'], 'level': 'WARNING'},
    },
}
