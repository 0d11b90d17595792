import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / '.env')


def env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'dev-only-insecure-key')

DEBUG = env_bool('DJANGO_DEBUG', True)

ALLOWED_HOSTS = [h.strip() for h in os.environ.get('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1,testserver').split(',') if h.strip()]

INSTALLED_APPS = [
    'django.contrib.staticfiles',
    'apps.districts',
    'apps.performance',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'mgnrega_dashboard.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
            ],
        },
    },
]

WSGI_APPLICATION = 'mgnrega_dashboard.wsgi.application'

# Presentation tier only: all data comes from the backend API
DATABASES = {}

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'mgnrega-dashboard',
    }
}

LANGUAGE_CODE = 'en-in'
TIME_ZONE = 'Asia/Kolkata'
USE_I18N = False
USE_TZ = True

STATIC_URL = 'static/'

# Backend API
# An explicit override wins; otherwise production talks to its own origin
# and development talks to the local backend.
MGNREGA_API_BASE_URL = os.environ.get('MGNREGA_API_BASE_URL') or None
MGNREGA_DEV_API_BASE_URL = 'http://localhost:9090'
MGNREGA_API_TIMEOUT = int(os.environ.get('MGNREGA_API_TIMEOUT', '30'))
MGNREGA_DEFAULT_STATE = os.environ.get('MGNREGA_DEFAULT_STATE', 'Maharashtra')
MGNREGA_PERFORMANCE_LIMIT = int(os.environ.get('MGNREGA_PERFORMANCE_LIMIT', '12'))
MGNREGA_GEOCODER_URL = os.environ.get('MGNREGA_GEOCODER_URL', 'https://nominatim.openstreetmap.org/reverse')
MGNREGA_GEOCODER_TIMEOUT = int(os.environ.get('MGNREGA_GEOCODER_TIMEOUT', '10'))

DISTRICTS_CACHE_TIMEOUT = 3600  # 1 hour

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{asctime} {levelname} {name}: {message}',
            'style': '{',
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
        'apps': {
            'handlers': ['console'],
            'level': os.environ.get('DJANGO_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
    },
}
