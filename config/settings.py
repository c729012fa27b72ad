"""
Django settings for the consulting brochure site.

Environment overrides:
    DJANGO_SECRET_KEY, DJANGO_DEBUG, DJANGO_ALLOWED_HOSTS,
    GA_MEASUREMENT_ID, ANALYTICS_SINK, CONTACT_SUBMIT_DELAY
"""

import os
import sys
from pathlib import Path

from config.logging_config import get_logging_config

BASE_DIR = Path(__file__).resolve().parent.parent

# Apps import each other as top-level packages (``from consultants.services import ...``)
sys.path.insert(0, str(BASE_DIR / 'apps'))

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'django-insecure-change-me-in-production')

DEBUG = os.environ.get('DJANGO_DEBUG', 'False').lower() in ('1', 'true', 'yes')

ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1,testserver,eliteenterprisetcg.com').split(',')
    if host.strip()
]

INSTALLED_APPS = [
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'django.contrib.sitemaps',
    'django_browser_reload',

    # Local apps
    'core',
    'consultants',
    'seo',
    'analytics',
]

MIDDLEWARE = [
    'config.middleware.RequestLoggingMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    'analytics.middleware.AnalyticsMiddleware',
]

if DEBUG:
    MIDDLEWARE.append('django_browser_reload.middleware.BrowserReloadMiddleware')

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.messages.context_processors.messages',
                'config.context_processors.site_config',
            ],
        },
    },
]

WSGI_APPLICATION = 'config.wsgi.application'

# The site is fully static content; nothing is persisted.
DATABASES = {}

# Cookie storage keeps flash messages working without sessions.
MESSAGE_STORAGE = 'django.contrib.messages.storage.cookie.CookieStorage'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'America/New_York'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'
STATICFILES_DIRS = [BASE_DIR / 'static']
STATIC_ROOT = BASE_DIR / 'staticfiles'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# --- Analytics ---
GA_MEASUREMENT_ID = os.environ.get('GA_MEASUREMENT_ID', '')
ANALYTICS_SINK = os.environ.get('ANALYTICS_SINK', 'analytics.tracking.NullSink')

# --- Contact form ---
# Placeholder delivery delay in seconds (no backend is wired up yet).
CONTACT_SUBMIT_DELAY = float(os.environ.get('CONTACT_SUBMIT_DELAY', '1.0'))

LOGGING = get_logging_config(debug=DEBUG)
