"""
==========================================================
LOGGING CONFIGURATION
==========================================================
Structured logging for the whole site.

Logs to:
  logs/app.log          — All app-level logs (views, services, tracking)
  logs/errors.log       — ERROR and CRITICAL only
  logs/requests.log     — Every HTTP request (middleware)
  logs/debug.log        — DEBUG-level everything (dev only)

Console output in development shows compact logs.
"""

from pathlib import Path

# Base directory for logs
LOG_DIR = Path(__file__).resolve().parent.parent / 'logs'
LOG_DIR.mkdir(exist_ok=True)

APP_LOGGERS = (
    'apps.consultants',
    'apps.core',
    'apps.seo',
    'apps.analytics',
)


def _app_logger(debug):
    return {
        'handlers': ['console', 'app_file', 'error_file'],
        'level': 'DEBUG' if debug else 'INFO',
        'propagate': False,
    }


def get_logging_config(debug=True):
    """Return the full LOGGING dict for Django settings."""
    return {
        'version': 1,
        'disable_existing_loggers': False,

        # --- Formatters ---
        'formatters': {
            'verbose': {
                'format': '{asctime} [{levelname}] {name} | {module}.{funcName}:{lineno} | {message}',
                'style': '{',
                'datefmt': '%Y-%m-%d %H:%M:%S',
            },
            'simple': {
                'format': '{asctime} [{levelname}] {message}',
                'style': '{',
                'datefmt': '%H:%M:%S',
            },
        },

        # --- Filters ---
        'filters': {
            'require_debug_true': {
                '()': 'django.utils.log.RequireDebugTrue',
            },
        },

        # --- Handlers ---
        'handlers': {
            # Console (development)
            'console': {
                'level': 'DEBUG' if debug else 'INFO',
                'class': 'logging.StreamHandler',
                'formatter': 'simple',
            },

            # App log — all application activity
            'app_file': {
                'level': 'INFO',
                'class': 'logging.handlers.RotatingFileHandler',
                'filename': str(LOG_DIR / 'app.log'),
                'maxBytes': 5 * 1024 * 1024,   # 5MB
                'backupCount': 5,
                'formatter': 'verbose',
                'encoding': 'utf-8',
            },

            # Error log — ERROR + CRITICAL only
            'error_file': {
                'level': 'ERROR',
                'class': 'logging.handlers.RotatingFileHandler',
                'filename': str(LOG_DIR / 'errors.log'),
                'maxBytes': 5 * 1024 * 1024,
                'backupCount': 10,
                'formatter': 'verbose',
                'encoding': 'utf-8',
            },

            # Request log — HTTP traffic
            'request_file': {
                'level': 'INFO',
                'class': 'logging.handlers.RotatingFileHandler',
                'filename': str(LOG_DIR / 'requests.log'),
                'maxBytes': 5 * 1024 * 1024,
                'backupCount': 3,
                'formatter': 'verbose',
                'encoding': 'utf-8',
            },

            # Debug log — everything (dev only)
            'debug_file': {
                'level': 'DEBUG',
                'class': 'logging.handlers.RotatingFileHandler',
                'filename': str(LOG_DIR / 'debug.log'),
                'maxBytes': 10 * 1024 * 1024,
                'backupCount': 2,
                'formatter': 'verbose',
                'filters': ['require_debug_true'],
                'encoding': 'utf-8',
            },
        },

        # --- Loggers ---
        'loggers': {
            # Django internals
            'django': {
                'handlers': ['console', 'app_file', 'error_file'],
                'level': 'INFO',
                'propagate': False,
            },
            'django.request': {
                'handlers': ['request_file', 'error_file', 'console'],
                'level': 'INFO',
                'propagate': False,
            },
            'django.template': {
                'handlers': ['debug_file'],
                'level': 'DEBUG' if debug else 'WARNING',
                'propagate': False,
            },

            # --- Application Loggers (per-app) ---
            'apps': _app_logger(debug),
            **{name: _app_logger(debug) for name in APP_LOGGERS},

            # Middleware logger
            'middleware': {
                'handlers': ['console', 'request_file', 'error_file'],
                'level': 'DEBUG' if debug else 'INFO',
                'propagate': False,
            },

            # Health check / diagnostics
            'diagnostics': {
                'handlers': ['console', 'app_file'],
                'level': 'DEBUG',
                'propagate': False,
            },
        },
    }
