import os
import sys
from pathlib import Path
from dotenv import load_dotenv
from django.core.exceptions import ImproperlyConfigured

BASE_DIR = Path(__file__).resolve().parent.parent
# Try root project .env (one directory up from BASE_DIR) first, then local
root_env = (BASE_DIR.parent / '.env')
local_env = (BASE_DIR / '.env')
if root_env.exists():
    load_dotenv(root_env)
elif local_env.exists():
    load_dotenv(local_env)

# ---------------------------------------------------------------------------
# SECRET KEY HANDLING
# Prefer DJANGO_SECRET_KEY, fall back to SECRET_KEY.
# In production (DEBUG=False) we require a non-default, non-empty key.
# ---------------------------------------------------------------------------
_candidate_key = (
    os.getenv('DJANGO_SECRET_KEY')
    or os.getenv('SECRET_KEY')
    or ''
)

SECRET_KEY = _candidate_key if _candidate_key else 'dev-secret-key'
DEBUG = os.getenv('DEBUG', 'True') == 'True'
ALLOWED_HOSTS = os.getenv('ALLOWED_HOSTS', '*').split(',')

if (not SECRET_KEY or SECRET_KEY == 'dev-secret-key') and not DEBUG:
    raise ImproperlyConfigured(
        'SECRET_KEY is missing or using insecure default. Set DJANGO_SECRET_KEY or SECRET_KEY env var.'
    )

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'django.contrib.staticfiles',
    'rest_framework',
    'drf_spectacular',
    'apps.common',
    'apps.storage',
    'apps.gateway',
    'apps.catalog',
    'apps.carts',
    'apps.wishlist',
    'apps.accounts',
    'apps.checkout',
    'apps.delivery',
    'apps.dashboard',
    'apps.pages',
]

REST_FRAMEWORK = {
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'DEFAULT_PARSER_CLASSES': [
        'rest_framework.parsers.JSONParser',
    ],
    # Identity lives in the backend; visitors are tracked through the session only
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.AllowAny',
    ],
    'UNAUTHENTICATED_USER': None,
    'EXCEPTION_HANDLER': 'apps.api.exceptions.global_exception_handler',
    'DEFAULT_SCHEMA_CLASS': 'drf_spectacular.openapi.AutoSchema',
}

SPECTACULAR_SETTINGS = {
    'TITLE': 'D&L Furnitech Storefront API',
    'DESCRIPTION': 'Storefront, admin console and delivery portal endpoints backed by the D&L services API.',
    'VERSION': '1.0.0',
    'SERVE_INCLUDE_SCHEMA': False,
    'COMPONENT_SPLIT_REQUEST': True,
    'SCHEMA_PATH_PREFIX': r'/api',
    'SERVE_PERMISSIONS': [],
}

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'storefront.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
            ],
        },
    },
]

WSGI_APPLICATION = 'storefront.wsgi.application'

# No relational data: products, orders and accounts live in the backend service
DATABASES = {}

# ---------------------------------------------------------------------------
# Backend service
# ---------------------------------------------------------------------------
BACKEND_API_URL = os.getenv('BACKEND_API_URL', 'http://localhost:8000/api')
BACKEND_TIMEOUT = float(os.getenv('BACKEND_TIMEOUT', '10'))
PAYMENT_GATEWAY_KEY_ID = os.getenv('PAYMENT_GATEWAY_KEY_ID', '')

# Visitor storage keys for the cart and wishlist JSON arrays
CART_STORAGE_KEY = os.getenv('CART_STORAGE_KEY', 'danl_cart')
WISHLIST_STORAGE_KEY = os.getenv('WISHLIST_STORAGE_KEY', 'danl_wishlist')

# Caching / sessions (Redis by default)
# Sessions live in the cache so the storefront needs no database.
# IGNORE_EXCEPTIONS turns a Redis outage into empty reads and unsaved writes.
REDIS_URL = os.getenv('REDIS_URL', 'redis://redis:6379/1')
CACHE_TTL = int(os.getenv('CACHE_TTL', '300'))  # seconds

CACHES = {
    'default': {
        'BACKEND': 'django_redis.cache.RedisCache',
        'LOCATION': REDIS_URL,
        'OPTIONS': {
            'CLIENT_CLASS': 'django_redis.client.DefaultClient',
            'IGNORE_EXCEPTIONS': True,
        },
        'KEY_PREFIX': os.getenv('CACHE_KEY_PREFIX', 'storefront'),
        'TIMEOUT': CACHE_TTL,
    }
}

SESSION_ENGINE = 'django.contrib.sessions.backends.cache'
SESSION_CACHE_ALIAS = 'default'
# Cart and wishlist have no expiry of their own; keep the session for a year
SESSION_COOKIE_AGE = int(os.getenv('SESSION_COOKIE_AGE', str(60 * 60 * 24 * 365)))
SESSION_SAVE_EVERY_REQUEST = False

USING_PYTEST = (
    os.getenv('PYTEST_CURRENT_TEST') is not None
    or any(os.path.basename(arg).startswith('pytest') for arg in sys.argv)
    or 'pytest' in sys.modules
)

if 'test' in sys.argv or USING_PYTEST:
    CACHES = {
        'default': {
            'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
            'LOCATION': 'storefront-test-cache',
            'TIMEOUT': 60,
        }
    }

LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'plain': {
            'format': '%(asctime)s %(levelname)s %(name)s %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'plain',
        },
    },
    'loggers': {
        'apps': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'Asia/Kolkata'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'
STATIC_ROOT = os.getenv('STATIC_ROOT', str(BASE_DIR / 'staticfiles'))
STATICFILES_DIRS = [BASE_DIR / 'static'] if (BASE_DIR / 'static').exists() else []
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'
