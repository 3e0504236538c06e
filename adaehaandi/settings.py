from pathlib import Path
import os
from datetime import timedelta
from dotenv import load_dotenv
from apps.common.config import get_env_list, get_env_bool, get_env_int, get_env_url

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent

# Load environment variables from .env file
load_dotenv(BASE_DIR / '.env')


# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.environ.get(
    'DJANGO_SECRET_KEY',
    'django-insecure-5v!k2h@q8e7#adaehaandi-dev-only-7m$1x^w0r9t3p&z'  # Fallback for development only
)

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = get_env_bool('DJANGO_DEBUG', True)

ALLOWED_HOSTS = get_env_list('DJANGO_ALLOWED_HOSTS', '*')

# CORS: the public site posts forms from its own origin
CORS_ALLOW_ALL_ORIGINS = get_env_bool('CORS_ALLOW_ALL_ORIGINS', True)
CORS_ALLOWED_ORIGINS = get_env_list('CORS_ALLOWED_ORIGINS', 'http://localhost:3000')

# Application definition

INSTALLED_APPS = [
    "rest_framework",
    "rest_framework_simplejwt",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "corsheaders",
    "apps.inquiries",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "app_logging.middleware.StructlogRequestContextMiddleware",  # Bind request context to structlog
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "adaehaandi.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "adaehaandi.wsgi.application"
ASGI_APPLICATION = "adaehaandi.asgi.application"


# Database
# Supports both SQLite (development) and PostgreSQL (production)

DB_ENGINE = os.environ.get('DB_ENGINE', 'sqlite3')

if DB_ENGINE == 'postgresql':
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": os.environ.get('DB_NAME', 'adaehaandi'),
            "USER": os.environ.get('DB_USER', 'postgres'),
            "PASSWORD": os.environ.get('DB_PASSWORD', ''),
            "HOST": os.environ.get('DB_HOST', 'localhost'),
            "PORT": os.environ.get('DB_PORT', '5432'),
            "OPTIONS": {
                "connect_timeout": 10,
            },
        }
    }
else:
    # Default to SQLite for development
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }


AUTH_PASSWORD_VALIDATORS = [
    {
        "NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator",
    },
    {
        "NAME": "django.contrib.auth.password_validation.MinimumLengthValidator",
    },
    {
        "NAME": "django.contrib.auth.password_validation.CommonPasswordValidator",
    },
    {
        "NAME": "django.contrib.auth.password_validation.NumericPasswordValidator",
    },
]


# Internationalization

LANGUAGE_CODE = "en-us"

TIME_ZONE = "UTC"

USE_I18N = True

USE_TZ = True


STATIC_URL = "static/"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Celery Configuration
CELERY_BROKER_URL = os.environ.get('CELERY_BROKER_URL', 'redis://127.0.0.1:6379')
CELERY_RESULT_BACKEND = os.environ.get('CELERY_RESULT_BACKEND', 'redis://127.0.0.1:6379')
# Run tasks in-process when no worker is deployed
CELERY_TASK_ALWAYS_EAGER = get_env_bool('CELERY_TASK_ALWAYS_EAGER', False)
CELERY_TASK_IGNORE_RESULT = True

# Redis (shared rate-limit counters)
REDIS_HOST = os.environ.get('REDIS_HOST', 'localhost')
REDIS_PORT = get_env_int('REDIS_PORT', 6379)
REDIS_DB = get_env_int('REDIS_DB', 0)

# Inquiry intake
INQUIRY_RATE_LIMIT = {
    'BACKEND': os.environ.get('INQUIRY_RATE_LIMIT_BACKEND', 'memory'),  # memory | redis
    'MAX_REQUESTS': get_env_int('INQUIRY_RATE_LIMIT_MAX', 5),
    'WINDOW_SECONDS': get_env_int('INQUIRY_RATE_LIMIT_WINDOW', 60),
    'MAX_TRACKED_CLIENTS': get_env_int('INQUIRY_RATE_LIMIT_MAX_TRACKED_CLIENTS', 10000),
}

# Inquiry notification email (Resend). No API key means notifications are skipped.
RESEND_API_KEY = os.environ.get('RESEND_API_KEY', '')
RESEND_API_URL = os.environ.get('RESEND_API_URL', 'https://api.resend.com/emails')
EMAIL_FROM = os.environ.get('EMAIL_FROM', 'Ada-e-Haandi <noreply@adaehaandi.com>')
EMAIL_TO = os.environ.get('EMAIL_TO', 'info@adaehaandi.com')
EMAIL_TIMEOUT_SECONDS = get_env_int('EMAIL_TIMEOUT_SECONDS', 10)
PUBLIC_SITE_URL = get_env_url('PUBLIC_SITE_URL', 'https://adaehaandi.vercel.app')

# JWT Configuration
SIMPLE_JWT = {
    'ACCESS_TOKEN_LIFETIME': timedelta(minutes=60),
    'REFRESH_TOKEN_LIFETIME': timedelta(days=7),
    'ROTATE_REFRESH_TOKENS': False,
    'UPDATE_LAST_LOGIN': True,
    'ALGORITHM': 'HS256',
    'AUTH_HEADER_TYPES': ('Bearer',),
    'USER_ID_FIELD': 'id',
    'USER_ID_CLAIM': 'user_id',
}

# REST Framework Configuration
REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': (
        'rest_framework_simplejwt.authentication.JWTAuthentication',
    ),
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.IsAuthenticated',  # Require authentication by default
    ],
    # Custom exception handler for consistent error responses
    'EXCEPTION_HANDLER': 'apps.common.exception_handler.custom_exception_handler',
    'DEFAULT_FILTER_BACKENDS': [
        'rest_framework.filters.SearchFilter',
        'rest_framework.filters.OrderingFilter',
    ],
}

# Logging Configuration
# Use unified logging configuration
from app_logging.config import setup_logging
LOGGING = setup_logging(BASE_DIR)
