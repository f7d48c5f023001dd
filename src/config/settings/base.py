import os
import sys
from importlib.util import find_spec
from pathlib import Path
from urllib.parse import urlparse

import dj_database_url
from decouple import config

HAS_SENTRY_SDK = find_spec("sentry_sdk") is not None

if HAS_SENTRY_SDK:
    import sentry_sdk
    from sentry_sdk.integrations.django import DjangoIntegration

BASE_DIR = Path(__file__).resolve().parent.parent.parent
APPS_DIR = BASE_DIR / "apps"
if str(APPS_DIR) not in sys.path:
    sys.path.insert(0, str(APPS_DIR))

IS_TEST_RUN = (
    "test" in sys.argv
    or "PYTEST_CURRENT_TEST" in os.environ
    or any("pytest" in arg for arg in sys.argv)
)
LOGS_ROOT = Path(config("LOGS_ROOT", default=BASE_DIR / "logs"))
DEBUG = config("DEBUG", default=False, cast=bool)
if IS_TEST_RUN:
    # Keep tests deterministic and avoid debug-only middleware/tooling side effects.
    DEBUG = False
SECRET_KEY = config(
    "DJANGO_SECRET_KEY",
    default="django-insecure-change-me-please-use-a-long-secret-key-for-local-dev",
)


def _split_csv_env(name: str, *, default: str = "") -> list[str]:
    raw_value = config(name, default=default)
    return [item.strip() for item in str(raw_value).split(",") if item.strip()]


ALLOWED_HOSTS = _split_csv_env("ALLOWED_HOSTS", default="localhost,127.0.0.1")
CORS_ALLOWED_ORIGINS = _split_csv_env("CORS_ALLOWED_ORIGINS")
CORS_ALLOW_ALL_ORIGINS = config("CORS_ALLOW_ALL_ORIGINS", default=False, cast=bool)
CORS_ALLOW_CREDENTIALS = config("CORS_ALLOW_CREDENTIALS", default=True, cast=bool)

DATABASE_URL = config("DATABASE_URL", default="")
TEST_DATABASE_URL = config("TEST_DATABASE_URL", default="sqlite:///:memory:")

if IS_TEST_RUN:
    ACTIVE_DATABASE_URL = TEST_DATABASE_URL
else:
    if not DATABASE_URL:
        DATABASE_URL = (
            f"postgres://{config('POSTGRES_USER')}:{config('POSTGRES_PASSWORD')}"
            f"@{config('POSTGRES_HOST')}/{config('POSTGRES_DB')}"
        )
    ACTIVE_DATABASE_URL = DATABASE_URL

UNFOLD_APPS = [
    "unfold",
    "unfold.contrib.filters",
    "unfold.contrib.forms",
]

DJANGO_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
]

THIRD_PARTY_APPS = [
    "rest_framework",
    "rest_framework_simplejwt",
    "django_filters",
    "corsheaders",
    "drf_spectacular",
]

LOCAL_APPS = [
    "account",
    "attendance",
    "core",
    "api",
]

INSTALLED_APPS = UNFOLD_APPS + DJANGO_APPS + THIRD_PARTY_APPS + LOCAL_APPS

MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "core.middlewares.request_id.RequestIDMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
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

ASGI_APPLICATION = "config.server.asgi.application"
WSGI_APPLICATION = "config.server.wsgi.application"

DATABASES = {
    "default": dj_database_url.parse(
        url=ACTIVE_DATABASE_URL,
        conn_max_age=600,
        conn_health_checks=True,
    )
}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "timesheet-cache",
    }
}

AUTH_PASSWORD_VALIDATORS = [
    {
        "NAME": "django.contrib.auth.password_validation.MinimumLengthValidator",
        "OPTIONS": {"min_length": 6},
    },
]

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True
LOCALE_PATHS = [BASE_DIR / "locales"]

STATIC_URL = "static/"
MEDIA_URL = "media/"

STATIC_ROOT = BASE_DIR.parent / "cdn/static"
MEDIA_ROOT = BASE_DIR.parent / "cdn/media"

# Attendance
ATTENDANCE_TIME_ZONE = config("ATTENDANCE_TIME_ZONE", default="America/Sao_Paulo")
ATTENDANCE_NEGATIVE_HOURS_POLICY = config(
    "ATTENDANCE_NEGATIVE_HOURS_POLICY", default="reject"
)
ATTENDANCE_FALLBACK_LATITUDE = config(
    "ATTENDANCE_FALLBACK_LATITUDE", default=-23.5505, cast=float
)
ATTENDANCE_FALLBACK_LONGITUDE = config(
    "ATTENDANCE_FALLBACK_LONGITUDE", default=-46.6333, cast=float
)
ATTENDANCE_FALLBACK_ADDRESS = config(
    "ATTENDANCE_FALLBACK_ADDRESS", default="São Paulo, SP"
)
ATTENDANCE_CURRENT_LOCATION_LABEL = config(
    "ATTENDANCE_CURRENT_LOCATION_LABEL", default="Current location"
)

# Error tracking
SENTRY_DSN = config("SENTRY_DSN", default="")
SENTRY_ENVIRONMENT = config(
    "SENTRY_ENVIRONMENT",
    default="development" if DEBUG else "production",
)
SENTRY_RELEASE = config("SENTRY_RELEASE", default="")
SENTRY_TRACES_SAMPLE_RATE = config(
    "SENTRY_TRACES_SAMPLE_RATE",
    default=0.0,
    cast=float,
)
SENTRY_SEND_DEFAULT_PII = config(
    "SENTRY_SEND_DEFAULT_PII",
    default=False,
    cast=bool,
)


def _clamp_sample_rate(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


def _is_valid_sentry_dsn(value: str) -> bool:
    parsed = urlparse(value.strip())
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


SENTRY_TRACES_SAMPLE_RATE = _clamp_sample_rate(SENTRY_TRACES_SAMPLE_RATE)
SENTRY_ENABLED = bool(HAS_SENTRY_SDK and _is_valid_sentry_dsn(SENTRY_DSN))
if SENTRY_ENABLED:
    sentry_sdk.init(
        dsn=SENTRY_DSN,
        environment=SENTRY_ENVIRONMENT,
        release=SENTRY_RELEASE or None,
        traces_sample_rate=SENTRY_TRACES_SAMPLE_RATE,
        send_default_pii=SENTRY_SEND_DEFAULT_PII,
        integrations=[DjangoIntegration()],
    )

# Ensure logs directory exists
os.makedirs(LOGS_ROOT, exist_ok=True)

LOG_HANDLERS = {
    # Console
    "console": {
        "level": "INFO",
        "class": "logging.StreamHandler",
        "formatter": "colored",
        "filters": ["request_context"],
    },
    # Main app log (rotating)
    "app_file": {
        "level": "INFO",
        "class": "logging.handlers.TimedRotatingFileHandler",
        "filename": LOGS_ROOT / "app.log",
        "when": "midnight",
        "backupCount": 30,
        "formatter": "verbose",
        "filters": ["request_context"],
    },
    # Error log (rotating)
    "error_file": {
        "level": "ERROR",
        "class": "logging.handlers.TimedRotatingFileHandler",
        "filename": LOGS_ROOT / "error.log",
        "when": "midnight",
        "backupCount": 60,
        "formatter": "verbose",
        "filters": ["request_context"],
    },
    # Slow queries
    "slow_queries_file": {
        "level": "WARNING",
        "class": "logging.handlers.TimedRotatingFileHandler",
        "filename": LOGS_ROOT / "slow_queries.log",
        "when": "midnight",
        "backupCount": 30,
        "formatter": "verbose",
        "filters": ["request_context"],
    },
}
REQUEST_ERROR_HANDLERS = ["error_file"]

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {
        "request_context": {
            "()": "core.utils.logging.RequestContextFilter",
        },
    },
    "formatters": {
        "colored": {
            "()": "colorlog.ColoredFormatter",
            "format": (
                "%(log_color)s[%(asctime)s] [%(levelname)s] [request_id=%(request_id)s] "
                "%(name)s:%(module)s:%(filename)s:%(lineno)d "
                "%(funcName)s | %(message)s"
            ),
            "datefmt": "%Y-%m-%d %H:%M:%S",
            "log_colors": {
                "DEBUG": "white",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        },
        "verbose": {
            "format": (
                "[%(asctime)s] [%(levelname)s] [request_id=%(request_id)s] "
                "%(name)s:%(module)s:%(filename)s:%(lineno)d "
                "%(funcName)s | %(message)s"
            ),
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": LOG_HANDLERS,
    "loggers": {
        # Django internal logs
        "django": {
            "handlers": ["app_file", "console"],
            "level": "INFO",
            "propagate": False,
        },
        # Django request errors
        "django.request": {
            "handlers": REQUEST_ERROR_HANDLERS,
            "level": "ERROR",
            "propagate": False,
        },
        # Slow queries
        "django.db.backends": {
            "handlers": ["slow_queries_file"],
            "level": "WARNING",
            "propagate": False,
        },
        # Universal logger (entire project)
        "": {
            "handlers": ["app_file", "console"],
            "level": "INFO",
        },
    },
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "rest_framework_simplejwt.authentication.JWTAuthentication"
    ],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.IsAuthenticated"],
    "DEFAULT_PAGINATION_CLASS": "core.utils.pagination.CustomPagination",
    "PAGE_SIZE": 10,
    "EXCEPTION_HANDLER": "core.api.exceptions.custom_exception_handler",  # noqa
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
}

SPECTACULAR_SETTINGS = {
    "TITLE": "Timesheet API",
    "DESCRIPTION": (
        "Versioned API for employee check-in/check-out and attendance reports."
    ),
    "VERSION": "v1",
    "SERVE_INCLUDE_SCHEMA": False,
    "SCHEMA_PATH_PREFIX": r"/api/v[0-9]",
    "TAGS": [
        {
            "name": "Auth",
            "description": "JWT authentication endpoints.",
        },
        {
            "name": "Users / Profile",
            "description": "Registration and authenticated profile endpoints.",
        },
        {
            "name": "Users / Employees",
            "description": "Employer-managed employee accounts.",
        },
        {
            "name": "Attendance",
            "description": "Daily check-in/check-out and time entries.",
        },
        {
            "name": "Attendance / Reports",
            "description": "Hours summaries, timesheets, status board and export.",
        },
        {
            "name": "System / Health",
            "description": "System health and connectivity checks.",
        },
    ],
}

SIMPLE_JWT = {
    "AUTH_HEADER_TYPES": ("Bearer",),
}

AUTH_USER_MODEL = "account.User"  # noqa

UNFOLD = {
    "SITE_URL": "/admin/",
    "SITE_TITLE": "Timesheet",
    "SITE_HEADER": "Timesheet",
    "SITE_SUBHEADER": lambda request: (
        request.user.get_navigation_title()
        if request.user.is_authenticated
        else "Unknown User"
    ),
    "SIDEBAR": {
        "show_search": False,
    },
}

CORS_URLS_REGEX = r"^/api/.*$"
