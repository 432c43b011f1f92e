# momokey_api/settings.py

from pathlib import Path

import environ

BASE_DIR = Path(__file__).resolve().parent.parent

env = environ.Env(
    DEBUG=(bool, False),
    MOMO_VERIFY_SSL=(bool, True),
    MOMO_REQUEST_TIMEOUT=(float, 10.0),
)
environ.Env.read_env(BASE_DIR / ".env")


# -----------------------------------------------------
# Core
# -----------------------------------------------------
SECRET_KEY = env("DJANGO_SECRET_KEY", default="insecure-dev-key-change-me")
DEBUG = env("DEBUG")
ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["localhost", "127.0.0.1"])

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "corsheaders",
    "rest_framework",
    "momokeys",
]

MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "momokey_api.urls"
WSGI_APPLICATION = "momokey_api.wsgi.application"

# No persistence: issued credentials are never stored.
DATABASES = {}

USE_TZ = True
TIME_ZONE = env("TIME_ZONE", default="UTC")


# -----------------------------------------------------
# Django REST Framework
# -----------------------------------------------------
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "DEFAULT_RENDERER_CLASSES": ["momokeys.renderers.EnvelopeJSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "EXCEPTION_HANDLER": "momokeys.exceptions.envelope_exception_handler",
    "TEST_REQUEST_DEFAULT_FORMAT": "json",
}


# -----------------------------------------------------
# CORS (front end runs on localhost:3000 in development)
# -----------------------------------------------------
CORS_ALLOWED_ORIGINS = env.list("CORS_ALLOWED_ORIGINS", default=["http://localhost:3000"])
CORS_ALLOW_METHODS = ["GET", "POST", "OPTIONS"]
CORS_ALLOW_HEADERS = ["content-type", "authorization"]
CORS_ALLOW_CREDENTIALS = True


# -----------------------------------------------------
# MTN MoMo sandbox
# -----------------------------------------------------
MOMO_BASE_URL = env("MOMO_BASE_URL", default="https://sandbox.momodeveloper.mtn.com")
MOMO_REQUEST_TIMEOUT = env("MOMO_REQUEST_TIMEOUT")
MOMO_VERIFY_SSL = env("MOMO_VERIFY_SSL")
MOMO_DEFAULT_CALLBACK_HOST = env("MOMO_DEFAULT_CALLBACK_HOST", default="example.com")


# -----------------------------------------------------
# Logging
# -----------------------------------------------------
LOG_LEVEL = env("LOG_LEVEL", default="INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "detailed": {
            "format": "%(asctime)s %(levelname)s %(name)s %(filename)s:%(lineno)d %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "detailed",
        },
    },
    "root": {"level": LOG_LEVEL, "handlers": ["console"]},
    "loggers": {
        "momokeys": {"level": LOG_LEVEL},
        "django.request": {"level": "WARNING", "handlers": ["console"], "propagate": False},
    },
}
