"""Base Django settings for tests."""

SECRET_KEY = "django_tests_secret_key"

INSTALLED_APPS = [
    "django.contrib.contenttypes",
]

USE_TZ = False

# Servers used by the settings-driven tests. Nothing connects to them:
# dispatch tests inject mock clients through the registry options.
KVCOMMANDS = {
    "SERVERS": {
        "default": {"HOST": "127.0.0.1", "PORT": 6379, "DB": 1, "ALLOW_ADMIN": True},
        "sessions": "rediss://:secret@cache.internal:6380/2?client_name=web&sync_timeout=2500",
        "broken": {"HOST": "127.0.0.1", "PROT": 6379},
    },
    "OPTIONS": {
        "ignore_exceptions": False,
        "health_check_interval": 30,
    },
}
