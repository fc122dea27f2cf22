SECRET_KEY = "test-secret"

BACKEND_CONFIG = {
    "base_url": "http://backend.test/api",
    "timeout": 1.0,
}

DEBUG = False
TESTING = True

DEFAULT_GRANULARITY = "Daily"
LEGACY_LABEL_ORDER = False
