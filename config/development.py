import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

BACKEND_CONFIG = {
    "base_url": os.getenv("EMS_BACKEND_URL", "http://localhost:5000/api"),
    "timeout": float(os.getenv("EMS_BACKEND_TIMEOUT", "15")),
}

DEBUG = True

# Daily | Weekly | Monthly
DEFAULT_GRANULARITY = os.getenv("DEFAULT_GRANULARITY", "Daily")

# If enabled, buckets sort by their text label like the old dashboard did.
LEGACY_LABEL_ORDER = bool(int(os.getenv("LEGACY_LABEL_ORDER", "0")))
