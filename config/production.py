import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

BACKEND_CONFIG = {
    "base_url": os.getenv("EMS_BACKEND_URL", "https://sree-apparels-ems.onrender.com/api"),
    "timeout": float(os.getenv("EMS_BACKEND_TIMEOUT", "30")),
}

DEBUG = False

DEFAULT_GRANULARITY = os.getenv("DEFAULT_GRANULARITY", "Daily")
LEGACY_LABEL_ORDER = bool(int(os.getenv("LEGACY_LABEL_ORDER", "0")))
