# blogfront/config.py
import os


def env_int(name, default):
    try:
        return int(os.environ.get(name, default))
    except (TypeError, ValueError):
        return int(default)


def env_float(name, default):
    try:
        return float(os.environ.get(name, default))
    except (TypeError, ValueError):
        return float(default)


class Config:
    """Settings read from the environment when the app is created."""

    def __init__(self):
        self.RECORD_STORE_URL = (os.getenv("RECORD_STORE_URL") or "http://localhost:3001").rstrip("/")
        self.RECORD_STORE_TIMEOUT = env_float("RECORD_STORE_TIMEOUT", 10)
        self.PLACEHOLDER_COVER_URL = os.getenv("PLACEHOLDER_COVER_URL", "https://via.placeholder.com/800x400")
        self.QUERY_STALE_SECONDS = env_float("QUERY_STALE_SECONDS", 0)
        self.QUERY_RETRY = env_int("QUERY_RETRY", 0)
        self.QUERY_GC_SECONDS = env_float("QUERY_GC_SECONDS", 300)
        self.QUERY_MAX_ENTRIES = env_int("QUERY_MAX_ENTRIES", 500)
        self.SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    def as_dict(self):
        return {k: v for k, v in vars(self).items() if k.isupper()}
