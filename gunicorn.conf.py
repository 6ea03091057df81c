# gunicorn.conf.py
import os

from blogfront.config import env_int

wsgi_app = "wsgi:application"
bind     = f"0.0.0.0:{os.environ.get('PORT', '8080')}"
# each worker keeps its own query cache
workers  = env_int("WEB_CONCURRENCY", 1)
threads  = env_int("GUNICORN_THREADS", 4)
timeout  = env_int("GUNICORN_TIMEOUT", 30)
loglevel = os.environ.get("GUNICORN_LOGLEVEL", "info")
