# blogfront/__init__.py
import logging

from flask import Flask

from .config import Config
from .query_cache import QueryCache
from .store import RecordStore


def _setup_logging(level: str):
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("blogfront").setLevel(level)


def create_app(overrides=None, store=None, cache=None):
    from dotenv import load_dotenv; load_dotenv()

    app = Flask(__name__, static_folder="static", static_url_path="/static")
    app.config.update(Config().as_dict())
    if overrides:
        app.config.update(overrides)
    app.secret_key = app.config["SECRET_KEY"]

    _setup_logging(app.config["LOG_LEVEL"])

    # one store client and one query cache per app, shared by all requests
    app.extensions["record_store"] = store or RecordStore(
        app.config["RECORD_STORE_URL"], timeout=app.config["RECORD_STORE_TIMEOUT"]
    )
    app.extensions["query_cache"] = cache or QueryCache(
        stale_after=app.config["QUERY_STALE_SECONDS"], retry=app.config["QUERY_RETRY"],
        gc_after=app.config["QUERY_GC_SECONDS"], max_entries=app.config["QUERY_MAX_ENTRIES"],
    )

    from .views import main_bp
    app.register_blueprint(main_bp)

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    return app
