# scripts/import_articles.py
"""
Posts articles from a JSON file to the record store.

The file holds a list of objects with title, description, content and,
optionally, category (list or comma-separated string) and coverImage.
Each record goes through the same checks as the web form; records that
fail them are skipped. Dates are stamped at import time.

  python scripts/import_articles.py articles.json
"""
import argparse
import json
import logging
from typing import Any, Dict, List

from dotenv import load_dotenv; load_dotenv()

from blogfront.config import Config
from blogfront.creation_form import CreationForm
from blogfront.store import RecordStore

log = logging.getLogger("blogfront.import")


def import_articles(store: RecordStore, records: List[Dict[str, Any]], default_cover: str) -> List[int]:
    created_ids = []
    for idx, rec in enumerate(records):
        if not isinstance(rec, dict):
            log.warning("skipping non-object item #%d: %r", idx, rec)
            continue
        form = CreationForm.from_mapping(rec, default_cover=default_cover)
        if not form.submit(store):
            log.warning("skipping item #%d (%r): %s", idx, form.title[:60], form.error)
            continue
        created_ids.append(form.created.id)
    return created_ids


def main():
    ap = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    ap.add_argument("path", help="JSON file with a list of articles")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    cfg = Config()
    with open(args.path, encoding="utf-8") as f:
        records = json.load(f)
    if not isinstance(records, list):
        raise SystemExit(f"{args.path}: expected a JSON list")

    store = RecordStore(cfg.RECORD_STORE_URL, timeout=cfg.RECORD_STORE_TIMEOUT)
    ids = import_articles(store, records, cfg.PLACEHOLDER_COVER_URL)
    print(f"imported {len(ids)}/{len(records)}: {ids}")


if __name__ == "__main__":
    main()
