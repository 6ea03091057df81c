# scripts/check_articles.py
from dotenv import load_dotenv; load_dotenv()

from blogfront.config import Config
from blogfront.store import RecordStore


def main():
    cfg = Config()
    store = RecordStore(cfg.RECORD_STORE_URL, timeout=cfg.RECORD_STORE_TIMEOUT)
    articles = store.list_articles()
    empty = [a for a in articles if not a.content.strip()]
    print(f"Store: {cfg.RECORD_STORE_URL}")
    print(f"Total: {len(articles)}")
    print(f"Empty content: {len(empty)}")
    for a in empty:
        print("-", a.id, "|", (a.title or "")[:80])


if __name__ == "__main__":
    main()
