# blogfront/__main__.py
import os

from . import create_app

if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=int(os.getenv("PORT", 5010)), debug=True)
