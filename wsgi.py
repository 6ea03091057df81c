# wsgi.py
from dotenv import load_dotenv; load_dotenv()

from blogfront import create_app

application = create_app()
