"""WSGI entrypoint for the lottery API.

Usage (needs the ``server`` extra):
  APP_ENV=production gunicorn -w 2 -b 0.0.0.0:8000 wsgi:app
"""

from loterias import create_app

app = create_app()
