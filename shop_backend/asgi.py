"""
ASGI entrypoint: expose `app` pour les process managers / déploiements
(ex: gunicorn -k uvicorn.workers.UvicornWorker shop_backend.asgi:app).
Toute la configuration est centralisée dans shop_backend.app.
"""

from shop_backend.app import app
