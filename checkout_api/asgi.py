"""
ASGI entrypoint: expose `app` for process managers / deployments.

- En production, un process manager (ex: gunicorn/uvicorn-workers, hypercorn) importe `checkout_api.asgi:app`
  pour servir l'application FastAPI en mode ASGI.
- Toute la configuration (routes, middlewares, lifespan Stripe) est centralisée
  dans checkout_api.app_setup.factory, ce fichier ne fait qu'exposer l'instance `app`.
"""

from checkout_api.app_setup.factory import create_app

app = create_app()
