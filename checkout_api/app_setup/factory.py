"""
Factory d'application pour les entrypoints (ex: checkout_api.asgi) et les tests.
Ordonne les étapes d'initialisation de manière lisible et testable.
"""
from typing import Optional

from fastapi import FastAPI
from .lifespan import lifespan
from .logging_config import setup_logging
from .middlewares import register_basic_middlewares, register_no_cache_middleware, register_security_middleware
from .exceptions import register_exception_handlers
from .routers import register_routers
from checkout_api.payments.acquirer import PaymentProcessor

def create_app(processor: Optional[PaymentProcessor] = None) -> FastAPI:
    """
    Construit l'app FastAPI avec le lifespan et enregistre:
      - logs, middlewares de base, sécurité, no-cache
      - gestionnaires d'exceptions
      - tous les routers (payments, health)
    `processor`: processeur de paiement à injecter (tests); sinon construit depuis la config au démarrage.
    Retour:
      FastAPI prêt à être utilisé par le serveur ASGI.
    """
    setup_logging()
    app = FastAPI(title="Checkout API", lifespan=lifespan)
    app.state.payment_processor = processor
    register_basic_middlewares(app)
    register_security_middleware(app)
    register_no_cache_middleware(app)
    register_exception_handlers(app)
    register_routers(app)
    return app
