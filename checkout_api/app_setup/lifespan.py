"""
Lifespan FastAPI: initialisation/arrêt des ressources partagées.
- Construit une seule fois le processeur Stripe et l'AuthorizationAcquirer (app.state.acquirer).
- Un processeur injecté par la factory (tests) est conservé tel quel.
- Sans STRIPE_SECRET_KEY, app.state.acquirer reste None: chaque requête répond 500, sans crash.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from checkout_api.config import MAX_PAYMENT_ATTEMPTS, PAYMENT_CURRENCY, PAYMENT_RETRY_DELAY_MS
from checkout_api.payments.acquirer import AuthorizationAcquirer
from checkout_api.payments.stripe_client import build_processor

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Prépare l'acquirer partagé (lecture seule après le démarrage).
    Les logs indiquent l'état effectif (configuré ou non) pour observabilité.
    """
    logger = logging.getLogger("uvicorn.error")
    processor = getattr(app.state, "payment_processor", None) or build_processor()
    app.state.payment_processor = processor
    app.state.acquirer = None
    if processor is not None:
        app.state.acquirer = AuthorizationAcquirer(
            processor,
            currency=PAYMENT_CURRENCY,
            max_attempts=MAX_PAYMENT_ATTEMPTS,
            delay_ms=PAYMENT_RETRY_DELAY_MS,
        )
        logger.info(f"Payment processor ready: {processor!r}")
    else:
        logger.warning("Payment processor disabled: STRIPE_SECRET_KEY missing")

    yield

    app.state.acquirer = None
