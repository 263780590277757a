"""
Acquisition résiliente de l'autorisation de paiement (seule étape réseau du pipeline).
- Boucle bornée: au plus `max_attempts` appels au processeur.
- Seule la signature « rate limit » est rejouée, après un délai fixe (non exponentiel).
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol

from fastapi.concurrency import run_in_threadpool

from checkout_api.config import MAX_PAYMENT_ATTEMPTS, PAYMENT_CURRENCY, PAYMENT_RETRY_DELAY_MS
from .errors import AcquisitionError
from .stripe_client import is_rate_limited

logger = logging.getLogger(__name__)

MISSING_SECRET_MESSAGE = "Payment intent creation failed"


class PaymentProcessor(Protocol):
    def create_authorization(self, *, amount: int, currency: str, metadata: Dict[str, str]) -> Any:
        ...


@dataclass(frozen=True)
class AuthorizationResult:
    client_secret: str
    amount: int
    request_id: str

    def to_response(self) -> Dict[str, Any]:
        return {"clientSecret": self.client_secret, "amount": self.amount, "requestId": self.request_id}


def _client_secret(intent: Any) -> Optional[str]:
    # stripe.PaymentIntent (attribut) ou dict (processeurs de test)
    if isinstance(intent, dict):
        secret = intent.get("client_secret")
    else:
        secret = getattr(intent, "client_secret", None)
    return secret if isinstance(secret, str) and secret else None


class AuthorizationAcquirer:
    """
    Détient le processeur injecté (construit une fois au démarrage) et la politique de retry.
    Sans état mutable: une même instance sert toutes les requêtes concurrentes.
    """

    def __init__(
        self,
        processor: PaymentProcessor,
        currency: str = PAYMENT_CURRENCY,
        max_attempts: int = MAX_PAYMENT_ATTEMPTS,
        delay_ms: int = PAYMENT_RETRY_DELAY_MS,
    ):
        self.processor = processor
        self.currency = currency
        self.max_attempts = max(1, max_attempts)
        self.delay_ms = max(0, delay_ms)

    async def acquire(
        self,
        amount: int,
        metadata: Dict[str, str],
        request_id: str,
        max_attempts: Optional[int] = None,
        delay_ms: Optional[int] = None,
    ) -> AuthorizationResult:
        """
        Crée l'autorisation auprès du processeur.
        - L'appel SDK (bloquant) tourne dans le threadpool; l'attente entre tentatives est un asyncio.sleep.
        - Toute autre erreur, ou l'épuisement des tentatives, remonte en AcquisitionError
          avec le message du dernier échec.
        """
        attempts = max(1, max_attempts if max_attempts is not None else self.max_attempts)
        delay = max(0, delay_ms if delay_ms is not None else self.delay_ms)

        attempt = 0
        while True:
            attempt += 1
            try:
                intent = await run_in_threadpool(
                    self.processor.create_authorization,
                    amount=amount,
                    currency=self.currency,
                    metadata=metadata,
                )
                break
            except Exception as e:
                if attempt < attempts and is_rate_limited(e):
                    logger.warning(
                        "[Request: %s] Rate limit processeur (tentative %s/%s), nouvel essai dans %sms",
                        request_id, attempt, attempts, delay,
                    )
                    await asyncio.sleep(delay / 1000)
                    continue
                raise AcquisitionError(str(e) or MISSING_SECRET_MESSAGE) from e

        secret = _client_secret(intent)
        if not secret:
            raise AcquisitionError(MISSING_SECRET_MESSAGE)
        logger.info("[Request: %s] Autorisation obtenue en %s tentative(s)", request_id, attempt)
        return AuthorizationResult(client_secret=secret, amount=amount, request_id=request_id)
