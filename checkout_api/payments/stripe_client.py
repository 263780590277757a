"""
Adaptateur Stripe: centralise la création des PaymentIntents.
- Une instance StripeProcessor est construite une fois au démarrage (lifespan) puis injectée.
- La clé est passée à chaque appel (api_key=...), stripe.api_key n'est jamais modifié.
"""
import logging
from typing import Any, Dict, Optional

import stripe

from checkout_api.config import STRIPE_API_VERSION, STRIPE_SECRET_KEY
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

RATE_LIMIT_MARKER = "rate_limit"


class StripeProcessor:
    """Processeur de paiement adossé au SDK stripe-python."""

    def __init__(self, api_key: str, api_version: str = STRIPE_API_VERSION):
        if not api_key:
            raise ConfigurationError("Stripe configuration missing")
        self._api_key = api_key
        self.api_version = api_version

    def create_authorization(self, *, amount: int, currency: str, metadata: Dict[str, str]) -> Any:
        """
        Crée un PaymentIntent Stripe avec sélection automatique du moyen de paiement.
        Retour: l'objet stripe.PaymentIntent tel quel (client_secret lu par attribut)
        Lève: stripe.StripeError (dont RateLimitError) en cas d'échec côté Stripe.
        """
        return stripe.PaymentIntent.create(
            amount=amount,
            currency=currency,
            automatic_payment_methods={"enabled": True},
            metadata=metadata,
            api_key=self._api_key,
            stripe_version=self.api_version,
        )

    def __repr__(self) -> str:
        # Jamais la clé dans les logs
        return f"StripeProcessor(api_version={self.api_version!r})"


def build_processor(api_key: Optional[str] = None) -> Optional[StripeProcessor]:
    """
    Construit le processeur depuis la configuration.
    - Retourne None si STRIPE_SECRET_KEY est absent: chaque requête répondra alors 500.
    """
    key = STRIPE_SECRET_KEY if api_key is None else api_key
    if not key:
        logger.warning("STRIPE_SECRET_KEY manquant: les paiements répondront 500 tant qu'il n'est pas défini")
        return None
    return StripeProcessor(key)

def is_rate_limited(exc: BaseException) -> bool:
    """
    Reconnaît la signature « rate limit » de Stripe:
    RateLimitError, HTTP 429, code 'rate_limit' ou le marqueur dans le message.
    """
    if isinstance(exc, stripe.RateLimitError):
        return True
    if getattr(exc, "http_status", None) == 429:
        return True
    if getattr(exc, "code", None) == RATE_LIMIT_MARKER:
        return True
    return RATE_LIMIT_MARKER in str(exc)
