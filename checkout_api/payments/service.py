"""
Cas d'usage 'payments': orchestre cart, amount, metadata et acquirer.
Seul point où les erreurs du pipeline sont attrapées et traduites en code HTTP.
"""
import json
import logging
from enum import Enum
from typing import Any, Dict, Optional, Tuple
from uuid import uuid4

from checkout_api.config import MAX_AMOUNT_CENTS, MIN_AMOUNT_CENTS
from . import amount as amount_logic
from . import cart as cart_logic
from . import metadata as meta
from .acquirer import AuthorizationAcquirer
from .errors import (
    CheckoutErrorKind,
    ClientInputError,
    ConfigurationError,
    ErrorCategory,
    classify,
)

logger = logging.getLogger(__name__)


class CheckoutStage(str, Enum):
    START = "start"
    VALIDATING = "validating"
    NORMALIZING = "normalizing"
    ACQUIRING = "acquiring"


def new_request_id() -> str:
    return str(uuid4())

def parse_submission(raw_body: Any) -> Tuple[list, Any, Dict[str, Optional[str]]]:
    """
    Lit le corps brut (bytes/str/dict) et retourne (items, amount, customer).
    - MALFORMED_REQUEST si le JSON est illisible, si items est absent,
      ou si amount n'est pas un nombre fini.
    """
    body = raw_body
    if isinstance(raw_body, (bytes, str)):
        try:
            body = json.loads(raw_body or "null")
        except ValueError:
            raise ClientInputError(CheckoutErrorKind.MALFORMED_REQUEST)
    if not isinstance(body, dict):
        raise ClientInputError(CheckoutErrorKind.MALFORMED_REQUEST)

    items = body.get("items")
    amount = body.get("amount")
    if items is None or not cart_logic.is_number(amount):
        raise ClientInputError(CheckoutErrorKind.MALFORMED_REQUEST)

    customer = {
        "email": body.get("customerEmail") if isinstance(body.get("customerEmail"), str) else None,
        "name": body.get("customerName") if isinstance(body.get("customerName"), str) else None,
    }
    return items, amount, customer

# module checkout_api.payments.service
async def create_payment_authorization(
    raw_body: Any,
    acquirer: Optional[AuthorizationAcquirer],
    origin: Optional[str] = None,
    minimum_cents: int = MIN_AMOUNT_CENTS,
    maximum_cents: int = MAX_AMOUNT_CENTS,
) -> Tuple[int, Dict[str, Any]]:
    """
    Traite une demande « create payment intent » de bout en bout.
    Étapes: START -> VALIDATING -> NORMALIZING -> ACQUIRING; la première erreur arrête le pipeline.
    - requestId généré avant toute validation, présent dans la réponse succès comme erreur.
    - acquirer=None signifie que STRIPE_SECRET_KEY est absent: 500 à chaque requête.
    Retour: (status_code, payload JSON).
    """
    request_id = new_request_id()
    log_prefix = f"[Request: {request_id}]"
    stage = CheckoutStage.START
    logger.info("%s Demande de paiement reçue (origin=%s)", log_prefix, origin or "-")

    try:
        if acquirer is None:
            raise ConfigurationError("Stripe configuration missing")

        items, claimed_total, customer = parse_submission(raw_body)

        stage = CheckoutStage.VALIDATING
        check = cart_logic.validate_cart(items, claimed_total)
        if not check.ok:
            raise ClientInputError(check.error)

        stage = CheckoutStage.NORMALIZING
        normalized = amount_logic.normalize_amount(claimed_total, minimum=minimum_cents, maximum=maximum_cents)
        if not normalized.ok:
            raise ClientInputError(normalized.error, amount_logic.limit_message(normalized, minimum_cents, maximum_cents))

        stage = CheckoutStage.ACQUIRING
        line_items = cart_logic.parse_line_items(items)
        metadata = meta.make_metadata(
            request_id,
            line_items,
            customer_email=customer["email"],
            customer_name=customer["name"],
        )
        result = await acquirer.acquire(normalized.cents, metadata, request_id)

        logger.info("%s Paiement initialisé (%s centimes, %s lignes)", log_prefix, result.amount, len(line_items))
        return 200, result.to_response()

    except Exception as e:
        error = classify(e)
        if error.category == ErrorCategory.CLIENT_INPUT:
            logger.warning("%s Échec à l'étape %s: %s", log_prefix, stage.value, error.message)
        elif error.category == ErrorCategory.UNKNOWN:
            logger.error("%s Erreur inattendue à l'étape %s: %s", log_prefix, stage.value, error.message)
            logger.debug("%s Trace de l'erreur inattendue", log_prefix, exc_info=True)
        else:
            logger.error("%s Échec à l'étape %s: %s", log_prefix, stage.value, error.message)
        return error.status_code, {"error": error.message, "requestId": request_id}
