from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from checkout_api.payments.acquirer import AuthorizationAcquirer
from checkout_api.payments.models import ErrorResponse, PaymentIntentResponse
from checkout_api.payments.service import create_payment_authorization

router = APIRouter(prefix="/api", tags=["Payments API"])

def get_acquirer(request: Request) -> Optional[AuthorizationAcquirer]:
    """Acquirer partagé, construit au démarrage (None si Stripe n'est pas configuré)."""
    return getattr(request.app.state, "acquirer", None)

# module checkout_api.payments.views
@router.post(
    "/create-payment-intent",
    responses={
        200: {"model": PaymentIntentResponse},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def create_payment_intent(request: Request):
    """
    Crée un PaymentIntent Stripe pour le panier soumis et renvoie son client_secret.
    - Entrée JSON: { "items": [ {templateId, tier, quantity, unitPrice}, ... ], "amount": <number> }
      (+ customerEmail / customerName optionnels)
    - Succès 200: { clientSecret, amount (centimes), requestId }
    - Erreurs 400/500: { error, requestId }
    - Le corps est lu brut: un JSON illisible reçoit lui aussi une enveloppe avec requestId.
    """
    body = await request.body()
    origin = request.headers.get("origin")
    status_code, payload = await create_payment_authorization(body, get_acquirer(request), origin=origin)
    return JSONResponse(payload, status_code=status_code)
