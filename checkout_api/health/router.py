from fastapi import APIRouter, Request

from checkout_api.config import PAYMENT_CURRENCY, STRIPE_API_VERSION

router = APIRouter(prefix="/health", tags=["Health"])

@router.get("")
def health_root():
    return {"ok": True}

@router.get("/stripe")
def health_stripe(request: Request):
    # Indique seulement si un processeur est prêt; jamais la clé elle-même
    return {
        "configured": getattr(request.app.state, "acquirer", None) is not None,
        "currency": PAYMENT_CURRENCY,
        "api_version": STRIPE_API_VERSION,
    }
