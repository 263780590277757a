"""
Schémas de réponse de l'API de paiement (documentation OpenAPI).
"""
from pydantic import BaseModel


class PaymentIntentResponse(BaseModel):
    clientSecret: str
    amount: int  # centimes
    requestId: str


class ErrorResponse(BaseModel):
    error: str
    requestId: str
