"""
Taxonomie des erreurs du pipeline de paiement.
- Chaque erreur porte une catégorie explicite (ErrorCategory) qui décide du code HTTP.
- Les messages client sont stables: ils font partie du contrat de l'API.
"""
from enum import Enum
from typing import Optional


class ErrorCategory(str, Enum):
    CLIENT_INPUT = "client_input"
    CONFIGURATION = "configuration"
    ACQUISITION = "acquisition"
    UNKNOWN = "unknown"


STATUS_BY_CATEGORY = {
    ErrorCategory.CLIENT_INPUT: 400,
    ErrorCategory.CONFIGURATION: 500,
    ErrorCategory.ACQUISITION: 500,
    ErrorCategory.UNKNOWN: 500,
}

GENERIC_ERROR_MESSAGE = "Payment initialization failed"


class CheckoutErrorKind(str, Enum):
    """Variantes nommées des erreurs de saisie client (panier, montant, requête)."""
    MALFORMED_REQUEST = "malformed_request"
    EMPTY_CART = "empty_cart"
    MALFORMED_ITEM = "malformed_item"
    INVALID_QUANTITY = "invalid_quantity"
    INVALID_PRICE = "invalid_price"
    TOTAL_MISMATCH = "total_mismatch"
    BELOW_MINIMUM = "below_minimum"
    ABOVE_MAXIMUM = "above_maximum"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    CheckoutErrorKind.MALFORMED_REQUEST: "Missing required fields",
    CheckoutErrorKind.EMPTY_CART: "Cart is empty",
    CheckoutErrorKind.MALFORMED_ITEM: "Invalid cart item structure",
    CheckoutErrorKind.INVALID_QUANTITY: "Invalid quantity",
    CheckoutErrorKind.INVALID_PRICE: "Invalid price",
    CheckoutErrorKind.TOTAL_MISMATCH: "Cart total mismatch",
    CheckoutErrorKind.BELOW_MINIMUM: "Minimum order amount is $0.50",
    CheckoutErrorKind.ABOVE_MAXIMUM: "Maximum order amount is $999,999.99",
}


class CheckoutError(Exception):
    category = ErrorCategory.UNKNOWN

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def status_code(self) -> int:
        return STATUS_BY_CATEGORY[self.category]


class ClientInputError(CheckoutError):
    """Entrée client invalide (400). `kind` identifie la variante."""
    category = ErrorCategory.CLIENT_INPUT

    def __init__(self, kind: CheckoutErrorKind, message: Optional[str] = None):
        super().__init__(message or kind.message)
        self.kind = kind


class ConfigurationError(CheckoutError):
    """Configuration serveur absente (ex: STRIPE_SECRET_KEY). Ne révèle jamais la valeur."""
    category = ErrorCategory.CONFIGURATION


class AcquisitionError(CheckoutError):
    """Le processeur a refusé l'autorisation ou n'a pas renvoyé de client_secret exploitable."""
    category = ErrorCategory.ACQUISITION


def classify(exc: BaseException) -> CheckoutError:
    """
    Ramène n'importe quelle exception à une CheckoutError catégorisée.
    - Les CheckoutError sont renvoyées telles quelles.
    - Sinon: catégorie UNKNOWN, message str(exc) s'il est descriptif, sinon message générique.
    """
    if isinstance(exc, CheckoutError):
        return exc
    message = str(exc).strip() or GENERIC_ERROR_MESSAGE
    return CheckoutError(message)
