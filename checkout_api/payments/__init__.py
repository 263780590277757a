"""
Module 'payments' (feature-first): point d'entrée public.
Réunit validation du panier, normalisation du montant, metadata Stripe,
client Stripe, acquisition résiliente et orchestration.
"""

from .cart import CartLineItem, CartCheck, validate_cart, parse_line_items
from .amount import AmountCheck, normalize_amount, to_minor_units
from .metadata import project_order_items, make_metadata
from .stripe_client import StripeProcessor, build_processor, is_rate_limited
from .acquirer import AuthorizationAcquirer, AuthorizationResult
from .errors import (
    CheckoutError,
    CheckoutErrorKind,
    ClientInputError,
    ConfigurationError,
    AcquisitionError,
    ErrorCategory,
)
from .service import create_payment_authorization

__all__ = [
    # cart
    "CartLineItem",
    "CartCheck",
    "validate_cart",
    "parse_line_items",
    # amount
    "AmountCheck",
    "normalize_amount",
    "to_minor_units",
    # metadata
    "project_order_items",
    "make_metadata",
    # stripe
    "StripeProcessor",
    "build_processor",
    "is_rate_limited",
    # acquisition
    "AuthorizationAcquirer",
    "AuthorizationResult",
    # erreurs
    "CheckoutError",
    "CheckoutErrorKind",
    "ClientInputError",
    "ConfigurationError",
    "AcquisitionError",
    "ErrorCategory",
    # services
    "create_payment_authorization",
]
