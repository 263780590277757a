"""
Logique panier pure (pas de Stripe, pas de réseau).
- Lecture des lignes brutes du panier (forme canonique ou forme "storefront").
- Validation structurelle + réconciliation du total annoncé par le client.
"""
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence

from checkout_api.config import AMOUNT_TOLERANCE
from .errors import CheckoutErrorKind

TOLERANCE = Decimal(AMOUNT_TOLERANCE)


@dataclass(frozen=True)
class CartLineItem:
    template_id: str
    tier: str
    quantity: int
    unit_price: float

    def to_metadata(self) -> Dict[str, Any]:
        return {
            "templateId": self.template_id,
            "tier": self.tier,
            "quantity": self.quantity,
            "unitPrice": self.unit_price,
        }


@dataclass(frozen=True)
class CartCheck:
    """Résultat étiqueté de validate_cart: error=None si le panier est valide."""
    error: Optional[CheckoutErrorKind] = None
    total: Decimal = Decimal("0")

    @property
    def ok(self) -> bool:
        return self.error is None


def is_number(value: Any) -> bool:
    """Nombre JSON fini (les booléens ne comptent pas)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # entier JSON trop grand pour un float
        return False

def to_decimal(value: Any) -> Decimal:
    # str() donne la représentation la plus courte du float: 10.1 -> Decimal("10.1")
    return Decimal(str(value))

def _template_id(item: Dict[str, Any]) -> Any:
    if item.get("templateId"):
        return item.get("templateId")
    template = item.get("template")
    return template.get("id") if isinstance(template, dict) else None

def _unit_price(item: Dict[str, Any]) -> Any:
    price = item.get("unitPrice")
    return price if price is not None else item.get("price")

def _check_item(item: Any) -> Optional[CheckoutErrorKind]:
    if not isinstance(item, dict):
        return CheckoutErrorKind.MALFORMED_ITEM
    quantity = item.get("quantity")
    price = _unit_price(item)
    if not _template_id(item) or not item.get("tier") or not quantity or not price:
        return CheckoutErrorKind.MALFORMED_ITEM
    if not isinstance(_template_id(item), str) or not isinstance(item.get("tier"), str):
        return CheckoutErrorKind.MALFORMED_ITEM
    if not is_number(quantity) or not is_number(price):
        return CheckoutErrorKind.MALFORMED_ITEM
    if quantity < 1 or quantity != int(quantity):
        return CheckoutErrorKind.INVALID_QUANTITY
    if price <= 0:
        return CheckoutErrorKind.INVALID_PRICE
    return None

# module checkout_api.payments.cart
def validate_cart(items: Any, claimed_total: Any) -> CartCheck:
    """
    Valide le panier et réconcilie le total annoncé.
    - Parcourt les lignes de gauche à droite et s'arrête à la première violation.
    - Recalcule Σ(prix unitaire × quantité) en Decimal, comparé avec une tolérance de 0.01.
    - Ne lève jamais: retourne un CartCheck (ok, ou la variante d'erreur).
    """
    if not isinstance(items, list) or not items:
        return CartCheck(error=CheckoutErrorKind.EMPTY_CART)

    total = Decimal("0")
    for item in items:
        error = _check_item(item)
        if error is not None:
            return CartCheck(error=error)
        total += to_decimal(_unit_price(item)) * int(item["quantity"])

    if abs(total - to_decimal(claimed_total)) > TOLERANCE:
        return CartCheck(error=CheckoutErrorKind.TOTAL_MISMATCH, total=total)
    return CartCheck(total=total)

def parse_line_items(items: Sequence[Dict[str, Any]]) -> List[CartLineItem]:
    """
    Construit les CartLineItem à partir de lignes déjà validées par validate_cart.
    - Accepte la forme canonique {templateId, unitPrice} et la forme {template: {id}, price}.
    """
    return [
        CartLineItem(
            template_id=_template_id(item),
            tier=item["tier"],
            quantity=int(item["quantity"]),
            unit_price=_unit_price(item),
        )
        for item in items
    ]
