"""
Conversion montant décimal -> unités mineures (centimes), plancher et plafond de facturation.
"""
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Optional

from checkout_api.config import MAX_AMOUNT_CENTS, MIN_AMOUNT_CENTS
from .cart import to_decimal
from .errors import CheckoutErrorKind


@dataclass(frozen=True)
class AmountCheck:
    cents: int
    error: Optional[CheckoutErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def to_minor_units(amount: Any) -> int:
    """Arrondi au plus proche (demi vers le haut), jamais une troncature: 19.999 -> 2000."""
    value = to_decimal(amount)
    with localcontext() as ctx:
        # quantize exige une précision couvrant toute la partie entière (ex: 1e30)
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        return int((value * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))

def minimum_message(minimum: int) -> str:
    return f"Minimum order amount is ${minimum / 100:.2f}"

def maximum_message(maximum: int) -> str:
    return f"Maximum order amount is ${maximum / 100:,.2f}"

def limit_message(check: AmountCheck, minimum: int, maximum: int) -> str:
    """Message client du plancher ou du plafond dépassé, selon les bornes effectives."""
    if check.error == CheckoutErrorKind.ABOVE_MAXIMUM:
        return maximum_message(maximum)
    return minimum_message(minimum)

# module checkout_api.payments.amount
def normalize_amount(
    claimed_total: Any,
    minimum: int = MIN_AMOUNT_CENTS,
    maximum: int = MAX_AMOUNT_CENTS,
) -> AmountCheck:
    """
    Normalise le total annoncé en centimes.
    - BELOW_MINIMUM si le résultat est strictement inférieur à `minimum`.
    - ABOVE_MAXIMUM s'il dépasse `maximum` (le processeur refuserait le montant).
    """
    cents = to_minor_units(claimed_total)
    if cents < minimum:
        return AmountCheck(cents=cents, error=CheckoutErrorKind.BELOW_MINIMUM)
    if cents > maximum:
        return AmountCheck(cents=cents, error=CheckoutErrorKind.ABOVE_MAXIMUM)
    return AmountCheck(cents=cents)
