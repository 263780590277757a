import pytest
from decimal import Decimal

from checkout_api.payments.cart import CartLineItem, is_number, parse_line_items, validate_cart
from checkout_api.payments.errors import CheckoutErrorKind


def _item(**overrides):
    item = {"templateId": "a", "tier": "std", "quantity": 2, "unitPrice": 10.00}
    item.update(overrides)
    return item


def test_valid_cart_returns_computed_total():
    check = validate_cart([_item(), _item(templateId="b", quantity=1, unitPrice=5.5)], 25.5)
    assert check.ok
    assert check.error is None
    assert check.total == Decimal("25.5")

@pytest.mark.parametrize("items", [[], None, "not-a-list", {"templateId": "a"}])
def test_empty_or_non_list_cart(items):
    check = validate_cart(items, 0)
    assert check.error == CheckoutErrorKind.EMPTY_CART
    assert check.error.message == "Cart is empty"

@pytest.mark.parametrize("item", [
    _item(templateId=""),
    _item(tier=None),
    {"templateId": "a", "tier": "std", "unitPrice": 10.0},  # quantity manquante
    _item(quantity=0),    # falsy => structure invalide
    _item(unitPrice=0),   # falsy => structure invalide
    _item(quantity="2"),  # pas un nombre
    _item(unitPrice=True),
    "a-string",
])
def test_malformed_item(item):
    check = validate_cart([item], 20.0)
    assert check.error == CheckoutErrorKind.MALFORMED_ITEM
    assert check.error.message == "Invalid cart item structure"

@pytest.mark.parametrize("quantity", [-1, 1.5])
def test_invalid_quantity(quantity):
    check = validate_cart([_item(quantity=quantity)], 10.0)
    assert check.error == CheckoutErrorKind.INVALID_QUANTITY

def test_invalid_price():
    check = validate_cart([_item(unitPrice=-3.0)], -6.0)
    assert check.error == CheckoutErrorKind.INVALID_PRICE
    assert check.error.message == "Invalid price"

def test_first_violation_wins():
    # La 2e ligne a un prix négatif, la 3e une structure invalide: seule la 2e compte
    items = [_item(), _item(unitPrice=-1), {"tier": "std"}]
    assert validate_cart(items, 20.0).error == CheckoutErrorKind.INVALID_PRICE

@pytest.mark.parametrize("claimed, ok", [
    (20.00, True),
    (20.01, True),    # écart = 0.01 toléré
    (19.99, True),
    (20.02, False),
    (19.98, False),
    (20.011, False),
])
def test_total_reconciliation_tolerance(claimed, ok):
    check = validate_cart([_item()], claimed)
    assert check.ok is ok
    if not ok:
        assert check.error == CheckoutErrorKind.TOTAL_MISMATCH
        assert check.error.message == "Cart total mismatch"

def test_float_drift_does_not_cause_mismatch():
    # 0.1 * 3 en flottant vaut 0.30000000000000004
    items = [_item(quantity=3, unitPrice=0.1), _item(templateId="b", quantity=1, unitPrice=0.2)]
    assert validate_cart(items, 0.5).ok

def test_order_independent_sum():
    items = [_item(quantity=3, unitPrice=1.15), _item(templateId="b", quantity=7, unitPrice=2.35)]
    assert validate_cart(items, 19.9).ok
    assert validate_cart(list(reversed(items)), 19.9).ok

def test_storefront_shape_is_accepted():
    items = [{"template": {"id": "tpl-1"}, "tier": "pro", "quantity": 1, "price": 49.0}]
    assert validate_cart(items, 49.0).ok
    assert parse_line_items(items) == [CartLineItem(template_id="tpl-1", tier="pro", quantity=1, unit_price=49.0)]

def test_validation_has_no_side_effects():
    items = [_item()]
    snapshot = [dict(i) for i in items]
    validate_cart(items, 20.0)
    assert items == snapshot

def test_integer_too_large_for_float_is_not_a_number():
    assert is_number(10 ** 400) is False
    assert is_number(10 ** 300) is True
    assert is_number(float("inf")) is False
    check = validate_cart([_item(unitPrice=10 ** 400)], 10.0)
    assert check.error == CheckoutErrorKind.MALFORMED_ITEM
