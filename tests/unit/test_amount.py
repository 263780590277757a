import pytest

from checkout_api.payments.amount import limit_message, maximum_message, minimum_message, normalize_amount, to_minor_units
from checkout_api.payments.errors import CheckoutErrorKind


@pytest.mark.parametrize("amount, cents", [
    (20.00, 2000),
    (19.999, 2000),   # arrondi, pas troncature
    (0.295, 30),      # demi vers le haut
    (149.99, 14999),
    (1, 100),
])
def test_to_minor_units_rounds_to_nearest(amount, cents):
    assert to_minor_units(amount) == cents

@pytest.mark.parametrize("amount, ok", [
    (0.30, False),
    (0.49, False),
    (0.494, False),
    (0.495, True),    # round(49.5) => 50
    (0.50, True),
    (20.00, True),
])
def test_minimum_is_enforced_on_rounded_value(amount, ok):
    check = normalize_amount(amount)
    assert check.ok is ok
    assert check.cents == to_minor_units(amount)
    if not ok:
        assert check.error == CheckoutErrorKind.BELOW_MINIMUM

def test_minimum_can_be_configured():
    assert normalize_amount(0.75, minimum=100).error == CheckoutErrorKind.BELOW_MINIMUM
    assert normalize_amount(1.00, minimum=100).ok

def test_minimum_message_matches_default():
    assert minimum_message(50) == "Minimum order amount is $0.50"
    assert minimum_message(50) == CheckoutErrorKind.BELOW_MINIMUM.message
    assert minimum_message(100) == "Minimum order amount is $1.00"

def test_huge_amount_converts_without_decimal_error():
    assert to_minor_units(1e30) == 10 ** 32
    assert to_minor_units(10 ** 300) == 10 ** 302

@pytest.mark.parametrize("amount", [1_000_000.00, 1e30, 10 ** 300])
def test_amount_above_processor_maximum(amount):
    check = normalize_amount(amount)
    assert check.error == CheckoutErrorKind.ABOVE_MAXIMUM
    assert limit_message(check, 50, 99999999) == "Maximum order amount is $999,999.99"

def test_maximum_is_inclusive_and_configurable():
    assert normalize_amount(999_999.99).ok
    assert normalize_amount(100.01, maximum=10000).error == CheckoutErrorKind.ABOVE_MAXIMUM
    assert maximum_message(10000) == "Maximum order amount is $100.00"
