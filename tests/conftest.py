import pytest
from typing import Any, Dict, Generator, List, Optional
from fastapi.testclient import TestClient

import stripe

from checkout_api.app_setup.factory import create_app

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "tests/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "tests/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)


class FakeProcessor:
    """
    Processeur de paiement factice.
    - `outcomes`: liste consommée appel par appel (Exception => levée, sinon retournée).
    - `repeat`: issue rejouée une fois la liste épuisée.
    - Sinon: un vrai stripe.PaymentIntent (construct_from), comme le SDK le renvoie.
    """

    def __init__(self, outcomes: Optional[List[Any]] = None, repeat: Optional[Any] = None):
        self.outcomes = list(outcomes or [])
        self.repeat = repeat
        self.calls: List[Dict[str, Any]] = []

    def create_authorization(self, *, amount: int, currency: str, metadata: Dict[str, str]) -> Any:
        self.calls.append({"amount": amount, "currency": currency, "metadata": metadata})
        if self.outcomes:
            outcome = self.outcomes.pop(0)
        elif self.repeat is not None:
            outcome = self.repeat
        else:
            outcome = stripe.PaymentIntent.construct_from(
                {"id": "pi_test_123", "client_secret": "pi_test_123_secret_abc"}, "sk_test_fake"
            )
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def rate_limit_error() -> stripe.RateLimitError:
    return stripe.RateLimitError("Too many requests hit the API too quickly.", http_status=429, code="rate_limit")


@pytest.fixture
def fake_processor_cls():
    return FakeProcessor

@pytest.fixture
def make_rate_limit_error():
    return rate_limit_error

# Aucune vraie clé Stripe (.env local) ni vraie attente pendant les tests;
# l'hôte "testserver" du TestClient n'est autorisé qu'ici
@pytest.fixture(autouse=True)
def _test_environment(monkeypatch):
    monkeypatch.setattr("checkout_api.app_setup.middlewares.ALLOWED_HOSTS", ["localhost", "127.0.0.1", "testserver"], raising=True)
    monkeypatch.setattr("checkout_api.payments.stripe_client.STRIPE_SECRET_KEY", "", raising=True)
    monkeypatch.setattr("checkout_api.app_setup.lifespan.PAYMENT_RETRY_DELAY_MS", 0, raising=True)

@pytest.fixture
def processor() -> FakeProcessor:
    return FakeProcessor()

@pytest.fixture
def app(processor):
    return create_app(processor=processor)

@pytest.fixture()
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c

@pytest.fixture()
def unconfigured_client() -> Generator[TestClient, None, None]:
    """App sans processeur injecté et sans STRIPE_SECRET_KEY."""
    with TestClient(create_app()) as c:
        yield c
