from fastapi.testclient import TestClient

from checkout_api.app_setup.factory import create_app


def test_unknown_host_is_rejected_when_origins_are_explicit(monkeypatch, processor):
    monkeypatch.setattr("checkout_api.app_setup.middlewares.CORS_ORIGINS", ["http://localhost:3000"])
    app = create_app(processor=processor)

    with TestClient(app, base_url="http://evil.example") as c:
        assert c.get("/health").status_code == 400
    with TestClient(app) as c:
        assert c.get("/health").status_code == 200
