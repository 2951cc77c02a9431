import pytest


@pytest.mark.api
def test_health_ok(client):
    resp = client.get("/api/v1/health")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}


@pytest.mark.api
def test_metrics_exposed(client):
    resp = client.get("/metrics")
    assert resp.status_code == 200
    assert "rental_quote_app_info" in resp.text


@pytest.mark.api
def test_startup_keeps_settings_on_app(client):
    settings = client.app.state.settings
    assert settings.service_name == "rental-quote"
    assert settings.max_rental_days > 0
