"""Integration tests for the REST API."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from dressing.application.config import ConfigError
from dressing.domain import PricingTable, TransportZone
from dressing.web import create_app
from dressing.web.app import CONFIG_ENV_VAR

pytestmark = pytest.mark.integration


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app(PricingTable.default()))


class TestQuoteEndpoint:
    """Tests for POST /api/v1/quote."""

    def test_reference_quote(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/quote", json={"width": "2", "height": "2", "slide_count": "2"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "calculated"
        assert data["error"] is None
        assert data["breakdown"]["area"] == pytest.approx(4.41)
        assert data["breakdown"]["total_price"] == pytest.approx(2908.717)
        assert data["currency"] == "DT"

    def test_numeric_payload(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/quote",
            json={
                "width": 2,
                "height": 2.0,
                "slide_count": 2,
                "has_chambranle": False,
                "discount_percent": 0,
            },
        )
        assert response.json()["breakdown"]["total_price"] == pytest.approx(2674.525)

    def test_discount(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/quote",
            json={"width": "2", "height": "2", "slide_count": "2", "discount_percent": "10"},
        )
        breakdown = response.json()["breakdown"]
        assert breakdown["discount_amount"] == pytest.approx(218.45)
        assert breakdown["total_price"] == pytest.approx(2648.7615)

    def test_incomplete_form(self, client: TestClient) -> None:
        response = client.post("/api/v1/quote", json={"height": "2"})
        assert response.status_code == 200
        assert response.json() == {
            "status": "incomplete",
            "breakdown": None,
            "error": None,
            "missing": ["width"],
            "currency": "DT",
        }

    def test_invalid_width(self, client: TestClient) -> None:
        response = client.post("/api/v1/quote", json={"width": "0", "height": "2"})
        data = response.json()
        assert data["status"] == "invalid"
        assert data["breakdown"] is None
        assert data["error"] == {
            "kind": "non_positive",
            "field": "width",
            "message": "width must be greater than 0",
        }

    def test_discount_out_of_range(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/quote",
            json={"width": "2", "height": "2", "discount_percent": "150"},
        )
        assert response.json()["error"]["kind"] == "out_of_range"

    def test_huge_dimensions(self, client: TestClient) -> None:
        response = client.post("/api/v1/quote", json={"width": "1e200", "height": "1e200"})
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "invalid"
        assert data["breakdown"] is None
        assert data["error"]["kind"] == "invalid_number"
        assert data["error"]["field"] == "width"

    def test_unknown_zone(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/quote",
            json={"width": "2", "height": "2", "transport_zone": "mars"},
        )
        assert response.status_code == 404
        data = response.json()
        assert data["error_type"] == "unknown_zone"
        assert data["details"]["zone"] == "mars"
        assert "tunis" in data["details"]["available"]

    def test_bad_slide_type(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/quote",
            json={"width": "2", "height": "2", "slide_type": "wooden"},
        )
        assert response.status_code == 422


class TestRateEndpoints:
    """Tests for the price list endpoints."""

    def test_zones(self, client: TestClient) -> None:
        response = client.get("/api/v1/zones")
        assert response.status_code == 200
        assert [z["code"] for z in response.json()] == ["tunis", "capbon", "sousse", "djerba"]

    def test_rates(self, client: TestClient) -> None:
        data = client.get("/api/v1/rates").json()
        assert data["facade_rate"] == 450
        assert data["slide_prices"] == {"scala": 100, "metabox": 30}
        assert len(data["transport_zones"]) == 4

    def test_health(self, client: TestClient) -> None:
        assert client.get("/health").json() == {"status": "healthy"}


class TestAppConfiguration:
    """Tests for create_app pricing table selection."""

    def test_custom_table(self) -> None:
        table = PricingTable(transport_zones=(TransportZone("sfax", "Transport Sfax", 380.0),))
        client = TestClient(create_app(table))
        response = client.post("/api/v1/quote", json={"width": "2", "height": "2"})
        assert response.json()["breakdown"]["transport_fee"] == 380.0

    def test_config_from_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config = tmp_path / "prices.json"
        config.write_text(
            json.dumps({"transport_zones": [{"code": "gabes", "fee": 600}]}),
            encoding="utf-8",
        )
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config))
        client = TestClient(create_app())
        assert [z["code"] for z in client.get("/api/v1/zones").json()] == ["gabes"]

    def test_invalid_config_from_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config = tmp_path / "prices.json"
        config.write_text(
            json.dumps({"transport_zones": [{"code": "  ", "fee": 600}]}),
            encoding="utf-8",
        )
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config))
        with pytest.raises(ConfigError) as exc_info:
            create_app()
        assert exc_info.value.path == config
