"""Tests for the FastAPI application."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from studiocost.api.app import create_app
from studiocost.api.deps import CONFIG_ENV_VAR, create_engine
from studiocost.data.seed import DEFAULT_PRICING_CONFIG
from studiocost.engine import StudioCostEngine

# ---------------------------------------------------------------------------
# Fixtures / helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def client() -> TestClient:
    return TestClient(create_app(cost_engine=StudioCostEngine(DEFAULT_PRICING_CONFIG)))


def _payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "region_code": "TN",
        "floor_area_sf": 300,
        "ceiling_height_ft": 10,
        "window_area_sf": 24,
        "door_count": 1,
        "assembly_preset": "spys_mix",
        "drywall_layers_walls": 2,
        "drywall_layers_ceiling": 2,
        "window_pricing_mode": "by_area",
        "window_unit_count": 0,
        "mini_split_cost": 7000,
        "erv_cost": 4000,
        "structure_mode": "existing",
    }
    payload.update(overrides)
    return payload


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "version": "0.1.0"}


class TestEstimate:
    def test_returns_breakdown(self, client: TestClient) -> None:
        resp = client.post("/api/estimate", json=_payload())
        assert resp.status_code == 200
        data = resp.json()
        breakdown = data["breakdown"]
        assert breakdown["region_factor"] == pytest.approx(0.94)
        assert breakdown["shared"]["walls_decouple"] == 0.0
        assert set(breakdown["shell"]) == {"slab", "siding", "roofing"}
        totals = breakdown["totals"]["existing"]
        assert totals["reality_check"] == pytest.approx(totals["baseline"] * 1.2 * 1.3)
        assert data["summary_dict"]["structure_mode"] == "existing"

    def test_unknown_region_still_estimates(self, client: TestClient) -> None:
        resp = client.post("/api/estimate", json=_payload(region_code="XX"))
        assert resp.status_code == 200
        breakdown = resp.json()["breakdown"]
        assert breakdown["region_factor"] == 1.0
        assert [a["parameter"] for a in breakdown["assumptions"]] == ["region_code"]

    def test_negative_area_returns_422(self, client: TestClient) -> None:
        resp = client.post("/api/estimate", json=_payload(floor_area_sf=-10))
        assert resp.status_code == 422
        locs = [err["loc"] for err in resp.json()["detail"]]
        assert ["body", "floor_area_sf"] in locs

    def test_too_many_layers_returns_422_with_field(self, client: TestClient) -> None:
        resp = client.post("/api/estimate", json=_payload(drywall_layers_walls=6))
        assert resp.status_code == 422
        assert resp.json()["detail"]["field"] == "drywall_layers_walls"

    def test_preset_conflict_returns_422_at_field(self, client: TestClient) -> None:
        resp = client.post("/api/estimate", json=_payload(walls_assembly="clips"))
        assert resp.status_code == 422
        locs = [err["loc"] for err in resp.json()["detail"]]
        assert locs == [["body", "walls_assembly"]]

    def test_overflowing_amount_returns_422_with_field(self, client: TestClient) -> None:
        resp = client.post("/api/estimate", json=_payload(mini_split_cost=1.5e308))
        assert resp.status_code == 422
        assert resp.json()["detail"]["field"] == "mini_split_cost"


class TestSampleEstimate:
    def test_sample(self, client: TestClient) -> None:
        resp = client.get("/api/sample-estimate")
        assert resp.status_code == 200
        data = resp.json()
        assert data["inputs"]["region_code"] == "TN"
        assert data["inputs"]["walls_assembly"] == "double_stud"
        assert data["breakdown"]["structure_mode"] == "detached"


class TestConfigEndpoints:
    def test_config(self, client: TestClient) -> None:
        data = client.get("/api/config").json()
        assert data["version"] == "2025.1"
        assert data["buffer_pct"] == 0.2
        assert data["region_factors"]["TN"] == 0.94

    def test_presets(self, client: TestClient) -> None:
        data = client.get("/api/presets").json()
        assert data["spys_mix"] == {"walls_assembly": "double_stud", "ceiling_assembly": "clips"}
        assert "custom" not in data


# ---------------------------------------------------------------------------
# Engine wiring
# ---------------------------------------------------------------------------


class TestCreateEngine:
    def test_default_without_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert create_engine().config == DEFAULT_PRICING_CONFIG

    def test_override_from_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        path = tmp_path / "rates.json"
        path.write_text('{"version": "test", "buffer_pct": 0.1}', encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        engine = create_engine()
        assert engine.config.version == "test"
        assert engine.config.buffer_pct == 0.1

    def test_lazy_engine(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        client = TestClient(create_app())
        resp = client.get("/api/config")
        assert resp.json()["version"] == "2025.1"
