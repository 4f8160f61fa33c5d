"""Tests for interior assembly pricing."""

from __future__ import annotations

import pytest

from studiocost.calculators.assemblies import (
    decoupling_cost,
    double_stud_cost,
    drywall_cost,
    insulation_cost,
    price_assemblies,
    price_ceiling,
    price_walls,
)
from studiocost.calculators.geometry import derive_geometry
from studiocost.data.seed import DEFAULT_PRICING_CONFIG
from studiocost.models.config import DecouplingRates, DrywallRates, PricingConfig
from studiocost.models.enums import ASSEMBLY_CATEGORIES, CeilingAssembly, WallsAssembly


@pytest.fixture()
def config() -> PricingConfig:
    return DEFAULT_PRICING_CONFIG


class TestUnitFormulas:
    def test_decoupling_cost_100_sf(self) -> None:
        rates = DecouplingRates(clip_allowance_per_sf=4.5, hat_channel_cost_per_lf=1.4)
        # 100 * 4.5 + (100 * 0.5 * 1.1) * 1.4 = 450 + 77
        assert decoupling_cost(100.0, rates, 1.1) == pytest.approx(527.00, abs=0.01)

    def test_double_stud(self, config: PricingConfig) -> None:
        assert double_stud_cost(100.0, config.double_stud) == pytest.approx(1_200.0)

    def test_drywall_scales_with_layers(self, config: PricingConfig) -> None:
        one = drywall_cost(100.0, 1, config.drywall)
        three = drywall_cost(100.0, 3, config.drywall)
        assert one == pytest.approx(250.0)
        assert three == pytest.approx(3 * one)

    def test_drywall_layers_clamped(self) -> None:
        rates = DrywallRates(cost_per_layer_per_sf=2.5, max_layers=4)
        assert drywall_cost(10.0, 9, rates) == drywall_cost(10.0, 4, rates)
        assert drywall_cost(10.0, 0, rates) == drywall_cost(10.0, 1, rates)

    def test_insulation(self, config: PricingConfig) -> None:
        assert insulation_cost(50.0, config.interior) == pytest.approx(100.0)


class TestWalls:
    def test_clips_zeroes_double_stud(self, config: PricingConfig) -> None:
        lines = price_walls(100.0, WallsAssembly.CLIPS, 2, config)
        assert lines["walls_decouple"] == pytest.approx(527.0)
        assert lines["walls_double"] == 0.0

    def test_double_stud_zeroes_clips(self, config: PricingConfig) -> None:
        lines = price_walls(100.0, WallsAssembly.DOUBLE_STUD, 2, config)
        assert lines["walls_decouple"] == 0.0
        assert lines["walls_double"] == pytest.approx(1_200.0)

    def test_none_keeps_drywall_and_insulation(self, config: PricingConfig) -> None:
        lines = price_walls(100.0, WallsAssembly.NONE, 2, config)
        assert lines["walls_decouple"] == 0.0
        assert lines["walls_double"] == 0.0
        assert lines["walls_drywall"] == pytest.approx(500.0)
        assert lines["walls_insul"] == pytest.approx(200.0)


class TestCeiling:
    def test_clips(self, config: PricingConfig) -> None:
        lines = price_ceiling(300.0, CeilingAssembly.CLIPS, 2, config)
        assert lines["ceil_decouple"] == pytest.approx(1_581.0)
        assert lines["ceil_drywall"] == pytest.approx(1_500.0)
        assert lines["ceil_insul"] == pytest.approx(600.0)

    def test_standard_has_zero_decoupling_line(self, config: PricingConfig) -> None:
        lines = price_ceiling(300.0, CeilingAssembly.STANDARD, 2, config)
        assert lines["ceil_decouple"] == 0.0


class TestPriceAssemblies:
    @pytest.mark.parametrize("walls", list(WallsAssembly))
    @pytest.mark.parametrize("ceiling", list(CeilingAssembly))
    def test_same_keys_for_every_selection(
        self,
        config: PricingConfig,
        walls: WallsAssembly,
        ceiling: CeilingAssembly,
    ) -> None:
        geom = derive_geometry(300.0, 10.0, 24.0, 1, config.geometry)
        lines = price_assemblies(geom, walls, ceiling, 2, 2, config)
        assert list(lines) == [c.value for c in ASSEMBLY_CATEGORIES]
        assert all(v >= 0.0 for v in lines.values())
