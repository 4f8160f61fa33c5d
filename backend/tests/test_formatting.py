"""Tests for formatting helpers and Breakdown.to_summary_dict."""

from __future__ import annotations

import math

import pytest

from studiocost.data.seed import DEFAULT_PRICING_CONFIG
from studiocost.engine import compute
from studiocost.formatting import format_area, format_currency, format_factor
from studiocost.models.breakdown import Breakdown
from studiocost.models.enums import AssemblyPreset, StructureMode
from studiocost.models.inputs import ProjectInputs


def _build_breakdown(mode: StructureMode = StructureMode.DETACHED) -> Breakdown:
    inputs = ProjectInputs(
        region_code="TN",
        floor_area_sf=300.0,
        ceiling_height_ft=10.0,
        window_area_sf=24.0,
        door_count=1,
        assembly_preset=AssemblyPreset.SPYS_MIX,
        mini_split_cost=7_000.0,
        erv_cost=4_000.0,
        structure_mode=mode,
    )  # type: ignore[call-arg]
    return compute(inputs, DEFAULT_PRICING_CONFIG)


# ---------- format_currency ----------


class TestFormatCurrency:
    def test_large_amount_no_cents(self) -> None:
        assert format_currency(48_282.35) == "$48,282"

    def test_small_amount_whole_dollars(self) -> None:
        assert format_currency(1_581.0) == "$1,581"
        assert format_currency(9_876.54) == "$9,877"

    def test_zero(self) -> None:
        assert format_currency(0.0) == "$0"

    @pytest.mark.parametrize("amount", [math.nan, math.inf])
    def test_non_finite(self, amount: float) -> None:
        assert format_currency(amount) == "-"


class TestOtherFormats:
    def test_area(self) -> None:
        assert format_area(662.10678) == "662.1 ft²"
        assert format_area(1_200.0) == "1,200.0 ft²"

    def test_factor(self) -> None:
        assert format_factor(0.94) == "0.940"


# ---------- Breakdown.to_summary_dict ----------


class TestToSummaryDict:
    def test_all_keys_present(self) -> None:
        summary = _build_breakdown().to_summary_dict()
        assert set(summary) == {
            "structure_mode",
            "region_code",
            "region_factor_formatted",
            "floor_area_formatted",
            "wall_area_formatted",
            "baseline_formatted",
            "estimate_formatted",
            "reality_check_formatted",
            "materials_formatted",
            "labor_formatted",
            "top_cost_drivers",
            "num_assumptions",
        }

    def test_values(self) -> None:
        breakdown = _build_breakdown()
        summary = breakdown.to_summary_dict()
        assert summary["structure_mode"] == "detached"
        assert summary["region_factor_formatted"] == "0.940"
        assert summary["floor_area_formatted"] == "300.0 ft²"
        assert summary["reality_check_formatted"] == format_currency(
            breakdown.totals.detached.reality_check
        )

    def test_top_drivers_follow_mode(self) -> None:
        detached = _build_breakdown().to_summary_dict()["top_cost_drivers"]
        existing = _build_breakdown(StructureMode.EXISTING).to_summary_dict()["top_cost_drivers"]
        assert len(detached) == 3
        # Double-stud walls dominate either way
        assert detached[0]["category"] == "walls_double"
        assert all(d["category"] not in {"slab", "siding", "roofing"} for d in existing)
