"""Tests for footprint and surface-area derivation."""

from __future__ import annotations

import math

import pytest

from studiocost.calculators.geometry import derive_geometry
from studiocost.exceptions import InputValidationError
from studiocost.models.config import GeometryConstants


@pytest.fixture()
def constants() -> GeometryConstants:
    return GeometryConstants(
        aspect_ratio=1.5,
        door_area_sf=21.0,
        roof_slope_multiplier=1.15,
        channel_waste_factor=1.1,
    )


class TestFootprint:
    def test_300_sf_dimensions(self, constants: GeometryConstants) -> None:
        geom = derive_geometry(300.0, 10.0, 24.0, 1, constants)
        assert geom.length_ft == pytest.approx(21.213, abs=0.01)
        assert geom.width_ft == pytest.approx(14.142, abs=0.01)
        assert geom.perimeter_ft == pytest.approx(70.71, abs=0.01)

    def test_length_times_width_is_floor_area(self, constants: GeometryConstants) -> None:
        geom = derive_geometry(512.0, 9.0, 0.0, 0, constants)
        assert geom.length_ft * geom.width_ft == pytest.approx(512.0)
        assert geom.length_ft / geom.width_ft == pytest.approx(1.5)

    def test_ceiling_and_roof_area(self, constants: GeometryConstants) -> None:
        geom = derive_geometry(300.0, 10.0, 24.0, 1, constants)
        assert geom.ceiling_area_sf == 300.0
        assert geom.roof_area_sf == pytest.approx(345.0)
        assert geom.roof_area_sf >= geom.ceiling_area_sf


class TestWallArea:
    def test_net_wall_area(self, constants: GeometryConstants) -> None:
        geom = derive_geometry(300.0, 10.0, 24.0, 1, constants)
        # 70.71 * 10 - 24 - 21
        assert geom.wall_area_sf == pytest.approx(662.1, abs=0.5)
        assert geom.door_area_sf == 21.0
        assert geom.opening_area_sf == 45.0
        assert not geom.wall_area_clamped

    def test_openings_larger_than_walls_clamp_to_zero(
        self, constants: GeometryConstants
    ) -> None:
        geom = derive_geometry(100.0, 8.0, 5_000.0, 3, constants)
        assert geom.wall_area_sf == 0.0
        assert geom.wall_area_clamped

    @pytest.mark.parametrize(
        ("area", "height", "windows", "doors"),
        [
            (1.0, 1.0, 0.0, 0),
            (50.0, 7.0, 300.0, 10),
            (300.0, 10.0, 24.0, 1),
            (2_000.0, 16.0, 0.0, 2),
        ],
    )
    def test_wall_area_never_negative(
        self,
        constants: GeometryConstants,
        area: float,
        height: float,
        windows: float,
        doors: int,
    ) -> None:
        geom = derive_geometry(area, height, windows, doors, constants)
        assert geom.wall_area_sf >= 0.0


class TestRejectedInputs:
    @pytest.mark.parametrize("area", [0.0, -10.0, math.nan, math.inf])
    def test_bad_floor_area(self, constants: GeometryConstants, area: float) -> None:
        with pytest.raises(InputValidationError) as exc_info:
            derive_geometry(area, 10.0, 0.0, 0, constants)
        assert exc_info.value.field == "floor_area_sf"

    def test_bad_height(self, constants: GeometryConstants) -> None:
        with pytest.raises(InputValidationError) as exc_info:
            derive_geometry(300.0, 0.0, 0.0, 0, constants)
        assert exc_info.value.field == "ceiling_height_ft"

    def test_negative_window_area(self, constants: GeometryConstants) -> None:
        with pytest.raises(InputValidationError) as exc_info:
            derive_geometry(300.0, 10.0, -1.0, 0, constants)
        assert exc_info.value.field == "window_area_sf"

    def test_negative_doors(self, constants: GeometryConstants) -> None:
        with pytest.raises(InputValidationError) as exc_info:
            derive_geometry(300.0, 10.0, 0.0, -1, constants)
        assert exc_info.value.field == "door_count"
