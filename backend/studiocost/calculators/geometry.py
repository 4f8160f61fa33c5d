"""Footprint and surface-area derivation.

The studio is assumed to be a rectangle of fixed aspect ratio with a flat
ceiling, so a floor area and a ceiling height are enough to size every
surface the calculators price.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from studiocost.exceptions import InputValidationError
from studiocost.models.breakdown import Geometry

if TYPE_CHECKING:
    from studiocost.models.config import GeometryConstants


def _require(field: str, value: float, *, positive: bool) -> None:
    if not math.isfinite(value):
        raise InputValidationError(field, f"must be a finite number, got {value}")
    if positive and value <= 0:
        raise InputValidationError(field, f"must be greater than zero, got {value}")
    if value < 0:
        raise InputValidationError(field, f"must not be negative, got {value}")


def derive_geometry(
    floor_area_sf: float,
    ceiling_height_ft: float,
    window_area_sf: float,
    door_count: int,
    constants: GeometryConstants,
) -> Geometry:
    """Derive footprint dimensions and surface areas.

    Net wall area is gross wall area minus window and door openings,
    clamped at zero. Roof area scales the floor area by the configured
    slope multiplier.

    Raises:
        InputValidationError: If any input is non-finite or out of range.
            Checked before any area is computed.
    """
    _require("floor_area_sf", floor_area_sf, positive=True)
    _require("ceiling_height_ft", ceiling_height_ft, positive=True)
    _require("window_area_sf", window_area_sf, positive=False)
    if door_count < 0:
        raise InputValidationError("door_count", f"must not be negative, got {door_count}")

    length = math.sqrt(floor_area_sf * constants.aspect_ratio)
    width = floor_area_sf / length
    perimeter = 2 * (length + width)

    door_area = door_count * constants.door_area_sf
    opening_area = window_area_sf + door_area
    gross_wall_area = perimeter * ceiling_height_ft

    return Geometry(
        length_ft=length,
        width_ft=width,
        perimeter_ft=perimeter,
        door_area_sf=door_area,
        opening_area_sf=opening_area,
        gross_wall_area_sf=gross_wall_area,
        wall_area_sf=max(gross_wall_area - window_area_sf - door_area, 0.0),
        ceiling_area_sf=floor_area_sf,
        roof_area_sf=floor_area_sf * constants.roof_slope_multiplier,
    )
