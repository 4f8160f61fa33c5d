"""Detached-structure shell pricing: slab, siding, roofing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from studiocost.models.enums import CostCategory

if TYPE_CHECKING:
    from studiocost.models.breakdown import Geometry
    from studiocost.models.config import ShellRates


def price_shell(geometry: Geometry, rates: ShellRates) -> dict[str, float]:
    """Price the shell of a standalone studio.

    Siding covers the net wall area; openings are not clad.
    """
    return {
        CostCategory.SLAB.value: geometry.ceiling_area_sf * rates.slab_per_sf,
        CostCategory.SIDING.value: geometry.wall_area_sf * rates.siding_per_sf_wall,
        CostCategory.ROOFING.value: geometry.roof_area_sf * rates.roofing_per_sf_roof,
    }
