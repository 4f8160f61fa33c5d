"""Interior assembly pricing: decoupling, framing, drywall, insulation.

Walls and ceiling are priced independently. Each surface picks one
decoupling variant; the variants it did not pick still appear as 0.0
lines so every breakdown has the same set of keys.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from studiocost.models.enums import CeilingAssembly, CostCategory, WallsAssembly

if TYPE_CHECKING:
    from studiocost.models.breakdown import Geometry
    from studiocost.models.config import (
        DecouplingRates,
        DoubleStudRates,
        DrywallRates,
        InteriorRates,
        PricingConfig,
    )


def decoupling_cost(surface_sf: float, rates: DecouplingRates, waste_factor: float) -> float:
    """Clips + hat channel for one surface.

    Clip hardware is a flat allowance per square foot; channel is bought
    by the linear foot at ``channel_lf_per_sf`` times the waste factor.
    """
    clip_system = surface_sf * rates.clip_allowance_per_sf
    channel_lf = surface_sf * rates.channel_lf_per_sf * waste_factor
    return clip_system + channel_lf * rates.hat_channel_cost_per_lf


def double_stud_cost(surface_sf: float, rates: DoubleStudRates) -> float:
    return surface_sf * rates.wall_cost_per_sf_installed


def drywall_cost(surface_sf: float, layers: int, rates: DrywallRates) -> float:
    """Stacked drywall, with ``layers`` clamped to [1, max_layers]."""
    layers = min(max(layers, 1), rates.max_layers)
    return surface_sf * layers * rates.cost_per_layer_per_sf


def insulation_cost(surface_sf: float, rates: InteriorRates) -> float:
    return surface_sf * rates.insulation_per_sf


def price_walls(
    wall_area_sf: float,
    assembly: WallsAssembly,
    layers: int,
    config: PricingConfig,
) -> dict[str, float]:
    """Price the wall surface. Returns all four wall lines."""
    decouple = 0.0
    double = 0.0
    if assembly == WallsAssembly.CLIPS:
        decouple = decoupling_cost(
            wall_area_sf, config.decoupling, config.geometry.channel_waste_factor
        )
    elif assembly == WallsAssembly.DOUBLE_STUD:
        double = double_stud_cost(wall_area_sf, config.double_stud)

    return {
        CostCategory.WALLS_DECOUPLE.value: decouple,
        CostCategory.WALLS_DOUBLE.value: double,
        CostCategory.WALLS_DRYWALL.value: drywall_cost(wall_area_sf, layers, config.drywall),
        CostCategory.WALLS_INSUL.value: insulation_cost(wall_area_sf, config.interior),
    }


def price_ceiling(
    ceiling_area_sf: float,
    assembly: CeilingAssembly,
    layers: int,
    config: PricingConfig,
) -> dict[str, float]:
    """Price the ceiling surface. Double-stud is not offered overhead."""
    decouple = 0.0
    if assembly == CeilingAssembly.CLIPS:
        decouple = decoupling_cost(
            ceiling_area_sf, config.decoupling, config.geometry.channel_waste_factor
        )

    return {
        CostCategory.CEIL_DECOUPLE.value: decouple,
        CostCategory.CEIL_DRYWALL.value: drywall_cost(ceiling_area_sf, layers, config.drywall),
        CostCategory.CEIL_INSUL.value: insulation_cost(ceiling_area_sf, config.interior),
    }


def price_assemblies(
    geometry: Geometry,
    walls: WallsAssembly,
    ceiling: CeilingAssembly,
    walls_layers: int,
    ceiling_layers: int,
    config: PricingConfig,
) -> dict[str, float]:
    """Price both interior surfaces. Always returns all seven assembly lines."""
    lines = price_walls(geometry.wall_area_sf, walls, walls_layers, config)
    lines.update(price_ceiling(geometry.ceiling_area_sf, ceiling, ceiling_layers, config))
    return lines
