"""Systems and finishes pricing: openings, electrical, finishes, HVAC."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from studiocost.exceptions import InputValidationError
from studiocost.models.breakdown import Assumption
from studiocost.models.enums import Confidence, CostCategory, WindowPricingMode

if TYPE_CHECKING:
    from studiocost.models.config import InstalledRange, OpeningRates, PricingConfig
    from studiocost.models.inputs import ProjectInputs


def window_cost(
    mode: WindowPricingMode,
    window_area_sf: float,
    unit_count: int,
    rates: OpeningRates,
) -> float:
    """Price all windows with the single project-wide pricing mode."""
    if mode == WindowPricingMode.BY_UNIT_COUNT:
        return unit_count * rates.oem_unit_price
    return window_area_sf * rates.by_area_rate_per_sf


def door_cost(door_count: int, rates: OpeningRates) -> float:
    return door_count * rates.door_unit_cost


def pass_through(field: str, amount: float) -> float:
    """Validate a user-supplied installed amount and return it unchanged."""
    if not math.isfinite(amount):
        raise InputValidationError(field, f"must be a finite number, got {amount}")
    if amount < 0:
        raise InputValidationError(field, f"must not be negative, got {amount}")
    return amount


def check_installed_range(
    parameter: str,
    amount: float,
    typical: InstalledRange,
) -> Assumption | None:
    """Flag an installed amount that falls outside its typical band."""
    if typical.contains(amount):
        return None
    return Assumption(
        parameter=parameter,
        assumed_value=f"{amount:.2f}",
        reasoning=(
            f"Installed cost is outside the typical range "
            f"{typical.low:,.0f}-{typical.high:,.0f}; used as entered"
        ),
        confidence=Confidence.MEDIUM,
    )


def price_systems(inputs: ProjectInputs, config: PricingConfig) -> dict[str, float]:
    """Price every systems line. Always returns all seven lines."""
    floor_area = inputs.floor_area_sf
    interior = config.interior

    return {
        CostCategory.WINDOWS.value: window_cost(
            inputs.window_pricing_mode,
            inputs.window_area_sf,
            inputs.window_unit_count,
            config.openings,
        ),
        CostCategory.DOORS.value: door_cost(inputs.door_count, config.openings),
        CostCategory.ELECTRICAL.value: floor_area * interior.electrical_per_sf_floor,
        CostCategory.PAINT.value: floor_area * interior.paint_per_sf_floor,
        CostCategory.FLOORING.value: floor_area * interior.flooring_per_sf,
        CostCategory.VENTILATION.value: pass_through("erv_cost", inputs.erv_cost),
        CostCategory.MINISPLIT.value: pass_through("mini_split_cost", inputs.mini_split_cost),
    }


def mechanical_assumptions(inputs: ProjectInputs, config: PricingConfig) -> list[Assumption]:
    """Document mini-split/ERV amounts that fall outside their typical band."""
    checks = (
        check_installed_range("mini_split_cost", inputs.mini_split_cost, config.mechanical.mini_split),
        check_installed_range("erv_cost", inputs.erv_cost, config.mechanical.erv),
    )
    return [a for a in checks if a is not None]
