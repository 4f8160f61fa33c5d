"""Core cost derivation pipeline for the studio cost estimator.

The StudioCostEngine turns a ProjectInputs into a Breakdown in fixed steps:

1. **Validation**: Reject inputs the pricing config makes invalid (drywall
   layers above the configured maximum), plus non-finite or negative values
   that slipped past model validation.
2. **Geometry**: Derive footprint, net wall, ceiling and roof areas.
3. **Line items**: Price interior assemblies and systems (shared by both
   structure modes) and the detached shell.
4. **Regional index**: Multiply each mode's pre-index subtotal by the
   region's cost index (1.0 for unknown regions).
5. **Adjustment layering**: Baseline, +buffer estimate, and +overrun
   reality check, compounded in that order.
6. **Materials/labor split**: Decompose every pre-index line and each
   mode's aggregate, reported alongside but separate from the totals.
7. **Assumption documentation**: Record every default and clamp so the
   estimate stays traceable.

The pipeline is a pure function of (inputs, config). The engine holds
nothing but the config, so a single instance can serve concurrent callers.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from studiocost.calculators.adjustments import layer_adjustments
from studiocost.calculators.assemblies import price_assemblies
from studiocost.calculators.geometry import derive_geometry
from studiocost.calculators.regional import RegionalIndexer, aggregate
from studiocost.calculators.shell import price_shell
from studiocost.calculators.split import combine_splits, split_lines
from studiocost.calculators.systems import mechanical_assumptions, price_systems
from studiocost.exceptions import InputValidationError
from studiocost.models.breakdown import (
    Assumption,
    Breakdown,
    EstimateMetadata,
    SplitTotals,
    Totals,
)
from studiocost.models.enums import Confidence, CostCategory

if TYPE_CHECKING:
    from collections.abc import Mapping

    from studiocost.calculators.regional import RegionFactor
    from studiocost.calculators.split import SplitResult
    from studiocost.models.breakdown import Geometry
    from studiocost.models.config import PricingConfig
    from studiocost.models.inputs import ProjectInputs

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.1.0"

_WALL_INPUTS = ("floor_area_sf", "ceiling_height_ft")
_FLOOR_INPUTS = ("floor_area_sf",)

# Inputs that scale each line item; used to name the field behind an overflow.
_LINE_INPUTS: dict[str, tuple[str, ...]] = {
    CostCategory.WALLS_DECOUPLE.value: _WALL_INPUTS,
    CostCategory.WALLS_DOUBLE.value: _WALL_INPUTS,
    CostCategory.WALLS_DRYWALL.value: _WALL_INPUTS,
    CostCategory.WALLS_INSUL.value: _WALL_INPUTS,
    CostCategory.CEIL_DECOUPLE.value: _FLOOR_INPUTS,
    CostCategory.CEIL_DRYWALL.value: _FLOOR_INPUTS,
    CostCategory.CEIL_INSUL.value: _FLOOR_INPUTS,
    CostCategory.WINDOWS.value: ("window_area_sf", "window_unit_count"),
    CostCategory.DOORS.value: ("door_count",),
    CostCategory.ELECTRICAL.value: _FLOOR_INPUTS,
    CostCategory.PAINT.value: _FLOOR_INPUTS,
    CostCategory.FLOORING.value: _FLOOR_INPUTS,
    CostCategory.VENTILATION.value: ("erv_cost",),
    CostCategory.MINISPLIT.value: ("mini_split_cost",),
    CostCategory.SLAB.value: _FLOOR_INPUTS,
    CostCategory.SIDING.value: _WALL_INPUTS,
    CostCategory.ROOFING.value: _FLOOR_INPUTS,
}
_SIZED_INPUTS = tuple(sorted({name for names in _LINE_INPUTS.values() for name in names}))


def _overflow_error(
    inputs: ProjectInputs,
    lines: Mapping[str, float] | None = None,
) -> InputValidationError:
    """Blame the largest input behind the largest line (or any line)."""
    candidates = _SIZED_INPUTS
    if lines:
        largest = max(lines, key=lines.__getitem__)
        candidates = _LINE_INPUTS.get(largest, _SIZED_INPUTS)
    field = max(candidates, key=lambda name: getattr(inputs, name))
    logger.warning("Estimate overflowed; largest contributing input is %s", field)
    return InputValidationError(
        field, f"is too large to estimate, got {getattr(inputs, field)}"
    )


def validate_inputs(inputs: ProjectInputs, config: PricingConfig) -> None:
    """Check inputs against the limits that depend on the pricing config.

    Raises:
        InputValidationError: Naming the first offending field.
    """
    for field in ("floor_area_sf", "ceiling_height_ft"):
        value = getattr(inputs, field)
        if not math.isfinite(value) or value <= 0:
            raise InputValidationError(field, f"must be a positive finite number, got {value}")

    for field in ("window_area_sf", "mini_split_cost", "erv_cost"):
        value = getattr(inputs, field)
        if not math.isfinite(value) or value < 0:
            raise InputValidationError(field, f"must be a non-negative finite number, got {value}")

    for field in ("door_count", "window_unit_count"):
        value = getattr(inputs, field)
        if value < 0:
            raise InputValidationError(field, f"must not be negative, got {value}")

    max_layers = config.max_drywall_layers
    for field in ("drywall_layers_walls", "drywall_layers_ceiling"):
        layers = getattr(inputs, field)
        if not 1 <= layers <= max_layers:
            raise InputValidationError(
                field, f"must be between 1 and {max_layers} layers, got {layers}"
            )


class StudioCostEngine:
    """Estimation engine that converts ProjectInputs into a Breakdown.

    Args:
        config: The pricing configuration providing every unit rate,
            geometry constant, region index and labor share.

    Example::

        from studiocost.data.seed import DEFAULT_PRICING_CONFIG

        engine = StudioCostEngine(DEFAULT_PRICING_CONFIG)
        breakdown = engine.estimate(inputs)
    """

    def __init__(self, config: PricingConfig) -> None:
        self._config = config
        self._indexer = RegionalIndexer(config)

    @property
    def config(self) -> PricingConfig:
        return self._config

    def estimate(self, inputs: ProjectInputs) -> Breakdown:
        """Run the full pipeline for one project.

        Returns:
            A complete Breakdown covering both structure modes.

        Raises:
            InputValidationError: If an input is out of range for this
                configuration. No partial result is produced.
        """
        config = self._config
        validate_inputs(inputs, config)
        assumptions: list[Assumption] = []

        # 1. Geometry and 2. line items
        try:
            geometry = derive_geometry(
                inputs.floor_area_sf,
                inputs.ceiling_height_ft,
                inputs.window_area_sf,
                inputs.door_count,
                config.geometry,
            )
            shared = price_assemblies(
                geometry,
                inputs.walls_assembly,
                inputs.ceiling_assembly,
                inputs.drywall_layers_walls,
                inputs.drywall_layers_ceiling,
                config,
            )
            shared.update(price_systems(inputs, config))
            shell = price_shell(geometry, config.shell)
        except OverflowError as exc:
            raise _overflow_error(inputs) from exc
        overflowed = {
            category: amount
            for category, amount in {**shared, **shell}.items()
            if not math.isfinite(amount)
        }
        if overflowed:
            raise _overflow_error(inputs, overflowed)
        self._collect_geometry_assumptions(geometry, assumptions)
        assumptions.extend(mechanical_assumptions(inputs, config))

        # 3. Regional index
        region = self._indexer.lookup(inputs.region_code)
        self._collect_region_assumption(region, assumptions)

        # 4. Adjustment layering, per structure mode
        try:
            existing_subtotal = aggregate(shared)
            detached_subtotal = aggregate(shared, shell)
        except OverflowError as exc:
            raise _overflow_error(inputs, {**shared, **shell}) from exc
        totals = Totals(
            existing=layer_adjustments(
                self._indexer.apply(existing_subtotal, region.factor),
                config.buffer_pct,
                config.overrun_pct,
                existing_subtotal,
            ),
            detached=layer_adjustments(
                self._indexer.apply(detached_subtotal, region.factor),
                config.buffer_pct,
                config.overrun_pct,
                detached_subtotal,
            ),
        )
        for mode_totals in (totals.existing, totals.detached):
            layered = (mode_totals.baseline, mode_totals.estimate, mode_totals.reality_check)
            if not all(math.isfinite(amount) for amount in layered):
                raise _overflow_error(inputs, {**shared, **shell})

        # 5. Materials/labor split on pre-index amounts
        shared_split = split_lines(shared, config)
        shell_split = split_lines(shell, config)
        self._collect_split_assumptions((shared_split, shell_split), assumptions)

        return Breakdown(
            structure_mode=inputs.structure_mode,
            region_code=region.code,
            region_factor=region.factor,
            geometry=geometry,
            shared=shared,
            shell=shell,
            totals=totals,
            shared_split=shared_split.rows,
            shell_split=shell_split.rows,
            split=SplitTotals(
                existing=shared_split.totals,
                detached=combine_splits(shared_split, shell_split),
            ),
            assumptions=assumptions,
            metadata=EstimateMetadata(
                engine_version=ENGINE_VERSION,
                config_version=config.version,
            ),
        )

    @staticmethod
    def _collect_geometry_assumptions(
        geometry: Geometry,
        assumptions: list[Assumption],
    ) -> None:
        if not geometry.wall_area_clamped:
            return
        logger.warning(
            "Openings (%.1f sf) exceed gross wall area (%.1f sf); net wall area clamped to 0",
            geometry.opening_area_sf,
            geometry.gross_wall_area_sf,
        )
        assumptions.append(
            Assumption(
                parameter="wall_area_sf",
                assumed_value="0.0",
                reasoning=(
                    f"Window and door openings ({geometry.opening_area_sf:,.1f} sf) "
                    f"exceed the gross wall area ({geometry.gross_wall_area_sf:,.1f} sf); "
                    f"wall surfaces are priced at zero"
                ),
                confidence=Confidence.LOW,
            )
        )

    @staticmethod
    def _collect_region_assumption(
        region: RegionFactor,
        assumptions: list[Assumption],
    ) -> None:
        if region.matched:
            return
        assumptions.append(
            Assumption(
                parameter="region_code",
                assumed_value=str(region.factor),
                reasoning=f"Region '{region.code}' has no cost index; used the default index",
                confidence=Confidence.MEDIUM,
            )
        )

    def _collect_split_assumptions(
        self,
        results: tuple[SplitResult, ...],
        assumptions: list[Assumption],
    ) -> None:
        for result in results:
            for category in result.unmapped:
                assumptions.append(
                    Assumption(
                        parameter=f"labor_share.{category}",
                        assumed_value=str(self._config.default_labor_share),
                        reasoning=f"No labor share configured for '{category}'; used the default share",
                        confidence=Confidence.MEDIUM,
                    )
                )


def compute(inputs: ProjectInputs, config: PricingConfig) -> Breakdown:
    """Run the estimator pipeline for ``inputs`` under ``config``."""
    return StudioCostEngine(config).estimate(inputs)
