"""Cost breakdown output models for the studio cost estimator."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from studiocost.models.enums import Confidence, StructureMode


class Geometry(BaseModel):
    """Footprint and surface areas derived from the floor area."""

    length_ft: float
    width_ft: float
    perimeter_ft: float
    door_area_sf: float
    opening_area_sf: float
    gross_wall_area_sf: float
    wall_area_sf: float = Field(ge=0)
    ceiling_area_sf: float
    roof_area_sf: float

    @property
    def wall_area_clamped(self) -> bool:
        """True when the openings exceeded the gross wall area."""
        return self.opening_area_sf > self.gross_wall_area_sf


class LineSplit(BaseModel):
    """Materials/labor decomposition of one installed-cost line."""

    category: str
    materials: float
    labor: float
    total: float
    labor_share: float

    @model_validator(mode="after")
    def parts_sum_to_total(self) -> LineSplit:
        if self.materials + self.labor != self.total:
            msg = (
                f"materials + labor must equal total for '{self.category}', "
                f"got {self.materials} + {self.labor} != {self.total}"
            )
            raise ValueError(msg)
        return self


class CostSplit(BaseModel):
    """Aggregate materials/labor for a group of lines (pre-index)."""

    materials: float
    labor: float
    total: float


class ModeTotals(BaseModel):
    """Baseline, buffered estimate and overrun view for one structure mode."""

    subtotal: float
    baseline: float
    estimate: float
    reality_check: float


class Totals(BaseModel):
    existing: ModeTotals
    detached: ModeTotals

    def for_mode(self, mode: StructureMode) -> ModeTotals:
        return self.detached if mode == StructureMode.DETACHED else self.existing


class SplitTotals(BaseModel):
    existing: CostSplit
    detached: CostSplit


class Assumption(BaseModel):
    """A documented default or adjustment made during estimation."""

    parameter: str
    assumed_value: str
    reasoning: str
    confidence: Confidence


class EstimateMetadata(BaseModel):
    """Metadata about the estimation run."""

    engine_version: str
    config_version: str
    estimation_method: str = "assembly_unit_rate"
    region_index_source: str = "State construction cost index"


class Breakdown(BaseModel):
    """Complete result of one pipeline run.

    Line-item mappings always carry every category, including zero-valued
    ones for assembly variants that were not chosen, so reports line up
    across different assembly selections.
    """

    structure_mode: StructureMode
    region_code: str
    region_factor: float
    geometry: Geometry
    shared: dict[str, float]
    shell: dict[str, float]
    totals: Totals
    shared_split: list[LineSplit]
    shell_split: list[LineSplit]
    split: SplitTotals
    assumptions: list[Assumption] = Field(default_factory=list)
    metadata: EstimateMetadata

    @property
    def selected_totals(self) -> ModeTotals:
        """Totals for the structure mode the project was entered with."""
        return self.totals.for_mode(self.structure_mode)

    @property
    def selected_split(self) -> CostSplit:
        if self.structure_mode == StructureMode.DETACHED:
            return self.split.detached
        return self.split.existing

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict with display-ready strings."""
        from studiocost.formatting import format_area, format_currency, format_factor

        selected = self.selected_totals
        all_lines = dict(self.shared)
        if self.structure_mode == StructureMode.DETACHED:
            all_lines.update(self.shell)
        top_drivers = sorted(all_lines.items(), key=lambda kv: kv[1], reverse=True)[:3]

        return {
            "structure_mode": self.structure_mode.value,
            "region_code": self.region_code,
            "region_factor_formatted": format_factor(self.region_factor),
            "floor_area_formatted": format_area(self.geometry.ceiling_area_sf),
            "wall_area_formatted": format_area(self.geometry.wall_area_sf),
            "baseline_formatted": format_currency(selected.baseline),
            "estimate_formatted": format_currency(selected.estimate),
            "reality_check_formatted": format_currency(selected.reality_check),
            "materials_formatted": format_currency(self.selected_split.materials),
            "labor_formatted": format_currency(self.selected_split.labor),
            "top_cost_drivers": [
                {"category": category, "cost_formatted": format_currency(amount)}
                for category, amount in top_drivers
            ],
            "num_assumptions": len(self.assumptions),
        }
