"""Pricing configuration models.

Every unit rate, geometry constant and adjustment percentage the engine
uses lives here as data, so rates can be recalibrated (or swapped per
region) without touching the calculators.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class GeometryConstants(_FrozenModel):
    """Constants used to turn a floor area into surfaces."""

    aspect_ratio: float = Field(default=1.5, gt=0)
    door_area_sf: float = Field(default=21.0, ge=0)
    roof_slope_multiplier: float = Field(default=1.15, ge=1.0)
    channel_waste_factor: float = Field(default=1.1, ge=1.0)


class DecouplingRates(_FrozenModel):
    """Resilient clip + hat channel system.

    Channel runs on a 24" grid with clips every 48", which works out to
    roughly half a linear foot of channel per square foot of surface.
    """

    clip_allowance_per_sf: float = Field(default=4.5, ge=0)
    hat_channel_cost_per_lf: float = Field(default=1.4, ge=0)
    channel_lf_per_sf: float = Field(default=0.5, gt=0)
    channel_spacing_in: int = Field(default=24, gt=0)
    clip_spacing_in: int = Field(default=48, gt=0)


class DoubleStudRates(_FrozenModel):
    wall_cost_per_sf_installed: float = Field(default=12.0, ge=0)


class DrywallRates(_FrozenModel):
    cost_per_layer_per_sf: float = Field(default=2.5, ge=0)
    max_layers: int = Field(default=4, ge=1)


class OpeningRates(_FrozenModel):
    """Windows and soundproof doors."""

    laminated_glass_per_sf: float = Field(default=28.0, ge=0)
    tempered_glass_per_sf: float = Field(default=23.0, ge=0)
    frame_trim_allowance_per_sf: float = Field(default=15.0, ge=0)
    oem_unit_price: float = Field(default=2000.0, ge=0)
    door_unit_cost: float = Field(default=3200.0, ge=0)

    @property
    def by_area_rate_per_sf(self) -> float:
        """Combined glass + frame rate used in by-area window pricing."""
        return (
            self.laminated_glass_per_sf
            + self.tempered_glass_per_sf
            + self.frame_trim_allowance_per_sf
        )


class InteriorRates(_FrozenModel):
    insulation_per_sf: float = Field(default=2.0, ge=0)
    electrical_per_sf_floor: float = Field(default=4.0, ge=0)
    paint_per_sf_floor: float = Field(default=4.5, ge=0)
    flooring_per_sf: float = Field(default=12.0, ge=0)


class ShellRates(_FrozenModel):
    """Detached-structure shell rates."""

    slab_per_sf: float = Field(default=9.0, ge=0)
    siding_per_sf_wall: float = Field(default=6.0, ge=0)
    roofing_per_sf_roof: float = Field(default=7.0, ge=0)


class InstalledRange(_FrozenModel):
    """Typical installed cost band for a user-priced piece of equipment."""

    default: float = Field(ge=0)
    low: float = Field(ge=0)
    high: float = Field(ge=0)

    @model_validator(mode="after")
    def low_le_default_le_high(self) -> InstalledRange:
        if not (self.low <= self.default <= self.high):
            msg = (
                f"Must satisfy low <= default <= high, "
                f"got {self.low} <= {self.default} <= {self.high}"
            )
            raise ValueError(msg)
        return self

    def contains(self, amount: float) -> bool:
        return self.low <= amount <= self.high


class MechanicalAllowances(_FrozenModel):
    mini_split: InstalledRange = InstalledRange(default=7000.0, low=3500.0, high=9000.0)
    erv: InstalledRange = InstalledRange(default=4000.0, low=3000.0, high=5000.0)


class PricingConfig(_FrozenModel):
    """The complete, immutable rate table passed into every calculator."""

    version: str = "2025.1"
    geometry: GeometryConstants = GeometryConstants()
    decoupling: DecouplingRates = DecouplingRates()
    double_stud: DoubleStudRates = DoubleStudRates()
    drywall: DrywallRates = DrywallRates()
    openings: OpeningRates = OpeningRates()
    interior: InteriorRates = InteriorRates()
    shell: ShellRates = ShellRates()
    mechanical: MechanicalAllowances = MechanicalAllowances()
    region_factors: dict[str, float] = Field(default_factory=dict)
    default_region_factor: float = Field(default=1.0, gt=0)
    labor_shares: dict[str, float] = Field(default_factory=dict)
    default_labor_share: float = Field(default=0.55, ge=0, le=1)
    buffer_pct: float = Field(default=0.20, ge=0)
    overrun_pct: float = Field(default=0.30, ge=0)

    @field_validator("region_factors")
    @classmethod
    def region_factors_must_be_positive(cls, v: dict[str, float]) -> dict[str, float]:
        normalized: dict[str, float] = {}
        for code, factor in v.items():
            if factor <= 0:
                msg = f"Region factor for '{code}' must be positive, got {factor}"
                raise ValueError(msg)
            normalized[code.strip().upper()] = factor
        return normalized

    @field_validator("labor_shares")
    @classmethod
    def labor_shares_must_be_fractions(cls, v: dict[str, float]) -> dict[str, float]:
        for category, share in v.items():
            if not 0.0 <= share <= 1.0:
                msg = f"Labor share for '{category}' must be within [0, 1], got {share}"
                raise ValueError(msg)
        return v

    @property
    def max_drywall_layers(self) -> int:
        return self.drywall.max_layers
