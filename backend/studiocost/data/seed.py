"""Seed pricing configuration for the studio cost estimator.

Rates are 2025 installed-cost allowances for a sound-isolated room:
resilient clip + hat channel or double-stud decoupling, stacked drywall,
laminated/tempered glazing, soundproof doors and a small detached shell.
"""

from studiocost.data.labor_shares import DEFAULT_LABOR_SHARE, LABOR_SHARES
from studiocost.data.state_cost_index import DEFAULT_COST_INDEX, STATE_COST_INDEXES
from studiocost.models.config import (
    DecouplingRates,
    DoubleStudRates,
    DrywallRates,
    GeometryConstants,
    InstalledRange,
    InteriorRates,
    MechanicalAllowances,
    OpeningRates,
    PricingConfig,
    ShellRates,
)

DEFAULT_PRICING_CONFIG: PricingConfig = PricingConfig(
    version="2025.1",
    geometry=GeometryConstants(
        aspect_ratio=1.5,
        door_area_sf=21.0,
        roof_slope_multiplier=1.15,
        channel_waste_factor=1.1,
    ),
    decoupling=DecouplingRates(
        clip_allowance_per_sf=4.5,
        hat_channel_cost_per_lf=1.4,
        channel_lf_per_sf=0.5,
        channel_spacing_in=24,
        clip_spacing_in=48,
    ),
    double_stud=DoubleStudRates(wall_cost_per_sf_installed=12.0),
    drywall=DrywallRates(cost_per_layer_per_sf=2.5, max_layers=4),
    openings=OpeningRates(
        laminated_glass_per_sf=28.0,
        tempered_glass_per_sf=23.0,
        frame_trim_allowance_per_sf=15.0,
        oem_unit_price=2000.0,
        door_unit_cost=3200.0,
    ),
    interior=InteriorRates(
        insulation_per_sf=2.0,
        electrical_per_sf_floor=4.0,
        paint_per_sf_floor=4.5,
        flooring_per_sf=12.0,
    ),
    shell=ShellRates(slab_per_sf=9.0, siding_per_sf_wall=6.0, roofing_per_sf_roof=7.0),
    mechanical=MechanicalAllowances(
        mini_split=InstalledRange(default=7000.0, low=3500.0, high=9000.0),
        erv=InstalledRange(default=4000.0, low=3000.0, high=5000.0),
    ),
    region_factors=STATE_COST_INDEXES,
    default_region_factor=DEFAULT_COST_INDEX,
    labor_shares=LABOR_SHARES,
    default_labor_share=DEFAULT_LABOR_SHARE,
    buffer_pct=0.20,
    overrun_pct=0.30,
)
