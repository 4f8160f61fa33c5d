"""Studio cost estimator.

Usage::

    from studiocost import ProjectInputs, create_default_engine

    engine = create_default_engine()
    breakdown = engine.estimate(inputs)

or, with an explicit configuration::

    from studiocost import DEFAULT_PRICING_CONFIG, compute

    breakdown = compute(inputs, DEFAULT_PRICING_CONFIG)
"""

from studiocost.data.loader import load_pricing_config
from studiocost.data.seed import DEFAULT_PRICING_CONFIG
from studiocost.engine import StudioCostEngine, compute
from studiocost.exceptions import ConfigurationError, InputValidationError, StudioCostError
from studiocost.factory import create_default_engine, create_engine_from_file
from studiocost.models.breakdown import (
    Assumption,
    Breakdown,
    CostSplit,
    EstimateMetadata,
    Geometry,
    LineSplit,
    ModeTotals,
    SplitTotals,
    Totals,
)
from studiocost.models.config import PricingConfig
from studiocost.models.enums import (
    AssemblyPreset,
    CeilingAssembly,
    Confidence,
    CostCategory,
    StructureMode,
    WallsAssembly,
    WindowPricingMode,
)
from studiocost.models.inputs import ProjectInputs

__all__ = [
    "DEFAULT_PRICING_CONFIG",
    "AssemblyPreset",
    "Assumption",
    "Breakdown",
    "CeilingAssembly",
    "Confidence",
    "ConfigurationError",
    "CostCategory",
    "CostSplit",
    "EstimateMetadata",
    "Geometry",
    "InputValidationError",
    "LineSplit",
    "ModeTotals",
    "PricingConfig",
    "ProjectInputs",
    "SplitTotals",
    "StructureMode",
    "StudioCostEngine",
    "StudioCostError",
    "Totals",
    "WallsAssembly",
    "WindowPricingMode",
    "compute",
    "create_default_engine",
    "create_engine_from_file",
    "load_pricing_config",
]
