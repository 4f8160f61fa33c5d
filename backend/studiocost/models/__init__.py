"""Domain models for the studio cost estimator."""

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
from studiocost.models.enums import (
    AssemblyPreset,
    CeilingAssembly,
    Confidence,
    CostCategory,
    StructureMode,
    WallsAssembly,
    WindowPricingMode,
)
from studiocost.models.inputs import PRESET_ASSEMBLIES, ProjectInputs, resolve_preset

__all__ = [
    "PRESET_ASSEMBLIES",
    "AssemblyPreset",
    "Assumption",
    "Breakdown",
    "CeilingAssembly",
    "Confidence",
    "CostCategory",
    "CostSplit",
    "DecouplingRates",
    "DoubleStudRates",
    "DrywallRates",
    "EstimateMetadata",
    "Geometry",
    "GeometryConstants",
    "InstalledRange",
    "InteriorRates",
    "LineSplit",
    "MechanicalAllowances",
    "ModeTotals",
    "OpeningRates",
    "PricingConfig",
    "ProjectInputs",
    "ShellRates",
    "SplitTotals",
    "StructureMode",
    "Totals",
    "WallsAssembly",
    "WindowPricingMode",
    "resolve_preset",
]
