"""Pricing calculators that make up the estimator pipeline."""

from studiocost.calculators.adjustments import layer_adjustments
from studiocost.calculators.assemblies import price_assemblies
from studiocost.calculators.geometry import derive_geometry
from studiocost.calculators.regional import RegionalIndexer, RegionFactor
from studiocost.calculators.shell import price_shell
from studiocost.calculators.split import SplitResult, combine_splits, split_line, split_lines
from studiocost.calculators.systems import price_systems

__all__ = [
    "RegionFactor",
    "RegionalIndexer",
    "SplitResult",
    "combine_splits",
    "derive_geometry",
    "layer_adjustments",
    "price_assemblies",
    "price_shell",
    "price_systems",
    "split_line",
    "split_lines",
]
