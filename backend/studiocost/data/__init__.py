"""Pricing data layer for the studio cost estimator."""

from studiocost.data.loader import (
    dump_pricing_config,
    load_pricing_config,
    pricing_config_from_dict,
)
from studiocost.data.seed import DEFAULT_PRICING_CONFIG

__all__ = [
    "DEFAULT_PRICING_CONFIG",
    "dump_pricing_config",
    "load_pricing_config",
    "pricing_config_from_dict",
]
