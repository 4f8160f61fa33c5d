"""Factory functions for creating pre-configured StudioCostEngine instances."""

from __future__ import annotations

from typing import TYPE_CHECKING

from studiocost.data.loader import load_pricing_config
from studiocost.data.seed import DEFAULT_PRICING_CONFIG
from studiocost.engine import StudioCostEngine

if TYPE_CHECKING:
    from pathlib import Path


def create_default_engine() -> StudioCostEngine:
    """Create a StudioCostEngine wired up with the seed pricing config.

    This is the recommended way to create an engine for typical usage.

    Example::

        from studiocost import create_default_engine

        engine = create_default_engine()
        breakdown = engine.estimate(inputs)
    """
    return StudioCostEngine(DEFAULT_PRICING_CONFIG)


def create_engine_from_file(path: Path) -> StudioCostEngine:
    """Create an engine whose rates are overlaid from a JSON config file."""
    return StudioCostEngine(load_pricing_config(path))
