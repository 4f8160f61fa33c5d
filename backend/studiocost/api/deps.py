"""Dependency wiring for FastAPI endpoints."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from studiocost.factory import create_default_engine, create_engine_from_file

if TYPE_CHECKING:
    from studiocost.engine import StudioCostEngine

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "STUDIOCOST_PRICING_CONFIG"


def create_engine() -> StudioCostEngine:
    """Create the engine used by the API.

    Reads STUDIOCOST_PRICING_CONFIG from the environment. When it names a
    JSON file, its rates are overlaid on the seed configuration; otherwise
    the seed configuration is used as-is.
    """
    config_path = os.environ.get(CONFIG_ENV_VAR, "")
    if not config_path:
        return create_default_engine()

    logger.info("Using pricing config override from %s", config_path)
    return create_engine_from_file(Path(config_path))
