"""Regional cost index lookup and application."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from studiocost.models.config import PricingConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegionFactor:
    """Result of a region lookup."""

    code: str
    factor: float
    matched: bool


class RegionalIndexer:
    """Looks up and applies the per-region cost multiplier.

    Args:
        config: Pricing configuration carrying the region table and the
            default factor used for codes the table does not list.
    """

    def __init__(self, config: PricingConfig) -> None:
        self._factors = config.region_factors
        self._default = config.default_region_factor

    def lookup(self, region_code: str) -> RegionFactor:
        """Find the multiplier for a region code (case-insensitive).

        Unknown codes are not an error: they get the default factor and
        ``matched=False`` so the caller can report the fallback.
        """
        code = region_code.strip().upper()
        factor = self._factors.get(code)
        if factor is not None:
            return RegionFactor(code=code, factor=factor, matched=True)

        logger.warning(
            "Unknown region code %r; using default cost index %.2f",
            region_code,
            self._default,
        )
        return RegionFactor(code=code, factor=self._default, matched=False)

    @staticmethod
    def apply(subtotal: float, factor: float) -> float:
        return subtotal * factor

    @staticmethod
    def apply_lines(lines: Mapping[str, float], factor: float) -> dict[str, float]:
        """Index each line individually.

        ``math.fsum`` of the result agrees with ``apply(fsum(lines))`` to
        within floating-point rounding.
        """
        return {category: amount * factor for category, amount in lines.items()}


def aggregate(*groups: Mapping[str, float]) -> float:
    """Sum one or more line-item mappings into a pre-index subtotal."""
    return math.fsum(amount for lines in groups for amount in lines.values())
