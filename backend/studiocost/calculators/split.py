"""Materials vs. labor decomposition of installed costs.

Splits are reported on pre-index amounts and never feed back into the
indexed totals.

Every split is exact: ``materials + labor == total`` holds bit-for-bit,
for single lines and for aggregates. Labor is first estimated as
``total * share``; materials is ``total - labor``; labor is then
re-derived as ``total - materials``. Whichever part is at least half the
total makes the subtraction that produces the other part exact, so the
two parts add back to the total without rounding.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from studiocost.models.breakdown import CostSplit, LineSplit

if TYPE_CHECKING:
    from collections.abc import Mapping

    from studiocost.models.config import PricingConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SplitResult:
    """Per-line rows plus their aggregate for one group of lines."""

    rows: list[LineSplit]
    totals: CostSplit
    unmapped: tuple[str, ...] = ()


def labor_share_for(category: str, config: PricingConfig) -> tuple[float, bool]:
    """Return ``(share, mapped)`` for a category."""
    share = config.labor_shares.get(category)
    if share is None:
        return config.default_labor_share, False
    return share, True


def exact_parts(total: float, labor_estimate: float) -> tuple[float, float]:
    """Return ``(materials, labor)`` summing exactly to ``total``."""
    materials = total - labor_estimate
    labor = total - materials
    return materials, labor


def split_line(category: str, total: float, config: PricingConfig) -> LineSplit:
    share, _ = labor_share_for(category, config)
    materials, labor = exact_parts(total, total * share)
    return LineSplit(
        category=category,
        materials=materials,
        labor=labor,
        total=total,
        labor_share=share,
    )


def _aggregate(rows: list[LineSplit]) -> CostSplit:
    total = math.fsum(row.total for row in rows)
    materials, labor = exact_parts(total, math.fsum(row.labor for row in rows))
    return CostSplit(materials=materials, labor=labor, total=total)


def split_lines(lines: Mapping[str, float], config: PricingConfig) -> SplitResult:
    """Split every line in a mapping and aggregate the result."""
    rows: list[LineSplit] = []
    unmapped: list[str] = []
    for category, total in lines.items():
        if category not in config.labor_shares:
            logger.warning(
                "No labor share configured for %r; using default %.2f",
                category,
                config.default_labor_share,
            )
            unmapped.append(category)
        rows.append(split_line(category, total, config))
    return SplitResult(rows=rows, totals=_aggregate(rows), unmapped=tuple(unmapped))


def combine_splits(*results: SplitResult) -> CostSplit:
    """Aggregate several groups, e.g. shared + shell for detached mode."""
    return _aggregate([row for result in results for row in result.rows])
