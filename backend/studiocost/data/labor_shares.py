"""Typical labor share of installed cost, by cost category.

The remainder of each installed amount is attributed to materials.
"""

from __future__ import annotations

LABOR_SHARES: dict[str, float] = {
    "walls_decouple": 0.55,
    "walls_double": 0.55,
    "walls_drywall": 0.65,
    "walls_insul": 0.50,
    "ceil_decouple": 0.55,
    "ceil_drywall": 0.65,
    "ceil_insul": 0.50,
    "windows": 0.40,
    "doors": 0.40,
    "electrical": 0.70,
    "paint": 0.70,
    "flooring": 0.60,
    "ventilation": 0.60,
    "minisplit": 0.60,
    "slab": 0.60,
    "siding": 0.58,
    "roofing": 0.60,
}

# Applied to any category missing from the table
DEFAULT_LABOR_SHARE: float = 0.55
