"""Formatting helpers for breakdown output.

Currency is always shown in whole dollars; a planning estimate has no
meaningful cents.
"""

from __future__ import annotations

import math


def format_currency(amount: float) -> str:
    """Format a currency amount as a human-readable string.

    - Whole dollars with comma separators (e.g., '$12,345', '$1,581')
    - Non-finite amounts: '-'
    """
    if not math.isfinite(amount):
        return "-"
    return f"${amount:,.0f}"


def format_area(area_sf: float) -> str:
    """Format an area as '1,234.5 ft²'."""
    return f"{area_sf:,.1f} ft²"


def format_factor(factor: float) -> str:
    """Format a cost index to three decimals, e.g. '0.940'."""
    return f"{factor:.3f}"
