"""State construction cost indexes for regional adjustment.

Indexes are relative to the national average (1.00), keyed by
two-letter USPS state code.
"""

from __future__ import annotations

STATE_COST_INDEXES: dict[str, float] = {
    "AL": 0.94, "AK": 1.04, "AZ": 0.99, "AR": 0.87, "CA": 1.13,
    "CO": 1.02, "CT": 1.07, "DE": 1.00, "DC": 1.11, "FL": 1.01,
    "GA": 0.96, "HI": 1.18, "ID": 0.95, "IL": 0.99, "IN": 0.92,
    "IA": 0.92, "KS": 0.90, "KY": 0.90, "LA": 0.92, "ME": 1.00,
    "MD": 1.03, "MA": 1.08, "MI": 0.95, "MN": 0.99, "MS": 0.87,
    "MO": 0.91, "MT": 0.99, "NE": 0.92, "NV": 1.01, "NH": 1.03,
    "NJ": 1.09, "NM": 0.95, "NY": 1.12, "NC": 0.96, "ND": 0.95,
    "OH": 0.94, "OK": 0.88, "OR": 1.02, "PA": 0.99, "RI": 1.03,
    "SC": 0.95, "SD": 0.92, "TN": 0.94, "TX": 0.95, "UT": 0.99,
    "VT": 1.03, "VA": 1.01, "WA": 1.06, "WV": 0.90, "WI": 0.95,
    "WY": 0.96,
}

# Used when a region code is not in the table
DEFAULT_COST_INDEX: float = 1.00
