"""Buffer and overrun layering on top of the indexed subtotal."""

from __future__ import annotations

from studiocost.models.breakdown import ModeTotals


def layer_adjustments(
    indexed_subtotal: float,
    buffer_pct: float,
    overrun_pct: float,
    pre_index_subtotal: float,
) -> ModeTotals:
    """Build the three views of one structure mode's cost.

    The overrun compounds on the buffered estimate, so with a 20% buffer
    and 30% overrun the reality check is baseline x 1.2 x 1.3 = 1.56x,
    not 1.5x.
    """
    baseline = indexed_subtotal
    estimate = baseline * (1 + buffer_pct)
    reality_check = estimate * (1 + overrun_pct)
    return ModeTotals(
        subtotal=pre_index_subtotal,
        baseline=baseline,
        estimate=estimate,
        reality_check=reality_check,
    )
