"""
Post-funding growth curves for the insurance side of the comparison.

Illustration data for whole-life policies shows growth decelerating in later
decades, so cash value and death benefit are projected with piecewise
(tiered) compound curves rather than a single rate.

Each curve carries its provenance. To model another product, add a named
entry to PRODUCT_CURVES; simulator logic does not change.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class TierCurve:
    """Three annual rates applied over successive year ranges after funding ends."""
    variable: str
    rates: Tuple[float, float, float]
    source: str  # where this came from


# ----- Whole life 12-pay, Standard Plus Non-Tobacco, issue age 52 -----
# Illustrated values ($50K/yr for 12 years):
#   Y10: $582K CV / $1.533M DB     Y20: $1.133M / $2.062M
#   Y30: $1.890M / $2.707M         Y40: $2.966M / $3.615M
# Tier rates are the decade-over-decade CAGRs of those values.

WL_12PAY_CASH_VALUE = TierCurve(
    variable="Cash Value",
    rates=(0.0688, 0.0524, 0.0461),
    source="Mutual carrier WL 12-pay illustration, CV CAGR Y10-20 / Y20-30 / Y30-40",
)

WL_12PAY_DEATH_BENEFIT = TierCurve(
    variable="Death Benefit",
    rates=(0.0300, 0.0276, 0.0293),
    source="Mutual carrier WL 12-pay illustration, DB CAGR Y10-20 / Y20-30 / Y30-40",
)

DEFAULT_PRODUCT = "wl_12pay_standard_plus"

PRODUCT_CURVES: Dict[str, Tuple[TierCurve, TierCurve]] = {
    DEFAULT_PRODUCT: (WL_12PAY_CASH_VALUE, WL_12PAY_DEATH_BENEFIT),
}


def get_product_curves(product: str = DEFAULT_PRODUCT) -> Tuple[TierCurve, TierCurve]:
    """Return (cash_value_curve, death_benefit_curve) for a named product."""
    try:
        return PRODUCT_CURVES[product]
    except KeyError:
        known = ", ".join(sorted(PRODUCT_CURVES))
        raise KeyError(f"Unknown product '{product}'. Known products: {known}") from None
