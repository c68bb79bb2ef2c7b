"""
Deterministic compounding helpers shared by the simulators and the projector.

Key conventions:
  1. Rates are annual fractions (0.20 for 20%), compounded once per year
  2. START timing: contribution is added, then the year's growth applies
  3. END timing: the year's growth applies, then the contribution is added
  4. Tiered curves restart from the value reached at each tier boundary
"""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from inputs.model import ContributionTiming


def grow_with_contribution(
    balance: float,
    contribution: float,
    rate: float,
    timing: ContributionTiming,
) -> float:
    """One funding year of growth plus contribution, ordered by timing."""
    if timing == ContributionTiming.START:
        return (balance + contribution) * (1 + rate)
    return balance * (1 + rate) + contribution


def compound(value: float, rate: float, years):
    """value × (1 + rate) ** years; years may be scalar or array."""
    out = value * np.power(1.0 + rate, np.asarray(years, dtype=float))
    return float(out) if out.ndim == 0 else out


def after_tax_rate(rate: float, tax_rate: float) -> float:
    return rate * (1.0 - tax_rate)


def tiered_compound(
    value: float,
    rates: Sequence[float],
    years,
    boundaries: Tuple[int, ...] = (10, 20),
):
    """
    Piecewise compound growth over `years` from `value`.

    With rates (r1, r2, r3) and boundaries (10, 20):
      years <= 10       -> r1 for `years`
      10 < years <= 20  -> r1 for 10, then r2 for years - 10
      years > 20        -> r1 for 10, r2 for 10, then r3 for years - 20

    Accepts a scalar or an array of year offsets; returns the same shape.
    """
    if len(rates) != len(boundaries) + 1:
        raise ValueError(
            f"Need {len(boundaries) + 1} tier rates for boundaries {boundaries}, got {len(rates)}."
        )
    y = np.asarray(years, dtype=float)
    edges = np.array((0,) + tuple(boundaries) + (np.inf,), dtype=float)

    growth = np.ones_like(y)
    for tier, rate in enumerate(rates):
        # years spent inside this tier
        span = np.clip(y - edges[tier], 0.0, edges[tier + 1] - edges[tier])
        growth = growth * np.power(1.0 + rate, span)

    out = value * growth
    return float(out) if out.ndim == 0 else out
