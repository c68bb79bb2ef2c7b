"""
Projection configuration.
Design constants of the comparison, named so they can be swapped per product
variant without touching the simulators or the projector.
Growth-curve provenance lives in core/curves.py (TierCurve).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

from .curves import (
    DEFAULT_PRODUCT,
    WL_12PAY_CASH_VALUE,
    WL_12PAY_DEATH_BENEFIT,
    TierCurve,
    get_product_curves,
)

# advisory thresholds (inputs/validators.py)
BORROW_WARNING_THRESHOLD = 0.95
LOAN_TO_CASH_VALUE_WARNING = 0.5


@dataclass(frozen=True)
class ProjectionConfig:
    # Plan A terminal partition: annuitized share, the rest stays liquid
    annuitized_share: float = 0.70

    # taxable bond rate for money held outside any policy after funding ends
    bond_rate: float = 0.05

    # tiered curves switch rate at these offsets past the funding horizon
    tier_boundaries: Tuple[int, int] = (10, 20)
    checkpoint_offsets: Tuple[int, ...] = (0, 10, 20, 30, 40)

    product: str = DEFAULT_PRODUCT
    cash_value_curve: TierCurve = WL_12PAY_CASH_VALUE
    death_benefit_curve: TierCurve = WL_12PAY_DEATH_BENEFIT

    @property
    def liquid_share(self) -> float:
        return 1.0 - self.annuitized_share

    def with_product(self, product: str) -> "ProjectionConfig":
        cash_value_curve, death_benefit_curve = get_product_curves(product)
        return replace(
            self,
            product=product,
            cash_value_curve=cash_value_curve,
            death_benefit_curve=death_benefit_curve,
        )


DEFAULT_CONFIG = ProjectionConfig()
