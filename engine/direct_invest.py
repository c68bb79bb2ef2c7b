"""
Plan A — direct invest.

Contributions compound in a taxable portfolio for the funding horizon. At the
end, gains are taxed once and the after-tax capital is partitioned:
annuitized share -> flat perpetual income, the rest -> liquidity.

Plan A carries no death benefit. Its liquidity fund is already what heirs
would receive, so legacy is defined as 0 to avoid counting it twice against
Plan B's death benefit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import pandas as pd

from core.config import DEFAULT_CONFIG, ProjectionConfig
from inputs.model import InputModel

from .cashflow import grow_with_contribution


@dataclass(frozen=True)
class DirectYear:
    year: int
    contribution: float
    portfolio_value: float


@dataclass(frozen=True)
class DirectInvestResult:
    yearly: Tuple[DirectYear, ...]
    portfolio_value: float
    total_contributed: float
    gains: float
    tax_on_gains: float
    after_tax_capital: float
    annuitized_amount: float
    liquidity_fund: float
    perpetual_income: float
    net_legacy: float = 0.0

    @property
    def total_liquidity(self) -> float:
        return self.liquidity_fund

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame([vars(row) for row in self.yearly])


def simulate_direct_invest(
    inputs: InputModel,
    config: ProjectionConfig = DEFAULT_CONFIG,
) -> DirectInvestResult:
    """Year-by-year compounding of the direct portfolio plus terminal aggregates."""
    contribution = inputs.annual_contribution
    portfolio_value = 0.0
    yearly = []

    for year in range(1, inputs.time_horizon + 1):
        portfolio_value = grow_with_contribution(
            portfolio_value, contribution, inputs.direct_cagr, inputs.contribution_timing
        )
        yearly.append(DirectYear(year, contribution, portfolio_value))

    total_contributed = contribution * inputs.time_horizon
    gains = portfolio_value - total_contributed
    tax_on_gains = gains * inputs.tax_rate
    after_tax_capital = portfolio_value - tax_on_gains

    annuitized_amount = after_tax_capital * config.annuitized_share
    liquidity_fund = after_tax_capital * config.liquid_share

    return DirectInvestResult(
        yearly=tuple(yearly),
        portfolio_value=portfolio_value,
        total_contributed=total_contributed,
        gains=gains,
        tax_on_gains=tax_on_gains,
        after_tax_capital=after_tax_capital,
        annuitized_amount=annuitized_amount,
        liquidity_fund=liquidity_fund,
        perpetual_income=annuitized_amount * inputs.perpetual_rate,
    )
