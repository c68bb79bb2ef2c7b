"""
Scorecard — the three headline outcomes per plan at the end of funding,
with the detail figures behind them and advisory flags.

Answers the questions the comparison exists for:
  Q1: "How much can I live on?"        -> perpetual income
  Q2: "How much can I reach?"          -> liquidity
  Q3: "What do my heirs get?"          -> legacy, net of what was paid in
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import pandas as pd

from core.utils import format_currency
from engine.direct_invest import DirectInvestResult
from engine.whole_life import WholeLifeResult


@dataclass
class Scorecard:
    """Structured end-of-funding comparison."""
    horizon_years: int

    # Headline metrics
    plan_a_income: float
    plan_a_liquidity: float
    plan_a_legacy: float
    plan_b_income: float
    plan_b_liquidity: float
    plan_b_legacy: float

    # Plan A detail
    plan_a_contributed: float
    plan_a_after_tax: float
    plan_a_annuitized: float

    # Plan B detail
    plan_b_premiums: float
    plan_b_cash_value: float
    plan_b_net_epig: float
    plan_b_interest: float
    plan_b_tax_on_gains: float
    plan_b_gross_death_benefit: float

    # Flags
    flags: List[str] = field(default_factory=list)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        rows = [
            {"Metric": "Perpetual Income", "Plan A": self.plan_a_income, "Plan B": self.plan_b_income},
            {"Metric": "Liquidity", "Plan A": self.plan_a_liquidity, "Plan B": self.plan_b_liquidity},
            {"Metric": "Net Legacy", "Plan A": self.plan_a_legacy, "Plan B": self.plan_b_legacy},
            {"Metric": "Total Paid In", "Plan A": self.plan_a_contributed, "Plan B": self.plan_b_premiums},
        ]
        df = pd.DataFrame(rows)
        for col in ("Plan A", "Plan B"):
            df[col] = df[col].map(format_currency)
        df.insert(1, "Year", self.horizon_years)
        if self.flags:
            flag_row = {"Metric": "FLAGS", "Year": self.horizon_years, "Plan A": " | ".join(self.flags), "Plan B": ""}
            df = pd.concat([df, pd.DataFrame([flag_row])], ignore_index=True)
        return df

    def details(self) -> pd.DataFrame:
        rows = [
            {"Plan": "A", "Item": "After-Tax Capital", "Value": self.plan_a_after_tax},
            {"Plan": "A", "Item": "Annuitized", "Value": self.plan_a_annuitized},
            {"Plan": "A", "Item": "Contributed", "Value": self.plan_a_contributed},
            {"Plan": "B", "Item": "Cash Value", "Value": self.plan_b_cash_value},
            {"Plan": "B", "Item": "Net EPIG (after loan payoff)", "Value": self.plan_b_net_epig},
            {"Plan": "B", "Item": "Cumulative Loan Interest", "Value": self.plan_b_interest},
            {"Plan": "B", "Item": "Tax on EPIG Gains", "Value": self.plan_b_tax_on_gains},
            {"Plan": "B", "Item": "Gross Death Benefit", "Value": self.plan_b_gross_death_benefit},
            {"Plan": "B", "Item": "Premiums Paid", "Value": self.plan_b_premiums},
        ]
        return pd.DataFrame(rows)


def build_scorecard(
    plan_a: DirectInvestResult,
    plan_b: WholeLifeResult,
    horizon_years: int,
) -> Scorecard:
    flags = []
    if plan_b.loan_exceeds_proceeds:
        flags.append("LOAN_EXCEEDS_PROCEEDS: loan principal exceeds after-tax EPIG; no income from EPIG")
    if plan_b.net_legacy < 0:
        flags.append("NEGATIVE_LEGACY: death benefit is below total premiums paid")

    return Scorecard(
        horizon_years=horizon_years,
        plan_a_income=plan_a.perpetual_income,
        plan_a_liquidity=plan_a.total_liquidity,
        plan_a_legacy=plan_a.net_legacy,
        plan_b_income=plan_b.perpetual_income,
        plan_b_liquidity=plan_b.total_liquidity,
        plan_b_legacy=plan_b.net_legacy,
        plan_a_contributed=plan_a.total_contributed,
        plan_a_after_tax=plan_a.after_tax_capital,
        plan_a_annuitized=plan_a.annuitized_amount,
        plan_b_premiums=plan_b.total_premiums_paid,
        plan_b_cash_value=plan_b.cash_value,
        plan_b_net_epig=plan_b.net_epig_after_loan_payoff,
        plan_b_interest=plan_b.cumulative_interest,
        plan_b_tax_on_gains=plan_b.tax_on_epig_gains,
        plan_b_gross_death_benefit=plan_b.gross_death_benefit,
        flags=flags,
    )
