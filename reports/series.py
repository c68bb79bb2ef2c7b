"""
Year-by-year series for charting, derived from the simulator trajectories.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from engine.direct_invest import DirectInvestResult
from engine.whole_life import WholeLifeResult


def liquidity_series(plan_a: DirectInvestResult, plan_b: WholeLifeResult) -> pd.DataFrame:
    """
    Accessible value at the end of each funding year.

    Plan A: portfolio value (pre-tax).
    Plan B: cash value + max(0, EPIG value - loan balance), i.e. what would be
    left of the side portfolio if the loan were repaid that year.
    """
    a = plan_a.to_dataframe()
    b = plan_b.to_dataframe()
    if a.empty or b.empty:
        return pd.DataFrame(columns=["year", "plan_a", "plan_b"])

    net_epig = np.maximum(0.0, b["epig_value"].to_numpy() - b["loan_balance"].to_numpy())
    return pd.DataFrame(
        {
            "year": a["year"].to_numpy(),
            "plan_a": a["portfolio_value"].to_numpy(),
            "plan_b": b["cash_value"].to_numpy() + net_epig,
        }
    )


def plan_b_components(plan_b: WholeLifeResult) -> pd.DataFrame:
    """Plan B end-of-funding value split: inside the policy vs outside it."""
    return pd.DataFrame(
        {
            "component": ["Cash Value", "Net EPIG (after loan payoff)"],
            "amount": [plan_b.cash_value, plan_b.net_epig_after_loan_payoff],
        }
    )
