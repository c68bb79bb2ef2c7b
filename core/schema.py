from __future__ import annotations

from typing import Dict, Tuple

# Display columns for the per-year trajectory tables, in presentation order.
# reports/tables.py maps record attributes onto these labels.
DIRECT_INVEST_COLUMNS: Dict[str, str] = {
    "year": "Year",
    "contribution": "Contribution",
    "portfolio_value": "Portfolio Value",
}

WHOLE_LIFE_COLUMNS: Dict[str, str] = {
    "year": "Year",
    "funding": "Funding",
    "borrowed": "Borrowed",
    "loan_balance": "Loan Balance",
    "interest_payment": "Interest Payment",
    "cumulative_interest": "Cumulative Interest",
    "epig_value": "EPIG Value",
    "cash_value": "Cash Value",
}

COMPARISON_COLUMNS: Dict[str, str] = {
    "offset": "Years After Funding",
    "year": "Year",
    "age": "Age",
    "plan_a_income": "Plan A Income",
    "plan_a_liquidity": "Plan A Liquidity",
    "plan_a_legacy": "Plan A Legacy",
    "plan_b_income": "Plan B Income",
    "plan_b_liquidity": "Plan B Liquidity",
    "plan_b_legacy": "Plan B Legacy at Death",
    "plan_b_death_benefit": "Plan B Death Benefit",
    "plan_b_cash_value": "Plan B Cash Value",
    "plan_b_net_epig": "Plan B Net EPIG",
}

# Columns that are never currency (left alone by output rounding).
NON_CURRENCY_COLUMNS: Tuple[str, ...] = ("Year", "Age", "Years After Funding")
