"""
Plan B — whole life policy funded each year, with part of every premium
borrowed against the policy and invested in a side portfolio (EPIG).

Per funding year, in order:
  1. premium -> cash value (same START/END timing as Plan A, at cv_growth_rate)
  2. borrow = premium × borrow_percent (sized off this year's premium)
  3. interest = beginning-of-year loan balance × loan_rate, expensed
  4. EPIG grows at direct_cagr and receives the borrowed amount (same timing)
  5. loan balance += borrow (principal only)

Interest is never capitalized into the loan. It is charged against EPIG
proceeds at the end instead; loan_balance stays principal-only.

Terminal ordering: EPIG net of interest -> tax on EPIG gains -> loan payoff
(clamped at 0) -> annuitize what is left. Liquidity is the cash value alone;
the death benefit is nominal and not reduced by the loan.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import pandas as pd

from inputs.model import InputModel

from .cashflow import grow_with_contribution


@dataclass(frozen=True)
class WholeLifeYear:
    year: int
    funding: float
    borrowed: float
    loan_balance: float
    interest_payment: float
    cumulative_interest: float
    epig_value: float
    cash_value: float


@dataclass(frozen=True)
class WholeLifeResult:
    yearly: Tuple[WholeLifeYear, ...]

    # terminal state of the year loop
    cash_value: float
    epig_value: float
    loan_balance: float
    cumulative_interest: float

    total_premiums_paid: float
    total_borrowed: float
    epig_after_interest: float
    epig_gains: float
    tax_on_epig_gains: float
    epig_after_tax: float
    net_epig_after_loan_payoff: float

    annuitizable_amount: float
    perpetual_income: float
    total_liquidity: float
    gross_death_benefit: float
    net_death_benefit: float
    net_legacy: float

    @property
    def loan_exceeds_proceeds(self) -> bool:
        """True when the loan payoff was clamped (after-tax EPIG < loan principal)."""
        return self.epig_after_tax < self.loan_balance

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame([vars(row) for row in self.yearly])


def simulate_whole_life(inputs: InputModel) -> WholeLifeResult:
    premium = inputs.annual_contribution
    timing = inputs.contribution_timing

    cash_value = 0.0
    epig_value = 0.0
    loan_balance = 0.0
    cumulative_interest = 0.0
    yearly = []

    for year in range(1, inputs.time_horizon + 1):
        cash_value = grow_with_contribution(cash_value, premium, inputs.cv_growth_rate, timing)

        borrow_amount = premium * inputs.borrow_percent

        interest_payment = loan_balance * inputs.loan_rate
        cumulative_interest += interest_payment

        epig_value = grow_with_contribution(epig_value, borrow_amount, inputs.direct_cagr, timing)

        loan_balance += borrow_amount

        yearly.append(
            WholeLifeYear(
                year=year,
                funding=premium,
                borrowed=borrow_amount,
                loan_balance=loan_balance,
                interest_payment=interest_payment,
                cumulative_interest=cumulative_interest,
                epig_value=epig_value,
                cash_value=cash_value,
            )
        )

    total_premiums_paid = premium * inputs.time_horizon

    # EPIG net of what the borrowing cost
    epig_after_interest = epig_value - cumulative_interest

    total_borrowed = total_premiums_paid * inputs.borrow_percent
    epig_gains = epig_after_interest - total_borrowed
    tax_on_epig_gains = epig_gains * inputs.tax_rate
    epig_after_tax = epig_after_interest - tax_on_epig_gains

    # loan principal is repaid from EPIG before anything reaches the policyholder
    net_epig_after_loan_payoff = max(0.0, epig_after_tax - loan_balance)

    # cash value stays inside the policy; only net EPIG can be annuitized
    annuitizable_amount = net_epig_after_loan_payoff

    return WholeLifeResult(
        yearly=tuple(yearly),
        cash_value=cash_value,
        epig_value=epig_value,
        loan_balance=loan_balance,
        cumulative_interest=cumulative_interest,
        total_premiums_paid=total_premiums_paid,
        total_borrowed=total_borrowed,
        epig_after_interest=epig_after_interest,
        epig_gains=epig_gains,
        tax_on_epig_gains=tax_on_epig_gains,
        epig_after_tax=epig_after_tax,
        net_epig_after_loan_payoff=net_epig_after_loan_payoff,
        annuitizable_amount=annuitizable_amount,
        perpetual_income=annuitizable_amount * inputs.perpetual_rate,
        total_liquidity=cash_value,
        gross_death_benefit=inputs.death_benefit,
        net_death_benefit=inputs.death_benefit,
        net_legacy=inputs.death_benefit - total_premiums_paid,
    )
