"""
Long-horizon comparison — extrapolates both plans' terminal results to fixed
checkpoints past the end of funding.

Growth after funding:
  Plan B cash value     tiered curve (config.cash_value_curve)
  Plan B death benefit  tiered curve (config.death_benefit_curve)
  Plan A liquidity      after-tax bond rate, untiered
  Plan B net EPIG       after-tax bond rate, untiered
  Perpetual income      flat for both plans

Plan B legacy at death is the projected death benefit plus projected net EPIG:
the death benefit already contains the cash value, and net EPIG sits outside
the policy. Plan A legacy stays 0 at every checkpoint.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

import numpy as np

from core.config import DEFAULT_CONFIG, ProjectionConfig
from inputs.model import InputModel

from .cashflow import after_tax_rate, compound, tiered_compound
from .direct_invest import DirectInvestResult
from .whole_life import WholeLifeResult


@dataclass(frozen=True)
class ComparisonRow:
    offset: int  # years past the funding horizon
    year: int  # years since funding started
    age: int

    plan_a_income: float
    plan_a_liquidity: float
    plan_a_legacy: float

    plan_b_income: float
    plan_b_liquidity: float  # while alive: cash value only
    plan_b_legacy: float  # at death
    plan_b_death_benefit: float
    plan_b_cash_value: float
    plan_b_net_epig: float


def project_comparison(
    plan_a: DirectInvestResult,
    plan_b: WholeLifeResult,
    inputs: InputModel,
    config: ProjectionConfig = DEFAULT_CONFIG,
) -> List[ComparisonRow]:
    """
    Project both plans to each offset in config.checkpoint_offsets.

    Returns one ComparisonRow per offset, in offset order. Rows are built
    fresh on every call; neither result object is modified.
    """
    offsets = np.asarray(config.checkpoint_offsets, dtype=int)
    bond_rate = after_tax_rate(config.bond_rate, inputs.tax_rate)

    plan_a_liquidity = compound(plan_a.liquidity_fund, bond_rate, offsets)
    plan_b_net_epig = compound(plan_b.net_epig_after_loan_payoff, bond_rate, offsets)
    plan_b_cash_value = tiered_compound(
        plan_b.cash_value,
        config.cash_value_curve.rates,
        offsets,
        config.tier_boundaries,
    )
    plan_b_death_benefit = tiered_compound(
        plan_b.net_death_benefit,
        config.death_benefit_curve.rates,
        offsets,
        config.tier_boundaries,
    )

    rows = []
    for i, offset in enumerate(offsets.tolist()):
        year = inputs.time_horizon + offset
        rows.append(
            ComparisonRow(
                offset=offset,
                year=year,
                age=inputs.current_age + year,
                plan_a_income=plan_a.perpetual_income,
                plan_a_liquidity=float(plan_a_liquidity[i]),
                plan_a_legacy=0.0,
                plan_b_income=plan_b.perpetual_income,
                plan_b_liquidity=float(plan_b_cash_value[i]),
                plan_b_legacy=float(plan_b_death_benefit[i] + plan_b_net_epig[i]),
                plan_b_death_benefit=float(plan_b_death_benefit[i]),
                plan_b_cash_value=float(plan_b_cash_value[i]),
                plan_b_net_epig=float(plan_b_net_epig[i]),
            )
        )
    return rows
