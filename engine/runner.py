"""
Comparison runner — one synchronous computation from raw input to every
result the presenter needs.

    partial form values
        -> resolve_input        (defaults + advisories)
        -> simulate_direct_invest / simulate_whole_life
        -> project_comparison
        -> ComparisonRun

The runner holds no state between calls. The caller owns the returned
ComparisonRun and decides how long to keep it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple

from core.config import DEFAULT_CONFIG, ProjectionConfig
from inputs.model import InputModel
from inputs.resolver import resolve_input
from inputs.validators import validate_inputs

from .direct_invest import DirectInvestResult, simulate_direct_invest
from .projector import ComparisonRow, project_comparison
from .whole_life import WholeLifeResult, simulate_whole_life

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComparisonRun:
    inputs: InputModel
    warnings: Tuple[str, ...]
    plan_a: DirectInvestResult
    plan_b: WholeLifeResult
    checkpoints: Tuple[ComparisonRow, ...]


def run_comparison_from_model(
    inputs: InputModel,
    *,
    config: ProjectionConfig = DEFAULT_CONFIG,
    warnings: Optional[List[str]] = None,
) -> ComparisonRun:
    """
    Run both simulators and the projector on an already-resolved InputModel.

    If warnings is None, the advisory checks are run here; otherwise the given
    list (typically from resolve_input) is used as-is.
    """
    if warnings is None:
        warnings = validate_inputs(inputs).warnings

    plan_a = simulate_direct_invest(inputs, config)
    plan_b = simulate_whole_life(inputs)
    checkpoints = project_comparison(plan_a, plan_b, inputs, config)

    logger.debug(
        "Plan A income=%.2f liquidity=%.2f | Plan B income=%.2f liquidity=%.2f legacy=%.2f",
        plan_a.perpetual_income,
        plan_a.total_liquidity,
        plan_b.perpetual_income,
        plan_b.total_liquidity,
        plan_b.net_legacy,
    )
    if plan_b.loan_exceeds_proceeds:
        logger.debug(
            "Loan principal %.2f exceeds after-tax EPIG %.2f; net EPIG clamped to 0",
            plan_b.loan_balance,
            plan_b.epig_after_tax,
        )

    return ComparisonRun(
        inputs=inputs,
        warnings=tuple(warnings),
        plan_a=plan_a,
        plan_b=plan_b,
        checkpoints=tuple(checkpoints),
    )


def run_comparison(
    partial: Optional[Mapping[str, Any]] = None,
    *,
    config: ProjectionConfig = DEFAULT_CONFIG,
) -> ComparisonRun:
    """Resolve partial form input and run the full comparison."""
    inputs, warnings = resolve_input(partial)
    if warnings:
        logger.debug("%d input advisories", len(warnings))
    return run_comparison_from_model(inputs, config=config, warnings=warnings)
