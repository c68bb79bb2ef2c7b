"""
Projection engine — year-by-year simulators for both plans plus the
long-horizon comparison projector.
"""

from .direct_invest import DirectInvestResult, DirectYear, simulate_direct_invest
from .projector import ComparisonRow, project_comparison
from .runner import ComparisonRun, run_comparison, run_comparison_from_model
from .whole_life import WholeLifeResult, WholeLifeYear, simulate_whole_life

__all__ = [
    "DirectInvestResult",
    "DirectYear",
    "simulate_direct_invest",
    "ComparisonRow",
    "project_comparison",
    "ComparisonRun",
    "run_comparison",
    "run_comparison_from_model",
    "WholeLifeResult",
    "WholeLifeYear",
    "simulate_whole_life",
]
