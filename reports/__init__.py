"""
Report outputs — trajectory and checkpoint tables, the end-of-funding
scorecard, and chart series for the presentation layer.
"""

from .scorecard import Scorecard, build_scorecard
from .series import liquidity_series, plan_b_components
from .tables import comparison_frame, trajectory_frame

__all__ = [
    "Scorecard",
    "build_scorecard",
    "liquidity_series",
    "plan_b_components",
    "comparison_frame",
    "trajectory_frame",
]
