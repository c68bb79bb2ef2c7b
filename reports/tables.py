"""
Tabular views of the engine output for external rendering.

Column labels and order come from core/schema.py. Currency rounding is
applied only here, at output level; the engine keeps full precision.
"""

from __future__ import annotations

from typing import Dict, Iterable, Union

import pandas as pd

from core.schema import (
    COMPARISON_COLUMNS,
    DIRECT_INVEST_COLUMNS,
    NON_CURRENCY_COLUMNS,
    WHOLE_LIFE_COLUMNS,
)
from core.utils import excel_round, require_columns
from engine.direct_invest import DirectInvestResult
from engine.projector import ComparisonRow
from engine.whole_life import WholeLifeResult


def _labelled(df: pd.DataFrame, columns: Dict[str, str], rounded: bool) -> pd.DataFrame:
    require_columns(df, columns.keys())
    out = df[list(columns)].rename(columns=columns).copy()
    if rounded:
        for col in out.columns:
            if col not in NON_CURRENCY_COLUMNS:
                out[col] = excel_round(out[col].to_numpy())
    return out


def trajectory_frame(
    result: Union[DirectInvestResult, WholeLifeResult],
    *,
    rounded: bool = False,
) -> pd.DataFrame:
    """
    Per-year trajectory with display columns.

    Plan A: Year, Contribution, Portfolio Value
    Plan B: Year, Funding, Borrowed, Loan Balance, Interest Payment,
            Cumulative Interest, EPIG Value, Cash Value
    """
    columns = DIRECT_INVEST_COLUMNS if isinstance(result, DirectInvestResult) else WHOLE_LIFE_COLUMNS
    df = result.to_dataframe()
    if df.empty:
        return pd.DataFrame(columns=list(columns.values()))
    return _labelled(df, columns, rounded)


def comparison_frame(rows: Iterable[ComparisonRow], *, rounded: bool = False) -> pd.DataFrame:
    """Checkpoint table, one row per offset past the funding horizon."""
    df = pd.DataFrame([vars(row) for row in rows])
    if df.empty:
        return pd.DataFrame(columns=list(COMPARISON_COLUMNS.values()))
    return _labelled(df, COMPARISON_COLUMNS, rounded)
