from __future__ import annotations

import re
from typing import Iterable

import numpy as np
import pandas as pd


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def excel_round(x, decimals: int = 0):
    """Excel ROUND: half away from zero (vectorized)."""
    m = 10 ** decimals
    x = np.asarray(x, dtype=float)
    return np.sign(x) * (np.floor(np.abs(x) * m + 0.5) / m)


def format_currency(value: float, short: bool = False) -> str:
    """
    Whole-dollar currency string, e.g. $1,297,934.
    With short=True, values of $1,000 or more collapse to $1.3M / $850K.
    """
    value = float(value)
    if short and abs(value) >= 1000:
        if abs(value) >= 1_000_000:
            return f"${value / 1_000_000:.1f}M"
        return f"${value / 1000:.0f}K"
    return f"${float(excel_round(value)):,.0f}"


def format_label(key: str) -> str:
    """camelCase or snake_case field name -> 'Title Case' label."""
    words = re.sub(r"([A-Z]+)", r" \1", key.replace("_", " ")).split()
    return " ".join(w[:1].upper() + w[1:] for w in words)
