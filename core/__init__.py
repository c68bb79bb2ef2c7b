"""
Core package — design constants, growth-curve provenance, table schemas, and
shared utilities.
No business logic lives here.
"""

from .config import DEFAULT_CONFIG, ProjectionConfig
from .curves import PRODUCT_CURVES, TierCurve, get_product_curves
from .schema import COMPARISON_COLUMNS, DIRECT_INVEST_COLUMNS, WHOLE_LIFE_COLUMNS
from .utils import excel_round, format_currency, format_label, require_columns

__all__ = [
    "DEFAULT_CONFIG",
    "ProjectionConfig",
    "PRODUCT_CURVES",
    "TierCurve",
    "get_product_curves",
    "COMPARISON_COLUMNS",
    "DIRECT_INVEST_COLUMNS",
    "WHOLE_LIFE_COLUMNS",
    "excel_round",
    "format_currency",
    "format_label",
    "require_columns",
]
