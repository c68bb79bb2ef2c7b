"""
Boundary resolution: partial, form-shaped input -> (InputModel, warnings).

The simulators are total functions of a complete InputModel, so every gap is
filled here. A missing or malformed field never fails the computation; it is
replaced by its documented default and reported back as an advisory.
"""

from __future__ import annotations

import logging
import math
from typing import Any, List, Mapping, Optional, Tuple

from core.utils import format_label

from .model import FORM_FIELDS, PERCENT_DECIMALS, ContributionTiming, FormField, InputModel
from .validators import validate_inputs

logger = logging.getLogger(__name__)

CUSTOM_TAX_RATE = "custom"
CUSTOM_TAX_RATE_KEYS = ("customTaxRate", "custom_tax_rate")

_MISSING = object()


def _lookup(partial: Mapping[str, Any], name: str, spec: FormField) -> Any:
    for key in (spec.key, name):
        if key in partial and partial[key] is not None:
            return partial[key]
    return _MISSING


def _to_number(raw: Any) -> Optional[float]:
    if raw is _MISSING or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip().rstrip("%").replace(",", "")
        if not raw:
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None


def _to_timing(raw: Any) -> Optional[ContributionTiming]:
    if isinstance(raw, ContributionTiming):
        return raw
    if isinstance(raw, str):
        try:
            return ContributionTiming(raw.strip().lower())
        except ValueError:
            return None
    return None


def _substitute(name: str, spec: FormField, raw: Any, warnings: List[str]) -> Any:
    shown = "" if raw is _MISSING else f" ({raw!r})"
    message = f"{format_label(spec.key)} missing or invalid{shown}; using default {spec.default}"
    logger.warning("Input %s%s unusable, substituting default %s", name, shown, spec.default)
    warnings.append(message)
    return spec.default


def _resolve_tax_rate(partial: Mapping[str, Any], spec: FormField) -> Any:
    raw = _lookup(partial, "tax_rate", spec)
    if isinstance(raw, str) and raw.strip().lower() == CUSTOM_TAX_RATE:
        for key in CUSTOM_TAX_RATE_KEYS:
            if partial.get(key) is not None:
                return partial[key]
        return _MISSING
    return raw


def resolve_input(partial: Optional[Mapping[str, Any]] = None) -> Tuple[InputModel, List[str]]:
    """
    Build an InputModel from a partial mapping of form values.

    Keys may be the camelCase form keys or the snake_case field names. Rates
    are given in percent and divided by 100 here. Returns the model plus all
    advisories: default substitutions first, then validate_inputs() warnings.
    """
    partial = partial or {}
    warnings: List[str] = []
    values = {}

    for name, spec in FORM_FIELDS.items():
        if name == "tax_rate":
            raw = _resolve_tax_rate(partial, spec)
        else:
            raw = _lookup(partial, name, spec)

        if spec.kind == "timing":
            timing = _to_timing(raw)
            if timing is None:
                timing = ContributionTiming(_substitute(name, spec, raw, warnings))
            values[name] = timing
            continue

        number = _to_number(raw)
        if number is None:
            number = float(_substitute(name, spec, raw, warnings))

        if spec.kind == "int":
            number = int(number)
            minimum = 1 if name == "time_horizon" else 0
            if number < minimum:
                number = int(_substitute(name, spec, raw, warnings))
        elif spec.kind == "rate":
            number = round(number / 100.0, PERCENT_DECIMALS + 2)

        values[name] = number

    model = InputModel(**values)
    warnings.extend(validate_inputs(model).warnings)
    return model, warnings
