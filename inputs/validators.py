"""
Advisory checks on resolved inputs before they enter the simulators.

Nothing here rejects or clamps a value. The simulators produce a well-formed
result for any numeric input; these checks only tell the user when an input
looks implausible:
- Negative amounts or rates
- Borrowing above what policy lending realistically allows
- Loan balance large relative to cash value (lapse risk)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from core.config import BORROW_WARNING_THRESHOLD, LOAN_TO_CASH_VALUE_WARNING
from core.utils import format_label

from .model import FORM_FIELDS, InputModel


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for an input record."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_inputs(inputs: InputModel) -> ValidationResult:
    """
    Run all advisory checks on a resolved InputModel.
    Errors stay empty: the core has no fatal input conditions.
    """
    result = ValidationResult()

    # --- Sign checks ---
    for name, spec in FORM_FIELDS.items():
        if spec.kind == "timing":
            continue
        if getattr(inputs, name) < 0:
            result.warnings.append(f"{format_label(spec.key)} cannot be negative")

    # --- Borrowing ---
    if inputs.borrow_percent > 1.0:
        result.warnings.append(
            "Borrow % above 100% borrows more than the premium paid each year"
        )
    if inputs.borrow_percent > BORROW_WARNING_THRESHOLD:
        result.warnings.append(
            f"Borrow % above {BORROW_WARNING_THRESHOLD:.0%} may not be realistic for policy lending"
        )

    # Simplified estimate: no compounding beyond one year of cash value growth
    total_premiums = inputs.annual_contribution * inputs.time_horizon
    estimated_loan_balance = total_premiums * inputs.borrow_percent
    estimated_cash_value = total_premiums * (1 + inputs.cv_growth_rate)
    if estimated_loan_balance > estimated_cash_value * LOAN_TO_CASH_VALUE_WARNING:
        result.warnings.append(
            "Estimated loan balance may exceed "
            f"{LOAN_TO_CASH_VALUE_WARNING:.0%} of cash value, increasing lapse risk"
        )

    return result
