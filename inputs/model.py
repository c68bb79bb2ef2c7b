"""
InputModel — the validated, immutable parameter record both simulators consume.

Rates are stored as fractions (0.20 for 20%). The form-facing units (percent)
and camelCase keys are described by FORM_FIELDS; resolver.py converts between
the two at the boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field


class ContributionTiming(str, Enum):
    """Whether a year's contribution lands before or after that year's growth."""

    START = "start"
    END = "end"


@dataclass(frozen=True)
class FormField:
    """How one InputModel field appears on the input form."""

    key: str  # camelCase form key
    kind: Literal["int", "amount", "rate", "timing"]
    default: Any  # in form units (percent for rates)


# decimal places kept when a rate is shown in percent on the form
PERCENT_DECIMALS = 10


FORM_FIELDS: Dict[str, FormField] = {
    "current_age": FormField("currentAge", "int", 51),
    "time_horizon": FormField("timeHorizon", "int", 10),
    "annual_contribution": FormField("annualContribution", "amount", 50000.0),
    "contribution_timing": FormField("contributionTiming", "timing", "end"),
    # Plan A / shared
    "direct_cagr": FormField("directCAGR", "rate", 20.0),
    "tax_rate": FormField("taxRate", "rate", 25.0),
    "perpetual_rate": FormField("perpetualRate", "rate", 7.0),
    # Plan B
    "cv_growth_rate": FormField("cvGrowthRate", "rate", 4.0),
    "borrow_percent": FormField("borrowPercent", "rate", 90.0),
    "loan_rate": FormField("loanRate", "rate", 6.0),
    "death_benefit": FormField("deathBenefit", "amount", 750000.0),
}


class InputModel(BaseModel):
    """
    Simulation parameters.

    Only structurally impossible values are rejected here (a horizon shorter
    than one year, a negative age). Implausible values, including negative
    rates, are accepted and surfaced as advisories by validators.py.
    """

    model_config = ConfigDict(frozen=True)

    current_age: int = Field(51, ge=0, description="Age at the start of funding")
    time_horizon: int = Field(10, ge=1, description="Funding years")
    annual_contribution: float = Field(50000.0, description="Contribution / premium per year")
    contribution_timing: ContributionTiming = ContributionTiming.END

    direct_cagr: float = Field(0.20, description="Growth of the direct portfolio and of EPIG")
    tax_rate: float = Field(0.25, description="Tax on realized gains")
    perpetual_rate: float = Field(0.07, description="Payout rate on annuitized capital")

    cv_growth_rate: float = Field(0.04, description="Policy cash value growth")
    borrow_percent: float = Field(0.90, description="Share of each premium borrowed")
    loan_rate: float = Field(0.06, description="Policy loan interest rate")
    death_benefit: float = Field(750000.0, description="Nominal death benefit")

    @classmethod
    def defaults(cls) -> "InputModel":
        return cls()

    def to_form(self) -> Dict[str, Any]:
        """camelCase, percent-unit dict that resolves back to this model."""
        form: Dict[str, Any] = {}
        for name, spec in FORM_FIELDS.items():
            value = getattr(self, name)
            if spec.kind == "rate":
                value = round(value * 100.0, PERCENT_DECIMALS)
            elif spec.kind == "timing":
                value = value.value
            form[spec.key] = value
        return form
