import pytest
from pydantic import ValidationError

from core.utils import format_currency, format_label
from inputs.model import ContributionTiming, InputModel
from inputs.resolver import resolve_input
from inputs.validators import validate_inputs


def _substitutions(warnings):
    return [w for w in warnings if "missing or invalid" in w]


def test_empty_input_resolves_to_documented_defaults():
    model, warnings = resolve_input({})

    assert model == InputModel.defaults()
    assert model.current_age == 51
    assert model.time_horizon == 10
    assert model.contribution_timing == ContributionTiming.END
    assert model.direct_cagr == pytest.approx(0.20)
    assert model.borrow_percent == pytest.approx(0.90)
    assert len(_substitutions(warnings)) == 11


def test_full_form_resolves_without_substitutions():
    model, warnings = resolve_input(InputModel.defaults().to_form())

    assert _substitutions(warnings) == []
    assert model.tax_rate == pytest.approx(0.25)
    assert model.death_benefit == 750_000


def test_percent_fields_are_divided_by_100():
    model, _ = resolve_input({"directCAGR": "12.5", "loanRate": 8, "cvGrowthRate": "3%"})

    assert model.direct_cagr == pytest.approx(0.125)
    assert model.loan_rate == pytest.approx(0.08)
    assert model.cv_growth_rate == pytest.approx(0.03)


def test_malformed_field_falls_back_to_default_with_advisory(caplog):
    model, warnings = resolve_input({"directCAGR": "abc", "annualContribution": "60,000"})

    assert model.direct_cagr == pytest.approx(0.20)
    assert model.annual_contribution == 60_000
    assert any(w.startswith("Direct CAGR missing or invalid") for w in warnings)
    assert "direct_cagr" in caplog.text


def test_snake_case_keys_are_accepted():
    model, _ = resolve_input({"annual_contribution": 1000, "contribution_timing": "START"})

    assert model.annual_contribution == 1000
    assert model.contribution_timing == ContributionTiming.START


def test_unknown_timing_falls_back_to_end():
    model, warnings = resolve_input({"contributionTiming": "midyear"})

    assert model.contribution_timing == ContributionTiming.END
    assert any("Contribution Timing" in w for w in warnings)


def test_integer_fields_truncate_and_reject_impossible_values():
    model, warnings = resolve_input({"currentAge": "51.9", "timeHorizon": 0})

    assert model.current_age == 51
    assert model.time_horizon == 10
    assert any(w.startswith("Time Horizon") for w in warnings)


def test_custom_tax_rate_is_read_from_companion_field():
    model, _ = resolve_input({"taxRate": "custom", "customTaxRate": "30"})
    assert model.tax_rate == pytest.approx(0.30)

    model, warnings = resolve_input({"taxRate": "custom"})
    assert model.tax_rate == pytest.approx(0.25)
    assert any(w.startswith("Tax Rate") for w in warnings)


def test_negative_values_are_kept_and_flagged():
    model, warnings = resolve_input({"directCAGR": -5})

    assert model.direct_cagr == pytest.approx(-0.05)
    assert "Direct CAGR cannot be negative" in warnings


def test_high_borrow_percent_is_advisory_only():
    model, warnings = resolve_input({"borrowPercent": 120})

    assert model.borrow_percent == pytest.approx(1.2)
    assert any("above 95%" in w for w in warnings)
    assert any("above 100%" in w for w in warnings)


def test_lapse_risk_advisory():
    risky = validate_inputs(InputModel.defaults())
    modest = validate_inputs(InputModel(borrow_percent=0.5))

    assert any("lapse risk" in w for w in risky.warnings)
    assert modest.warnings == []
    assert modest.is_valid
    assert modest.summary() == "✓ All checks passed."


def test_advisories_never_produce_errors():
    result = validate_inputs(InputModel(annual_contribution=-1, borrow_percent=5.0, tax_rate=-0.1))

    assert result.is_valid
    assert "WARNINGS" in result.summary()


def test_model_rejects_structurally_impossible_values():
    with pytest.raises(ValidationError):
        InputModel(time_horizon=0)
    with pytest.raises(ValidationError):
        InputModel(current_age=-1)


def test_model_is_immutable():
    model = InputModel.defaults()
    with pytest.raises(ValidationError):
        model.time_horizon = 20


def test_labels_and_currency_formatting():
    assert format_label("directCAGR") == "Direct CAGR"
    assert format_label("annual_contribution") == "Annual Contribution"
    assert format_currency(1_297_934.4) == "$1,297,934"
    assert format_currency(1_297_934.4, short=True) == "$1.3M"
    assert format_currency(850_000, short=True) == "$850K"
    assert format_currency(999, short=True) == "$999"


@pytest.mark.parametrize("rate", [i / 1000 for i in range(1, 200)])
def test_form_round_trip_reproduces_model(rate):
    model = InputModel(
        current_age=40,
        time_horizon=15,
        annual_contribution=12_345.5,
        contribution_timing=ContributionTiming.START,
        direct_cagr=rate,
        tax_rate=rate,
        loan_rate=rate,
        cv_growth_rate=0.029,
        death_benefit=1_000_000,
    )

    resolved, _ = resolve_input(model.to_form())

    assert resolved == model


def test_form_shows_rates_in_percent():
    form = InputModel(cv_growth_rate=0.029).to_form()

    assert form["cvGrowthRate"] == 2.9
    assert form["contributionTiming"] == "end"


def test_custom_tax_rate_accepts_snake_case_key():
    model, _ = resolve_input({"tax_rate": "custom", "custom_tax_rate": 32})

    assert model.tax_rate == pytest.approx(0.32)
