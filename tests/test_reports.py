import pytest

from engine.runner import run_comparison_from_model
from inputs.model import InputModel
from reports.scorecard import build_scorecard
from reports.series import liquidity_series, plan_b_components
from reports.tables import comparison_frame, trajectory_frame


@pytest.fixture
def default_run():
    return run_comparison_from_model(InputModel.defaults())


def test_trajectory_frames_use_display_columns(default_run):
    plan_a = trajectory_frame(default_run.plan_a)
    plan_b = trajectory_frame(default_run.plan_b)

    assert list(plan_a.columns) == ["Year", "Contribution", "Portfolio Value"]
    assert list(plan_b.columns) == [
        "Year",
        "Funding",
        "Borrowed",
        "Loan Balance",
        "Interest Payment",
        "Cumulative Interest",
        "EPIG Value",
        "Cash Value",
    ]
    assert plan_b["Loan Balance"].iloc[-1] == pytest.approx(450_000)


def test_rounding_only_touches_currency_columns(default_run):
    df = trajectory_frame(default_run.plan_a, rounded=True)

    assert df["Year"].tolist() == list(range(1, 11))
    assert df["Portfolio Value"].iloc[-1] == 1_297_934


def test_comparison_frame_has_five_rows(default_run):
    df = comparison_frame(default_run.checkpoints, rounded=True)

    assert len(df) == 5
    assert df["Age"].tolist() == [61, 71, 81, 91, 101]
    assert (df["Plan A Legacy"] == 0).all()


def test_scorecard_headlines_and_flags(default_run):
    card = build_scorecard(default_run.plan_a, default_run.plan_b, default_run.inputs.time_horizon)

    assert card.plan_b_legacy == 250_000
    assert card.flags == []
    table = card.to_dataframe()
    assert table["Metric"].tolist() == ["Perpetual Income", "Liquidity", "Net Legacy", "Total Paid In"]
    assert table.loc[0, "Plan A"] == "$53,824"
    assert (table["Year"] == 10).all()
    assert len(card.details()) == 9


def test_scorecard_flags_degenerate_plan_b():
    run = run_comparison_from_model(InputModel(direct_cagr=0.0, loan_rate=0.5, death_benefit=100_000))
    card = build_scorecard(run.plan_a, run.plan_b, run.inputs.time_horizon)

    assert any(f.startswith("LOAN_EXCEEDS_PROCEEDS") for f in card.flags)
    assert any(f.startswith("NEGATIVE_LEGACY") for f in card.flags)

    table = card.to_dataframe()
    flag_row = table[table["Metric"] == "FLAGS"]
    assert len(flag_row) == 1
    assert "LOAN_EXCEEDS_PROCEEDS" in flag_row["Plan A"].iloc[0]
    assert "NEGATIVE_LEGACY" in flag_row["Plan A"].iloc[0]


def test_liquidity_series_nets_loan_against_epig():
    run = run_comparison_from_model(InputModel(time_horizon=2, annual_contribution=1000, cv_growth_rate=0.0, direct_cagr=0.0))
    series = liquidity_series(run.plan_a, run.plan_b)

    assert series["year"].tolist() == [1, 2]
    assert series["plan_a"].tolist() == pytest.approx([1000.0, 2000.0])
    # EPIG equals the loan at 0% growth, so only cash value remains
    assert series["plan_b"].tolist() == pytest.approx([1000.0, 2000.0])


def test_plan_b_components(default_run):
    df = plan_b_components(default_run.plan_b)

    assert df["amount"].tolist() == pytest.approx(
        [default_run.plan_b.cash_value, default_run.plan_b.net_epig_after_loan_payoff]
    )
