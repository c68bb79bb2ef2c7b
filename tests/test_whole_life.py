import pytest

from engine.whole_life import simulate_whole_life
from inputs.model import ContributionTiming, InputModel


def test_default_scenario_matches_documented_figures():
    result = simulate_whole_life(InputModel.defaults())

    assert result.cash_value == pytest.approx(50_000 * (1.04 ** 10 - 1) / 0.04)
    assert result.cash_value == pytest.approx(600_395, rel=1e-3)
    assert result.loan_balance == 450_000
    assert result.cumulative_interest == pytest.approx(121_500)
    assert result.net_epig_after_loan_payoff == pytest.approx(447_481, abs=1)
    assert result.perpetual_income == pytest.approx(31_324, abs=1)
    assert result.total_liquidity == result.cash_value
    assert result.net_legacy == 250_000


@pytest.mark.parametrize(
    "contribution,horizon,borrow",
    [(50_000, 10, 0.9), (1_000, 1, 0.5), (12_500, 25, 1.2), (80_000, 7, 0.0)],
)
def test_loan_balance_is_principal_only(contribution, horizon, borrow):
    result = simulate_whole_life(
        InputModel(annual_contribution=contribution, time_horizon=horizon, borrow_percent=borrow, loan_rate=0.08)
    )

    assert result.loan_balance == pytest.approx(contribution * horizon * borrow)
    assert result.total_borrowed == pytest.approx(result.loan_balance)


def test_interest_is_charged_on_beginning_of_year_balance():
    result = simulate_whole_life(InputModel(time_horizon=3, annual_contribution=1000, borrow_percent=1.0, loan_rate=0.10))
    years = result.yearly

    assert [y.interest_payment for y in years] == pytest.approx([0.0, 100.0, 200.0])
    assert [y.cumulative_interest for y in years] == pytest.approx([0.0, 100.0, 300.0])
    assert [y.loan_balance for y in years] == pytest.approx([1000.0, 2000.0, 3000.0])


def test_epig_uses_direct_cagr_and_timing():
    inputs = InputModel(
        time_horizon=2,
        annual_contribution=1000,
        borrow_percent=0.5,
        direct_cagr=0.10,
        cv_growth_rate=0.0,
        contribution_timing=ContributionTiming.START,
    )
    result = simulate_whole_life(inputs)

    # (500 * 1.1 + 500) * 1.1
    assert result.epig_value == pytest.approx(1155.0)
    assert result.cash_value == pytest.approx(2000.0)


def test_net_epig_is_clamped_when_loan_exceeds_proceeds():
    result = simulate_whole_life(InputModel(direct_cagr=0.0, loan_rate=0.5))

    assert result.epig_after_tax < result.loan_balance
    assert result.net_epig_after_loan_payoff == 0
    assert result.perpetual_income == 0
    assert result.loan_exceeds_proceeds


def test_death_benefit_is_not_reduced_by_loan():
    result = simulate_whole_life(InputModel(death_benefit=400_000))

    assert result.gross_death_benefit == 400_000
    assert result.net_death_benefit == 400_000
    assert result.net_legacy == -100_000


def test_trajectory_dataframe_columns():
    df = simulate_whole_life(InputModel(time_horizon=2)).to_dataframe()

    assert list(df.columns) == [
        "year",
        "funding",
        "borrowed",
        "loan_balance",
        "interest_payment",
        "cumulative_interest",
        "epig_value",
        "cash_value",
    ]
    assert len(df) == 2
