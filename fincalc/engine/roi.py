"""Return on investment: basic, annualized, inflation-adjusted, projections, rankings.

ROI            = (final - initial) / initial * 100
Annualized ROI = ((1 + ROI)^(1 / years) - 1) * 100

Undefined ratios (zero investment, zero-length period) are None rather than
infinities.
"""

from dataclasses import dataclass
from decimal import Decimal

from fincalc.models.roi import InvestmentScenario, PeriodType, ROIInputs

ONE = Decimal("1")
ZERO = Decimal("0")
TOTAL_LOSS = Decimal("-100")
DAYS_PER_YEAR = 365
MAX_PROJECTION_YEARS = 100


@dataclass(frozen=True)
class ROIResults:
    roi: Decimal | None
    annualized_roi: Decimal | None
    total_return: Decimal  # Final value + additional gains
    net_profit: Decimal
    total_invested: Decimal  # Initial investment + additional costs
    total_gain: Decimal
    effective_period_years: Decimal
    monthly_growth_rate: Decimal | None
    daily_growth_rate: Decimal | None


@dataclass(frozen=True)
class GrowthProjection:
    year: int
    projected_value: Decimal
    projected_roi: Decimal
    cumulative_gain: Decimal


@dataclass(frozen=True)
class ScenarioComparison:
    scenario: str
    roi: Decimal | None
    annualized_roi: Decimal | None
    net_profit: Decimal
    rank: int


def basic_roi(initial_investment: Decimal, final_value: Decimal) -> Decimal | None:
    if initial_investment == 0:
        return None
    return (final_value - initial_investment) / initial_investment * 100


def annualized_roi(roi: Decimal | None, years: Decimal) -> Decimal | None:
    if roi is None or years == 0:
        return None
    if roi == TOTAL_LOSS:
        return TOTAL_LOSS
    growth = ONE + roi / 100
    if growth < 0:
        return None
    return (growth ** (ONE / years) - ONE) * 100


def convert_to_years(period: Decimal, period_type: PeriodType) -> Decimal:
    if period_type is PeriodType.MONTHS:
        return period / 12
    if period_type is PeriodType.DAYS:
        return period / DAYS_PER_YEAR
    return period


def calculate_roi(inputs: ROIInputs) -> ROIResults:
    total_invested = inputs.initial_investment + inputs.additional_costs
    total_return = inputs.final_value + inputs.additional_gains
    net_profit = total_return - total_invested

    roi = basic_roi(total_invested, total_return)
    years = convert_to_years(inputs.investment_period, inputs.period_type)
    annualized = annualized_roi(roi, years)

    monthly = None
    daily = None
    if years > 0:
        monthly_compound = annualized_roi(roi, years * 12)
        daily_compound = annualized_roi(roi, years * DAYS_PER_YEAR)
        monthly = monthly_compound / 12 if monthly_compound is not None else None
        daily = daily_compound / DAYS_PER_YEAR if daily_compound is not None else None

    return ROIResults(
        roi=roi,
        annualized_roi=annualized,
        total_return=total_return,
        net_profit=net_profit,
        total_invested=total_invested,
        total_gain=net_profit,
        effective_period_years=years,
        monthly_growth_rate=monthly,
        daily_growth_rate=daily,
    )


def real_roi(annualized: Decimal, inflation_rate: Decimal) -> Decimal:
    """Inflation-adjusted annual return (Fisher): (1 + nominal) / (1 + inflation) - 1."""
    nominal = annualized / 100
    inflation = inflation_rate / 100
    return ((ONE + nominal) / (ONE + inflation) - ONE) * 100


def project_growth(
    initial_value: Decimal,
    annualized: Decimal,
    years: int,
) -> list[GrowthProjection]:
    growth = ONE + annualized / 100
    projections = []
    for year in range(1, years + 1):
        value = initial_value * growth ** year
        gain = value - initial_value
        projections.append(GrowthProjection(
            year=year,
            projected_value=value,
            projected_roi=gain / initial_value * 100 if initial_value != 0 else ZERO,
            cumulative_gain=gain,
        ))
    return projections


def compare_scenarios(scenarios: list[InvestmentScenario]) -> list[ScenarioComparison]:
    """Rank scenarios by annualized ROI, best first. Undefined rates rank last."""
    results = []
    for scenario in scenarios:
        r = calculate_roi(ROIInputs(
            initial_investment=scenario.initial_investment,
            final_value=scenario.final_value,
            investment_period=scenario.period,
            period_type=scenario.period_type,
            additional_costs=scenario.additional_costs,
            additional_gains=scenario.additional_gains,
        ))
        results.append((scenario.name, r))

    results.sort(
        key=lambda item: (item[1].annualized_roi is None, -(item[1].annualized_roi or ZERO))
    )

    return [
        ScenarioComparison(
            scenario=name,
            roi=r.roi,
            annualized_roi=r.annualized_roi,
            net_profit=r.net_profit,
            rank=rank,
        )
        for rank, (name, r) in enumerate(results, start=1)
    ]


def validate_roi_inputs(inputs: ROIInputs) -> list[str]:
    errors: list[str] = []
    if inputs.initial_investment <= 0:
        errors.append("Initial investment must be greater than 0")
    if inputs.final_value < 0:
        errors.append("Final value must be greater than or equal to 0")
    if inputs.investment_period <= 0:
        errors.append("Investment period must be greater than 0")
    if inputs.additional_costs < 0:
        errors.append("Additional costs cannot be negative")
    if inputs.additional_gains < 0:
        errors.append("Additional gains cannot be negative")
    return errors
