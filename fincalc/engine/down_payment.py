"""Down payment scenarios: cash to close, payment and PMI at several down payment levels."""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from fincalc.engine.amortization import MAX_TERM_YEARS, monthly_payment
from fincalc.engine.insurance import PMI_REQUIRED_BELOW_DOWN_PCT

TWO_PLACES = Decimal("0.01")

SCENARIO_PERCENTAGES = (
    Decimal("3.5"),
    Decimal("5"),
    Decimal("10"),
    Decimal("15"),
    Decimal("20"),
    Decimal("25"),
    Decimal("30"),
)
COMPARISON_TERM_MONTHS = 360


@dataclass(frozen=True)
class DownPaymentCalculation:
    home_price: Decimal
    down_payment: Decimal
    down_payment_pct: Decimal
    loan_amount: Decimal
    closing_costs: Decimal
    total_cash_needed: Decimal
    monthly_payment: Decimal
    requires_pmi: bool


@dataclass(frozen=True)
class DownPaymentSavings:
    monthly_savings: Decimal
    total_loan_savings: Decimal  # Over a 30-year horizon
    additional_down_payment: Decimal
    pmi_avoided: bool


def down_payment_from_pct(home_price: Decimal, down_payment_pct: Decimal) -> Decimal:
    return (home_price * down_payment_pct / 100).quantize(TWO_PLACES, ROUND_HALF_UP)


def closing_costs(home_price: Decimal, closing_cost_pct: Decimal) -> Decimal:
    return (home_price * closing_cost_pct / 100).quantize(TWO_PLACES, ROUND_HALF_UP)


def calculate_loan_details(
    home_price: Decimal,
    down_payment_pct: Decimal,
    closing_cost_pct: Decimal,
    interest_rate: Decimal,
    term_years: int,
) -> DownPaymentCalculation:
    down_payment = down_payment_from_pct(home_price, down_payment_pct)
    principal = home_price - down_payment
    closing = closing_costs(home_price, closing_cost_pct)

    return DownPaymentCalculation(
        home_price=home_price,
        down_payment=down_payment,
        down_payment_pct=down_payment_pct,
        loan_amount=principal,
        closing_costs=closing,
        total_cash_needed=down_payment + closing,
        monthly_payment=monthly_payment(principal, interest_rate, term_years),
        requires_pmi=down_payment_pct < PMI_REQUIRED_BELOW_DOWN_PCT,
    )


def calculate_down_payment_scenarios(
    home_price: Decimal,
    closing_cost_pct: Decimal,
    interest_rate: Decimal,
    term_years: int,
) -> list[DownPaymentCalculation]:
    """Loan details at 3.5%, 5%, 10%, 15%, 20%, 25% and 30% down."""
    return [
        calculate_loan_details(home_price, pct, closing_cost_pct, interest_rate, term_years)
        for pct in SCENARIO_PERCENTAGES
    ]


def calculate_down_payment_savings(
    lower: DownPaymentCalculation,
    higher: DownPaymentCalculation,
) -> DownPaymentSavings:
    """What the larger down payment in ``higher`` saves relative to ``lower``."""
    monthly = lower.monthly_payment - higher.monthly_payment
    return DownPaymentSavings(
        monthly_savings=monthly,
        total_loan_savings=monthly * COMPARISON_TERM_MONTHS,
        additional_down_payment=higher.down_payment - lower.down_payment,
        pmi_avoided=lower.requires_pmi and not higher.requires_pmi,
    )


def validate_down_payment_inputs(
    home_price: Decimal,
    down_payment_pct: Decimal,
    closing_cost_pct: Decimal,
    interest_rate: Decimal,
    term_years: int,
) -> list[str]:
    errors: list[str] = []
    if home_price <= 0:
        errors.append("Home price must be greater than 0")
    if down_payment_pct < 0 or down_payment_pct >= 100:
        errors.append("Down payment must be at least 0% and less than 100%")
    if closing_cost_pct < 0 or closing_cost_pct > 100:
        errors.append("Closing costs must be between 0% and 100%")
    if interest_rate < 0 or interest_rate > 100:
        errors.append("Interest rate must be between 0 and 100")
    if term_years <= 0:
        errors.append("Loan term must be greater than 0")
    elif term_years > MAX_TERM_YEARS:
        errors.append(f"Loan term cannot exceed {MAX_TERM_YEARS} years")
    return errors
