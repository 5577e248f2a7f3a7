"""Conventional mortgage: payment breakdown, PMI, totals and payoff date.

Pure functions: dataclasses in, dataclasses out. No I/O.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from fincalc.config import settings
from fincalc.engine.amortization import (
    MAX_TERM_YEARS,
    AmortizationSchedule,
    add_months,
    amortization_schedule,
    monthly_payment,
)
from fincalc.engine.insurance import (
    is_pmi_required,
    monthly_pmi,
    pmi_charge,
    pmi_removal_month,
)
from fincalc.models.loan import ExtraPaymentPlan, LoanInputs

TWO_PLACES = Decimal("0.01")


@dataclass(frozen=True)
class MonthlyPaymentBreakdown:
    principal_and_interest: Decimal
    property_tax: Decimal
    home_insurance: Decimal
    pmi: Decimal
    hoa_fee: Decimal
    other_costs: Decimal

    @property
    def total_monthly(self) -> Decimal:
        return (
            self.principal_and_interest
            + self.property_tax
            + self.home_insurance
            + self.pmi
            + self.hoa_fee
            + self.other_costs
        )


@dataclass(frozen=True)
class MortgageTotals:
    total_mortgage_payment: Decimal  # Principal + interest
    total_interest: Decimal
    total_property_tax: Decimal
    total_home_insurance: Decimal
    total_pmi: Decimal
    total_hoa: Decimal
    total_other_costs: Decimal

    @property
    def total_of_all_payments(self) -> Decimal:
        return (
            self.total_mortgage_payment
            + self.total_property_tax
            + self.total_home_insurance
            + self.total_pmi
            + self.total_hoa
            + self.total_other_costs
        )


@dataclass(frozen=True)
class MortgageResults:
    loan_amount: Decimal
    monthly_payment: MonthlyPaymentBreakdown
    totals: MortgageTotals
    payoff_date: date
    pmi_removal_month: int | None
    schedule: AmortizationSchedule


def loan_amount(home_price: Decimal, down_payment: Decimal) -> Decimal:
    return max(Decimal("0"), home_price - down_payment)


def _monthly(annual: Decimal) -> Decimal:
    return (annual / 12).quantize(TWO_PLACES, ROUND_HALF_UP)


def monthly_breakdown(inputs: LoanInputs) -> MonthlyPaymentBreakdown:
    """Full monthly housing cost for the first month of the loan."""
    principal = loan_amount(inputs.home_price, inputs.down_payment)
    pmi = Decimal("0")
    if is_pmi_required(inputs.home_price, inputs.down_payment):
        pmi = monthly_pmi(inputs.pmi)

    return MonthlyPaymentBreakdown(
        principal_and_interest=monthly_payment(
            principal, inputs.interest_rate, inputs.loan_term_years
        ),
        property_tax=_monthly(inputs.property_tax),
        home_insurance=_monthly(inputs.home_insurance),
        pmi=pmi,
        hoa_fee=inputs.hoa_fee,
        other_costs=inputs.other_costs,
    )


def mortgage_schedule(
    inputs: LoanInputs,
    extra_payments: ExtraPaymentPlan | None = None,
) -> AmortizationSchedule:
    """Amortization schedule with PMI charged per row while it still applies."""
    insurance = None
    if is_pmi_required(inputs.home_price, inputs.down_payment) and inputs.pmi > 0:
        insurance = pmi_charge(inputs.home_price, inputs.pmi)

    return amortization_schedule(
        principal=loan_amount(inputs.home_price, inputs.down_payment),
        annual_rate=inputs.interest_rate,
        term_years=inputs.loan_term_years,
        extra_payments=extra_payments,
        start_date=inputs.start_date,
        insurance=insurance,
    )


def calculate_mortgage(
    inputs: LoanInputs,
    extra_payments: ExtraPaymentPlan | None = None,
) -> MortgageResults:
    """Schedule the loan and roll it up into totals and a payoff date.

    Escrow items (tax, insurance, HOA, other) are charged for every month the
    loan is actually outstanding, so extra payments shorten them too.
    """
    principal = loan_amount(inputs.home_price, inputs.down_payment)
    breakdown = monthly_breakdown(inputs)
    schedule = mortgage_schedule(inputs, extra_payments)
    months = schedule.months

    removal_month = None
    if breakdown.pmi > 0:
        removal_month = pmi_removal_month(inputs.home_price, schedule)

    totals = MortgageTotals(
        total_mortgage_payment=principal + schedule.total_interest,
        total_interest=schedule.total_interest,
        total_property_tax=breakdown.property_tax * months,
        total_home_insurance=breakdown.home_insurance * months,
        total_pmi=schedule.total_insurance,
        total_hoa=breakdown.hoa_fee * months,
        total_other_costs=breakdown.other_costs * months,
    )

    start = inputs.start_date or settings.default_start_date
    return MortgageResults(
        loan_amount=principal,
        monthly_payment=breakdown,
        totals=totals,
        payoff_date=add_months(start, months),
        pmi_removal_month=removal_month,
        schedule=schedule,
    )


def validate_mortgage_inputs(
    inputs: LoanInputs,
    extra_payments: ExtraPaymentPlan | None = None,
) -> list[str]:
    """Advisory validation. Empty list means the inputs are usable."""
    errors: list[str] = []

    if inputs.home_price <= 0:
        errors.append("Home price must be greater than 0")
    if inputs.down_payment < 0:
        errors.append("Down payment cannot be negative")
    elif inputs.home_price > 0 and inputs.down_payment >= inputs.home_price:
        errors.append("Down payment must be less than the home price")
    if inputs.interest_rate < 0 or inputs.interest_rate > 100:
        errors.append("Interest rate must be between 0 and 100")
    if inputs.loan_term_years <= 0:
        errors.append("Loan term must be greater than 0")
    elif inputs.loan_term_years > MAX_TERM_YEARS:
        errors.append(f"Loan term cannot exceed {MAX_TERM_YEARS} years")

    for label, value in (
        ("Property tax", inputs.property_tax),
        ("Home insurance", inputs.home_insurance),
        ("PMI", inputs.pmi),
        ("HOA fee", inputs.hoa_fee),
        ("Other costs", inputs.other_costs),
    ):
        if value < 0:
            errors.append(f"{label} cannot be negative")

    if extra_payments is not None:
        errors.extend(validate_extra_payments(extra_payments, inputs.loan_term_years))

    return errors


def validate_extra_payments(plan: ExtraPaymentPlan, term_years: int) -> list[str]:
    errors: list[str] = []
    last_month = term_years * 12

    if plan.monthly_extra < 0:
        errors.append("Monthly extra payment cannot be negative")
    if plan.yearly_extra < 0:
        errors.append("Yearly extra payment cannot be negative")
    if plan.monthly_extra_start_month < 1:
        errors.append("Monthly extra payment must start at month 1 or later")
    if plan.yearly_extra_start_month < 1:
        errors.append("Yearly extra payment must start at month 1 or later")

    for payment in plan.one_time_payments:
        if payment.amount < 0:
            errors.append(f"One-time payment in month {payment.month} cannot be negative")
        if payment.month < 1 or (last_month > 0 and payment.month > last_month):
            errors.append(f"One-time payment month {payment.month} is outside the loan term")

    return errors
