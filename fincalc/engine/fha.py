"""FHA loan: upfront and annual MIP, schedule, totals, conventional comparison.

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
    FHA_MIN_DOWN_PAYMENT_PCT,
    annual_mip_rate,
    base_loan_amount,
    calculate_ufmip,
    loan_to_value,
    mip_charge,
    mip_duration,
    monthly_mip,
    total_loan_amount,
)
from fincalc.engine.mortgage import validate_extra_payments
from fincalc.models.loan import FHALoanInputs

TWO_PLACES = Decimal("0.01")


@dataclass(frozen=True)
class FHALoanDetails:
    base_loan_amount: Decimal
    ufmip_amount: Decimal
    total_loan_amount: Decimal  # Includes UFMIP when financed
    ltv: Decimal  # Percent
    annual_mip_rate: Decimal  # Percent
    monthly_mip_amount: Decimal
    mip_duration: int | None  # Months; None = life of loan


@dataclass(frozen=True)
class FHAMonthlyBreakdown:
    principal_and_interest: Decimal
    monthly_mip: Decimal
    property_tax: Decimal
    home_insurance: Decimal
    hoa_fee: Decimal
    other_costs: Decimal

    @property
    def total_monthly(self) -> Decimal:
        return (
            self.principal_and_interest
            + self.monthly_mip
            + self.property_tax
            + self.home_insurance
            + self.hoa_fee
            + self.other_costs
        )


@dataclass(frozen=True)
class FHATotals:
    total_principal_and_interest: Decimal
    total_interest: Decimal
    total_mip: Decimal  # Monthly MIP paid plus UFMIP when paid in cash
    total_property_tax: Decimal
    total_home_insurance: Decimal
    total_hoa: Decimal
    total_other_costs: Decimal

    @property
    def total_of_all_payments(self) -> Decimal:
        return (
            self.total_principal_and_interest
            + self.total_mip
            + self.total_property_tax
            + self.total_home_insurance
            + self.total_hoa
            + self.total_other_costs
        )


@dataclass(frozen=True)
class FHALoanResults:
    loan_details: FHALoanDetails
    monthly_payment: FHAMonthlyBreakdown
    totals: FHATotals
    payoff_date: date
    schedule: AmortizationSchedule


@dataclass(frozen=True)
class ConventionalComparison:
    loan_amount: Decimal
    monthly_payment: Decimal
    total_interest: Decimal
    total_payment: Decimal


def fha_loan_details(inputs: FHALoanInputs) -> FHALoanDetails:
    base = base_loan_amount(inputs.home_price, inputs.down_payment)
    ltv = loan_to_value(inputs.home_price, inputs.down_payment)
    rate = annual_mip_rate(base, ltv, inputs.loan_term_years)

    return FHALoanDetails(
        base_loan_amount=base,
        ufmip_amount=calculate_ufmip(base),
        total_loan_amount=total_loan_amount(base, inputs.finance_ufmip),
        ltv=ltv,
        annual_mip_rate=rate,
        monthly_mip_amount=monthly_mip(base, rate),
        mip_duration=mip_duration(ltv),
    )


def fha_schedule(inputs: FHALoanInputs, details: FHALoanDetails) -> AmortizationSchedule:
    """Amortize the total loan; MIP accrues on the base loan within its duration."""
    extra = None if inputs.extra_payments.is_empty else inputs.extra_payments
    return amortization_schedule(
        principal=details.total_loan_amount,
        annual_rate=inputs.interest_rate,
        term_years=inputs.loan_term_years,
        extra_payments=extra,
        start_date=inputs.start_date,
        insurance=mip_charge(details.monthly_mip_amount, details.mip_duration),
    )


def calculate_fha_loan(inputs: FHALoanInputs) -> FHALoanResults:
    details = fha_loan_details(inputs)
    schedule = fha_schedule(inputs, details)
    months = schedule.months

    monthly_tax = (inputs.property_tax / 12).quantize(TWO_PLACES, ROUND_HALF_UP)
    monthly_insurance = (inputs.home_insurance / 12).quantize(TWO_PLACES, ROUND_HALF_UP)

    breakdown = FHAMonthlyBreakdown(
        principal_and_interest=monthly_payment(
            details.total_loan_amount, inputs.interest_rate, inputs.loan_term_years
        ),
        monthly_mip=details.monthly_mip_amount,
        property_tax=monthly_tax,
        home_insurance=monthly_insurance,
        hoa_fee=inputs.hoa_fee,
        other_costs=inputs.other_costs,
    )

    # UFMIP paid in cash at closing is still a cost of the loan
    unfinanced_ufmip = Decimal("0") if inputs.finance_ufmip else details.ufmip_amount

    totals = FHATotals(
        total_principal_and_interest=details.total_loan_amount + schedule.total_interest,
        total_interest=schedule.total_interest,
        total_mip=schedule.total_insurance + unfinanced_ufmip,
        total_property_tax=monthly_tax * months,
        total_home_insurance=monthly_insurance * months,
        total_hoa=inputs.hoa_fee * months,
        total_other_costs=inputs.other_costs * months,
    )

    start = inputs.start_date or settings.default_start_date
    return FHALoanResults(
        loan_details=details,
        monthly_payment=breakdown,
        totals=totals,
        payoff_date=add_months(start, months),
        schedule=schedule,
    )


def calculate_conventional_loan(
    home_price: Decimal,
    down_payment_pct: Decimal,
    term_years: int,
    interest_rate: Decimal,
) -> ConventionalComparison:
    """Conventional loan at the given down payment, for side-by-side comparison."""
    down_payment = home_price * down_payment_pct / 100
    principal = home_price - down_payment
    pmt = monthly_payment(principal, interest_rate, term_years)
    total_payment = pmt * term_years * 12

    return ConventionalComparison(
        loan_amount=principal,
        monthly_payment=pmt,
        total_interest=total_payment - principal,
        total_payment=total_payment,
    )


def validate_fha_inputs(inputs: FHALoanInputs) -> list[str]:
    errors: list[str] = []

    if inputs.home_price <= 0:
        errors.append("Home price must be greater than 0")
    if inputs.down_payment < 0:
        errors.append("Down payment cannot be negative")
    elif inputs.home_price > 0:
        if inputs.down_payment >= inputs.home_price:
            errors.append("Down payment must be less than the home price")
        elif inputs.down_payment_pct < FHA_MIN_DOWN_PAYMENT_PCT:
            errors.append(
                f"FHA loans require at least {FHA_MIN_DOWN_PAYMENT_PCT}% down"
            )
    if inputs.interest_rate < 0 or inputs.interest_rate > 100:
        errors.append("Interest rate must be between 0 and 100")
    if inputs.loan_term_years <= 0:
        errors.append("Loan term must be greater than 0")
    elif inputs.loan_term_years > MAX_TERM_YEARS:
        errors.append(f"Loan term cannot exceed {MAX_TERM_YEARS} years")

    for label, value in (
        ("Property tax", inputs.property_tax),
        ("Home insurance", inputs.home_insurance),
        ("HOA fee", inputs.hoa_fee),
        ("Other costs", inputs.other_costs),
    ):
        if value < 0:
            errors.append(f"{label} cannot be negative")

    errors.extend(validate_extra_payments(inputs.extra_payments, inputs.loan_term_years))
    return errors
