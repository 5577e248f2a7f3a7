"""Amortization schedule computation with extra payments and mortgage insurance.

Pure functions: Decimal in, dataclass out. No I/O.
"""

import calendar
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from fincalc.config import settings
from fincalc.models.loan import ExtraPaymentPlan

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0")
MAX_TERM_YEARS = 50

# (month, opening balance) -> insurance charged that month
InsuranceCharge = Callable[[int, Decimal], Decimal]


@dataclass(frozen=True)
class ScheduleRow:
    month: int
    date: date
    payment: Decimal  # Scheduled P&I actually paid this month
    principal: Decimal
    interest: Decimal
    extra_payment: Decimal
    balance: Decimal
    cumulative_principal: Decimal  # Includes extra payments
    cumulative_interest: Decimal
    insurance: Decimal = ZERO
    cumulative_insurance: Decimal = ZERO

    @property
    def total_payment(self) -> Decimal:
        return self.payment + self.extra_payment + self.insurance


@dataclass(frozen=True)
class AmortizationSchedule:
    rows: list[ScheduleRow]
    monthly_payment: Decimal
    total_interest: Decimal
    total_principal: Decimal
    total_extra: Decimal
    total_insurance: Decimal

    @property
    def months(self) -> int:
        return len(self.rows)

    @property
    def is_paid_off(self) -> bool:
        return bool(self.rows) and self.rows[-1].balance == 0


def add_months(start: date, months: int) -> date:
    """Shift a date by whole months, clamping the day to the target month's end."""
    year = start.year + (start.month - 1 + months) // 12
    month = (start.month - 1 + months) % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def monthly_rate(annual_rate: Decimal) -> Decimal:
    """Annual percentage (6.5) to monthly decimal rate."""
    return annual_rate / 100 / 12


def payment_for_months(principal: Decimal, annual_rate: Decimal, months: int) -> Decimal:
    """Level payment that retires ``principal`` over ``months`` payments."""
    if principal <= 0 or months <= 0:
        return ZERO
    if annual_rate <= 0:
        return (principal / months).quantize(TWO_PLACES, ROUND_HALF_UP)

    r = monthly_rate(annual_rate)
    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + r) ** months
    payment = principal * (r * factor) / (factor - 1)
    return payment.quantize(TWO_PLACES, ROUND_HALF_UP)


def monthly_payment(principal: Decimal, annual_rate: Decimal, term_years: int) -> Decimal:
    """Calculate fixed monthly principal-and-interest payment.

    Args:
        principal: Loan amount
        annual_rate: Annual interest rate as a percentage (6.5 for 6.5%)
        term_years: Loan term in years
    """
    if term_years <= 0:
        return ZERO
    return payment_for_months(principal, annual_rate, term_years * 12)


def amortization_schedule(
    principal: Decimal,
    annual_rate: Decimal,
    term_years: int,
    extra_payments: ExtraPaymentPlan | None = None,
    start_date: date | None = None,
    insurance: InsuranceCharge | None = None,
) -> AmortizationSchedule:
    """Generate a month-by-month schedule until the term ends or the loan is paid off.

    Args:
        principal: Loan amount
        annual_rate: Annual interest rate as a percentage
        term_years: Loan term in years; zero yields an empty schedule
        extra_payments: Optional recurring and one-time principal prepayments
        start_date: Date of the first payment (defaults to settings.default_start_date)
        insurance: Optional per-month insurance charge, given month and opening balance
    """
    pmt = monthly_payment(principal, annual_rate, term_years)
    r = monthly_rate(annual_rate)
    n_periods = max(term_years, 0) * 12
    start = start_date or settings.default_start_date

    rows: list[ScheduleRow] = []
    balance = principal
    cumulative_principal = ZERO
    cumulative_interest = ZERO
    cumulative_insurance = ZERO
    total_extra = ZERO

    for month in range(1, n_periods + 1):
        if balance <= 0:
            break

        opening_balance = balance
        interest = (balance * r).quantize(TWO_PLACES, ROUND_HALF_UP)
        principal_paid = max(ZERO, pmt - interest)

        extra = ZERO
        if extra_payments is not None:
            extra = max(ZERO, extra_payments.extra_for_month(month))

        # No payment may drive the balance negative; the last scheduled
        # payment also absorbs cent rounding drift.
        if principal_paid >= balance or month == n_periods:
            principal_paid = balance
            extra = ZERO
        elif principal_paid + extra > balance:
            extra = balance - principal_paid

        balance = max(ZERO, balance - principal_paid - extra)

        insurance_paid = ZERO
        if insurance is not None:
            insurance_paid = insurance(month, opening_balance)

        cumulative_principal += principal_paid + extra
        cumulative_interest += interest
        cumulative_insurance += insurance_paid
        total_extra += extra

        rows.append(ScheduleRow(
            month=month,
            date=add_months(start, month - 1),
            payment=interest + principal_paid,
            principal=principal_paid,
            interest=interest,
            extra_payment=extra,
            balance=balance,
            cumulative_principal=cumulative_principal,
            cumulative_interest=cumulative_interest,
            insurance=insurance_paid,
            cumulative_insurance=cumulative_insurance,
        ))

    return AmortizationSchedule(
        rows=rows,
        monthly_payment=pmt,
        total_interest=cumulative_interest,
        total_principal=cumulative_principal,
        total_extra=total_extra,
        total_insurance=cumulative_insurance,
    )


def yearly_summary(schedule: AmortizationSchedule) -> list[dict[str, Decimal]]:
    """Aggregate an amortization schedule by loan year.

    Returns list of dicts with keys: year, principal, interest, extra, insurance,
    debt_service, ending_balance. The last year may be partial.
    """
    yearly: list[dict[str, Decimal]] = []
    year_principal = ZERO
    year_interest = ZERO
    year_extra = ZERO
    year_insurance = ZERO
    year_debt_service = ZERO

    for row in schedule.rows:
        year_principal += row.principal + row.extra_payment
        year_interest += row.interest
        year_extra += row.extra_payment
        year_insurance += row.insurance
        year_debt_service += row.payment + row.extra_payment

        if row.month % 12 == 0 or row.month == len(schedule.rows):
            year_num = (row.month - 1) // 12 + 1
            yearly.append({
                "year": Decimal(year_num),
                "principal": year_principal,
                "interest": year_interest,
                "extra": year_extra,
                "insurance": year_insurance,
                "debt_service": year_debt_service,
                "ending_balance": row.balance,
            })
            year_principal = ZERO
            year_interest = ZERO
            year_extra = ZERO
            year_insurance = ZERO
            year_debt_service = ZERO

    return yearly
