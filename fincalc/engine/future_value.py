"""Future value of a lump sum and of level, due or growing annuities.

    FV lump sum        = PV * (1 + r)^n
    FV ordinary        = PMT * ((1 + r)^n - 1) / r
    FV annuity due     = FV ordinary * (1 + r)
    FV growing annuity = PMT * ((1 + r)^n - (1 + g)^n) / (r - g)
                         PMT * n * (1 + r)^(n - 1) when r == g

Pure functions. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal

from fincalc.engine.tvm import (
    MAX_PERIODS,
    MAX_RATE,
    ONE,
    effective_annual_rate,
    periodic_rate,
    sum_of_growing_payments,
)
from fincalc.models.tvm import FVInputs, PaymentFrequency, PaymentTiming

ZERO = Decimal("0")
GROWTH_WARNING_MARGIN = Decimal("0.01")


@dataclass(frozen=True)
class LumpSumFV:
    future_value: Decimal
    compound_factor: Decimal
    interest_earned: Decimal
    total_growth_percentage: Decimal


@dataclass(frozen=True)
class FVPeriodDetail:
    period: int
    payment: Decimal
    beginning_balance: Decimal
    interest: Decimal
    ending_balance: Decimal
    contribution: Decimal  # Cumulative, including the starting lump sum
    cumulative_interest: Decimal


@dataclass(frozen=True)
class FVResults:
    total_future_value: Decimal
    fv_of_lump_sum: Decimal
    fv_of_annuity: Decimal
    present_value: Decimal
    periodic_payment: Decimal
    total_contributions: Decimal
    total_interest: Decimal
    interest_rate: Decimal
    periodic_rate: Decimal  # Percent
    effective_annual_rate: Decimal  # Percent
    number_of_periods: int
    total_payments: Decimal
    payment_timing: PaymentTiming
    payment_frequency: PaymentFrequency
    is_growing_annuity: bool
    growth_rate: Decimal
    total_future_payments: Decimal | None
    compound_factor: Decimal
    period_breakdown: list[FVPeriodDetail]


def fv_of_lump_sum(present_value: Decimal, rate: Decimal, periods: int) -> LumpSumFV:
    compound_factor = (ONE + rate) ** periods
    future_value = present_value * compound_factor
    growth_pct = ZERO
    if present_value != 0:
        growth_pct = (future_value / present_value - ONE) * 100
    return LumpSumFV(
        future_value=future_value,
        compound_factor=compound_factor,
        interest_earned=future_value - present_value,
        total_growth_percentage=growth_pct,
    )


def fv_of_ordinary_annuity(payment: Decimal, rate: Decimal, periods: int) -> Decimal:
    if rate == 0:
        return payment * periods
    return payment * ((ONE + rate) ** periods - ONE) / rate


def fv_of_annuity_due(payment: Decimal, rate: Decimal, periods: int) -> Decimal:
    return fv_of_ordinary_annuity(payment, rate, periods) * (ONE + rate)


def fv_of_growing_annuity(
    payment: Decimal,
    rate: Decimal,
    growth: Decimal,
    periods: int,
    timing: PaymentTiming = PaymentTiming.END,
) -> Decimal:
    due = timing is PaymentTiming.BEGINNING
    if growth == rate:
        fv = payment * periods * (ONE + rate) ** (periods - 1)
        return fv * (ONE + rate) if due else fv

    if growth == 0:
        if due:
            return fv_of_annuity_due(payment, rate, periods)
        return fv_of_ordinary_annuity(payment, rate, periods)

    fv = payment * ((ONE + rate) ** periods - (ONE + growth) ** periods) / (rate - growth)
    return fv * (ONE + rate) if due else fv


def period_breakdown(
    present_value: Decimal,
    payment: Decimal,
    rate: Decimal,
    periods: int,
    timing: PaymentTiming,
    growth: Decimal,
) -> list[FVPeriodDetail]:
    """Balance roll-forward. Beginning-of-period payments earn that period's interest."""
    rows: list[FVPeriodDetail] = []
    balance = present_value
    contributions = present_value
    cumulative_interest = ZERO

    for period in range(1, periods + 1):
        beginning = balance
        period_payment = payment
        if growth > 0 and payment > 0:
            period_payment = payment * (ONE + growth) ** (period - 1)

        if timing is PaymentTiming.BEGINNING:
            funded = beginning + period_payment
            interest = funded * rate
            ending = funded + interest
        else:
            interest = beginning * rate
            ending = beginning + interest + period_payment

        contributions += period_payment
        cumulative_interest += interest
        rows.append(FVPeriodDetail(
            period=period,
            payment=period_payment,
            beginning_balance=beginning,
            interest=interest,
            ending_balance=ending,
            contribution=contributions,
            cumulative_interest=cumulative_interest,
        ))
        balance = ending

    return rows


def calculate_future_value(inputs: FVInputs) -> FVResults:
    frequency = inputs.payment_frequency
    rate = periodic_rate(inputs.interest_rate, frequency)
    growth = periodic_rate(inputs.growth_rate, frequency)
    payment = inputs.periodic_payment
    periods = inputs.periods
    is_growing = inputs.growth_rate > 0 and payment > 0

    fv_lump = ZERO
    compound_factor = ONE
    if inputs.present_value > 0:
        lump = fv_of_lump_sum(inputs.present_value, rate, periods)
        fv_lump = lump.future_value
        compound_factor = lump.compound_factor

    fv_annuity = ZERO
    total_future_payments = ZERO
    if payment > 0:
        if is_growing:
            fv_annuity = fv_of_growing_annuity(payment, rate, growth, periods, inputs.payment_timing)
            total_future_payments = sum_of_growing_payments(payment, growth, periods)
        elif inputs.payment_timing is PaymentTiming.BEGINNING:
            fv_annuity = fv_of_annuity_due(payment, rate, periods)
        else:
            fv_annuity = fv_of_ordinary_annuity(payment, rate, periods)

    total_fv = fv_lump + fv_annuity
    total_payments = total_future_payments if is_growing else payment * periods
    total_contributions = inputs.present_value + total_payments

    return FVResults(
        total_future_value=total_fv,
        fv_of_lump_sum=fv_lump,
        fv_of_annuity=fv_annuity,
        present_value=inputs.present_value,
        periodic_payment=payment,
        total_contributions=total_contributions,
        total_interest=total_fv - total_contributions,
        interest_rate=inputs.interest_rate,
        periodic_rate=rate * 100,
        effective_annual_rate=effective_annual_rate(rate, frequency.periods_per_year),
        number_of_periods=periods,
        total_payments=total_payments,
        payment_timing=inputs.payment_timing,
        payment_frequency=frequency,
        is_growing_annuity=is_growing,
        growth_rate=inputs.growth_rate,
        total_future_payments=total_future_payments if is_growing else None,
        compound_factor=compound_factor,
        period_breakdown=period_breakdown(
            inputs.present_value, payment, rate, periods, inputs.payment_timing, growth
        ),
    )


def validate_fv_inputs(inputs: FVInputs) -> list[str]:
    errors: list[str] = []

    if inputs.present_value <= 0 and inputs.periodic_payment <= 0:
        errors.append("Please enter either a present value or periodic payment amount")
    if inputs.present_value < 0:
        errors.append("Present value must be non-negative")
    if inputs.periodic_payment < 0:
        errors.append("Periodic payment must be non-negative")
    if inputs.periods <= 0:
        errors.append("Number of periods must be greater than zero")
    elif inputs.periods > MAX_PERIODS:
        errors.append(f"Number of periods cannot exceed {MAX_PERIODS}")
    if inputs.interest_rate < 0:
        errors.append("Interest rate cannot be negative")
    elif inputs.interest_rate > MAX_RATE:
        errors.append(f"Interest rate cannot exceed {MAX_RATE}%")
    if inputs.growth_rate < 0:
        errors.append("Growth rate cannot be negative")
    elif inputs.growth_rate > MAX_RATE:
        errors.append(f"Growth rate cannot exceed {MAX_RATE}%")
    if inputs.growth_rate - inputs.interest_rate > GROWTH_WARNING_MARGIN:
        errors.append(
            "Growth rate exceeds interest rate. This is unusual but mathematically "
            "valid. Results may be very large."
        )

    return errors
