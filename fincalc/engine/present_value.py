"""Present value of a future lump sum and of level, due or growing annuities.

    PV lump sum        = FV / (1 + r)^n
    PV ordinary        = PMT * (1 - (1 + r)^-n) / r
    PV annuity due     = PV ordinary * (1 + r)
    PV growing annuity = PMT * (1 - ((1 + g) / (1 + r))^n) / (r - g)

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
from fincalc.models.tvm import PaymentFrequency, PaymentTiming, PVInputs

ZERO = Decimal("0")
RATE_EQUALITY_TOLERANCE = Decimal("0.0000001")


@dataclass(frozen=True)
class LumpSumPV:
    present_value: Decimal
    discount_factor: Decimal
    discount_amount: Decimal
    discount_percentage: Decimal


@dataclass(frozen=True)
class PVPeriodDetail:
    period: int
    payment: Decimal
    present_value: Decimal
    cumulative_pv: Decimal
    discount_factor: Decimal


@dataclass(frozen=True)
class PVResults:
    total_present_value: Decimal
    pv_of_lump_sum: Decimal
    pv_of_annuity: Decimal
    future_value: Decimal
    discount_factor: Decimal
    discount_amount: Decimal
    discount_percentage: Decimal
    periodic_payment: Decimal
    number_of_periods: int
    total_payments: Decimal
    annuity_discount_amount: Decimal
    payment_timing: PaymentTiming
    interest_rate: Decimal
    periodic_rate: Decimal  # Percent
    effective_annual_rate: Decimal  # Percent
    payment_frequency: PaymentFrequency
    is_growing_annuity: bool
    growth_rate: Decimal | None
    total_future_payments: Decimal | None
    period_breakdown: list[PVPeriodDetail]
    future_value_comparison: Decimal  # What the total PV grows to at the same rate


def pv_of_lump_sum(future_value: Decimal, rate: Decimal, periods: int) -> LumpSumPV:
    if future_value == 0:
        return LumpSumPV(ZERO, ZERO, ZERO, ZERO)

    discount_factor = ONE / (ONE + rate) ** periods
    present_value = future_value * discount_factor
    discount_amount = future_value - present_value
    return LumpSumPV(
        present_value=present_value,
        discount_factor=discount_factor,
        discount_amount=discount_amount,
        discount_percentage=discount_amount / future_value * 100,
    )


def pv_of_ordinary_annuity(payment: Decimal, rate: Decimal, periods: int) -> Decimal:
    if payment == 0 or periods == 0:
        return ZERO
    if rate == 0:
        return payment * periods
    return payment * (ONE - (ONE + rate) ** -periods) / rate


def pv_of_annuity_due(payment: Decimal, rate: Decimal, periods: int) -> Decimal:
    return pv_of_ordinary_annuity(payment, rate, periods) * (ONE + rate)


def pv_of_growing_annuity(
    payment: Decimal,
    rate: Decimal,
    growth: Decimal,
    periods: int,
    timing: PaymentTiming = PaymentTiming.END,
) -> Decimal:
    """``rate`` and ``growth`` are per-period decimals.

    When r == g the closed form divides by zero; each payment then discounts
    to the same PMT / (1 + r), so PV = PMT * n / (1 + r).
    """
    if payment == 0 or periods == 0:
        return ZERO

    due = timing is PaymentTiming.BEGINNING
    if abs(rate - growth) < RATE_EQUALITY_TOLERANCE:
        pv = payment * periods / (ONE + rate)
        return pv * (ONE + rate) if due else pv

    if growth == 0:
        if due:
            return pv_of_annuity_due(payment, rate, periods)
        return pv_of_ordinary_annuity(payment, rate, periods)

    pv = payment * (ONE - ((ONE + growth) / (ONE + rate)) ** periods) / (rate - growth)
    return pv * (ONE + rate) if due else pv


def period_breakdown(inputs: PVInputs, rate: Decimal) -> list[PVPeriodDetail]:
    """PV of each period's payment; annuity-due payments discount one period less."""
    growth = periodic_rate(inputs.growth_rate, inputs.payment_frequency)
    is_growing = inputs.growth_rate > 0
    due = inputs.payment_timing is PaymentTiming.BEGINNING

    rows: list[PVPeriodDetail] = []
    cumulative = ZERO
    for period in range(1, inputs.periods + 1):
        payment = inputs.periodic_payment
        if is_growing:
            payment = payment * (ONE + growth) ** (period - 1)

        exponent = period - 1 if due else period
        discount_factor = ONE / (ONE + rate) ** exponent
        pv = payment * discount_factor
        cumulative += pv

        rows.append(PVPeriodDetail(
            period=period,
            payment=payment,
            present_value=pv,
            cumulative_pv=cumulative,
            discount_factor=discount_factor,
        ))
    return rows


def calculate_present_value(inputs: PVInputs) -> PVResults:
    frequency = inputs.payment_frequency
    rate = periodic_rate(inputs.interest_rate, frequency)
    payment = inputs.periodic_payment
    periods = inputs.periods
    is_growing = inputs.growth_rate > 0 and payment > 0

    lump_sum = pv_of_lump_sum(inputs.future_value, rate, periods)

    pv_annuity = ZERO
    total_payments = ZERO
    total_future_payments = ZERO
    if payment > 0:
        if is_growing:
            growth = periodic_rate(inputs.growth_rate, frequency)
            pv_annuity = pv_of_growing_annuity(
                payment, rate, growth, periods, inputs.payment_timing
            )
            total_future_payments = sum_of_growing_payments(payment, growth, periods)
            total_payments = total_future_payments
        else:
            if inputs.payment_timing is PaymentTiming.BEGINNING:
                pv_annuity = pv_of_annuity_due(payment, rate, periods)
            else:
                pv_annuity = pv_of_ordinary_annuity(payment, rate, periods)
            total_payments = payment * periods

    total_pv = lump_sum.present_value + pv_annuity

    return PVResults(
        total_present_value=total_pv,
        pv_of_lump_sum=lump_sum.present_value,
        pv_of_annuity=pv_annuity,
        future_value=inputs.future_value,
        discount_factor=lump_sum.discount_factor,
        discount_amount=lump_sum.discount_amount,
        discount_percentage=lump_sum.discount_percentage,
        periodic_payment=payment,
        number_of_periods=periods,
        total_payments=total_payments,
        annuity_discount_amount=total_payments - pv_annuity,
        payment_timing=inputs.payment_timing,
        interest_rate=inputs.interest_rate,
        periodic_rate=rate * 100,
        effective_annual_rate=effective_annual_rate(rate, frequency.periods_per_year),
        payment_frequency=frequency,
        is_growing_annuity=is_growing,
        growth_rate=inputs.growth_rate if is_growing else None,
        total_future_payments=total_future_payments if is_growing else None,
        period_breakdown=period_breakdown(inputs, rate),
        future_value_comparison=total_pv * (ONE + rate) ** periods,
    )


def validate_pv_inputs(inputs: PVInputs) -> list[str]:
    errors: list[str] = []

    if inputs.future_value == 0 and inputs.periodic_payment == 0:
        errors.append("Please enter either a future value or periodic payment (or both)")
    if inputs.future_value < 0:
        errors.append("Future value must be non-negative")
    if inputs.periodic_payment < 0:
        errors.append("Periodic payment must be non-negative")
    if inputs.periods <= 0:
        errors.append("Number of periods must be greater than zero")
    elif inputs.periods > MAX_PERIODS:
        errors.append(f"Number of periods cannot exceed {MAX_PERIODS}")
    if inputs.interest_rate < 0:
        errors.append("Interest rate must be non-negative")
    elif inputs.interest_rate > MAX_RATE:
        errors.append(f"Interest rate cannot exceed {MAX_RATE}%")
    if inputs.growth_rate < 0:
        errors.append("Growth rate must be non-negative")
    elif inputs.growth_rate > MAX_RATE:
        errors.append(f"Growth rate cannot exceed {MAX_RATE}%")

    # Equal rates are fine (closed-form special case); only g > r diverges
    if inputs.growth_rate > 0 and inputs.periodic_payment > 0:
        rate = periodic_rate(inputs.interest_rate, inputs.payment_frequency)
        growth = periodic_rate(inputs.growth_rate, inputs.payment_frequency)
        if growth > rate:
            errors.append(
                "Growth rate must be less than or equal to the discount rate "
                "for a finite present value"
            )

    return errors
