"""Time-value-of-money helpers shared by the present and future value calculators.

Rates come in as annual percentages and leave as per-period decimals.
"""

from decimal import Decimal

from fincalc.models.tvm import PaymentFrequency

ONE = Decimal("1")
MAX_PERIODS = 1200
MAX_RATE = Decimal("100")  # Annual percentage, interest and growth


def periodic_rate(annual_rate: Decimal, frequency: PaymentFrequency) -> Decimal:
    """Annual percentage -> decimal rate per payment period (6, monthly -> 0.005)."""
    return annual_rate / 100 / frequency.periods_per_year


def effective_annual_rate(rate_per_period: Decimal, periods_per_year: int) -> Decimal:
    """EAR as a percentage: (1 + r)^m - 1."""
    return ((ONE + rate_per_period) ** periods_per_year - ONE) * 100


def sum_of_growing_payments(payment: Decimal, growth_per_period: Decimal, periods: int) -> Decimal:
    """Undiscounted total of a payment stream growing by ``growth_per_period``."""
    total = Decimal("0")
    for i in range(periods):
        total += payment * (ONE + growth_per_period) ** i
    return total
