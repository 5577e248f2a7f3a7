"""Time-value-of-money inputs shared by the present and future value calculators."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class PaymentFrequency(Enum):
    ANNUAL = "annual"
    SEMI_ANNUAL = "semi-annual"
    QUARTERLY = "quarterly"
    MONTHLY = "monthly"
    WEEKLY = "weekly"
    DAILY = "daily"

    @property
    def periods_per_year(self) -> int:
        return {
            PaymentFrequency.ANNUAL: 1,
            PaymentFrequency.SEMI_ANNUAL: 2,
            PaymentFrequency.QUARTERLY: 4,
            PaymentFrequency.MONTHLY: 12,
            PaymentFrequency.WEEKLY: 52,
            PaymentFrequency.DAILY: 365,
        }[self]


class PaymentTiming(Enum):
    END = "end"  # Ordinary annuity
    BEGINNING = "beginning"  # Annuity due


@dataclass(frozen=True)
class PVInputs:
    periods: int
    interest_rate: Decimal  # Annual percentage
    future_value: Decimal = Decimal("0")
    periodic_payment: Decimal = Decimal("0")
    payment_timing: PaymentTiming = PaymentTiming.END
    growth_rate: Decimal = Decimal("0")  # Annual percentage
    payment_frequency: PaymentFrequency = PaymentFrequency.ANNUAL


@dataclass(frozen=True)
class FVInputs:
    periods: int
    interest_rate: Decimal  # Annual percentage
    present_value: Decimal = Decimal("0")
    periodic_payment: Decimal = Decimal("0")
    payment_timing: PaymentTiming = PaymentTiming.END
    growth_rate: Decimal = Decimal("0")  # Annual percentage
    payment_frequency: PaymentFrequency = PaymentFrequency.ANNUAL
