from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class PayoffStrategy(Enum):
    AVALANCHE = "avalanche"  # Highest APR first
    SNOWBALL = "snowball"  # Lowest balance first


@dataclass(frozen=True)
class Debt:
    name: str
    balance: Decimal
    apr: Decimal  # Annual percentage, e.g. Decimal("19.99")
    minimum_payment: Decimal

    @property
    def monthly_interest(self) -> Decimal:
        return self.balance * self.apr / 100 / 12


@dataclass(frozen=True)
class ExistingDebt:
    """A debt being considered for consolidation."""
    name: str
    balance: Decimal
    monthly_payment: Decimal
    interest_rate: Decimal  # Annual percentage


@dataclass(frozen=True)
class ConsolidationLoan:
    loan_amount: Decimal
    interest_rate: Decimal  # Annual percentage
    loan_term_years: int
    loan_term_months: int = 0
    loan_fee_pct: Decimal = Decimal("0")  # Origination fee, % of loan amount

    @property
    def total_months(self) -> int:
        return self.loan_term_years * 12 + self.loan_term_months
