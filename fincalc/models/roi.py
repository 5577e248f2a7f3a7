from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class PeriodType(Enum):
    YEARS = "years"
    MONTHS = "months"
    DAYS = "days"


@dataclass(frozen=True)
class ROIInputs:
    initial_investment: Decimal
    final_value: Decimal
    investment_period: Decimal
    period_type: PeriodType = PeriodType.YEARS
    additional_costs: Decimal = Decimal("0")  # Fees, maintenance, etc.
    additional_gains: Decimal = Decimal("0")  # Dividends, rental income, etc.


@dataclass(frozen=True)
class InvestmentScenario:
    name: str
    initial_investment: Decimal
    final_value: Decimal
    period: Decimal
    period_type: PeriodType = PeriodType.YEARS
    additional_costs: Decimal = Decimal("0")
    additional_gains: Decimal = Decimal("0")
