from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class FilingStatus(Enum):
    SINGLE = "single"
    MFJ = "married_filing_jointly"
    HOH = "head_of_household"


@dataclass(frozen=True)
class ItemizedDeductions:
    mortgage_interest: Decimal = Decimal("0")
    charitable_donations: Decimal = Decimal("0")
    state_local_taxes: Decimal = Decimal("0")  # Subject to the SALT cap
    medical_expenses: Decimal = Decimal("0")
    other_deductions: Decimal = Decimal("0")


@dataclass(frozen=True)
class PersonIncome:
    """One partner's annual income and pre-tax deductions."""
    salary: Decimal = Decimal("0")
    interest_dividends: Decimal = Decimal("0")
    capital_gains_short_term: Decimal = Decimal("0")
    capital_gains_long_term: Decimal = Decimal("0")

    # Pre-tax (reduce AGI)
    retirement_401k: Decimal = Decimal("0")
    health_insurance: Decimal = Decimal("0")
    other_pre_tax_deductions: Decimal = Decimal("0")

    filing_status: FilingStatus = FilingStatus.SINGLE  # SINGLE or HOH when unmarried
    itemized_deductions: ItemizedDeductions | None = None

    @property
    def gross_income(self) -> Decimal:
        return (
            self.salary
            + self.interest_dividends
            + self.capital_gains_short_term
            + self.capital_gains_long_term
        )

    @property
    def pre_tax_deductions(self) -> Decimal:
        return self.retirement_401k + self.health_insurance + self.other_pre_tax_deductions


@dataclass(frozen=True)
class MarriageTaxInputs:
    person1: PersonIncome = field(default_factory=PersonIncome)
    person2: PersonIncome = field(default_factory=PersonIncome)
    dependents: int = 0
    use_standard_deduction: bool = True
    state_local_tax_rate: Decimal = Decimal("0")  # Percentage of AGI
