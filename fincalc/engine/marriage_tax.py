"""Marriage tax penalty / bonus: two single (or HoH) returns vs. one joint return.

2025 federal brackets, standard deductions, long-term capital gains brackets,
child tax credit and the SALT cap. State and local tax is a flat rate on AGI.

Pure functions: dataclasses in, dataclasses out. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from fincalc.formatting import format_currency
from fincalc.models.tax import FilingStatus, ItemizedDeductions, MarriageTaxInputs, PersonIncome

TWO_PLACES = Decimal("0.01")


@dataclass(frozen=True)
class TaxBracket:
    lower: Decimal
    upper: Decimal | None  # None = no ceiling
    rate: Decimal


def _brackets(*rows: tuple[str, str | None, str]) -> tuple[TaxBracket, ...]:
    return tuple(
        TaxBracket(Decimal(lo), Decimal(hi) if hi is not None else None, Decimal(rate))
        for lo, hi, rate in rows
    )


TAX_BRACKETS_2025 = {
    FilingStatus.SINGLE: _brackets(
        ("0", "11925", "0.10"),
        ("11925", "48475", "0.12"),
        ("48475", "105700", "0.22"),
        ("105700", "201775", "0.24"),
        ("201775", "256225", "0.32"),
        ("256225", "626350", "0.35"),
        ("626350", None, "0.37"),
    ),
    FilingStatus.MFJ: _brackets(
        ("0", "24800", "0.10"),
        ("24800", "100800", "0.12"),
        ("100800", "211400", "0.22"),
        ("211400", "403550", "0.24"),
        ("403550", "512450", "0.32"),
        ("512450", "751600", "0.35"),
        ("751600", None, "0.37"),
    ),
    FilingStatus.HOH: _brackets(
        ("0", "17450", "0.10"),
        ("17450", "65450", "0.12"),
        ("65450", "105700", "0.22"),
        ("105700", "201775", "0.24"),
        ("201775", "256225", "0.32"),
        ("256225", "626350", "0.35"),
        ("626350", None, "0.37"),
    ),
}

STANDARD_DEDUCTION_2025 = {
    FilingStatus.SINGLE: Decimal("15750"),
    FilingStatus.MFJ: Decimal("31500"),
    FilingStatus.HOH: Decimal("23850"),
}

# Long-term capital gains; unmarried filers use the single table
CAPITAL_GAINS_BRACKETS_2025 = {
    FilingStatus.SINGLE: _brackets(
        ("0", "48350", "0"),
        ("48350", "533400", "0.15"),
        ("533400", None, "0.20"),
    ),
    FilingStatus.MFJ: _brackets(
        ("0", "96700", "0"),
        ("96700", "600050", "0.15"),
        ("600050", None, "0.20"),
    ),
}

CHILD_TAX_CREDIT_2025 = Decimal("2000")
CHILD_TAX_CREDIT_PHASEOUT = {
    FilingStatus.SINGLE: Decimal("200000"),
    FilingStatus.HOH: Decimal("200000"),
    FilingStatus.MFJ: Decimal("400000"),
}
CHILD_TAX_CREDIT_REDUCTION_PER_1000 = Decimal("50")

SALT_CAP = Decimal("10000")
MAX_401K_CONTRIBUTION = Decimal("30000")
SIGNIFICANT_DIFFERENCE = Decimal("1000")


@dataclass(frozen=True)
class TaxCalculation:
    filing_status: FilingStatus
    gross_income: Decimal
    adjusted_gross_income: Decimal
    deduction: Decimal
    taxable_income: Decimal
    ordinary_income: Decimal
    capital_gains_income: Decimal
    federal_tax: Decimal  # Ordinary income tax
    capital_gains_tax: Decimal
    total_federal_tax: Decimal
    effective_tax_rate: Decimal  # Percent of AGI
    marginal_rate: Decimal  # Percent
    child_tax_credit: Decimal
    final_tax: Decimal  # Federal, after credits
    state_local_tax: Decimal
    total_tax: Decimal


@dataclass(frozen=True)
class MarriageTaxResults:
    person1: TaxCalculation
    person2: TaxCalculation
    separate_total_tax: Decimal
    married_filing_jointly: TaxCalculation
    marriage_penalty_or_bonus: Decimal  # Positive = penalty, negative = bonus
    percentage_change: Decimal
    total_household_income: Decimal
    effective_tax_rate_single: Decimal
    effective_tax_rate_married: Decimal
    recommendation: str

    @property
    def is_penalty(self) -> bool:
        return self.marriage_penalty_or_bonus > 0


def _cents(value: Decimal) -> Decimal:
    return value.quantize(TWO_PLACES, ROUND_HALF_UP)


def progressive_tax(taxable_income: Decimal, brackets: tuple[TaxBracket, ...]) -> Decimal:
    """Tax on ordinary income, bracket by bracket."""
    tax = Decimal("0")
    for bracket in brackets:
        if taxable_income <= bracket.lower:
            break
        top = taxable_income if bracket.upper is None else min(taxable_income, bracket.upper)
        tax += (top - bracket.lower) * bracket.rate
    return tax


def capital_gains_tax(
    capital_gains: Decimal,
    ordinary_income: Decimal,
    brackets: tuple[TaxBracket, ...],
) -> Decimal:
    """Flat LTCG rate picked by where gains stacked on ordinary income land."""
    if capital_gains <= 0:
        return Decimal("0")
    total_income = ordinary_income + capital_gains
    for bracket in brackets:
        if bracket.upper is None or total_income <= bracket.upper:
            return capital_gains * bracket.rate
    return capital_gains * brackets[-1].rate


def marginal_rate(taxable_income: Decimal, brackets: tuple[TaxBracket, ...]) -> Decimal:
    """Marginal ordinary rate as a percentage."""
    for bracket in brackets:
        if bracket.upper is None or taxable_income <= bracket.upper:
            return bracket.rate * 100
    return brackets[-1].rate * 100


def child_tax_credit(dependents: int, agi: Decimal, status: FilingStatus) -> Decimal:
    """$2,000 per child, reduced $50 per full $1,000 of AGI over the phase-out."""
    if dependents <= 0:
        return Decimal("0")
    base_credit = CHILD_TAX_CREDIT_2025 * dependents
    threshold = CHILD_TAX_CREDIT_PHASEOUT[status]
    if agi <= threshold:
        return base_credit
    reduction = ((agi - threshold) // 1000) * CHILD_TAX_CREDIT_REDUCTION_PER_1000
    return max(Decimal("0"), base_credit - reduction)


def itemized_deduction(deductions: ItemizedDeductions) -> Decimal:
    return (
        deductions.mortgage_interest
        + deductions.charitable_donations
        + min(deductions.state_local_taxes, SALT_CAP)
        + deductions.medical_expenses
        + deductions.other_deductions
    )


def _deduction(status: FilingStatus, use_standard: bool, itemized: Decimal) -> Decimal:
    standard = STANDARD_DEDUCTION_2025[status]
    if use_standard:
        return standard
    return max(itemized, standard)


def _tax_return(
    status: FilingStatus,
    gross_income: Decimal,
    pre_tax_deductions: Decimal,
    long_term_gains: Decimal,
    itemized: Decimal,
    dependents: int,
    use_standard_deduction: bool,
    state_local_tax_rate: Decimal,
) -> TaxCalculation:
    """Shared single/HoH/joint computation once incomes have been combined.

    Short-term gains are already part of gross income and so are taxed as
    ordinary income by the brackets.
    """
    agi = gross_income - pre_tax_deductions
    deduction = _deduction(status, use_standard_deduction, itemized)
    taxable = max(Decimal("0"), agi - deduction)
    ordinary = max(Decimal("0"), taxable - long_term_gains)

    brackets = TAX_BRACKETS_2025[status]
    cg_brackets = CAPITAL_GAINS_BRACKETS_2025[
        FilingStatus.MFJ if status is FilingStatus.MFJ else FilingStatus.SINGLE
    ]

    federal = _cents(progressive_tax(ordinary, brackets))
    cg_tax = _cents(capital_gains_tax(long_term_gains, ordinary, cg_brackets))
    total_federal = federal + cg_tax
    credit = child_tax_credit(dependents, agi, status)
    final_tax = max(Decimal("0"), total_federal - credit)
    state_local = _cents(agi * state_local_tax_rate / 100)

    effective = Decimal("0")
    if agi > 0:
        effective = final_tax / agi * 100

    return TaxCalculation(
        filing_status=status,
        gross_income=gross_income,
        adjusted_gross_income=agi,
        deduction=deduction,
        taxable_income=taxable,
        ordinary_income=ordinary,
        capital_gains_income=long_term_gains,
        federal_tax=federal,
        capital_gains_tax=cg_tax,
        total_federal_tax=total_federal,
        effective_tax_rate=effective,
        marginal_rate=marginal_rate(ordinary, brackets),
        child_tax_credit=credit,
        final_tax=final_tax,
        state_local_tax=state_local,
        total_tax=final_tax + state_local,
    )


def calculate_person_tax(
    person: PersonIncome,
    dependents: int,
    use_standard_deduction: bool,
    state_local_tax_rate: Decimal,
) -> TaxCalculation:
    """Tax for one unmarried filer (single, or head of household)."""
    status = FilingStatus.HOH if person.filing_status is FilingStatus.HOH else FilingStatus.SINGLE
    itemized = Decimal("0")
    if person.itemized_deductions is not None:
        itemized = itemized_deduction(person.itemized_deductions)

    return _tax_return(
        status=status,
        gross_income=person.gross_income,
        pre_tax_deductions=person.pre_tax_deductions,
        long_term_gains=person.capital_gains_long_term,
        itemized=itemized,
        dependents=dependents,
        use_standard_deduction=use_standard_deduction,
        state_local_tax_rate=state_local_tax_rate,
    )


def calculate_joint_tax(inputs: MarriageTaxInputs) -> TaxCalculation:
    """Tax for the couple filing jointly with combined income and deductions."""
    p1, p2 = inputs.person1, inputs.person2
    itemized = Decimal("0")
    claimed = [p.itemized_deductions for p in (p1, p2) if p.itemized_deductions is not None]
    if claimed:
        # One SALT cap per return, not per spouse
        itemized = itemized_deduction(ItemizedDeductions(
            mortgage_interest=sum((d.mortgage_interest for d in claimed), Decimal("0")),
            charitable_donations=sum((d.charitable_donations for d in claimed), Decimal("0")),
            state_local_taxes=sum((d.state_local_taxes for d in claimed), Decimal("0")),
            medical_expenses=sum((d.medical_expenses for d in claimed), Decimal("0")),
            other_deductions=sum((d.other_deductions for d in claimed), Decimal("0")),
        ))

    return _tax_return(
        status=FilingStatus.MFJ,
        gross_income=p1.gross_income + p2.gross_income,
        pre_tax_deductions=p1.pre_tax_deductions + p2.pre_tax_deductions,
        long_term_gains=p1.capital_gains_long_term + p2.capital_gains_long_term,
        itemized=itemized,
        dependents=inputs.dependents,
        use_standard_deduction=inputs.use_standard_deduction,
        state_local_tax_rate=inputs.state_local_tax_rate,
    )


def _recommendation(difference: Decimal, percentage_change: Decimal) -> str:
    if difference < -SIGNIFICANT_DIFFERENCE:
        return (
            f"Marriage provides a significant tax benefit of "
            f"{format_currency(abs(difference), decimals=0)} per year. Filing jointly "
            f"would reduce your combined tax liability by {abs(percentage_change):.1f}%."
        )
    if difference > SIGNIFICANT_DIFFERENCE:
        return (
            f"Marriage results in a tax penalty of {format_currency(difference, decimals=0)} "
            f"per year. This is common for dual high-income earners. Consider maximizing "
            f"pre-tax deductions to reduce the impact."
        )
    label = "penalty" if difference > 0 else "bonus"
    return (
        f"Marriage has minimal tax impact ({format_currency(abs(difference), decimals=0)} "
        f"{label}). Your tax situation would remain essentially the same."
    )


def calculate_marriage_tax(inputs: MarriageTaxInputs) -> MarriageTaxResults:
    """Compare two separate unmarried returns with one joint return.

    Dependents are claimed by person 1 when they file as head of household,
    otherwise by person 2 when they do; nobody claims them on two single returns.
    """
    p1_hoh = inputs.person1.filing_status is FilingStatus.HOH
    p2_hoh = inputs.person2.filing_status is FilingStatus.HOH

    person1 = calculate_person_tax(
        inputs.person1,
        inputs.dependents if p1_hoh else 0,
        inputs.use_standard_deduction,
        inputs.state_local_tax_rate,
    )
    person2 = calculate_person_tax(
        inputs.person2,
        inputs.dependents if p2_hoh and not p1_hoh else 0,
        inputs.use_standard_deduction,
        inputs.state_local_tax_rate,
    )
    joint = calculate_joint_tax(inputs)

    separate_total = person1.total_tax + person2.total_tax
    difference = joint.total_tax - separate_total
    percentage_change = Decimal("0")
    if separate_total > 0:
        percentage_change = difference / separate_total * 100

    household_income = person1.gross_income + person2.gross_income
    effective_single = Decimal("0")
    effective_married = Decimal("0")
    if household_income > 0:
        effective_single = separate_total / household_income * 100
        effective_married = joint.total_tax / household_income * 100

    return MarriageTaxResults(
        person1=person1,
        person2=person2,
        separate_total_tax=separate_total,
        married_filing_jointly=joint,
        marriage_penalty_or_bonus=difference,
        percentage_change=percentage_change,
        total_household_income=household_income,
        effective_tax_rate_single=effective_single,
        effective_tax_rate_married=effective_married,
        recommendation=_recommendation(difference, percentage_change),
    )


def validate_marriage_tax_inputs(inputs: MarriageTaxInputs) -> list[str]:
    errors: list[str] = []

    for label, person in (("Person 1", inputs.person1), ("Person 2", inputs.person2)):
        if person.salary < 0:
            errors.append(f"{label} salary cannot be negative")
        if person.retirement_401k > MAX_401K_CONTRIBUTION:
            errors.append(f"{label} 401(k) contribution exceeds IRS limit")
        if person.filing_status is FilingStatus.MFJ:
            errors.append(f"{label} must file as single or head of household when unmarried")

    if inputs.dependents < 0:
        errors.append("Number of dependents cannot be negative")
    if inputs.dependents > 10:
        errors.append("Please verify number of dependents")

    if inputs.state_local_tax_rate < 0 or inputs.state_local_tax_rate > 20:
        errors.append("State/local tax rate must be between 0% and 20%")

    return errors
