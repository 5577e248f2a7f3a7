from decimal import Decimal

from fincalc.engine.marriage_tax import (
    TAX_BRACKETS_2025,
    calculate_joint_tax,
    calculate_marriage_tax,
    calculate_person_tax,
    capital_gains_tax,
    CAPITAL_GAINS_BRACKETS_2025,
    child_tax_credit,
    itemized_deduction,
    marginal_rate,
    progressive_tax,
    validate_marriage_tax_inputs,
)
from fincalc.models.tax import FilingStatus, ItemizedDeductions, MarriageTaxInputs, PersonIncome

SINGLE = TAX_BRACKETS_2025[FilingStatus.SINGLE]


def _tax(person, dependents=0):
    return calculate_person_tax(person, dependents, True, Decimal("0"))


class TestBrackets:
    def test_progressive_tax(self):
        # 1192.50 + 4386.00 + 335.50
        assert progressive_tax(Decimal("50000"), SINGLE) == Decimal("5914.00")

    def test_zero_income(self):
        assert progressive_tax(Decimal("0"), SINGLE) == 0

    def test_marginal_rate(self):
        assert marginal_rate(Decimal("44250"), SINGLE) == Decimal("12")
        assert marginal_rate(Decimal("1000000"), SINGLE) == Decimal("37")

    def test_capital_gains_rate_by_stacked_income(self):
        brackets = CAPITAL_GAINS_BRACKETS_2025[FilingStatus.SINGLE]
        assert capital_gains_tax(Decimal("10000"), Decimal("30000"), brackets) == 0
        assert capital_gains_tax(Decimal("10000"), Decimal("44250"), brackets) == Decimal("1500")
        assert capital_gains_tax(Decimal("10000"), Decimal("600000"), brackets) == Decimal("2000")


class TestChildTaxCredit:
    def test_full_credit(self):
        assert child_tax_credit(2, Decimal("100000"), FilingStatus.SINGLE) == Decimal("4000")

    def test_phase_out_per_full_thousand(self):
        # 10 full thousands over 200K -> $500 reduction
        assert child_tax_credit(2, Decimal("210500"), FilingStatus.SINGLE) == Decimal("3500")

    def test_joint_threshold(self):
        assert child_tax_credit(1, Decimal("399000"), FilingStatus.MFJ) == Decimal("2000")

    def test_never_negative(self):
        assert child_tax_credit(1, Decimal("900000"), FilingStatus.SINGLE) == 0

    def test_no_dependents(self):
        assert child_tax_credit(0, Decimal("50000"), FilingStatus.SINGLE) == 0


class TestPersonTax:
    def test_single_salary(self):
        t = _tax(PersonIncome(salary=Decimal("60000")))
        assert t.taxable_income == Decimal("44250")
        assert t.federal_tax == Decimal("5071.50")
        assert t.final_tax == Decimal("5071.50")
        assert t.marginal_rate == Decimal("12")

    def test_long_term_gains_taxed_separately(self):
        t = _tax(PersonIncome(salary=Decimal("60000"), capital_gains_long_term=Decimal("10000")))
        assert t.ordinary_income == Decimal("44250")
        assert t.federal_tax == Decimal("5071.50")
        assert t.capital_gains_tax == Decimal("1500.00")
        assert t.total_federal_tax == Decimal("6571.50")

    def test_short_term_gains_taxed_once(self):
        with_gains = _tax(PersonIncome(salary=Decimal("50000"), capital_gains_short_term=Decimal("10000")))
        salary_only = _tax(PersonIncome(salary=Decimal("60000")))
        assert with_gains.final_tax == salary_only.final_tax

    def test_pre_tax_deductions_reduce_agi(self):
        t = _tax(PersonIncome(salary=Decimal("80000"), retirement_401k=Decimal("20000")))
        assert t.adjusted_gross_income == Decimal("60000")
        assert t.federal_tax == Decimal("5071.50")

    def test_hoh_with_dependents(self):
        person = PersonIncome(salary=Decimal("60000"), filing_status=FilingStatus.HOH)
        t = _tax(person, dependents=2)
        assert t.deduction == Decimal("23850")
        assert t.federal_tax == Decimal("3989.00")
        assert t.child_tax_credit == Decimal("4000")
        assert t.final_tax == 0

    def test_state_tax_on_agi(self):
        t = calculate_person_tax(PersonIncome(salary=Decimal("60000")), 0, True, Decimal("5"))
        assert t.state_local_tax == Decimal("3000.00")
        assert t.total_tax == Decimal("8071.50")


class TestItemized:
    def test_salt_cap(self):
        d = ItemizedDeductions(
            mortgage_interest=Decimal("12000"),
            state_local_taxes=Decimal("15000"),
        )
        assert itemized_deduction(d) == Decimal("22000")

    def test_larger_of_itemized_and_standard(self):
        big = ItemizedDeductions(mortgage_interest=Decimal("20000"))
        small = ItemizedDeductions(charitable_donations=Decimal("1000"))
        person = PersonIncome(salary=Decimal("100000"), itemized_deductions=big)
        assert calculate_person_tax(person, 0, False, Decimal("0")).deduction == Decimal("20000")
        person = PersonIncome(salary=Decimal("100000"), itemized_deductions=small)
        assert calculate_person_tax(person, 0, False, Decimal("0")).deduction == Decimal("15750")

    def test_standard_forced(self):
        big = ItemizedDeductions(mortgage_interest=Decimal("20000"))
        person = PersonIncome(salary=Decimal("100000"), itemized_deductions=big)
        assert calculate_person_tax(person, 0, True, Decimal("0")).deduction == Decimal("15750")

    def test_joint_return_caps_salt_once(self):
        spouse = PersonIncome(
            salary=Decimal("100000"),
            itemized_deductions=ItemizedDeductions(
                mortgage_interest=Decimal("12500"),
                state_local_taxes=Decimal("8000"),
            ),
        )
        inputs = MarriageTaxInputs(person1=spouse, person2=spouse, use_standard_deduction=False)
        # 25000 mortgage interest + 10000 SALT, not 16000
        assert calculate_joint_tax(inputs).deduction == Decimal("35000")


class TestMarriageTax:
    def test_single_earner_bonus(self):
        result = calculate_marriage_tax(MarriageTaxInputs(
            person1=PersonIncome(salary=Decimal("150000")),
            person2=PersonIncome(),
        ))
        assert result.person1.final_tax == Decimal("25020.00")
        assert result.person2.final_tax == 0
        assert result.married_filing_jointly.final_tax == Decimal("15494.00")
        assert result.marriage_penalty_or_bonus == Decimal("-9526.00")
        assert not result.is_penalty
        assert "significant tax benefit of $9,526" in result.recommendation

    def test_equal_earners_minimal(self):
        result = calculate_marriage_tax(MarriageTaxInputs(
            person1=PersonIncome(salary=Decimal("60000")),
            person2=PersonIncome(salary=Decimal("60000")),
        ))
        assert result.separate_total_tax == Decimal("10143.00")
        assert result.married_filing_jointly.final_tax == Decimal("10124.00")
        assert result.recommendation.startswith("Marriage has minimal tax impact ($19 bonus)")

    def test_high_earners_penalty(self):
        result = calculate_marriage_tax(MarriageTaxInputs(
            person1=PersonIncome(salary=Decimal("1000000")),
            person2=PersonIncome(salary=Decimal("1000000")),
        ))
        assert result.separate_total_tax == Decimal("641233.50")
        assert result.married_filing_jointly.final_tax == Decimal("650851.50")
        assert result.marriage_penalty_or_bonus == Decimal("9618.00")
        assert result.is_penalty
        assert "tax penalty of $9,618" in result.recommendation

    def test_household_income_and_rates(self):
        result = calculate_marriage_tax(MarriageTaxInputs(
            person1=PersonIncome(salary=Decimal("60000")),
            person2=PersonIncome(salary=Decimal("60000")),
        ))
        assert result.total_household_income == Decimal("120000")
        assert result.effective_tax_rate_married < result.effective_tax_rate_single

    def test_dependents_claimed_by_hoh_filer(self):
        result = calculate_marriage_tax(MarriageTaxInputs(
            person1=PersonIncome(salary=Decimal("60000")),
            person2=PersonIncome(salary=Decimal("60000"), filing_status=FilingStatus.HOH),
            dependents=1,
        ))
        assert result.person1.child_tax_credit == 0
        assert result.person2.child_tax_credit == Decimal("2000")
        assert result.married_filing_jointly.child_tax_credit == Decimal("2000")

    def test_no_income(self):
        result = calculate_marriage_tax(MarriageTaxInputs())
        assert result.separate_total_tax == 0
        assert result.percentage_change == 0
        assert result.effective_tax_rate_single == 0


class TestValidation:
    def test_valid(self):
        inputs = MarriageTaxInputs(person1=PersonIncome(salary=Decimal("60000")))
        assert validate_marriage_tax_inputs(inputs) == []

    def test_invalid(self):
        inputs = MarriageTaxInputs(
            person1=PersonIncome(salary=Decimal("-1"), retirement_401k=Decimal("40000")),
            person2=PersonIncome(filing_status=FilingStatus.MFJ),
            dependents=11,
            state_local_tax_rate=Decimal("25"),
        )
        errors = validate_marriage_tax_inputs(inputs)
        assert "Person 1 salary cannot be negative" in errors
        assert "Person 1 401(k) contribution exceeds IRS limit" in errors
        assert "Person 2 must file as single or head of household when unmarried" in errors
        assert "Please verify number of dependents" in errors
        assert "State/local tax rate must be between 0% and 20%" in errors
