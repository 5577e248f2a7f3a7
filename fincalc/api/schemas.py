"""Pydantic schemas for API request/response models."""

import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from fincalc.models.debt import PayoffStrategy
from fincalc.models.roi import PeriodType
from fincalc.models.tax import FilingStatus
from fincalc.models.tvm import PaymentFrequency, PaymentTiming


class ResultModel(BaseModel):
    """Response model that can be read straight off an engine dataclass."""
    model_config = ConfigDict(from_attributes=True)


# ---- Request schemas ----

class OneTimePaymentRequest(BaseModel):
    amount: Decimal
    month: int = Field(..., description="1-based payment number")


class ExtraPaymentsRequest(BaseModel):
    monthly_extra: Decimal = Decimal("0")
    monthly_extra_start_month: int = 1
    yearly_extra: Decimal = Decimal("0")
    yearly_extra_start_month: int = 1
    one_time_payments: list[OneTimePaymentRequest] = []


class MortgageRequest(BaseModel):
    home_price: Decimal
    down_payment: Decimal
    interest_rate: Decimal = Field(..., description="Annual rate, percent")
    loan_term_years: int = 30
    property_tax: Decimal = Field(Decimal("0"), description="Annual")
    home_insurance: Decimal = Field(Decimal("0"), description="Annual")
    pmi: Decimal = Field(Decimal("0"), description="Annual, charged below 20% down")
    hoa_fee: Decimal = Field(Decimal("0"), description="Monthly")
    other_costs: Decimal = Field(Decimal("0"), description="Monthly")
    start_date: datetime.date | None = None
    extra_payments: ExtraPaymentsRequest | None = None


class FHARequest(BaseModel):
    home_price: Decimal
    down_payment: Decimal
    interest_rate: Decimal
    loan_term_years: int = 30
    finance_ufmip: bool = True
    property_tax: Decimal = Decimal("0")
    home_insurance: Decimal = Decimal("0")
    hoa_fee: Decimal = Decimal("0")
    other_costs: Decimal = Decimal("0")
    start_date: datetime.date | None = None
    extra_payments: ExtraPaymentsRequest | None = None

    # Side-by-side conventional loan at the same rate and term
    conventional_down_payment_pct: Decimal | None = None


class DebtRequest(BaseModel):
    name: str
    balance: Decimal
    apr: Decimal
    minimum_payment: Decimal


class DebtPayoffRequest(BaseModel):
    debts: list[DebtRequest]
    extra_payment: Decimal = Decimal("0")
    strategy: PayoffStrategy = PayoffStrategy.AVALANCHE


class ExistingDebtRequest(BaseModel):
    name: str
    balance: Decimal
    monthly_payment: Decimal
    interest_rate: Decimal


class ConsolidationLoanRequest(BaseModel):
    loan_amount: Decimal
    interest_rate: Decimal
    loan_term_years: int
    loan_term_months: int = 0
    loan_fee_pct: Decimal = Decimal("0")


class ConsolidationRequest(BaseModel):
    debts: list[ExistingDebtRequest]
    loan: ConsolidationLoanRequest


class DownPaymentRequest(BaseModel):
    home_price: Decimal
    down_payment_pct: Decimal
    closing_cost_pct: Decimal = Decimal("3")
    interest_rate: Decimal
    loan_term_years: int = 30


class ItemizedDeductionsRequest(BaseModel):
    mortgage_interest: Decimal = Decimal("0")
    charitable_donations: Decimal = Decimal("0")
    state_local_taxes: Decimal = Decimal("0")
    medical_expenses: Decimal = Decimal("0")
    other_deductions: Decimal = Decimal("0")


class PersonIncomeRequest(BaseModel):
    salary: Decimal = Decimal("0")
    interest_dividends: Decimal = Decimal("0")
    capital_gains_short_term: Decimal = Decimal("0")
    capital_gains_long_term: Decimal = Decimal("0")
    retirement_401k: Decimal = Decimal("0")
    health_insurance: Decimal = Decimal("0")
    other_pre_tax_deductions: Decimal = Decimal("0")
    filing_status: FilingStatus = FilingStatus.SINGLE
    itemized_deductions: ItemizedDeductionsRequest | None = None


class MarriageTaxRequest(BaseModel):
    person1: PersonIncomeRequest
    person2: PersonIncomeRequest
    dependents: int = 0
    use_standard_deduction: bool = True
    state_local_tax_rate: Decimal = Decimal("0")


class PresentValueRequest(BaseModel):
    periods: int
    interest_rate: Decimal
    future_value: Decimal = Decimal("0")
    periodic_payment: Decimal = Decimal("0")
    payment_timing: PaymentTiming = PaymentTiming.END
    growth_rate: Decimal = Decimal("0")
    payment_frequency: PaymentFrequency = PaymentFrequency.ANNUAL


class FutureValueRequest(BaseModel):
    periods: int
    interest_rate: Decimal
    present_value: Decimal = Decimal("0")
    periodic_payment: Decimal = Decimal("0")
    payment_timing: PaymentTiming = PaymentTiming.END
    growth_rate: Decimal = Decimal("0")
    payment_frequency: PaymentFrequency = PaymentFrequency.ANNUAL


class InvestmentScenarioRequest(BaseModel):
    name: str
    initial_investment: Decimal
    final_value: Decimal
    period: Decimal
    period_type: PeriodType = PeriodType.YEARS
    additional_costs: Decimal = Decimal("0")
    additional_gains: Decimal = Decimal("0")


class ROIRequest(BaseModel):
    initial_investment: Decimal
    final_value: Decimal
    investment_period: Decimal
    period_type: PeriodType = PeriodType.YEARS
    additional_costs: Decimal = Decimal("0")
    additional_gains: Decimal = Decimal("0")
    inflation_rate: Decimal | None = None
    projection_years: int = 0
    scenarios: list[InvestmentScenarioRequest] = []


# ---- Response schemas ----

class ScheduleRowResponse(ResultModel):
    month: int
    date: datetime.date
    payment: Decimal
    principal: Decimal
    interest: Decimal
    extra_payment: Decimal
    insurance: Decimal
    balance: Decimal
    cumulative_principal: Decimal
    cumulative_interest: Decimal
    cumulative_insurance: Decimal


class YearlySummaryResponse(BaseModel):
    year: int
    principal: Decimal
    interest: Decimal
    extra: Decimal
    insurance: Decimal
    debt_service: Decimal
    ending_balance: Decimal


class MonthlyBreakdownResponse(ResultModel):
    principal_and_interest: Decimal
    property_tax: Decimal
    home_insurance: Decimal
    pmi: Decimal
    hoa_fee: Decimal
    other_costs: Decimal
    total_monthly: Decimal


class MortgageTotalsResponse(ResultModel):
    total_mortgage_payment: Decimal
    total_interest: Decimal
    total_property_tax: Decimal
    total_home_insurance: Decimal
    total_pmi: Decimal
    total_hoa: Decimal
    total_other_costs: Decimal
    total_of_all_payments: Decimal


class MortgageResponse(BaseModel):
    loan_amount: Decimal
    monthly_payment: MonthlyBreakdownResponse
    totals: MortgageTotalsResponse
    payoff_date: datetime.date
    payoff_time: str
    months: int
    pmi_removal_month: int | None = None
    schedule: list[ScheduleRowResponse]
    yearly: list[YearlySummaryResponse]


class FHALoanDetailsResponse(ResultModel):
    base_loan_amount: Decimal
    ufmip_amount: Decimal
    total_loan_amount: Decimal
    ltv: Decimal
    annual_mip_rate: Decimal
    monthly_mip_amount: Decimal
    mip_duration: int | None = None


class FHAMonthlyBreakdownResponse(ResultModel):
    principal_and_interest: Decimal
    monthly_mip: Decimal
    property_tax: Decimal
    home_insurance: Decimal
    hoa_fee: Decimal
    other_costs: Decimal
    total_monthly: Decimal


class FHATotalsResponse(ResultModel):
    total_principal_and_interest: Decimal
    total_interest: Decimal
    total_mip: Decimal
    total_property_tax: Decimal
    total_home_insurance: Decimal
    total_hoa: Decimal
    total_other_costs: Decimal
    total_of_all_payments: Decimal


class ConventionalComparisonResponse(ResultModel):
    loan_amount: Decimal
    monthly_payment: Decimal
    total_interest: Decimal
    total_payment: Decimal


class FHAResponse(BaseModel):
    loan_details: FHALoanDetailsResponse
    monthly_payment: FHAMonthlyBreakdownResponse
    totals: FHATotalsResponse
    payoff_date: datetime.date
    payoff_time: str
    months: int
    schedule: list[ScheduleRowResponse]
    yearly: list[YearlySummaryResponse]
    conventional: ConventionalComparisonResponse | None = None


class MonthlyPayoffEntryResponse(ResultModel):
    month: int
    monthly_payment: Decimal
    payments: dict[str, Decimal]
    remaining_balances: dict[str, Decimal]
    interest_paid: dict[str, Decimal]
    principal_paid: dict[str, Decimal]
    debts_paid_off: list[str]


class PayoffSavingsResponse(ResultModel):
    months_saved: int
    interest_saved: Decimal
    total_saved: Decimal


class DebtPayoffResponse(BaseModel):
    strategy: PayoffStrategy
    total_months: int
    payoff_time: str
    total_amount_paid: Decimal
    total_interest_paid: Decimal
    monthly_payment: Decimal
    debt_payoff_order: list[str]
    savings_vs_minimum: PayoffSavingsResponse
    hit_month_cap: bool
    payment_schedule: list[MonthlyPayoffEntryResponse]


class ExistingDebtSummaryResponse(ResultModel):
    total_balance: Decimal
    total_monthly_payment: Decimal
    weighted_average_rate: Decimal
    total_interest: Decimal
    payoff_months: int


class ConsolidationSummaryResponse(ResultModel):
    monthly_payment: Decimal
    total_interest: Decimal
    payoff_months: int
    total_cost: Decimal
    real_apr: Decimal
    loan_fee: Decimal


class ConsolidationSavingsResponse(ResultModel):
    monthly_payment: Decimal
    total_interest: Decimal
    total_cost: Decimal
    time_months: int


class ConsolidationResponse(ResultModel):
    existing_debts: ExistingDebtSummaryResponse
    consolidated_loan: ConsolidationSummaryResponse
    savings: ConsolidationSavingsResponse
    is_worthwhile: bool
    recommendation: str


class DownPaymentCalculationResponse(ResultModel):
    home_price: Decimal
    down_payment: Decimal
    down_payment_pct: Decimal
    loan_amount: Decimal
    closing_costs: Decimal
    total_cash_needed: Decimal
    monthly_payment: Decimal
    requires_pmi: bool


class DownPaymentSavingsResponse(ResultModel):
    monthly_savings: Decimal
    total_loan_savings: Decimal
    additional_down_payment: Decimal
    pmi_avoided: bool


class DownPaymentResponse(BaseModel):
    selected: DownPaymentCalculationResponse
    scenarios: list[DownPaymentCalculationResponse]
    savings_at_twenty_percent: DownPaymentSavingsResponse | None = None


class TaxCalculationResponse(ResultModel):
    filing_status: FilingStatus
    gross_income: Decimal
    adjusted_gross_income: Decimal
    deduction: Decimal
    taxable_income: Decimal
    ordinary_income: Decimal
    capital_gains_income: Decimal
    federal_tax: Decimal
    capital_gains_tax: Decimal
    total_federal_tax: Decimal
    effective_tax_rate: Decimal
    marginal_rate: Decimal
    child_tax_credit: Decimal
    final_tax: Decimal
    state_local_tax: Decimal
    total_tax: Decimal


class MarriageTaxResponse(ResultModel):
    person1: TaxCalculationResponse
    person2: TaxCalculationResponse
    separate_total_tax: Decimal
    married_filing_jointly: TaxCalculationResponse
    marriage_penalty_or_bonus: Decimal
    is_penalty: bool
    percentage_change: Decimal
    total_household_income: Decimal
    effective_tax_rate_single: Decimal
    effective_tax_rate_married: Decimal
    recommendation: str


class PVPeriodResponse(BaseModel):
    period: int
    label: str
    payment: Decimal
    present_value: Decimal
    cumulative_pv: Decimal
    discount_factor: Decimal


class PresentValueResponse(BaseModel):
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
    periodic_rate: Decimal
    effective_annual_rate: Decimal
    payment_frequency: PaymentFrequency
    is_growing_annuity: bool
    growth_rate: Decimal | None = None
    total_future_payments: Decimal | None = None
    future_value_comparison: Decimal
    period_breakdown: list[PVPeriodResponse]


class FVPeriodResponse(BaseModel):
    period: int
    label: str
    payment: Decimal
    beginning_balance: Decimal
    interest: Decimal
    ending_balance: Decimal
    contribution: Decimal
    cumulative_interest: Decimal


class FutureValueResponse(BaseModel):
    total_future_value: Decimal
    fv_of_lump_sum: Decimal
    fv_of_annuity: Decimal
    present_value: Decimal
    periodic_payment: Decimal
    total_contributions: Decimal
    total_interest: Decimal
    interest_rate: Decimal
    periodic_rate: Decimal
    effective_annual_rate: Decimal
    number_of_periods: int
    total_payments: Decimal
    payment_timing: PaymentTiming
    payment_frequency: PaymentFrequency
    is_growing_annuity: bool
    growth_rate: Decimal
    total_future_payments: Decimal | None = None
    compound_factor: Decimal
    period_breakdown: list[FVPeriodResponse]


class GrowthProjectionResponse(ResultModel):
    year: int
    projected_value: Decimal
    projected_roi: Decimal
    cumulative_gain: Decimal


class ScenarioComparisonResponse(ResultModel):
    scenario: str
    roi: Decimal | None = None
    annualized_roi: Decimal | None = None
    net_profit: Decimal
    rank: int


class ROIResponse(BaseModel):
    roi: Decimal | None = None
    annualized_roi: Decimal | None = None
    total_return: Decimal
    net_profit: Decimal
    total_invested: Decimal
    total_gain: Decimal
    effective_period_years: Decimal
    period_label: str
    monthly_growth_rate: Decimal | None = None
    daily_growth_rate: Decimal | None = None
    real_roi: Decimal | None = None
    projections: list[GrowthProjectionResponse] = []
    comparison: list[ScenarioComparisonResponse] = []
