"""Mortgage insurance rules: conventional PMI and FHA MIP.

FHA annual MIP (percent of base loan), 2024 schedule:

    Term > 15 years:
        base <= $726,200, LTV <= 95%: 0.50
        base <= $726,200, LTV >  95%: 0.55
        base >  $726,200, LTV <= 95%: 0.70
        base >  $726,200, LTV >  95%: 0.75

    Term <= 15 years:
        base <= $726,200, LTV <= 90%: 0.15
        base <= $726,200, LTV >  90%: 0.40
        base >  $726,200, LTV <= 78%: 0.15
        base >  $726,200, 78% < LTV <= 90%: 0.40
        base >  $726,200, LTV >  90%: 0.65

MIP is charged for 11 years when origination LTV <= 90%, otherwise for the
life of the loan. The 11-year rule applies to every term.

Pure functions. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from fincalc.engine.amortization import AmortizationSchedule, InsuranceCharge

TWO_PLACES = Decimal("0.01")

FHA_CONFORMING_LIMIT = Decimal("726200")
UFMIP_RATE = Decimal("0.0175")  # 1.75% upfront premium
MIP_DURATION_MONTHS = 132  # 11 years
MIP_LIFE_OF_LOAN_LTV = Decimal("90")
FHA_MIN_DOWN_PAYMENT_PCT = Decimal("3.5")

PMI_REQUIRED_BELOW_DOWN_PCT = Decimal("20")
PMI_REMOVAL_LTV = Decimal("0.78")  # Of original home price


# ---- Conventional PMI ----

def is_pmi_required(home_price: Decimal, down_payment: Decimal) -> bool:
    """PMI applies when the down payment is under 20% of the home price."""
    if home_price <= 0:
        return False
    return down_payment / home_price * 100 < PMI_REQUIRED_BELOW_DOWN_PCT


def pmi_removal_threshold(home_price: Decimal) -> Decimal:
    return home_price * PMI_REMOVAL_LTV


def pmi_removal_month(home_price: Decimal, schedule: AmortizationSchedule) -> int | None:
    """First payment number whose ending balance is at or below 78% of the home price."""
    threshold = pmi_removal_threshold(home_price)
    for row in schedule.rows:
        if row.balance <= threshold:
            return row.month
    return None


def monthly_pmi(annual_pmi: Decimal) -> Decimal:
    return (annual_pmi / 12).quantize(TWO_PLACES, ROUND_HALF_UP)


def pmi_charge(home_price: Decimal, annual_pmi: Decimal) -> InsuranceCharge:
    """Per-month PMI: charged while the opening balance is above the removal threshold."""
    threshold = pmi_removal_threshold(home_price)
    amount = monthly_pmi(annual_pmi)

    def charge(month: int, opening_balance: Decimal) -> Decimal:
        return amount if opening_balance > threshold else Decimal("0")

    return charge


# ---- FHA MIP ----

def base_loan_amount(home_price: Decimal, down_payment: Decimal) -> Decimal:
    return max(Decimal("0"), home_price - down_payment)


def loan_to_value(home_price: Decimal, down_payment: Decimal) -> Decimal:
    """LTV as a percentage of the home price."""
    if home_price <= 0:
        return Decimal("0")
    return base_loan_amount(home_price, down_payment) / home_price * 100


def calculate_ufmip(base_loan: Decimal) -> Decimal:
    """Upfront MIP: 1.75% of the base loan amount."""
    return (base_loan * UFMIP_RATE).quantize(TWO_PLACES, ROUND_HALF_UP)


def total_loan_amount(base_loan: Decimal, finance_ufmip: bool) -> Decimal:
    if finance_ufmip:
        return base_loan + calculate_ufmip(base_loan)
    return base_loan


def annual_mip_rate(base_loan: Decimal, ltv: Decimal, term_years: int) -> Decimal:
    """Annual MIP rate (percent) from loan size, LTV and term. See module docstring."""
    high_balance = base_loan > FHA_CONFORMING_LIMIT

    if term_years > 15:
        if not high_balance:
            return Decimal("0.55") if ltv > 95 else Decimal("0.50")
        return Decimal("0.75") if ltv > 95 else Decimal("0.70")

    if not high_balance:
        return Decimal("0.40") if ltv > 90 else Decimal("0.15")
    if ltv <= 78:
        return Decimal("0.15")
    if ltv <= 90:
        return Decimal("0.40")
    return Decimal("0.65")


def monthly_mip(base_loan: Decimal, annual_rate: Decimal) -> Decimal:
    """Monthly MIP on the base loan (UFMIP is never included)."""
    return (base_loan * annual_rate / 100 / 12).quantize(TWO_PLACES, ROUND_HALF_UP)


def mip_duration(ltv: Decimal) -> int | None:
    """Months MIP is charged; None means life of loan."""
    if ltv > MIP_LIFE_OF_LOAN_LTV:
        return None
    return MIP_DURATION_MONTHS


def mip_charge(monthly_amount: Decimal, duration_months: int | None) -> InsuranceCharge:
    """Fixed monthly MIP while within the MIP duration."""

    def charge(month: int, opening_balance: Decimal) -> Decimal:
        if duration_months is None or month <= duration_months:
            return monthly_amount
        return Decimal("0")

    return charge
