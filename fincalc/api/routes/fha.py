"""FHA loan route."""

from fastapi import APIRouter

from fincalc.api.builders import build_extra_payments, schedule_rows, yearly_rows
from fincalc.api.errors import raise_for_errors
from fincalc.api.schemas import (
    ConventionalComparisonResponse,
    FHALoanDetailsResponse,
    FHAMonthlyBreakdownResponse,
    FHARequest,
    FHAResponse,
    FHATotalsResponse,
)
from fincalc.engine.fha import calculate_conventional_loan, calculate_fha_loan, validate_fha_inputs
from fincalc.formatting import format_months
from fincalc.models.loan import ExtraPaymentPlan, FHALoanInputs

router = APIRouter(prefix="/api/v1", tags=["fha"])


@router.post("/fha", response_model=FHAResponse)
async def fha_loan(req: FHARequest):
    """FHA loan with UFMIP and annual MIP, optionally against a conventional loan."""
    inputs = FHALoanInputs(
        home_price=req.home_price,
        down_payment=req.down_payment,
        interest_rate=req.interest_rate,
        loan_term_years=req.loan_term_years,
        finance_ufmip=req.finance_ufmip,
        property_tax=req.property_tax,
        home_insurance=req.home_insurance,
        hoa_fee=req.hoa_fee,
        other_costs=req.other_costs,
        start_date=req.start_date,
        extra_payments=build_extra_payments(req.extra_payments) or ExtraPaymentPlan(),
    )
    errors = validate_fha_inputs(inputs)
    pct = req.conventional_down_payment_pct
    if pct is not None and (pct < 0 or pct >= 100):
        errors.append("Conventional down payment must be at least 0% and less than 100%")
    raise_for_errors("fha", errors)

    result = calculate_fha_loan(inputs)

    conventional = None
    if pct is not None:
        conventional = ConventionalComparisonResponse.model_validate(
            calculate_conventional_loan(
                req.home_price, pct, req.loan_term_years, req.interest_rate
            )
        )

    return FHAResponse(
        loan_details=FHALoanDetailsResponse.model_validate(result.loan_details),
        monthly_payment=FHAMonthlyBreakdownResponse.model_validate(result.monthly_payment),
        totals=FHATotalsResponse.model_validate(result.totals),
        payoff_date=result.payoff_date,
        payoff_time=format_months(result.schedule.months),
        months=result.schedule.months,
        schedule=schedule_rows(result.schedule),
        yearly=yearly_rows(result.schedule),
        conventional=conventional,
    )
