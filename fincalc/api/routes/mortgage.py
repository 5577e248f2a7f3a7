"""Conventional mortgage route."""

from fastapi import APIRouter

from fincalc.api.builders import build_extra_payments, schedule_rows, yearly_rows
from fincalc.api.errors import raise_for_errors
from fincalc.api.schemas import (
    MonthlyBreakdownResponse,
    MortgageRequest,
    MortgageResponse,
    MortgageTotalsResponse,
)
from fincalc.engine.mortgage import calculate_mortgage, validate_mortgage_inputs
from fincalc.formatting import format_months
from fincalc.models.loan import LoanInputs

router = APIRouter(prefix="/api/v1", tags=["mortgage"])


@router.post("/mortgage", response_model=MortgageResponse)
async def mortgage(req: MortgageRequest):
    """Monthly cost breakdown, totals, PMI removal and the full schedule."""
    inputs = LoanInputs(
        home_price=req.home_price,
        down_payment=req.down_payment,
        interest_rate=req.interest_rate,
        loan_term_years=req.loan_term_years,
        property_tax=req.property_tax,
        home_insurance=req.home_insurance,
        pmi=req.pmi,
        hoa_fee=req.hoa_fee,
        other_costs=req.other_costs,
        start_date=req.start_date,
    )
    extra = build_extra_payments(req.extra_payments)
    raise_for_errors("mortgage", validate_mortgage_inputs(inputs, extra))

    result = calculate_mortgage(inputs, extra)
    return MortgageResponse(
        loan_amount=result.loan_amount,
        monthly_payment=MonthlyBreakdownResponse.model_validate(result.monthly_payment),
        totals=MortgageTotalsResponse.model_validate(result.totals),
        payoff_date=result.payoff_date,
        payoff_time=format_months(result.schedule.months),
        months=result.schedule.months,
        pmi_removal_month=result.pmi_removal_month,
        schedule=schedule_rows(result.schedule),
        yearly=yearly_rows(result.schedule),
    )
