"""Future value route."""

from fastapi import APIRouter

from fincalc.api.errors import raise_for_errors
from fincalc.api.schemas import FutureValueRequest, FutureValueResponse, FVPeriodResponse
from fincalc.engine.future_value import calculate_future_value, validate_fv_inputs
from fincalc.formatting import format_period_label
from fincalc.models.tvm import FVInputs

router = APIRouter(prefix="/api/v1", tags=["time-value"])


@router.post("/future-value", response_model=FutureValueResponse)
async def future_value(req: FutureValueRequest):
    inputs = FVInputs(**req.model_dump())
    raise_for_errors("future-value", validate_fv_inputs(inputs))

    r = calculate_future_value(inputs)
    return FutureValueResponse(
        total_future_value=r.total_future_value,
        fv_of_lump_sum=r.fv_of_lump_sum,
        fv_of_annuity=r.fv_of_annuity,
        present_value=r.present_value,
        periodic_payment=r.periodic_payment,
        total_contributions=r.total_contributions,
        total_interest=r.total_interest,
        interest_rate=r.interest_rate,
        periodic_rate=r.periodic_rate,
        effective_annual_rate=r.effective_annual_rate,
        number_of_periods=r.number_of_periods,
        total_payments=r.total_payments,
        payment_timing=r.payment_timing,
        payment_frequency=r.payment_frequency,
        is_growing_annuity=r.is_growing_annuity,
        growth_rate=r.growth_rate,
        total_future_payments=r.total_future_payments,
        compound_factor=r.compound_factor,
        period_breakdown=[
            FVPeriodResponse(
                period=p.period,
                label=format_period_label(p.period, r.payment_frequency),
                payment=p.payment,
                beginning_balance=p.beginning_balance,
                interest=p.interest,
                ending_balance=p.ending_balance,
                contribution=p.contribution,
                cumulative_interest=p.cumulative_interest,
            )
            for p in r.period_breakdown
        ],
    )
