"""Present value route."""

from fastapi import APIRouter

from fincalc.api.errors import raise_for_errors
from fincalc.api.schemas import PresentValueRequest, PresentValueResponse, PVPeriodResponse
from fincalc.engine.present_value import calculate_present_value, validate_pv_inputs
from fincalc.formatting import format_period_label
from fincalc.models.tvm import PVInputs

router = APIRouter(prefix="/api/v1", tags=["time-value"])


@router.post("/present-value", response_model=PresentValueResponse)
async def present_value(req: PresentValueRequest):
    inputs = PVInputs(**req.model_dump())
    raise_for_errors("present-value", validate_pv_inputs(inputs))

    r = calculate_present_value(inputs)
    return PresentValueResponse(
        total_present_value=r.total_present_value,
        pv_of_lump_sum=r.pv_of_lump_sum,
        pv_of_annuity=r.pv_of_annuity,
        future_value=r.future_value,
        discount_factor=r.discount_factor,
        discount_amount=r.discount_amount,
        discount_percentage=r.discount_percentage,
        periodic_payment=r.periodic_payment,
        number_of_periods=r.number_of_periods,
        total_payments=r.total_payments,
        annuity_discount_amount=r.annuity_discount_amount,
        payment_timing=r.payment_timing,
        interest_rate=r.interest_rate,
        periodic_rate=r.periodic_rate,
        effective_annual_rate=r.effective_annual_rate,
        payment_frequency=r.payment_frequency,
        is_growing_annuity=r.is_growing_annuity,
        growth_rate=r.growth_rate,
        total_future_payments=r.total_future_payments,
        future_value_comparison=r.future_value_comparison,
        period_breakdown=[
            PVPeriodResponse(
                period=p.period,
                label=format_period_label(p.period, r.payment_frequency),
                payment=p.payment,
                present_value=p.present_value,
                cumulative_pv=p.cumulative_pv,
                discount_factor=p.discount_factor,
            )
            for p in r.period_breakdown
        ],
    )
