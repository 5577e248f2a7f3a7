"""Return on investment route."""

from fastapi import APIRouter

from fincalc.api.errors import raise_for_errors
from fincalc.api.schemas import (
    GrowthProjectionResponse,
    ROIRequest,
    ROIResponse,
    ScenarioComparisonResponse,
)
from fincalc.engine.roi import (
    MAX_PROJECTION_YEARS,
    calculate_roi,
    compare_scenarios,
    project_growth,
    real_roi,
    validate_roi_inputs,
)
from fincalc.formatting import format_period
from fincalc.models.roi import InvestmentScenario, ROIInputs

router = APIRouter(prefix="/api/v1", tags=["roi"])


@router.post("/roi", response_model=ROIResponse)
async def roi(req: ROIRequest):
    """ROI with optional inflation adjustment, growth projection and scenario ranking."""
    inputs = ROIInputs(
        initial_investment=req.initial_investment,
        final_value=req.final_value,
        investment_period=req.investment_period,
        period_type=req.period_type,
        additional_costs=req.additional_costs,
        additional_gains=req.additional_gains,
    )
    errors = validate_roi_inputs(inputs)
    if req.projection_years < 0:
        errors.append("Projection years cannot be negative")
    elif req.projection_years > MAX_PROJECTION_YEARS:
        errors.append(f"Projection years cannot exceed {MAX_PROJECTION_YEARS}")
    if req.inflation_rate is not None and req.inflation_rate <= -100:
        errors.append("Inflation rate must be greater than -100%")
    raise_for_errors("roi", errors)

    result = calculate_roi(inputs)

    real = None
    projections = []
    if result.annualized_roi is not None:
        if req.inflation_rate is not None:
            real = real_roi(result.annualized_roi, req.inflation_rate)
        projections = [
            GrowthProjectionResponse.model_validate(p)
            for p in project_growth(
                result.total_invested, result.annualized_roi, req.projection_years
            )
        ]

    scenarios = [InvestmentScenario(**s.model_dump()) for s in req.scenarios]
    comparison = [ScenarioComparisonResponse.model_validate(c) for c in compare_scenarios(scenarios)]

    return ROIResponse(
        roi=result.roi,
        annualized_roi=result.annualized_roi,
        total_return=result.total_return,
        net_profit=result.net_profit,
        total_invested=result.total_invested,
        total_gain=result.total_gain,
        effective_period_years=result.effective_period_years,
        period_label=format_period(req.investment_period, req.period_type),
        monthly_growth_rate=result.monthly_growth_rate,
        daily_growth_rate=result.daily_growth_rate,
        real_roi=real,
        projections=projections,
        comparison=comparison,
    )
