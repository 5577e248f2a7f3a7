"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fincalc.api.routes import (
    consolidation,
    debt_payoff,
    down_payment,
    fha,
    future_value,
    marriage_tax,
    mortgage,
    present_value,
    roi,
)
from fincalc.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title=settings.app_title,
    description="Mortgage, debt, tax and time-value-of-money calculators",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(mortgage.router)
app.include_router(fha.router)
app.include_router(debt_payoff.router)
app.include_router(consolidation.router)
app.include_router(down_payment.router)
app.include_router(marriage_tax.router)
app.include_router(present_value.router)
app.include_router(future_value.router)
app.include_router(roi.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
