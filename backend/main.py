"""
FinWell - FastAPI Backend
=========================
HTTP API for the financial health scorer and the portfolio analyzer.

Both calculators are pure functions of the request body:
1. Inputs are coerced by the pydantic models (blank/invalid amounts -> 0)
2. Scoring and allocation math run locally in Python
3. Nothing is stored between requests
"""

import os
import logging
from datetime import datetime
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

# Local imports
from wealth_constants import (
    AssetClass,
    IDEAL_ALLOCATION,
    IDEAL_RANGES,
    ASSET_INFO,
    HEALTH_TIERS,
    HEALTH_FACTORS,
    TIER_INTERPRETATIONS,
    MIN_TOTAL_SCORE,
    HealthTier,
    get_reference_summary,
)
from models import (
    HealthInputs,
    PortfolioInputs,
    AllocationOutcome,
    HealthScoreResponse,
    ReportResponse,
)
from health_scorer import compute_health_scores
from allocation_analyzer import compute_allocation
from report_builder import (
    build_health_report,
    build_portfolio_report,
    HEALTH_REPORT_FILENAME,
    PORTFOLIO_REPORT_FILENAME,
)

# =============================================================================
# CONFIGURATION
# =============================================================================

LOG_LEVEL = os.getenv("FINWELL_LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("FINWELL_CORS_ORIGINS", "http://localhost:3000,http://localhost:5173").split(",")
    if origin.strip()
]

# Configure logging
logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
logger = logging.getLogger(__name__)


# =============================================================================
# APPLICATION SETUP
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("FinWell starting up...")
    yield
    logger.info("FinWell shutting down...")


app = FastAPI(
    title="FinWell",
    description="Financial health scoring and portfolio allocation API",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def analyze_or_reject(inputs: PortfolioInputs) -> AllocationOutcome:
    """Run the analysis, refusing to surface results for an empty portfolio."""
    outcome = compute_allocation(inputs)
    if not outcome.is_analyzable:
        raise HTTPException(
            status_code=400,
            detail="Insufficient data: enter at least one investment amount greater than zero"
        )
    return outcome


# =============================================================================
# API ENDPOINTS
# =============================================================================

@app.get("/")
async def root():
    """API health check."""
    return {
        "service": "FinWell",
        "version": "1.0.0",
        "status": "healthy",
    }


@app.get("/api/health")
async def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "components": {
            "health_scorer": "ready",
            "allocation_analyzer": "ready",
        }
    }


# --- FINANCIAL HEALTH ---

@app.post("/api/health-score", response_model=HealthScoreResponse)
async def score_health(inputs: HealthInputs):
    """
    Score a financial health snapshot.

    Returns the six factor scores, total, tier, and the coerced inputs
    (including the savings, emergency cover and debt ratios).
    """
    scores = compute_health_scores(inputs)
    logger.info(f"Health score calculated: {scores.total_score} ({scores.tier.value})")

    return HealthScoreResponse(
        inputs=inputs,
        scores=scores,
        total_score=scores.total_score,
        tier=scores.tier,
        interpretation=scores.interpretation,
    )


@app.post("/api/health-score/report", response_model=ReportResponse)
async def health_report(inputs: HealthInputs):
    """Plain-text financial health report."""
    scores = compute_health_scores(inputs)
    return ReportResponse(
        filename=HEALTH_REPORT_FILENAME,
        content=build_health_report(inputs, scores),
    )


# --- PORTFOLIO ---

@app.post("/api/portfolio/analyze", response_model=AllocationOutcome)
async def analyze_portfolio(inputs: PortfolioInputs):
    """
    Compare holdings against the ideal allocation.

    An all-zero portfolio is rejected with 400: there is nothing to analyze.
    """
    outcome = analyze_or_reject(inputs)
    logger.info(
        f"Portfolio analyzed: {outcome.risk_profile.value}, "
        f"{len(outcome.recommendations)} recommendation(s)"
    )
    return outcome


@app.post("/api/portfolio/report", response_model=ReportResponse)
async def portfolio_report(inputs: PortfolioInputs):
    """Plain-text portfolio analysis report."""
    outcome = analyze_or_reject(inputs)
    return ReportResponse(
        filename=PORTFOLIO_REPORT_FILENAME,
        content=build_portfolio_report(inputs, outcome),
    )


# --- RESET DEFAULTS ---

@app.get("/api/defaults/health", response_model=HealthInputs)
async def default_health_inputs():
    """Empty health form, as after a reset."""
    return HealthInputs()


@app.get("/api/defaults/portfolio", response_model=PortfolioInputs)
async def default_portfolio_inputs():
    """Empty portfolio form, as after a reset."""
    return PortfolioInputs()


# --- REFERENCE DATA ---

@app.get("/api/reference/ideal-allocation")
async def get_ideal_allocation():
    """Target percentages, display ranges and asset descriptions."""
    return {
        asset.value: {
            "ideal_percent": IDEAL_ALLOCATION[asset],
            "range": IDEAL_RANGES[asset],
            **ASSET_INFO[asset],
        }
        for asset in AssetClass
    }


@app.get("/api/reference/health-tiers")
async def get_health_tiers():
    """Tier boundaries, interpretations and factor descriptions."""
    tiers = [
        {"tier": tier.value, "min_score": bound, "interpretation": TIER_INTERPRETATIONS[tier]}
        for bound, tier in HEALTH_TIERS
    ]
    tiers.append({
        "tier": HealthTier.NEEDS_ATTENTION.value,
        "min_score": MIN_TOTAL_SCORE,
        "interpretation": TIER_INTERPRETATIONS[HealthTier.NEEDS_ATTENTION],
    })
    return {"tiers": tiers, "factors": HEALTH_FACTORS}


@app.get("/api/reference/summary", response_class=PlainTextResponse)
async def get_reference_text():
    """Ideal allocation and tier boundaries as plain text."""
    return get_reference_summary()


# --- ERROR HANDLERS ---

@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    logger.error(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc) if os.getenv("DEBUG") else "An error occurred"
        }
    )


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=os.getenv("FINWELL_HOST", "0.0.0.0"),
        port=int(os.getenv("FINWELL_PORT", "8000"))
    )
