"""
Dashboard API - Provides the read-only endpoints behind the pricing dashboard.
Revenue leaks, churn predictions, trends and pricing simulation.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

from pricing_intel.analytics import (
    ChurnPrediction,
    CompetitiveAnalysis,
    DashboardStats,
    PricingDistributionEntry,
    PricingSimulation,
    RevenueLeakCell,
    TrendPoint,
    get_churn_predictions,
    get_company_by_id,
    get_competitive_analysis,
    get_dashboard_stats,
    get_high_churn_risk_companies,
    get_pricing_distribution,
    get_revenue_leak_heatmap,
    get_revenue_trend,
    get_top_revenue_leaks,
    get_usage_by_company,
    simulate_pricing_change,
)
from pricing_intel.data_generation import CompanySchema, Dataset, UsageEventSchema
from pricing_intel.exceptions import CompanyNotFoundError, EmptyDatasetError
from pricing_intel.utils.config import config

logger = logging.getLogger(__name__)

# ============================================================================
# Pydantic Models
# ============================================================================


class PricingSimulationRequest(BaseModel):
    """Pricing simulation request."""
    company_id: str = Field(..., description="Company to reprice")
    new_price: float = Field(..., gt=0, description="Proposed price per unit (USD)")


# ============================================================================
# Dashboard Router
# ============================================================================


def create_dashboard_router(dataset: Dataset) -> APIRouter:
    """Create dashboard router bound to a generated dataset."""

    router = APIRouter(prefix="/dashboard", tags=["dashboard"])

    @router.get("/stats", response_model=DashboardStats)
    async def get_stats():
        """Get overview stats for the metric cards."""
        try:
            return get_dashboard_stats(dataset)
        except EmptyDatasetError as e:
            raise HTTPException(status_code=503, detail=str(e))

    @router.get("/leaks", response_model=List[RevenueLeakCell])
    async def get_leaks():
        """Get revenue leak heatmap, largest leak first."""
        return get_revenue_leak_heatmap(dataset)

    @router.get("/leaks/top", response_model=List[CompanySchema])
    async def get_top_leaks(
        limit: int = Query(config.TOP_LEAKS_LIMIT, ge=1, le=100),
    ):
        """Get the companies losing the most revenue."""
        return get_top_revenue_leaks(dataset, limit=limit)

    @router.get("/churn", response_model=List[ChurnPrediction])
    async def get_churn(
        limit: int = Query(config.CHURN_PREDICTION_LIMIT, ge=1, le=100),
    ):
        """Get churn predictions with reasons and recommendations."""
        return get_churn_predictions(dataset, limit=limit)

    @router.get("/churn/high-risk", response_model=List[CompanySchema])
    async def get_high_risk():
        """Get companies in the high churn risk bucket."""
        return get_high_churn_risk_companies(dataset)

    @router.get("/companies/{company_id}", response_model=CompanySchema)
    async def get_company(company_id: str):
        """Get a single company."""
        company = get_company_by_id(dataset, company_id)
        if company is None:
            logger.warning(f"Company lookup miss: {company_id}")
            raise HTTPException(status_code=404, detail="Company not found")
        return company

    @router.get("/companies/{company_id}/usage", response_model=List[UsageEventSchema])
    async def get_company_usage(
        company_id: str,
        days: int = Query(30, ge=1, le=365),
    ):
        """Get a company's recent daily usage, oldest first."""
        if get_company_by_id(dataset, company_id) is None:
            logger.warning(f"Company lookup miss: {company_id}")
            raise HTTPException(status_code=404, detail="Company not found")
        return get_usage_by_company(dataset, company_id, days=days)

    @router.post("/simulate", response_model=PricingSimulation)
    async def simulate(request: PricingSimulationRequest):
        """Simulate the revenue impact of a price change."""
        try:
            return simulate_pricing_change(
                dataset, request.company_id, request.new_price
            )
        except CompanyNotFoundError as e:
            logger.warning(f"Simulation for unknown company: {e.company_id}")
            raise HTTPException(status_code=404, detail=str(e))

    @router.get("/trend", response_model=List[TrendPoint])
    async def get_trend(
        company_id: Optional[str] = None,
        days: int = Query(config.REVENUE_TREND_DAYS, ge=1, le=365),
    ):
        """Get daily revenue trend, optionally for one company."""
        if company_id is not None and get_company_by_id(dataset, company_id) is None:
            raise HTTPException(status_code=404, detail="Company not found")
        return get_revenue_trend(dataset, company_id=company_id, days=days)

    @router.get("/distribution", response_model=List[PricingDistributionEntry])
    async def get_distribution():
        """Get company count and average revenue per pricing model."""
        return get_pricing_distribution(dataset)

    @router.get("/competitive", response_model=CompetitiveAnalysis)
    async def get_competitive():
        """Get our pricing position against competitors."""
        try:
            return get_competitive_analysis(dataset)
        except EmptyDatasetError as e:
            raise HTTPException(status_code=503, detail=str(e))

    return router
