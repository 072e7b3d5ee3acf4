"""
FastAPI application for the pricing intelligence dashboard.
Provides REST endpoints over the synthetic demo dataset.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI
from pydantic import BaseModel

from pricing_intel import __version__
from pricing_intel.analytics import DatasetSummary, get_dataset_summary
from pricing_intel.data_generation import Dataset, get_dataset
from pricing_intel.utils.config import config

from .dashboard_api import create_dashboard_router

logger = logging.getLogger(__name__)


class HealthCheckResponse(BaseModel):
    """Health check response."""
    status: str
    dataset: DatasetSummary
    timestamp: str


def create_app(dataset: Optional[Dataset] = None) -> FastAPI:
    """
    Build the API around a dataset.

    Args:
        dataset: Dataset to serve; defaults to the process-wide dataset,
            generated from config on first use

    Returns:
        Configured FastAPI application
    """
    if dataset is None:
        dataset = get_dataset()

    app = FastAPI(
        title="Pricing Intelligence API",
        description="Revenue leak, churn risk and pricing analytics over synthetic demo data",
        version=__version__,
    )
    app.state.dataset = dataset

    # ========================================================================
    # Health & Info Endpoints
    # ========================================================================

    @app.get("/health", response_model=HealthCheckResponse)
    async def health_check():
        """Check if the API is healthy."""
        return HealthCheckResponse(
            status="healthy",
            dataset=get_dataset_summary(dataset),
            timestamp=datetime.now(timezone.utc).isoformat(),
        )

    @app.get("/")
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Pricing Intelligence API",
            "version": __version__,
            "environment": config.ENV,
            "endpoints": {
                "health": "/health",
                "stats": "/dashboard/stats",
                "leaks": "/dashboard/leaks",
                "top_leaks": "/dashboard/leaks/top",
                "churn": "/dashboard/churn",
                "high_risk": "/dashboard/churn/high-risk",
                "company": "/dashboard/companies/{company_id}",
                "company_usage": "/dashboard/companies/{company_id}/usage",
                "simulate": "/dashboard/simulate",
                "trend": "/dashboard/trend",
                "distribution": "/dashboard/distribution",
                "competitive": "/dashboard/competitive",
                "docs": "/docs",
            },
        }

    app.include_router(create_dashboard_router(dataset))
    logger.info(
        f"✓ Dashboard API initialized ({len(dataset.companies)} companies, "
        f"{dataset.usage_days} days)"
    )

    return app
