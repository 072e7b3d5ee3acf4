"""
Pydantic models returned by the analytics layer.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from pricing_intel.data_generation.schemas import (
    ChurnRisk,
    CompetitorPricingSchema,
    Industry,
)


class LeakSeverity(str, Enum):
    """Severity bucket for revenue leak percent."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class PricePosition(str, Enum):
    """Where our average price sits relative to the market."""
    ABOVE = "above"
    BELOW = "below"


class DashboardStats(BaseModel):
    """Headline numbers for the overview cards."""
    total_revenue_leak: float
    total_revenue_leak_percent: float
    high_risk_customers: int
    avg_churn_probability: float
    monthly_revenue: float
    potential_revenue: float


class RevenueLeakCell(BaseModel):
    """One heatmap cell."""
    company_id: str
    company_name: str
    industry: Industry
    leak_amount: float
    leak_percent: float
    severity: LeakSeverity

    class Config:
        use_enum_values = True


class ChurnPrediction(BaseModel):
    """Churn prediction with a templated explanation."""
    company_id: str
    company_name: str
    probability: int
    risk: ChurnRisk
    reason: str
    recommendation: str

    class Config:
        use_enum_values = True


class PricingSimulation(BaseModel):
    """Projected impact of moving one company to a new unit price."""
    company_id: str
    current_price: float
    new_price: float
    price_change_percent: float
    current_revenue: float
    projected_revenue: float
    revenue_change: float
    revenue_change_percent: float
    churn_impact: float = Field(..., ge=0, description="Added churn risk, percentage points")
    retention_rate: float
    net_revenue: float


class TrendPoint(BaseModel):
    """Revenue summed over one calendar day."""
    date: str = Field(..., description="Day in YYYY-MM-DD form")
    revenue: float


class PricingDistributionEntry(BaseModel):
    """Company count and average revenue for one pricing model."""
    model: str
    count: int
    avg_revenue: float


class CompetitiveAnalysis(BaseModel):
    """Our average unit price against the competitor average."""
    your_avg_price: float
    market_avg_price: float
    position: PricePosition
    difference_percent: float
    competitors: List[CompetitorPricingSchema]

    class Config:
        use_enum_values = True


class DatasetSummary(BaseModel):
    """Shape of the generated demo dataset."""
    num_companies: int
    usage_days: int
    num_usage_events: int
    num_competitors: int
    seed: int
    generated_at: datetime
    label: Optional[str] = None
