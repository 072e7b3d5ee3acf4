"""
Pydantic schemas for synthetic data generation.
Defines the shape of companies, usage_events, and competitor_pricing.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class Industry(str, Enum):
    """Industry segments of the synthetic customer base."""
    LLM_API = "LLM API"
    AI_AGENT = "AI Agent"
    COMPUTER_VISION = "Computer Vision"
    AUDIO_AI = "Audio AI"
    CODE_GENERATION = "Code Generation"


class PricingModel(str, Enum):
    """Billing approach a company uses."""
    USAGE = "usage"
    OUTCOME = "outcome"
    HYBRID = "hybrid"
    SUBSCRIPTION = "subscription"


class ChurnRisk(str, Enum):
    """Churn risk bucket derived from churn probability."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class MarketPosition(str, Enum):
    """Competitor market positioning."""
    PREMIUM = "premium"
    MID_MARKET = "mid-market"
    BUDGET = "budget"


# Churn probability thresholds (strictly greater than)
HIGH_CHURN_THRESHOLD = 60
MEDIUM_CHURN_THRESHOLD = 30


def classify_churn_risk(probability: float) -> ChurnRisk:
    """Map a churn probability (0-100) onto its risk bucket."""
    if probability > HIGH_CHURN_THRESHOLD:
        return ChurnRisk.HIGH
    if probability > MEDIUM_CHURN_THRESHOLD:
        return ChurnRisk.MEDIUM
    return ChurnRisk.LOW


class CompanySchema(BaseModel):
    """Schema for synthetic customer accounts."""
    id: str = Field(..., description="Unique company identifier (UUID)")
    name: str = Field(..., description="Display name")
    industry: Industry = Field(..., description="Industry segment")
    pricing_model: PricingModel = Field(..., description="Current billing approach")
    current_price: float = Field(..., gt=0, description="Current price per unit (USD)")
    recommended_price: float = Field(..., gt=0, description="Market-adjusted price per unit (USD)")
    monthly_revenue: float = Field(..., ge=0, description="monthly_usage * current_price")
    monthly_usage: int = Field(..., ge=0, description="Units consumed per month")
    churn_risk: ChurnRisk = Field(..., description="Bucket derived from churn_probability")
    churn_probability: int = Field(..., ge=0, le=100, description="Churn probability (0-100)")
    revenue_leak: float = Field(..., description="Revenue lost to under-pricing (USD/month)")
    revenue_leak_percent: float = Field(..., description="revenue_leak as percent of monthly_revenue")
    customer_since: datetime = Field(..., description="Date the account was opened")
    last_active: datetime = Field(..., description="Most recent activity")

    class Config:
        use_enum_values = True
        frozen = True


class UsageEventSchema(BaseModel):
    """Schema for one company's usage and revenue on one day."""
    company_id: str = Field(..., description="Company the usage belongs to")
    date: datetime = Field(..., description="Day of usage")
    usage: float = Field(..., ge=0, description="Units consumed that day")
    revenue: float = Field(..., ge=0, description="usage * company's current price")

    class Config:
        frozen = True


class CompetitorPricingSchema(BaseModel):
    """Schema for competitor pricing snapshots."""
    competitor: str = Field(..., description="Competitor name")
    industry: str = Field(..., description="Industry segment served")
    pricing_model: str = Field(..., description="Pricing model label, e.g. 'usage-based'")
    price_per_unit: float = Field(..., gt=0, description="Price per unit (USD)")
    market_position: MarketPosition = Field(..., description="Market positioning")

    class Config:
        use_enum_values = True
        frozen = True


def build_company(
    *,
    id: str,
    name: str,
    industry: Industry,
    pricing_model: PricingModel,
    current_price: float,
    recommended_price: float,
    monthly_usage: int,
    churn_probability: int,
    customer_since: datetime,
    last_active: datetime,
) -> CompanySchema:
    """
    Build a company record, deriving revenue, leak and risk fields.

    Keeps revenue_leak_percent and churn_risk consistent with their
    source fields for generated and hand-built records alike.
    """
    monthly_revenue = monthly_usage * current_price
    revenue_leak = monthly_usage * recommended_price - monthly_revenue
    revenue_leak_percent = revenue_leak / monthly_revenue * 100

    return CompanySchema(
        id=id,
        name=name,
        industry=industry,
        pricing_model=pricing_model,
        current_price=current_price,
        recommended_price=recommended_price,
        monthly_revenue=monthly_revenue,
        monthly_usage=monthly_usage,
        churn_risk=classify_churn_risk(churn_probability),
        churn_probability=churn_probability,
        revenue_leak=revenue_leak,
        revenue_leak_percent=revenue_leak_percent,
        customer_since=customer_since,
        last_active=last_active,
    )
