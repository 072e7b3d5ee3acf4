"""
Dashboard analytics - aggregates, rankings and pricing simulation.
Pure functions over a generated Dataset; nothing here mutates its input.
"""

import logging
from collections import defaultdict
from datetime import datetime, timezone
from typing import Dict, List, Optional

import numpy as np

from pricing_intel.data_generation.dataset import Dataset
from pricing_intel.data_generation.schemas import ChurnRisk, CompanySchema
from pricing_intel.exceptions import EmptyDatasetError

from .formatting import to_fixed
from .models import (
    ChurnPrediction,
    CompetitiveAnalysis,
    DashboardStats,
    LeakSeverity,
    PricePosition,
    PricingDistributionEntry,
    PricingSimulation,
    RevenueLeakCell,
    TrendPoint,
)

logger = logging.getLogger(__name__)

# Leak severity thresholds, percent of revenue (strictly greater than)
CRITICAL_LEAK_THRESHOLD = 50
HIGH_LEAK_THRESHOLD = 30
MEDIUM_LEAK_THRESHOLD = 15

# Churn predictions only cover accounts above this probability
CHURN_PREDICTION_FLOOR = 30
# Leak percent above which churn is attributed to under-pricing
PRICING_GAP_THRESHOLD = 40
VOLATILITY_THRESHOLD = 60

# Every 10% price increase adds 5 points of churn risk
CHURN_IMPACT_PER_PRICE_POINT = 0.5


def classify_leak_severity(leak_percent: float) -> LeakSeverity:
    """Map revenue leak percent onto its severity bucket."""
    if leak_percent > CRITICAL_LEAK_THRESHOLD:
        return LeakSeverity.CRITICAL
    if leak_percent > HIGH_LEAK_THRESHOLD:
        return LeakSeverity.HIGH
    if leak_percent > MEDIUM_LEAK_THRESHOLD:
        return LeakSeverity.MEDIUM
    return LeakSeverity.LOW


def _require_companies(dataset: Dataset):
    if not dataset.companies:
        raise EmptyDatasetError("Dataset has no companies")


def get_dashboard_stats(dataset: Dataset) -> DashboardStats:
    """
    Calculate dashboard overview stats.

    Raises:
        EmptyDatasetError: if the dataset has no companies
    """
    _require_companies(dataset)
    companies = dataset.companies

    total_revenue_leak = sum(c.revenue_leak for c in companies)
    monthly_revenue = sum(c.monthly_revenue for c in companies)
    potential_revenue = monthly_revenue + total_revenue_leak
    total_revenue_leak_percent = total_revenue_leak / monthly_revenue * 100

    high_risk_customers = sum(1 for c in companies if c.churn_risk == ChurnRisk.HIGH)
    avg_churn_probability = float(np.mean([c.churn_probability for c in companies]))

    return DashboardStats(
        total_revenue_leak=total_revenue_leak,
        total_revenue_leak_percent=total_revenue_leak_percent,
        high_risk_customers=high_risk_customers,
        avg_churn_probability=avg_churn_probability,
        monthly_revenue=monthly_revenue,
        potential_revenue=potential_revenue,
    )


def get_revenue_leak_heatmap(dataset: Dataset) -> List[RevenueLeakCell]:
    """Heatmap cells for every company, largest leak first."""
    cells = [
        RevenueLeakCell(
            company_id=company.id,
            company_name=company.name,
            industry=company.industry,
            leak_amount=company.revenue_leak,
            leak_percent=company.revenue_leak_percent,
            severity=classify_leak_severity(company.revenue_leak_percent),
        )
        for company in dataset.companies
    ]
    # sorted() is stable, ties keep generation order
    return sorted(cells, key=lambda cell: cell.leak_amount, reverse=True)


def _explain_churn(company: CompanySchema) -> ChurnPrediction:
    """Pick the single explanation template that applies to this company."""
    if company.revenue_leak_percent > PRICING_GAP_THRESHOLD:
        reason = (
            f"Pricing {to_fixed(company.revenue_leak_percent, 0)}% below market average"
        )
        recommendation = (
            f"Increase price to ${to_fixed(company.recommended_price, 4)}/unit"
        )
    elif company.churn_probability > VOLATILITY_THRESHOLD:
        reason = "High usage volatility detected"
        recommendation = "Consider switching to outcome-based pricing"
    else:
        reason = "Usage declining over last 30 days"
        recommendation = "Offer volume discount or usage credits"

    return ChurnPrediction(
        company_id=company.id,
        company_name=company.name,
        probability=company.churn_probability,
        risk=company.churn_risk,
        reason=reason,
        recommendation=recommendation,
    )


def get_churn_predictions(dataset: Dataset, limit: int = 20) -> List[ChurnPrediction]:
    """
    Churn predictions with reasons for the riskiest accounts.

    Args:
        dataset: Generated dataset
        limit: Maximum number of predictions to return

    Returns:
        Predictions for companies above 30% probability, highest first
    """
    at_risk = [
        c for c in dataset.companies if c.churn_probability > CHURN_PREDICTION_FLOOR
    ]
    ranked = sorted(at_risk, key=lambda c: c.churn_probability, reverse=True)
    return [_explain_churn(company) for company in ranked[: max(limit, 0)]]


def simulate_pricing_change(
    dataset: Dataset,
    company_id: str,
    new_price: float,
) -> PricingSimulation:
    """
    Simulate moving a company to a new unit price.

    Churn impact is half the percent price increase, floored at zero, and
    is applied to projected revenue as lost retention.

    Raises:
        CompanyNotFoundError: if company_id is not in the dataset
    """
    company = dataset.require_company(company_id)

    current_revenue = company.monthly_revenue
    projected_revenue = company.monthly_usage * new_price

    price_change_percent = (new_price - company.current_price) / company.current_price * 100
    churn_impact = max(0.0, price_change_percent * CHURN_IMPACT_PER_PRICE_POINT)

    retention_rate = 1 - churn_impact / 100
    net_revenue = projected_revenue * retention_rate

    revenue_change = net_revenue - current_revenue
    revenue_change_percent = revenue_change / current_revenue * 100

    logger.debug(
        f"Simulated {company_id}: ${company.current_price} -> ${new_price}, "
        f"net revenue change {revenue_change_percent:.1f}%"
    )

    return PricingSimulation(
        company_id=company.id,
        current_price=company.current_price,
        new_price=new_price,
        price_change_percent=price_change_percent,
        current_revenue=current_revenue,
        projected_revenue=projected_revenue,
        revenue_change=revenue_change,
        revenue_change_percent=revenue_change_percent,
        churn_impact=churn_impact,
        retention_rate=retention_rate,
        net_revenue=net_revenue,
    )


def _day_key(timestamp: datetime) -> str:
    """Calendar day (UTC for aware timestamps) as YYYY-MM-DD."""
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone(timezone.utc)
    return timestamp.date().isoformat()


def get_revenue_trend(
    dataset: Dataset,
    company_id: Optional[str] = None,
    days: int = 90,
) -> List[TrendPoint]:
    """
    Daily revenue, oldest day first, limited to the most recent days.

    Args:
        dataset: Generated dataset
        company_id: Restrict to one company's events (all companies if None)
        days: Number of most recent days to keep
    """
    events = dataset.usage_events
    if company_id is not None:
        events = [e for e in events if e.company_id == company_id]

    daily_revenue: Dict[str, float] = defaultdict(float)
    for event in events:
        daily_revenue[_day_key(event.date)] += event.revenue

    trend = [
        TrendPoint(date=day, revenue=revenue)
        for day, revenue in sorted(daily_revenue.items())
    ]
    return trend[-days:] if days > 0 else []


def get_pricing_distribution(dataset: Dataset) -> List[PricingDistributionEntry]:
    """Company count and average monthly revenue per pricing model."""
    totals: Dict[str, List[float]] = {}
    for company in dataset.companies:
        totals.setdefault(company.pricing_model, []).append(company.monthly_revenue)

    return [
        PricingDistributionEntry(
            model=model,
            count=len(revenues),
            avg_revenue=sum(revenues) / len(revenues),
        )
        for model, revenues in totals.items()
    ]


def get_competitive_analysis(dataset: Dataset) -> CompetitiveAnalysis:
    """
    Compare our average unit price with the competitor average.

    Raises:
        EmptyDatasetError: if there are no companies or no competitors
    """
    _require_companies(dataset)
    if not dataset.competitor_pricing:
        raise EmptyDatasetError("Dataset has no competitor pricing")

    avg_price = float(np.mean([c.current_price for c in dataset.companies]))
    competitor_avg = float(
        np.mean([c.price_per_unit for c in dataset.competitor_pricing])
    )

    position = PricePosition.ABOVE if avg_price > competitor_avg else PricePosition.BELOW
    difference = (avg_price - competitor_avg) / competitor_avg * 100

    return CompetitiveAnalysis(
        your_avg_price=avg_price,
        market_avg_price=competitor_avg,
        position=position,
        difference_percent=abs(difference),
        competitors=list(dataset.competitor_pricing[:5]),
    )
