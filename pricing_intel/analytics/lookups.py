"""
Record lookups over the generated dataset.
"""

from datetime import timedelta
from typing import List, Optional

from pricing_intel.data_generation.dataset import Dataset
from pricing_intel.data_generation.schemas import (
    ChurnRisk,
    CompanySchema,
    UsageEventSchema,
)

from .models import DatasetSummary


def get_company_by_id(dataset: Dataset, company_id: str) -> Optional[CompanySchema]:
    return dataset.get_company(company_id)


def get_top_revenue_leaks(dataset: Dataset, limit: int = 10) -> List[CompanySchema]:
    """Companies with the largest revenue leak, largest first."""
    ranked = sorted(dataset.companies, key=lambda c: c.revenue_leak, reverse=True)
    return ranked[: max(limit, 0)]


def get_high_churn_risk_companies(dataset: Dataset) -> List[CompanySchema]:
    return [c for c in dataset.companies if c.churn_risk == ChurnRisk.HIGH]


def get_total_revenue_leak(dataset: Dataset) -> float:
    return sum(c.revenue_leak for c in dataset.companies)


def get_usage_by_company(
    dataset: Dataset,
    company_id: str,
    days: int = 30,
) -> List[UsageEventSchema]:
    """
    One company's usage events from the last ``days`` days, oldest first.

    The window is measured back from the dataset's generation time. Unknown
    companies yield an empty list.
    """
    cutoff = dataset.generated_at - timedelta(days=days)
    events = [
        e for e in dataset.usage_events
        if e.company_id == company_id and e.date > cutoff
    ]
    return sorted(events, key=lambda e: e.date)


def get_dataset_summary(dataset: Dataset) -> DatasetSummary:
    """Counts behind the "Demo Mode" banner."""
    num_companies = len(dataset.companies)
    return DatasetSummary(
        num_companies=num_companies,
        usage_days=dataset.usage_days,
        num_usage_events=len(dataset.usage_events),
        num_competitors=len(dataset.competitor_pricing),
        seed=dataset.seed,
        generated_at=dataset.generated_at,
        label=f"Demo Mode • {num_companies} Companies • {dataset.usage_days} Days Data",
    )
