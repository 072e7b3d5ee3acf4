"""Data generation module for synthetic pricing intelligence data."""

from .dataset import Dataset, get_dataset, reset_dataset
from .events import COMPETITORS, EventGenerator
from .generator import SyntheticDataGenerator
from .schemas import (
    ChurnRisk,
    CompanySchema,
    CompetitorPricingSchema,
    Industry,
    MarketPosition,
    PricingModel,
    UsageEventSchema,
    build_company,
    classify_churn_risk,
)

__all__ = [
    "SyntheticDataGenerator",
    "EventGenerator",
    "COMPETITORS",
    "Dataset",
    "get_dataset",
    "reset_dataset",
    "CompanySchema",
    "UsageEventSchema",
    "CompetitorPricingSchema",
    "Industry",
    "PricingModel",
    "ChurnRisk",
    "MarketPosition",
    "build_company",
    "classify_churn_risk",
]
