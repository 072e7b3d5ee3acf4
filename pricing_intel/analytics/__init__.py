"""Analytics layer - derived dashboard views over the generated dataset."""

from .dashboard import (
    classify_leak_severity,
    get_churn_predictions,
    get_competitive_analysis,
    get_dashboard_stats,
    get_pricing_distribution,
    get_revenue_leak_heatmap,
    get_revenue_trend,
    simulate_pricing_change,
)
from .formatting import format_currency, format_percent, format_price_per_unit
from .lookups import (
    get_company_by_id,
    get_dataset_summary,
    get_high_churn_risk_companies,
    get_top_revenue_leaks,
    get_total_revenue_leak,
    get_usage_by_company,
)
from .models import (
    ChurnPrediction,
    CompetitiveAnalysis,
    DashboardStats,
    DatasetSummary,
    LeakSeverity,
    PricePosition,
    PricingDistributionEntry,
    PricingSimulation,
    RevenueLeakCell,
    TrendPoint,
)

__all__ = [
    "get_dashboard_stats",
    "get_revenue_leak_heatmap",
    "get_churn_predictions",
    "simulate_pricing_change",
    "get_revenue_trend",
    "get_pricing_distribution",
    "get_competitive_analysis",
    "classify_leak_severity",
    "get_company_by_id",
    "get_top_revenue_leaks",
    "get_high_churn_risk_companies",
    "get_total_revenue_leak",
    "get_usage_by_company",
    "get_dataset_summary",
    "format_currency",
    "format_percent",
    "format_price_per_unit",
    "DashboardStats",
    "RevenueLeakCell",
    "ChurnPrediction",
    "PricingSimulation",
    "TrendPoint",
    "PricingDistributionEntry",
    "CompetitiveAnalysis",
    "DatasetSummary",
    "LeakSeverity",
    "PricePosition",
]
