"""
Event generation logic for daily usage and competitor pricing.
Includes per-day usage variance and the fixed competitor roster.
"""

import random
from datetime import datetime, timedelta
from typing import List, Sequence

from .schemas import (
    CompanySchema,
    CompetitorPricingSchema,
    Industry,
    MarketPosition,
    UsageEventSchema,
)

COMPETITORS = [
    "Stripe Billing",
    "Chargebee",
    "Recurly",
    "Lago",
    "Metronome",
    "Orb",
    "Octane",
    "Stigg",
]

# Competitors only cover the first three segments
COMPETITOR_INDUSTRIES = [
    Industry.LLM_API,
    Industry.AI_AGENT,
    Industry.COMPUTER_VISION,
]

COMPETITOR_PRICING_MODELS = ["usage-based", "outcome-based", "hybrid"]


class EventGenerator:
    """Generates daily usage events and competitor pricing snapshots."""

    def __init__(self, rng: random.Random, base_date: datetime):
        """
        Initialize event generator.

        Args:
            rng: Seeded random source shared with the parent generator
            base_date: "Today" for the generated history
        """
        self.rng = rng
        self.base_date = base_date

    def generate_usage_events(
        self,
        company: CompanySchema,
        num_days: int = 180,
    ) -> List[UsageEventSchema]:
        """
        Generate one usage event per day, counting backward from base_date.

        Args:
            company: Company the usage belongs to
            num_days: Number of trailing days to generate

        Returns:
            List of usage events, most recent day first
        """
        events = []
        daily_baseline = company.monthly_usage / 30

        for day_offset in range(num_days):
            event_date = self.base_date - timedelta(days=day_offset)

            # +/-30% daily variance on usage, 0.01 granularity
            variance = self.rng.randint(70, 130) / 100
            daily_usage = daily_baseline * variance

            events.append(
                UsageEventSchema(
                    company_id=company.id,
                    date=event_date,
                    usage=daily_usage,
                    revenue=daily_usage * company.current_price,
                )
            )

        return events

    def generate_competitor_pricing(
        self,
        competitors: Sequence[str] = COMPETITORS,
    ) -> List[CompetitorPricingSchema]:
        """
        Generate a pricing snapshot for each named competitor.

        Args:
            competitors: Competitor names, in output order

        Returns:
            List of competitor pricing records
        """
        snapshots = []
        positions = list(MarketPosition)

        for competitor in competitors:
            industry = self.rng.choice(COMPETITOR_INDUSTRIES)
            pricing_model = self.rng.choice(COMPETITOR_PRICING_MODELS)
            # $0.002 - $0.080 per unit, 0.001 granularity
            price_per_unit = round(self.rng.randint(2, 80) * 0.001, 3)
            market_position = self.rng.choice(positions)

            snapshots.append(
                CompetitorPricingSchema(
                    competitor=competitor,
                    industry=industry.value,
                    pricing_model=pricing_model,
                    price_per_unit=price_per_unit,
                    market_position=market_position,
                )
            )

        return snapshots
