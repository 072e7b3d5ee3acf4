"""
Main synthetic data generator for the pricing intelligence engine.
Orchestrates company, usage event, and competitor pricing generation.
"""

import logging
import random
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Sequence

from faker import Faker

from .dataset import Dataset
from .events import EventGenerator
from .schemas import (
    CompanySchema,
    CompetitorPricingSchema,
    Industry,
    PricingModel,
    UsageEventSchema,
    build_company,
)

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400


class SyntheticDataGenerator:
    """
    Generates synthetic data for the pricing intelligence dashboard.

    Produces:
    - Companies with pricing, usage, revenue leak and churn risk
    - Daily usage events for each company
    - Competitor pricing snapshots

    Churn risk is modeled as rising with revenue leak: accounts priced far
    below market draw their churn probability from a higher range.
    """

    def __init__(
        self,
        seed: int = 12345,
        base_date: Optional[datetime] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the data generator.

        Args:
            seed: Random seed for reproducibility
            base_date: Reference date for generation (defaults to now, UTC)
            rng: Random source override; defaults to random.Random(seed).
                When given, it also seeds Faker (ids and names), and seed
                is only recorded on the dataset as a label.
        """
        self.seed = seed
        self.base_date = base_date or datetime.now(timezone.utc)
        self.faker = Faker()
        if rng is None:
            self.rng = random.Random(seed)
            self.faker.seed_instance(seed)
        else:
            self.rng = rng
            self.faker.seed_instance(rng.getrandbits(64))
        self.event_generator = EventGenerator(rng=self.rng, base_date=self.base_date)

    def _draw_churn_probability(self, revenue_leak_percent: float) -> int:
        """
        Draw churn probability: an outer 5-95 draw capped by a draw whose
        range depends on leak (60-90 above 40% leak, else 5-40).
        """
        outer = self.rng.randint(5, 95)
        if revenue_leak_percent > 40:
            conditional = self.rng.randint(60, 90)
        else:
            conditional = self.rng.randint(5, 40)
        return min(outer, conditional)

    def _random_past(self, max_days: int) -> datetime:
        """Random timestamp within the last max_days of base_date."""
        seconds_ago = self.rng.randint(0, max_days * SECONDS_PER_DAY)
        return self.base_date - timedelta(seconds=seconds_ago)

    def generate_companies(self, count: int) -> List[CompanySchema]:
        """
        Generate synthetic companies with pricing and risk attributes.

        Args:
            count: Number of companies to generate

        Returns:
            List of company records
        """
        companies = []
        industries = list(Industry)
        pricing_models = list(PricingModel)

        for _ in range(max(count, 0)):
            industry = self.rng.choice(industries)
            pricing_model = self.rng.choice(pricing_models)

            monthly_usage = self.rng.randint(1000, 1_000_000)
            # $0.001 - $0.050 per unit, 0.001 granularity
            current_price = round(self.rng.randint(1, 50) * 0.001, 3)

            # Market multiplier 1.1 - 1.8, 0.1 granularity
            market_multiplier = self.rng.randint(11, 18) / 10
            recommended_price = current_price * market_multiplier

            monthly_revenue = monthly_usage * current_price
            revenue_leak = monthly_usage * recommended_price - monthly_revenue
            revenue_leak_percent = revenue_leak / monthly_revenue * 100

            churn_probability = self._draw_churn_probability(revenue_leak_percent)

            companies.append(
                build_company(
                    id=self.faker.uuid4(),
                    name=self.faker.company(),
                    industry=industry,
                    pricing_model=pricing_model,
                    current_price=current_price,
                    recommended_price=recommended_price,
                    monthly_usage=monthly_usage,
                    churn_probability=churn_probability,
                    customer_since=self._random_past(2 * 365),
                    last_active=self._random_past(7),
                )
            )

        logger.info(f"Generated {len(companies)} synthetic companies")
        return companies

    def generate_usage_events(
        self,
        companies: Sequence[CompanySchema],
        days: int = 180,
    ) -> List[UsageEventSchema]:
        """
        Generate daily usage events for all companies.

        Args:
            companies: Company records
            days: Trailing days of history per company

        Returns:
            Events ordered company-major, most recent day first
        """
        events = []
        for company in companies:
            events.extend(
                self.event_generator.generate_usage_events(company, num_days=days)
            )

        logger.info(f"Generated {len(events)} usage events over {days} days")
        return events

    def generate_competitor_pricing(self) -> List[CompetitorPricingSchema]:
        """Generate the fixed competitor pricing roster."""
        competitors = self.event_generator.generate_competitor_pricing()
        logger.info(f"Generated {len(competitors)} competitor pricing records")
        return competitors

    def generate_all(
        self,
        num_companies: int = 50,
        usage_days: int = 180,
    ) -> Dataset:
        """
        Generate complete synthetic dataset.

        Args:
            num_companies: Number of companies to generate
            usage_days: Days of usage history per company

        Returns:
            Immutable dataset
        """
        logger.info(
            f"Starting synthetic data generation: "
            f"{num_companies} companies, {usage_days} days history, "
            f"seed {self.seed}"
        )

        companies = self.generate_companies(num_companies)
        competitor_pricing = self.generate_competitor_pricing()
        usage_events = self.generate_usage_events(companies, days=usage_days)

        return Dataset(
            companies=companies,
            usage_events=usage_events,
            competitor_pricing=competitor_pricing,
            seed=self.seed,
            generated_at=self.base_date,
            usage_days=usage_days,
        )


if __name__ == "__main__":
    # Example usage
    logging.basicConfig(level=logging.INFO)

    generator = SyntheticDataGenerator(seed=12345)
    dataset = generator.generate_all(num_companies=50, usage_days=180)

    print(f"\n✅ Generated:")
    print(f"  • {len(dataset.companies)} companies")
    print(f"  • {len(dataset.usage_events)} usage events")
    print(f"  • {len(dataset.competitor_pricing)} competitor pricing records")
    print(f"\nSample company: {dataset.companies[0]}")
    print(f"Sample event: {dataset.usage_events[0]}")
    print(f"Sample competitor: {dataset.competitor_pricing[0]}")
