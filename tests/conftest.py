"""
Shared fixtures: a seeded generated dataset and a small hand-built one.
"""

from datetime import datetime, timedelta, timezone

import pytest

from pricing_intel.data_generation import (
    CompetitorPricingSchema,
    Dataset,
    Industry,
    PricingModel,
    SyntheticDataGenerator,
    UsageEventSchema,
    build_company,
)

BASE_DATE = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)
SEED = 12345


@pytest.fixture(scope="session")
def base_date():
    return BASE_DATE


@pytest.fixture(scope="session")
def generated_dataset():
    """Full-size demo dataset: 50 companies, 180 days."""
    generator = SyntheticDataGenerator(seed=SEED, base_date=BASE_DATE)
    return generator.generate_all(num_companies=50, usage_days=180)


def make_company(company_id, usage, price, recommended, probability, **overrides):
    """Hand-built company with derived fields filled in."""
    fields = dict(
        id=company_id,
        name=f"{company_id} Inc",
        industry=Industry.LLM_API,
        pricing_model=PricingModel.USAGE,
        current_price=price,
        recommended_price=recommended,
        monthly_usage=usage,
        churn_probability=probability,
        customer_since=BASE_DATE - timedelta(days=400),
        last_active=BASE_DATE - timedelta(days=1),
    )
    fields.update(overrides)
    return build_company(**fields)


@pytest.fixture
def small_dataset():
    """
    Four companies with known numbers:

    - acme: 50% leak, probability 70 (pricing-gap template)
    - bolt: 20% leak, probability 65 (volatility template)
    - core: 20% leak, probability 45 (declining-usage template)
    - dyna: 10% leak, probability 25 (below prediction floor)
    """
    companies = [
        make_company("acme", 100_000, 0.01, 0.015, 70),
        make_company(
            "bolt", 50_000, 0.02, 0.024, 65,
            industry=Industry.AI_AGENT, pricing_model=PricingModel.HYBRID,
        ),
        make_company(
            "core", 200_000, 0.005, 0.006, 45,
            industry=Industry.AUDIO_AI, pricing_model=PricingModel.USAGE,
        ),
        make_company(
            "dyna", 10_000, 0.04, 0.044, 25,
            industry=Industry.CODE_GENERATION, pricing_model=PricingModel.SUBSCRIPTION,
        ),
    ]

    events = []
    for company in companies:
        for day_offset in range(3):
            usage = company.monthly_usage / 30
            events.append(
                UsageEventSchema(
                    company_id=company.id,
                    date=BASE_DATE - timedelta(days=day_offset),
                    usage=usage,
                    revenue=usage * company.current_price,
                )
            )

    competitors = [
        CompetitorPricingSchema(
            competitor=name,
            industry="LLM API",
            pricing_model="usage-based",
            price_per_unit=price,
            market_position="mid-market",
        )
        for name, price in [
            ("Stripe Billing", 0.01),
            ("Chargebee", 0.02),
            ("Recurly", 0.03),
            ("Lago", 0.04),
            ("Metronome", 0.05),
            ("Orb", 0.06),
        ]
    ]

    return Dataset(
        companies=companies,
        usage_events=events,
        competitor_pricing=competitors,
        seed=0,
        generated_at=BASE_DATE,
        usage_days=3,
    )


@pytest.fixture
def empty_dataset():
    return Dataset(
        companies=[],
        usage_events=[],
        competitor_pricing=[],
        seed=0,
        generated_at=BASE_DATE,
        usage_days=0,
    )
