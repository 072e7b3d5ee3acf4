"""
Synthetic data generation: value ranges, derived-field consistency and
reproducibility.
"""

import random
from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta

import pytest

from pricing_intel.data_generation import (
    COMPETITORS,
    ChurnRisk,
    Industry,
    SyntheticDataGenerator,
    classify_churn_risk,
    dataset as dataset_module,
    get_dataset,
    reset_dataset,
)
from pricing_intel.exceptions import CompanyNotFoundError
from pricing_intel.utils.config import config

from tests.conftest import BASE_DATE, SEED, make_company


class ScriptedRandom(random.Random):
    """Random source whose randint() replays a fixed sequence."""

    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)

    def randint(self, a, b):
        value = self.values.pop(0)
        assert a <= value <= b
        return value


# ============================================================================
# Companies
# ============================================================================


def test_generates_requested_number_of_companies(generated_dataset):
    assert len(generated_dataset.companies) == 50
    assert len({c.id for c in generated_dataset.companies}) == 50


def test_zero_or_negative_count_yields_no_companies():
    generator = SyntheticDataGenerator(seed=SEED, base_date=BASE_DATE)
    assert generator.generate_companies(0) == []
    assert generator.generate_companies(-3) == []


def test_company_values_within_ranges(generated_dataset):
    for company in generated_dataset.companies:
        assert 1000 <= company.monthly_usage <= 1_000_000
        assert 0.001 <= company.current_price <= 0.05
        assert company.current_price == round(company.current_price, 3)

        multiplier = company.recommended_price / company.current_price
        assert 1.1 - 1e-9 <= multiplier <= 1.8 + 1e-9
        assert company.recommended_price >= company.current_price
        assert company.revenue_leak >= 0

        assert 5 <= company.churn_probability <= 90
        assert BASE_DATE - timedelta(days=730) <= company.customer_since <= BASE_DATE
        assert BASE_DATE - timedelta(days=7) <= company.last_active <= BASE_DATE


def test_leak_percent_consistent_with_leak(generated_dataset):
    for company in generated_dataset.companies:
        assert company.monthly_revenue == pytest.approx(
            company.monthly_usage * company.current_price
        )
        assert company.revenue_leak_percent == pytest.approx(
            company.revenue_leak / company.monthly_revenue * 100
        )


def test_churn_risk_matches_probability_thresholds(generated_dataset):
    for company in generated_dataset.companies:
        probability = company.churn_probability
        if probability > 60:
            assert company.churn_risk == ChurnRisk.HIGH
        elif probability > 30:
            assert company.churn_risk == ChurnRisk.MEDIUM
        else:
            assert company.churn_risk == ChurnRisk.LOW


def test_churn_probability_range_follows_leak(generated_dataset):
    for company in generated_dataset.companies:
        if company.revenue_leak_percent <= 40:
            assert company.churn_probability <= 40


@pytest.mark.parametrize(
    "probability,expected",
    [
        (0, ChurnRisk.LOW),
        (30, ChurnRisk.LOW),
        (31, ChurnRisk.MEDIUM),
        (60, ChurnRisk.MEDIUM),
        (61, ChurnRisk.HIGH),
        (100, ChurnRisk.HIGH),
    ],
)
def test_churn_risk_boundaries_are_strict(probability, expected):
    assert classify_churn_risk(probability) == expected
    assert make_company("x", 1000, 0.01, 0.011, probability).churn_risk == expected


def test_churn_probability_is_min_of_outer_and_conditional_draw():
    # High leak: outer 5-95 then conditional 60-90
    generator = SyntheticDataGenerator(seed=SEED, rng=ScriptedRandom([95, 72]))
    assert generator._draw_churn_probability(45.0) == 72

    generator = SyntheticDataGenerator(seed=SEED, rng=ScriptedRandom([12, 88]))
    assert generator._draw_churn_probability(45.0) == 12

    # Low leak: conditional 5-40
    generator = SyntheticDataGenerator(seed=SEED, rng=ScriptedRandom([50, 33]))
    assert generator._draw_churn_probability(40.0) == 33


def test_build_company_derives_leak_fields():
    company = make_company("acme", 100_000, 0.01, 0.015, 70)

    assert company.monthly_revenue == pytest.approx(1000)
    assert company.revenue_leak == pytest.approx(500)
    assert company.revenue_leak_percent == pytest.approx(50)
    assert company.churn_risk == ChurnRisk.HIGH


# ============================================================================
# Usage events
# ============================================================================


def test_usage_events_company_major_day_minor(generated_dataset):
    events = generated_dataset.usage_events
    companies = generated_dataset.companies
    assert len(events) == len(companies) * 180

    for index, company in enumerate(companies):
        block = events[index * 180:(index + 1) * 180]
        assert all(e.company_id == company.id for e in block)
        for day_offset, event in enumerate(block):
            assert event.date == BASE_DATE - timedelta(days=day_offset)


def test_usage_events_variance_and_revenue(generated_dataset):
    prices = {c.id: c for c in generated_dataset.companies}
    for event in generated_dataset.usage_events:
        company = prices[event.company_id]
        baseline = company.monthly_usage / 30
        assert baseline * 0.7 - 1e-6 <= event.usage <= baseline * 1.3 + 1e-6
        assert event.revenue == pytest.approx(event.usage * company.current_price)


# ============================================================================
# Competitors
# ============================================================================


def test_competitor_roster(generated_dataset):
    competitors = generated_dataset.competitor_pricing
    assert [c.competitor for c in competitors] == COMPETITORS

    allowed_industries = {
        Industry.LLM_API.value,
        Industry.AI_AGENT.value,
        Industry.COMPUTER_VISION.value,
    }
    for competitor in competitors:
        assert competitor.industry in allowed_industries
        assert competitor.pricing_model in {"usage-based", "outcome-based", "hybrid"}
        assert 0.002 <= competitor.price_per_unit <= 0.08
        assert competitor.market_position in {"premium", "mid-market", "budget"}


# ============================================================================
# Dataset
# ============================================================================


def test_same_seed_reproduces_dataset(generated_dataset):
    again = SyntheticDataGenerator(seed=SEED, base_date=BASE_DATE).generate_all(
        num_companies=50, usage_days=180
    )
    assert again.companies == generated_dataset.companies
    assert again.usage_events == generated_dataset.usage_events
    assert again.competitor_pricing == generated_dataset.competitor_pricing


def test_different_seed_changes_dataset(generated_dataset):
    other = SyntheticDataGenerator(seed=SEED + 1, base_date=BASE_DATE).generate_all(
        num_companies=50, usage_days=10
    )
    assert [c.id for c in other.companies] != [c.id for c in generated_dataset.companies]


def test_dataset_company_lookup(small_dataset):
    assert small_dataset.get_company("acme").name == "acme Inc"
    assert small_dataset.get_company("missing") is None

    with pytest.raises(CompanyNotFoundError) as exc_info:
        small_dataset.require_company("missing")
    assert exc_info.value.company_id == "missing"
    assert isinstance(exc_info.value, LookupError)


def test_records_are_frozen(small_dataset):
    company = small_dataset.companies[0]
    with pytest.raises(Exception):
        company.current_price = 1.0
    assert isinstance(small_dataset.companies, tuple)


def test_process_dataset_built_once(monkeypatch):
    monkeypatch.setattr(config, "SYNTHETIC_NUM_COMPANIES", 3)
    monkeypatch.setattr(config, "USAGE_HISTORY_DAYS", 5)
    reset_dataset()
    try:
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: get_dataset(), range(16)))

        assert all(result is results[0] for result in results)
        assert len(results[0].companies) == 3
        assert len(results[0].usage_events) == 15
        assert dataset_module._dataset is results[0]
    finally:
        reset_dataset()


def test_injected_rng_controls_ids_and_names():
    first = SyntheticDataGenerator(seed=SEED, base_date=BASE_DATE, rng=random.Random(7))
    second = SyntheticDataGenerator(seed=SEED, base_date=BASE_DATE, rng=random.Random(7))
    other = SyntheticDataGenerator(seed=SEED, base_date=BASE_DATE, rng=random.Random(8))

    companies = first.generate_companies(5)
    assert companies == second.generate_companies(5)
    assert [c.id for c in companies] != [c.id for c in other.generate_companies(5)]
