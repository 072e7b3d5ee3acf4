"""
Immutable in-memory dataset and its one-time process-wide construction.
"""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional, Tuple

from pricing_intel.exceptions import CompanyNotFoundError

from .schemas import CompanySchema, CompetitorPricingSchema, UsageEventSchema

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dataset:
    """Everything the analytics layer reads. Never mutated after creation."""

    companies: Tuple[CompanySchema, ...]
    usage_events: Tuple[UsageEventSchema, ...]
    competitor_pricing: Tuple[CompetitorPricingSchema, ...]
    seed: int
    generated_at: datetime
    usage_days: int
    _company_index: Dict[str, CompanySchema] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self):
        """Coerce collections to tuples and index companies by id."""
        object.__setattr__(self, "companies", tuple(self.companies))
        object.__setattr__(self, "usage_events", tuple(self.usage_events))
        object.__setattr__(self, "competitor_pricing", tuple(self.competitor_pricing))
        object.__setattr__(
            self, "_company_index", {c.id: c for c in self.companies}
        )

    def get_company(self, company_id: str) -> Optional[CompanySchema]:
        """Return the company with this id, or None."""
        return self._company_index.get(company_id)

    def require_company(self, company_id: str) -> CompanySchema:
        """Return the company with this id or raise CompanyNotFoundError."""
        company = self.get_company(company_id)
        if company is None:
            raise CompanyNotFoundError(company_id)
        return company


# ============================================================================
# Process-wide dataset (built once, on first use)
# ============================================================================

_dataset: Optional[Dataset] = None
_dataset_lock = threading.Lock()


def get_dataset() -> Dataset:
    """Return the process dataset, generating it from config on first call."""
    global _dataset

    if _dataset is None:
        with _dataset_lock:
            if _dataset is None:
                from pricing_intel.utils.config import config
                from .generator import SyntheticDataGenerator

                generator = SyntheticDataGenerator(seed=config.SYNTHETIC_DATA_SEED)
                _dataset = generator.generate_all(
                    num_companies=config.SYNTHETIC_NUM_COMPANIES,
                    usage_days=config.USAGE_HISTORY_DAYS,
                )
                logger.info(
                    f"✓ Dataset initialized (seed={_dataset.seed}, "
                    f"{len(_dataset.companies)} companies)"
                )
    return _dataset


def reset_dataset():
    """Drop the process dataset so the next get_dataset() rebuilds it. Tests only."""
    global _dataset

    with _dataset_lock:
        _dataset = None
