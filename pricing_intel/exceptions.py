"""
Exception types raised by the pricing intelligence engine.
"""


class PricingIntelError(Exception):
    """Base class for all engine errors."""


class CompanyNotFoundError(PricingIntelError, LookupError):
    """Raised when a company id is not present in the dataset."""

    def __init__(self, company_id: str):
        self.company_id = company_id
        super().__init__(f"Company not found: {company_id}")


class EmptyDatasetError(PricingIntelError, ValueError):
    """Raised when an aggregate is requested over an empty company set."""
