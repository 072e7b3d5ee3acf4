"""Shared utilities: configuration."""

from pricing_intel.utils.config import Config, config

__all__ = [
    'Config',
    'config',
]
