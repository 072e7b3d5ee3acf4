"""
Pricing Intelligence Engine - synthetic pricing, revenue-leak and churn-risk
analytics for the demo dashboard.
"""

__version__ = "1.0.0"
