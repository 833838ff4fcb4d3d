"""
Dependency injection for FastAPI routes.

Use cases here are stateless, so a single cached instance is shared across
requests. Tests replace them through ``app.dependency_overrides``.
"""

from __future__ import annotations

from functools import lru_cache

from dealer_financing.use_cases.calculate_financing_options import CalculateFinancingOptions
from dealer_financing.use_cases.get_market_rates import GetMarketRates


@lru_cache
def get_calculate_financing_options_use_case() -> CalculateFinancingOptions:
    """
    Factory function that returns the financing calculator use case.

    Returns:
        CalculateFinancingOptions: Shared use case instance
    """
    return CalculateFinancingOptions()


@lru_cache
def get_market_rates_use_case() -> GetMarketRates:
    return GetMarketRates()
