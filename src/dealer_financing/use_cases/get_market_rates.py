"""Get market rates use case."""

from __future__ import annotations

from dataclasses import dataclass

from dealer_financing.domain.market_rates import CURRENT_MARKET_RATES, MarketRates


@dataclass(frozen=True, slots=True)
class GetMarketRates:
    """
    Use case for reading the financing reference data.

    The data is static configuration; the use case exists so routes depend on
    a replaceable collaborator instead of a module constant.
    """

    rates: MarketRates = CURRENT_MARKET_RATES

    def execute(self) -> MarketRates:
        return self.rates
