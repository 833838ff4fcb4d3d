"""Static market-rate reference data shown next to the financing calculator."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class CreditTierRate:
    min_apr: Decimal
    max_apr: Decimal
    terms: tuple[int, ...]


@dataclass(frozen=True, slots=True)
class LeaseSegmentRate:
    money_factor_range: str
    residual_range: str


@dataclass(frozen=True, slots=True)
class StateFeeSchedule:
    sales_tax_rate: Decimal
    local_tax_max: Decimal
    title_fee: Decimal
    registration_fee: Decimal
    inspection_fee: Decimal


@dataclass(frozen=True, slots=True)
class FeeRange:
    min: Decimal
    max: Decimal
    average: Decimal


@dataclass(frozen=True, slots=True)
class MarketRates:
    new_vehicle_loans: Mapping[str, CreditTierRate]
    used_vehicle_loans: Mapping[str, CreditTierRate]
    lease_rates: Mapping[str, LeaseSegmentRate]
    state_fees: Mapping[str, StateFeeSchedule]
    typical_dealer_fees: Mapping[str, FeeRange]
    calculation_notes: tuple[str, ...] = ()


def _tier(min_apr: str, max_apr: str, *terms: int) -> CreditTierRate:
    return CreditTierRate(min_apr=Decimal(min_apr), max_apr=Decimal(max_apr), terms=terms)


def _range(low: str, high: str, average: str) -> FeeRange:
    return FeeRange(min=Decimal(low), max=Decimal(high), average=Decimal(average))


CURRENT_MARKET_RATES = MarketRates(
    new_vehicle_loans=MappingProxyType(
        {
            "excellent_credit": _tier("2.9", "4.9", 36, 48, 60, 72),
            "good_credit": _tier("4.9", "6.9", 36, 48, 60, 72),
            "fair_credit": _tier("6.9", "9.9", 36, 48, 60, 72),
            "poor_credit": _tier("9.9", "15.9", 36, 48, 60),
        }
    ),
    used_vehicle_loans=MappingProxyType(
        {
            "excellent_credit": _tier("3.9", "5.9", 36, 48, 60, 72),
            "good_credit": _tier("5.9", "7.9", 36, 48, 60, 72),
            "fair_credit": _tier("7.9", "11.9", 36, 48, 60),
            "poor_credit": _tier("11.9", "18.9", 36, 48, 60),
        }
    ),
    lease_rates=MappingProxyType(
        {
            "luxury_brands": LeaseSegmentRate("0.00100 - 0.00200", "55-65%"),
            "mainstream_brands": LeaseSegmentRate("0.00125 - 0.00250", "50-60%"),
            "electric_vehicles": LeaseSegmentRate("0.00050 - 0.00150", "45-55%"),
        }
    ),
    state_fees=MappingProxyType(
        {
            "texas": StateFeeSchedule(
                sales_tax_rate=Decimal("6.25"),
                local_tax_max=Decimal("2.0"),
                title_fee=Decimal("33"),
                registration_fee=Decimal("75"),
                inspection_fee=Decimal("25"),
            ),
        }
    ),
    typical_dealer_fees=MappingProxyType(
        {
            "documentation_fee": _range("150", "299", "225"),
            "dealer_prep_fee": _range("0", "500", "200"),
            "extended_warranty": _range("1200", "4000", "2500"),
            "gap_insurance": _range("400", "800", "600"),
        }
    ),
    calculation_notes=(
        "All rates subject to credit approval",
        "Actual APR may vary based on creditworthiness",
        "Lease calculations assume standard wear and tear",
        "Additional fees may apply based on location",
        "Payment estimates do not include insurance",
    ),
)
