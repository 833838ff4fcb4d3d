from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime

from dealer_financing.domain.market_rates import CreditTierRate, MarketRates
from dealer_financing.entrypoints.http.dtos.market_rates import (
    CreditTierRateDTO,
    CurrentRatesDTO,
    FeeRangeDTO,
    LeaseSegmentRateDTO,
    MarketRatesResponseDTO,
    StandardFeesDTO,
    StateFeeScheduleDTO,
)


class MarketRatesMapper:
    """Maps market-rate reference data to its REST representation."""

    @staticmethod
    def to_response(rates: MarketRates, last_updated: datetime) -> MarketRatesResponseDTO:
        return MarketRatesResponseDTO(
            current_rates=CurrentRatesDTO(
                new_vehicle_loans=MarketRatesMapper._tiers(rates.new_vehicle_loans),
                used_vehicle_loans=MarketRatesMapper._tiers(rates.used_vehicle_loans),
                lease_rates={
                    segment: LeaseSegmentRateDTO(
                        money_factor_range=rate.money_factor_range,
                        residual_range=rate.residual_range,
                    )
                    for segment, rate in rates.lease_rates.items()
                },
            ),
            standard_fees=StandardFeesDTO(
                states={
                    state: StateFeeScheduleDTO(
                        sales_tax_rate=str(schedule.sales_tax_rate),
                        local_tax_max=str(schedule.local_tax_max),
                        title_fee=str(schedule.title_fee),
                        registration_fee=str(schedule.registration_fee),
                        inspection_fee=str(schedule.inspection_fee),
                    )
                    for state, schedule in rates.state_fees.items()
                },
                typical_dealer_fees={
                    fee: FeeRangeDTO(
                        min=str(fee_range.min),
                        max=str(fee_range.max),
                        average=str(fee_range.average),
                    )
                    for fee, fee_range in rates.typical_dealer_fees.items()
                },
            ),
            calculation_notes=list(rates.calculation_notes),
            last_updated=last_updated,
        )

    @staticmethod
    def _tiers(tiers: Mapping[str, CreditTierRate]) -> dict[str, CreditTierRateDTO]:
        return {
            tier: CreditTierRateDTO(
                min_apr=str(rate.min_apr),
                max_apr=str(rate.max_apr),
                terms=list(rate.terms),
            )
            for tier, rate in tiers.items()
        }
