from datetime import datetime

from pydantic import BaseModel, Field


class CreditTierRateDTO(BaseModel):
    min_apr: str
    max_apr: str
    terms: list[int]


class LeaseSegmentRateDTO(BaseModel):
    money_factor_range: str
    residual_range: str


class CurrentRatesDTO(BaseModel):
    new_vehicle_loans: dict[str, CreditTierRateDTO]
    used_vehicle_loans: dict[str, CreditTierRateDTO]
    lease_rates: dict[str, LeaseSegmentRateDTO]


class StateFeeScheduleDTO(BaseModel):
    sales_tax_rate: str
    local_tax_max: str
    title_fee: str
    registration_fee: str
    inspection_fee: str


class FeeRangeDTO(BaseModel):
    min: str
    max: str
    average: str


class StandardFeesDTO(BaseModel):
    states: dict[str, StateFeeScheduleDTO] = Field(description="Fee schedules keyed by state")
    typical_dealer_fees: dict[str, FeeRangeDTO]


class MarketRatesResponseDTO(BaseModel):
    """Reference rates, fee schedules and disclosure notes."""

    current_rates: CurrentRatesDTO
    standard_fees: StandardFeesDTO
    calculation_notes: list[str]
    last_updated: datetime
