from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from dealer_financing.domain.financing import MAX_MONETARY_AMOUNT


class FinancingCalculatorRequestDTO(BaseModel):
    """Request payload for calculating loan and lease options.

    Amounts may be sent as JSON numbers or decimal strings.
    """

    vehicle_price: Decimal = Field(
        ge=0, le=MAX_MONETARY_AMOUNT, description="Vehicle price", examples=["30000.00"]
    )
    down_payment: Decimal = Field(
        default=Decimal("0"), ge=0, le=MAX_MONETARY_AMOUNT, description="Cash down payment"
    )
    trade_in_value: Decimal = Field(
        default=Decimal("0"), ge=0, le=MAX_MONETARY_AMOUNT, description="Trade-in credit"
    )

    loan_apr: Decimal | None = Field(
        default=None,
        ge=0,
        le=50,
        description="Loan APR in percent. Omit to compare 2.9% through 7.9%",
    )
    loan_term_months: int | None = Field(
        default=None,
        ge=12,
        le=84,
        description="Loan term in months. Omit to compare 36 through 84",
    )

    lease_term_months: int | None = Field(
        default=None,
        ge=12,
        le=60,
        description="Lease term in months. Omit to compare 24, 36 and 48",
    )
    lease_residual_percent: Decimal | None = Field(
        default=None,
        ge=20,
        le=80,
        description="Residual value as percent of price. Omit to compare 50% through 65%",
    )
    lease_money_factor: Decimal | None = Field(
        default=None,
        ge=0,
        le=1,
        description="Lease money factor. Omit to compare 0.00125 through 0.00200",
    )
    lease_miles_per_year: int | None = Field(
        default=None,
        ge=5000,
        le=25000,
        description="Annual mileage allowance (defaults to 12000)",
    )

    sales_tax_rate: Decimal | None = Field(
        default=None, ge=0, le=15, description="Sales tax in percent (defaults to 8.25)"
    )
    title_fee: Decimal | None = Field(
        default=None, ge=0, le=MAX_MONETARY_AMOUNT, description="Defaults to 33"
    )
    registration_fee: Decimal | None = Field(
        default=None, ge=0, le=MAX_MONETARY_AMOUNT, description="Defaults to 75"
    )
    documentation_fee: Decimal | None = Field(
        default=None, ge=0, le=MAX_MONETARY_AMOUNT, description="Defaults to 299"
    )
    dealer_prep_fee: Decimal | None = Field(
        default=None, ge=0, le=MAX_MONETARY_AMOUNT, description="Defaults to 0"
    )

    extended_warranty: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_MONETARY_AMOUNT)
    gap_insurance: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_MONETARY_AMOUNT)
    service_contract: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_MONETARY_AMOUNT)

    calculation_type: Literal["loan", "lease", "both"] = Field(
        default="both",
        description="Which option matrices to compute",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "vehicle_price": 30000,
                "down_payment": 3000,
                "loan_apr": 5.9,
                "loan_term_months": 60,
                "calculation_type": "loan",
            }
        }
    )


class VehicleDetailsDTO(BaseModel):
    vehicle_price: str
    down_payment: str
    trade_in_value: str
    net_trade_position: str = Field(description="trade_in_value - down_payment")


class TaxesAndFeesDTO(BaseModel):
    sales_tax_rate: str
    sales_tax_amount: str
    title_fee: str
    registration_fee: str
    documentation_fee: str
    dealer_prep_fee: str
    extended_warranty: str
    gap_insurance: str
    service_contract: str
    total_fees: str
    total_taxes_fees: str
    additional_products: str
    total_additional_costs: str


class FinancingSummaryDTO(BaseModel):
    gross_amount: str
    total_down_trade: str
    net_amount_to_finance: str


class LoanOptionDTO(BaseModel):
    apr: str
    term_months: int
    monthly_payment: str
    total_payments: str
    total_interest: str
    total_cost: str


class LeaseOptionDTO(BaseModel):
    term_months: int
    residual_percent: str
    money_factor: str
    equivalent_apr: str = Field(description="Approximation: money_factor x 2400")
    monthly_payment: str
    total_payments: str
    residual_value: str
    depreciation: str
    miles_per_year: int
    total_cost_with_fees: str


class LoanComparisonDTO(BaseModel):
    best_monthly_payment: str
    best_apr: str
    best_term: int
    total_cost: str
    ownership: str


class LeaseComparisonDTO(BaseModel):
    best_monthly_payment: str
    best_term: int
    total_cost: str
    residual_value: str
    ownership: str


class SavingsDTO(BaseModel):
    monthly_difference: str
    total_cost_difference: str
    recommendation: str


class ComparisonDTO(BaseModel):
    loan: LoanComparisonDTO
    lease: LeaseComparisonDTO
    savings: SavingsDTO


class PaymentBreakdownDTO(BaseModel):
    cash_due_at_signing: str
    first_payment: str
    monthly_payment_includes: list[str]


class FinancingCalculatorResponseDTO(BaseModel):
    """Response with every computed financing option.

    Monetary values are decimal strings rounded to cents.
    """

    calculation_type: Literal["loan", "lease", "both"]
    timestamp: datetime
    vehicle_details: VehicleDetailsDTO
    taxes_and_fees: TaxesAndFeesDTO
    financing_summary: FinancingSummaryDTO
    loan_options: list[LoanOptionDTO] | None = None
    lease_options: list[LeaseOptionDTO] | None = None
    comparison: ComparisonDTO | None = None
    payment_breakdown: PaymentBreakdownDTO
