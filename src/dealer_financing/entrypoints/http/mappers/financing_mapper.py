from __future__ import annotations

from datetime import datetime

from dealer_financing.domain.financing import (
    CalculationType,
    Comparison,
    FinancingRequest,
    FinancingResult,
    LeaseOption,
    LoanOption,
)
from dealer_financing.entrypoints.http.dtos.financing import (
    ComparisonDTO,
    FinancingCalculatorRequestDTO,
    FinancingCalculatorResponseDTO,
    FinancingSummaryDTO,
    LeaseComparisonDTO,
    LeaseOptionDTO,
    LoanComparisonDTO,
    LoanOptionDTO,
    PaymentBreakdownDTO,
    SavingsDTO,
    TaxesAndFeesDTO,
    VehicleDetailsDTO,
)


class FinancingMapper:
    """Maps between REST DTOs and domain models for the financing calculator."""

    @staticmethod
    def to_domain_request(dto: FinancingCalculatorRequestDTO) -> FinancingRequest:
        """
        Converts request DTO to domain FinancingRequest.

        Pydantic has already parsed amounts into Decimal, so this is a
        field-for-field copy plus the calculation type enum.

        Args:
            dto: Validated request DTO

        Returns:
            FinancingRequest with Decimal monetary values
        """
        return FinancingRequest(
            vehicle_price=dto.vehicle_price,
            down_payment=dto.down_payment,
            trade_in_value=dto.trade_in_value,
            loan_apr=dto.loan_apr,
            loan_term_months=dto.loan_term_months,
            lease_term_months=dto.lease_term_months,
            lease_residual_percent=dto.lease_residual_percent,
            lease_money_factor=dto.lease_money_factor,
            lease_miles_per_year=dto.lease_miles_per_year,
            sales_tax_rate=dto.sales_tax_rate,
            title_fee=dto.title_fee,
            registration_fee=dto.registration_fee,
            documentation_fee=dto.documentation_fee,
            dealer_prep_fee=dto.dealer_prep_fee,
            extended_warranty=dto.extended_warranty,
            gap_insurance=dto.gap_insurance,
            service_contract=dto.service_contract,
            calculation_type=CalculationType(dto.calculation_type),
        )

    @staticmethod
    def to_response(result: FinancingResult, timestamp: datetime) -> FinancingCalculatorResponseDTO:
        """
        Converts domain FinancingResult to response DTO.

        Handles Decimal → string conversion at the boundary.

        Args:
            result: Domain financing result with Decimal values
            timestamp: Moment the response was generated

        Returns:
            Response DTO with string monetary values
        """
        vehicle = result.vehicle_details
        fees = result.taxes_and_fees
        summary = result.financing_summary
        breakdown = result.payment_breakdown

        return FinancingCalculatorResponseDTO(
            calculation_type=result.calculation_type.value,
            timestamp=timestamp,
            vehicle_details=VehicleDetailsDTO(
                vehicle_price=str(vehicle.vehicle_price),
                down_payment=str(vehicle.down_payment),
                trade_in_value=str(vehicle.trade_in_value),
                net_trade_position=str(vehicle.net_trade_position),
            ),
            taxes_and_fees=TaxesAndFeesDTO(
                sales_tax_rate=str(fees.sales_tax_rate),
                sales_tax_amount=str(fees.sales_tax_amount),
                title_fee=str(fees.title_fee),
                registration_fee=str(fees.registration_fee),
                documentation_fee=str(fees.documentation_fee),
                dealer_prep_fee=str(fees.dealer_prep_fee),
                extended_warranty=str(fees.extended_warranty),
                gap_insurance=str(fees.gap_insurance),
                service_contract=str(fees.service_contract),
                total_fees=str(fees.total_fees),
                total_taxes_fees=str(fees.total_taxes_fees),
                additional_products=str(fees.additional_products),
                total_additional_costs=str(fees.total_additional_costs),
            ),
            financing_summary=FinancingSummaryDTO(
                gross_amount=str(summary.gross_amount),
                total_down_trade=str(summary.total_down_trade),
                net_amount_to_finance=str(summary.net_amount_to_finance),
            ),
            loan_options=(
                [FinancingMapper._loan_option(option) for option in result.loan_options]
                if result.loan_options is not None
                else None
            ),
            lease_options=(
                [FinancingMapper._lease_option(option) for option in result.lease_options]
                if result.lease_options is not None
                else None
            ),
            comparison=(
                FinancingMapper._comparison(result.comparison)
                if result.comparison is not None
                else None
            ),
            payment_breakdown=PaymentBreakdownDTO(
                cash_due_at_signing=str(breakdown.cash_due_at_signing),
                first_payment=str(breakdown.first_payment),
                monthly_payment_includes=list(breakdown.monthly_payment_includes),
            ),
        )

    @staticmethod
    def _loan_option(option: LoanOption) -> LoanOptionDTO:
        return LoanOptionDTO(
            apr=str(option.apr),
            term_months=option.term_months,
            monthly_payment=str(option.monthly_payment),
            total_payments=str(option.total_payments),
            total_interest=str(option.total_interest),
            total_cost=str(option.total_cost),
        )

    @staticmethod
    def _lease_option(option: LeaseOption) -> LeaseOptionDTO:
        return LeaseOptionDTO(
            term_months=option.term_months,
            residual_percent=str(option.residual_percent),
            money_factor=str(option.money_factor),
            equivalent_apr=str(option.equivalent_apr),
            monthly_payment=str(option.monthly_payment),
            total_payments=str(option.total_payments),
            residual_value=str(option.residual_value),
            depreciation=str(option.depreciation),
            miles_per_year=option.miles_per_year,
            total_cost_with_fees=str(option.total_cost_with_fees),
        )

    @staticmethod
    def _comparison(comparison: Comparison) -> ComparisonDTO:
        return ComparisonDTO(
            loan=LoanComparisonDTO(
                best_monthly_payment=str(comparison.loan.best_monthly_payment),
                best_apr=str(comparison.loan.best_apr),
                best_term=comparison.loan.best_term,
                total_cost=str(comparison.loan.total_cost),
                ownership=comparison.loan.ownership,
            ),
            lease=LeaseComparisonDTO(
                best_monthly_payment=str(comparison.lease.best_monthly_payment),
                best_term=comparison.lease.best_term,
                total_cost=str(comparison.lease.total_cost),
                residual_value=str(comparison.lease.residual_value),
                ownership=comparison.lease.ownership,
            ),
            savings=SavingsDTO(
                monthly_difference=str(comparison.savings.monthly_difference),
                total_cost_difference=str(comparison.savings.total_cost_difference),
                recommendation=comparison.savings.recommendation,
            ),
        )
