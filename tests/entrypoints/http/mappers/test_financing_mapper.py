"""
Test suite for FinancingMapper.

The mapper only translates between REST DTOs and domain models:
- Request DTO to domain FinancingRequest (Decimal values pass through)
- Domain FinancingResult to response DTO (Decimal to str)
- Sections that were not computed stay None
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from dealer_financing.domain.financing import CalculationType, FinancingRequest, FinancingResult
from dealer_financing.entrypoints.http.dtos.financing import (
    FinancingCalculatorRequestDTO,
    FinancingCalculatorResponseDTO,
)
from dealer_financing.entrypoints.http.mappers.financing_mapper import FinancingMapper
from dealer_financing.use_cases.calculate_financing_options import CalculateFinancingOptions


TIMESTAMP = datetime(2025, 1, 15, 12, 30, tzinfo=timezone.utc)


def _result(**overrides: object) -> FinancingResult:
    fields = {"vehicle_price": Decimal("30000"), "down_payment": Decimal("3000")}
    fields.update(overrides)
    return CalculateFinancingOptions().execute(FinancingRequest(**fields))


# ==============================================================================
# to_domain_request() - DTO → Domain Request
# ==============================================================================


def test_to_domain_request_with_minimal_input() -> None:
    dto = FinancingCalculatorRequestDTO(vehicle_price="30000.00")

    result = FinancingMapper.to_domain_request(dto)

    assert isinstance(result, FinancingRequest)
    assert result.vehicle_price == Decimal("30000.00")
    assert result.down_payment == Decimal("0")
    assert result.trade_in_value == Decimal("0")
    assert result.calculation_type is CalculationType.BOTH


def test_to_domain_request_leaves_omitted_optionals_unset() -> None:
    """Defaults are resolved by the domain, not by the mapper."""
    dto = FinancingCalculatorRequestDTO(vehicle_price=Decimal("30000"))

    result = FinancingMapper.to_domain_request(dto)

    assert result.loan_apr is None
    assert result.loan_term_months is None
    assert result.lease_money_factor is None
    assert result.sales_tax_rate is None
    assert result.documentation_fee is None


def test_to_domain_request_copies_every_field() -> None:
    dto = FinancingCalculatorRequestDTO(
        vehicle_price="42000",
        down_payment="4000",
        trade_in_value="6500.50",
        loan_apr="4.9",
        loan_term_months=72,
        lease_term_months=36,
        lease_residual_percent="58",
        lease_money_factor="0.00175",
        lease_miles_per_year=10000,
        sales_tax_rate="6.25",
        title_fee="33",
        registration_fee="75",
        documentation_fee="150",
        dealer_prep_fee="200",
        extended_warranty="2500",
        gap_insurance="600",
        service_contract="900",
        calculation_type="lease",
    )

    result = FinancingMapper.to_domain_request(dto)

    assert result == FinancingRequest(
        vehicle_price=Decimal("42000"),
        down_payment=Decimal("4000"),
        trade_in_value=Decimal("6500.50"),
        loan_apr=Decimal("4.9"),
        loan_term_months=72,
        lease_term_months=36,
        lease_residual_percent=Decimal("58"),
        lease_money_factor=Decimal("0.00175"),
        lease_miles_per_year=10000,
        sales_tax_rate=Decimal("6.25"),
        title_fee=Decimal("33"),
        registration_fee=Decimal("75"),
        documentation_fee=Decimal("150"),
        dealer_prep_fee=Decimal("200"),
        extended_warranty=Decimal("2500"),
        gap_insurance=Decimal("600"),
        service_contract=Decimal("900"),
        calculation_type=CalculationType.LEASE,
    )


@pytest.mark.parametrize("value", ["loan", "lease", "both"])
def test_to_domain_request_maps_calculation_type(value: str) -> None:
    dto = FinancingCalculatorRequestDTO(vehicle_price="1", calculation_type=value)

    assert FinancingMapper.to_domain_request(dto).calculation_type == CalculationType(value)


# ==============================================================================
# to_response() - Domain Result → Response DTO
# ==============================================================================


def test_to_response_returns_response_dto() -> None:
    response = FinancingMapper.to_response(_result(), timestamp=TIMESTAMP)

    assert isinstance(response, FinancingCalculatorResponseDTO)
    assert response.calculation_type == "both"
    assert response.timestamp == TIMESTAMP


def test_to_response_converts_amounts_to_strings() -> None:
    result = _result()

    response = FinancingMapper.to_response(result, timestamp=TIMESTAMP)

    assert response.vehicle_details.vehicle_price == "30000.00"
    assert response.vehicle_details.down_payment == "3000.00"
    assert response.vehicle_details.net_trade_position == "-3000.00"
    assert response.taxes_and_fees.sales_tax_amount == "2475.00"
    assert response.taxes_and_fees.total_fees == "407.00"
    assert response.taxes_and_fees.documentation_fee == "299.00"
    assert response.financing_summary.net_amount_to_finance == "29882.00"
    assert response.payment_breakdown.cash_due_at_signing == "3407.00"


def test_to_response_preserves_option_order_and_values() -> None:
    result = _result()

    response = FinancingMapper.to_response(result, timestamp=TIMESTAMP)

    assert len(response.loan_options) == len(result.loan_options)
    assert len(response.lease_options) == len(result.lease_options)

    first_loan = result.loan_options[0]
    assert response.loan_options[0].apr == str(first_loan.apr)
    assert response.loan_options[0].term_months == first_loan.term_months
    assert response.loan_options[0].monthly_payment == str(first_loan.monthly_payment)

    last_lease = result.lease_options[-1]
    assert response.lease_options[-1].money_factor == str(last_lease.money_factor)
    assert response.lease_options[-1].equivalent_apr == str(last_lease.equivalent_apr)
    assert response.lease_options[-1].miles_per_year == 12000


def test_to_response_maps_comparison() -> None:
    result = _result()

    response = FinancingMapper.to_response(result, timestamp=TIMESTAMP)

    assert response.comparison is not None
    assert response.comparison.loan.best_monthly_payment == str(
        result.comparison.loan.best_monthly_payment
    )
    assert response.comparison.lease.ownership == "Return or purchase at lease end"
    assert response.comparison.savings.recommendation == result.comparison.savings.recommendation


def test_to_response_leaves_missing_sections_as_none() -> None:
    result = _result(calculation_type=CalculationType.LOAN)

    response = FinancingMapper.to_response(result, timestamp=TIMESTAMP)

    assert response.loan_options is not None
    assert response.lease_options is None
    assert response.comparison is None


def test_to_response_excludes_missing_sections_when_serialized() -> None:
    result = _result(calculation_type=CalculationType.LEASE)

    data = FinancingMapper.to_response(result, timestamp=TIMESTAMP).model_dump(exclude_none=True)

    assert "loan_options" not in data
    assert "comparison" not in data
    assert data["payment_breakdown"]["monthly_payment_includes"][2] == (
        "GAP coverage typically included"
    )
