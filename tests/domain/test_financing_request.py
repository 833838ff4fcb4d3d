"""Tests for FinancingRequest validation and default resolution."""

from decimal import Decimal

import pytest

from dealer_financing.domain.errors import ValidationError
from dealer_financing.domain.financing import (
    LEASE_MONEY_FACTOR_OPTIONS,
    LEASE_RESIDUAL_PERCENT_OPTIONS,
    LEASE_TERM_OPTIONS,
    LOAN_APR_OPTIONS,
    LOAN_TERM_OPTIONS,
    MAX_MONETARY_AMOUNT,
    CalculationType,
    FinancingRequest,
    to_cents,
)


class TestToCents:
    def test_rounds_half_up(self) -> None:
        assert to_cents(Decimal("1.005")) == Decimal("1.01")
        assert to_cents(Decimal("2.675")) == Decimal("2.68")

    def test_rounds_negative_half_away_from_zero(self) -> None:
        assert to_cents(Decimal("-1.005")) == Decimal("-1.01")

    def test_pads_whole_amounts(self) -> None:
        assert str(to_cents(Decimal("250"))) == "250.00"


class TestValidate:
    def test_accepts_minimal_request(self) -> None:
        FinancingRequest(vehicle_price=Decimal("30000")).validate()

    def test_accepts_zero_vehicle_price(self) -> None:
        FinancingRequest(vehicle_price=Decimal("0")).validate()

    def test_accepts_integer_amounts(self) -> None:
        FinancingRequest(vehicle_price=30000, down_payment=3000).validate()

    def test_accepts_values_on_every_bound(self) -> None:
        FinancingRequest(
            vehicle_price=Decimal("1"),
            loan_apr=Decimal("50"),
            loan_term_months=12,
            lease_term_months=60,
            lease_residual_percent=Decimal("20"),
            lease_money_factor=Decimal("1"),
            lease_miles_per_year=25000,
            sales_tax_rate=Decimal("15"),
        ).validate()

    def test_rejects_negative_vehicle_price(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            FinancingRequest(vehicle_price=Decimal("-100")).validate()

        error = exc_info.value
        assert error.message == "Validation failed"
        assert error.errors == [
            {
                "field": "vehicle_price",
                "message": "Must be greater than or equal to 0",
                "code": "TOO_SMALL",
            }
        ]

    def test_rejects_missing_vehicle_price(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            FinancingRequest(vehicle_price=None).validate()  # type: ignore[arg-type]

        assert exc_info.value.fields == ["vehicle_price"]

    def test_rejects_float_amounts(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            FinancingRequest(vehicle_price=30000.0).validate()  # type: ignore[arg-type]

        assert exc_info.value.errors[0]["code"] == "INVALID_TYPE"

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("loan_apr", Decimal("50.01")),
            ("loan_apr", Decimal("-0.1")),
            ("loan_term_months", 11),
            ("loan_term_months", 85),
            ("lease_term_months", 61),
            ("lease_residual_percent", Decimal("19")),
            ("lease_residual_percent", Decimal("81")),
            ("lease_money_factor", Decimal("1.5")),
            ("lease_miles_per_year", 4999),
            ("lease_miles_per_year", 25001),
            ("sales_tax_rate", Decimal("15.5")),
            ("title_fee", Decimal("-1")),
            ("gap_insurance", Decimal("-0.01")),
        ],
    )
    def test_rejects_out_of_bounds_field(self, field: str, value: object) -> None:
        request = FinancingRequest(vehicle_price=Decimal("30000"), **{field: value})

        with pytest.raises(ValidationError) as exc_info:
            request.validate()

        assert exc_info.value.fields == [field]

    def test_rejects_amount_above_ceiling(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            FinancingRequest(vehicle_price=Decimal("1E+27")).validate()

        assert exc_info.value.errors == [
            {
                "field": "vehicle_price",
                "message": "Must be less than or equal to 100000000",
                "code": "TOO_BIG",
            }
        ]

    def test_accepts_amount_on_ceiling(self) -> None:
        FinancingRequest(vehicle_price=MAX_MONETARY_AMOUNT, trade_in_value=MAX_MONETARY_AMOUNT).validate()

    @pytest.mark.parametrize("value", [Decimal("NaN"), Decimal("Infinity"), Decimal("-Infinity")])
    def test_rejects_non_finite_amounts(self, value: Decimal) -> None:
        with pytest.raises(ValidationError) as exc_info:
            FinancingRequest(vehicle_price=value).validate()

        assert exc_info.value.errors[0]["code"] == "INVALID_TYPE"

    def test_rejects_fractional_term(self) -> None:
        request = FinancingRequest(vehicle_price=Decimal("30000"), loan_term_months=Decimal("36.5"))  # type: ignore[arg-type]

        with pytest.raises(ValidationError) as exc_info:
            request.validate()

        assert exc_info.value.errors[0]["message"] == "Must be a whole number"

    def test_rejects_unknown_calculation_type(self) -> None:
        request = FinancingRequest(vehicle_price=Decimal("30000"), calculation_type="cash")  # type: ignore[arg-type]

        with pytest.raises(ValidationError) as exc_info:
            request.validate()

        assert exc_info.value.fields == ["calculation_type"]

    def test_collects_every_violation(self) -> None:
        request = FinancingRequest(
            vehicle_price=Decimal("-1"),
            down_payment=Decimal("-1"),
            loan_term_months=100,
            sales_tax_rate=Decimal("20"),
        )

        with pytest.raises(ValidationError) as exc_info:
            request.validate()

        assert exc_info.value.fields == [
            "vehicle_price",
            "down_payment",
            "loan_term_months",
            "sales_tax_rate",
        ]


class TestResolve:
    def test_applies_defaults_to_omitted_fields(self) -> None:
        terms = FinancingRequest(vehicle_price=Decimal("30000")).resolve()

        assert terms.sales_tax_rate == Decimal("8.25")
        assert terms.title_fee == Decimal("33")
        assert terms.registration_fee == Decimal("75")
        assert terms.documentation_fee == Decimal("299")
        assert terms.dealer_prep_fee == Decimal("0")
        assert terms.lease_miles_per_year == 12000
        assert terms.total_fees == Decimal("407")
        assert terms.additional_products == Decimal("0")
        assert terms.calculation_type is CalculationType.BOTH

    def test_expands_sweeps_when_parameters_are_omitted(self) -> None:
        terms = FinancingRequest(vehicle_price=Decimal("30000")).resolve()

        assert terms.loan_aprs == LOAN_APR_OPTIONS
        assert terms.loan_terms == LOAN_TERM_OPTIONS
        assert terms.lease_terms == LEASE_TERM_OPTIONS
        assert terms.lease_residual_percents == LEASE_RESIDUAL_PERCENT_OPTIONS
        assert terms.lease_money_factors == LEASE_MONEY_FACTOR_OPTIONS

    def test_requested_parameters_replace_sweeps(self) -> None:
        terms = FinancingRequest(
            vehicle_price=Decimal("30000"),
            loan_apr=Decimal("4.5"),
            loan_term_months=48,
            lease_term_months=36,
            lease_residual_percent=Decimal("58"),
            lease_money_factor=Decimal("0.0021"),
        ).resolve()

        assert terms.loan_aprs == (Decimal("4.5"),)
        assert terms.loan_terms == (48,)
        assert terms.lease_terms == (36,)
        assert terms.lease_residual_percents == (Decimal("58"),)
        assert terms.lease_money_factors == (Decimal("0.0021"),)

    def test_explicit_zero_is_kept(self) -> None:
        terms = FinancingRequest(
            vehicle_price=Decimal("30000"),
            sales_tax_rate=Decimal("0"),
            documentation_fee=Decimal("0"),
            loan_apr=Decimal("0"),
        ).resolve()

        assert terms.sales_tax_rate == Decimal("0")
        assert terms.documentation_fee == Decimal("0")
        assert terms.loan_aprs == (Decimal("0"),)

    def test_integer_amounts_become_decimals(self) -> None:
        terms = FinancingRequest(vehicle_price=30000, down_payment=3000, title_fee=40).resolve()

        assert isinstance(terms.vehicle_price, Decimal)
        assert isinstance(terms.down_payment, Decimal)
        assert terms.title_fee == Decimal("40")
