from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from dealer_financing.domain.errors import ValidationError


CENTS = Decimal("0.01")
ZERO = Decimal("0")


def to_cents(amount: Decimal) -> Decimal:
    """Round a monetary amount to cents using ROUND_HALF_UP."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


class CalculationType(str, Enum):
    LOAN = "loan"
    LEASE = "lease"
    BOTH = "both"

    @property
    def includes_loan(self) -> bool:
        return self in (CalculationType.LOAN, CalculationType.BOTH)

    @property
    def includes_lease(self) -> bool:
        return self in (CalculationType.LEASE, CalculationType.BOTH)


# ==============================================================================
# Defaults
# ==============================================================================

DEFAULT_SALES_TAX_RATE = Decimal("8.25")  # Texas combined rate
DEFAULT_TITLE_FEE = Decimal("33")
DEFAULT_REGISTRATION_FEE = Decimal("75")
DEFAULT_DOCUMENTATION_FEE = Decimal("299")
DEFAULT_DEALER_PREP_FEE = Decimal("0")
DEFAULT_LEASE_MILES_PER_YEAR = 12_000

LOAN_APR_OPTIONS: tuple[Decimal, ...] = tuple(
    Decimal(apr) for apr in ("2.9", "3.9", "4.9", "5.9", "6.9", "7.9")
)
LOAN_TERM_OPTIONS: tuple[int, ...] = (36, 48, 60, 72, 84)

LEASE_TERM_OPTIONS: tuple[int, ...] = (24, 36, 48)
LEASE_RESIDUAL_PERCENT_OPTIONS: tuple[Decimal, ...] = tuple(
    Decimal(residual) for residual in ("50", "55", "60", "65")
)
# Roughly 3% to 4.8% APR
LEASE_MONEY_FACTOR_OPTIONS: tuple[Decimal, ...] = tuple(
    Decimal(factor) for factor in ("0.00125", "0.00150", "0.00175", "0.00200")
)

# Industry rule of thumb, not an exact APR conversion
MONEY_FACTOR_TO_APR = Decimal("2400")

# ==============================================================================
# Bounds
# ==============================================================================

LOAN_APR_RANGE = (Decimal("0"), Decimal("50"))
LOAN_TERM_RANGE = (12, 84)
LEASE_TERM_RANGE = (12, 60)
LEASE_RESIDUAL_PERCENT_RANGE = (Decimal("20"), Decimal("80"))
LEASE_MONEY_FACTOR_RANGE = (Decimal("0"), Decimal("1"))
LEASE_MILES_PER_YEAR_RANGE = (5_000, 25_000)
SALES_TAX_RATE_RANGE = (Decimal("0"), Decimal("15"))
MAX_MONETARY_AMOUNT = Decimal("100000000")

MONETARY_FIELDS = (
    "vehicle_price",
    "down_payment",
    "trade_in_value",
    "title_fee",
    "registration_fee",
    "documentation_fee",
    "dealer_prep_fee",
    "extended_warranty",
    "gap_insurance",
    "service_contract",
)


# ==============================================================================
# Request
# ==============================================================================


@dataclass(frozen=True, slots=True)
class FinancingRequest:
    """
    Financing inputs as received from the boundary.

    Optional fields left as None fall back to the defaults above when the
    request is resolved. An explicit zero is a value, not an omission.
    """

    vehicle_price: Decimal
    down_payment: Decimal = Decimal("0")
    trade_in_value: Decimal = Decimal("0")

    loan_apr: Decimal | None = None
    loan_term_months: int | None = None

    lease_term_months: int | None = None
    lease_residual_percent: Decimal | None = None
    lease_money_factor: Decimal | None = None
    lease_miles_per_year: int | None = None

    sales_tax_rate: Decimal | None = None
    title_fee: Decimal | None = None
    registration_fee: Decimal | None = None
    documentation_fee: Decimal | None = None
    dealer_prep_fee: Decimal | None = None

    extended_warranty: Decimal = Decimal("0")
    gap_insurance: Decimal = Decimal("0")
    service_contract: Decimal = Decimal("0")

    calculation_type: CalculationType = CalculationType.BOTH

    def validate(self) -> None:
        """
        Validate every field against its declared bounds.

        All violations are collected and reported together.

        Raises:
            ValidationError: If any field is out of bounds or of the wrong type
        """
        errors: list[dict[str, str]] = []

        for name in MONETARY_FIELDS:
            value = getattr(self, name)
            if value is None and name != "vehicle_price":
                continue
            if not _is_number(value):
                errors.append(_type_error(name, "Must be a decimal amount"))
            elif value < 0:
                errors.append(
                    {"field": name, "message": "Must be greater than or equal to 0", "code": "TOO_SMALL"}
                )
            elif value > MAX_MONETARY_AMOUNT:
                errors.append(
                    {
                        "field": name,
                        "message": f"Must be less than or equal to {MAX_MONETARY_AMOUNT}",
                        "code": "TOO_BIG",
                    }
                )

        _check_range(errors, "loan_apr", self.loan_apr, LOAN_APR_RANGE)
        _check_range(errors, "loan_term_months", self.loan_term_months, LOAN_TERM_RANGE, integer=True)
        _check_range(errors, "lease_term_months", self.lease_term_months, LEASE_TERM_RANGE, integer=True)
        _check_range(
            errors, "lease_residual_percent", self.lease_residual_percent, LEASE_RESIDUAL_PERCENT_RANGE
        )
        _check_range(errors, "lease_money_factor", self.lease_money_factor, LEASE_MONEY_FACTOR_RANGE)
        _check_range(
            errors,
            "lease_miles_per_year",
            self.lease_miles_per_year,
            LEASE_MILES_PER_YEAR_RANGE,
            integer=True,
        )
        _check_range(errors, "sales_tax_rate", self.sales_tax_rate, SALES_TAX_RATE_RANGE)

        if not isinstance(self.calculation_type, CalculationType):
            errors.append(_type_error("calculation_type", "Must be one of: loan, lease, both"))

        if errors:
            raise ValidationError(errors=errors)

    def resolve(self) -> ResolvedFinancingTerms:
        """Apply every default once. Assumes the request has been validated."""
        return ResolvedFinancingTerms(
            vehicle_price=Decimal(self.vehicle_price),
            down_payment=_or_default(self.down_payment, ZERO),
            trade_in_value=_or_default(self.trade_in_value, ZERO),
            loan_aprs=_single_or(self.loan_apr, LOAN_APR_OPTIONS),
            loan_terms=_single_or(self.loan_term_months, LOAN_TERM_OPTIONS),
            lease_terms=_single_or(self.lease_term_months, LEASE_TERM_OPTIONS),
            lease_residual_percents=_single_or(
                self.lease_residual_percent, LEASE_RESIDUAL_PERCENT_OPTIONS
            ),
            lease_money_factors=_single_or(self.lease_money_factor, LEASE_MONEY_FACTOR_OPTIONS),
            lease_miles_per_year=_or_default(self.lease_miles_per_year, DEFAULT_LEASE_MILES_PER_YEAR),
            sales_tax_rate=_or_default(self.sales_tax_rate, DEFAULT_SALES_TAX_RATE),
            title_fee=_or_default(self.title_fee, DEFAULT_TITLE_FEE),
            registration_fee=_or_default(self.registration_fee, DEFAULT_REGISTRATION_FEE),
            documentation_fee=_or_default(self.documentation_fee, DEFAULT_DOCUMENTATION_FEE),
            dealer_prep_fee=_or_default(self.dealer_prep_fee, DEFAULT_DEALER_PREP_FEE),
            extended_warranty=_or_default(self.extended_warranty, ZERO),
            gap_insurance=_or_default(self.gap_insurance, ZERO),
            service_contract=_or_default(self.service_contract, ZERO),
            calculation_type=self.calculation_type,
        )


@dataclass(frozen=True, slots=True)
class ResolvedFinancingTerms:
    """Financing inputs with all defaults applied and sweeps expanded."""

    vehicle_price: Decimal
    down_payment: Decimal
    trade_in_value: Decimal
    loan_aprs: tuple[Decimal, ...]
    loan_terms: tuple[int, ...]
    lease_terms: tuple[int, ...]
    lease_residual_percents: tuple[Decimal, ...]
    lease_money_factors: tuple[Decimal, ...]
    lease_miles_per_year: int
    sales_tax_rate: Decimal
    title_fee: Decimal
    registration_fee: Decimal
    documentation_fee: Decimal
    dealer_prep_fee: Decimal
    extended_warranty: Decimal
    gap_insurance: Decimal
    service_contract: Decimal
    calculation_type: CalculationType

    @property
    def total_fees(self) -> Decimal:
        return self.title_fee + self.registration_fee + self.documentation_fee + self.dealer_prep_fee

    @property
    def additional_products(self) -> Decimal:
        return self.extended_warranty + self.gap_insurance + self.service_contract


def _is_number(value: object) -> bool:
    # Floats are rejected so binary rounding never reaches the calculator
    if isinstance(value, Decimal):
        return value.is_finite()
    return isinstance(value, int) and not isinstance(value, bool)


def _type_error(name: str, message: str) -> dict[str, str]:
    return {"field": name, "message": message, "code": "INVALID_TYPE"}


def _check_range(
    errors: list[dict[str, str]],
    name: str,
    value: object,
    bounds: tuple,
    integer: bool = False,
) -> None:
    if value is None:
        return
    if integer and (not isinstance(value, int) or isinstance(value, bool)):
        errors.append(_type_error(name, "Must be a whole number"))
        return
    if not _is_number(value):
        errors.append(_type_error(name, "Must be a decimal number"))
        return

    low, high = bounds
    if value < low:
        errors.append(
            {"field": name, "message": f"Must be greater than or equal to {low}", "code": "TOO_SMALL"}
        )
    elif value > high:
        errors.append(
            {"field": name, "message": f"Must be less than or equal to {high}", "code": "TOO_BIG"}
        )


def _single_or(value, options: tuple) -> tuple:
    if value is None:
        return options
    return (Decimal(value) if isinstance(options[0], Decimal) else value,)


def _or_default(value, default):
    if value is None:
        return default
    return Decimal(value) if isinstance(default, Decimal) else value


# ==============================================================================
# Results
# ==============================================================================


@dataclass(frozen=True, slots=True)
class LoanPayment:
    monthly_payment: Decimal
    total_payments: Decimal
    total_interest: Decimal


@dataclass(frozen=True, slots=True)
class LeasePayment:
    monthly_payment: Decimal
    total_payments: Decimal
    residual_value: Decimal
    depreciation: Decimal


@dataclass(frozen=True, slots=True)
class VehicleDetails:
    vehicle_price: Decimal
    down_payment: Decimal
    trade_in_value: Decimal
    net_trade_position: Decimal


@dataclass(frozen=True, slots=True)
class TaxesAndFees:
    sales_tax_rate: Decimal
    sales_tax_amount: Decimal
    title_fee: Decimal
    registration_fee: Decimal
    documentation_fee: Decimal
    dealer_prep_fee: Decimal
    extended_warranty: Decimal
    gap_insurance: Decimal
    service_contract: Decimal
    total_fees: Decimal
    total_taxes_fees: Decimal
    additional_products: Decimal
    total_additional_costs: Decimal


@dataclass(frozen=True, slots=True)
class FinancingSummary:
    gross_amount: Decimal
    total_down_trade: Decimal
    net_amount_to_finance: Decimal


@dataclass(frozen=True, slots=True)
class LoanOption:
    apr: Decimal
    term_months: int
    monthly_payment: Decimal
    total_payments: Decimal
    total_interest: Decimal
    total_cost: Decimal


@dataclass(frozen=True, slots=True)
class LeaseOption:
    term_months: int
    residual_percent: Decimal
    money_factor: Decimal
    equivalent_apr: Decimal  # approximate, money_factor * 2400
    monthly_payment: Decimal
    total_payments: Decimal
    residual_value: Decimal
    depreciation: Decimal
    miles_per_year: int
    total_cost_with_fees: Decimal


@dataclass(frozen=True, slots=True)
class LoanComparison:
    best_monthly_payment: Decimal
    best_apr: Decimal
    best_term: int
    total_cost: Decimal
    ownership: str = "You own the vehicle"


@dataclass(frozen=True, slots=True)
class LeaseComparison:
    best_monthly_payment: Decimal
    best_term: int
    total_cost: Decimal
    residual_value: Decimal
    ownership: str = "Return or purchase at lease end"


@dataclass(frozen=True, slots=True)
class Savings:
    monthly_difference: Decimal
    total_cost_difference: Decimal
    recommendation: str


@dataclass(frozen=True, slots=True)
class Comparison:
    loan: LoanComparison
    lease: LeaseComparison
    savings: Savings


@dataclass(frozen=True, slots=True)
class PaymentBreakdown:
    cash_due_at_signing: Decimal
    first_payment: Decimal
    monthly_payment_includes: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class FinancingResult:
    calculation_type: CalculationType
    vehicle_details: VehicleDetails
    taxes_and_fees: TaxesAndFees
    financing_summary: FinancingSummary
    payment_breakdown: PaymentBreakdown
    loan_options: tuple[LoanOption, ...] | None = None
    lease_options: tuple[LeaseOption, ...] | None = None
    comparison: Comparison | None = None
