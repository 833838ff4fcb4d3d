from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from dealer_financing.domain.financing import (
    MONEY_FACTOR_TO_APR,
    ZERO,
    CalculationType,
    Comparison,
    FinancingRequest,
    FinancingResult,
    FinancingSummary,
    LeaseComparison,
    LeaseOption,
    LeasePayment,
    LoanComparison,
    LoanOption,
    LoanPayment,
    PaymentBreakdown,
    ResolvedFinancingTerms,
    Savings,
    TaxesAndFees,
    VehicleDetails,
    to_cents,
)

logger = logging.getLogger(__name__)

ONE = Decimal("1")
HUNDRED = Decimal("100")
MONTHS_PER_YEAR = Decimal("12")

LOAN_RECOMMENDATION = "Loan offers better value"
LEASE_RECOMMENDATION = "Lease offers lower payments"


def calculate_loan_payment(principal: Decimal, apr_percent: Decimal, term_months: int) -> LoanPayment:
    """
    Amortized loan payment.

    M = P * r(1+r)^n / ((1+r)^n - 1), with r = APR / 100 / 12.

    The monthly payment is rounded to cents first and the totals are derived
    from the rounded payment, so total_payments == monthly_payment * term.
    A zero APR is paid off in equal principal installments.
    """
    if apr_percent == 0:
        return LoanPayment(
            monthly_payment=to_cents(principal / term_months),
            total_payments=to_cents(principal),
            total_interest=to_cents(ZERO),
        )

    monthly_rate = apr_percent / HUNDRED / MONTHS_PER_YEAR
    factor = (ONE + monthly_rate) ** term_months
    monthly_payment = to_cents(principal * (monthly_rate * factor) / (factor - ONE))

    total_payments = monthly_payment * term_months
    total_interest = total_payments - principal

    return LoanPayment(
        monthly_payment=monthly_payment,
        total_payments=to_cents(total_payments),
        total_interest=to_cents(total_interest),
    )


def calculate_lease_payment(
    vehicle_price: Decimal,
    residual_percent: Decimal,
    money_factor: Decimal,
    term_months: int,
    down_payment: Decimal = ZERO,
) -> LeasePayment:
    """
    Standard lease payment: depreciation fee plus rent charge.

    Depreciation is not floored. A residual plus down payment above the
    price yields a negative depreciation and a reduced payment.
    """
    residual_value = vehicle_price * residual_percent / HUNDRED
    depreciation = vehicle_price - residual_value - down_payment

    depreciation_payment = depreciation / term_months
    finance_payment = (vehicle_price + residual_value) * money_factor
    monthly_payment = to_cents(depreciation_payment + finance_payment)

    return LeasePayment(
        monthly_payment=monthly_payment,
        total_payments=to_cents(monthly_payment * term_months + down_payment),
        residual_value=to_cents(residual_value),
        depreciation=to_cents(depreciation),
    )


@dataclass(frozen=True, slots=True)
class CalculateFinancingOptions:
    """
    Compute loan and lease options for a vehicle purchase.

    Rounding policy:
    - Every monetary output, echoed inputs included, is rounded to cents (ROUND_HALF_UP)
    - Derived totals are built from already rounded components
    - Percentages and money factors are echoed as given

    Option ordering:
    - Loans: APR-major, term-minor
    - Leases: term, then residual percent, then money factor
    - Comparison picks the first option with the lowest monthly payment
    """

    def execute(self, req: FinancingRequest) -> FinancingResult:
        req.validate()
        terms = req.resolve()

        taxes_and_fees = self._taxes_and_fees(terms)
        summary = self._financing_summary(terms, taxes_and_fees)

        loan_options = None
        if terms.calculation_type.includes_loan:
            loan_options = self._loan_options(terms, summary.net_amount_to_finance)

        lease_options = None
        if terms.calculation_type.includes_lease:
            lease_options = self._lease_options(terms, taxes_and_fees.total_taxes_fees)

        comparison = None
        if terms.calculation_type is CalculationType.BOTH and loan_options and lease_options:
            comparison = self._compare(loan_options, lease_options)

        logger.info(
            "Financing options calculated",
            extra={
                "calculation_type": terms.calculation_type.value,
                "net_amount_to_finance": str(summary.net_amount_to_finance),
                "loan_options": len(loan_options or ()),
                "lease_options": len(lease_options or ()),
            },
        )

        return FinancingResult(
            calculation_type=terms.calculation_type,
            vehicle_details=VehicleDetails(
                vehicle_price=to_cents(terms.vehicle_price),
                down_payment=to_cents(terms.down_payment),
                trade_in_value=to_cents(terms.trade_in_value),
                net_trade_position=to_cents(terms.trade_in_value - terms.down_payment),
            ),
            taxes_and_fees=taxes_and_fees,
            financing_summary=summary,
            loan_options=loan_options,
            lease_options=lease_options,
            comparison=comparison,
            payment_breakdown=self._payment_breakdown(terms, loan_options, lease_options),
        )

    def _taxes_and_fees(self, terms: ResolvedFinancingTerms) -> TaxesAndFees:
        sales_tax_amount = to_cents(terms.vehicle_price * terms.sales_tax_rate / HUNDRED)
        total_fees = to_cents(terms.total_fees)
        total_taxes_fees = sales_tax_amount + total_fees
        additional_products = to_cents(terms.additional_products)

        return TaxesAndFees(
            sales_tax_rate=terms.sales_tax_rate,
            sales_tax_amount=sales_tax_amount,
            title_fee=to_cents(terms.title_fee),
            registration_fee=to_cents(terms.registration_fee),
            documentation_fee=to_cents(terms.documentation_fee),
            dealer_prep_fee=to_cents(terms.dealer_prep_fee),
            extended_warranty=to_cents(terms.extended_warranty),
            gap_insurance=to_cents(terms.gap_insurance),
            service_contract=to_cents(terms.service_contract),
            total_fees=total_fees,
            total_taxes_fees=total_taxes_fees,
            additional_products=additional_products,
            total_additional_costs=total_taxes_fees + additional_products,
        )

    def _financing_summary(
        self, terms: ResolvedFinancingTerms, taxes_and_fees: TaxesAndFees
    ) -> FinancingSummary:
        gross_amount = to_cents(
            terms.vehicle_price + taxes_and_fees.total_taxes_fees + taxes_and_fees.additional_products
        )
        total_down_trade = to_cents(terms.down_payment + terms.trade_in_value)

        return FinancingSummary(
            gross_amount=gross_amount,
            total_down_trade=total_down_trade,
            net_amount_to_finance=gross_amount - total_down_trade,
        )

    def _loan_options(
        self, terms: ResolvedFinancingTerms, principal: Decimal
    ) -> tuple[LoanOption, ...]:
        options = []
        for apr in terms.loan_aprs:
            for term_months in terms.loan_terms:
                payment = calculate_loan_payment(principal, apr, term_months)
                options.append(
                    LoanOption(
                        apr=apr,
                        term_months=term_months,
                        monthly_payment=payment.monthly_payment,
                        total_payments=payment.total_payments,
                        total_interest=payment.total_interest,
                        total_cost=to_cents(
                            payment.total_payments + terms.down_payment + terms.trade_in_value
                        ),
                    )
                )
        return tuple(options)

    def _lease_options(
        self, terms: ResolvedFinancingTerms, total_taxes_fees: Decimal
    ) -> tuple[LeaseOption, ...]:
        options = []
        for term_months in terms.lease_terms:
            for residual_percent in terms.lease_residual_percents:
                for money_factor in terms.lease_money_factors:
                    payment = calculate_lease_payment(
                        terms.vehicle_price,
                        residual_percent,
                        money_factor,
                        term_months,
                        terms.down_payment,
                    )
                    if payment.depreciation < 0:
                        logger.warning(
                            "Lease residual and down payment exceed vehicle price",
                            extra={
                                "term_months": term_months,
                                "residual_percent": str(residual_percent),
                                "depreciation": str(payment.depreciation),
                            },
                        )
                    options.append(
                        LeaseOption(
                            term_months=term_months,
                            residual_percent=residual_percent,
                            money_factor=money_factor,
                            equivalent_apr=to_cents(money_factor * MONEY_FACTOR_TO_APR),
                            monthly_payment=payment.monthly_payment,
                            total_payments=payment.total_payments,
                            residual_value=payment.residual_value,
                            depreciation=payment.depreciation,
                            miles_per_year=terms.lease_miles_per_year,
                            total_cost_with_fees=payment.total_payments + total_taxes_fees,
                        )
                    )
        return tuple(options)

    def _compare(
        self, loan_options: tuple[LoanOption, ...], lease_options: tuple[LeaseOption, ...]
    ) -> Comparison:
        # min() keeps the first of equal elements
        best_loan = min(loan_options, key=lambda option: option.monthly_payment)
        best_lease = min(lease_options, key=lambda option: option.monthly_payment)

        if best_loan.monthly_payment < best_lease.monthly_payment:
            recommendation = LOAN_RECOMMENDATION
        else:
            recommendation = LEASE_RECOMMENDATION

        return Comparison(
            loan=LoanComparison(
                best_monthly_payment=best_loan.monthly_payment,
                best_apr=best_loan.apr,
                best_term=best_loan.term_months,
                total_cost=best_loan.total_cost,
            ),
            lease=LeaseComparison(
                best_monthly_payment=best_lease.monthly_payment,
                best_term=best_lease.term_months,
                total_cost=best_lease.total_cost_with_fees,
                residual_value=best_lease.residual_value,
            ),
            savings=Savings(
                monthly_difference=best_loan.monthly_payment - best_lease.monthly_payment,
                total_cost_difference=best_loan.total_cost - best_lease.total_cost_with_fees,
                recommendation=recommendation,
            ),
        )

    def _payment_breakdown(
        self,
        terms: ResolvedFinancingTerms,
        loan_options: tuple[LoanOption, ...] | None,
        lease_options: tuple[LeaseOption, ...] | None,
    ) -> PaymentBreakdown:
        lease_only = terms.calculation_type is CalculationType.LEASE

        if lease_only and lease_options:
            first_payment = lease_options[0].monthly_payment
        elif loan_options:
            first_payment = loan_options[0].monthly_payment
        else:
            first_payment = to_cents(ZERO)

        return PaymentBreakdown(
            cash_due_at_signing=to_cents(
                terms.down_payment + terms.total_fees + terms.extended_warranty
            ),
            first_payment=first_payment,
            monthly_payment_includes=(
                "Principal and Interest (loan) or Depreciation (lease)",
                "Applicable taxes may be included in payment",
                "GAP coverage typically included" if lease_only else "GAP insurance optional",
            ),
        )
