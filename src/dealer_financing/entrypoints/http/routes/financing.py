from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from dealer_financing.entrypoints.http.dependencies import (
    get_calculate_financing_options_use_case,
    get_market_rates_use_case,
)
from dealer_financing.entrypoints.http.dtos.financing import (
    FinancingCalculatorRequestDTO,
    FinancingCalculatorResponseDTO,
)
from dealer_financing.entrypoints.http.dtos.market_rates import MarketRatesResponseDTO
from dealer_financing.entrypoints.http.error_responses import ErrorResponse
from dealer_financing.entrypoints.http.mappers.financing_mapper import FinancingMapper
from dealer_financing.entrypoints.http.mappers.market_rates_mapper import MarketRatesMapper
from dealer_financing.use_cases.calculate_financing_options import CalculateFinancingOptions
from dealer_financing.use_cases.get_market_rates import GetMarketRates


router = APIRouter(tags=["Financing"])


@router.post(
    "/financing/calculator",
    response_model=FinancingCalculatorResponseDTO,
    response_model_exclude_none=True,
    summary="Calculate loan and lease options",
    description="""
    Calculate loan and lease payment options for a vehicle purchase.

    ## Monetary Values
    - Request amounts may be JSON numbers or decimal strings
    - Response amounts are decimal strings rounded to cents (half-up)

    ## Option Matrices
    - Loans: every APR x term pair. Omitted APR compares 2.9% to 7.9%,
      omitted term compares 36 to 84 months
    - Leases: every term x residual x money factor triple. Omitted values
      compare 24/36/48 months, 50-65% residual and 0.00125-0.00200
    - `equivalent_apr` is the money factor x 2400 rule of thumb

    ## Defaults
    - Sales tax 8.25%, title 33, registration 75, documentation 299, dealer prep 0

    ## Comparison
    - Present only for `calculation_type = both`
    - Picks the lowest monthly payment of each kind (first one on ties)

    ## Example
    ```
    POST /v1/financing/calculator
    {
        "vehicle_price": 30000,
        "down_payment": 3000,
        "loan_apr": 5.9,
        "loan_term_months": 60,
        "calculation_type": "loan"
    }
    ```
    """,
    responses={
        422: {
            "model": ErrorResponse,
            "description": "Validation error",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Validation error: vehicle_price: Input should be greater than or equal to 0",
                        "code": "VALIDATION_ERROR",
                        "errors": [
                            {
                                "field": "vehicle_price",
                                "message": "Input should be greater than or equal to 0",
                                "code": "greater_than_equal",
                            }
                        ],
                    }
                }
            },
        },
        500: {"model": ErrorResponse, "description": "Unexpected calculation failure"},
    },
)
def calculate_financing_options(
    payload: FinancingCalculatorRequestDTO,
    use_case: CalculateFinancingOptions = Depends(get_calculate_financing_options_use_case),
) -> FinancingCalculatorResponseDTO:
    """Follows the parse → execute → map → return pattern."""
    # 1. Map to domain request
    request = FinancingMapper.to_domain_request(payload)

    # 2. Execute use case (validates and calculates)
    result = use_case.execute(request)

    # 3. Map to response, stamping the generation time
    return FinancingMapper.to_response(result, timestamp=datetime.now(timezone.utc))


@router.get(
    "/financing/rates",
    response_model=MarketRatesResponseDTO,
    summary="Get market financing rates",
    description="""
    Reference APR ranges by credit tier, lease money factor and residual ranges
    by brand segment, standard fee schedules and disclosure notes.
    The data is static and does not depend on the caller.
    """,
)
def get_market_rates(
    use_case: GetMarketRates = Depends(get_market_rates_use_case),
) -> MarketRatesResponseDTO:
    rates = use_case.execute()
    return MarketRatesMapper.to_response(rates, last_updated=datetime.now(timezone.utc))
