from __future__ import annotations

from fastapi import FastAPI

from dealer_financing.entrypoints.http.exception_handlers import register_exception_handlers
from dealer_financing.entrypoints.http.routes.financing import router as financing_router
from dealer_financing.entrypoints.http.routes.health import router as health_router
from dealer_financing.infra.config.settings import Settings, get_settings
from dealer_financing.infra.logging.logger import configure_logging


def build_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="""
        Dealership financing API for comparing vehicle loan and lease options.

        ## Features
        - Calculate loan amortization options across APR and term sweeps
        - Calculate lease payment options across term, residual and money factor sweeps
        - Compare the best loan against the best lease
        - Get reference market rates and fee schedules

        ## Authentication
        None. Deploy behind the dealership gateway.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        contact={
            "name": "Dealer Financing Team",
            "email": "dev@dealer-financing.example",
        },
        license_info={
            "name": "Proprietary",
        },
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(financing_router, prefix=settings.api_prefix)

    return app


app = build_app()
