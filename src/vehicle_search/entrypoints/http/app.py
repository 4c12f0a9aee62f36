from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from vehicle_search.entrypoints.http.exception_handlers import register_exception_handlers
from vehicle_search.entrypoints.http.routes.health import router as health_router
from vehicle_search.entrypoints.http.routes.listings import router as listings_router
from vehicle_search.infra.http.client import close_http_client


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    close_http_client()


def build_app() -> FastAPI:
    app = FastAPI(
        title="Vehicle Search API",
        description="""
        Search, filter and rank vehicle listings from the marketplace.

        ## Features
        - Search approved listings with text, category and range filters
        - Promoted listings always ranked first
        - Shareable search links (canonical query parameters in every response)
        - Featured listings and per-type counts for the home screen

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(listings_router, prefix="/v1")

    return app


app = build_app()
