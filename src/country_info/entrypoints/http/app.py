import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from starlette.concurrency import run_in_threadpool

from country_info.adapters.rest_countries_source import RestCountriesSource
from country_info.entrypoints.http.exception_handlers import register_exception_handlers
from country_info.entrypoints.http.routes.browser import router as browser_router
from country_info.entrypoints.http.routes.countries import router as countries_router
from country_info.entrypoints.http.routes.health import router as health_router
from country_info.infra.config import load_settings
from country_info.use_cases.country_browser import CountryBrowser

logger = logging.getLogger(__name__)


def build_browser() -> CountryBrowser:
    """Create the CountryBrowser from environment settings."""
    settings = load_settings()
    source = RestCountriesSource(base_url=settings.api_base_url)
    return CountryBrowser(source=source, page_size=settings.page_size)


def build_lifespan(load_on_startup: bool):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # The fetch runs in the background so requests are served (with
        # loading=true) while it is outstanding. It is never cancelled.
        task: asyncio.Task | None = None
        if load_on_startup:
            logger.info("Fetching countries in the background")
            task = asyncio.create_task(run_in_threadpool(app.state.browser.load))

        yield

        if task is not None:
            await task

    return lifespan


def build_app(browser: CountryBrowser | None = None, load_on_startup: bool = True) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        browser: View-model to serve; built from environment settings when omitted
        load_on_startup: Fetch the dataset when the app starts (disable for a
                         browser that is loaded already)
    """
    app = FastAPI(
        title="Country Info API",
        description="""
        Browse the public country dataset with search and pagination.

        ## Features
        - Search countries by official name
        - Page through results with a compact page-control plan
        - Stateful browser with query and page events

        ## Data
        The full dataset is fetched once at startup; everything else
        happens in memory.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        lifespan=build_lifespan(load_on_startup),
    )

    app.state.browser = browser if browser is not None else build_browser()

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(countries_router, prefix="/v1")
    app.include_router(browser_router, prefix="/v1")

    return app


app = build_app()
